"""Newsletter routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from cfh.application.usecase.newsletter import (
    SubscribeNewsletterRequest,
    SubscribeNewsletterResponse,
    SubscribeNewsletterUseCase,
)

router = APIRouter(
    prefix="/api/newsletter", tags=["newsletter"], route_class=DishkaRoute
)


@router.post("/subscribe", response_model=SubscribeNewsletterResponse)
async def subscribe(
    body: SubscribeNewsletterRequest,
    subscribe_use_case: FromDishka[SubscribeNewsletterUseCase],
) -> SubscribeNewsletterResponse:
    """Add an address to the newsletter list."""
    return await subscribe_use_case.execute(body)
