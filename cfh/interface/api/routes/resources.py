"""Resource library routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from cfh.application.usecase.resource import (
    CreateResourceRequest,
    CreateResourceResponse,
    CreateResourceUseCase,
    GetResourceRequest,
    GetResourceResponse,
    GetResourceUseCase,
    ListResourcesRequest,
    ListResourcesResponse,
    ListResourcesUseCase,
)
from cfh.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from cfh.config import AuthSettings
from cfh.domain.service import JWTService
from cfh.domain.value import VotableType, VoteDirection
from cfh.interface.api.dependencies import optional_user_id, require_user_id

router = APIRouter(
    prefix="/api/resources", tags=["resources"], route_class=DishkaRoute
)


class CreateResourceBody(BaseModel):
    """New library resource."""

    title: str = Field(min_length=1, max_length=300)
    category: Optional[str] = None
    markdown: Optional[str] = None
    download_url: Optional[str] = None


class VoteBody(BaseModel):
    """Vote direction."""

    vote: VoteDirection


@router.get("", response_model=ListResourcesResponse)
async def list_resources(
    request: Request,
    list_resources_use_case: FromDishka[ListResourcesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    category: Optional[str] = None,
) -> ListResourcesResponse:
    """List library resources, most voted first."""
    return await list_resources_use_case.execute(
        ListResourcesRequest(
            category=category,
            viewer_id=optional_user_id(request, jwt_service, auth_settings),
        )
    )


@router.get("/{resource_id}", response_model=GetResourceResponse)
async def get_resource(
    resource_id: int, get_resource_use_case: FromDishka[GetResourceUseCase]
) -> GetResourceResponse:
    """Get one resource."""
    return await get_resource_use_case.execute(
        GetResourceRequest(resource_id=resource_id)
    )


@router.post(
    "", response_model=CreateResourceResponse, status_code=status.HTTP_201_CREATED
)
async def create_resource(
    body: CreateResourceBody,
    request: Request,
    create_resource_use_case: FromDishka[CreateResourceUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CreateResourceResponse:
    """Add a resource to the library.

    Requires authentication.
    """
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await create_resource_use_case.execute(
        CreateResourceRequest(created_by=user_id, **body.model_dump())
    )


@router.post("/{resource_id}/vote", response_model=CastVoteResponse)
async def vote_resource(
    resource_id: int,
    body: VoteBody,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CastVoteResponse:
    """Vote on a resource. Repeating the same vote withdraws it.

    Requires authentication.
    """
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            subject_kind=VotableType.RESOURCE,
            subject_id=resource_id,
            user_id=user_id,
            direction=body.vote,
        )
    )
