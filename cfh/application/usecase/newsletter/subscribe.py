"""Subscribe newsletter use case."""

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cfh.domain.error import ValidationError
from cfh.domain.service import NewsletterService
from cfh.domain.value import EmailAddress


class SubscribeNewsletterRequest(BaseModel):
    """Subscribe newsletter request."""

    email: str


class SubscribeNewsletterResponse(BaseModel):
    """Subscribe newsletter response."""

    subscribed: bool
    message: str


class SubscribeNewsletterUseCase:
    """Use case for joining the newsletter list."""

    def __init__(self, newsletter_service: NewsletterService) -> None:
        self.newsletter_service = newsletter_service

    async def execute(
        self, request: SubscribeNewsletterRequest
    ) -> SubscribeNewsletterResponse:
        """Execute subscribe flow.

        Raises:
            ValidationError: If the address is malformed
        """
        try:
            email = EmailAddress(request.email)
        except PydanticValidationError as e:
            raise ValidationError("Please enter a valid email address") from e

        if await self.newsletter_service.subscribe(email):
            return SubscribeNewsletterResponse(
                subscribed=True, message="Successfully subscribed to the newsletter"
            )
        return SubscribeNewsletterResponse(
            subscribed=False, message="You are already subscribed"
        )
