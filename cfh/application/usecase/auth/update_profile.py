"""Update profile use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from cfh.application.usecase.shared import UserSummary
from cfh.domain.service import UserService
from cfh.domain.value import UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Fields left as None are not changed.
    """

    user_id: int  # From authenticated user
    display_name: Optional[str] = Field(default=None, max_length=255)
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar: Optional[str] = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    user: UserSummary


class UpdateProfileUseCase:
    """Use case for editing one's own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("update_profile.execute", user_id=request.user_id):
            user = await self.user_service.get_by_id(UserId(request.user_id))

            changes = request.model_dump(
                include={"display_name", "bio", "avatar"}, exclude_none=True
            )
            saved = await self.user_service.save(user.model_copy(update=changes))
            return UpdateProfileResponse(user=UserSummary.from_user(saved))
