"""Get current user use case."""

import logfire
from pydantic import BaseModel

from cfh.application.usecase.shared import UserSummary
from cfh.domain.error import AuthenticationError, NotFoundError
from cfh.domain.service import JWTService, UserService
from cfh.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserSummary


class GetCurrentUserUseCase:
    """Use case for getting the current authenticated user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            JWTError: If the token is invalid or expired
            AuthenticationError: If the token's user no longer exists
        """
        with logfire.span("get_current_user.execute"):
            payload = self.jwt_service.verify_token(request.token)
            try:
                user = await self.user_service.get_by_id(UserId(payload.user_id))
            except NotFoundError as e:
                raise AuthenticationError("User no longer exists") from e
            return GetCurrentUserResponse(user=UserSummary.from_user(user))
