"""Login use case."""

import logfire
from pydantic import BaseModel

from cfh.application.usecase.shared import UserSummary
from cfh.domain.service import AuthService, JWTService


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    user: UserSummary
    token: str


class LoginUseCase:
    """Use case for username and password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the credentials do not check out
        """
        with logfire.span("login.execute", username=request.username):
            user = await self.auth_service.authenticate(
                request.username, request.password
            )
            token = self.jwt_service.create_token(user)
            return LoginResponse(user=UserSummary.from_user(user), token=token)
