"""Register use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cfh.application.usecase.shared import UserSummary
from cfh.domain.error import ValidationError
from cfh.domain.service import AuthService, JWTService
from cfh.domain.value import EmailAddress, Username


class RegisterRequest(BaseModel):
    """Register request.

    Fields are plain strings so that format problems surface as domain
    validation errors with readable messages.
    """

    email: str
    username: str
    password: str
    confirm_password: str


class RegisterResponse(BaseModel):
    """Register response."""

    user: UserSummary
    token: str


class RegisterUseCase:
    """Use case for creating a password account."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute register flow.

        Args:
            request: Register request

        Returns:
            The new account and a session token

        Raises:
            ValidationError: If a field is malformed or passwords differ
            BusinessRuleViolationError: If email or username is taken
        """
        with logfire.span("register.execute", username=request.username):
            try:
                email = EmailAddress(request.email)
            except PydanticValidationError as e:
                raise ValidationError("Please enter a valid email address") from e
            try:
                username = Username(request.username)
            except PydanticValidationError as e:
                raise ValidationError(
                    "Username must be 3-30 characters of letters, digits, "
                    "'_', '.' or '-'"
                ) from e

            if request.password != request.confirm_password:
                raise ValidationError("Passwords do not match")

            user = await self.auth_service.register(email, username, request.password)
            token = self.jwt_service.create_token(user)

            logfire.info("User registered", user_id=user.id)
            return RegisterResponse(user=UserSummary.from_user(user), token=token)
