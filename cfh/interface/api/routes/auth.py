"""Account and authentication routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel, Field

from cfh.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from cfh.config import AuthSettings, Settings
from cfh.domain.service import JWTService
from cfh.interface.api.dependencies import extract_token, require_user_id

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterBody(BaseModel):
    """Registration form."""

    email: str
    username: str
    password: str
    confirm_password: str = Field(alias="confirmPassword")

    model_config = {"populate_by_name": True}


class UpdateProfileBody(BaseModel):
    """Editable profile fields."""

    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar: Optional[str] = None


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterBody,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> RegisterResponse:
    """Create a password account and start a session.

    Args:
        body: Registration form
        response: FastAPI response object (receives the auth cookie)
        register_use_case: Register use case from DI
        settings: Application settings from DI

    Returns:
        The new account and its token
    """
    result = await register_use_case.execute(
        RegisterRequest(
            email=body.email,
            username=body.username,
            password=body.password,
            confirm_password=body.confirm_password,
        )
    )
    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in with username and password.

    Returns:
        The account and its token (also set as an HTTP-only cookie)
    """
    result = await login_use_case.execute(body)
    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/user", response_model=GetCurrentUserResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> GetCurrentUserResponse:
    """Get the authenticated user.

    Raises:
        HTTPException: 401 if no token was sent
    """
    token = extract_token(request, auth_settings)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return await get_current_user_use_case.execute(GetCurrentUserRequest(token=token))


@router.patch("/profile", response_model=UpdateProfileResponse)
async def update_profile(
    body: UpdateProfileBody,
    request: Request,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> UpdateProfileResponse:
    """Update display name, bio or avatar of the authenticated user."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(user_id=user_id, **body.model_dump())
    )
