"""Request helpers shared by the routes."""

from typing import Optional

from fastapi import HTTPException, Request, status

from cfh.config import AuthSettings
from cfh.domain.service import JWTService


def extract_token(request: Request, auth_settings: AuthSettings) -> Optional[str]:
    """Read the JWT from the auth cookie or an ``Authorization: Bearer`` header.

    The cookie wins when both are present.
    """
    token = request.cookies.get(auth_settings.cookie_name)
    if token:
        return token

    authorization = request.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def optional_user_id(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> Optional[int]:
    """User ID of the caller, or None for anonymous or invalid tokens."""
    return jwt_service.get_user_id_from_token(extract_token(request, auth_settings))


def require_user_id(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> int:
    """User ID of the caller.

    Raises:
        HTTPException: 401 if no valid token was sent
    """
    user_id = optional_user_id(request, jwt_service, auth_settings)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id
