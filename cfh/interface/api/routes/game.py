"""Game session routes."""

from datetime import datetime
from typing import Any, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel, Field

from cfh.application.usecase.game import (
    CreateGameSessionRequest,
    CreateGameSessionResponse,
    CreateGameSessionUseCase,
    ListGameSessionsRequest,
    ListGameSessionsResponse,
    ListGameSessionsUseCase,
    UpdateGameSessionRequest,
    UpdateGameSessionResponse,
    UpdateGameSessionUseCase,
)
from cfh.config import AuthSettings
from cfh.domain.service import JWTService
from cfh.interface.api.dependencies import require_user_id

router = APIRouter(prefix="/api/game", tags=["game"], route_class=DishkaRoute)


class CreateGameSessionBody(BaseModel):
    """New game session."""

    score: Optional[int] = None
    sanity_left: Optional[int] = None
    choices: list[Any] = Field(default_factory=list)


class UpdateGameSessionBody(BaseModel):
    """Game session progress; omitted fields stay unchanged."""

    score: Optional[int] = None
    sanity_left: Optional[int] = None
    choices: Optional[list[Any]] = None
    ended_at: Optional[datetime] = None


@router.get("/sessions/{user_id}", response_model=ListGameSessionsResponse)
async def list_game_sessions(
    user_id: int,
    request: Request,
    list_game_sessions_use_case: FromDishka[ListGameSessionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    limit: int = Query(default=10, ge=1, le=100),
) -> ListGameSessionsResponse:
    """List a player's recent sessions. Players can only see their own."""
    requester_id = require_user_id(request, jwt_service, auth_settings)
    return await list_game_sessions_use_case.execute(
        ListGameSessionsRequest(user_id=user_id, requester_id=requester_id, limit=limit)
    )


@router.post(
    "/sessions",
    response_model=CreateGameSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_game_session(
    body: CreateGameSessionBody,
    request: Request,
    create_game_session_use_case: FromDishka[CreateGameSessionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CreateGameSessionResponse:
    """Record a new play-through for the authenticated player."""
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await create_game_session_use_case.execute(
        CreateGameSessionRequest(user_id=user_id, **body.model_dump())
    )


@router.patch("/sessions/{session_id}", response_model=UpdateGameSessionResponse)
async def update_game_session(
    session_id: int,
    body: UpdateGameSessionBody,
    request: Request,
    update_game_session_use_case: FromDishka[UpdateGameSessionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> UpdateGameSessionResponse:
    """Save progress on, or finish, one of the caller's sessions."""
    requester_id = require_user_id(request, jwt_service, auth_settings)
    return await update_game_session_use_case.execute(
        UpdateGameSessionRequest(
            session_id=session_id, requester_id=requester_id, **body.model_dump()
        )
    )
