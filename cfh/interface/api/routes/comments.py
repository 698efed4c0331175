"""Comment routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from cfh.adapter.realtime import Broadcaster
from cfh.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from cfh.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from cfh.config import AuthSettings
from cfh.domain.repository import UnitOfWork
from cfh.domain.service import JWTService
from cfh.domain.value import VotableType, VoteDirection
from cfh.interface.api.dependencies import require_user_id

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentBody(BaseModel):
    """New comment."""

    meme_id: int
    body: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[int] = None


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    body: CreateCommentBody,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    unit_of_work: FromDishka[UnitOfWork],
    broadcaster: FromDishka[Broadcaster],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CreateCommentResponse:
    """Comment on a meme and announce it on the realtime channel once committed.

    Requires authentication.
    """
    user_id = require_user_id(request, jwt_service, auth_settings)
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            meme_id=body.meme_id,
            author_id=user_id,
            body=body.body,
            parent_id=body.parent_id,
        )
    )
    await unit_of_work.commit()
    await broadcaster.broadcast(
        "new-comment", result.comment.model_dump(mode="json")
    )
    return result


@router.post("/{comment_id}/vote", response_model=CastVoteResponse)
async def vote_comment(
    comment_id: int,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CastVoteResponse:
    """Upvote a comment, or withdraw the upvote if already given.

    Requires authentication.
    """
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            subject_kind=VotableType.COMMENT,
            subject_id=comment_id,
            user_id=user_id,
            direction=VoteDirection.UP,
        )
    )
