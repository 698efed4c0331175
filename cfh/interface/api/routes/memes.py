"""Meme feed routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel, Field

from cfh.adapter.realtime import Broadcaster
from cfh.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from cfh.application.usecase.meme import (
    CreateMemeRequest,
    CreateMemeResponse,
    CreateMemeUseCase,
    GetMemeRequest,
    GetMemeResponse,
    GetMemeUseCase,
    ListMemesRequest,
    ListMemesResponse,
    ListMemesUseCase,
)
from cfh.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from cfh.config import AuthSettings
from cfh.domain.repository import UnitOfWork
from cfh.domain.service import JWTService
from cfh.domain.value import FeedSort, VotableType, VoteDirection
from cfh.interface.api.dependencies import optional_user_id, require_user_id

router = APIRouter(prefix="/api/memes", tags=["memes"], route_class=DishkaRoute)


class CreateMemeBody(BaseModel):
    """New meme."""

    image_url: str = Field(min_length=1)
    caption: Optional[str] = None


class VoteBody(BaseModel):
    """Vote direction."""

    vote: VoteDirection


@router.get("", response_model=ListMemesResponse)
async def list_memes(
    request: Request,
    list_memes_use_case: FromDishka[ListMemesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    sort: FeedSort = FeedSort.HOT,
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    author_id: Optional[int] = None,
) -> ListMemesResponse:
    """List the meme feed.

    Args:
        request: Incoming request (for the optional auth token)
        list_memes_use_case: List memes use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_settings: Auth settings (cookie name)
        sort: hot, new or top
        limit: Page size
        offset: Number of memes to skip
        author_id: Only memes by this author (sorted new)

    Returns:
        One page of memes with the caller's votes when authenticated
    """
    return await list_memes_use_case.execute(
        ListMemesRequest(
            sort=sort,
            limit=limit,
            offset=offset,
            author_id=author_id,
            viewer_id=optional_user_id(request, jwt_service, auth_settings),
        )
    )


@router.get("/{meme_id}", response_model=GetMemeResponse)
async def get_meme(
    meme_id: int,
    request: Request,
    get_meme_use_case: FromDishka[GetMemeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> GetMemeResponse:
    """Get a single meme."""
    return await get_meme_use_case.execute(
        GetMemeRequest(
            meme_id=meme_id,
            viewer_id=optional_user_id(request, jwt_service, auth_settings),
        )
    )


@router.post(
    "", response_model=CreateMemeResponse, status_code=status.HTTP_201_CREATED
)
async def create_meme(
    body: CreateMemeBody,
    request: Request,
    create_meme_use_case: FromDishka[CreateMemeUseCase],
    unit_of_work: FromDishka[UnitOfWork],
    broadcaster: FromDishka[Broadcaster],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CreateMemeResponse:
    """Post a meme and announce it on the realtime channel once committed.

    Requires authentication.
    """
    user_id = require_user_id(request, jwt_service, auth_settings)
    result = await create_meme_use_case.execute(
        CreateMemeRequest(
            author_id=user_id, image_url=body.image_url, caption=body.caption
        )
    )
    await unit_of_work.commit()
    await broadcaster.broadcast("new-meme", result.meme.model_dump(mode="json"))
    return result


@router.post("/{meme_id}/vote", response_model=CastVoteResponse)
async def vote_meme(
    meme_id: int,
    body: VoteBody,
    request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CastVoteResponse:
    """Vote on a meme. Repeating the same vote withdraws it.

    Requires authentication.
    """
    user_id = require_user_id(request, jwt_service, auth_settings)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            subject_kind=VotableType.MEME,
            subject_id=meme_id,
            user_id=user_id,
            direction=body.vote,
        )
    )


@router.get("/{meme_id}/comments", response_model=GetCommentsResponse)
async def get_meme_comments(
    meme_id: int,
    request: Request,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> GetCommentsResponse:
    """List comments on a meme, newest first."""
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            meme_id=meme_id,
            viewer_id=optional_user_id(request, jwt_service, auth_settings),
        )
    )
