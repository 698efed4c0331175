"""Create meme use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from cfh.domain.service import MemeService, UserService, VoteLedger
from cfh.domain.value import UserId

from .common import MemeItem, build_meme_items


class CreateMemeRequest(BaseModel):
    """Create meme request."""

    author_id: int  # From authenticated user
    image_url: str = Field(min_length=1)
    caption: Optional[str] = Field(default=None, max_length=2000)


class CreateMemeResponse(BaseModel):
    """Create meme response."""

    meme: MemeItem


class CreateMemeUseCase:
    """Use case for posting a meme."""

    def __init__(
        self,
        meme_service: MemeService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> None:
        """Initialize create meme use case.

        Args:
            meme_service: Meme domain service
            user_service: User domain service
            vote_ledger: Vote ledger
        """
        self.meme_service = meme_service
        self.user_service = user_service
        self.vote_ledger = vote_ledger

    async def execute(self, request: CreateMemeRequest) -> CreateMemeResponse:
        """Execute create meme flow.

        Args:
            request: Create meme request

        Returns:
            The created meme with its author summary

        Raises:
            NotFoundError: If the author does not exist
        """
        with logfire.span("create_meme.execute", author_id=request.author_id):
            author_id = UserId(request.author_id)
            await self.user_service.get_by_id(author_id)

            meme = await self.meme_service.create_meme(
                author_id=author_id,
                image_url=request.image_url,
                caption=request.caption,
            )
            [item] = await build_meme_items([meme], self.user_service, self.vote_ledger)
            return CreateMemeResponse(meme=item)
