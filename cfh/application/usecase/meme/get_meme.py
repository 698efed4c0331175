"""Get meme use case."""

from typing import Optional

from pydantic import BaseModel

from cfh.domain.service import MemeService, UserService, VoteLedger
from cfh.domain.value import MemeId

from .common import MemeItem, build_meme_items


class GetMemeRequest(BaseModel):
    """Get meme request."""

    meme_id: int
    viewer_id: Optional[int] = None


class GetMemeResponse(BaseModel):
    """Get meme response."""

    meme: MemeItem


class GetMemeUseCase:
    """Use case for fetching a single meme."""

    def __init__(
        self,
        meme_service: MemeService,
        user_service: UserService,
        vote_ledger: VoteLedger,
    ) -> None:
        self.meme_service = meme_service
        self.user_service = user_service
        self.vote_ledger = vote_ledger

    async def execute(self, request: GetMemeRequest) -> GetMemeResponse:
        """Execute get meme flow.

        Raises:
            NotFoundError: If the meme does not exist
        """
        meme = await self.meme_service.get_by_id(MemeId(request.meme_id))
        [item] = await build_meme_items(
            [meme], self.user_service, self.vote_ledger, request.viewer_id
        )
        return GetMemeResponse(meme=item)
