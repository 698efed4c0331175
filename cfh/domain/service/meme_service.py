"""Meme domain service."""

from typing import Optional

import logfire

from cfh.domain.error import NotFoundError
from cfh.domain.model import Meme
from cfh.domain.repository import MemeRepository
from cfh.domain.value import MemeId, UserId

from .base import Service


class MemeService(Service):
    """Domain service for meme operations."""

    def __init__(self, meme_repository: MemeRepository) -> None:
        """Initialize meme service.

        Args:
            meme_repository: Meme repository
        """
        self.meme_repository = meme_repository

    async def get_by_id(self, meme_id: MemeId) -> Meme:
        """Get meme by ID.

        Raises:
            NotFoundError: If meme not found
        """
        with logfire.span("meme_service.get_by_id", meme_id=meme_id):
            meme = await self.meme_repository.find_by_id(meme_id)
            if not meme:
                logfire.warn("Meme not found", meme_id=meme_id)
                raise NotFoundError("Meme", str(meme_id))
            return meme

    async def list_all(self) -> list[Meme]:
        """List every meme in insertion order."""
        with logfire.span("meme_service.list_all"):
            memes = await self.meme_repository.find_all()
            logfire.info("Memes loaded", count=len(memes))
            return memes

    async def list_by_author(self, author_id: UserId) -> list[Meme]:
        """List an author's memes in insertion order."""
        with logfire.span("meme_service.list_by_author", author_id=author_id):
            return await self.meme_repository.find_by_author(author_id)

    async def create_meme(
        self, author_id: UserId, image_url: str, caption: Optional[str] = None
    ) -> Meme:
        """Create a meme with zeroed counters.

        Args:
            author_id: Author's user ID
            image_url: Image URL
            caption: Optional caption

        Returns:
            Created meme
        """
        with logfire.span("meme_service.create_meme", author_id=author_id):
            meme = await self.meme_repository.create(
                author_id=author_id, image_url=image_url, caption=caption
            )
            logfire.info("Meme created", meme_id=meme.id, author_id=author_id)
            return meme
