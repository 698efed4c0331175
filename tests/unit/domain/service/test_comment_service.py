"""Unit tests for CommentService."""

import pytest

from cfh.domain.error import NotFoundError, ValidationError
from cfh.domain.repository import MemeRepository
from cfh.domain.service import CommentService
from cfh.domain.value import CommentId, MemeId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_create_and_list_newest_first(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        meme_repo = await unit_env.get(MemeRepository)
        meme = await meme_repo.create(UserId(1), "https://img.example.com/a.png")

        # Act
        first = await comment_service.create_comment(meme.id, UserId(1), "First")
        second = await comment_service.create_comment(
            meme.id, UserId(2), "Reply", parent_id=first.id
        )

        # Assert
        comments = await comment_service.list_for_meme(meme.id)
        assert [c.id for c in comments] == [second.id, first.id]
        assert second.parent_id == first.id
        assert second.upvotes == 0

    @pytest.mark.asyncio
    async def test_missing_meme_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Meme not found"):
            await comment_service.create_comment(MemeId(404), UserId(1), "Hello?")

    @pytest.mark.asyncio
    async def test_missing_parent_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        meme_repo = await unit_env.get(MemeRepository)
        meme = await meme_repo.create(UserId(1), "https://img.example.com/a.png")

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                meme.id, UserId(1), "Orphan", parent_id=CommentId(77)
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_meme_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        meme_repo = await unit_env.get(MemeRepository)
        meme_a = await meme_repo.create(UserId(1), "https://img.example.com/a.png")
        meme_b = await meme_repo.create(UserId(1), "https://img.example.com/b.png")
        parent = await comment_service.create_comment(meme_a.id, UserId(1), "On A")

        with pytest.raises(ValidationError, match="different meme"):
            await comment_service.create_comment(
                meme_b.id, UserId(1), "On B", parent_id=parent.id
            )
