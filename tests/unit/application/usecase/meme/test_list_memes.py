"""Unit tests for ListMemesUseCase."""

import pytest

from cfh.application.usecase.meme import (
    CreateMemeRequest,
    CreateMemeUseCase,
    ListMemesRequest,
    ListMemesUseCase,
)
from cfh.domain.error import NotFoundError
from cfh.domain.repository import UserRepository
from cfh.domain.service import VoteService
from cfh.domain.value import FeedSort, VotableType, VoteDirection
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_feed(env, count: int):
    users = await env.get(UserRepository)
    alice = await users.create(email="alice@example.com", username="alice")
    bob = await users.create(email="bob@example.com", username="bob")
    create = await env.get(CreateMemeUseCase)
    memes = []
    for i in range(count):
        author = alice if i % 2 == 0 else bob
        response = await create.execute(
            CreateMemeRequest(
                author_id=author.id,
                image_url=f"https://img.example.com/{i}.png",
                caption=f"Client request #{i}",
            )
        )
        memes.append(response.meme)
    return alice, bob, memes


class TestListMemesUseCase:
    """Tests for feed listing."""

    @pytest.mark.asyncio
    async def test_top_feed_with_viewer_votes(self, unit_env):
        # Arrange
        alice, bob, memes = await seed_feed(unit_env, 3)
        vote_service = await unit_env.get(VoteService)
        await vote_service.cast_vote(VotableType.MEME, memes[2].id, alice.id, VoteDirection.UP)
        await vote_service.cast_vote(VotableType.MEME, memes[2].id, bob.id, VoteDirection.UP)
        await vote_service.cast_vote(VotableType.MEME, memes[0].id, alice.id, VoteDirection.DOWN)
        use_case = await unit_env.get(ListMemesUseCase)

        # Act
        response = await use_case.execute(
            ListMemesRequest(sort=FeedSort.TOP, viewer_id=alice.id)
        )

        # Assert
        assert [m.id for m in response.memes] == [memes[2].id, memes[1].id, memes[0].id]
        votes = {m.id: m.user_vote for m in response.memes}
        assert votes == {
            memes[2].id: VoteDirection.UP,
            memes[1].id: None,
            memes[0].id: VoteDirection.DOWN,
        }
        assert response.memes[0].author.username == "alice"
        assert response.memes[0].author.title == "Designer"

    @pytest.mark.asyncio
    async def test_anonymous_viewer_has_no_votes(self, unit_env):
        await seed_feed(unit_env, 2)
        use_case = await unit_env.get(ListMemesUseCase)

        response = await use_case.execute(ListMemesRequest())

        assert all(m.user_vote is None for m in response.memes)

    @pytest.mark.asyncio
    async def test_default_and_clamped_limit(self, unit_env):
        await seed_feed(unit_env, 12)
        use_case = await unit_env.get(ListMemesUseCase)

        default_page = await use_case.execute(ListMemesRequest())
        big_page = await use_case.execute(ListMemesRequest(limit=1000))

        assert default_page.limit == 10
        assert len(default_page.memes) == 10
        assert big_page.limit == 100
        assert len(big_page.memes) == 12

    @pytest.mark.asyncio
    async def test_offset_past_end_is_empty(self, unit_env):
        await seed_feed(unit_env, 3)
        use_case = await unit_env.get(ListMemesUseCase)

        response = await use_case.execute(
            ListMemesRequest(sort=FeedSort.NEW, offset=3, limit=10)
        )

        assert response.memes == []

    @pytest.mark.asyncio
    async def test_author_filter_sorts_newest_first(self, unit_env):
        alice, _, memes = await seed_feed(unit_env, 5)
        use_case = await unit_env.get(ListMemesUseCase)

        response = await use_case.execute(
            ListMemesRequest(sort=FeedSort.TOP, author_id=alice.id)
        )

        assert response.sort == FeedSort.NEW
        assert {m.author_id for m in response.memes} == {alice.id}
        assert len(response.memes) == 3


class TestCreateMemeUseCase:
    """Tests for meme creation."""

    @pytest.mark.asyncio
    async def test_unknown_author_rejected(self, unit_env):
        use_case = await unit_env.get(CreateMemeUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateMemeRequest(author_id=99, image_url="https://img.example.com/x.png")
            )
