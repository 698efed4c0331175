"""Unit tests for the in-memory store and repositories."""

import pytest

from cfh.domain.model import Vote
from cfh.domain.value import (
    CounterDelta,
    ResourceId,
    UserId,
    VotableType,
    VoteDirection,
    VoteKey,
)
from cfh.persistence.repository.inmemory import (
    InMemoryMemeRepository,
    InMemoryResourceRepository,
    InMemoryStore,
    InMemoryVoteRepository,
)
from cfh.persistence.seed import STARTER_RESOURCES


class TestInMemoryStore:
    """Tests for store seeding and identity assignment."""

    @pytest.mark.asyncio
    async def test_seeded_with_starter_resources(self):
        repo = InMemoryResourceRepository(InMemoryStore())

        resources = await repo.find_all()

        assert [r.title for r in resources] == [r["title"] for r in STARTER_RESOURCES]
        assert [r.id for r in resources] == [1, 2, 3]
        assert all(r.votes == 0 for r in resources)

    @pytest.mark.asyncio
    async def test_ids_continue_after_seed(self):
        repo = InMemoryResourceRepository(InMemoryStore())

        created = await repo.create(title="Late Fee Letter", category="communication")

        assert created.id == ResourceId(4)

    @pytest.mark.asyncio
    async def test_unseeded_store_is_empty(self):
        repo = InMemoryResourceRepository(InMemoryStore(seed=False))

        assert await repo.find_all() == []

    def test_ids_are_per_kind(self):
        store = InMemoryStore(seed=False)

        assert [store.next_id("meme"), store.next_id("meme")] == [1, 2]
        assert store.next_id("comment") == 1

    @pytest.mark.asyncio
    async def test_repositories_share_one_store(self):
        store = InMemoryStore()
        writer = InMemoryMemeRepository(store)
        reader = InMemoryMemeRepository(store)

        meme = await writer.create(UserId(1), "https://img.example.com/a.png")

        assert await reader.find_by_id(meme.id) == meme


class TestInMemoryVoteRepository:
    """Tests for vote record storage."""

    @pytest.mark.asyncio
    async def test_save_replaces_record_for_same_key(self):
        repo = InMemoryVoteRepository(InMemoryStore(seed=False))
        vote = Vote(
            subject_kind=VotableType.MEME,
            subject_id=1,
            user_id=UserId(1),
            direction=VoteDirection.UP,
        )

        await repo.save(vote)
        await repo.save(vote.model_copy(update={"direction": VoteDirection.DOWN}))

        [stored] = await repo.find_by_subject(VotableType.MEME, 1)
        assert stored.direction == VoteDirection.DOWN

    @pytest.mark.asyncio
    async def test_delete_reports_whether_removed(self):
        repo = InMemoryVoteRepository(InMemoryStore(seed=False))
        key = VoteKey(VotableType.RESOURCE, 1, UserId(1))
        await repo.save(
            Vote(
                subject_kind=key.subject_kind,
                subject_id=key.subject_id,
                user_id=key.user_id,
                direction=VoteDirection.UP,
            )
        )

        assert await repo.delete(key) is True
        assert await repo.delete(key) is False


class TestApplyVoteDelta:
    """Tests for counter updates."""

    @pytest.mark.asyncio
    async def test_meme_counters(self):
        repo = InMemoryMemeRepository(InMemoryStore(seed=False))
        meme = await repo.create(UserId(1), "https://img.example.com/a.png")

        await repo.apply_vote_delta(meme.id, CounterDelta(upvotes=2, downvotes=1))
        await repo.apply_vote_delta(meme.id, CounterDelta(upvotes=-1))

        updated = await repo.find_by_id(meme.id)
        assert (updated.upvotes, updated.downvotes) == (1, 1)

    @pytest.mark.asyncio
    async def test_resource_votes_may_go_negative(self):
        repo = InMemoryResourceRepository(InMemoryStore())

        await repo.apply_vote_delta(2, CounterDelta(votes=-2))

        assert (await repo.find_by_id(2)).votes == -2
