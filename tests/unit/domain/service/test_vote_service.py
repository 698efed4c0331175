"""Unit tests for VoteService."""

import asyncio
import random
from typing import Optional

import pytest

from cfh.domain.error import InvalidDirectionError, NotFoundError
from cfh.domain.model import Vote
from cfh.domain.repository import (
    CommentRepository,
    MemeRepository,
    ResourceRepository,
    UserRepository,
    VoteRepository,
)
from cfh.domain.service import (
    ScoreAggregator,
    SubjectLockRegistry,
    UserService,
    VoteLedger,
    VoteService,
    compute_delta,
)
from cfh.domain.value import (
    UserId,
    VotableType,
    VoteDirection,
    VoteKey,
    VoteTransition,
)
from cfh.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryMemeRepository,
    InMemoryResourceRepository,
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

UP = VoteDirection.UP
DOWN = VoteDirection.DOWN


async def create_users(env, count: int) -> list[UserId]:
    user_repo = await env.get(UserRepository)
    users = []
    for i in range(count):
        user = await user_repo.create(
            email=f"user{i}@example.com", username=f"user_{i}"
        )
        users.append(user.id)
    return users


async def create_meme(env, author_id: UserId):
    meme_repo = await env.get(MemeRepository)
    return await meme_repo.create(author_id, "https://img.example.com/meme.png")


class TestMemeVoting:
    """Tests for votes on memes."""

    @pytest.mark.asyncio
    async def test_meme_vote_sequence(self, unit_env):
        """Up, repeat up, down, then another user's up."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        u1, u2 = await create_users(unit_env, 2)
        meme = await create_meme(unit_env, u1)

        def counters(outcome):
            return (outcome.subject.upvotes, outcome.subject.downvotes)

        # Act & Assert
        outcome = await vote_service.cast_vote(VotableType.MEME, meme.id, u1, UP)
        assert counters(outcome) == (1, 0)

        outcome = await vote_service.cast_vote(VotableType.MEME, meme.id, u1, UP)
        assert counters(outcome) == (0, 0)
        assert str(outcome.transition) == "up->none"

        outcome = await vote_service.cast_vote(VotableType.MEME, meme.id, u1, DOWN)
        assert counters(outcome) == (0, 1)

        outcome = await vote_service.cast_vote(VotableType.MEME, meme.id, u2, UP)
        assert counters(outcome) == (1, 1)

    @pytest.mark.asyncio
    async def test_toggle_nets_to_zero(self, unit_env):
        """Voting up twice should leave counters and ledger untouched."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        (u1,) = await create_users(unit_env, 1)
        meme = await create_meme(unit_env, u1)

        # Act
        await vote_service.cast_vote(VotableType.MEME, meme.id, u1, UP)
        outcome = await vote_service.cast_vote(VotableType.MEME, meme.id, u1, UP)

        # Assert
        assert (outcome.subject.upvotes, outcome.subject.downvotes) == (0, 0)
        assert await vote_repo.find(VoteKey(VotableType.MEME, meme.id, u1)) is None

    @pytest.mark.asyncio
    async def test_switching_equals_direct_vote(self, unit_env):
        """Up then down should end where a single down ends."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        u1, u2 = await create_users(unit_env, 2)
        switched = await create_meme(unit_env, u1)
        direct = await create_meme(unit_env, u2)

        # Act
        await vote_service.cast_vote(VotableType.MEME, switched.id, u1, UP)
        a = await vote_service.cast_vote(VotableType.MEME, switched.id, u1, DOWN)
        b = await vote_service.cast_vote(VotableType.MEME, direct.id, u1, DOWN)

        # Assert
        assert (a.subject.upvotes, a.subject.downvotes) == (
            b.subject.upvotes,
            b.subject.downvotes,
        )


class TestResourceVoting:
    """Tests for votes on resources."""

    @pytest.mark.asyncio
    async def test_resource_vote_sequence(self, unit_env):
        """Up, switch to down, then toggle the down off."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        (u1,) = await create_users(unit_env, 1)

        # Act & Assert (resource 1 is a seeded starter resource)
        outcome = await vote_service.cast_vote(VotableType.RESOURCE, 1, u1, UP)
        assert outcome.subject.votes == 1

        outcome = await vote_service.cast_vote(VotableType.RESOURCE, 1, u1, DOWN)
        assert outcome.subject.votes == -1

        outcome = await vote_service.cast_vote(VotableType.RESOURCE, 1, u1, DOWN)
        assert outcome.subject.votes == 0


class TestCommentVoting:
    """Tests for votes on comments."""

    @pytest.mark.asyncio
    async def test_comment_upvote_toggles(self, unit_env):
        """Upvoting a comment twice should return to zero."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        (u1,) = await create_users(unit_env, 1)
        meme = await create_meme(unit_env, u1)
        comment = await comment_repo.create(meme.id, u1, "Can you make the logo bigger?")

        # Act
        first = await vote_service.cast_vote(VotableType.COMMENT, comment.id, u1, UP)
        second = await vote_service.cast_vote(VotableType.COMMENT, comment.id, u1, UP)

        # Assert
        assert first.subject.upvotes == 1
        assert second.subject.upvotes == 0

    @pytest.mark.asyncio
    async def test_comment_downvote_rejected(self, unit_env):
        """Downvoting a comment should fail without side effects."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        (u1,) = await create_users(unit_env, 1)
        meme = await create_meme(unit_env, u1)
        comment = await comment_repo.create(meme.id, u1, "Exposure is payment")

        # Act & Assert
        with pytest.raises(InvalidDirectionError):
            await vote_service.cast_vote(VotableType.COMMENT, comment.id, u1, DOWN)

        assert (await comment_repo.find_by_id(comment.id)).upvotes == 0
        assert await vote_repo.find(VoteKey(VotableType.COMMENT, comment.id, u1)) is None


class TestMissingEntities:
    """Tests for votes on things that do not exist."""

    @pytest.mark.asyncio
    async def test_missing_subject_leaves_ledger_untouched(self, unit_env):
        """Voting on a non-existent meme should fail before recording."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        (u1,) = await create_users(unit_env, 1)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Meme not found"):
            await vote_service.cast_vote(VotableType.MEME, 999, u1, UP)

        assert await vote_repo.find(VoteKey(VotableType.MEME, 999, u1)) is None

    @pytest.mark.asyncio
    async def test_missing_user_rejected(self, unit_env):
        """Votes from unknown users should fail."""
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await vote_service.cast_vote(VotableType.RESOURCE, 1, UserId(42), UP)


class TestCounterInvariant:
    """Counters must always match the surviving ledger records."""

    @pytest.mark.asyncio
    async def test_counters_match_ledger_after_random_votes(self, unit_env):
        """Replay random votes and compare counters with the ledger."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        meme_repo = await unit_env.get(MemeRepository)
        resource_repo = await unit_env.get(ResourceRepository)
        users = await create_users(unit_env, 4)
        memes = [await create_meme(unit_env, users[0]) for _ in range(3)]
        rng = random.Random(1337)

        subjects = [(VotableType.MEME, m.id) for m in memes] + [
            (VotableType.RESOURCE, r) for r in (1, 2, 3)
        ]

        # Act
        for _ in range(200):
            kind, subject_id = rng.choice(subjects)
            await vote_service.cast_vote(
                kind, subject_id, rng.choice(users), rng.choice([UP, DOWN])
            )

        # Assert
        for meme in memes:
            votes = await vote_repo.find_by_subject(VotableType.MEME, meme.id)
            stored = await meme_repo.find_by_id(meme.id)
            assert stored.upvotes == sum(1 for v in votes if v.direction == UP)
            assert stored.downvotes == sum(1 for v in votes if v.direction == DOWN)

        for resource_id in (1, 2, 3):
            votes = await vote_repo.find_by_subject(VotableType.RESOURCE, resource_id)
            expected = sum(
                compute_delta(
                    VotableType.RESOURCE, VoteTransition(destination=v.direction)
                ).votes
                for v in votes
            )
            assert (await resource_repo.find_by_id(resource_id)).votes == expected


class YieldingVoteRepository(InMemoryVoteRepository):
    """Vote repository that gives up control on every lookup, like a real DB."""

    async def find(self, key: VoteKey) -> Optional[Vote]:
        await asyncio.sleep(0)
        return await super().find(key)


def build_vote_service(store: InMemoryStore, registry: SubjectLockRegistry):
    return VoteService(
        vote_ledger=VoteLedger(YieldingVoteRepository(store)),
        score_aggregator=ScoreAggregator(
            meme_repository=InMemoryMemeRepository(store),
            comment_repository=InMemoryCommentRepository(store),
            resource_repository=InMemoryResourceRepository(store),
        ),
        user_service=UserService(InMemoryUserRepository(store)),
        lock_registry=registry,
    )


class TestSubjectLocking:
    """Tests for serialization of concurrent votes on one subject."""

    @pytest.mark.asyncio
    async def test_concurrent_votes_match_ledger(self):
        """Interleaved votes and toggles on one meme should agree with the ledger."""
        # Arrange
        store = InMemoryStore()
        registry = SubjectLockRegistry()
        vote_service = build_vote_service(store, registry)
        user_repo = InMemoryUserRepository(store)
        users = [
            (await user_repo.create(email=f"c{i}@example.com", username=f"c_{i}")).id
            for i in range(10)
        ]
        meme = await InMemoryMemeRepository(store).create(
            users[0], "https://img.example.com/busy.png"
        )
        togglers, voters = users[:5], users[5:]

        # Act
        await asyncio.gather(
            *(
                vote_service.cast_vote(VotableType.MEME, meme.id, user_id, UP)
                for user_id in togglers + togglers + voters
            )
        )

        # Assert
        votes = await InMemoryVoteRepository(store).find_by_subject(
            VotableType.MEME, meme.id
        )
        stored = await InMemoryMemeRepository(store).find_by_id(meme.id)
        assert {v.user_id for v in votes} == set(voters)
        assert stored.upvotes == len(votes) == 5
        assert stored.downvotes == 0

    @pytest.mark.asyncio
    async def test_concurrent_toggles_by_one_user(self):
        """Three simultaneous upvotes from one user should leave one vote."""
        # Arrange
        store = InMemoryStore()
        vote_service = build_vote_service(store, SubjectLockRegistry())
        user = await InMemoryUserRepository(store).create(
            email="solo@example.com", username="solo"
        )

        # Act
        await asyncio.gather(
            *(
                vote_service.cast_vote(VotableType.RESOURCE, 1, user.id, UP)
                for _ in range(3)
            )
        )

        # Assert
        votes = await InMemoryVoteRepository(store).find_by_subject(
            VotableType.RESOURCE, 1
        )
        assert len(votes) == 1
        assert (await InMemoryResourceRepository(store).find_by_id(1)).votes == 1

    @pytest.mark.asyncio
    async def test_locks_released_after_votes(self, unit_env):
        """No lock should outlive the votes that needed it."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        registry = await unit_env.get(SubjectLockRegistry)
        (u1,) = await create_users(unit_env, 1)
        memes = [await create_meme(unit_env, u1) for _ in range(50)]

        # Act
        for meme in memes:
            await vote_service.cast_vote(VotableType.MEME, meme.id, u1, UP)
            await vote_service.cast_vote(VotableType.MEME, meme.id, u1, UP)
        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(VotableType.MEME, 9999, u1, UP)

        # Assert
        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_lock_kept_while_waiters_remain(self):
        """A lock should stay registered until its last waiter is done."""
        # Arrange
        registry = SubjectLockRegistry()
        release = asyncio.Event()

        async def hold_until_released():
            async with registry.hold(VotableType.MEME, 1):
                await release.wait()

        # Act
        first = asyncio.create_task(hold_until_released())
        second = asyncio.create_task(hold_until_released())
        await asyncio.sleep(0)
        during = len(registry)
        release.set()
        await asyncio.gather(first, second)

        # Assert
        assert during == 1
        assert len(registry) == 0
