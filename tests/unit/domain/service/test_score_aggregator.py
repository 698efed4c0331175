"""Unit tests for score aggregation."""

import pytest

from cfh.domain.repository import MemeRepository, ResourceRepository
from cfh.domain.service import ScoreAggregator, compute_delta
from cfh.domain.value import (
    CounterDelta,
    UserId,
    VotableType,
    VoteDirection,
    VoteTransition,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

UP = VoteDirection.UP
DOWN = VoteDirection.DOWN


def transition(origin, destination) -> VoteTransition:
    return VoteTransition(origin=origin, destination=destination)


class TestComputeDelta:
    """Tests for compute_delta."""

    @pytest.mark.parametrize(
        "origin,destination,expected",
        [
            (None, UP, CounterDelta(upvotes=1)),
            (None, DOWN, CounterDelta(downvotes=1)),
            (UP, None, CounterDelta(upvotes=-1)),
            (DOWN, None, CounterDelta(downvotes=-1)),
            (UP, DOWN, CounterDelta(upvotes=-1, downvotes=1)),
            (DOWN, UP, CounterDelta(upvotes=1, downvotes=-1)),
        ],
    )
    def test_meme_uses_split_counters(self, origin, destination, expected):
        """Meme transitions should move upvotes and downvotes separately."""
        assert compute_delta(VotableType.MEME, transition(origin, destination)) == expected

    @pytest.mark.parametrize(
        "origin,destination,expected",
        [
            (None, UP, 1),
            (None, DOWN, -1),
            (UP, None, -1),
            (DOWN, None, 1),
            (UP, DOWN, -2),
            (DOWN, UP, 2),
        ],
    )
    def test_resource_uses_signed_counter(self, origin, destination, expected):
        """Resource transitions should move the single signed counter."""
        delta = compute_delta(VotableType.RESOURCE, transition(origin, destination))
        assert delta == CounterDelta(votes=expected)

    def test_comment_only_counts_upvotes(self):
        """Comment transitions should touch only upvotes."""
        assert compute_delta(VotableType.COMMENT, transition(None, UP)) == CounterDelta(
            upvotes=1
        )
        assert compute_delta(VotableType.COMMENT, transition(UP, None)) == CounterDelta(
            upvotes=-1
        )

    def test_no_change_is_zero(self):
        """A transition between equal states should change nothing."""
        assert compute_delta(VotableType.MEME, transition(None, None)).is_zero


class TestApply:
    """Tests for ScoreAggregator.apply."""

    @pytest.mark.asyncio
    async def test_apply_updates_meme_counters(self, unit_env):
        """Applying a switch should move one vote from up to down."""
        # Arrange
        aggregator = await unit_env.get(ScoreAggregator)
        meme_repo = await unit_env.get(MemeRepository)
        meme = await meme_repo.create(UserId(1), "https://img.example.com/a.png")
        await aggregator.apply(VotableType.MEME, meme.id, transition(None, UP))

        # Act
        delta = await aggregator.apply(VotableType.MEME, meme.id, transition(UP, DOWN))

        # Assert
        assert delta == CounterDelta(upvotes=-1, downvotes=1)
        updated = await meme_repo.find_by_id(meme.id)
        assert (updated.upvotes, updated.downvotes) == (0, 1)

    @pytest.mark.asyncio
    async def test_apply_updates_resource_votes(self, unit_env):
        """Resources should accumulate a signed total."""
        # Arrange
        aggregator = await unit_env.get(ScoreAggregator)
        resource_repo = await unit_env.get(ResourceRepository)

        # Act
        await aggregator.apply(VotableType.RESOURCE, 1, transition(None, DOWN))

        # Assert
        resource = await resource_repo.find_by_id(1)
        assert resource.votes == -1
