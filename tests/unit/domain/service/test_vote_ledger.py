"""Unit tests for VoteLedger."""

import pytest

from cfh.domain.error import InvalidDirectionError, ValidationError
from cfh.domain.repository import VoteRepository
from cfh.domain.service import VoteLedger
from cfh.domain.value import UserId, VotableType, VoteDirection, VoteKey
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

UP = VoteDirection.UP
DOWN = VoteDirection.DOWN


class TestApplyVote:
    """Tests for apply_vote transitions."""

    @pytest.mark.asyncio
    async def test_first_vote_creates_record(self, unit_env):
        """Voting without a prior record should create one."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        key = VoteKey(VotableType.MEME, 1, UserId(1))

        # Act
        transition = await ledger.apply_vote(VotableType.MEME, 1, UserId(1), UP)

        # Assert
        assert transition.origin is None
        assert transition.destination == UP
        saved = await vote_repo.find(key)
        assert saved is not None
        assert saved.direction == UP

    @pytest.mark.asyncio
    async def test_same_direction_toggles_off(self, unit_env):
        """Repeating a vote should remove the record."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)
        await ledger.apply_vote(VotableType.MEME, 1, UserId(1), DOWN)

        # Act
        transition = await ledger.apply_vote(VotableType.MEME, 1, UserId(1), DOWN)

        # Assert
        assert str(transition) == "down->none"
        assert await vote_repo.find(VoteKey(VotableType.MEME, 1, UserId(1))) is None

    @pytest.mark.asyncio
    async def test_other_direction_switches(self, unit_env):
        """Voting the other way should replace the record."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        await ledger.apply_vote(VotableType.RESOURCE, 2, UserId(1), UP)

        # Act
        transition = await ledger.apply_vote(VotableType.RESOURCE, 2, UserId(1), DOWN)

        # Assert
        assert (transition.origin, transition.destination) == (UP, DOWN)
        key = VoteKey(VotableType.RESOURCE, 2, UserId(1))
        assert await ledger.current_direction(key) == DOWN

    @pytest.mark.asyncio
    async def test_comment_downvote_rejected_before_touching_ledger(self, unit_env):
        """Comments only accept upvotes."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)
        vote_repo = await unit_env.get(VoteRepository)

        # Act & Assert
        with pytest.raises(InvalidDirectionError):
            await ledger.apply_vote(VotableType.COMMENT, 1, UserId(1), DOWN)

        assert await vote_repo.find(VoteKey(VotableType.COMMENT, 1, UserId(1))) is None

    def test_invalid_direction_is_a_validation_error(self):
        """InvalidDirectionError should be reported like other bad input."""
        with pytest.raises(ValidationError):
            VoteLedger.check_direction(VotableType.COMMENT, DOWN)

    @pytest.mark.asyncio
    async def test_records_are_independent_per_user_and_subject(self, unit_env):
        """Votes of different users or subjects should not interfere."""
        # Arrange
        ledger = await unit_env.get(VoteLedger)

        # Act
        await ledger.apply_vote(VotableType.MEME, 1, UserId(1), UP)
        await ledger.apply_vote(VotableType.MEME, 1, UserId(2), DOWN)
        await ledger.apply_vote(VotableType.MEME, 2, UserId(1), DOWN)
        await ledger.apply_vote(VotableType.RESOURCE, 1, UserId(1), DOWN)

        # Assert
        directions = await ledger.directions_for(UserId(1), VotableType.MEME, [1, 2, 3])
        assert directions == {1: UP, 2: DOWN}
        assert await ledger.directions_for(UserId(1), VotableType.MEME, []) == {}
