"""Unit tests for GameSessionService."""

from datetime import datetime

import pytest

from cfh.domain.error import NotAuthorizedError, NotFoundError
from cfh.domain.service import GameSessionService
from cfh.domain.value import GameSessionId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGameSessions:
    """Tests for session lifecycle and ownership."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env):
        # Arrange
        service = await unit_env.get(GameSessionService)
        session = await service.start_session(
            UserId(1), score=10, sanity_left=90, choices=["accept"]
        )
        ended = datetime(2025, 6, 1, 18, 0, 0)

        # Act
        updated = await service.update_session(
            session.id, UserId(1), score=25, ended_at=ended
        )

        # Assert
        assert updated.score == 25
        assert updated.sanity_left == 90
        assert updated.choices == ["accept"]
        assert updated.ended_at == ended

    @pytest.mark.asyncio
    async def test_update_by_other_player_rejected(self, unit_env):
        service = await unit_env.get(GameSessionService)
        session = await service.start_session(UserId(1))

        with pytest.raises(NotAuthorizedError):
            await service.update_session(session.id, UserId(2), score=1)

    @pytest.mark.asyncio
    async def test_update_missing_session(self, unit_env):
        service = await unit_env.get(GameSessionService)

        with pytest.raises(NotFoundError):
            await service.update_session(GameSessionId(9), UserId(1), score=1)

    @pytest.mark.asyncio
    async def test_list_only_own_sessions(self, unit_env):
        service = await unit_env.get(GameSessionService)
        await service.start_session(UserId(1), score=1)
        await service.start_session(UserId(1), score=2)
        await service.start_session(UserId(2), score=3)

        sessions = await service.list_for_user(UserId(1), UserId(1))

        assert sorted(s.score for s in sessions) == [1, 2]
        with pytest.raises(NotAuthorizedError):
            await service.list_for_user(UserId(1), UserId(2))
