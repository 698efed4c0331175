"""Test harness for unit and integration tests.

Unit tests run against the in-memory store and need no services. Integration
tests that unmock persistence assume PostgreSQL is reachable with the
settings from the environment.
"""

import pytest_asyncio

from cfh.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a fresh test container with specified unmocking
    - Yields a request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_meme(unit_env):
            meme_service = await unit_env.get(MemeService)
            meme = await meme_service.create_meme(UserId(1), "https://x/y.png")
            assert meme.id == 1
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
