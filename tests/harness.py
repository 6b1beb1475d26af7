"""Test harness for container-backed tests.

Unmocking "persistence" assumes PostgreSQL is reachable at DATABASE__URL with
the migrations applied.
"""

import pytest_asyncio

from threadline.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture yields a request-scoped container, so every dependency
    fetched in one test shares the same repositories and revalidator.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_fetch_user(unit_env):
            service = await unit_env.get(UserService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
