"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is already running with migrations
applied. Settings are loaded from environment variables (configure via .env
or export).
"""

import pytest
import pytest_asyncio
from dishka import Provider
from fastapi.testclient import TestClient

from guestbook.interface.api.app import create_app
from guestbook.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_save_greeting(integration_env):
            repo = await integration_env.get(GreetingRepository)
            greeting = await repo.save(Greeting(...))
            assert greeting.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(
    unmock: set[Component] | None = None,
    replace: dict[Component, Provider] | None = None,
    env: dict[str, str] | None = None,
):
    """Factory for creating E2E client fixtures.

    The app is built around a fresh test container per test, so in-memory
    state is shared by every request of one test and by nothing else.

    Args:
        unmock: Components to use real implementations for
        replace: Provider instances standing in for whole components
        env: Environment variables set before settings are loaded

    Returns:
        Pytest fixture function that yields a TestClient
    """

    @pytest.fixture
    def _client(monkeypatch):
        for name, value in (env or {}).items():
            monkeypatch.setenv(name, value)

        container = build_test_container(unmock=unmock or set(), replace=replace)
        with TestClient(create_app(container), follow_redirects=False) as client:
            yield client

    return _client
