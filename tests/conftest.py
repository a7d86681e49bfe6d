"""
Pytest configuration and shared fixtures for Keycloak MCP Server tests.
"""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from mcp_server_keycloak.core import (
    AuthConfig,
    KeycloakSessionManager,
    OperationDispatcher,
    OperationRegistry,
)
from mcp_server_keycloak.tools import build_registry


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays instead of waiting."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def auth_config() -> AuthConfig:
    """Admin credentials used by every test session manager."""
    return AuthConfig(username="admin", password="admin-secret")


@pytest.fixture
def admin() -> MagicMock:
    """Mock authenticated KeycloakAdmin handle."""
    return MagicMock(name="KeycloakAdmin")


@pytest.fixture
def session_factory(admin) -> MagicMock:
    """Session factory returning the mock admin handle."""
    return MagicMock(return_value=admin)


@pytest.fixture
def recorded_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def sessions(auth_config, session_factory, recorded_sleep) -> KeycloakSessionManager:
    """Session manager wired to the mock factory and a no-op sleep."""
    return KeycloakSessionManager(
        "http://keycloak.test:8080/",
        auth_config,
        session_factory=session_factory,
        sleep=recorded_sleep,
    )


@pytest.fixture
def registry() -> OperationRegistry:
    """Registry holding the full operation catalogue."""
    return build_registry()


@pytest.fixture
def dispatcher(registry, sessions) -> OperationDispatcher:
    return OperationDispatcher(registry, sessions)


# Markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (require a Keycloak server)")


# Collection hooks
def pytest_collection_modifyitems(config, items):
    """Modify test collection."""
    # Add markers based on test location
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
