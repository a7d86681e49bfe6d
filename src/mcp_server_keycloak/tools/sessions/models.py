"""Pydantic models for Keycloak session and event tools."""
from __future__ import annotations

from pydantic import Field

from mcp_server_keycloak.core.models import RealmInput, UserInput


class ListSessionsInput(RealmInput):
    """Input for listing sessions realm-wide or for one client."""

    client_id: str | None = Field(default=None, description="Client ID (optional)")


class GetUserSessionsInput(UserInput):
    """Input for listing a user's active sessions."""


class ListEventsInput(RealmInput):
    """Input for listing stored login events."""

    event_type: str | None = Field(default=None, alias="type", description="Event type filter")
    max_results: int | None = Field(
        default=None,
        alias="max",
        ge=1,
        description="Maximum results",
    )


class ClearEventsInput(RealmInput):
    """Input for deleting all stored login events of a realm."""
