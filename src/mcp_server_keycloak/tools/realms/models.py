"""Pydantic models for Keycloak realm management tools."""
from __future__ import annotations

from pydantic import Field

from mcp_server_keycloak.core.models import BaseToolInput, RealmInput


class ListRealmsInput(BaseToolInput):
    """Input for listing realms.

    Takes no real arguments; ``random_string`` is accepted for clients that
    cannot send an empty argument object.
    """

    random_string: str | None = Field(
        default=None,
        alias="random_string",
        description="Dummy parameter for no-parameter tools",
    )


class CreateRealmInput(RealmInput):
    """Input for creating a realm."""

    display_name: str | None = Field(default=None, description="Display name for the realm")
    enabled: bool = Field(default=True, description="Whether the realm is enabled")


class UpdateRealmInput(RealmInput):
    """Input for updating realm settings; only given fields are sent."""

    display_name: str | None = Field(default=None, description="Display name for the realm")
    enabled: bool | None = Field(default=None, description="Whether the realm is enabled")


class DeleteRealmInput(RealmInput):
    """Input for deleting a realm."""


class GetRealmSettingsInput(RealmInput):
    """Input for fetching realm settings."""
