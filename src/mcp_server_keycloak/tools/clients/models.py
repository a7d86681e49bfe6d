"""Pydantic models for Keycloak client management tools."""
from __future__ import annotations

from pydantic import Field

from mcp_server_keycloak.core.models import RealmInput


class ClientInput(RealmInput):
    """Base model for tools addressing a client by its clientId."""

    client_id: str = Field(..., min_length=1, description="Client ID")


class CreateClientInput(ClientInput):
    """Input for registering a client."""

    name: str | None = Field(default=None, description="Client name")
    description: str | None = Field(default=None, description="Client description")
    enabled: bool | None = Field(default=None, description="Whether the client is enabled")
    public_client: bool | None = Field(default=None, description="Whether the client is public")
    redirect_uris: list[str] | None = Field(default=None, description="Valid redirect URIs")


class UpdateClientInput(CreateClientInput):
    """Input for updating a client; only given fields are sent."""


class DeleteClientInput(ClientInput):
    """Input for deleting a client."""


class ListClientsInput(RealmInput):
    """Input for listing clients."""
