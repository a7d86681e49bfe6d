"""Keycloak client management operations.

Clients are addressed by their public ``clientId``; mutating calls need the
internal id, so those operations resolve it first and fail with
``NotFoundError`` before touching anything when the lookup comes back empty.
"""
from __future__ import annotations

from keycloak import KeycloakAdmin

from mcp_server_keycloak.core.dispatcher import OperationRegistry
from mcp_server_keycloak.core.errors import NotFoundError
from mcp_server_keycloak.core.formatters import format_confirmation, format_payload

from .models import (
    CreateClientInput,
    DeleteClientInput,
    ListClientsInput,
    UpdateClientInput,
)


def resolve_client_id(admin: KeycloakAdmin, client_id: str) -> str:
    """Resolve a clientId to the client's internal id in the current realm.

    Raises:
        NotFoundError: No client matches, or the match has no id
    """
    internal_id = admin.get_client_id(client_id)
    if not internal_id:
        raise NotFoundError("Client", client_id)
    return internal_id


def register_client_operations(registry: OperationRegistry) -> None:
    """Register all client management operations."""

    @registry.operation("create-client", "clients", "Create Client", CreateClientInput)
    def create_client(admin: KeycloakAdmin, params: CreateClientInput) -> str:
        """Create a new client in a specific realm."""
        admin.change_current_realm(params.realm)
        internal_id = admin.create_client(params.payload("realm"))
        return format_confirmation("Client created successfully", {"id": internal_id})

    @registry.operation(
        "update-client", "clients", "Update Client", UpdateClientInput, idempotent=True,
    )
    def update_client(admin: KeycloakAdmin, params: UpdateClientInput) -> str:
        """Update a client in a specific realm."""
        admin.change_current_realm(params.realm)
        internal_id = resolve_client_id(admin, params.client_id)
        result = admin.update_client(internal_id, params.payload("realm", "client_id"))
        return format_confirmation(f"Client {params.client_id} updated successfully", result)

    @registry.operation(
        "delete-client", "clients", "Delete Client", DeleteClientInput,
        destructive=True, idempotent=True,
    )
    def delete_client(admin: KeycloakAdmin, params: DeleteClientInput) -> str:
        """Delete a client from a specific realm."""
        admin.change_current_realm(params.realm)
        internal_id = resolve_client_id(admin, params.client_id)
        admin.delete_client(internal_id)
        return f"Client {params.client_id} deleted successfully from realm {params.realm}"

    @registry.operation(
        "list-clients", "clients", "List Clients", ListClientsInput, read_only=True,
    )
    def list_clients(admin: KeycloakAdmin, params: ListClientsInput) -> str:
        """List clients in a specific realm."""
        admin.change_current_realm(params.realm)
        return format_payload(admin.get_clients())
