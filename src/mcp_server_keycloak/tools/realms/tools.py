"""Keycloak realm management operations."""
from __future__ import annotations

from keycloak import KeycloakAdmin

from mcp_server_keycloak.core.dispatcher import OperationRegistry
from mcp_server_keycloak.core.formatters import format_confirmation, format_payload

from .models import (
    CreateRealmInput,
    DeleteRealmInput,
    GetRealmSettingsInput,
    ListRealmsInput,
    UpdateRealmInput,
)


def register_realm_operations(registry: OperationRegistry) -> None:
    """Register all realm management operations."""

    @registry.operation("list-realms", "realms", "List Realms", ListRealmsInput, read_only=True)
    def list_realms(admin: KeycloakAdmin, params: ListRealmsInput) -> str:
        """List all realms."""
        return format_payload(admin.get_realms())

    @registry.operation("create-realm", "realms", "Create Realm", CreateRealmInput)
    def create_realm(admin: KeycloakAdmin, params: CreateRealmInput) -> str:
        """Create a new realm.

        The realm is enabled unless ``enabled`` is false.
        """
        admin.create_realm(params.payload())
        return format_confirmation("Realm created successfully", {"realmName": params.realm})

    @registry.operation(
        "update-realm", "realms", "Update Realm", UpdateRealmInput, idempotent=True,
    )
    def update_realm(admin: KeycloakAdmin, params: UpdateRealmInput) -> str:
        """Update realm settings."""
        result = admin.update_realm(params.realm, params.payload("realm"))
        return format_confirmation(f"Realm {params.realm} updated successfully", result)

    @registry.operation(
        "delete-realm", "realms", "Delete Realm", DeleteRealmInput,
        destructive=True, idempotent=True,
    )
    def delete_realm(admin: KeycloakAdmin, params: DeleteRealmInput) -> str:
        """Delete a realm."""
        admin.delete_realm(params.realm)
        return f"Realm {params.realm} deleted successfully"

    @registry.operation(
        "get-realm-settings", "realms", "Get Realm Settings", GetRealmSettingsInput,
        read_only=True,
    )
    def get_realm_settings(admin: KeycloakAdmin, params: GetRealmSettingsInput) -> str:
        """Get realm settings and configuration."""
        return format_payload(admin.get_realm(params.realm))
