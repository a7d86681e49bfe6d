"""Keycloak group management operations."""
from __future__ import annotations

from keycloak import KeycloakAdmin

from mcp_server_keycloak.core.dispatcher import OperationRegistry
from mcp_server_keycloak.core.formatters import format_confirmation, format_payload

from .models import (
    CreateGroupInput,
    DeleteGroupInput,
    ListGroupsInput,
    ManageUserGroupsInput,
    UpdateGroupInput,
)


def register_group_operations(registry: OperationRegistry) -> None:
    """Register all group management operations."""

    @registry.operation("create-group", "groups", "Create Group", CreateGroupInput)
    def create_group(admin: KeycloakAdmin, params: CreateGroupInput) -> str:
        """Create a new group in a specific realm.

        With ``parentId`` the group is created as a child of that group.
        """
        admin.change_current_realm(params.realm)
        group_id = admin.create_group({"name": params.name}, parent=params.parent_id)
        return format_confirmation("Group created successfully", {"id": group_id})

    @registry.operation(
        "update-group", "groups", "Update Group", UpdateGroupInput, idempotent=True,
    )
    def update_group(admin: KeycloakAdmin, params: UpdateGroupInput) -> str:
        """Update a group in a specific realm."""
        admin.change_current_realm(params.realm)
        result = admin.update_group(params.group_id, params.payload("realm", "group_id"))
        return format_confirmation(f"Group {params.group_id} updated successfully", result)

    @registry.operation(
        "delete-group", "groups", "Delete Group", DeleteGroupInput,
        destructive=True, idempotent=True,
    )
    def delete_group(admin: KeycloakAdmin, params: DeleteGroupInput) -> str:
        """Delete a group from a specific realm."""
        admin.change_current_realm(params.realm)
        admin.delete_group(params.group_id)
        return f"Group {params.group_id} deleted successfully from realm {params.realm}"

    @registry.operation("list-groups", "groups", "List Groups", ListGroupsInput, read_only=True)
    def list_groups(admin: KeycloakAdmin, params: ListGroupsInput) -> str:
        """List groups in a specific realm."""
        admin.change_current_realm(params.realm)
        return format_payload(admin.get_groups())

    @registry.operation(
        "manage-user-groups", "groups", "Manage User Groups", ManageUserGroupsInput,
        idempotent=True,
    )
    def manage_user_groups(admin: KeycloakAdmin, params: ManageUserGroupsInput) -> str:
        """Add or remove a user from a group."""
        admin.change_current_realm(params.realm)
        if params.action == "add":
            admin.group_user_add(params.user_id, params.group_id)
            outcome = "added to"
        else:
            admin.group_user_remove(params.user_id, params.group_id)
            outcome = "removed from"
        return f"User {params.user_id} {outcome} group {params.group_id} in realm {params.realm}"
