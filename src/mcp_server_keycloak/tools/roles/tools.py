"""Keycloak role management operations.

Realm roles by default; client roles when a ``clientId`` is given.
Assignment and removal only deal with realm roles.
"""
from __future__ import annotations

from keycloak import KeycloakAdmin
from keycloak.exceptions import KeycloakGetError

from mcp_server_keycloak.core.dispatcher import OperationRegistry
from mcp_server_keycloak.core.errors import NotFoundError
from mcp_server_keycloak.core.formatters import format_confirmation, format_payload

from ..clients import resolve_client_id
from .models import (
    CreateRoleInput,
    DeleteRoleInput,
    GetUserRolesInput,
    ListRolesInput,
    UpdateRoleInput,
    UserRoleInput,
)


def find_realm_role(admin: KeycloakAdmin, role_name: str) -> dict[str, str]:
    """Look up a realm role and return its ``{id, name}`` reference.

    Raises:
        NotFoundError: The role does not exist or lacks an id or name
    """
    try:
        role = admin.get_realm_role(role_name)
    except KeycloakGetError as e:
        if e.response_code == 404:
            raise NotFoundError("Role", role_name) from e
        raise
    if not role or not role.get("id") or not role.get("name"):
        raise NotFoundError("Role", role_name)
    return {"id": role["id"], "name": role["name"]}


def register_role_operations(registry: OperationRegistry) -> None:
    """Register all role management operations."""

    @registry.operation("list-roles", "roles", "List Roles", ListRolesInput, read_only=True)
    def list_roles(admin: KeycloakAdmin, params: ListRolesInput) -> str:
        """List roles in a specific realm."""
        admin.change_current_realm(params.realm)
        return format_payload(admin.get_realm_roles())

    @registry.operation("create-role", "roles", "Create Role", CreateRoleInput)
    def create_role(admin: KeycloakAdmin, params: CreateRoleInput) -> str:
        """Create a new role in a specific realm or client."""
        admin.change_current_realm(params.realm)
        payload = {"name": params.role_name}
        if params.description is not None:
            payload["description"] = params.description

        if params.client_id:
            internal_id = resolve_client_id(admin, params.client_id)
            role_name = admin.create_client_role(internal_id, payload)
        else:
            role_name = admin.create_realm_role(payload)
        return format_confirmation("Role created successfully", {"roleName": role_name})

    @registry.operation(
        "update-role", "roles", "Update Role", UpdateRoleInput, idempotent=True,
    )
    def update_role(admin: KeycloakAdmin, params: UpdateRoleInput) -> str:
        """Update a role in a specific realm or client."""
        admin.change_current_realm(params.realm)
        payload = {}
        if params.new_name:
            payload["name"] = params.new_name
        if params.description:
            payload["description"] = params.description

        if params.client_id:
            internal_id = resolve_client_id(admin, params.client_id)
            result = admin.update_client_role(internal_id, params.role_name, payload)
        else:
            result = admin.update_realm_role(params.role_name, payload)
        return format_confirmation(f"Role {params.role_name} updated successfully", result)

    @registry.operation(
        "delete-role", "roles", "Delete Role", DeleteRoleInput,
        destructive=True, idempotent=True,
    )
    def delete_role(admin: KeycloakAdmin, params: DeleteRoleInput) -> str:
        """Delete a role from a specific realm or client."""
        admin.change_current_realm(params.realm)
        if params.client_id:
            internal_id = resolve_client_id(admin, params.client_id)
            admin.delete_client_role(internal_id, params.role_name)
        else:
            admin.delete_realm_role(params.role_name)
        return f"Role {params.role_name} deleted successfully from realm {params.realm}"

    @registry.operation(
        "assign-role-to-user", "roles", "Assign Role To User", UserRoleInput, idempotent=True,
    )
    def assign_role_to_user(admin: KeycloakAdmin, params: UserRoleInput) -> str:
        """Assign a realm role to a user."""
        admin.change_current_realm(params.realm)
        role = find_realm_role(admin, params.role_name)
        admin.assign_realm_roles(params.user_id, [role])
        return f"Role {params.role_name} assigned to user {params.user_id} in realm {params.realm}"

    @registry.operation(
        "remove-role-from-user", "roles", "Remove Role From User", UserRoleInput,
        destructive=True, idempotent=True,
    )
    def remove_role_from_user(admin: KeycloakAdmin, params: UserRoleInput) -> str:
        """Remove a realm role from a user."""
        admin.change_current_realm(params.realm)
        role = find_realm_role(admin, params.role_name)
        admin.delete_realm_roles_of_user(params.user_id, [role])
        return f"Role {params.role_name} removed from user {params.user_id} in realm {params.realm}"

    @registry.operation(
        "get-user-roles", "roles", "Get User Roles", GetUserRolesInput, read_only=True,
    )
    def get_user_roles(admin: KeycloakAdmin, params: GetUserRolesInput) -> str:
        """Get realm roles assigned to a user."""
        admin.change_current_realm(params.realm)
        return format_payload(admin.get_realm_roles_of_user(params.user_id))
