"""Keycloak user management operations.

Create, read, update, delete and search users, reset passwords and end
user sessions. Every operation switches the admin session to the target
realm before calling the API.
"""
from __future__ import annotations

from keycloak import KeycloakAdmin

from mcp_server_keycloak.core.dispatcher import OperationRegistry
from mcp_server_keycloak.core.formatters import format_confirmation, format_payload

from .models import (
    CreateUserInput,
    DeleteUserInput,
    GetUserInput,
    ListUsersInput,
    LogoutUserInput,
    ResetUserPasswordInput,
    SearchUsersInput,
    UpdateUserInput,
)


def register_user_operations(registry: OperationRegistry) -> None:
    """Register all user management operations."""

    @registry.operation("create-user", "users", "Create User", CreateUserInput)
    def create_user(admin: KeycloakAdmin, params: CreateUserInput) -> str:
        """Create a new user in a specific realm.

        The user is created enabled.
        """
        admin.change_current_realm(params.realm)
        user_id = admin.create_user({**params.payload("realm"), "enabled": True})
        return format_confirmation("User created successfully", {"id": user_id})

    @registry.operation(
        "delete-user", "users", "Delete User", DeleteUserInput,
        destructive=True, idempotent=True,
    )
    def delete_user(admin: KeycloakAdmin, params: DeleteUserInput) -> str:
        """Delete a user from a specific realm."""
        admin.change_current_realm(params.realm)
        admin.delete_user(params.user_id)
        return f"User {params.user_id} deleted successfully from realm {params.realm}"

    @registry.operation("list-users", "users", "List Users", ListUsersInput, read_only=True)
    def list_users(admin: KeycloakAdmin, params: ListUsersInput) -> str:
        """List users in a specific realm."""
        admin.change_current_realm(params.realm)
        return format_payload(admin.get_users({}))

    @registry.operation(
        "update-user", "users", "Update User", UpdateUserInput, idempotent=True,
    )
    def update_user(admin: KeycloakAdmin, params: UpdateUserInput) -> str:
        """Update user information in a specific realm."""
        admin.change_current_realm(params.realm)
        result = admin.update_user(params.user_id, params.payload("realm", "user_id"))
        return format_confirmation(f"User {params.user_id} updated successfully", result)

    @registry.operation("get-user", "users", "Get User", GetUserInput, read_only=True)
    def get_user(admin: KeycloakAdmin, params: GetUserInput) -> str:
        """Get user details by ID from a specific realm."""
        admin.change_current_realm(params.realm)
        return format_payload(admin.get_user(params.user_id))

    @registry.operation(
        "reset-user-password", "users", "Reset User Password", ResetUserPasswordInput,
        idempotent=True,
    )
    def reset_user_password(admin: KeycloakAdmin, params: ResetUserPasswordInput) -> str:
        """Reset a user's password in a specific realm.

        Sends a single credential of type "password"; non-temporary unless
        ``temporary`` is given.
        """
        admin.change_current_realm(params.realm)
        admin.set_user_password(params.user_id, params.new_password, temporary=params.temporary)
        return f"Password reset successfully for user {params.user_id} in realm {params.realm}"

    @registry.operation(
        "search-users", "users", "Search Users", SearchUsersInput, read_only=True,
    )
    def search_users(admin: KeycloakAdmin, params: SearchUsersInput) -> str:
        """Search users in a specific realm with filters."""
        admin.change_current_realm(params.realm)
        return format_payload(admin.get_users(params.payload("realm")))

    @registry.operation(
        "logout-user", "users", "Logout User", LogoutUserInput, idempotent=True,
    )
    def logout_user(admin: KeycloakAdmin, params: LogoutUserInput) -> str:
        """Logout all sessions for a specific user."""
        admin.change_current_realm(params.realm)
        admin.user_logout(params.user_id)
        return f"User {params.user_id} logged out successfully from realm {params.realm}"
