"""Pydantic models for Keycloak role management tools.

Roles are realm roles unless ``clientId`` is given, in which case they
belong to that client.
"""
from __future__ import annotations

from pydantic import Field

from mcp_server_keycloak.core.models import RealmInput, UserInput


class ListRolesInput(RealmInput):
    """Input for listing realm roles."""


class RoleInput(RealmInput):
    role_name: str = Field(..., min_length=1, description="Role name")
    client_id: str | None = Field(
        default=None,
        description="Client ID for client roles (optional)",
    )


class CreateRoleInput(RoleInput):
    """Input for creating a realm or client role."""

    description: str | None = Field(default=None, description="Role description")


class UpdateRoleInput(RoleInput):
    """Input for renaming or re-describing a role."""

    new_name: str | None = Field(default=None, description="New role name")
    description: str | None = Field(default=None, description="Role description")


class DeleteRoleInput(RoleInput):
    """Input for deleting a realm or client role."""


class UserRoleInput(UserInput):
    """Input for assigning or removing a realm role on a user."""

    role_name: str = Field(..., min_length=1, description="Role name")


class GetUserRolesInput(UserInput):
    """Input for listing a user's realm role mappings."""
