"""Pydantic models for Keycloak group management tools."""
from __future__ import annotations

from typing import Literal

from pydantic import Field

from mcp_server_keycloak.core.models import RealmInput, UserInput


class CreateGroupInput(RealmInput):
    """Input for creating a top-level or child group."""

    name: str = Field(..., min_length=1, description="Group name")
    parent_id: str | None = Field(default=None, description="Parent group ID (optional)")


class GroupInput(RealmInput):
    group_id: str = Field(..., min_length=1, description="Group ID")


class UpdateGroupInput(GroupInput):
    """Input for updating a group."""

    name: str | None = Field(default=None, description="Group name")


class DeleteGroupInput(GroupInput):
    """Input for deleting a group."""


class ListGroupsInput(RealmInput):
    """Input for listing groups."""


class ManageUserGroupsInput(UserInput):
    """Input for adding a user to, or removing a user from, a group."""

    group_id: str = Field(..., min_length=1, description="Group ID")
    action: Literal["add", "remove"] = Field(
        ...,
        description="Action to perform (add or remove)",
    )
