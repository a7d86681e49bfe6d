"""Pydantic models for Keycloak user management tools."""
from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, Field
from pydantic.networks import validate_email

from mcp_server_keycloak.core.models import RealmInput, UserInput


def _check_email(value: str) -> str:
    # validate only; Keycloak receives the address exactly as given
    validate_email(value)
    return value


EmailAddress = Annotated[
    str,
    AfterValidator(_check_email),
    Field(json_schema_extra={"format": "email"}),
]


class CreateUserInput(RealmInput):
    """Input for creating a user."""

    username: str = Field(..., min_length=1, description="Username")
    email: EmailAddress = Field(..., description="Email address")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")


class ListUsersInput(RealmInput):
    """Input for listing users."""


class GetUserInput(UserInput):
    """Input for fetching a single user."""


class DeleteUserInput(UserInput):
    """Input for deleting a user."""


class LogoutUserInput(UserInput):
    """Input for ending all sessions of a user."""


class UpdateUserInput(UserInput):
    """Input for updating user attributes; only given fields are sent."""

    username: str | None = Field(default=None, description="Username")
    email: EmailAddress | None = Field(default=None, description="Email address")
    first_name: str | None = Field(default=None, description="First name")
    last_name: str | None = Field(default=None, description="Last name")
    enabled: bool | None = Field(default=None, description="User enabled status")


class ResetUserPasswordInput(UserInput):
    """Input for setting a new password credential."""

    new_password: str = Field(..., min_length=1, description="New password")
    temporary: bool = Field(
        default=False,
        description="Whether the user must change the password at next login",
    )


class SearchUsersInput(RealmInput):
    """Input for searching users with filters."""

    search: str | None = Field(default=None, description="Search term")
    username: str | None = Field(default=None, description="Username filter")
    email: str | None = Field(default=None, description="Email filter")
    first_name: str | None = Field(default=None, description="First name filter")
    last_name: str | None = Field(default=None, description="Last name filter")
    max_results: int | None = Field(
        default=None,
        alias="max",
        ge=1,
        description="Maximum results",
    )
