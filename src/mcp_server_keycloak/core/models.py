"""
Base Pydantic models for Keycloak MCP Server tools.

Attribute names are snake_case; the wire names seen by MCP clients are the
camelCase aliases Keycloak itself uses (``userId``, ``firstName``...), so a
model dumped with ``by_alias=True`` is already a Keycloak representation.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseToolInput",
    "RealmInput",
    "UserInput",
]


class BaseToolInput(BaseModel):
    """Base model for all tool inputs.

    Validation is strict: no coercion of ``"10"`` to ``10`` or ``"true"`` to
    ``True``, and unknown arguments are rejected.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        strict=True,
        extra="forbid",
        frozen=True,
    )

    def payload(self, *exclude: str) -> dict:
        """Keycloak representation of the set fields, minus ``exclude``."""
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude=set(exclude),
        )


class RealmInput(BaseToolInput):
    """Base model for tools scoped to one realm."""

    realm: str = Field(..., min_length=1, description="Realm name")


class UserInput(RealmInput):
    """Base model for tools acting on one user."""

    user_id: str = Field(..., min_length=1, description="User ID")
