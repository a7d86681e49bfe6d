"""Keycloak Group Management Tools."""

from .tools import register_group_operations

__all__ = ["register_group_operations"]
