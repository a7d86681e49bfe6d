"""Keycloak Role Management Tools."""

from .tools import register_role_operations

__all__ = ["register_role_operations"]
