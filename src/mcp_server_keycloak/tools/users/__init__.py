"""Keycloak User Management Tools."""

from .tools import register_user_operations

__all__ = ["register_user_operations"]
