"""Keycloak Realm Management Tools."""

from .tools import register_realm_operations

__all__ = ["register_realm_operations"]
