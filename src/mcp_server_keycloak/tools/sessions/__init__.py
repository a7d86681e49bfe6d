"""Keycloak Session & Event Management Tools."""

from .tools import register_session_operations

__all__ = ["register_session_operations"]
