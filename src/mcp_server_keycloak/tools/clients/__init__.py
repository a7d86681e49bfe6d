"""Keycloak Client Management Tools.

Also provides resolve_client_id, the clientId -> internal id lookup shared
by the role and session tools.
"""

from .tools import register_client_operations, resolve_client_id

__all__ = ["register_client_operations", "resolve_client_id"]
