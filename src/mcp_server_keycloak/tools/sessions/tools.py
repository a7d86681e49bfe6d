"""Keycloak session and event operations."""
from __future__ import annotations

from keycloak import KeycloakAdmin, urls_patterns
from keycloak.exceptions import KeycloakDeleteError, raise_error_from_response

from mcp_server_keycloak.core.dispatcher import OperationRegistry
from mcp_server_keycloak.core.formatters import format_payload

from ..clients import resolve_client_id
from .models import (
    ClearEventsInput,
    GetUserSessionsInput,
    ListEventsInput,
    ListSessionsInput,
)


def register_session_operations(registry: OperationRegistry) -> None:
    """Register all session and event operations."""

    @registry.operation(
        "list-sessions", "sessions", "List Sessions", ListSessionsInput, read_only=True,
    )
    def list_sessions(admin: KeycloakAdmin, params: ListSessionsInput) -> str:
        """List active sessions in a specific realm.

        Without ``clientId`` this returns the realm-wide per-client session
        statistics; with it, the user sessions of that client.
        """
        admin.change_current_realm(params.realm)
        if params.client_id:
            internal_id = resolve_client_id(admin, params.client_id)
            return format_payload(admin.get_client_all_sessions(internal_id))
        return format_payload(admin.get_client_sessions_stats())

    @registry.operation(
        "get-user-sessions", "sessions", "Get User Sessions", GetUserSessionsInput,
        read_only=True,
    )
    def get_user_sessions(admin: KeycloakAdmin, params: GetUserSessionsInput) -> str:
        """Get active sessions for a specific user."""
        admin.change_current_realm(params.realm)
        return format_payload(admin.get_sessions(params.user_id))

    @registry.operation("list-events", "sessions", "List Events", ListEventsInput, read_only=True)
    def list_events(admin: KeycloakAdmin, params: ListEventsInput) -> str:
        """List events in a specific realm."""
        admin.change_current_realm(params.realm)
        query = {}
        if params.event_type:
            query["type"] = params.event_type
        if params.max_results:
            query["max"] = params.max_results
        return format_payload(admin.get_events(query))

    @registry.operation(
        "clear-events", "sessions", "Clear Events", ClearEventsInput,
        destructive=True, idempotent=True,
    )
    def clear_events(admin: KeycloakAdmin, params: ClearEventsInput) -> str:
        """Clear all events in a specific realm."""
        admin.change_current_realm(params.realm)
        path = urls_patterns.URL_ADMIN_USER_EVENTS.format(**{"realm-name": params.realm})
        response = admin.connection.raw_delete(path)
        raise_error_from_response(response, KeycloakDeleteError, expected_codes=[204])
        return f"Events cleared successfully for realm {params.realm}"
