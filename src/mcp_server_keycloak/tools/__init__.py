"""
Keycloak admin tools, one package per domain.

Each domain package exposes ``register_<domain>_operations(registry)``;
``build_registry()`` assembles the full catalogue in a fixed order.
"""

from mcp_server_keycloak.core.dispatcher import OperationRegistry

from .clients import register_client_operations
from .groups import register_group_operations
from .realms import register_realm_operations
from .roles import register_role_operations
from .sessions import register_session_operations
from .users import register_user_operations

DOMAIN_REGISTRARS = (
    register_user_operations,
    register_realm_operations,
    register_client_operations,
    register_role_operations,
    register_group_operations,
    register_session_operations,
)


def register_all_operations(registry: OperationRegistry) -> OperationRegistry:
    for register in DOMAIN_REGISTRARS:
        register(registry)
    return registry


def build_registry() -> OperationRegistry:
    """Create a registry holding every Keycloak admin operation."""
    return register_all_operations(OperationRegistry())


__all__ = [
    "DOMAIN_REGISTRARS",
    "build_registry",
    "register_all_operations",
]
