"""
Keycloak MCP Server.

Exposes Keycloak administration (users, realms, clients, roles, groups,
sessions and events) as Model Context Protocol tools.
"""

__version__ = "1.0.0"
