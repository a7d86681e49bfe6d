"""
Keycloak MCP Server - Module Entry Point

Allows running the server as a Python module:
    python -m mcp_server_keycloak
"""
from mcp_server_keycloak.server import main

if __name__ == "__main__":
    main()
