"""
Keycloak MCP Server Configuration

Handles environment variables and server settings.
All sensitive values are sourced from environment variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from mcp_server_keycloak import __version__
from mcp_server_keycloak.core.session import AuthConfig


class ServerConfig(BaseModel):
    """MCP Server configuration."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(default="keycloak-mcp-server", description="Server name")
    version: str = Field(default=__version__, description="Server version")
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")


class KeycloakConfig(BaseModel):
    """Keycloak admin connection settings."""
    model_config = ConfigDict(frozen=True)

    url: str = Field(default="http://localhost:8080", description="Keycloak base URL")
    admin_username: str = Field(default="admin", description="Admin user in the master realm")
    admin_password: SecretStr = Field(default=SecretStr("admin"), description="Admin password")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    request_timeout: float = Field(default=60.0, gt=0, description="Per-request timeout in seconds")

    @field_validator("url")
    @classmethod
    def normalize_url(cls, v: str) -> str:
        # admin paths are joined relative to the base URL
        return v.rstrip("/") + "/"

    def auth_config(self) -> AuthConfig:
        """Build the immutable credentials used for every admin session."""
        return AuthConfig(
            username=self.admin_username,
            password=self.admin_password.get_secret_value(),
        )


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class AppConfig:
    """Application configuration container."""
    server: ServerConfig = field(default_factory=ServerConfig)
    keycloak: KeycloakConfig = field(default_factory=KeycloakConfig)

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load configuration from environment variables.

        Environment variables referenced:
        - KEYCLOAK_URL (default http://localhost:8080)
        - KEYCLOAK_ADMIN (default admin)
        - KEYCLOAK_ADMIN_PASSWORD (default admin)
        - KEYCLOAK_VERIFY_SSL (default true)
        - KEYCLOAK_REQUEST_TIMEOUT (default 60)
        - KEYCLOAK_MCP_NAME
        - KEYCLOAK_MCP_LOG_LEVEL
        - KEYCLOAK_MCP_JSON_LOGS
        """
        load_dotenv()

        return cls(
            server=ServerConfig(
                name=os.getenv("KEYCLOAK_MCP_NAME", "keycloak-mcp-server"),
                log_level=os.getenv("KEYCLOAK_MCP_LOG_LEVEL", "INFO"),
                json_logs=_env_flag("KEYCLOAK_MCP_JSON_LOGS", "false"),
            ),
            keycloak=KeycloakConfig(
                url=os.getenv("KEYCLOAK_URL", "http://localhost:8080"),
                admin_username=os.getenv("KEYCLOAK_ADMIN", "admin"),
                admin_password=SecretStr(os.getenv("KEYCLOAK_ADMIN_PASSWORD", "admin")),
                verify_ssl=_env_flag("KEYCLOAK_VERIFY_SSL", "true"),
                request_timeout=float(os.getenv("KEYCLOAK_REQUEST_TIMEOUT", "60")),
            ),
        )


# Global config instance (lazy-loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
