"""
Keycloak admin session management.

Every tool call gets its own freshly authenticated KeycloakAdmin handle:
- Authentication is retried with exponential backoff (bounded attempts)
- The handle is scoped to a single operation and dropped afterwards
- Failures of the operation body are classified into ErrorCategory values

python-keycloak is synchronous, so authentication and operation bodies run
in worker threads via asyncio.to_thread, keeping the event loop free to
serve concurrent tool calls.
"""
from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import TypeVar

from keycloak import KeycloakAdmin, KeycloakOpenIDConnection

from .errors import AuthenticationError, ToolError, classify_error
from .observability import get_logger

T = TypeVar("T")

SessionFactory = Callable[[], KeycloakAdmin]


@dataclass(frozen=True)
class AuthConfig:
    """Admin credentials, fixed for the lifetime of the process."""
    username: str
    password: str = field(repr=False)
    grant_type: str = "password"
    client_id: str = "admin-cli"
    realm: str = "master"


def connect_admin(
    server_url: str,
    auth: AuthConfig,
    verify: bool = True,
    timeout: float = 60.0,
) -> KeycloakAdmin:
    """Open a new connection and authenticate it against Keycloak.

    Blocking; the token request happens before this returns so that
    credential and transport problems surface during session creation.
    """
    connection = KeycloakOpenIDConnection(
        server_url=server_url,
        username=auth.username,
        password=auth.password,
        grant_type=auth.grant_type,
        client_id=auth.client_id,
        realm_name=auth.realm,
        user_realm_name=auth.realm,
        verify=verify,
        timeout=timeout,
        # no keep-alive: every session uses its own TCP connection
        custom_headers={"Connection": "close"},
    )
    connection.get_token()
    return KeycloakAdmin(connection=connection)


class KeycloakSessionManager:
    """Creates one authenticated admin session per operation.

    The only state shared between concurrent operations is the immutable
    AuthConfig; sessions are never pooled or reused.

    Example:
        manager = KeycloakSessionManager("http://localhost:8080/", auth)
        users = await manager.execute(lambda admin: admin.get_users({}))
    """

    MAX_ATTEMPTS = 2
    BASE_BACKOFF_SECONDS = 1.0
    MAX_BACKOFF_SECONDS = 3.0

    def __init__(
        self,
        server_url: str,
        auth: AuthConfig,
        verify: bool = True,
        timeout: float = 60.0,
        session_factory: SessionFactory | None = None,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ):
        """Initialize the session manager.

        Args:
            server_url: Keycloak base URL
            auth: Admin credentials
            verify: Verify TLS certificates
            timeout: Per-request timeout in seconds
            session_factory: Blocking callable returning an authenticated
                KeycloakAdmin (default: connect_admin with the above settings)
            sleep: Awaitable used for backoff waits
        """
        self._auth = auth
        self._session_factory = session_factory or (
            lambda: connect_admin(server_url, auth, verify=verify, timeout=timeout)
        )
        self._sleep = sleep
        self._logger = get_logger("keycloak-mcp.session")

    @classmethod
    def backoff_delay(cls, attempt: int) -> float:
        """Seconds to wait after a failed ``attempt`` (1-based)."""
        return min(cls.BASE_BACKOFF_SECONDS * 2 ** (attempt - 1), cls.MAX_BACKOFF_SECONDS)

    async def create_session(self) -> KeycloakAdmin:
        """Create and authenticate a fresh admin session.

        Returns:
            Authenticated KeycloakAdmin

        Raises:
            AuthenticationError: If every attempt failed
        """
        last_error: Exception | None = None

        for attempt in range(1, self.MAX_ATTEMPTS + 1):
            self._logger.info(
                "Creating Keycloak admin session",
                attempt=attempt,
                max_attempts=self.MAX_ATTEMPTS,
            )
            try:
                session = await asyncio.to_thread(self._session_factory)
            except Exception as e:
                last_error = e
                self._logger.warning(
                    "Keycloak authentication attempt failed",
                    attempt=attempt,
                    error=str(e),
                )
                if attempt < self.MAX_ATTEMPTS:
                    delay = self.backoff_delay(attempt)
                    self._logger.info("Waiting before retry", delay_ms=int(delay * 1000))
                    await self._sleep(delay)
                continue

            self._logger.info("Keycloak admin session authenticated", attempt=attempt)
            return session

        self._logger.error("All authentication attempts failed", attempts=self.MAX_ATTEMPTS)
        raise AuthenticationError(
            self.MAX_ATTEMPTS,
            str(last_error) if last_error else "Unknown error",
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[KeycloakAdmin, None]:
        """Scoped admin session, released on every exit path."""
        admin = await self.create_session()
        try:
            yield admin
        finally:
            del admin
            self._logger.debug("Keycloak admin session released")

    async def execute(
        self,
        operation: Callable[[KeycloakAdmin], T],
        name: str = "operation",
    ) -> T:
        """Run one blocking operation body against a fresh session.

        Only session creation is retried; the body runs exactly once.

        Args:
            operation: Callable receiving the authenticated KeycloakAdmin
            name: Operation name for logging

        Returns:
            Whatever ``operation`` returned

        Raises:
            AuthenticationError: Session creation failed
            ToolError: Raised by the body itself (passed through unchanged)
            OperationError: Any other failure, classified
        """
        start = perf_counter()
        async with self.session() as admin:
            self._logger.info("Executing Keycloak operation", operation=name)
            try:
                result = await asyncio.to_thread(operation, admin)
            except ToolError:
                raise
            except Exception as e:
                self._logger.error(
                    "Keycloak operation failed",
                    operation=name,
                    duration_ms=round((perf_counter() - start) * 1000, 2),
                    error=str(e),
                )
                raise classify_error(e) from e

        self._logger.info(
            "Keycloak operation completed",
            operation=name,
            duration_ms=round((perf_counter() - start) * 1000, 2),
        )
        return result
