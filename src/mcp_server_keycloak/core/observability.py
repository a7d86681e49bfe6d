"""
Structured logging and per-operation observability.

Uses structlog, always rendering to stderr: with the stdio transport,
stdout carries the JSON-RPC stream and must stay clean.
"""
from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

import structlog

# ============================================================================
# Structured Logging with structlog
# ============================================================================

def configure_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, output JSON; otherwise console format
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # python-keycloak and urllib3 log through the standard library
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )


def get_logger(name: str = "keycloak-mcp") -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


# ============================================================================
# Tool Execution Context
# ============================================================================

@dataclass
class ToolExecutionContext:
    """Context for tool execution with observability."""

    tool_name: str
    domain: str
    params: dict[str, Any] = field(default_factory=dict)
    start_time: float = field(default_factory=perf_counter)
    logger: Any = None

    def __post_init__(self):
        if self.logger is None:
            self.logger = get_logger(f"keycloak-mcp.{self.domain}")

    @property
    def duration_ms(self) -> float:
        """Get elapsed time in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def log_start(self) -> None:
        self.logger.info(
            f"Starting {self.tool_name}",
            tool=self.tool_name,
            domain=self.domain,
            params=sanitize_params(self.params)
        )

    def log_success(self) -> None:
        self.logger.info(
            f"Completed {self.tool_name}",
            tool=self.tool_name,
            domain=self.domain,
            duration_ms=round(self.duration_ms, 2),
        )

    def log_error(self, error: Exception) -> None:
        self.logger.error(
            f"Failed {self.tool_name}",
            tool=self.tool_name,
            domain=self.domain,
            duration_ms=round(self.duration_ms, 2),
            error_type=type(error).__name__,
            error_message=str(error)
        )


@asynccontextmanager
async def observe_tool(
    tool_name: str,
    domain: str,
    params: dict[str, Any] | None = None
) -> AsyncGenerator[ToolExecutionContext, None]:
    """Context manager for unified tool observability.

    Logs start, success and failure of one tool call together with its
    duration. Sensitive parameters are masked before they are logged.

    Args:
        tool_name: Name of the tool being executed
        domain: Domain the tool belongs to
        params: Tool parameters

    Yields:
        ToolExecutionContext with logging and timing utilities

    Example:
        async with observe_tool("list-users", "users", params) as ctx:
            result = await do_work()
    """
    ctx = ToolExecutionContext(
        tool_name=tool_name,
        domain=domain,
        params=params or {}
    )
    ctx.log_start()

    try:
        yield ctx
    except Exception as e:
        ctx.log_error(e)
        raise

    ctx.log_success()


# ============================================================================
# Utility Functions
# ============================================================================

SENSITIVE_KEYS = ("password", "secret", "token", "credential")


def sanitize_params(params: dict[str, Any]) -> dict[str, Any]:
    """Mask sensitive values and truncate long strings for logging."""
    sanitized = {}
    for key, value in params.items():
        if any(s in key.lower() for s in SENSITIVE_KEYS):
            sanitized[key] = "[REDACTED]"
        elif isinstance(value, str) and len(value) > 100:
            sanitized[key] = f"{value[:100]}..."
        else:
            sanitized[key] = value

    return sanitized


def init_observability(
    service_name: str = "keycloak-mcp-server",
    service_version: str = "1.0.0",
    log_level: str = "INFO",
    json_logs: bool = False
) -> None:
    """Initialize logging for the server process."""
    configure_logging(level=log_level, json_format=json_logs)

    get_logger().info(
        "Observability initialized",
        service=service_name,
        version=service_version,
        log_level=log_level
    )
