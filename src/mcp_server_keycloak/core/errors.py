"""
Error handling for Keycloak MCP operations.

Every failure that leaves the server is one of the ToolError subclasses
below. Transport and API failures are mapped onto a small closed set of
categories through CLASSIFICATION_RULES, an ordered table evaluated top to
bottom where the first matching substring wins.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories for user-friendly messaging."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    UNKNOWN_OPERATION = "unknown_operation"
    CONNECTION_UNAVAILABLE = "connection_unavailable"
    AUTHENTICATION_FAILED = "authentication_failed"
    TIMEOUT_OR_RESET = "timeout_or_reset"
    UNREACHABLE_HOST = "unreachable_host"
    ACCESS_DENIED = "access_denied"
    TLS_ERROR = "tls_error"
    OPERATION_FAILED = "operation_failed"


class ToolError(Exception):
    """Base class for every error surfaced to the calling host."""

    category: ErrorCategory = ErrorCategory.OPERATION_FAILED

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if category is not None:
            self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Structured form of the error, as logged on rejection or failure."""
        return {
            "error": self.message,
            "category": self.category.value,
            "details": self.details,
        }


class ValidationError(ToolError):
    """Tool arguments do not match the operation's declared shape."""

    category = ErrorCategory.VALIDATION

    def __init__(self, operation: str, violations: list[str]):
        self.operation = operation
        self.violations = violations
        super().__init__(
            f"Invalid arguments for {operation}: {'; '.join(violations)}",
            details={"operation": operation, "violations": violations},
        )


class AuthenticationError(ToolError):
    """Every attempt to open an authenticated admin session failed."""

    category = ErrorCategory.AUTHENTICATION

    def __init__(self, attempts: int, cause: str):
        self.attempts = attempts
        self.cause = cause
        super().__init__(
            f"Keycloak authentication failed after {attempts} attempts: {cause}",
            details={"attempts": attempts, "cause": cause},
        )


class OperationError(ToolError):
    """A classified failure of an admin API call."""


class NotFoundError(ToolError):
    """A lookup needed before the actual call found nothing usable."""

    category = ErrorCategory.NOT_FOUND

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(
            f"{resource_type} {identifier} not found or invalid",
            details={"resource_type": resource_type, "identifier": identifier},
        )


class UnknownOperationError(ToolError):
    """The requested tool name is not registered."""

    category = ErrorCategory.UNKNOWN_OPERATION

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}", details={"name": name})


# Ordered (substrings, category) table; first match wins.
CLASSIFICATION_RULES: tuple[tuple[tuple[str, ...], ErrorCategory], ...] = (
    (("network response was not ok",), ErrorCategory.CONNECTION_UNAVAILABLE),
    (("401", "unauthorized"), ErrorCategory.AUTHENTICATION_FAILED),
    (
        ("timeout", "etimedout", "econnreset", "timed out", "connection reset"),
        ErrorCategory.TIMEOUT_OR_RESET,
    ),
    (
        (
            "econnrefused",
            "enotfound",
            "connection refused",
            "name or service not known",
            "failed to resolve",
        ),
        ErrorCategory.UNREACHABLE_HOST,
    ),
    (("403", "forbidden"), ErrorCategory.ACCESS_DENIED),
    (("ssl", "certificate", "handshake"), ErrorCategory.TLS_ERROR),
)

CATEGORY_MESSAGES: dict[ErrorCategory, str] = {
    ErrorCategory.CONNECTION_UNAVAILABLE: (
        "Keycloak server connection failed. The server may be temporarily unavailable "
        "or experiencing network issues. Please check server status and try again in a moment."
    ),
    ErrorCategory.AUTHENTICATION_FAILED: (
        "Keycloak authentication failed. Please verify admin credentials and permissions."
    ),
    ErrorCategory.TIMEOUT_OR_RESET: (
        "Keycloak server timeout or connection reset. The server may be under load. "
        "Please try again."
    ),
    ErrorCategory.UNREACHABLE_HOST: (
        "Cannot connect to Keycloak server. Please verify the server URL and ensure "
        "the server is running."
    ),
    ErrorCategory.ACCESS_DENIED: (
        "Access denied. The admin user may lack sufficient permissions for this operation."
    ),
    ErrorCategory.TLS_ERROR: (
        "SSL/TLS connection error. Please check certificate configuration and trust settings."
    ),
    ErrorCategory.OPERATION_FAILED: "Keycloak operation failed: {message}",
}


# urllib3 embeds object reprs like "<HTTPConnection object at 0x7f4013a4...>"
_ADDRESS = re.compile(r"0x[0-9a-f]+")


def match_category(message: str) -> ErrorCategory:
    """Return the first category whose substrings occur in ``message``.

    Memory addresses are removed first so digits inside them cannot match.
    """
    text = _ADDRESS.sub("", message.lower())
    for patterns, category in CLASSIFICATION_RULES:
        if any(pattern in text for pattern in patterns):
            return category
    return ErrorCategory.OPERATION_FAILED


def classify_error(e: Exception) -> OperationError:
    """
    Convert an arbitrary failure into a classified OperationError.

    Only the operation_failed category carries the raw message; the
    other categories use their fixed template.

    Args:
        e: The exception raised by the admin API client

    Returns:
        OperationError with category and user-facing message
    """
    raw = str(e) or type(e).__name__
    category = match_category(raw)
    message = CATEGORY_MESSAGES[category].format(message=raw)
    return OperationError(
        message,
        category=category,
        details={"error_type": type(e).__name__},
    )
