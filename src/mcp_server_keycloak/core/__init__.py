"""
Core infrastructure modules for Keycloak MCP Server.

This package contains:
- session: Per-operation authenticated admin sessions with retry
- dispatcher: Operation registry and validated dispatch
- errors: Structured errors and failure classification
- formatters: Response formatting utilities
- models: Base Pydantic input models
- observability: Structured logging
"""

from .dispatcher import Operation, OperationDispatcher, OperationRegistry
from .errors import (
    CATEGORY_MESSAGES,
    CLASSIFICATION_RULES,
    AuthenticationError,
    ErrorCategory,
    NotFoundError,
    OperationError,
    ToolError,
    UnknownOperationError,
    ValidationError,
    classify_error,
)
from .formatters import JSONFormatter, format_confirmation, format_payload
from .models import BaseToolInput, RealmInput, UserInput
from .observability import get_logger, init_observability, observe_tool
from .session import AuthConfig, KeycloakSessionManager, connect_admin

__all__ = [
    # Session
    "AuthConfig",
    "KeycloakSessionManager",
    "connect_admin",
    # Dispatch
    "Operation",
    "OperationDispatcher",
    "OperationRegistry",
    # Errors
    "CATEGORY_MESSAGES",
    "CLASSIFICATION_RULES",
    "AuthenticationError",
    "ErrorCategory",
    "NotFoundError",
    "OperationError",
    "ToolError",
    "UnknownOperationError",
    "ValidationError",
    "classify_error",
    # Formatters
    "JSONFormatter",
    "format_confirmation",
    "format_payload",
    # Models
    "BaseToolInput",
    "RealmInput",
    "UserInput",
    # Observability
    "get_logger",
    "init_observability",
    "observe_tool",
]
