"""
Operation registry and dispatcher.

Each tool is an Operation record (name, input model, handler) held in a
name -> record mapping. Dispatching a call is a table lookup followed by
validation and exactly one execution through the session manager:

    lookup -> validate -> execute -> respond
"""
from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from keycloak import KeycloakAdmin
from pydantic import ValidationError as PydanticValidationError

from .errors import (
    ErrorCategory,
    OperationError,
    ToolError,
    UnknownOperationError,
    ValidationError,
)
from .models import BaseToolInput
from .observability import get_logger, observe_tool
from .session import KeycloakSessionManager

Handler = Callable[[KeycloakAdmin, Any], str]


@dataclass(frozen=True)
class Operation:
    """A named, schema-validated unit of work exposed as an MCP tool."""
    name: str
    domain: str
    title: str
    description: str
    input_model: type[BaseToolInput]
    handler: Handler
    read_only: bool = False
    destructive: bool = False
    idempotent: bool = False

    def validate(self, arguments: dict[str, Any] | None) -> BaseToolInput:
        """Validate raw arguments against the declared input shape.

        Raises:
            ValidationError: Naming this operation and every violation
        """
        try:
            return self.input_model.model_validate(arguments or {})
        except PydanticValidationError as e:
            raise ValidationError(self.name, _violations(e)) from e

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)


def _violations(error: PydanticValidationError) -> list[str]:
    violations = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        violations.append(f"{location}: {item['msg']}")
    return violations


class OperationRegistry:
    """Static catalogue of operations, filled once at startup."""

    def __init__(self):
        self._operations: dict[str, Operation] = {}

    def register(self, operation: Operation) -> Operation:
        if operation.name in self._operations:
            raise ValueError(f"Operation already registered: {operation.name}")
        self._operations[operation.name] = operation
        return operation

    def operation(
        self,
        name: str,
        domain: str,
        title: str,
        input_model: type[BaseToolInput],
        read_only: bool = False,
        destructive: bool = False,
        idempotent: bool = False,
    ) -> Callable[[Handler], Handler]:
        """Decorator registering a handler; the docstring becomes the description.

        Example:
            @registry.operation("list-users", "users", "List Users", ListUsersInput,
                                read_only=True)
            def list_users(admin: KeycloakAdmin, params: ListUsersInput) -> str:
                ...
        """
        def decorator(handler: Handler) -> Handler:
            self.register(Operation(
                name=name,
                domain=domain,
                title=title,
                description=(handler.__doc__ or title).strip().splitlines()[0],
                input_model=input_model,
                handler=handler,
                read_only=read_only,
                destructive=destructive,
                idempotent=idempotent,
            ))
            return handler

        return decorator

    def get(self, name: str) -> Operation:
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def names(self) -> list[str]:
        return list(self._operations)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._operations.values())

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations


class OperationDispatcher:
    """Routes {name, arguments} calls to registered operations."""

    def __init__(self, registry: OperationRegistry, sessions: KeycloakSessionManager):
        self._registry = registry
        self._sessions = sessions
        self._logger = get_logger("keycloak-mcp.dispatcher")

    async def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """
        Execute one tool call.

        Args:
            name: Operation name (e.g. "create-user")
            arguments: Raw argument bag from the caller

        Returns:
            Confirmation text or serialized result payload

        Raises:
            UnknownOperationError: Name is not registered
            ValidationError: Arguments do not match the declared shape
            AuthenticationError: No admin session could be created
            NotFoundError: A prerequisite lookup found nothing
            OperationError: The admin API call failed (classified)
        """
        try:
            operation = self._registry.get(name)
            params = operation.validate(arguments)
        except ToolError as e:
            self._logger.warning("Rejected tool call", tool=name, **e.to_dict())
            raise

        async with observe_tool(name, operation.domain, dict(arguments or {})):
            try:
                return await self._sessions.execute(
                    lambda admin: operation.handler(admin, params),
                    name=name,
                )
            except ToolError as e:
                self._logger.warning("Tool call failed", tool=name, **e.to_dict())
                raise
            except Exception as e:
                self._logger.exception("Unexpected error executing tool", tool=name)
                raise OperationError(
                    f"Tool execution failed: {e}",
                    category=ErrorCategory.OPERATION_FAILED,
                ) from e
