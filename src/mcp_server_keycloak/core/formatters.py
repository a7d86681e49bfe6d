"""
Response formatting utilities for consistent output.

Admin API payloads are returned to the caller as indented JSON, optionally
prefixed with a confirmation sentence.
"""
from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel


class JSONFormatter:
    """JSON-specific formatting utilities."""

    @staticmethod
    def format(data: Any, indent: int = 2) -> str:
        """Format data as JSON string."""
        def default_serializer(obj: Any) -> Any:
            if isinstance(obj, bytes):
                return obj.decode("utf-8", errors="replace")
            if isinstance(obj, datetime):
                return obj.isoformat()
            if isinstance(obj, BaseModel):
                return obj.model_dump(by_alias=True)
            if isinstance(obj, Enum):
                return obj.value
            return str(obj)

        return json.dumps(data, indent=indent, default=default_serializer)


def format_payload(data: Any) -> str:
    """Serialize an admin API result for the caller."""
    return JSONFormatter.format(data)


def format_confirmation(message: str, data: Any = None) -> str:
    """
    Format a confirmation for a mutating operation.

    Args:
        message: Confirmation sentence
        data: Result returned by the admin API

    Returns:
        Confirmation text
    """
    return f"{message}: {format_payload(data)}"
