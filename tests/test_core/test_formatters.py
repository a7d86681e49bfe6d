"""
Tests for core formatters module.
"""
from __future__ import annotations

import json
from datetime import datetime

from mcp_server_keycloak.core.errors import ErrorCategory
from mcp_server_keycloak.core.formatters import (
    JSONFormatter,
    format_confirmation,
    format_payload,
)


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_two_space_indent(self):
        result = JSONFormatter.format({"id": "u-1"})
        assert result == '{\n  "id": "u-1"\n}'

    def test_special_types(self):
        data = {
            "when": datetime(2024, 1, 15, 10, 30),
            "raw": b"created",
            "category": ErrorCategory.NOT_FOUND,
        }
        parsed = json.loads(JSONFormatter.format(data))

        assert parsed["when"] == "2024-01-15T10:30:00"
        assert parsed["raw"] == "created"
        assert parsed["category"] == "not_found"


class TestConfirmation:
    """Tests for confirmation texts."""

    def test_payload(self):
        assert json.loads(format_payload([{"realm": "master"}])) == [{"realm": "master"}]

    def test_confirmation_with_data(self):
        text = format_confirmation("User created successfully", {"id": "u-1"})
        assert text == 'User created successfully: {\n  "id": "u-1"\n}'

