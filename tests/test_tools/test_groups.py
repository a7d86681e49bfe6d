"""
Tests for group management tools.
"""
from __future__ import annotations

import json

import pytest

from mcp_server_keycloak.core.errors import ValidationError


class TestGroupTools:
    """Tests for group operations."""

    @pytest.mark.asyncio
    async def test_create_top_level_group(self, dispatcher, admin):
        admin.create_group.return_value = "g-1"

        text = await dispatcher.dispatch("create-group", {"realm": "acme", "name": "engineering"})

        admin.change_current_realm.assert_called_once_with("acme")
        admin.create_group.assert_called_once_with({"name": "engineering"}, parent=None)
        prefix, payload = text.split(": ", 1)
        assert prefix == "Group created successfully"
        assert json.loads(payload) == {"id": "g-1"}

    @pytest.mark.asyncio
    async def test_create_child_group(self, dispatcher, admin):
        await dispatcher.dispatch("create-group", {
            "realm": "acme",
            "name": "backend",
            "parentId": "g-1",
        })

        admin.create_group.assert_called_once_with({"name": "backend"}, parent="g-1")

    @pytest.mark.asyncio
    async def test_update_group(self, dispatcher, admin):
        admin.update_group.return_value = {}

        text = await dispatcher.dispatch("update-group", {
            "realm": "acme",
            "groupId": "g-1",
            "name": "eng",
        })

        admin.update_group.assert_called_once_with("g-1", {"name": "eng"})
        assert text == "Group g-1 updated successfully: {}"

    @pytest.mark.asyncio
    async def test_delete_group(self, dispatcher, admin):
        text = await dispatcher.dispatch("delete-group", {"realm": "acme", "groupId": "g-1"})

        admin.delete_group.assert_called_once_with("g-1")
        assert text == "Group g-1 deleted successfully from realm acme"

    @pytest.mark.asyncio
    async def test_list_groups(self, dispatcher, admin):
        admin.get_groups.return_value = [{"id": "g-1", "name": "engineering", "subGroups": []}]

        text = await dispatcher.dispatch("list-groups", {"realm": "acme"})

        assert json.loads(text)[0]["name"] == "engineering"


class TestManageUserGroups:
    """Tests for manage-user-groups."""

    @pytest.mark.asyncio
    async def test_add(self, dispatcher, admin):
        text = await dispatcher.dispatch("manage-user-groups", {
            "realm": "acme",
            "userId": "u-1",
            "groupId": "g-1",
            "action": "add",
        })

        admin.group_user_add.assert_called_once_with("u-1", "g-1")
        admin.group_user_remove.assert_not_called()
        assert text == "User u-1 added to group g-1 in realm acme"

    @pytest.mark.asyncio
    async def test_remove(self, dispatcher, admin):
        text = await dispatcher.dispatch("manage-user-groups", {
            "realm": "acme",
            "userId": "u-1",
            "groupId": "g-1",
            "action": "remove",
        })

        admin.group_user_remove.assert_called_once_with("u-1", "g-1")
        assert text == "User u-1 removed from group g-1 in realm acme"

    @pytest.mark.asyncio
    async def test_unknown_action(self, dispatcher, admin, session_factory):
        with pytest.raises(ValidationError, match="action"):
            await dispatcher.dispatch("manage-user-groups", {
                "realm": "acme",
                "userId": "u-1",
                "groupId": "g-1",
                "action": "move",
            })

        session_factory.assert_not_called()
