"""
Tests for role management tools.
"""
from __future__ import annotations

import json

import pytest
from keycloak.exceptions import KeycloakGetError

from mcp_server_keycloak.core.errors import NotFoundError


@pytest.fixture
def admin_role():
    return {"id": "r-1", "name": "admin", "description": "Administrators", "composite": False}


class TestRealmRoles:
    """Tests for realm role CRUD."""

    @pytest.mark.asyncio
    async def test_list_roles(self, dispatcher, admin, admin_role):
        admin.get_realm_roles.return_value = [admin_role]

        text = await dispatcher.dispatch("list-roles", {"realm": "acme"})

        admin.change_current_realm.assert_called_once_with("acme")
        assert json.loads(text) == [admin_role]

    @pytest.mark.asyncio
    async def test_create_realm_role(self, dispatcher, admin):
        admin.create_realm_role.return_value = "auditor"

        text = await dispatcher.dispatch("create-role", {
            "realm": "acme",
            "roleName": "auditor",
            "description": "Read-only access",
        })

        admin.create_realm_role.assert_called_once_with(
            {"name": "auditor", "description": "Read-only access"}
        )
        admin.get_client_id.assert_not_called()
        prefix, payload = text.split(": ", 1)
        assert prefix == "Role created successfully"
        assert json.loads(payload) == {"roleName": "auditor"}

    @pytest.mark.asyncio
    async def test_update_realm_role_sends_new_name(self, dispatcher, admin):
        admin.update_realm_role.return_value = {}

        text = await dispatcher.dispatch("update-role", {
            "realm": "acme",
            "roleName": "viewer",
            "newName": "reader",
        })

        admin.update_realm_role.assert_called_once_with("viewer", {"name": "reader"})
        assert text == "Role viewer updated successfully: {}"

    @pytest.mark.asyncio
    async def test_delete_realm_role(self, dispatcher, admin):
        text = await dispatcher.dispatch("delete-role", {"realm": "acme", "roleName": "viewer"})

        admin.delete_realm_role.assert_called_once_with("viewer")
        assert text == "Role viewer deleted successfully from realm acme"


class TestClientRoles:
    """Tests for roles scoped to a client."""

    @pytest.mark.asyncio
    async def test_create_client_role(self, dispatcher, admin):
        admin.get_client_id.return_value = "c-internal"
        admin.create_client_role.return_value = "editor"

        await dispatcher.dispatch("create-role", {
            "realm": "acme",
            "roleName": "editor",
            "clientId": "web-app",
        })

        admin.get_client_id.assert_called_once_with("web-app")
        admin.create_client_role.assert_called_once_with("c-internal", {"name": "editor"})
        admin.create_realm_role.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_client_role(self, dispatcher, admin):
        admin.get_client_id.return_value = "c-internal"

        await dispatcher.dispatch("update-role", {
            "realm": "acme",
            "roleName": "editor",
            "description": "Can edit",
            "clientId": "web-app",
        })

        admin.update_client_role.assert_called_once_with(
            "c-internal", "editor", {"description": "Can edit"}
        )

    @pytest.mark.asyncio
    async def test_delete_client_role(self, dispatcher, admin):
        admin.get_client_id.return_value = "c-internal"

        await dispatcher.dispatch("delete-role", {
            "realm": "acme",
            "roleName": "editor",
            "clientId": "web-app",
        })

        admin.delete_client_role.assert_called_once_with("c-internal", "editor")
        admin.delete_realm_role.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_client_stops_before_mutation(self, dispatcher, admin):
        admin.get_client_id.return_value = None

        with pytest.raises(NotFoundError, match="Client web-app not found or invalid"):
            await dispatcher.dispatch("delete-role", {
                "realm": "acme",
                "roleName": "editor",
                "clientId": "web-app",
            })

        admin.delete_client_role.assert_not_called()


class TestRoleMappings:
    """Tests for assigning and removing realm roles."""

    @pytest.mark.asyncio
    async def test_assign_role(self, dispatcher, admin, admin_role):
        admin.get_realm_role.return_value = admin_role

        text = await dispatcher.dispatch("assign-role-to-user", {
            "realm": "acme",
            "userId": "u-1",
            "roleName": "admin",
        })

        admin.get_realm_role.assert_called_once_with("admin")
        admin.assign_realm_roles.assert_called_once_with("u-1", [{"id": "r-1", "name": "admin"}])
        assert text == "Role admin assigned to user u-1 in realm acme"

    @pytest.mark.asyncio
    async def test_remove_role(self, dispatcher, admin, admin_role):
        admin.get_realm_role.return_value = admin_role

        text = await dispatcher.dispatch("remove-role-from-user", {
            "realm": "acme",
            "userId": "u-1",
            "roleName": "admin",
        })

        admin.delete_realm_roles_of_user.assert_called_once_with(
            "u-1", [{"id": "r-1", "name": "admin"}]
        )
        assert text == "Role admin removed from user u-1 in realm acme"

    @pytest.mark.asyncio
    async def test_missing_role_stops_before_assignment(self, dispatcher, admin):
        admin.get_realm_role.side_effect = KeycloakGetError(
            error_message="Could not find role", response_code=404
        )

        with pytest.raises(NotFoundError, match="Role ghost not found or invalid"):
            await dispatcher.dispatch("assign-role-to-user", {
                "realm": "acme",
                "userId": "u-1",
                "roleName": "ghost",
            })

        admin.assign_realm_roles.assert_not_called()

    @pytest.mark.asyncio
    async def test_role_without_id_is_invalid(self, dispatcher, admin):
        admin.get_realm_role.return_value = {"name": "admin"}

        with pytest.raises(NotFoundError):
            await dispatcher.dispatch("remove-role-from-user", {
                "realm": "acme",
                "userId": "u-1",
                "roleName": "admin",
            })

        admin.delete_realm_roles_of_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_user_roles(self, dispatcher, admin, admin_role):
        admin.get_realm_roles_of_user.return_value = [admin_role]

        text = await dispatcher.dispatch("get-user-roles", {"realm": "acme", "userId": "u-1"})

        admin.get_realm_roles_of_user.assert_called_once_with("u-1")
        assert json.loads(text)[0]["name"] == "admin"
