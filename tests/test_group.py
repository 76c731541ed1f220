import json
from unittest.mock import Mock

import pytest

from portainermcp.group import (
    add_environment_group_features,
    handle_create_environment_group,
    handle_get_environment_groups,
    handle_update_environment_group_environments,
    handle_update_environment_group_name,
    handle_update_environment_group_tags,
)
from portainermcp.server import PortainerMCPServer
from portainermcp.utils import ToolError

ALL_TOOLS = [
    "listEnvironmentGroups",
    "createEnvironmentGroup",
    "updateEnvironmentGroupName",
    "updateEnvironmentGroupEnvironments",
    "updateEnvironmentGroupTags",
]


def test_get_environment_groups_success():
    groups = [{"ID": 1, "Name": "group1"}, {"ID": 2, "Name": "group2"}]
    client = Mock()
    client.get_environment_groups.return_value = groups
    assert json.loads(handle_get_environment_groups(client, {})) == groups


def test_get_environment_groups_api_error():
    client = Mock()
    client.get_environment_groups.side_effect = RuntimeError("api error")
    with pytest.raises(ToolError, match="failed to get environment groups: api error"):
        handle_get_environment_groups(client, {})


def test_create_environment_group_success():
    client = Mock()
    client.create_environment_group.return_value = 1
    result = handle_create_environment_group(
        client, {"name": "group1", "environmentIds": [1.0, 2.0, 3.0]}
    )
    assert "ID: 1" in result
    client.create_environment_group.assert_called_once_with("group1", [1, 2, 3])


def test_create_environment_group_api_error():
    client = Mock()
    client.create_environment_group.side_effect = RuntimeError("api error")
    with pytest.raises(ToolError, match="api error"):
        handle_create_environment_group(
            client, {"name": "group1", "environmentIds": [1.0, 2.0, 3.0]}
        )


@pytest.mark.parametrize(
    "arguments", [{"environmentIds": [1.0, 2.0, 3.0]}, {"name": "group1"}]
)
def test_create_environment_group_missing(arguments):
    client = Mock()
    with pytest.raises(ToolError, match="is required"):
        handle_create_environment_group(client, arguments)
    client.create_environment_group.assert_not_called()


def test_update_name_success():
    client = Mock()
    result = handle_update_environment_group_name(client, {"id": 1.0, "name": "newname"})
    assert "successfully" in result
    client.update_environment_group_name.assert_called_once_with(1, "newname")


def test_update_name_api_error():
    client = Mock()
    client.update_environment_group_name.side_effect = RuntimeError("api error")
    with pytest.raises(ToolError, match="api error"):
        handle_update_environment_group_name(client, {"id": 1.0, "name": "newname"})


@pytest.mark.parametrize("arguments", [{"name": "newname"}, {"id": 1.0}])
def test_update_name_missing(arguments):
    client = Mock()
    with pytest.raises(ToolError, match="is required"):
        handle_update_environment_group_name(client, arguments)
    client.update_environment_group_name.assert_not_called()


@pytest.mark.parametrize(
    "handler, field, method",
    [
        (
            handle_update_environment_group_environments,
            "environmentIds",
            "update_environment_group_environments",
        ),
        (handle_update_environment_group_tags, "tagIds", "update_environment_group_tags"),
    ],
)
class TestListUpdates:
    def test_success(self, handler, field, method):
        client = Mock()
        result = handler(client, {"id": 1.0, "name": "group1", field: [1.0, 2.0, 3.0]})
        assert "successfully" in result
        getattr(client, method).assert_called_once_with(1, "group1", [1, 2, 3])

    def test_api_error(self, handler, field, method):
        client = Mock()
        getattr(client, method).side_effect = RuntimeError("api error")
        with pytest.raises(ToolError, match="api error"):
            handler(client, {"id": 1.0, "name": "group1", field: [1.0, 2.0, 3.0]})

    @pytest.mark.parametrize("missing", ["id", "name", "list"])
    def test_missing(self, handler, field, method, missing):
        arguments = {"id": 1.0, "name": "group1", field: [1.0, 2.0, 3.0]}
        del arguments[field if missing == "list" else missing]
        client = Mock()
        with pytest.raises(ToolError, match="is required"):
            handler(client, arguments)
        getattr(client, method).assert_not_called()


def test_features_registered_when_writable():
    client = Mock()
    client.create_environment_group.return_value = 9
    server = PortainerMCPServer(client, {name: {"name": name} for name in ALL_TOOLS})
    add_environment_group_features(server)
    result = server.call_tool("createEnvironmentGroup", {"name": "g", "environmentIds": [1.0]})
    assert result == "Environment group created successfully with ID: 9"


def test_read_only_skips_write_tools():
    client = Mock()
    client.get_environment_groups.return_value = [{"ID": 2}]
    server = PortainerMCPServer(
        client, {name: {"name": name} for name in ALL_TOOLS}, read_only=True
    )
    add_environment_group_features(server)
    assert json.loads(server.call_tool("listEnvironmentGroups")) == [{"ID": 2}]
    with pytest.raises(ToolError, match="tool not found"):
        server.call_tool("updateEnvironmentGroupName", {"id": 1.0, "name": "n"})


def test_missing_tool_definition_not_registered():
    client = Mock()
    server = PortainerMCPServer(client, {"listEnvironmentGroups": {"name": "listEnvironmentGroups"}})
    add_environment_group_features(server)
    with pytest.raises(ToolError, match="tool not found"):
        server.call_tool("createEnvironmentGroup", {"name": "g", "environmentIds": []})