"""Tools for listing, creating and editing environment groups."""

from .access_group import _call, _list_json, _register
from .schema import (
    TOOL_CREATE_ENVIRONMENT_GROUP,
    TOOL_LIST_ENVIRONMENT_GROUPS,
    TOOL_UPDATE_ENVIRONMENT_GROUP_ENVIRONMENTS,
    TOOL_UPDATE_ENVIRONMENT_GROUP_NAME,
    TOOL_UPDATE_ENVIRONMENT_GROUP_TAGS,
)
from .utils import ToolArguments


def add_environment_group_features(server):
    """Register the environment group tools on ``server``."""
    _register(
        server,
        [(TOOL_LIST_ENVIRONMENT_GROUPS, handle_get_environment_groups)],
        [
            (TOOL_CREATE_ENVIRONMENT_GROUP, handle_create_environment_group),
            (TOOL_UPDATE_ENVIRONMENT_GROUP_NAME, handle_update_environment_group_name),
            (TOOL_UPDATE_ENVIRONMENT_GROUP_ENVIRONMENTS, handle_update_environment_group_environments),
            (TOOL_UPDATE_ENVIRONMENT_GROUP_TAGS, handle_update_environment_group_tags),
        ],
    )


def handle_get_environment_groups(client, arguments):
    """Return all environment groups as JSON."""
    return _list_json(client.get_environment_groups, "environment groups")


def handle_create_environment_group(client, arguments):
    """Create an environment group and report its ID."""
    args = ToolArguments(arguments)
    name = args.get_string("name", True)
    environment_ids = args.get_array_of_integers("environmentIds", True)
    group_id = _call(
        "error creating environment group. Error",
        client.create_environment_group,
        name,
        environment_ids,
    )
    return f"Environment group created successfully with ID: {group_id}"


def handle_update_environment_group_name(client, arguments):
    """Rename an environment group."""
    args = ToolArguments(arguments)
    group_id = args.get_int("id", True)
    name = args.get_string("name", True)
    _call(
        "failed to update environment group name",
        client.update_environment_group_name,
        group_id,
        name,
    )
    return "Environment group name updated successfully"


def _update_members(client_method, arguments, field, what):
    args = ToolArguments(arguments)
    group_id = args.get_int("id", True)
    name = args.get_string("name", True)
    ids = args.get_array_of_integers(field, True)
    _call(f"failed to update environment group {what}", client_method, group_id, name, ids)
    return f"Environment group {what} updated successfully"


def handle_update_environment_group_environments(client, arguments):
    """Replace the environments of an environment group."""
    return _update_members(
        client.update_environment_group_environments, arguments, "environmentIds", "environments"
    )


def handle_update_environment_group_tags(client, arguments):
    """Replace the tags of an environment group."""
    return _update_members(client.update_environment_group_tags, arguments, "tagIds", "tags")