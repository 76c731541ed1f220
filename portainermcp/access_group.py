"""Tools for access groups, plus the call and encoding helpers the tool modules share."""

import dataclasses
import json

from .schema import (
    TOOL_ADD_ENVIRONMENT_TO_ACCESS_GROUP,
    TOOL_CREATE_ACCESS_GROUP,
    TOOL_LIST_ACCESS_GROUPS,
    TOOL_REMOVE_ENVIRONMENT_FROM_ACCESS_GROUP,
    TOOL_UPDATE_ACCESS_GROUP_NAME,
    TOOL_UPDATE_ACCESS_GROUP_TEAM_ACCESSES,
    TOOL_UPDATE_ACCESS_GROUP_USER_ACCESSES,
)
from .utils import ToolArguments, ToolError, parse_access_map


def _encode(value):
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"cannot encode {type(value).__name__}")


def _to_json(value, what):
    try:
        return json.dumps(value, default=_encode)
    except (TypeError, ValueError) as exc:
        raise ToolError(f"failed to marshal {what}: {exc}") from exc


def _call(failure, method, *args):
    """Call a client method, turning any failure into a ToolError."""
    try:
        return method(*args)
    except Exception as exc:
        raise ToolError(f"{failure}: {exc}") from exc


def _list_json(method, what):
    """Fetch a list from the client and return it as JSON."""
    return _to_json(_call(f"failed to get {what}", method), what)


def _register(server, readers, writers):
    """Register reading tools always and writing tools unless read-only."""
    for name, handler in readers:
        server.add_tool_if_exists(name, handler)
    if server.read_only:
        return
    for name, handler in writers:
        server.add_tool_if_exists(name, handler)


def _parse_accesses(args, field, kind):
    entries = args.get_array_of_objects(field, True)
    try:
        return parse_access_map(entries)
    except ToolError as exc:
        raise ToolError(f"invalid {kind} accesses: {exc}") from exc


def add_access_group_features(server):
    """Register the access group tools on ``server``."""
    _register(
        server,
        [(TOOL_LIST_ACCESS_GROUPS, handle_get_access_groups)],
        [
            (TOOL_CREATE_ACCESS_GROUP, handle_create_access_group),
            (TOOL_UPDATE_ACCESS_GROUP_NAME, handle_update_access_group_name),
            (TOOL_UPDATE_ACCESS_GROUP_USER_ACCESSES, handle_update_access_group_user_accesses),
            (TOOL_UPDATE_ACCESS_GROUP_TEAM_ACCESSES, handle_update_access_group_team_accesses),
            (TOOL_ADD_ENVIRONMENT_TO_ACCESS_GROUP, handle_add_environment_to_access_group),
            (TOOL_REMOVE_ENVIRONMENT_FROM_ACCESS_GROUP, handle_remove_environment_from_access_group),
        ],
    )


def handle_get_access_groups(client, arguments):
    """Return all access groups as JSON."""
    return _list_json(client.get_access_groups, "access groups")


def handle_create_access_group(client, arguments):
    """Create an access group and report its ID."""
    args = ToolArguments(arguments)
    name = args.get_string("name", True)
    environment_ids = args.get_array_of_integers("environmentIds", False)
    group_id = _call(
        "failed to create access group", client.create_access_group, name, environment_ids
    )
    return f"Access group created successfully with ID: {group_id}"


def handle_update_access_group_name(client, arguments):
    """Rename an access group."""
    args = ToolArguments(arguments)
    group_id = args.get_int("id", True)
    name = args.get_string("name", True)
    _call("failed to update access group name", client.update_access_group_name, group_id, name)
    return "Access group name updated successfully"


def _update_accesses(client_method, arguments, field, kind):
    args = ToolArguments(arguments)
    group_id = args.get_int("id", True)
    accesses = _parse_accesses(args, field, kind)
    _call(f"failed to update access group {kind} accesses", client_method, group_id, accesses)
    return f"Access group {kind} accesses updated successfully"


def handle_update_access_group_user_accesses(client, arguments):
    """Replace the user accesses of an access group."""
    return _update_accesses(
        client.update_access_group_user_accesses, arguments, "userAccesses", "user"
    )


def handle_update_access_group_team_accesses(client, arguments):
    """Replace the team accesses of an access group."""
    return _update_accesses(
        client.update_access_group_team_accesses, arguments, "teamAccesses", "team"
    )


def _membership(arguments):
    args = ToolArguments(arguments)
    return args.get_int("id", True), args.get_int("environmentId", True)


def handle_add_environment_to_access_group(client, arguments):
    """Add an environment to an access group."""
    group_id, environment_id = _membership(arguments)
    _call(
        "failed to add environment to access group",
        client.add_environment_to_access_group,
        group_id,
        environment_id,
    )
    return "Environment added to access group successfully"


def handle_remove_environment_from_access_group(client, arguments):
    """Remove an environment from an access group."""
    group_id, environment_id = _membership(arguments)
    _call(
        "failed to remove environment from access group",
        client.remove_environment_from_access_group,
        group_id,
        environment_id,
    )
    return "Environment removed from access group successfully"