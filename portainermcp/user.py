"""Tools for listing users and changing their role."""

import dataclasses
import json

from .schema import ALL_USER_ROLES, TOOL_LIST_USERS, TOOL_UPDATE_USER_ROLE, is_valid_user_role
from .utils import ToolArguments, ToolError


def _encode(value):
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"cannot encode {type(value).__name__}")


def _to_json(value, what):
    try:
        return json.dumps(value, default=_encode)
    except (TypeError, ValueError) as exc:
        raise ToolError(f"failed to marshal {what}: {exc}") from exc


def add_user_features(server):
    """Register the user tools on ``server``."""
    server.add_tool_if_exists(TOOL_LIST_USERS, handle_get_users)
    if not server.read_only:
        server.add_tool_if_exists(TOOL_UPDATE_USER_ROLE, handle_update_user_role)


def handle_get_users(client, arguments):
    """Return all users as JSON."""
    try:
        users = client.get_users()
    except Exception as exc:
        raise ToolError(f"failed to get users: {exc}") from exc
    return _to_json(users, "users")


def handle_update_user_role(client, arguments):
    """Change the role of a user."""
    args = ToolArguments(arguments)
    user_id = args.get_int("id", True)
    role = args.get_string("role", True)
    if not is_valid_user_role(role):
        roles = " ".join(ALL_USER_ROLES)
        raise ToolError(f"invalid role {role}: must be one of: [{roles}]")
    try:
        client.update_user_role(user_id, role)
    except Exception as exc:
        raise ToolError(f"error updating user. Error: {exc}") from exc
    return "User updated successfully"