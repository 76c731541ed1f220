"""Tools for listing environments and editing their tags and accesses."""

from .access_group import _call, _list_json, _parse_accesses, _register
from .schema import (
    TOOL_LIST_ENVIRONMENTS,
    TOOL_UPDATE_ENVIRONMENT_TAGS,
    TOOL_UPDATE_ENVIRONMENT_TEAM_ACCESSES,
    TOOL_UPDATE_ENVIRONMENT_USER_ACCESSES,
)
from .utils import ToolArguments


def add_environment_features(server):
    """Register the environment tools on ``server``."""
    _register(
        server,
        [(TOOL_LIST_ENVIRONMENTS, handle_get_environments)],
        [
            (TOOL_UPDATE_ENVIRONMENT_TAGS, handle_update_environment_tags),
            (TOOL_UPDATE_ENVIRONMENT_USER_ACCESSES, handle_update_environment_user_accesses),
            (TOOL_UPDATE_ENVIRONMENT_TEAM_ACCESSES, handle_update_environment_team_accesses),
        ],
    )


def handle_get_environments(client, arguments):
    """Return all environments as JSON."""
    return _list_json(client.get_environments, "environments")


def handle_update_environment_tags(client, arguments):
    """Replace the tags of an environment."""
    args = ToolArguments(arguments)
    environment_id = args.get_int("id", True)
    tag_ids = args.get_array_of_integers("tagIds", True)
    _call("failed to update environment tags", client.update_environment_tags, environment_id, tag_ids)
    return "Environment tags updated successfully"


def _update_accesses(client_method, arguments, field, kind):
    args = ToolArguments(arguments)
    environment_id = args.get_int("id", True)
    accesses = _parse_accesses(args, field, kind)
    _call(f"failed to update environment {kind} accesses", client_method, environment_id, accesses)
    return f"Environment {kind} accesses updated successfully"


def handle_update_environment_user_accesses(client, arguments):
    """Replace the user accesses of an environment."""
    return _update_accesses(
        client.update_environment_user_accesses, arguments, "userAccesses", "user"
    )


def handle_update_environment_team_accesses(client, arguments):
    """Replace the team accesses of an environment."""
    return _update_accesses(
        client.update_environment_team_accesses, arguments, "teamAccesses", "team"
    )