"""Tools for listing, creating and editing teams."""

import dataclasses
import json

from .schema import TOOL_CREATE_TEAM, TOOL_LIST_TEAMS, TOOL_UPDATE_TEAM_MEMBERS, TOOL_UPDATE_TEAM_NAME
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


def add_team_features(server):
    """Register the team tools on ``server``."""
    server.add_tool_if_exists(TOOL_LIST_TEAMS, handle_get_teams)
    if server.read_only:
        return
    server.add_tool_if_exists(TOOL_CREATE_TEAM, handle_create_team)
    server.add_tool_if_exists(TOOL_UPDATE_TEAM_NAME, handle_update_team_name)
    server.add_tool_if_exists(TOOL_UPDATE_TEAM_MEMBERS, handle_update_team_members)


def handle_create_team(client, arguments):
    """Create a team and report its ID."""
    args = ToolArguments(arguments)
    name = args.get_string("name", True)
    try:
        team_id = client.create_team(name)
    except Exception as exc:
        raise ToolError(f"failed to create team: {exc}") from exc
    return f"Team created successfully with ID: {team_id}"


def handle_get_teams(client, arguments):
    """Return all teams as JSON."""
    try:
        teams = client.get_teams()
    except Exception as exc:
        raise ToolError(f"failed to get teams: {exc}") from exc
    return _to_json(teams, "teams")


def handle_update_team_name(client, arguments):
    """Rename a team."""
    args = ToolArguments(arguments)
    team_id = args.get_int("id", True)
    name = args.get_string("name", True)
    try:
        client.update_team_name(team_id, name)
    except Exception as exc:
        raise ToolError(f"failed to update team. Error: {exc}") from exc
    return "Team updated successfully"


def handle_update_team_members(client, arguments):
    """Replace the members of a team."""
    args = ToolArguments(arguments)
    team_id = args.get_int("id", True)
    user_ids = args.get_array_of_integers("userIds", True)
    try:
        client.update_team_members(team_id, user_ids)
    except Exception as exc:
        raise ToolError(f"failed to update team members. Error: {exc}") from exc
    return "Team members updated successfully"