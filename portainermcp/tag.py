"""Tools for listing and creating environment tags."""

from .access_group import _call, _list_json, _register
from .schema import TOOL_CREATE_ENVIRONMENT_TAG, TOOL_LIST_ENVIRONMENT_TAGS
from .utils import ToolArguments


def add_tag_features(server):
    """Register the tag tools on ``server``."""
    _register(
        server,
        [(TOOL_LIST_ENVIRONMENT_TAGS, handle_get_environment_tags)],
        [(TOOL_CREATE_ENVIRONMENT_TAG, handle_create_environment_tag)],
    )


def handle_get_environment_tags(client, arguments):
    """Return all environment tags as JSON."""
    return _list_json(client.get_environment_tags, "environment tags")


def handle_create_environment_tag(client, arguments):
    """Create an environment tag and report its ID."""
    name = ToolArguments(arguments).get_string("name", True)
    tag_id = _call("error creating environment tag. Error", client.create_environment_tag, name)
    return f"Environment tag created successfully with ID: {tag_id}"