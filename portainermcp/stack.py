"""Tools for listing, reading, creating and updating stacks."""

from .access_group import _call, _list_json, _register
from .schema import TOOL_CREATE_STACK, TOOL_GET_STACK_FILE, TOOL_LIST_STACKS, TOOL_UPDATE_STACK
from .utils import ToolArguments


def add_stack_features(server):
    """Register the stack tools on ``server``."""
    _register(
        server,
        [(TOOL_LIST_STACKS, handle_get_stacks), (TOOL_GET_STACK_FILE, handle_get_stack_file)],
        [(TOOL_CREATE_STACK, handle_create_stack), (TOOL_UPDATE_STACK, handle_update_stack)],
    )


def handle_get_stacks(client, arguments):
    """Return all stacks as JSON."""
    return _list_json(client.get_stacks, "stacks")


def handle_get_stack_file(client, arguments):
    """Return the compose file of a stack."""
    stack_id = ToolArguments(arguments).get_int("id", True)
    return _call("failed to get stack file. Error", client.get_stack_file, stack_id)


def handle_create_stack(client, arguments):
    """Create a stack and report its ID."""
    args = ToolArguments(arguments)
    name = args.get_string("name", True)
    file = args.get_string("file", True)
    group_ids = args.get_array_of_integers("environmentGroupIds", True)
    stack_id = _call("error creating stack. Error", client.create_stack, name, file, group_ids)
    return f"Stack created successfully with ID: {stack_id}"


def handle_update_stack(client, arguments):
    """Replace the file and environment groups of a stack."""
    args = ToolArguments(arguments)
    stack_id = args.get_int("id", True)
    file = args.get_string("file", True)
    group_ids = args.get_array_of_integers("environmentGroupIds", True)
    _call("error updating stack. Error", client.update_stack, stack_id, file, group_ids)
    return "Stack updated successfully"