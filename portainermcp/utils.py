"""Argument parsing and validation helpers shared by the tool handlers."""

from collections.abc import Mapping

from .schema import is_valid_access_level

VALID_HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "HEAD")


class ToolError(Exception):
    """Raised when a tool call cannot be completed."""


def _format_value(value):
    """Render a decoded JSON value the way error messages show it."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ToolArguments:
    """Typed access to the arguments of a tool call."""

    def __init__(self, arguments=None):
        self._arguments = dict(arguments or {})

    def _lookup(self, name, required):
        value = self._arguments.get(name)
        if value is None and required:
            raise ToolError(f"{name} is required")
        return value

    def get_string(self, name, required=False):
        """Return a string argument, or "" when optional and absent."""
        value = self._lookup(name, required)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ToolError(f"{name} must be a string")
        return value

    def get_int(self, name, required=False):
        """Return a numeric argument truncated to an int, or 0 when absent."""
        value = self._lookup(name, required)
        if value is None:
            return 0
        if not _is_number(value):
            raise ToolError(f"{name} must be a number")
        return int(value)

    def get_array_of_integers(self, name, required=False):
        """Return a list of ints, or [] when optional and absent."""
        value = self._lookup(name, required)
        if value is None:
            return []
        if not isinstance(value, list):
            raise ToolError(f"{name} must be an array")
        if not all(_is_number(item) for item in value):
            raise ToolError(f"{name} must be an array of numbers")
        return [int(item) for item in value]

    def get_array_of_objects(self, name, required=False):
        """Return a list argument, or [] when optional and absent."""
        value = self._lookup(name, required)
        if value is None:
            return []
        if not isinstance(value, list):
            raise ToolError(f"{name} must be an array")
        return list(value)


def parse_access_map(entries):
    """Turn ``[{"id": n, "access": level}, ...]`` into ``{n: level}``."""
    access_map = {}
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise ToolError(f"invalid access entry: {_format_value(entry)}")
        entry_id = entry.get("id")
        if not _is_number(entry_id):
            raise ToolError(f"invalid ID: {_format_value(entry_id)}")
        access = entry.get("access")
        if not isinstance(access, str):
            raise ToolError(f"invalid access: {_format_value(access)}")
        if not is_valid_access_level(access):
            raise ToolError(f"invalid access level: {access}")
        access_map[int(entry_id)] = access
    return access_map


def parse_key_value_map(items):
    """Turn ``[{"key": k, "value": v}, ...]`` into ``{k: v}``."""
    result = {}
    for item in items:
        if not isinstance(item, Mapping):
            raise ToolError(f"invalid item: {_format_value(item)}")
        key = item.get("key")
        if not isinstance(key, str):
            raise ToolError(f"invalid key: {_format_value(key)}")
        value = item.get("value")
        if not isinstance(value, str):
            raise ToolError(f"invalid value: {_format_value(value)}")
        result[key] = value
    return result


def is_valid_http_method(method):
    """Return True for the HTTP methods the proxy tools accept."""
    return method in VALID_HTTP_METHODS