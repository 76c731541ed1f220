"""Tool that reports the Portainer server settings."""

import dataclasses
import json

from .schema import TOOL_GET_SETTINGS
from .utils import ToolError


def _encode(value):
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"cannot encode {type(value).__name__}")


def add_settings_features(server):
    """Register the settings tool on ``server``."""
    server.add_tool_if_exists(TOOL_GET_SETTINGS, handle_get_settings)


def handle_get_settings(client, arguments):
    """Return the Portainer settings as JSON."""
    try:
        settings = client.get_settings()
    except Exception as exc:
        raise ToolError(f"failed to get settings: {exc}") from exc
    try:
        return json.dumps(settings, default=_encode)
    except (TypeError, ValueError) as exc:
        raise ToolError(f"failed to marshal settings: {exc}") from exc