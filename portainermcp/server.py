"""The MCP server that exposes Portainer operations as tools."""

import json
import logging
import sys
from typing import Protocol

from .utils import ToolError

logger = logging.getLogger(__name__)

SUPPORTED_PORTAINER_VERSION = "2.28.1"
SERVER_NAME = "Portainer MCP Server"
SERVER_VERSION = "0.1.0"
PROTOCOL_VERSION = "2024-11-05"

_PARSE_ERROR = -32700
_INVALID_REQUEST = -32600
_METHOD_NOT_FOUND = -32601
_INVALID_PARAMS = -32602
_INTERNAL_ERROR = -32603


class ServerError(Exception):
    """Raised when the server cannot be set up."""


class PortainerClient(Protocol):
    """The calls the server makes against a Portainer instance."""

    def get_version(self): ...


class PortainerMCPServer:
    """Registers tool handlers and answers MCP requests over JSON lines."""

    def __init__(self, client, tools, read_only=False):
        self.client = client
        self.tools = dict(tools)
        self.read_only = read_only
        self._registered = {}

    def add_tool_if_exists(self, name, handler):
        """Register ``handler`` under ``name`` if the tool is defined."""
        tool = self.tools.get(name)
        if tool is None:
            logger.warning("Tool %s not found, will not be registered for MCP usage", name)
            return
        self._registered[name] = (tool, handler)

    def call_tool(self, name, arguments=None):
        """Run a registered tool and return its text result."""
        try:
            _, handler = self._registered[name]
        except KeyError:
            raise ToolError(f"tool not found: {name}") from None
        return handler(self.client, arguments or {})

    def serve(self, reader=None, writer=None):
        """Answer JSON-RPC messages, one per line, until the input ends."""
        reader = sys.stdin if reader is None else reader
        writer = sys.stdout if writer is None else writer
        for line in reader:
            line = line.strip()
            if not line:
                continue
            response = self._handle_line(line)
            if response is not None:
                writer.write(json.dumps(response) + "\n")
                writer.flush()

    def _handle_line(self, line):
        try:
            message = json.loads(line)
        except ValueError:
            return _error(None, _PARSE_ERROR, "parse error")
        if not isinstance(message, dict) or not isinstance(message.get("method"), str):
            request_id = message.get("id") if isinstance(message, dict) else None
            return _error(request_id, _INVALID_REQUEST, "invalid request")
        if "id" not in message:
            return None
        return self._dispatch(message["id"], message["method"], message.get("params") or {})

    def _dispatch(self, request_id, method, params):
        if method == "initialize":
            return _result(
                request_id,
                {
                    "protocolVersion": PROTOCOL_VERSION,
                    "capabilities": {
                        "tools": {},
                        "resources": {"subscribe": True, "listChanged": True},
                        "logging": {},
                    },
                    "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
                },
            )
        if method == "ping":
            return _result(request_id, {})
        if method == "tools/list":
            return _result(request_id, {"tools": [tool for tool, _ in self._registered.values()]})
        if method == "tools/call":
            name = params.get("name")
            if name not in self._registered:
                return _error(request_id, _INVALID_PARAMS, f"tool not found: {name}")
            try:
                text = self.call_tool(name, params.get("arguments"))
            except Exception as exc:  # any failure becomes an error response
                return _error(request_id, _INTERNAL_ERROR, str(exc))
            return _result(request_id, {"content": [{"type": "text", "text": text}]})
        return _error(request_id, _METHOD_NOT_FOUND, f"method not found: {method}")


def _result(request_id, result):
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def _error(request_id, code, message):
    return {"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}}


def create_server(client, tools, read_only=False):
    """Check the Portainer version and build a server around ``client``."""
    try:
        version = client.get_version()
    except Exception as exc:
        raise ServerError(f"failed to get Portainer server version: {exc}") from exc
    if version != SUPPORTED_PORTAINER_VERSION:
        raise ServerError(
            f"unsupported Portainer server version: {version}, "
            f"only version {SUPPORTED_PORTAINER_VERSION} is supported"
        )
    return PortainerMCPServer(client, tools, read_only=read_only)