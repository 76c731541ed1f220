import io
import json
import logging

import pytest

from portainermcp.server import (
    SUPPORTED_PORTAINER_VERSION,
    PortainerMCPServer,
    ServerError,
    create_server,
)
from portainermcp.utils import ToolError


class FakeClient:
    def __init__(self, version=SUPPORTED_PORTAINER_VERSION, error=None):
        self.version = version
        self.error = error
        self.calls = 0

    def get_version(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.version


TOOLS = {
    "test_tool": {
        "name": "test_tool",
        "description": "Test tool description",
        "inputSchema": {"type": "object", "properties": {}},
    }
}


def echo_handler(client, arguments):
    return f"echo {arguments.get('value', '')}"


def failing_handler(client, arguments):
    raise ToolError("failed to do it: api error")


def test_create_server_with_supported_version():
    client = FakeClient()
    server = create_server(client, TOOLS, read_only=True)
    assert server.client is client
    assert server.tools == TOOLS
    assert server.read_only is True
    assert client.calls == 1


def test_create_server_connection_error():
    client = FakeClient(error=RuntimeError("connection error"))
    with pytest.raises(ServerError, match="failed to get Portainer server version: connection error"):
        create_server(client, TOOLS)
    assert client.calls == 1


def test_create_server_unsupported_version():
    with pytest.raises(ServerError) as info:
        create_server(FakeClient(version="2.0.0"), TOOLS)
    assert str(info.value) == (
        "unsupported Portainer server version: 2.0.0, only version 2.28.1 is supported"
    )


def test_add_existing_tool_is_callable():
    server = PortainerMCPServer(FakeClient(), TOOLS)
    server.add_tool_if_exists("test_tool", echo_handler)
    assert server.call_tool("test_tool", {"value": "hi"}) == "echo hi"


def test_add_missing_tool_is_not_registered(caplog):
    server = PortainerMCPServer(FakeClient(), TOOLS)
    with caplog.at_level(logging.WARNING):
        server.add_tool_if_exists("nonexistent_tool", echo_handler)
    assert "Tool nonexistent_tool not found" in caplog.text
    with pytest.raises(ToolError, match="tool not found: nonexistent_tool"):
        server.call_tool("nonexistent_tool", {})


def test_handler_receives_client():
    client = FakeClient()
    server = PortainerMCPServer(client, TOOLS)
    server.add_tool_if_exists("test_tool", lambda c, a: c.get_version())
    assert server.call_tool("test_tool") == SUPPORTED_PORTAINER_VERSION


def _run(server, messages):
    reader = io.StringIO("".join(
        (m if isinstance(m, str) else json.dumps(m)) + "\n" for m in messages
    ))
    writer = io.StringIO()
    server.serve(reader, writer)
    return [json.loads(line) for line in writer.getvalue().splitlines()]


def test_serve_initialize_and_list():
    server = PortainerMCPServer(FakeClient(), TOOLS)
    server.add_tool_if_exists("test_tool", echo_handler)
    responses = _run(
        server,
        [
            {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}},
            {"jsonrpc": "2.0", "method": "notifications/initialized"},
            {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
        ],
    )
    assert len(responses) == 2
    assert responses[0]["result"]["serverInfo"] == {"name": "Portainer MCP Server", "version": "0.1.0"}
    assert responses[1]["id"] == 2
    assert [tool["name"] for tool in responses[1]["result"]["tools"]] == ["test_tool"]


def test_serve_tool_call_success_and_failure():
    tools = dict(TOOLS, bad_tool={"name": "bad_tool", "description": "", "inputSchema": {}})
    server = PortainerMCPServer(FakeClient(), tools)
    server.add_tool_if_exists("test_tool", echo_handler)
    server.add_tool_if_exists("bad_tool", failing_handler)
    responses = _run(
        server,
        [
            {"jsonrpc": "2.0", "id": 1, "method": "tools/call",
             "params": {"name": "test_tool", "arguments": {"value": "x"}}},
            {"jsonrpc": "2.0", "id": 2, "method": "tools/call", "params": {"name": "bad_tool"}},
            {"jsonrpc": "2.0", "id": 3, "method": "tools/call", "params": {"name": "nope"}},
        ],
    )
    assert responses[0]["result"] == {"content": [{"type": "text", "text": "echo x"}]}
    assert responses[1]["error"]["message"] == "failed to do it: api error"
    assert responses[1]["error"]["code"] == -32603
    assert responses[2]["error"]["code"] == -32602


def test_serve_bad_input():
    server = PortainerMCPServer(FakeClient(), TOOLS)
    responses = _run(
        server,
        [
            "{not json",
            {"jsonrpc": "2.0", "id": 5, "method": "unknown/method"},
            {"jsonrpc": "2.0", "id": 6, "method": "ping"},
        ],
    )
    assert responses[0]["error"]["code"] == -32700
    assert responses[1]["error"]["code"] == -32601
    assert responses[2] == {"jsonrpc": "2.0", "id": 6, "result": {}}