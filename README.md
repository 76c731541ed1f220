# portainermcp

An MCP (Model Context Protocol) server that lets an AI assistant manage a
Portainer installation through a fixed set of tools: environments,
environment groups, access groups, tags, stacks, teams, users, settings, and
proxied Docker and Kubernetes API calls.

## What it offers

Each feature area has a registration function that adds its tools to a
`PortainerMCPServer`:

| Area               | Module                      | Registration function            | Read tools                   | Write tools |
|--------------------|-----------------------------|----------------------------------|------------------------------|-------------|
| Environments       | `portainermcp.environment`  | `add_environment_features`       | `listEnvironments`           | `updateEnvironmentTags`, `updateEnvironmentUserAccesses`, `updateEnvironmentTeamAccesses` |
| Environment groups | `portainermcp.group`        | `add_environment_group_features` | `listEnvironmentGroups`      | `createEnvironmentGroup`, `updateEnvironmentGroupName`, `updateEnvironmentGroupEnvironments`, `updateEnvironmentGroupTags` |
| Access groups      | `portainermcp.access_group` | `add_access_group_features`      | `listAccessGroups`           | `createAccessGroup`, `updateAccessGroupName`, `updateAccessGroupUserAccesses`, `updateAccessGroupTeamAccesses`, `addEnvironmentToAccessGroup`, `removeEnvironmentFromAccessGroup` |
| Tags               | `portainermcp.tag`          | `add_tag_features`               | `listEnvironmentTags`        | `createEnvironmentTag` |
| Stacks             | `portainermcp.stack`        | `add_stack_features`             | `listStacks`, `getStackFile` | `createStack`, `updateStack` |
| Teams              | `portainermcp.team`         | `add_team_features`              | `listTeams`                  | `createTeam`, `updateTeamName`, `updateTeamMembers` |
| Users              | `portainermcp.user`         | `add_user_features`              | `listUsers`                  | `updateUserRole` |
| Settings           | `portainermcp.settings`     | `add_settings_features`          | `getSettings`                | none |
| Docker proxy       | `portainermcp.docker`       | `add_docker_proxy_features`      | none                         | `dockerProxy` |
| Kubernetes proxy   | `portainermcp.kubernetes`   | `add_kubernetes_proxy_features`  | none                         | `kubernetesProxy` |

A tool is registered only when its name is a key of the tool definitions
handed to the server; otherwise a warning is logged and the tool is skipped.
When the server is read-only the write tools are never registered.

Every handler is a plain function `handle_...(client, arguments)` that
returns the tool's text result, so it can also be called on its own.

## Validation

`portainermcp.utils.ToolArguments` reads the arguments of a call. A required
argument that is missing raises `ToolError("<name> is required")`; an
argument of the wrong type raises an error such as `body must be a string`
or `queryParams must be an array`. Beyond that:

- access levels must be one of `environment_administrator`,
  `helpdesk_user`, `standard_user`, `readonly_user` or `operator_user`
  (`portainermcp.schema.AccessLevel`, checked by `is_valid_access_level`);
- user roles must be one of `admin`, `user` or `edge_admin`
  (`portainermcp.schema.UserRole`, checked by `is_valid_user_role`);
- proxied requests accept only `GET`, `POST`, `PUT`, `DELETE` and `HEAD`
  (`is_valid_http_method`), and their API path must start with `/`;
- access lists are `{"id": ..., "access": ...}` objects
  (`parse_access_map`), and query parameters and headers are
  `{"key": ..., "value": ...}` objects with string keys and values
  (`parse_key_value_map`).

A failed check or a failed client call raises `ToolError` with a message
describing the problem, for example
`failed to send Docker API request: <reason>`.

## The client

The server does not talk to Portainer itself: it calls methods on a client
object that you supply. `create_server` calls `client.get_version()` and
raises `ServerError` unless it returns `"2.28.1"`, or if the call fails.
The handlers call methods named after their operation, such as
`get_environments()`, `create_stack(name, file, environment_group_ids)`,
`update_user_role(user_id, role)` or `get_settings()`. Lists and settings
returned by the client are serialised to JSON; dataclass instances are
converted with `dataclasses.asdict`.

The proxy tools pass a `DockerProxyRequestOptions` or
`KubernetesProxyRequestOptions` dataclass (environment ID, path, method,
query parameters, headers, optional body) to
`client.proxy_docker_request` or `client.proxy_kubernetes_request`, and
return the text of whatever the response's `read()` yields.

## Using it

```python
import sys

from portainermcp.server import create_server
from portainermcp.environment import add_environment_features
from portainermcp.stack import add_stack_features
from portainermcp.settings import add_settings_features

tools = {
    "listEnvironments": {"name": "listEnvironments", "description": "List environments",
                         "inputSchema": {"type": "object", "properties": {}}},
    # ... one entry per tool you want to offer
}

server = create_server(client, tools, read_only=True)
add_environment_features(server)
add_stack_features(server)
add_settings_features(server)

server.serve(sys.stdin, sys.stdout)
```

`serve` reads one JSON-RPC message per line and writes one response per
line. It answers `initialize`, `ping`, `tools/list` (the definitions of the
registered tools) and `tools/call`; a tool that raises is reported as a
JSON-RPC error carrying the exception's message. Notifications (messages
without an `id`) get no response.

Tools can also be invoked directly:

```python
result = server.call_tool("listEnvironments", {})
```

## What it does not do

- There is no command-line program; the server is started from Python code
  as shown above.
- No Portainer API client is included; you provide the client object.
- Tool definitions are not read from a file; you pass them in as a mapping.
- Only the line-delimited JSON-RPC subset listed above is served over the
  given streams; there is no network transport.

## Running the tests

Install the package with its `test` extra and run pytest from the project
directory.