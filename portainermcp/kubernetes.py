"""Tool that forwards raw requests to the Kubernetes API of an environment."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .schema import TOOL_KUBERNETES_PROXY
from .utils import ToolArguments, ToolError, is_valid_http_method, parse_key_value_map


@dataclass
class KubernetesProxyRequestOptions:
    """A request to send to the Kubernetes API of one environment."""

    environment_id: int
    path: str
    method: str
    query_params: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


def add_kubernetes_proxy_features(server):
    """Register the Kubernetes proxy tool on ``server`` unless it is read-only."""
    if not server.read_only:
        server.add_tool_if_exists(TOOL_KUBERNETES_PROXY, handle_kubernetes_proxy)


def handle_kubernetes_proxy(client, arguments):
    """Send a request to the Kubernetes API and return the response body."""
    args = ToolArguments(arguments)

    environment_id = args.get_int("environmentId", True)

    method = args.get_string("method", True)
    if not is_valid_http_method(method):
        raise ToolError(f"invalid method: {method}")

    path = args.get_string("kubernetesAPIPath", True)
    if not path.startswith("/"):
        raise ToolError("kubernetesAPIPath must start with a leading slash")

    query_params = args.get_array_of_objects("queryParams", False)
    try:
        query_map = parse_key_value_map(query_params)
    except ToolError as exc:
        raise ToolError(f"invalid query params: {exc}") from exc

    headers = args.get_array_of_objects("headers", False)
    try:
        header_map = parse_key_value_map(headers)
    except ToolError as exc:
        raise ToolError(f"invalid headers: {exc}") from exc

    body = args.get_string("body", False)

    options = KubernetesProxyRequestOptions(
        environment_id=environment_id,
        path=path,
        method=method,
        query_params=query_map,
        headers=header_map,
        body=body or None,
    )

    try:
        response = client.proxy_kubernetes_request(options)
    except Exception as exc:
        raise ToolError(f"failed to send Kubernetes API request: {exc}") from exc

    try:
        raw = response.read()
    except Exception as exc:
        raise ToolError(f"failed to read Kubernetes API response: {exc}") from exc
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode("utf-8", errors="replace")
    return raw