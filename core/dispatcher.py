# =============================================================================
# core/dispatcher.py  —  Dispatcher (tool name + argument bag → one request)
# =============================================================================
#
# HOW ONE CALL FLOWS:
#
#   Received ──▶ Validated ──▶ Executed ──▶ Responded
#       │            │             │
#       ▼            ▼             ▼
#   MethodNotFound InvalidParams InternalError
#
#   1. Unknown tool name → MethodNotFoundError, before anything else.
#   2. The tool's validator narrows the bag (InvalidParamsError on failure).
#      No network traffic has happened yet.
#   3. The validated args are mapped to exactly one RequestDescriptor.
#   4. The HTTP collaborator executes it.  ANY failure from here on is
#      rewrapped once as FirewallInternalError; 4xx, 5xx and transport
#      errors all look the same to the agent.  Nothing is retried.
#
# The dispatcher keeps no state between calls: the same invocation always
# builds the same RequestDescriptor.
# =============================================================================

import logging
from typing import Any, Callable, Optional, Protocol

from core.catalog import list_tool_definitions
from core.client import PanosClient
from core.config import FirewallConfig
from core.errors import FirewallInternalError, InvalidParamsError, MethodNotFoundError
from core.models import RequestDescriptor, ToolDefinition, ToolInvocation, ToolOutcome
from core.resources import is_resource_type
from core.validators import (
    validate_list_resources,
    validate_multi_move_clone,
    validate_view_config_node_values,
)

logger = logging.getLogger(__name__)


class FirewallClient(Protocol):
    """Anything that can execute a RequestDescriptor and return JSON."""

    def execute(self, request: RequestDescriptor) -> Any: ...


# -----------------------------------------------------------------------------
# Request builders — one per tool, validated args in, descriptor out
# -----------------------------------------------------------------------------
def _system_info_request(arguments: Any) -> RequestDescriptor:
    # Takes no arguments; whatever was passed is ignored.
    return RequestDescriptor(method="GET", path="/Device/VirtualSystems")


def _list_resources_request(arguments: Any) -> RequestDescriptor:
    args = validate_list_resources(arguments)
    if not is_resource_type(args.category, args.resource_type):
        raise InvalidParamsError(
            f"Invalid resource type for category {args.category}: {args.resource_type}"
        )
    # The REST API namespaces by type only; the category is not in the path.
    return RequestDescriptor(method="GET", path=f"/Objects/{args.resource_type}")


def _view_config_node_request(arguments: Any) -> RequestDescriptor:
    args = validate_view_config_node_values(arguments)
    return RequestDescriptor(method="GET", path="/config/xpath", query={"xpath": args.xpath})


_MOVE_CLONE_ENDPOINTS = {"move": "MultiMove", "clone": "MultiClone"}


def _multi_move_clone_request(arguments: Any) -> RequestDescriptor:
    args = validate_multi_move_clone(arguments)
    endpoint = _MOVE_CLONE_ENDPOINTS[args.action]
    return RequestDescriptor(
        method="POST",
        path=f"/Configuration/{endpoint}",
        body={"config_paths": list(args.config_paths), "new_location": args.new_location},
    )


_ROUTES: dict[str, Callable[[Any], RequestDescriptor]] = {
    "get_system_info": _system_info_request,
    "list_resources": _list_resources_request,
    "view_config_node_values": _view_config_node_request,
    "multi_move_clone_configuration": _multi_move_clone_request,
}


def supported_tools() -> list[str]:
    """Names the dispatcher routes, in catalog order."""
    return list(_ROUTES)


class Dispatcher:
    """Routes tool invocations to the firewall REST API."""

    def __init__(self, config: FirewallConfig, client: Optional[FirewallClient] = None):
        self.config = config
        self.client = client if client is not None else PanosClient(config)

    def list_tools(self) -> list[ToolDefinition]:
        return list_tool_definitions()

    def build_request(self, tool_name: str, arguments: Any = None) -> RequestDescriptor:
        """Validate the call and return the request it maps to.

        Pure: no network access.

        Raises:
            MethodNotFoundError: ``tool_name`` is not dispatchable.
            InvalidParamsError: the arguments don't fit the tool.
        """
        builder = _ROUTES.get(tool_name)
        if builder is None:
            raise MethodNotFoundError(f"Unknown tool: {tool_name}")
        return builder(arguments)

    def dispatch(self, tool_name: str, arguments: Any = None) -> ToolOutcome:
        """Run one tool call end to end and return the firewall's payload.

        Raises:
            MethodNotFoundError / InvalidParamsError: before any network call.
            FirewallInternalError: the request or response handling failed.
        """
        request = self.build_request(tool_name, arguments)
        logger.info("%s → %s %s", tool_name, request.method, request.path)

        try:
            payload = self.client.execute(request)
            outcome = ToolOutcome.from_payload(payload)
        except Exception as e:
            logger.warning("%s failed: %s", tool_name, e)
            raise FirewallInternalError(f"Palo Alto API error: {e}") from e

        return outcome

    def handle(self, invocation: ToolInvocation) -> ToolOutcome:
        return self.dispatch(invocation.tool_name, invocation.arguments)
