# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server for the Palo Alto firewall
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the tool catalog (core/catalog.py) over MCP and hands every
#   call to the Dispatcher (core/dispatcher.py).  No firewall logic lives
#   here; this is the translation layer between MCP and core/.
#
# HOW IT WORKS (the flow):
#   1. The agent asks for the tool list → it gets the catalog, schemas and all
#   2. The agent calls a tool by name with an argument object
#   3. FirewallTool.run() passes the RAW argument bag to the dispatcher
#   4. The dispatcher validates, calls the firewall, returns pretty JSON
#   5. Typed failures come back to the agent as tool errors
#
# TOOL REGISTRATION:
#   Each catalog entry is registered as a FirewallTool whose parameters are
#   the catalog schema verbatim.  The argument bag reaches the dispatcher
#   untouched; FastMCP does no per-argument coercion.
#
# RUNNING THIS SERVER:
#   PANOS_API_KEY=... python tools/mcp_server.py
#   (the ADK agent in agent/firewall_agent.py starts it this way over stdio)
# =============================================================================

import json
import logging
import os
import sys
from typing import Any

# Allow "python tools/mcp_server.py" from anywhere: put the repo root on the
# import path so core/ resolves.
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent
from pydantic import Field

from core.config import load_config
from core.dispatcher import Dispatcher
from core.errors import ConfigError, ToolCallError
from core.models import ToolDefinition

SERVER_NAME = "paloalto-server"
SERVER_VERSION = "0.1.0"

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT is the MCP transport.  Anything we print there corrupts the JSON
# stream, so all logging goes to STDERR.
#
#   CYAN    incoming tool calls
#   GREEN   responses
#   YELLOW  status / errors
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger("paloalto_mcp")


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, arguments: Any) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    if isinstance(arguments, dict):
        param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    else:
        param_str = repr(arguments)
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, payload: Any) -> None:
    """Log the firewall payload as compact JSON in GREEN."""
    compact = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    logger.info(f"{_GREEN}  ← {tool_name} response: {compact}{_RESET}")


# =============================================================================
# FirewallTool — one MCP tool backed by the dispatcher
# =============================================================================
class FirewallTool(Tool):
    """A catalog entry whose calls are routed through the Dispatcher."""

    dispatcher: Any = Field(exclude=True)

    @classmethod
    def from_definition(cls, definition: ToolDefinition, dispatcher: Dispatcher) -> "FirewallTool":
        return cls(
            name=definition.name,
            description=definition.description,
            parameters=dict(definition.input_schema),
            dispatcher=dispatcher,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments)
        try:
            outcome = self.dispatcher.dispatch(self.name, arguments)
        except ToolCallError as e:
            _log_status(f"{e.code.name}: {e.message}")
            raise ToolError(f"{e.code.name}: {e.message}") from e

        _log_response(self.name, outcome.payload)
        return ToolResult(content=[TextContent(type="text", text=outcome.text)])


# =============================================================================
# Server factory
# =============================================================================
def create_server(dispatcher: Dispatcher) -> FastMCP:
    """Build the FastMCP server with one tool per catalog entry."""
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)
    for definition in dispatcher.list_tools():
        mcp.add_tool(FirewallTool.from_definition(definition, dispatcher))
    return mcp


def main() -> None:
    load_dotenv()
    configure_logging()

    try:
        config = load_config()
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)

    mcp = create_server(Dispatcher(config))
    logger.info("Palo Alto MCP server running on stdio")
    try:
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    sys.exit(0)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    main()
