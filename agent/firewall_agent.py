# =============================================================================
# agent/firewall_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the firewall assistant: a Google ADK agent whose only way of
#   touching the firewall is the MCP server in tools/mcp_server.py.
#
#   ┌───────────────────────────┐   stdio (MCP)   ┌────────────────────────┐
#   │  Google ADK Agent         │ ──────────────▶ │  FastMCP server        │
#   │  LiteLlm model + prompt   │                 │  tools/mcp_server.py   │
#   └───────────────────────────┘                 └───────────┬────────────┘
#                                                             │ REST
#                                                             ▼
#                                                  Palo Alto firewall API
#
# MCP CONNECTION:
#   ADK starts the server as a subprocess and talks to it over stdin/stdout.
#   The subprocess gets the PANOS_* variables from our environment, since
#   it refuses to start without PANOS_API_KEY.
#
# MODEL:
#   LiteLlm model string, default "openrouter/openai/gpt-4o".  Override with
#   FIREWALL_AGENT_MODEL (any LiteLlm string works, e.g.
#   "openrouter/anthropic/claude-3.5-sonnet").  LiteLlm reads the provider
#   key (OPENROUTER_API_KEY, ...) from the environment itself.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_firewall_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"
MODEL_ENV = "FIREWALL_AGENT_MODEL"


def server_environment(environ=None) -> dict[str, str]:
    """Environment handed to the MCP server subprocess.

    PATH is kept so the interpreter resolves; every PANOS_* setting is
    forwarded.
    """
    env = os.environ if environ is None else environ
    forwarded = {k: v for k, v in env.items() if k.startswith("PANOS_")}
    if "PATH" in env:
        forwarded["PATH"] = env["PATH"]
    return forwarded


def create_agent() -> Agent:
    """Create the firewall assistant agent connected to the MCP server."""
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    mcp_server_path = os.path.join(project_root, "tools", "mcp_server.py")

    # sys.executable is the interpreter running us, so the subprocess sees
    # the same installed packages (fastmcp, python-dotenv, ...).
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=[mcp_server_path],
            env=server_environment(),
        ),
    )

    return Agent(
        name="paloalto_firewall_assistant",
        model=LiteLlm(model=os.environ.get(MODEL_ENV, DEFAULT_MODEL)),
        instruction=get_firewall_assistant_prompt(),
        tools=[mcp_tools],
    )
