# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP protocol and core/.
#   It turns catalog entries into MCP tools, passes argument bags to the
#   dispatcher, and turns typed errors into MCP tool errors.
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate arguments (core/validators.py does)
#   - They do NOT talk HTTP (core/client.py does)
#   - They do NOT know about Google ADK
# =============================================================================
