# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK firewall assistant.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is the MCP CLIENT.  It reads the tool catalog the
#   server advertises and decides which tool to call and when.  It has no
#   firewall logic of its own (that's in core/) and no MCP server code
#   (that's in tools/).
# =============================================================================
