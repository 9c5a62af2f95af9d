# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL of the firewall adapter's logic: the resource
# taxonomy, argument validators, tool catalog, configuration, the HTTP
# collaborator and the dispatcher.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any other
#   orchestration framework.  Everything here can be imported and tested
#   without an MCP transport or a firewall.
# =============================================================================
