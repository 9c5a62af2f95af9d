# =============================================================================
# core/catalog.py  —  Tool Catalog (what the agent discovers)
# =============================================================================
#
# The descriptions and schemas below are what the LLM reads to decide which
# tool to call and what to pass.  They are advisory: a call is accepted or
# rejected by core/validators.py, never by these schemas.
# =============================================================================

from core.models import ToolDefinition
from core.resources import category_names


def list_tool_definitions() -> list[ToolDefinition]:
    """Return the available tools, in the order they are advertised."""
    return [
        ToolDefinition(
            name="get_system_info",
            description="Get system information from the Palo Alto firewall",
            input_schema={
                "type": "object",
                "properties": {},
            },
        ),
        ToolDefinition(
            name="list_resources",
            description="List resources from a specific category",
            input_schema={
                "type": "object",
                "properties": {
                    "category": {
                        "type": "string",
                        "enum": category_names(),
                        "description": "Resource category to list",
                    },
                    "resource_type": {
                        "type": "string",
                        "description": "Specific resource type within the category",
                    },
                },
                "required": ["category", "resource_type"],
            },
        ),
        ToolDefinition(
            name="view_config_node_values",
            description="View configuration node values for XPath on the Palo Alto firewall",
            input_schema={
                "type": "object",
                "properties": {
                    "xpath": {
                        "type": "string",
                        "description": "XPath to the configuration node",
                    },
                },
                "required": ["xpath"],
            },
        ),
        ToolDefinition(
            name="multi_move_clone_configuration",
            description="Multi-Move or Multi-Clone the configuration of the Palo Alto firewall",
            input_schema={
                "type": "object",
                "properties": {
                    "config_paths": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Paths to the configurations to move or clone",
                    },
                    "new_location": {
                        "type": "string",
                        "description": "New location for the configurations",
                    },
                    "action": {
                        "type": "string",
                        "enum": ["move", "clone"],
                        "description": "Action to perform",
                    },
                },
                "required": ["config_paths", "new_location", "action"],
            },
        ),
    ]
