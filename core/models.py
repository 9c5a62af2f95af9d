# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of everything that flows through one
# tool call:
#
#   ToolInvocation  →  (validated args)  →  RequestDescriptor  →  ToolOutcome
#
# plus ToolDefinition, the advisory metadata the agent reads at discovery.
#
# All of them are frozen: a request descriptor built for one invocation can
# be compared against another (same input, same request) but never edited.
# =============================================================================

import json
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional


# -----------------------------------------------------------------------------
# ToolDefinition — what the agent sees when it asks "which tools exist?"
# -----------------------------------------------------------------------------
# input_schema is JSON Schema.  It is NOT enforced here; the validators in
# core/validators.py are the real gate.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDefinition:
    """One callable operation as advertised to the agent."""

    name: str
    description: str
    input_schema: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the MCP discovery shape ``{name, description, inputSchema}``."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": dict(self.input_schema),
        }


@dataclass(frozen=True)
class ToolInvocation:
    """A single call: the tool name plus whatever argument bag came with it."""

    tool_name: str
    arguments: Any = None


# -----------------------------------------------------------------------------
# RequestDescriptor — the ONE outbound request a successful dispatch makes
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RequestDescriptor:
    """Method, path and optional query/body for the firewall REST API."""

    method: Literal["GET", "POST"]
    path: str                                  # e.g. "/Objects/Addresses"
    query: Optional[Mapping[str, str]] = None  # url-encoded by the client
    body: Any = None                           # JSON-serializable, POST only


# -----------------------------------------------------------------------------
# ToolOutcome — a successful result
# -----------------------------------------------------------------------------
# The firewall's JSON is passed through untouched; the agent gets it as
# pretty-printed text in a single content item.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolOutcome:
    payload: Any
    text: str

    @classmethod
    def from_payload(cls, payload: Any) -> "ToolOutcome":
        """Serialize ``payload`` with two-space indentation.

        Raises TypeError/ValueError if the payload is not JSON-serializable.
        """
        return cls(payload=payload, text=json.dumps(payload, indent=2, ensure_ascii=False))

    def to_content(self) -> list[dict[str, str]]:
        return [{"type": "text", "text": self.text}]


# -----------------------------------------------------------------------------
# Typed argument values — what the validators narrow a raw bag into
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ListResourcesArgs:
    category: str
    resource_type: str


@dataclass(frozen=True)
class ViewConfigNodeArgs:
    xpath: str


@dataclass(frozen=True)
class MultiMoveCloneArgs:
    config_paths: tuple                 # copied from the caller's list
    new_location: str
    action: Literal["move", "clone"]
