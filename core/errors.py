# =============================================================================
# core/errors.py  —  Error taxonomy for tool calls
# =============================================================================
#
# Every failed tool call ends up as exactly ONE ToolCallError:
#
#   InvalidParamsError     the argument bag is malformed or names something
#                          the taxonomy doesn't know (raised before any
#                          network access)
#   MethodNotFoundError    the tool name isn't one we dispatch
#   FirewallInternalError  the firewall call (or decoding its answer) failed
#
# The numeric codes are the JSON-RPC values MCP uses, so the transport layer
# can hand them straight to the agent.
# =============================================================================

from enum import IntEnum
from typing import Any, Optional


class ErrorCode(IntEnum):
    INVALID_PARAMS = -32602
    METHOD_NOT_FOUND = -32601
    INTERNAL_ERROR = -32603


class ToolCallError(Exception):
    """A tool invocation that resolved to a typed error instead of a payload."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message

    def to_json(self) -> dict[str, Any]:
        return {"code": int(self.code), "kind": self.code.name, "message": self.message}


class InvalidParamsError(ToolCallError):
    code = ErrorCode.INVALID_PARAMS


class MethodNotFoundError(ToolCallError):
    code = ErrorCode.METHOD_NOT_FOUND


class FirewallInternalError(ToolCallError):
    code = ErrorCode.INTERNAL_ERROR


class FirewallAPIError(Exception):
    """Raised by the HTTP collaborator when a firewall request fails.

    ``status`` is the HTTP status code when the firewall answered at all,
    ``None`` for connection errors, timeouts and undecodable bodies.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ConfigError(RuntimeError):
    """Startup configuration is missing or invalid.  Fatal to the process."""
