# =============================================================================
# core/validators.py  —  Argument Validators (the real gate)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Checks an untyped argument bag against the shape each tool needs and
#   narrows it to a typed value (core/models.py), or raises
#   InvalidParamsError naming the tool.
#
# ONE VALIDATION PATH FOR EVERY TOOL:
#   Each tool declares its required fields in ARGUMENT_SHAPES, and
#   check_arguments() applies the same rules to all of them.  The JSON
#   schemas in core/catalog.py describe the same fields for the agent, but
#   they are maintained separately and never consulted here.
#
# WHAT IS NOT CHECKED HERE:
#   - Whether resource_type belongs to the chosen category.  That needs the
#     category to be known-good first, so the dispatcher does it as a second
#     step.
#   - XPath syntax.  The firewall is the authority on that.
#   - The element type of config_paths.
#
# Validators never mutate their input and have no side effects.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from core.errors import InvalidParamsError
from core.models import ListResourcesArgs, MultiMoveCloneArgs, ViewConfigNodeArgs
from core.resources import category_names


MOVE_CLONE_ACTIONS = ("move", "clone")


@dataclass(frozen=True)
class ArgumentField:
    """One required field: its name, Python type and optional allowed values."""

    name: str
    kind: type
    choices: Optional[tuple[str, ...]] = None

    def problem_with(self, value: Any) -> Optional[str]:
        """Return a description of what's wrong with ``value``, or None."""
        # bool is an int subclass, never a str or list, but be explicit.
        if isinstance(value, bool) or not isinstance(value, self.kind):
            return f"'{self.name}' must be {_KIND_NAMES.get(self.kind, self.kind.__name__)}"
        if self.choices is not None and value not in self.choices:
            allowed = ", ".join(self.choices)
            return f"'{self.name}' must be one of: {allowed} (got {value!r})"
        return None


_KIND_NAMES = {str: "a string", list: "an array"}


# -----------------------------------------------------------------------------
# ARGUMENT_SHAPES — tool name → required fields
# -----------------------------------------------------------------------------
# get_system_info has no fields: it accepts (and ignores) any bag.
# -----------------------------------------------------------------------------
ARGUMENT_SHAPES: Mapping[str, tuple[ArgumentField, ...]] = {
    "get_system_info": (),
    "list_resources": (
        ArgumentField("category", str, choices=tuple(category_names())),
        ArgumentField("resource_type", str),
    ),
    "view_config_node_values": (
        ArgumentField("xpath", str),
    ),
    "multi_move_clone_configuration": (
        ArgumentField("config_paths", list),
        ArgumentField("new_location", str),
        ArgumentField("action", str, choices=MOVE_CLONE_ACTIONS),
    ),
}


def check_arguments(tool_name: str, arguments: Any) -> dict[str, Any]:
    """Check ``arguments`` against the declared shape of ``tool_name``.

    Returns a new dict holding only the declared fields.  Unknown extra keys
    are ignored.

    Raises:
        InvalidParamsError: the bag is not an object, or a field is missing,
            has the wrong type, or is outside its allowed values.
        KeyError: ``tool_name`` has no declared shape.
    """
    fields = ARGUMENT_SHAPES[tool_name]
    if not fields:
        return {}

    if not isinstance(arguments, Mapping):
        raise InvalidParamsError(f"Invalid arguments for {tool_name}: expected an object")

    checked: dict[str, Any] = {}
    for arg in fields:
        if arg.name not in arguments or arguments[arg.name] is None:
            raise InvalidParamsError(
                f"Invalid arguments for {tool_name}: missing required field '{arg.name}'"
            )
        value = arguments[arg.name]
        problem = arg.problem_with(value)
        if problem:
            raise InvalidParamsError(f"Invalid arguments for {tool_name}: {problem}")
        checked[arg.name] = value
    return checked


def validate_list_resources(arguments: Any) -> ListResourcesArgs:
    """First-stage check: category is a taxonomy key, resource_type a string."""
    checked = check_arguments("list_resources", arguments)
    return ListResourcesArgs(category=checked["category"], resource_type=checked["resource_type"])


def validate_view_config_node_values(arguments: Any) -> ViewConfigNodeArgs:
    checked = check_arguments("view_config_node_values", arguments)
    return ViewConfigNodeArgs(xpath=checked["xpath"])


def validate_multi_move_clone(arguments: Any) -> MultiMoveCloneArgs:
    checked = check_arguments("multi_move_clone_configuration", arguments)
    return MultiMoveCloneArgs(
        config_paths=tuple(checked["config_paths"]),
        new_location=checked["new_location"],
        action=checked["action"],
    )
