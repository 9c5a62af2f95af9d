import pytest

from core.errors import ErrorCode, InvalidParamsError
from core.models import ListResourcesArgs, MultiMoveCloneArgs, ViewConfigNodeArgs
from core.validators import (
    check_arguments,
    validate_list_resources,
    validate_multi_move_clone,
    validate_view_config_node_values,
)


def test_list_resources_shape_ok():
    args = validate_list_resources({"category": "OBJECTS", "resource_type": "Addresses"})
    assert args == ListResourcesArgs(category="OBJECTS", resource_type="Addresses")


def test_list_resources_does_not_check_membership():
    # Second-stage check belongs to the dispatcher.
    args = validate_list_resources({"category": "OBJECTS", "resource_type": "NATRules"})
    assert args.resource_type == "NATRules"


@pytest.mark.parametrize("bad", [
    None,
    "OBJECTS",
    {},
    {"category": "OBJECTS"},
    {"resource_type": "Addresses"},
    {"category": "FIREWALL", "resource_type": "Addresses"},
    {"category": "objects", "resource_type": "Addresses"},
    {"category": 1, "resource_type": "Addresses"},
    {"category": "OBJECTS", "resource_type": 42},
])
def test_list_resources_rejects(bad):
    with pytest.raises(InvalidParamsError) as exc:
        validate_list_resources(bad)
    assert exc.value.code == ErrorCode.INVALID_PARAMS
    assert "list_resources" in exc.value.message


def test_unknown_category_named_in_message():
    with pytest.raises(InvalidParamsError, match="FIREWALL"):
        validate_list_resources({"category": "FIREWALL", "resource_type": "Addresses"})


def test_view_config_requires_string_xpath():
    assert validate_view_config_node_values({"xpath": "/config/devices"}) == ViewConfigNodeArgs(
        xpath="/config/devices"
    )
    for bad in (None, {}, {"xpath": None}, {"xpath": ["/config"]}):
        with pytest.raises(InvalidParamsError, match="view_config_node_values"):
            validate_view_config_node_values(bad)


def test_xpath_content_not_validated():
    assert validate_view_config_node_values({"xpath": "not an xpath ]["}).xpath == "not an xpath ]["


def test_multi_move_clone_ok():
    args = validate_multi_move_clone(
        {"config_paths": ["/a", "/b"], "new_location": "/c", "action": "clone"}
    )
    assert args == MultiMoveCloneArgs(config_paths=("/a", "/b"), new_location="/c", action="clone")


@pytest.mark.parametrize("bad", [
    {"new_location": "/c", "action": "move"},
    {"config_paths": "/a", "new_location": "/c", "action": "move"},
    {"config_paths": ["/a"], "action": "move"},
    {"config_paths": ["/a"], "new_location": "/c"},
    {"config_paths": ["/a"], "new_location": "/c", "action": "copy"},
    {"config_paths": ["/a"], "new_location": "/c", "action": "MOVE"},
    {"config_paths": ["/a"], "new_location": True, "action": "move"},
])
def test_multi_move_clone_rejects(bad):
    with pytest.raises(InvalidParamsError, match="multi_move_clone_configuration"):
        validate_multi_move_clone(bad)


def test_config_path_elements_not_type_checked():
    args = validate_multi_move_clone({"config_paths": [1, None], "new_location": "/c", "action": "move"})
    assert args.config_paths == (1, None)


def test_validators_do_not_mutate_input():
    bag = {"config_paths": ["/a"], "new_location": "/c", "action": "move", "extra": 1}
    snapshot = {"config_paths": ["/a"], "new_location": "/c", "action": "move", "extra": 1}
    checked = check_arguments("multi_move_clone_configuration", bag)
    assert bag == snapshot
    assert "extra" not in checked


def test_get_system_info_accepts_anything():
    assert check_arguments("get_system_info", None) == {}
    assert check_arguments("get_system_info", {"junk": True}) == {}
    assert check_arguments("get_system_info", "whatever") == {}
