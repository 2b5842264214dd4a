import os.path
from types import SimpleNamespace

from valuetypes.namespace import GLOBAL_NAMESPACE, path_exists, resolve_path


def test_resolve_nested_mapping_path():
    root = {"a": {"b": {"c": 5}}}
    assert resolve_path("a.b.c", root) == 5
    assert path_exists("a.b.c", root) is True


def test_missing_intermediate_segment_returns_none():
    root = {"a": {}}
    assert resolve_path("a.b.c", root) is None
    assert path_exists("a.b.c", root) is False


def test_missing_last_segment_returns_none():
    root = {"a": {"b": {}}}
    assert resolve_path("a.b.c", root) is None
    assert path_exists("a.b.c", root) is False


def test_falsy_intermediate_stops_the_walk():
    root = {"a": {"b": 0}}
    assert resolve_path("a.b.c", root) is None
    assert path_exists("a.b.c", root) is False


def test_falsy_final_value_is_returned_but_does_not_exist():
    root = {"a": {"b": 0}}
    assert resolve_path("a.b", root) == 0
    assert path_exists("a.b", root) is False


def test_attribute_access_on_objects():
    root = SimpleNamespace(config=SimpleNamespace(debug=True, name="svc"))
    assert resolve_path("config.name", root) == "svc"
    assert path_exists("config.debug", root) is True
    assert path_exists("config.missing", root) is False


def test_self_reference_to_root_is_rejected():
    root = {}
    root["self"] = root
    assert resolve_path("self", root) is None
    assert path_exists("self", root) is False


def test_empty_path_returns_none():
    assert resolve_path("", {"a": 1}) is None
    assert path_exists("", {"a": 1}) is False


def test_global_namespace_resolves_loaded_modules_and_builtins():
    assert resolve_path("os.path.join") is os.path.join
    assert resolve_path("len") is len
    assert path_exists("os.path")
    assert not path_exists("os.no_such_attribute")
    assert resolve_path("no_such_module_xyz.attr") is None


def test_global_namespace_does_not_import():
    assert resolve_path("this_module_is_not_importable_123") is None
    assert repr(GLOBAL_NAMESPACE) == "<GlobalNamespace>"


class FailingAttributes:
    @property
    def attr(self):
        raise RuntimeError("getter failed")

    def __getattr__(self, name):
        raise KeyError(name)


def test_failing_property_counts_as_missing():
    root = {"obj": FailingAttributes()}
    assert resolve_path("obj.attr", root) is None
    assert path_exists("obj.attr", root) is False
    assert resolve_path("obj.attr.deeper", root) is None


def test_failing_getattr_hook_counts_as_missing():
    root = {"obj": FailingAttributes()}
    assert resolve_path("obj.other", root) is None
    assert path_exists("obj.other", root) is False


def test_global_namespace_attributes_do_not_shadow_lookup():
    assert resolve_path("__class__") is None
    assert resolve_path("get") is None
    assert path_exists("__repr__") is False
    assert resolve_path("__import__") is __import__
