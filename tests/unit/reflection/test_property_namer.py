import pytest

from beanmeta.reflection.property_namer import (
    is_getter_name,
    is_setter_name,
    is_valid_property_name,
    method_to_property,
)


@pytest.mark.parametrize(
    ("method_name", "expected"),
    [
        ("getName", "name"),
        ("get_name", "name"),
        ("isActive", "active"),
        ("is_active", "active"),
        ("set_total", "total"),
        ("getURL", "uRL"),
        ("get", None),
        ("get_", None),
        ("compute", None),
    ],
)
def test_method_to_property(method_name, expected):
    assert method_to_property(method_name) == expected


def test_prefix_detection_requires_a_suffix():
    assert is_getter_name("getX")
    assert is_getter_name("isX")
    assert not is_getter_name("get")
    assert not is_getter_name("is")
    assert is_setter_name("setX")
    assert not is_setter_name("set")


@pytest.mark.parametrize("name", ["_private", "$generated", "serialVersionUID", "serial_version_uid", "class"])
def test_reserved_names_are_invalid(name):
    assert not is_valid_property_name(name)


def test_ordinary_names_are_valid():
    assert is_valid_property_name("classification")
    assert is_valid_property_name("name")
