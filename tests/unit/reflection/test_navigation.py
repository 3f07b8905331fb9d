from typing import Optional

import pytest

from beanmeta.exceptions import InvocationError, PropertyNotFoundError
from beanmeta.reflection import MetadataRegistry, PropertyNavigator


class Order:
    def __init__(self, item: str = ""):
        self._item = item

    def get_item(self) -> str:
        return self._item

    def set_item(self, item: str) -> None:
        self._item = item


class Customer:
    def __init__(self):
        self._orders: list[Order] = [Order("book"), Order("lamp")]
        self._tags: list[str] = ["new", "local"]
        self._attributes: dict[str, str] = {"tier": "gold"}
        self._referrer: Optional["Customer"] = None

    def get_orders(self) -> list[Order]:
        return self._orders

    def get_tags(self) -> list[str]:
        return self._tags

    def get_attributes(self) -> dict[str, str]:
        return self._attributes

    def get_referrer(self) -> Optional["Customer"]:
        return self._referrer

    def set_referrer(self, referrer: Optional["Customer"]) -> None:
        self._referrer = referrer


@pytest.fixture
def navigator():
    return PropertyNavigator(MetadataRegistry())


def test_reads_indexed_path(navigator):
    assert navigator.get_value(Customer(), "orders[1].item") == "lamp"


def test_reads_mapping_by_key(navigator):
    assert navigator.get_value(Customer(), "attributes[tier]") == "gold"
    assert navigator.get_value({"customer": Customer()}, "customer.tags[0]") == "new"


def test_none_intermediate_short_circuits(navigator):
    assert navigator.get_value(Customer(), "referrer.orders[0].item") is None


def test_writes_property_and_index(navigator):
    customer = Customer()

    navigator.set_value(customer, "orders[0].item", "desk")
    navigator.set_value(customer, "tags[1]", "remote")

    assert customer.get_orders()[0].get_item() == "desk"
    assert customer.get_tags() == ["new", "remote"]


def test_write_through_none_fails(navigator):
    with pytest.raises(InvocationError):
        navigator.set_value(Customer(), "referrer.tags[0]", "x")


def test_bad_sequence_index_fails(navigator):
    with pytest.raises(InvocationError):
        navigator.get_value(Customer(), "orders[first].item")
    with pytest.raises(InvocationError):
        navigator.get_value(Customer(), "orders[9].item")


def test_getter_type_follows_element_types(navigator):
    assert navigator.getter_type(Customer, "orders[0].item") is str
    assert navigator.getter_type(Customer, "attributes[tier]") is str


def test_has_getter(navigator):
    assert navigator.has_getter(Customer, "orders[0].item")
    assert not navigator.has_getter(Customer, "orders[0].price")
    assert not navigator.has_getter(Customer, "missing")


def test_unknown_property_raises(navigator):
    with pytest.raises(PropertyNotFoundError):
        navigator.get_value(Customer(), "nickname")
