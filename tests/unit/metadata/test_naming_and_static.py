"""Tests for naming strategies and the static metadata sources."""

from __future__ import annotations

import pytest

from specforge.metadata import (
    CamelCaseNamingStrategy,
    ClassMetadata,
    IdenticalPropertyNamingStrategy,
    NotBlank,
    NotNull,
    PropertyMetadata,
    SerializedNameAnnotationStrategy,
    SnakeCaseNamingStrategy,
    StaticConstraintSource,
    StaticMetadataSource,
    TypeDescriptor,
)


class Order:
    pass


@pytest.mark.parametrize(
    "strategy, name, expected",
    [
        (IdenticalPropertyNamingStrategy(), "created_at", "created_at"),
        (CamelCaseNamingStrategy(), "created_at", "createdAt"),
        (SnakeCaseNamingStrategy(), "createdAt", "created_at"),
    ],
)
def test_naming_strategies(strategy, name: str, expected: str) -> None:
    assert strategy.translate_name(PropertyMetadata(name=name)) == expected


def test_serialized_name_wins() -> None:
    strategy = SerializedNameAnnotationStrategy(CamelCaseNamingStrategy())

    assert strategy.translate_name(PropertyMetadata(name="created_at", serialized_name="ts")) == "ts"
    assert strategy.translate_name(PropertyMetadata(name="created_at")) == "createdAt"
    assert SerializedNameAnnotationStrategy().translate_name(PropertyMetadata(name="a_b")) == "a_b"


def test_property_type_is_parsed() -> None:
    prop = PropertyMetadata(name="lines", type="array<OrderLine>")
    assert prop.type == TypeDescriptor("array", (TypeDescriptor("OrderLine"),))
    assert not prop.is_virtual


def test_static_metadata_source() -> None:
    source = StaticMetadataSource()
    metadata = source.register_class(
        Order,
        PropertyMetadata(name="number", type="string"),
        PropertyMetadata(name="total", type="float"),
        name="PurchaseOrder",
    )

    assert isinstance(metadata, ClassMetadata)
    assert source.get_metadata_for_class(Order) is metadata
    assert list(metadata.properties) == ["number", "total"]
    assert metadata.properties["number"].class_ is Order
    assert source.resolve_type("PurchaseOrder") is Order
    assert source.resolve_type("Order") is Order
    assert source.resolve_type(f"{Order.__module__}.Order") is Order
    assert source.resolve_type("Invoice") is None
    assert source.get_metadata_for_class(object) is None


def test_static_constraint_source() -> None:
    source = StaticConstraintSource()
    source.add(Order, "number", NotNull())
    source.add(Order, "number", NotBlank())

    constraints = source.get_constraints_for_class(Order)
    constraints["number"].clear()

    assert source.get_constraints_for_class(Order) == {"number": [NotNull(), NotBlank()]}
    assert source.get_constraints_for_class(object) == {}
