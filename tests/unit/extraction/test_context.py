"""Tests for ExtractionContext parameters and forking."""

from __future__ import annotations

from specforge.extraction.context import (
    DIRECTION,
    IN_MODEL_CONTEXT,
    OUT_MODEL_CONTEXT,
    SERIALIZER_GROUPS,
    Direction,
    ExtractionContext,
)
from specforge.generator import SwaggerGenerator
from specforge.schema.models import Swagger


def test_parameters(context: ExtractionContext) -> None:
    assert not context.has_parameter("key")
    assert context.get_parameter("key") is None
    assert context.get_parameter("key", "fallback") == "fallback"

    context.set_parameter("key", "value")
    assert context.has_parameter("key")
    assert context.get_parameter("key") == "value"

    context.remove_parameter("key")
    assert not context.has_parameter("key")


def test_parameters_property_is_a_copy(context: ExtractionContext) -> None:
    context.set_parameter("groups", ["a"])
    context.parameters["groups"].append("b")
    assert context.get_parameter("groups") == ["a"]


def test_sub_context_shares_generator_and_root(generator: SwaggerGenerator) -> None:
    document = Swagger()
    parent = ExtractionContext(generator, root_schema=document)

    child = parent.create_sub_context()

    assert child is not parent
    assert child.get_swagger() is generator
    assert child.swagger is generator
    assert child.root_schema is document


def test_child_changes_do_not_reach_parent(context: ExtractionContext) -> None:
    context.set_parameter(DIRECTION, "in")
    child = context.create_sub_context()

    child.set_parameter(DIRECTION, "out")
    child.set_parameter("extra", True)

    assert context.get_parameter(DIRECTION) == "in"
    assert not context.has_parameter("extra")


def test_parent_changes_do_not_reach_child(context: ExtractionContext) -> None:
    context.set_parameter(OUT_MODEL_CONTEXT, {SERIALIZER_GROUPS: ["public"]})
    child = context.create_sub_context()

    context.set_parameter(DIRECTION, "in")
    context.get_parameter(OUT_MODEL_CONTEXT)[SERIALIZER_GROUPS].append("admin")

    assert not child.has_parameter(DIRECTION)
    assert child.get_parameter(OUT_MODEL_CONTEXT) == {SERIALIZER_GROUPS: ["public"]}


def test_direction(context: ExtractionContext) -> None:
    assert context.direction is None

    context.set_parameter(DIRECTION, "out")
    assert context.direction is Direction.OUT

    context.set_parameter(DIRECTION, Direction.IN)
    assert context.direction is Direction.IN

    context.set_parameter(DIRECTION, "sideways")
    assert context.direction is None


def test_model_context_follows_direction(context: ExtractionContext) -> None:
    context.set_parameter(IN_MODEL_CONTEXT, {SERIALIZER_GROUPS: ["write"]})
    context.set_parameter(OUT_MODEL_CONTEXT, {SERIALIZER_GROUPS: ["read"]})

    assert context.get_model_context() == {}
    assert context.get_serializer_groups() == []

    context.set_parameter(DIRECTION, "in")
    assert context.get_serializer_groups() == ["write"]

    context.set_parameter(DIRECTION, "out")
    assert context.get_serializer_groups() == ["read"]


def test_inline_classes_stay_on_their_branch(context: ExtractionContext) -> None:
    class Node:
        pass

    class Leaf:
        pass

    node_context = context.create_inline_context(Node)
    leaf_context = node_context.create_inline_context(Leaf)

    assert context.get_inline_classes() == ()
    assert node_context.get_inline_classes() == (Node,)
    assert leaf_context.get_inline_classes() == (Node, Leaf)
    assert leaf_context.create_inline_context(Node).get_inline_classes() == (Node, Leaf)
