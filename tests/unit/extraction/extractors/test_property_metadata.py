"""Tests for PropertyMetadataExtractor."""

from __future__ import annotations

import pytest

from specforge.extraction.context import (
    DIRECTION,
    IN_MODEL_CONTEXT,
    SERIALIZER_GROUPS,
    ExtractionContext,
)
from specforge.extraction.errors import ExtractionImpossibleError
from specforge.extraction.extractors import PropertyMetadataExtractor
from specforge.generator import create_generator
from specforge.metadata import (
    CamelCaseNamingStrategy,
    DocstringParser,
    PropertyMetadata,
    SerializedNameAnnotationStrategy,
    StaticMetadataSource,
)
from specforge.schema import Operation, Schema


class Article:
    name = None
    tags = None


class Account:
    email: str
    """The address notifications are sent to."""

    display_name: str

    def get_full_name(self) -> str:
        """The first and last name of the holder."""
        return ""


@pytest.fixture
def metadata_source() -> StaticMetadataSource:
    source = StaticMetadataSource()
    source.register_class(
        Article,
        PropertyMetadata(name="name", type="string"),
        PropertyMetadata(name="tags", type="array<string>"),
    )
    source.register_class(
        Account,
        PropertyMetadata(name="email", type="string", groups=["public"]),
        PropertyMetadata(name="display_name", type="string", serialized_name="displayName"),
        PropertyMetadata(name="secret", type="string", groups=["admin"]),
        PropertyMetadata(name="id", type="int", read_only=True, description="Identifier"),
        PropertyMetadata(name="full_name", type="string", getter="get_full_name"),
        PropertyMetadata(name="nick_name", type="string", getter="get_nick_name"),
    )
    return source


@pytest.fixture
def generator(metadata_source, settings):
    return create_generator(metadata_source, settings=settings)


def test_scalar_and_collection_properties(generator) -> None:
    schema = generator.extract(Article, Schema())

    assert list(schema.properties) == ["name", "tags"]
    name = schema.properties["name"]
    tags = schema.properties["tags"]
    assert name.type == "string"
    assert name.items is None
    assert tags.type == "array"
    assert tags.items.type == "string"


def test_keyed_collection_uses_element_type(metadata_source, generator) -> None:
    class Index:
        pass

    metadata_source.register_class(
        Index,
        PropertyMetadata(name="by_key", type="array<string, int>"),
        PropertyMetadata(name="plain", type="array<int>"),
    )

    schema = generator.extract(Index, Schema())

    assert schema.properties["by_key"].items == schema.properties["plain"].items
    assert schema.properties["by_key"].items.type == "integer"


def test_naming_strategy(metadata_source, settings) -> None:
    generator = create_generator(
        metadata_source,
        naming_strategy=SerializedNameAnnotationStrategy(CamelCaseNamingStrategy()),
        settings=settings,
    )

    schema = generator.extract(Account, Schema())

    assert list(schema.properties) == [
        "email",
        "displayName",
        "secret",
        "id",
        "fullName",
        "nickName",
    ]


def test_read_only(generator) -> None:
    schema = generator.extract(Account, Schema())

    assert schema.properties["id"].read_only is True
    assert schema.properties["email"].read_only is None


def test_descriptions(generator) -> None:
    schema = generator.extract(Account, Schema())

    assert schema.properties["id"].description == "Identifier"
    assert schema.properties["email"].description == "The address notifications are sent to."
    assert schema.properties["full_name"].description == "The first and last name of the holder."
    assert schema.properties["display_name"].description == ""


def test_missing_accessor_yields_empty_description(generator) -> None:
    schema = generator.extract(Account, Schema())
    assert schema.properties["nick_name"].description == ""


def test_without_doc_source_descriptions_are_empty(metadata_source, context) -> None:
    extractor = PropertyMetadataExtractor(metadata_source)
    schema = Schema()

    extractor.extract(Article, schema, context)

    assert schema.properties["name"].description == ""


def test_group_filter(generator) -> None:
    context = ExtractionContext(generator)
    context.set_parameter(DIRECTION, "in")
    context.set_parameter(IN_MODEL_CONTEXT, {SERIALIZER_GROUPS: ["public"]})

    schema = generator.extract(Account, Schema(), context)

    assert list(schema.properties) == ["email"]


def test_default_group(generator) -> None:
    context = ExtractionContext(generator)
    context.set_parameter(DIRECTION, "in")
    context.set_parameter(IN_MODEL_CONTEXT, {SERIALIZER_GROUPS: ["Default", "admin"]})

    schema = generator.extract(Account, Schema(), context)

    assert "email" not in schema.properties
    assert "secret" in schema.properties
    assert "display_name" in schema.properties


def test_groups_ignored_without_direction(generator) -> None:
    context = ExtractionContext(generator)
    context.set_parameter(IN_MODEL_CONTEXT, {SERIALIZER_GROUPS: ["public"]})

    schema = generator.extract(Account, Schema(), context)

    assert len(schema.properties) == 6


def test_existing_property_schema_is_refined(generator) -> None:
    existing = Schema(description="Kept", format="email")
    target = Schema(properties={"email": existing})

    generator.extract(Account, target)

    assert target.properties["email"] is existing
    assert existing.description == "Kept"
    assert existing.format == "email"
    assert existing.type == "string"


def test_extracting_twice_changes_nothing(generator) -> None:
    schema = generator.extract(Account, Schema())
    before = schema.model_dump()

    generator.extract(Account, schema)

    assert schema.model_dump() == before


def test_can_extract(metadata_source, context) -> None:
    extractor = PropertyMetadataExtractor(metadata_source, doc_source=DocstringParser())

    assert extractor.can_extract(Article, Schema(), context)
    assert not extractor.can_extract(Article, Operation(), context)
    assert not extractor.can_extract(object, Schema(), context)
    assert not extractor.can_extract("Article", Schema(), context)


def test_extract_rejects_inapplicable_pair(metadata_source, context) -> None:
    extractor = PropertyMetadataExtractor(metadata_source)
    with pytest.raises(ExtractionImpossibleError):
        extractor.extract(object, Schema(), context)
