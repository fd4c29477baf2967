# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Extractor turning the serialized properties of a class into an object schema.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Final, Iterable

from specforge.config import GeneratorSettings, get_settings
from specforge.extraction.context import ExtractionContext
from specforge.extraction.errors import ExtractionImpossibleError
from specforge.extraction.type_resolution import (
    extract_type_schema,
    get_nested_type_in_array,
)
from specforge.logging import get_logger
from specforge.metadata.models import ClassMetadata, PropertyMetadata
from specforge.metadata.naming import IdenticalPropertyNamingStrategy
from specforge.metadata.protocols import (
    DocCommentSource,
    PropertyMetadataSource,
    PropertyNamingStrategy,
)
from specforge.schema.models import Schema

logger = get_logger(__name__)

DEFAULT_GROUP: Final = "Default"


class PropertyMetadataExtractor:
    """
    Extractor for classes described by a property metadata source.

    Each serialized property becomes an entry of the target's ``properties``,
    in declared order, under the name given by the naming strategy. Property
    types are resolved through the generator, so any extractor able to handle
    a type name contributes to the property schema.
    """

    def __init__(
        self,
        metadata_source: PropertyMetadataSource,
        naming_strategy: PropertyNamingStrategy | None = None,
        doc_source: DocCommentSource | None = None,
        settings: GeneratorSettings | None = None,
    ) -> None:
        self.metadata_source = metadata_source
        self.naming_strategy = naming_strategy or IdenticalPropertyNamingStrategy()
        self.doc_source = doc_source
        self.settings = settings or get_settings()

    def can_extract(self, source: Any, target: Any, context: ExtractionContext) -> bool:
        if not inspect.isclass(source) or not isinstance(target, Schema):
            return False
        return self.metadata_source.get_metadata_for_class(source) is not None

    def extract(self, source: Any, target: Any, context: ExtractionContext) -> None:
        if not self.can_extract(source, target, context):
            raise ExtractionImpossibleError(self, source, target)

        metadata = self.metadata_source.get_metadata_for_class(source)
        assert metadata is not None
        groups = context.get_serializer_groups()
        class_context = context.create_inline_context(source)

        for item in metadata.properties.values():
            if self.should_skip_property(item, groups):
                logger.debug(
                    "Skipping property outside of requested groups",
                    model=metadata.name,
                    property=item.name,
                )
                continue

            name = self.naming_strategy.translate_name(item)
            property_schema = (target.properties or {}).get(name)
            if property_schema is None:
                property_schema = Schema()

            self._extract_property_type(item, property_schema, class_context)

            if item.read_only:
                property_schema.read_only = True
            if property_schema.description is None:
                property_schema.description = self.get_description(metadata, item)

            target.set_property(name, property_schema)

    def should_skip_property(self, item: PropertyMetadata, groups: Iterable[str]) -> bool:
        """Whether `item` is excluded by the requested serializer groups."""
        requested = set(groups)
        if not requested:
            return False
        return requested.isdisjoint(item.groups or [DEFAULT_GROUP])

    def _extract_property_type(
        self, item: PropertyMetadata, property_schema: Schema, context: ExtractionContext
    ) -> None:
        if item.type is None:
            return

        element_type = get_nested_type_in_array(item.type, self.settings.collection_types)
        if element_type is not None:
            if property_schema.type is None:
                property_schema.type = "array"
            if property_schema.items is None:
                property_schema.items = Schema()
            extract_type_schema(
                element_type, property_schema.items, context.create_sub_context()
            )
            return

        extract_type_schema(item.type, property_schema, context.create_sub_context())

    def get_description(self, metadata: ClassMetadata, item: PropertyMetadata) -> str:
        """
        Get the description of a property.

        The metadata description wins; otherwise the documentation of the
        accessor (virtual properties) or of the attribute is used.

        Returns:
            The description, or an empty string when none can be resolved
        """
        if item.description is not None:
            return item.description
        if self.doc_source is None:
            return ""

        cls = item.class_ or metadata.class_
        if item.is_virtual:
            accessor = inspect.getattr_static(cls, item.getter, None)
            if accessor is None:
                logger.debug(
                    "Accessor not found for virtual property",
                    model=metadata.name,
                    property=item.name,
                    getter=item.getter,
                )
                return ""
            accessor = getattr(accessor, "wrapped", accessor)
            if isinstance(accessor, property):
                accessor = accessor.fget
            elif isinstance(accessor, functools.cached_property):
                accessor = accessor.func
            block = self.doc_source.get_doc_block(accessor) if accessor else None
        else:
            block = self.doc_source.get_property_doc_block(cls, item.name)

        if block is None:
            return ""
        return "\n\n".join(part for part in (block.summary, block.description) if part)
