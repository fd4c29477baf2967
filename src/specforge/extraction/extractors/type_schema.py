# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Extractor resolving a declared type name into a schema.

Primitive names map to a ``type``/``format`` pair, collection notations
become arrays, and class names known to the metadata source become either a
``$ref`` to a shared definition (when extracting into a document) or an
inline object schema.
"""

from __future__ import annotations

from typing import Any, Final

from specforge.config import GeneratorSettings, get_settings
from specforge.extraction.context import ExtractionContext
from specforge.extraction.errors import ExtractionImpossibleError
from specforge.extraction.type_resolution import (
    extract_type_schema,
    get_nested_type_in_array,
)
from specforge.logging import get_logger
from specforge.metadata.protocols import PropertyMetadataSource
from specforge.metadata.types import TypeDescriptor
from specforge.schema.models import Schema, Swagger

logger = get_logger(__name__)

PRIMITIVE_TYPES: Final[dict[str, tuple[str, str | None]]] = {
    "int": ("integer", "int32"),
    "integer": ("integer", "int32"),
    "long": ("integer", "int64"),
    "float": ("number", "float"),
    "double": ("number", "double"),
    "number": ("number", None),
    "decimal": ("number", None),
    "Decimal": ("number", None),
    "str": ("string", None),
    "string": ("string", None),
    "bool": ("boolean", None),
    "boolean": ("boolean", None),
    "date": ("string", "date"),
    "datetime": ("string", "date-time"),
    "DateTime": ("string", "date-time"),
    "time": ("string", "time"),
    "bytes": ("string", "byte"),
    "uuid": ("string", "uuid"),
    "UUID": ("string", "uuid"),
    "mixed": ("object", None),
    "Any": ("object", None),
    "object": ("object", None),
}


class TypeSchemaExtractor:
    """Extractor for type names: primitives, collections and described classes."""

    def __init__(
        self,
        metadata_source: PropertyMetadataSource,
        settings: GeneratorSettings | None = None,
    ) -> None:
        self.metadata_source = metadata_source
        self.settings = settings or get_settings()

    def _descriptor(self, source: Any) -> TypeDescriptor | None:
        if isinstance(source, TypeDescriptor):
            return source
        if not isinstance(source, str):
            return None
        try:
            return TypeDescriptor.parse(source)
        except ValueError:
            return None

    def _is_collection(self, descriptor: TypeDescriptor) -> bool:
        return descriptor.name in self.settings.collection_types

    def can_extract(self, source: Any, target: Any, context: ExtractionContext) -> bool:
        if not isinstance(target, Schema):
            return False
        descriptor = self._descriptor(source)
        if descriptor is None:
            return False
        return (
            descriptor.name in PRIMITIVE_TYPES
            or self._is_collection(descriptor)
            or self.metadata_source.resolve_type(descriptor.name) is not None
        )

    def extract(self, source: Any, target: Any, context: ExtractionContext) -> None:
        if not self.can_extract(source, target, context):
            raise ExtractionImpossibleError(self, source, target)

        descriptor = self._descriptor(source)
        assert descriptor is not None

        if descriptor.name in PRIMITIVE_TYPES:
            type_name, type_format = PRIMITIVE_TYPES[descriptor.name]
            if target.type is None:
                target.type = type_name
            if target.format is None and type_format is not None:
                target.format = type_format
        elif self._is_collection(descriptor):
            self._extract_collection(descriptor, target, context)
        else:
            cls = self.metadata_source.resolve_type(descriptor.name)
            self._extract_class(cls, target, context)

    def _extract_collection(
        self, descriptor: TypeDescriptor, target: Schema, context: ExtractionContext
    ) -> None:
        if target.type is None:
            target.type = "array"
        if target.items is None:
            target.items = Schema()
        element_type = get_nested_type_in_array(
            descriptor, self.settings.collection_types
        )
        if element_type is not None:
            extract_type_schema(element_type, target.items, context.create_sub_context())

    def _extract_class(
        self, cls: type[Any], target: Schema, context: ExtractionContext
    ) -> None:
        root = context.root_schema
        if not isinstance(root, Swagger):
            if target.type is None:
                target.type = "object"
            if cls in context.get_inline_classes():
                # Without definitions to point at, a cycle ends at a bare object.
                logger.debug("Stopping at recursive inline class", model=cls.__name__)
                return
            context.get_swagger().extract(cls, target, context.create_inline_context(cls))
            return

        name = self.definition_name(cls, context)
        if not root.has_definition(name):
            # Registered before recursing so cyclic graphs terminate.
            definition = root.add_definition(name, Schema(type="object"))
            logger.debug("Adding definition", definition=name)
            context.get_swagger().extract(cls, definition, context.create_sub_context())
        if target.ref is None:
            target.ref = f"#/definitions/{name}"

    def definition_name(self, cls: type[Any], context: ExtractionContext) -> str:
        """The definitions key of `cls`, suffixed by the active serializer groups."""
        metadata = self.metadata_source.get_metadata_for_class(cls)
        name = metadata.name if metadata is not None else cls.__name__
        groups = context.get_serializer_groups()
        if groups:
            name = f"{name}.{'-'.join(sorted(groups))}"
        return name
