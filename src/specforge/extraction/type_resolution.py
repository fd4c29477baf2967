# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Type resolution shared by the extractors.

Nested types are never resolved locally: they are handed back to the
generator through the context, so every registered extractor gets a chance
to contribute to the nested schema.
"""

from __future__ import annotations

from typing import Any, Iterable

from specforge.extraction.context import ExtractionContext
from specforge.metadata.types import TypeDescriptor


def get_nested_type_in_array(
    type_descriptor: TypeDescriptor | None,
    collection_types: Iterable[str],
) -> TypeDescriptor | None:
    """
    Get the element type of a collection type.

    A two-parameter collection is keyed (``array<string, User>``) and its
    element type is the second parameter; a one-parameter collection
    (``array<User>``) uses the first.

    Returns:
        The element type, or None if the type is not a parameterized collection
    """
    if type_descriptor is None or type_descriptor.name not in set(collection_types):
        return None
    if len(type_descriptor.params) >= 2:
        return type_descriptor.params[1]
    if len(type_descriptor.params) == 1:
        return type_descriptor.params[0]
    return None


def extract_type_schema(
    type_name: str | TypeDescriptor,
    schema: Any,
    context: ExtractionContext,
) -> Any:
    """Resolve `type_name` into `schema` through the context's generator."""
    context.get_swagger().extract(str(type_name), schema, context)
    return schema
