# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Property naming strategies.

A strategy maps a property to the name it carries on the wire.
"""

from __future__ import annotations

from pydantic.alias_generators import to_camel, to_snake

from specforge.metadata.models import PropertyMetadata
from specforge.metadata.protocols import PropertyNamingStrategy


class IdenticalPropertyNamingStrategy:
    """Keeps the property name unchanged."""

    def translate_name(self, property_metadata: PropertyMetadata) -> str:
        return property_metadata.name


class CamelCaseNamingStrategy:
    """Translates ``snake_case`` names to ``camelCase``."""

    def translate_name(self, property_metadata: PropertyMetadata) -> str:
        return to_camel(property_metadata.name)


class SnakeCaseNamingStrategy:
    """Translates ``camelCase`` names to ``snake_case``."""

    def translate_name(self, property_metadata: PropertyMetadata) -> str:
        return to_snake(property_metadata.name)


class SerializedNameAnnotationStrategy:
    """Uses the explicit serialized name when the metadata has one."""

    def __init__(self, delegate: PropertyNamingStrategy | None = None) -> None:
        self.delegate = delegate or IdenticalPropertyNamingStrategy()

    def translate_name(self, property_metadata: PropertyMetadata) -> str:
        if property_metadata.serialized_name is not None:
            return property_metadata.serialized_name
        return self.delegate.translate_name(property_metadata)
