# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Metadata records exchanged between providers and extractors.
"""

from __future__ import annotations

from typing import Any, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from specforge.metadata.types import TypeDescriptor


class PropertyMetadata(BaseModel):
    """Serialization metadata for one property of a class."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    type: TypeDescriptor | None = None
    serialized_name: str | None = None
    read_only: bool = False
    groups: list[str] | None = None
    # Accessor name for virtual (computed) properties.
    getter: str | None = None
    description: str | None = None
    class_: Type[Any] | None = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return TypeDescriptor.parse(value)
        return value

    @property
    def is_virtual(self) -> bool:
        return self.getter is not None


class ClassMetadata(BaseModel):
    """Serialization metadata for a class: its properties in declared order."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    class_: type[Any]
    properties: dict[str, PropertyMetadata] = Field(default_factory=dict)

    def add_property(self, metadata: PropertyMetadata) -> PropertyMetadata:
        if metadata.class_ is None:
            metadata.class_ = self.class_
        self.properties[metadata.name] = metadata
        return metadata


class DocTag(BaseModel):
    """One structured tag of a documentation comment."""

    name: str
    type: str | None = None
    variable: str | None = None
    description: str = ""


class DocBlock(BaseModel):
    """A parsed documentation comment."""

    summary: str = ""
    description: str = ""
    tags: list[DocTag] = Field(default_factory=list)

    def get_tags_by_name(self, name: str) -> list[DocTag]:
        return [tag for tag in self.tags if tag.name == name]

    def has_tag(self, name: str) -> bool:
        return any(tag.name == name for tag in self.tags)
