# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Metadata sources backed by explicit registrations.

Useful for classes that carry no metadata of their own, and for tests.
"""

from __future__ import annotations

from typing import Any

from specforge.metadata.constraints import Constraint
from specforge.metadata.models import ClassMetadata, PropertyMetadata


class StaticMetadataSource:
    """Property metadata registered by hand, class by class."""

    def __init__(self) -> None:
        self._metadata: dict[type[Any], ClassMetadata] = {}
        self._names: dict[str, type[Any]] = {}

    def register(self, metadata: ClassMetadata) -> ClassMetadata:
        self._metadata[metadata.class_] = metadata
        self._names[metadata.name] = metadata.class_
        self._names[metadata.class_.__qualname__] = metadata.class_
        self._names[f"{metadata.class_.__module__}.{metadata.class_.__qualname__}"] = (
            metadata.class_
        )
        return metadata

    def register_class(
        self,
        cls: type[Any],
        *properties: PropertyMetadata,
        name: str | None = None,
    ) -> ClassMetadata:
        """Describe `cls` with `properties`, in the order given."""
        metadata = ClassMetadata(name=name or cls.__name__, class_=cls)
        for property_metadata in properties:
            metadata.add_property(property_metadata)
        return self.register(metadata)

    def get_metadata_for_class(self, cls: type[Any]) -> ClassMetadata | None:
        return self._metadata.get(cls)

    def resolve_type(self, name: str) -> type[Any] | None:
        return self._names.get(name)


class StaticConstraintSource:
    """Constraints registered by hand, property by property."""

    def __init__(self) -> None:
        self._constraints: dict[type[Any], dict[str, list[Constraint]]] = {}

    def add(self, cls: type[Any], property_name: str, *constraints: Constraint) -> None:
        by_property = self._constraints.setdefault(cls, {})
        by_property.setdefault(property_name, []).extend(constraints)

    def get_constraints_for_class(self, cls: type[Any]) -> dict[str, list[Constraint]]:
        return {
            name: list(constraints)
            for name, constraints in self._constraints.get(cls, {}).items()
        }
