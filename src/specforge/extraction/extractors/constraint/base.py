# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Base class of the constraint extractors.

Each concrete extractor handles one constraint kind and makes a narrow
adjustment to the property schema, never overwriting a value that is
already set.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator

from specforge.config import GeneratorSettings, get_settings
from specforge.extraction.context import ExtractionContext
from specforge.extraction.errors import ExtractionImpossibleError
from specforge.metadata.constraints import Constraint
from specforge.metadata.models import PropertyMetadata
from specforge.metadata.protocols import (
    ConstraintSource,
    PropertyMetadataSource,
    PropertyNamingStrategy,
)
from specforge.schema.models import Schema


@dataclass
class ConstraintExtractionContext:
    """What a constraint extractor needs to adjust one property schema."""

    class_schema: Schema
    property_schema: Schema
    property_name: str
    constraint: Constraint
    extraction_context: ExtractionContext | None = None


class ConstraintExtractor(ABC):
    """
    Extractor applying one kind of constraint to the properties of a class.

    The source is a class with constraints reported by the constraint source;
    the target is its object schema, already holding the property schemas.
    Property names are translated with the naming strategy so they match the
    keys of ``properties``.
    """

    def __init__(
        self,
        constraint_source: ConstraintSource,
        naming_strategy: PropertyNamingStrategy | None = None,
        metadata_source: PropertyMetadataSource | None = None,
        settings: GeneratorSettings | None = None,
    ) -> None:
        self.constraint_source = constraint_source
        self.naming_strategy = naming_strategy
        self.metadata_source = metadata_source
        self.settings = settings or get_settings()

    @abstractmethod
    def supports_constraint(self, constraint: Constraint) -> bool:
        """Whether this extractor handles `constraint`."""

    @abstractmethod
    def extract_constraint(
        self, constraint: Constraint, context: ConstraintExtractionContext
    ) -> None:
        """
        Apply `constraint` to ``context.property_schema``.

        Raises:
            ExtractionImpossibleError: If the constraint is not supported
        """

    def assert_supports_constraint(
        self, constraint: Constraint, context: ConstraintExtractionContext
    ) -> None:
        if not self.supports_constraint(constraint):
            raise ExtractionImpossibleError(
                self,
                type(constraint).__name__,
                context.property_schema,
                reason=f"unsupported constraint on {context.property_name!r}",
            )

    def can_extract(self, source: Any, target: Any, context: ExtractionContext) -> bool:
        if not inspect.isclass(source) or not isinstance(target, Schema):
            return False
        if not target.properties:
            return False
        return any(True for _ in self._supported(source, target))

    def extract(self, source: Any, target: Any, context: ExtractionContext) -> None:
        if not self.can_extract(source, target, context):
            raise ExtractionImpossibleError(self, source, target)

        for name, property_schema, constraint in list(self._supported(source, target)):
            self.extract_constraint(
                constraint,
                ConstraintExtractionContext(
                    class_schema=target,
                    property_schema=property_schema,
                    property_name=name,
                    constraint=constraint,
                    extraction_context=context,
                ),
            )

    def _supported(
        self, cls: type[Any], schema: Schema
    ) -> Iterator[tuple[str, Schema, Constraint]]:
        properties = schema.properties or {}
        for property_name, constraints in self.constraint_source.get_constraints_for_class(
            cls
        ).items():
            name = self.translate_name(cls, property_name)
            property_schema = properties.get(name)
            if property_schema is None:
                continue
            for constraint in constraints:
                if self.supports_constraint(constraint):
                    yield name, property_schema, constraint

    def translate_name(self, cls: type[Any], property_name: str) -> str:
        """The key of `property_name` in the object schema's properties."""
        if self.naming_strategy is None:
            return property_name

        metadata = None
        if self.metadata_source is not None:
            class_metadata = self.metadata_source.get_metadata_for_class(cls)
            if class_metadata is not None:
                metadata = class_metadata.properties.get(property_name)
        if metadata is None:
            metadata = PropertyMetadata(name=property_name)
        return self.naming_strategy.translate_name(metadata)
