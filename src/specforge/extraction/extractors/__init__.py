# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Shipped extractors.

This package provides the extractors completing schema records from type
names, class metadata, validation constraints, docstrings and existing raw
documents.
"""

from __future__ import annotations

from specforge.config import GeneratorSettings
from specforge.extraction.extractors.constraint import (
    CONSTRAINT_EXTRACTORS,
    ChoiceConstraintExtractor,
    ConstraintExtractionContext,
    ConstraintExtractor,
    LengthConstraintExtractor,
    NotBlankConstraintExtractor,
    NotNullConstraintExtractor,
    RangeConstraintExtractor,
    RegexConstraintExtractor,
)
from specforge.extraction.extractors.doc_operation import DocOperationExtractor
from specforge.extraction.extractors.property_metadata import PropertyMetadataExtractor
from specforge.extraction.extractors.swagger_schema import SwaggerSchemaExtractor
from specforge.extraction.extractors.type_schema import TypeSchemaExtractor
from specforge.extraction.protocols import ExtractorProtocol
from specforge.metadata.protocols import (
    ConstraintSource,
    DocCommentSource,
    PropertyMetadataSource,
    PropertyNamingStrategy,
)

# Constraints adjust property schemas, so they run after the properties exist.
CONSTRAINT_PRIORITY = 10


def get_extractors(
    metadata_source: PropertyMetadataSource,
    constraint_source: ConstraintSource | None = None,
    doc_source: DocCommentSource | None = None,
    naming_strategy: PropertyNamingStrategy | None = None,
    settings: GeneratorSettings | None = None,
) -> list[tuple[ExtractorProtocol, int]]:
    """
    Get the shipped extractors with their priorities.

    The bootstrap extractor is not included: every generator registers it
    on construction.

    Args:
        metadata_source: Source of class property metadata
        constraint_source: Source of constraints, no constraint extractors if None
        doc_source: Source of documentation, docstrings if None
        naming_strategy: Strategy translating property names
        settings: Generator settings

    Returns:
        (extractor, priority) pairs for the default section
    """
    doc_operation = (
        DocOperationExtractor(doc_source) if doc_source else DocOperationExtractor()
    )
    extractors: list[tuple[ExtractorProtocol, int]] = [
        (TypeSchemaExtractor(metadata_source, settings=settings), 0),
        (
            PropertyMetadataExtractor(
                metadata_source,
                naming_strategy=naming_strategy,
                doc_source=doc_operation.doc_source,
                settings=settings,
            ),
            0,
        ),
        (doc_operation, 0),
    ]
    if constraint_source is not None:
        extractors.extend(
            (
                extractor_class(
                    constraint_source,
                    naming_strategy=naming_strategy,
                    metadata_source=metadata_source,
                    settings=settings,
                ),
                CONSTRAINT_PRIORITY,
            )
            for extractor_class in CONSTRAINT_EXTRACTORS
        )
    return extractors


__all__ = [
    "get_extractors",
    "CONSTRAINT_PRIORITY",
    "TypeSchemaExtractor",
    "PropertyMetadataExtractor",
    "DocOperationExtractor",
    "SwaggerSchemaExtractor",
    "ConstraintExtractor",
    "ConstraintExtractionContext",
    "NotBlankConstraintExtractor",
    "NotNullConstraintExtractor",
    "LengthConstraintExtractor",
    "RangeConstraintExtractor",
    "ChoiceConstraintExtractor",
    "RegexConstraintExtractor",
]
