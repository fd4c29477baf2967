# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Extraction system: the extractor contract, the context passed between
extractors, extractor registration and the extraction errors.
"""

from specforge.extraction.context import (
    DIRECTION,
    IN_MODEL_CONTEXT,
    INLINE_CLASSES,
    OUT_MODEL_CONTEXT,
    SERIALIZER_GROUPS,
    Direction,
    ExtractionContext,
)
from specforge.extraction.errors import (
    EXTRACTION,
    EXTRACTION_ERROR,
    EXTRACTION_IMPOSSIBLE,
    ExtractionError,
    ExtractionImpossibleError,
)
from specforge.extraction.protocols import ExtractorProtocol
from specforge.extraction.registry import (
    ExtractorRegistration,
    ExtractorRegistry,
    Section,
    sort_registrations,
)

__all__ = [
    # Context
    "DIRECTION",
    "IN_MODEL_CONTEXT",
    "INLINE_CLASSES",
    "OUT_MODEL_CONTEXT",
    "SERIALIZER_GROUPS",
    "Direction",
    "ExtractionContext",
    # Errors
    "EXTRACTION",
    "EXTRACTION_ERROR",
    "EXTRACTION_IMPOSSIBLE",
    "ExtractionError",
    "ExtractionImpossibleError",
    # Registry
    "ExtractorProtocol",
    "ExtractorRegistration",
    "ExtractorRegistry",
    "Section",
    "sort_registrations",
]
