# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Length constraint extractor.
"""

from __future__ import annotations

from specforge.extraction.extractors.constraint.base import (
    ConstraintExtractionContext,
    ConstraintExtractor,
)
from specforge.metadata.constraints import Constraint, Length


class LengthConstraintExtractor(ConstraintExtractor):
    """Fills ``min_length`` and ``max_length`` of a string property."""

    def supports_constraint(self, constraint: Constraint) -> bool:
        return isinstance(constraint, Length)

    def extract_constraint(
        self, constraint: Constraint, context: ConstraintExtractionContext
    ) -> None:
        self.assert_supports_constraint(constraint, context)
        assert isinstance(constraint, Length)

        schema = context.property_schema
        if schema.min_length is None and constraint.min is not None:
            schema.min_length = constraint.min
        if schema.max_length is None and constraint.max is not None:
            schema.max_length = constraint.max
