# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Range constraint extractor.
"""

from __future__ import annotations

from specforge.extraction.extractors.constraint.base import (
    ConstraintExtractionContext,
    ConstraintExtractor,
)
from specforge.metadata.constraints import Constraint, Range


class RangeConstraintExtractor(ConstraintExtractor):
    """Fills the bounds of a numeric property, exclusive flags included."""

    def supports_constraint(self, constraint: Constraint) -> bool:
        return isinstance(constraint, Range)

    def extract_constraint(
        self, constraint: Constraint, context: ConstraintExtractionContext
    ) -> None:
        self.assert_supports_constraint(constraint, context)
        assert isinstance(constraint, Range)

        schema = context.property_schema
        if schema.minimum is None and constraint.min is not None:
            schema.minimum = constraint.min
        if schema.maximum is None and constraint.max is not None:
            schema.maximum = constraint.max
        # An exclusive flag only qualifies the bound this constraint declared.
        if (
            schema.exclusive_minimum is None
            and constraint.exclusive_min
            and schema.minimum == constraint.min
        ):
            schema.exclusive_minimum = True
        if (
            schema.exclusive_maximum is None
            and constraint.exclusive_max
            and schema.maximum == constraint.max
        ):
            schema.exclusive_maximum = True
