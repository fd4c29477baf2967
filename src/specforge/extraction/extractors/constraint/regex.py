# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Regex constraint extractor.
"""

from __future__ import annotations

from specforge.extraction.extractors.constraint.base import (
    ConstraintExtractionContext,
    ConstraintExtractor,
)
from specforge.metadata.constraints import Constraint, Regex


class RegexConstraintExtractor(ConstraintExtractor):
    def supports_constraint(self, constraint: Constraint) -> bool:
        return isinstance(constraint, Regex)

    def extract_constraint(
        self, constraint: Constraint, context: ConstraintExtractionContext
    ) -> None:
        self.assert_supports_constraint(constraint, context)
        assert isinstance(constraint, Regex)

        if context.property_schema.pattern is None:
            context.property_schema.pattern = constraint.pattern
