# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Choice constraint extractor.
"""

from __future__ import annotations

from specforge.extraction.extractors.constraint.base import (
    ConstraintExtractionContext,
    ConstraintExtractor,
)
from specforge.metadata.constraints import Choice, Constraint


class ChoiceConstraintExtractor(ConstraintExtractor):
    def supports_constraint(self, constraint: Constraint) -> bool:
        return isinstance(constraint, Choice)

    def extract_constraint(
        self, constraint: Constraint, context: ConstraintExtractionContext
    ) -> None:
        self.assert_supports_constraint(constraint, context)
        assert isinstance(constraint, Choice)

        if context.property_schema.enum is None:
            context.property_schema.enum = list(constraint.choices)
