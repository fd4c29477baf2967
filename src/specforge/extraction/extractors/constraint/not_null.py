# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Not-null constraint extractor.
"""

from __future__ import annotations

from specforge.extraction.extractors.constraint.base import (
    ConstraintExtractionContext,
    ConstraintExtractor,
)
from specforge.metadata.constraints import Constraint, NotNull


class NotNullConstraintExtractor(ConstraintExtractor):
    """Appends a not-null property to the owning schema's required list."""

    def supports_constraint(self, constraint: Constraint) -> bool:
        return isinstance(constraint, NotNull)

    def extract_constraint(
        self, constraint: Constraint, context: ConstraintExtractionContext
    ) -> None:
        self.assert_supports_constraint(constraint, context)
        context.class_schema.add_required(context.property_name)
