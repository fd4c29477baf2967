# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Not-blank constraint extractor.
"""

from __future__ import annotations

from specforge.extraction.extractors.constraint.base import (
    ConstraintExtractionContext,
    ConstraintExtractor,
)
from specforge.metadata.constraints import Constraint, NotBlank


class NotBlankConstraintExtractor(ConstraintExtractor):
    """
    Marks a not-blank property as required.

    The property schema receives the configured sentinel format ("not
    empty" by default) and its name is appended to the owning schema's
    required list. A property schema that already carries a format is left
    alone, required list included.
    """

    def supports_constraint(self, constraint: Constraint) -> bool:
        return isinstance(constraint, NotBlank)

    def extract_constraint(
        self, constraint: Constraint, context: ConstraintExtractionContext
    ) -> None:
        self.assert_supports_constraint(constraint, context)

        if context.property_schema.format is not None:
            return
        context.property_schema.format = self.settings.not_blank_format
        context.class_schema.add_required(context.property_name)
