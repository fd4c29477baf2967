# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Constraint extractors, one per constraint kind.
"""

from specforge.extraction.extractors.constraint.base import (
    ConstraintExtractionContext,
    ConstraintExtractor,
)
from specforge.extraction.extractors.constraint.choice import ChoiceConstraintExtractor
from specforge.extraction.extractors.constraint.length import LengthConstraintExtractor
from specforge.extraction.extractors.constraint.not_blank import (
    NotBlankConstraintExtractor,
)
from specforge.extraction.extractors.constraint.not_null import NotNullConstraintExtractor
from specforge.extraction.extractors.constraint.range import RangeConstraintExtractor
from specforge.extraction.extractors.constraint.regex import RegexConstraintExtractor

CONSTRAINT_EXTRACTORS: tuple[type[ConstraintExtractor], ...] = (
    NotBlankConstraintExtractor,
    NotNullConstraintExtractor,
    LengthConstraintExtractor,
    RangeConstraintExtractor,
    ChoiceConstraintExtractor,
    RegexConstraintExtractor,
)

__all__ = [
    "CONSTRAINT_EXTRACTORS",
    "ConstraintExtractionContext",
    "ConstraintExtractor",
    "NotBlankConstraintExtractor",
    "NotNullConstraintExtractor",
    "LengthConstraintExtractor",
    "RangeConstraintExtractor",
    "ChoiceConstraintExtractor",
    "RegexConstraintExtractor",
]
