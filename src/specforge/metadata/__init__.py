# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Metadata providers read by the extractors.

This package defines the provider interfaces (property metadata, validation
constraints, documentation comments, naming) and ships implementations for
Pydantic models, docstrings and explicit registrations.
"""

from specforge.metadata.constraints import (
    Choice,
    Constraint,
    Length,
    NotBlank,
    NotNull,
    Range,
    Regex,
)
from specforge.metadata.docstring import DocstringParser
from specforge.metadata.models import ClassMetadata, DocBlock, DocTag, PropertyMetadata
from specforge.metadata.naming import (
    CamelCaseNamingStrategy,
    IdenticalPropertyNamingStrategy,
    SerializedNameAnnotationStrategy,
    SnakeCaseNamingStrategy,
)
from specforge.metadata.protocols import (
    ConstraintSource,
    DocCommentSource,
    PropertyMetadataSource,
    PropertyNamingStrategy,
)
from specforge.metadata.pydantic_source import (
    PydanticConstraintSource,
    PydanticMetadataSource,
)
from specforge.metadata.static import StaticConstraintSource, StaticMetadataSource
from specforge.metadata.types import TypeDescriptor

__all__ = [
    # Protocols
    "PropertyMetadataSource",
    "ConstraintSource",
    "DocCommentSource",
    "PropertyNamingStrategy",
    # Records
    "TypeDescriptor",
    "PropertyMetadata",
    "ClassMetadata",
    "DocBlock",
    "DocTag",
    # Constraints
    "Constraint",
    "NotBlank",
    "NotNull",
    "Length",
    "Range",
    "Choice",
    "Regex",
    # Sources
    "StaticMetadataSource",
    "StaticConstraintSource",
    "PydanticMetadataSource",
    "PydanticConstraintSource",
    "DocstringParser",
    # Naming
    "IdenticalPropertyNamingStrategy",
    "CamelCaseNamingStrategy",
    "SnakeCaseNamingStrategy",
    "SerializedNameAnnotationStrategy",
]
