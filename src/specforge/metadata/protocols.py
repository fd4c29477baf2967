# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Interfaces of the metadata providers the extractors read from.

These protocols are NOT runtime_checkable and should be used for static
type checking only.
"""

from __future__ import annotations

from typing import Any, Protocol

from specforge.metadata.constraints import Constraint
from specforge.metadata.models import ClassMetadata, DocBlock, PropertyMetadata


class PropertyMetadataSource(Protocol):
    """Describes the serialized properties of classes."""

    def get_metadata_for_class(self, cls: type[Any]) -> ClassMetadata | None:
        """
        Get the property metadata of a class.

        Args:
            cls: The class to describe

        Returns:
            The class metadata, or None if the class is unknown to this source
        """
        ...

    def resolve_type(self, name: str) -> type[Any] | None:
        """
        Resolve a declared type name to a class this source describes.

        Args:
            name: Type name as found in property metadata

        Returns:
            The class, or None if the name is unknown
        """
        ...


class ConstraintSource(Protocol):
    """Describes validation constraints of class properties."""

    def get_constraints_for_class(self, cls: type[Any]) -> dict[str, list[Constraint]]:
        """
        Get the constraints of each property of a class.

        Args:
            cls: The class to inspect

        Returns:
            Property name to constraints, empty when the class has none
        """
        ...


class DocCommentSource(Protocol):
    """Parses structured documentation comments."""

    def get_doc_block(self, obj: Any) -> DocBlock | None:
        """
        Parse the documentation attached to a function, method or class.

        Returns:
            The parsed block, or None when there is nothing to parse
        """
        ...

    def get_property_doc_block(self, cls: type[Any], name: str) -> DocBlock | None:
        """
        Parse the documentation attached to a property or attribute of a class.

        Returns:
            The parsed block, or None when none can be found
        """
        ...


class PropertyNamingStrategy(Protocol):
    """Translates a property to its serialized name."""

    def translate_name(self, property_metadata: PropertyMetadata) -> str: ...
