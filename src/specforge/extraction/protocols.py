# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Core protocol of the extraction system.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from specforge.extraction.context import ExtractionContext


class ExtractorProtocol(Protocol):
    """
    Protocol for extractors contributing to a target schema record.

    Extraction is incremental: other extractors may already have run on the
    same target, and an extractor must complete what it finds rather than
    overwrite it.

    This protocol is NOT runtime_checkable and should be used
    for static type checking only.
    """

    def can_extract(self, source: Any, target: Any, context: ExtractionContext) -> bool:
        """
        Determine if this extractor can contribute to `target` from `source`.

        Must not mutate anything.

        Args:
            source: The item to extract from
            target: The schema record being completed
            context: The current extraction context

        Returns:
            True if this extractor can handle the pair
        """
        ...

    def extract(self, source: Any, target: Any, context: ExtractionContext) -> None:
        """
        Contribute to `target` from `source`.

        Raises:
            ExtractionImpossibleError: If the pair is not accepted by can_extract
        """
        ...
