# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Extraction error classes.

:class:`ExtractionImpossibleError` signals a broken extractor contract: an
extractor was asked to extract a pair it does not accept. It is never caught
by the generator.
"""

from __future__ import annotations

from typing import Any, Final

from specforge.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, SpecforgeError

EXTRACTION = ErrorCategory.get_or_create("EXTRACTION")
EXTRACTION_ERROR: Final = ErrorCode.get_or_create("EXTRACTION_ERROR", EXTRACTION)
EXTRACTION_IMPOSSIBLE: Final = ErrorCode.get_or_create(
    "EXTRACTION_IMPOSSIBLE", EXTRACTION
)


def _describe(value: Any) -> str:
    if isinstance(value, type):
        return f"{value.__module__}.{value.__qualname__}"
    if isinstance(value, str):
        return value if len(value) <= 60 else f"{value[:57]}..."
    return type(value).__name__


class ExtractionError(SpecforgeError):
    """Base class for extraction errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = EXTRACTION_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class ExtractionImpossibleError(ExtractionError):
    """Raised when an extractor is asked to extract a pair it cannot handle."""

    def __init__(
        self,
        extractor: Any,
        source: Any,
        target: Any,
        reason: str | None = None,
        code: ErrorCode = EXTRACTION_IMPOSSIBLE,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        extractor_name = type(extractor).__name__
        message = f"{extractor_name} cannot extract {_describe(source)} into {type(target).__name__}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            extractor=extractor_name,
            source=_describe(source),
            target=type(target).__name__,
            **kwargs,
        )
