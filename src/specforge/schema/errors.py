# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Schema-document error classes.
"""

from __future__ import annotations

from typing import Any, Final

from specforge.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, SpecforgeError

SCHEMA = ErrorCategory.get_or_create("SCHEMA")
SCHEMA_ERROR: Final = ErrorCode.get_or_create("SCHEMA_ERROR", SCHEMA)
DOCUMENT_INVALID: Final = ErrorCode.get_or_create("DOCUMENT_INVALID", SCHEMA)


class SchemaError(SpecforgeError):
    """Base class for schema-document errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = SCHEMA_ERROR,
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


class DocumentValidationError(SchemaError):
    """Raised when a document fails validation; carries every violation found."""

    def __init__(
        self,
        violations: list[str],
        code: ErrorCode = DOCUMENT_INVALID,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self.violations = list(violations)
        message = "Schema document is invalid:\n" + "\n".join(
            f"  - {violation}" for violation in self.violations
        )
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            violation_count=len(self.violations),
            **kwargs,
        )
