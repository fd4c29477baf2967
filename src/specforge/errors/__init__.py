# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge

"""
Error handling for specforge.
"""

from __future__ import annotations

from specforge.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    SpecforgeError,
)
from specforge.errors.registry import ErrorRegistry, registry

__all__ = [
    # Error categories
    "ErrorCode",
    "ErrorCategory",
    "ErrorSeverity",
    "INTERNAL",
    "INTERNAL_ERROR",
    # Base errors
    "SpecforgeError",
    # Registry
    "ErrorRegistry",
    "registry",
]
