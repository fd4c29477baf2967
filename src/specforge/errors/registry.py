# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""Unified error registry for specforge error codes and categories."""

from __future__ import annotations

import logging
import threading
from typing import Any


class ErrorRegistry:
    """Singleton registry for all error codes and categories."""

    _instance = None
    _lock = threading.RLock()

    def __new__(cls) -> "ErrorRegistry":
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def register_category(self, name: str, parent: Any = None) -> Any:
        """Register a category in the registry.

        Args:
            name: The category name
            parent: Optional parent category

        Returns:
            The registered ErrorCategory
        """
        with self._lock:
            if name in self._categories:
                return self._categories[name]

            from specforge.errors.base import ErrorCategory

            category = ErrorCategory(name, parent)
            self._categories[name] = category
            return category

    def register_code(self, code: str, category_name: str) -> Any:
        """Register a code under a category, creating the category if needed."""
        with self._lock:
            key = f"{category_name}.{code}"
            if key in self._codes:
                return self._codes[key]

            category = self.get_category(category_name)

            from specforge.errors.base import ErrorCode

            error_code = ErrorCode(code, category)
            self._codes[key] = error_code
            self._codes[code] = error_code
            return error_code

    def get_category(self, name: str, parent: Any = None) -> Any:
        """Get or create a category."""
        with self._lock:
            if name in self._categories:
                return self._categories[name]
            return self.register_category(name, parent)

    def get_code(self, code: str, category_name: str = "INTERNAL") -> Any:
        """Get or create an error code.

        Args:
            code: The error code
            category_name: The category name (defaults to INTERNAL)

        Returns:
            The ErrorCode
        """
        with self._lock:
            key = f"{category_name}.{code}"
            if key in self._codes:
                return self._codes[key]
            return self.register_code(code, category_name)

    def lookup_code(self, code: str) -> Any:
        """Look up an error code without creating it.

        Returns:
            The ErrorCode or None if not found
        """
        if code in self._codes:
            return self._codes[code]

        logging.getLogger(__name__).warning(
            "Error code '%s' not found in registry, returning None", code
        )
        return None

    def get_all_categories(self) -> list[Any]:
        with self._lock:
            return list(self._categories.values())

    def get_all_codes(self) -> list[Any]:
        with self._lock:
            # Codes are stored under two keys; de-duplicate by identity.
            seen: dict[int, Any] = {}
            for error_code in self._codes.values():
                seen.setdefault(id(error_code), error_code)
            return list(seen.values())


registry = ErrorRegistry()
