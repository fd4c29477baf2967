# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge

"""
Public API for the specforge logging system.
"""

from __future__ import annotations

from specforge.logging.config import LoggingSettings
from specforge.logging.level import LogLevel
from specforge.logging.logger import SpecforgeLogger, StructuredFormatter, get_logger

__all__ = [
    "LogLevel",
    "LoggingSettings",
    "SpecforgeLogger",
    "StructuredFormatter",
    "get_logger",
]
