# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""Configuration management for specforge."""

from specforge.config.settings import (
    DEFAULT_COLLECTION_TYPES,
    GeneratorSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "DEFAULT_COLLECTION_TYPES",
    "GeneratorSettings",
    "clear_settings_cache",
    "get_settings",
]
