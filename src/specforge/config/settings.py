# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""Generator settings loading and caching.

Settings are read from ``SPECFORGE_*`` environment variables and cached per
process; tests reset the cache with :func:`clear_settings_cache`.
"""

from __future__ import annotations

import threading

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_COLLECTION_TYPES = (
    "array",
    "ArrayCollection",
    "list",
    "List",
    "dict",
    "Dict",
    "set",
    "Set",
    "frozenset",
    "tuple",
    "Sequence",
    "Mapping",
)


class GeneratorSettings(BaseSettings):
    """Configuration for the schema generator and its shipped extractors."""

    model_config = SettingsConfigDict(
        env_prefix="SPECFORGE_",
        extra="ignore",
        case_sensitive=False,
    )

    swagger_version: str = Field(
        default="2.0", description="Version value the bootstrap extractor accepts"
    )
    signature_field: str = Field(
        default="swagger", description="Top-level field identifying a schema document"
    )
    not_blank_format: str = Field(
        default="not empty", description="Format marker set by the not-blank constraint"
    )
    default_section: str = "default"
    bootstrap_section: str = "swagger"
    bootstrap_priority: int = -1
    collection_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COLLECTION_TYPES)
    )
    validate_on_dump: bool = True
    dump_indent: int | None = None


_SETTINGS: GeneratorSettings | None = None
_SETTINGS_LOCK = threading.Lock()


def get_settings() -> GeneratorSettings:
    """Get the cached generator settings, loading them on first use."""
    global _SETTINGS

    if _SETTINGS is not None:
        return _SETTINGS

    with _SETTINGS_LOCK:
        if _SETTINGS is None:
            _SETTINGS = GeneratorSettings()
        return _SETTINGS


def clear_settings_cache() -> None:
    """Clear the cached settings.

    Primarily used by tests that change ``SPECFORGE_*`` variables.
    """
    global _SETTINGS
    with _SETTINGS_LOCK:
        _SETTINGS = None
