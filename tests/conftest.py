"""Top-level pytest configuration for specforge."""

from __future__ import annotations

from typing import Any

import pytest

# Import modules for their side effects so the error registry is populated
import specforge.errors.base
import specforge.extraction.errors
import specforge.schema.errors
from specforge.config import GeneratorSettings, clear_settings_cache
from specforge.extraction.context import ExtractionContext
from specforge.generator import SwaggerGenerator


class RecordingExtractor:
    """Extractor appending its name to a shared log when it runs."""

    def __init__(self, name: str, log: list[str], accepts: bool = True) -> None:
        self.name = name
        self.log = log
        self.accepts = accepts

    def can_extract(self, source: Any, target: Any, context: ExtractionContext) -> bool:
        return self.accepts

    def extract(self, source: Any, target: Any, context: ExtractionContext) -> None:
        self.log.append(self.name)

    def __repr__(self) -> str:
        return f"RecordingExtractor({self.name!r})"


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop cached settings around every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> GeneratorSettings:
    return GeneratorSettings()


@pytest.fixture
def generator(settings: GeneratorSettings) -> SwaggerGenerator:
    """A generator with only the bootstrap extractor registered."""
    return SwaggerGenerator(settings=settings)


@pytest.fixture
def context(generator: SwaggerGenerator) -> ExtractionContext:
    return ExtractionContext(generator)


@pytest.fixture
def recorder():
    """Factory for RecordingExtractor instances."""
    return RecordingExtractor
