# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
The schema generator.

:class:`SwaggerGenerator` owns the extractor registry and drives extraction:
every registered extractor, in section then priority order, is asked whether
it can contribute to the (source, target) pair and, if so, contributes.
Extractors recurse into nested types by calling :meth:`SwaggerGenerator.extract`
again with a forked context.
"""

from __future__ import annotations

from typing import Any

from specforge.config import GeneratorSettings, get_settings
from specforge.extraction.context import ExtractionContext
from specforge.extraction.extractors import SwaggerSchemaExtractor, get_extractors
from specforge.extraction.protocols import ExtractorProtocol
from specforge.extraction.registry import ExtractorRegistration, ExtractorRegistry
from specforge.logging import get_logger
from specforge.metadata.protocols import (
    ConstraintSource,
    DocCommentSource,
    PropertyMetadataSource,
    PropertyNamingStrategy,
)
from specforge.schema.models import Swagger
from specforge.schema.validation import validate_document

logger = get_logger(__name__)


class SwaggerGenerator:
    """
    Generates Swagger 2.0 documents by running registered extractors.

    The bootstrap extractor, which merges an existing raw document into the
    target, is registered on construction.
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        registry: ExtractorRegistry | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._registry = registry if registry is not None else ExtractorRegistry()
        self.register_extractor(
            SwaggerSchemaExtractor(settings=self.settings),
            priority=self.settings.bootstrap_priority,
            section=self.settings.bootstrap_section,
        )

    def register_extractor(
        self,
        extractor: ExtractorProtocol,
        priority: int = 0,
        section: str | None = None,
    ) -> None:
        """
        Register an extractor.

        Args:
            extractor: The extractor to register
            priority: Order within the section, lowest first
            section: Section of the extractor, the configured default if None
        """
        registration = self._registry.register(
            extractor,
            priority=priority,
            section=section if section is not None else self.settings.default_section,
        )
        logger.debug(
            "Registered extractor",
            extractor=type(extractor).__name__,
            section=registration.section,
            priority=registration.priority,
        )

    @property
    def registrations(self) -> tuple[ExtractorRegistration, ...]:
        return self._registry.registrations

    def get_sorted_extractors(self) -> tuple[ExtractorProtocol, ...]:
        return self._registry.get_sorted_extractors()

    def reset(self) -> None:
        """Remove every registration, the bootstrap extractor included."""
        self._registry.reset()

    def extract(
        self,
        source: Any,
        target: Any = None,
        context: ExtractionContext | None = None,
    ) -> Any:
        """
        Complete `target` from `source` with every applicable extractor.

        Args:
            source: What to extract from: a class, a function, a type name...
            target: The record to complete, a new document if None
            context: The extraction context, a root context if None

        Returns:
            The completed target
        """
        if target is None:
            target = Swagger()
        if context is None:
            context = ExtractionContext(self, root_schema=target)

        for extractor in self.get_sorted_extractors():
            if not extractor.can_extract(source, target, context):
                continue
            logger.debug(
                "Running extractor",
                extractor=type(extractor).__name__,
                target=type(target).__name__,
            )
            extractor.extract(source, target, context)

        return target

    def validate(self, document: Swagger) -> None:
        """
        Validate a document.

        Raises:
            DocumentValidationError: With every violation found
        """
        validate_document(document)

    def dump(self, document: Swagger) -> str:
        """Serialize a document to JSON, validating it first unless disabled."""
        if self.settings.validate_on_dump:
            self.validate(document)
        return document.model_dump_json(
            by_alias=True,
            exclude_none=True,
            indent=self.settings.dump_indent,
        )


def create_generator(
    metadata_source: PropertyMetadataSource,
    constraint_source: ConstraintSource | None = None,
    doc_source: DocCommentSource | None = None,
    naming_strategy: PropertyNamingStrategy | None = None,
    settings: GeneratorSettings | None = None,
) -> SwaggerGenerator:
    """
    Create a generator with the shipped extractors registered.

    Args:
        metadata_source: Source of class property metadata
        constraint_source: Source of validation constraints
        doc_source: Source of documentation, docstrings if None
        naming_strategy: Strategy translating property names
        settings: Generator settings, the cached settings if None

    Returns:
        The configured generator
    """
    generator = SwaggerGenerator(settings=settings)
    for extractor, priority in get_extractors(
        metadata_source,
        constraint_source=constraint_source,
        doc_source=doc_source,
        naming_strategy=naming_strategy,
        settings=generator.settings,
    ):
        generator.register_extractor(extractor, priority=priority)
    return generator
