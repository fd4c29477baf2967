# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
specforge: Swagger 2.0 documents generated by pluggable extractors.

Typical use::

    from specforge import create_generator
    from specforge.metadata import PydanticMetadataSource, PydanticConstraintSource

    generator = create_generator(
        PydanticMetadataSource(),
        constraint_source=PydanticConstraintSource(),
    )
    document = generator.extract(raw_document)
    generator.extract(User, Schema(), ExtractionContext(generator, document))
    print(generator.dump(document))
"""

from specforge.extraction import (
    Direction,
    ExtractionContext,
    ExtractionImpossibleError,
    ExtractorProtocol,
    Section,
)
from specforge.generator import SwaggerGenerator, create_generator
from specforge.schema import DocumentValidationError, Schema, Swagger

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "SwaggerGenerator",
    "create_generator",
    "ExtractionContext",
    "ExtractorProtocol",
    "ExtractionImpossibleError",
    "Direction",
    "Section",
    "Swagger",
    "Schema",
    "DocumentValidationError",
]
