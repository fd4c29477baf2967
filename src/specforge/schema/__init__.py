# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Swagger 2.0 document records, their errors and dump-time validation.
"""

from specforge.schema.errors import DocumentValidationError, SchemaError
from specforge.schema.models import (
    BaseParameter,
    BodyParameter,
    Contact,
    ExternalDocumentation,
    FormParameter,
    Header,
    HeaderParameter,
    Info,
    License,
    Operation,
    Parameter,
    PathItem,
    PathParameter,
    QueryParameter,
    ReferenceParameter,
    Response,
    Schema,
    SchemaRecord,
    Swagger,
    Tag,
    TypedParameter,
)
from specforge.schema.validation import collect_violations, validate_document

__all__ = [
    # Records
    "SchemaRecord",
    "Swagger",
    "Info",
    "Contact",
    "License",
    "ExternalDocumentation",
    "Tag",
    "PathItem",
    "Operation",
    "Response",
    "Header",
    "Schema",
    # Parameters
    "Parameter",
    "BaseParameter",
    "TypedParameter",
    "BodyParameter",
    "QueryParameter",
    "ReferenceParameter",
    "PathParameter",
    "HeaderParameter",
    "FormParameter",
    # Validation
    "SchemaError",
    "DocumentValidationError",
    "collect_violations",
    "validate_document",
]
