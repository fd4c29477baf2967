# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Validation of a finished schema document.

Extraction never validates; these rules run when a document is dumped, and
every violation is collected before a single error is raised.
"""

from __future__ import annotations

from specforge.schema.errors import DocumentValidationError
from specforge.schema.models import (
    BodyParameter,
    Operation,
    Parameter,
    ReferenceParameter,
    Response,
    Schema,
    Swagger,
    TypedParameter,
)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _validate_schema(schema: Schema, path: str, violations: list[str]) -> None:
    if schema.ref is not None:
        return
    if schema.type == "array" and schema.items is None:
        violations.append(f"{path}.items: array schema must define items")
    if schema.items is not None:
        _validate_schema(schema.items, f"{path}.items", violations)
    for name, property_schema in (schema.properties or {}).items():
        _validate_schema(property_schema, f"{path}.properties.{name}", violations)
    for name in schema.required or []:
        if schema.properties is not None and name not in schema.properties:
            violations.append(f"{path}.required: '{name}' is not a declared property")


def _validate_response(response: Response, path: str, violations: list[str]) -> None:
    if response.ref is not None:
        return
    if response.description is None:
        violations.append(f"{path}.description: must not be null")
    if response.schema_ is not None:
        _validate_schema(response.schema_, f"{path}.schema", violations)


def _validate_parameter(parameter: Parameter, path: str, violations: list[str]) -> None:
    if isinstance(parameter, ReferenceParameter):
        if _is_blank(parameter.ref):
            violations.append(f"{path}.$ref: must not be blank")
        return
    if _is_blank(parameter.name):
        violations.append(f"{path}.name: must not be blank")
    if isinstance(parameter, BodyParameter):
        if parameter.schema_ is None:
            violations.append(f"{path}.schema: body parameter must define a schema")
        else:
            _validate_schema(parameter.schema_, f"{path}.schema", violations)
    elif isinstance(parameter, TypedParameter):
        if _is_blank(parameter.type):
            violations.append(f"{path}.type: must not be blank")
        if parameter.in_ == "path" and parameter.required is not True:
            violations.append(f"{path}.required: path parameters must be required")


def _validate_operation(operation: Operation, path: str, violations: list[str]) -> None:
    for index, parameter in enumerate(operation.parameters or []):
        _validate_parameter(parameter, f"{path}.parameters[{index}]", violations)
    if not operation.responses:
        violations.append(f"{path}.responses: must declare at least one response")
    for code, response in (operation.responses or {}).items():
        _validate_response(response, f"{path}.responses.{code}", violations)


def collect_violations(document: Swagger) -> list[str]:
    """Return every violation found in `document`, in document order."""
    violations: list[str] = []

    if document.swagger != "2.0":
        violations.append(f"swagger: must be '2.0', got {document.swagger!r}")

    if document.info is None:
        violations.append("info: must not be null")
    else:
        if _is_blank(document.info.title):
            violations.append("info.title: must not be blank")
        if _is_blank(document.info.version):
            violations.append("info.version: must not be blank")

    if document.paths is None:
        violations.append("paths: must not be null")
    for route, path_item in (document.paths or {}).items():
        for method, operation in path_item.operations().items():
            _validate_operation(operation, f"paths.{route}.{method}", violations)

    for name, definition in (document.definitions or {}).items():
        _validate_schema(definition, f"definitions.{name}", violations)

    for name, parameter in (document.parameters or {}).items():
        _validate_parameter(parameter, f"parameters.{name}", violations)

    for index, tag in enumerate(document.tags or []):
        if _is_blank(tag.name):
            violations.append(f"tags[{index}].name: must not be blank")

    return violations


def validate_document(document: Swagger) -> None:
    """Raise :class:`DocumentValidationError` if `document` has any violation."""
    violations = collect_violations(document)
    if violations:
        raise DocumentValidationError(violations)
