# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Records of the Swagger 2.0 schema document.

Every optional field defaults to ``None``, which means *unset*. Extractors
test ``is None`` before writing, so an empty string or a zero is a real value
that is never overwritten. Python attribute names are snake_case; the wire
names (``$ref``, ``in``, ``readOnly``, ...) are aliases used when parsing and
dumping documents.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field
from pydantic import Tag as UnionTag
from pydantic.alias_generators import to_camel


class SchemaRecord(BaseModel):
    """Base for every document record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ExternalDocumentation(SchemaRecord):
    """Reference to external documentation."""

    description: str | None = None
    url: str | None = None


class Contact(SchemaRecord):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(SchemaRecord):
    name: str | None = None
    url: str | None = None


class Info(SchemaRecord):
    """Metadata about the API."""

    title: str | None = None
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None
    version: str | None = None


class Tag(SchemaRecord):
    """A tag used by operations; the name must not be blank."""

    name: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = None


class Schema(SchemaRecord):
    """A data type definition: object, array or primitive."""

    ref: str | None = Field(default=None, alias="$ref")
    format: str | None = None
    title: str | None = None
    description: str | None = None
    default: Any = None
    multiple_of: float | None = None
    maximum: float | None = None
    exclusive_maximum: bool | None = None
    minimum: float | None = None
    exclusive_minimum: bool | None = None
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool | None = None
    enum: list[Any] | None = None
    type: str | None = None
    items: Schema | None = None
    all_of: list[Schema] | None = None
    properties: dict[str, Schema] | None = None
    additional_properties: Schema | bool | None = None
    discriminator: str | None = None
    read_only: bool | None = None
    required: list[str] | None = None
    external_docs: ExternalDocumentation | None = None
    example: Any = None

    def set_property(self, name: str, schema: Schema) -> Schema:
        """Install `schema` under `name`, creating the mapping when unset."""
        if self.properties is None:
            self.properties = {}
        self.properties[name] = schema
        return schema

    def add_required(self, name: str) -> bool:
        """Append `name` to ``required`` unless present; return whether it was added."""
        if self.required is None:
            self.required = []
        if name in self.required:
            return False
        self.required.append(name)
        return True


class Header(SchemaRecord):
    description: str | None = None
    type: str | None = None
    format: str | None = None


class Response(SchemaRecord):
    """A single response of an operation."""

    ref: str | None = Field(default=None, alias="$ref")
    description: str | None = None
    schema_: Schema | None = Field(default=None, alias="schema")
    headers: dict[str, Header] | None = None
    examples: dict[str, Any] | None = None


class BaseParameter(SchemaRecord):
    name: str | None = None
    description: str | None = None
    required: bool | None = None


class BodyParameter(BaseParameter):
    """The request payload; carries a schema instead of a primitive type."""

    in_: Literal["body"] = Field(default="body", alias="in")
    schema_: Schema | None = Field(default=None, alias="schema")


class TypedParameter(BaseParameter):
    """A parameter described by a primitive type."""

    type: str | None = None
    format: str | None = None
    items: Schema | None = None
    collection_format: str | None = None
    default: Any = None
    maximum: float | None = None
    minimum: float | None = None
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None
    enum: list[Any] | None = None


class QueryParameter(TypedParameter):
    in_: Literal["query"] = Field(default="query", alias="in")


class PathParameter(TypedParameter):
    in_: Literal["path"] = Field(default="path", alias="in")


class HeaderParameter(TypedParameter):
    in_: Literal["header"] = Field(default="header", alias="in")


class FormParameter(TypedParameter):
    in_: Literal["formData"] = Field(default="formData", alias="in")


class ReferenceParameter(SchemaRecord):
    """A parameter declared once under the document's ``parameters`` and referenced."""

    ref: str | None = Field(default=None, alias="$ref")


def _parameter_kind(value: Any) -> str | None:
    # Wire data keys by alias; records built in code key by attribute name.
    if isinstance(value, dict):
        if "$ref" in value or "ref" in value:
            return "ref"
        return value.get("in", value.get("in_"))
    if isinstance(value, ReferenceParameter):
        return "ref"
    return getattr(value, "in_", None)


Parameter = Annotated[
    Annotated[ReferenceParameter, UnionTag("ref")]
    | Annotated[BodyParameter, UnionTag("body")]
    | Annotated[QueryParameter, UnionTag("query")]
    | Annotated[PathParameter, UnionTag("path")]
    | Annotated[HeaderParameter, UnionTag("header")]
    | Annotated[FormParameter, UnionTag("formData")],
    Discriminator(_parameter_kind),
]


class Operation(SchemaRecord):
    """A single API operation on a path."""

    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
    operation_id: str | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    parameters: list[Parameter] | None = None
    responses: dict[str, Response] | None = None
    schemes: list[str] | None = None
    deprecated: bool | None = None
    security: list[dict[str, list[str]]] | None = None

    def get_parameter(self, name: str) -> Parameter | None:
        for parameter in self.parameters or []:
            if getattr(parameter, "name", None) == name:
                return parameter
        return None

    def get_body_parameter(self) -> BodyParameter | None:
        for parameter in self.parameters or []:
            if isinstance(parameter, BodyParameter):
                return parameter
        return None

    def get_response(self, code: int | str) -> Response | None:
        return (self.responses or {}).get(str(code))

    def set_response(self, code: int | str, response: Response) -> Response:
        if self.responses is None:
            self.responses = {}
        self.responses[str(code)] = response
        return response


class PathItem(SchemaRecord):
    ref: str | None = Field(default=None, alias="$ref")
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    parameters: list[Parameter] | None = None

    def operations(self) -> dict[str, Operation]:
        """Map of HTTP method to the operations that are set."""
        methods = ("get", "put", "post", "delete", "options", "head", "patch")
        return {
            method: getattr(self, method)
            for method in methods
            if getattr(self, method) is not None
        }


class Swagger(SchemaRecord):
    """The root schema document."""

    swagger: str | None = "2.0"
    info: Info | None = None
    host: str | None = None
    base_path: str | None = None
    schemes: list[str] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    paths: dict[str, PathItem] | None = None
    definitions: dict[str, Schema] | None = None
    parameters: dict[str, Parameter] | None = None
    responses: dict[str, Response] | None = None
    security_definitions: dict[str, Any] | None = None
    security: list[dict[str, list[str]]] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocumentation | None = None

    def has_definition(self, name: str) -> bool:
        return self.definitions is not None and name in self.definitions

    def add_definition(self, name: str, schema: Schema) -> Schema:
        if self.definitions is None:
            self.definitions = {}
        self.definitions[name] = schema
        return schema


Schema.model_rebuild()
