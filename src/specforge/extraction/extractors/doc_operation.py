# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Extractor completing an operation from the docstring of its handler.

Recognised tags:

- summary and description: fill the operation's own fields
- ``return``: the ``200`` response and its schema
- ``deprecated``: marks the operation deprecated
- ``throws``: one error response per concrete exception class
- ``param``: descriptions and types of declared parameters, or of the body
  schema's properties
"""

from __future__ import annotations

import builtins
import importlib
import inspect
from typing import Any

from specforge.extraction.context import DIRECTION, Direction, ExtractionContext
from specforge.extraction.errors import ExtractionImpossibleError
from specforge.extraction.type_resolution import extract_type_schema
from specforge.logging import get_logger
from specforge.metadata.docstring import DocstringParser
from specforge.metadata.models import DocBlock, DocTag
from specforge.metadata.protocols import DocCommentSource
from specforge.metadata.types import TypeDescriptor
from specforge.schema.models import (
    Operation,
    Response,
    Schema,
    TypedParameter,
)

logger = get_logger(__name__)

DEFAULT_ERROR_CODE = 500


def _qualified_name(cls: type[Any]) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _doc_summary(cls: type[Any]) -> str | None:
    # Only the class's own docstring; inherited ones describe the parent.
    doc = vars(cls).get("__doc__")
    if not doc:
        return None
    return " ".join(inspect.cleandoc(doc).split("\n\n")[0].split()) or None


class DocOperationExtractor:
    """Extractor for functions and methods documented with a docstring."""

    def __init__(self, doc_source: DocCommentSource | None = None) -> None:
        self.doc_source = doc_source or DocstringParser()
        self._exception_response_codes: dict[Any, tuple[int, str | None]] = {}

    def register_exception_response_codes(
        self,
        exception: type[BaseException] | str,
        code: int = DEFAULT_ERROR_CODE,
        message: str | None = None,
    ) -> None:
        """
        Map an exception to the response documented when it is raised.

        Subclasses of `exception` use the mapping too, unless a mapping closer
        to them in their MRO exists.

        Args:
            exception: Exception class, or its qualified or bare name
            code: HTTP status code of the response
            message: Default response description
        """
        self._exception_response_codes[exception] = (code, message)

    def get_exception_information(
        self, exception: type[BaseException]
    ) -> tuple[int, str | None]:
        """The most specific registered (code, message), else (500, None)."""
        for klass in inspect.getmro(exception):
            for key in (klass, _qualified_name(klass), klass.__qualname__, klass.__name__):
                if key in self._exception_response_codes:
                    return self._exception_response_codes[key]
        return DEFAULT_ERROR_CODE, None

    def can_extract(self, source: Any, target: Any, context: ExtractionContext) -> bool:
        if not isinstance(target, Operation):
            return False
        if not (inspect.isfunction(source) or inspect.ismethod(source)):
            return False
        return self.doc_source.get_doc_block(source) is not None

    def extract(self, source: Any, target: Any, context: ExtractionContext) -> None:
        block = (
            self.doc_source.get_doc_block(source)
            if isinstance(target, Operation)
            and (inspect.isfunction(source) or inspect.ismethod(source))
            else None
        )
        if block is None:
            raise ExtractionImpossibleError(self, source, target)

        if target.summary is None and block.summary:
            target.summary = block.summary
        if target.description is None and block.description:
            target.description = block.description

        self._extract_return(block, target, context)

        if block.has_tag("deprecated"):
            target.deprecated = True

        for tag in block.get_tags_by_name("throws"):
            self._extract_throws(source, tag, target)

        for tag in block.get_tags_by_name("param"):
            self._extract_param(tag, target, context)

    def _extract_return(
        self, block: DocBlock, operation: Operation, context: ExtractionContext
    ) -> None:
        for tag in block.get_tags_by_name("return"):
            if operation.get_response(200) is not None:
                continue

            response = Response(description=tag.description)
            if tag.type and not self._is_null(tag.type):
                response.schema_ = Schema()
                sub_context = context.create_sub_context()
                sub_context.set_parameter(DIRECTION, Direction.OUT.value)
                extract_type_schema(tag.type, response.schema_, sub_context)
            operation.set_response(200, response)

    def _is_null(self, type_name: str) -> bool:
        try:
            return TypeDescriptor.parse(type_name).name == "null"
        except ValueError:
            return False

    def _extract_throws(self, method: Any, tag: DocTag, operation: Operation) -> None:
        exception = self.resolve_exception(method, tag.type)
        if exception is None:
            logger.debug("Ignoring unresolvable exception", exception=tag.type)
            return
        if inspect.isabstract(exception) or getattr(exception, "_is_protocol", False):
            return

        code, message = self.get_exception_information(exception)
        description = tag.description or message or _doc_summary(exception)

        response = operation.get_response(code)
        if response is None:
            operation.set_response(code, Response(description=description))
        elif response.description is None:
            response.description = description

    def resolve_exception(
        self, method: Any, name: str | None
    ) -> type[BaseException] | None:
        """
        Resolve an exception name as seen from `method`.

        The name is looked up in the method's module globals, then in the
        builtins, then as a dotted attribute path or module import path.
        """
        if not name:
            return None

        function = getattr(method, "__func__", method)
        namespace: dict[str, Any] = getattr(inspect.unwrap(function), "__globals__", {})

        candidate = namespace.get(name, getattr(builtins, name, None))
        if candidate is None and "." in name:
            head, *parts = name.split(".")
            candidate = namespace.get(head)
            for part in parts:
                candidate = getattr(candidate, part, None)
        if candidate is None and "." in name:
            module_name, _, attribute = name.rpartition(".")
            try:
                candidate = getattr(importlib.import_module(module_name), attribute, None)
            except ImportError:
                candidate = None

        if inspect.isclass(candidate) and issubclass(candidate, BaseException):
            return candidate
        return None

    def _extract_param(
        self, tag: DocTag, operation: Operation, context: ExtractionContext
    ) -> None:
        name = (tag.variable or "").lstrip("$")
        if not name:
            return

        parameter = operation.get_parameter(name)
        if parameter is not None:
            if parameter.description is None and tag.description:
                parameter.description = tag.description
            if isinstance(parameter, TypedParameter) and parameter.type is None and tag.type:
                self._resolve_parameter_type(tag.type, parameter, context)
            return

        body = operation.get_body_parameter()
        if body is None or body.schema_ is None or not body.schema_.properties:
            logger.debug("Ignoring undeclared parameter", parameter=name)
            return

        property_schema = body.schema_.properties.get(name)
        if property_schema is None:
            logger.debug("Ignoring undeclared parameter", parameter=name)
            return

        if property_schema.description is None and tag.description:
            property_schema.description = tag.description
        if property_schema.type is None and property_schema.ref is None and tag.type:
            sub_context = context.create_sub_context()
            sub_context.set_parameter(DIRECTION, Direction.IN.value)
            extract_type_schema(tag.type, property_schema, sub_context)

    def _resolve_parameter_type(
        self, type_name: str, parameter: TypedParameter, context: ExtractionContext
    ) -> None:
        sub_context = context.create_sub_context()
        sub_context.set_parameter(DIRECTION, Direction.IN.value)
        resolved = extract_type_schema(type_name, Schema(), sub_context)

        parameter.type = resolved.type
        if parameter.format is None:
            parameter.format = resolved.format
        if parameter.items is None:
            parameter.items = resolved.items


