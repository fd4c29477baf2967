# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Metadata sources reading Pydantic models.

Properties come from ``model_fields`` (and ``model_computed_fields`` as
virtual, read-only properties). Extra serialization metadata is read from
``json_schema_extra``:

- ``read_only``: mark the property read-only
- ``groups``: serializer groups the property belongs to
- ``not_blank``: report a :class:`NotBlank` constraint
"""

from __future__ import annotations

import datetime
import decimal
import inspect
import types
import uuid
from enum import Enum
from typing import Annotated, Any, Literal, Union, get_args, get_origin

import annotated_types
from pydantic import BaseModel
from pydantic.fields import FieldInfo

from specforge.metadata.constraints import (
    Choice,
    Constraint,
    Length,
    NotBlank,
    NotNull,
    Range,
    Regex,
)
from specforge.metadata.models import ClassMetadata, PropertyMetadata
from specforge.metadata.types import TypeDescriptor

_SCALAR_NAMES: dict[Any, str] = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    bytes: "bytes",
    decimal.Decimal: "number",
    datetime.datetime: "datetime",
    datetime.date: "date",
    datetime.time: "time",
    uuid.UUID: "uuid",
    Any: "mixed",
    object: "mixed",
}


def _is_model(annotation: Any) -> bool:
    return inspect.isclass(annotation) and issubclass(annotation, BaseModel)


def _schema_extra(field: FieldInfo) -> dict[str, Any]:
    extra = field.json_schema_extra
    return extra if isinstance(extra, dict) else {}


def _strip_optional(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is Annotated:
        return _strip_optional(get_args(annotation)[0])
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if members:
            return _strip_optional(members[0])
    return annotation


class PydanticMetadataSource:
    """Describes Pydantic models as property metadata."""

    def __init__(self, *models: type[BaseModel]) -> None:
        self._cache: dict[type[Any], ClassMetadata] = {}
        self._names: dict[str, type[BaseModel]] = {}
        self.register(*models)

    def register(self, *models: type[BaseModel]) -> None:
        """Make `models` resolvable by name before they are first described."""
        for model in models:
            self._names[model.__name__] = model
            self._names[f"{model.__module__}.{model.__qualname__}"] = model

    def resolve_type(self, name: str) -> type[Any] | None:
        return self._names.get(name)

    def get_metadata_for_class(self, cls: type[Any]) -> ClassMetadata | None:
        if not _is_model(cls):
            return None
        if cls in self._cache:
            return self._cache[cls]

        self.register(cls)
        metadata = ClassMetadata(name=cls.__name__, class_=cls)
        # Cache before describing fields so self-referencing models terminate.
        self._cache[cls] = metadata

        for name, field in cls.model_fields.items():
            if name.startswith("_"):
                continue
            extra = _schema_extra(field)
            metadata.add_property(
                PropertyMetadata(
                    name=name,
                    type=self.describe_annotation(field.annotation),
                    serialized_name=field.serialization_alias or field.alias,
                    read_only=bool(extra.get("read_only", False)),
                    groups=list(extra["groups"]) if "groups" in extra else None,
                    description=field.description,
                )
            )

        for name, computed in cls.model_computed_fields.items():
            return_type = computed.return_type
            type_descriptor = (
                TypeDescriptor("mixed")
                if return_type is None or not (
                    inspect.isclass(return_type) or get_origin(return_type) is not None
                )
                else self.describe_annotation(return_type)
            )
            metadata.add_property(
                PropertyMetadata(
                    name=name,
                    type=type_descriptor,
                    serialized_name=computed.alias,
                    read_only=True,
                    getter=name,
                    description=computed.description,
                )
            )

        return metadata

    def describe_annotation(self, annotation: Any) -> TypeDescriptor:
        """Translate a Python type annotation to a :class:`TypeDescriptor`."""
        annotation = _strip_optional(annotation)

        if annotation is None or annotation is type(None):
            return TypeDescriptor("null")

        origin = get_origin(annotation)
        args = [arg for arg in get_args(annotation) if arg is not Ellipsis]

        if origin is Literal:
            values = get_args(annotation)
            return self.describe_annotation(type(values[0])) if values else TypeDescriptor("mixed")

        if origin is not None:
            name = getattr(origin, "__name__", str(origin))
            if not args:
                return TypeDescriptor(name)
            if name in ("dict", "Mapping", "MutableMapping", "defaultdict", "OrderedDict"):
                key = self.describe_annotation(args[0])
                value = self.describe_annotation(args[1]) if len(args) > 1 else TypeDescriptor("mixed")
                return TypeDescriptor("dict", (key, value))
            return TypeDescriptor(name, (self.describe_annotation(args[0]),))

        if _is_model(annotation):
            self.register(annotation)
            return TypeDescriptor(annotation.__name__)

        if inspect.isclass(annotation) and issubclass(annotation, Enum):
            members = list(annotation)
            if members:
                return self.describe_annotation(type(members[0].value))
            return TypeDescriptor("string")

        if annotation in _SCALAR_NAMES:
            return TypeDescriptor(_SCALAR_NAMES[annotation])

        return TypeDescriptor(getattr(annotation, "__name__", str(annotation)))


class PydanticConstraintSource:
    """Reads validation constraints from Pydantic field definitions."""

    def get_constraints_for_class(self, cls: type[Any]) -> dict[str, list[Constraint]]:
        if not _is_model(cls):
            return {}

        constraints: dict[str, list[Constraint]] = {}
        for name, field in cls.model_fields.items():
            found = self._field_constraints(field)
            if found:
                constraints[name] = found
        return constraints

    def _field_constraints(self, field: FieldInfo) -> list[Constraint]:
        found: list[Constraint] = []

        if field.is_required():
            found.append(NotNull())
        if _schema_extra(field).get("not_blank"):
            found.append(NotBlank())

        min_length = max_length = None
        minimum = maximum = None
        exclusive_min = exclusive_max = False
        for item in field.metadata:
            if isinstance(item, annotated_types.MinLen):
                min_length = item.min_length
            elif isinstance(item, annotated_types.MaxLen):
                max_length = item.max_length
            elif isinstance(item, annotated_types.Ge):
                minimum, exclusive_min = item.ge, False
            elif isinstance(item, annotated_types.Gt):
                minimum, exclusive_min = item.gt, True
            elif isinstance(item, annotated_types.Le):
                maximum, exclusive_max = item.le, False
            elif isinstance(item, annotated_types.Lt):
                maximum, exclusive_max = item.lt, True
            elif getattr(item, "pattern", None) is not None:
                found.append(Regex(pattern=str(item.pattern)))

        if min_length is not None or max_length is not None:
            found.append(Length(min=min_length, max=max_length))
        if minimum is not None or maximum is not None:
            found.append(
                Range(
                    min=minimum,
                    max=maximum,
                    exclusive_min=exclusive_min,
                    exclusive_max=exclusive_max,
                )
            )

        annotation = _strip_optional(field.annotation)
        if get_origin(annotation) is Literal:
            found.append(Choice(choices=get_args(annotation)))
        elif inspect.isclass(annotation) and issubclass(annotation, Enum):
            found.append(Choice(choices=tuple(member.value for member in annotation)))

        return found
