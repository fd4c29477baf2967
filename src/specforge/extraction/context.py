# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Extraction context.

A context carries the generator driving the extraction, the root schema of
the top-level call and a mapping of named parameters. Extractors that recurse
into a nested type fork a sub-context: the child receives a deep copy of the
parameters, so changes on either side after the fork stay on that side.
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from specforge.generator import SwaggerGenerator

DIRECTION: Final = "direction"
IN_MODEL_CONTEXT: Final = "in-model-context"
OUT_MODEL_CONTEXT: Final = "out-model-context"
SERIALIZER_GROUPS: Final = "serializer-groups"
INLINE_CLASSES: Final = "inline-classes"


class Direction(str, Enum):
    """Whether a schema models a request (``in``) or a response (``out``)."""

    IN = "in"
    OUT = "out"


class ExtractionContext:
    """Per-call extraction state, forkable for nested extractions."""

    def __init__(
        self,
        swagger: SwaggerGenerator,
        root_schema: Any = None,
        parameters: dict[str, Any] | None = None,
    ) -> None:
        self._swagger = swagger
        self.root_schema = root_schema
        self._parameters: dict[str, Any] = dict(parameters or {})

    @property
    def swagger(self) -> SwaggerGenerator:
        return self._swagger

    def get_swagger(self) -> SwaggerGenerator:
        """The generator every nested extraction must go through."""
        return self._swagger

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def get_parameter(self, name: str, default: Any = None) -> Any:
        return self._parameters.get(name, default)

    def set_parameter(self, name: str, value: Any) -> None:
        self._parameters[name] = value

    def remove_parameter(self, name: str) -> None:
        self._parameters.pop(name, None)

    @property
    def parameters(self) -> dict[str, Any]:
        """A copy of the parameters; mutate through set_parameter."""
        return copy.deepcopy(self._parameters)

    def create_sub_context(self) -> ExtractionContext:
        """Fork a child context bound to the same generator and root schema."""
        return ExtractionContext(
            self._swagger,
            root_schema=self.root_schema,
            parameters=copy.deepcopy(self._parameters),
        )

    @property
    def direction(self) -> Direction | None:
        value = self._parameters.get(DIRECTION)
        if value is None:
            return None
        try:
            return Direction(value)
        except ValueError:
            return None

    def get_model_context(self) -> dict[str, Any]:
        """The model context selected by the current direction, ``{}`` if none."""
        if self.direction is Direction.IN:
            return dict(self._parameters.get(IN_MODEL_CONTEXT) or {})
        if self.direction is Direction.OUT:
            return dict(self._parameters.get(OUT_MODEL_CONTEXT) or {})
        return {}

    def get_serializer_groups(self) -> list[str]:
        return list(self.get_model_context().get(SERIALIZER_GROUPS) or [])

    def get_inline_classes(self) -> tuple[type[Any], ...]:
        """Classes being extracted inline by the enclosing extractions."""
        return tuple(self._parameters.get(INLINE_CLASSES) or ())

    def create_inline_context(self, cls: type[Any]) -> ExtractionContext:
        """Fork a sub-context recording that `cls` is being extracted inline."""
        sub_context = self.create_sub_context()
        inline = self.get_inline_classes()
        if cls not in inline:
            sub_context.set_parameter(INLINE_CLASSES, (*inline, cls))
        return sub_context

    def __repr__(self) -> str:
        return f"ExtractionContext(parameters={self._parameters!r})"
