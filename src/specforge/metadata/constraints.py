# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Validation constraints a constraint source can report for a property.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Constraint(BaseModel):
    """Base class for property constraints."""

    model_config = ConfigDict(frozen=True)


class NotBlank(Constraint):
    """The value must not be empty."""


class NotNull(Constraint):
    """The value must be present."""


class Length(Constraint):
    """Bounds on the length of a string."""

    min: int | None = None
    max: int | None = None


class Range(Constraint):
    """Bounds on a numeric value; an exclusive bound is not itself accepted."""

    min: float | None = None
    max: float | None = None
    exclusive_min: bool = False
    exclusive_max: bool = False


class Choice(Constraint):
    """The value must be one of `choices`."""

    choices: tuple[Any, ...]


class Regex(Constraint):
    """The value must match `pattern`."""

    pattern: str
