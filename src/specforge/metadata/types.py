# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Type-parameter notation used by metadata providers.

A declared type is a name with optional type parameters. Both the
``array<string, User>`` and the ``dict[str, User]`` spellings are accepted,
as are ``User[]`` and optional unions such as ``User | None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _split_top_level(text: str, separator: str) -> list[str]:
    """Split `text` on `separator` outside of any bracket pair."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char in "<[(":
            depth += 1
        elif char in ">])":
            depth -= 1
        if char == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


@dataclass(frozen=True)
class TypeDescriptor:
    """A declared type: a name plus its type parameters."""

    name: str
    params: tuple[TypeDescriptor, ...] = field(default=())

    @classmethod
    def parse(cls, notation: str) -> TypeDescriptor:
        """Parse a type notation string.

        Raises:
            ValueError: If the notation is empty or its brackets do not balance
        """
        text = notation.strip()
        if not text:
            raise ValueError("Type notation must not be empty")

        alternatives = [
            part.strip() for part in _split_top_level(text, "|") if part.strip()
        ]
        concrete = [part for part in alternatives if part not in ("None", "null")]
        if not concrete:
            return cls("null")
        text = concrete[0]

        if text.endswith("[]"):
            return cls("array", (cls.parse(text[:-2]),))

        openings = [index for index in (text.find("<"), text.find("[")) if index != -1]
        if not openings:
            return cls(text)

        start = min(openings)
        closer = ">" if text[start] == "<" else "]"
        if not text.endswith(closer):
            raise ValueError(f"Unbalanced type notation: {notation!r}")

        name = text[:start].strip()
        inner = text[start + 1 : -1]
        params = tuple(
            cls.parse(part)
            for part in _split_top_level(inner, ",")
            if part.strip() and part.strip() != "..."
        )
        if name == "Optional" and params:
            return params[0]
        return cls(name, params)

    @classmethod
    def coerce(cls, value: str | TypeDescriptor) -> TypeDescriptor:
        if isinstance(value, TypeDescriptor):
            return value
        return cls.parse(value)

    def __str__(self) -> str:
        if not self.params:
            return self.name
        return f"{self.name}<{', '.join(str(param) for param in self.params)}>"
