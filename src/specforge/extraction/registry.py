# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Extractor registrations and their ordering.

Registrations are grouped by section. Sections run in the order they were
first registered; within a section extractors run by ascending priority, and
extractors sharing a priority keep their registration order.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from specforge.extraction.protocols import ExtractorProtocol


class Section(str, Enum):
    """Well-known sections. Any other string is a valid section too."""

    SWAGGER = "swagger"
    DEFAULT = "default"


@dataclass(frozen=True)
class ExtractorRegistration:
    extractor: ExtractorProtocol
    section: str
    priority: int
    order: int


def sort_registrations(
    registrations: Iterable[ExtractorRegistration],
) -> list[ExtractorProtocol]:
    """Flatten registrations into the sequence the generator runs."""
    sections: dict[str, list[ExtractorRegistration]] = {}
    for registration in sorted(registrations, key=lambda item: item.order):
        sections.setdefault(registration.section, []).append(registration)

    ordered: list[ExtractorProtocol] = []
    for section_registrations in sections.values():
        section_registrations.sort(key=lambda item: (item.priority, item.order))
        ordered.extend(item.extractor for item in section_registrations)
    return ordered


class ExtractorRegistry:
    """Holds registrations and the cached sorted sequence."""

    def __init__(self) -> None:
        self._registrations: list[ExtractorRegistration] = []
        self._sorted: tuple[ExtractorProtocol, ...] | None = None
        self._lock = threading.RLock()

    def register(
        self,
        extractor: ExtractorProtocol,
        priority: int = 0,
        section: str = Section.DEFAULT,
    ) -> ExtractorRegistration:
        with self._lock:
            registration = ExtractorRegistration(
                extractor=extractor,
                section=str(section.value if isinstance(section, Section) else section),
                priority=priority,
                order=len(self._registrations),
            )
            self._registrations.append(registration)
            self._sorted = None
            return registration

    def get_sorted_extractors(self) -> tuple[ExtractorProtocol, ...]:
        """The flattened sequence, rebuilt only after a registration change."""
        with self._lock:
            if self._sorted is None:
                self._sorted = tuple(sort_registrations(self._registrations))
            return self._sorted

    @property
    def registrations(self) -> tuple[ExtractorRegistration, ...]:
        with self._lock:
            return tuple(self._registrations)

    def reset(self) -> None:
        with self._lock:
            self._registrations.clear()
            self._sorted = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._registrations)
