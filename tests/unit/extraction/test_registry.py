"""Tests for extractor registration ordering."""

from __future__ import annotations

import pytest

from specforge.extraction.registry import (
    ExtractorRegistration,
    ExtractorRegistry,
    Section,
    sort_registrations,
)


def _registration(name: str, section: str, priority: int, order: int) -> ExtractorRegistration:
    return ExtractorRegistration(extractor=name, section=section, priority=priority, order=order)


class TestSortRegistrations:
    def test_priority_orders_within_section(self) -> None:
        registrations = [
            _registration("b", "x", 1, 0),
            _registration("a", "x", 0, 1),
        ]
        assert sort_registrations(registrations) == ["a", "b"]

    def test_sections_run_in_first_registration_order(self) -> None:
        registrations = [
            _registration("c", "a", 5, 0),
            _registration("d", "b", -5, 1),
            _registration("e", "a", 10, 2),
        ]
        assert sort_registrations(registrations) == ["c", "e", "d"]

    def test_equal_priorities_keep_registration_order(self) -> None:
        registrations = [
            _registration("first", "x", 0, 0),
            _registration("second", "x", 0, 1),
            _registration("third", "x", 0, 2),
        ]
        assert sort_registrations(registrations) == ["first", "second", "third"]

    def test_input_order_is_irrelevant(self) -> None:
        registrations = [
            _registration("late", "b", 0, 1),
            _registration("early", "a", 0, 0),
        ]
        assert sort_registrations(registrations) == ["early", "late"]

    def test_empty(self) -> None:
        assert sort_registrations([]) == []


class TestExtractorRegistry:
    def test_register_returns_registration(self) -> None:
        registry = ExtractorRegistry()
        extractor = object()

        registration = registry.register(extractor, priority=3, section="custom")

        assert registration.extractor is extractor
        assert registration.priority == 3
        assert registration.section == "custom"
        assert registration.order == 0
        assert len(registry) == 1

    def test_section_enum_is_stored_as_string(self) -> None:
        registry = ExtractorRegistry()
        registration = registry.register(object(), section=Section.SWAGGER)
        assert registration.section == "swagger"

    def test_default_section(self) -> None:
        registry = ExtractorRegistry()
        assert registry.register(object()).section == "default"

    def test_sorted_sequence_is_cached(self) -> None:
        registry = ExtractorRegistry()
        registry.register("a")

        assert registry.get_sorted_extractors() is registry.get_sorted_extractors()

    def test_sorted_sequence_is_immutable(self) -> None:
        registry = ExtractorRegistry()
        registry.register("b", priority=1)
        registry.register("a", priority=0)

        ordered = registry.get_sorted_extractors()

        assert isinstance(ordered, tuple)
        with pytest.raises(AttributeError):
            ordered.reverse()
        assert registry.get_sorted_extractors() == ("a", "b")

    def test_registration_invalidates_cache(self) -> None:
        registry = ExtractorRegistry()
        registry.register("b", priority=1)
        before = registry.get_sorted_extractors()

        registry.register("a", priority=0)

        after = registry.get_sorted_extractors()
        assert before == ("b",)
        assert after == ("a", "b")

    def test_reset(self) -> None:
        registry = ExtractorRegistry()
        registry.register("a")
        registry.get_sorted_extractors()

        registry.reset()

        assert registry.registrations == ()
        assert registry.get_sorted_extractors() == ()
