"""Tests for TypeDescriptor parsing."""

from __future__ import annotations

import pytest

from specforge.metadata import TypeDescriptor

T = TypeDescriptor


@pytest.mark.parametrize(
    "notation, expected",
    [
        ("string", T("string")),
        ("  int  ", T("int")),
        ("array<string>", T("array", (T("string"),))),
        ("array<string, User>", T("array", (T("string"), T("User")))),
        ("dict[str, list[User]]", T("dict", (T("str"), T("list", (T("User"),))))),
        ("User[]", T("array", (T("User"),))),
        ("User | None", T("User")),
        ("None | User", T("User")),
        ("Optional[User]", T("User")),
        ("tuple[int, ...]", T("tuple", (T("int"),))),
        ("None", T("null")),
        ("app.models.User", T("app.models.User")),
    ],
)
def test_parse(notation: str, expected: TypeDescriptor) -> None:
    assert TypeDescriptor.parse(notation) == expected


@pytest.mark.parametrize("notation", ["", "   ", "array<string", "list[User>"])
def test_parse_rejects(notation: str) -> None:
    with pytest.raises(ValueError):
        TypeDescriptor.parse(notation)


def test_str_renders_angle_notation() -> None:
    assert str(TypeDescriptor.parse("dict[str, list[User]]")) == "dict<str, list<User>>"
    assert TypeDescriptor.parse(str(T("array", (T("User"),)))) == T("array", (T("User"),))


def test_coerce() -> None:
    descriptor = T("User")
    assert TypeDescriptor.coerce(descriptor) is descriptor
    assert TypeDescriptor.coerce("User") == descriptor
