# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Documentation-comment source reading Python docstrings.

Google-style sections are recognised::

    Summary line.

    Longer description.

    Args:
        user_id (int): Identifier of the user
    Returns:
        User: The user found
    Raises:
        NotFoundError: When no user matches
    Deprecated:
        Use ``find_user`` instead.

Tag lines in the ``@param type $name description`` / ``@return type
description`` / ``@throws Type description`` / ``@deprecated`` form are
accepted as well. Missing parameter and return types are completed from
the callable's annotations.

Attribute docstrings (a string literal right after an attribute
assignment in a class body) document properties.
"""

from __future__ import annotations

import ast
import inspect
import re
import textwrap
from typing import Any

from specforge.metadata.models import DocBlock, DocTag

_SECTIONS: dict[str, str] = {
    "args": "param",
    "arguments": "param",
    "parameters": "param",
    "params": "param",
    "returns": "return",
    "return": "return",
    "yields": "return",
    "raises": "throws",
    "throws": "throws",
    "exceptions": "throws",
    "deprecated": "deprecated",
}

_SECTION_RE = re.compile(r"^(?P<title>[A-Za-z]+):\s*(?P<rest>.*)$")
_PARAM_RE = re.compile(
    r"^\*{0,2}(?P<name>[A-Za-z_]\w*)\s*(?:\((?P<type>[^)]*)\))?\s*:\s*(?P<desc>.*)$"
)
_TAG_RE = re.compile(r"^@(?P<name>[A-Za-z]+)\b\s*(?P<rest>.*)$")
_TYPE_RE = re.compile(r"^[\w.\[\]<>,|]+$")


def _looks_like_type(text: str) -> bool:
    compact = re.sub(r"\s*([,|])\s*", r"\1", text.strip())
    return bool(compact) and bool(_TYPE_RE.match(compact))


def _split_type(text: str) -> tuple[str | None, str]:
    """Split ``"Type: description"`` into its parts; the type is optional."""
    head, sep, tail = text.partition(":")
    if sep and _looks_like_type(head):
        return head.strip(), tail.strip()
    return None, text.strip()


def _annotation_name(annotation: Any) -> str | None:
    if annotation is inspect.Signature.empty:
        return None
    if isinstance(annotation, str):
        return annotation
    if inspect.isclass(annotation):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


def _take_type(text: str) -> tuple[str, str]:
    """Split the leading type token off `text`; brackets may hold spaces."""
    depth = 0
    for index, char in enumerate(text):
        if char in "<[(":
            depth += 1
        elif char in ">])":
            depth -= 1
        elif char.isspace() and depth <= 0:
            return text[:index], text[index:].strip()
    return text, ""


class DocstringParser:
    """Parses docstrings into :class:`DocBlock` records."""

    def __init__(self) -> None:
        self._attribute_docs: dict[type[Any], dict[str, str]] = {}

    def get_doc_block(self, obj: Any) -> DocBlock | None:
        doc = inspect.getdoc(obj)
        if doc is None:
            return None
        block = self.parse(doc)
        if callable(obj):
            self._complete_types(block, obj)
        return block

    def get_property_doc_block(self, cls: type[Any], name: str) -> DocBlock | None:
        attribute = inspect.getattr_static(cls, name, None)
        if isinstance(attribute, property):
            return self.get_doc_block(attribute.fget) if attribute.fget else None
        if inspect.isfunction(attribute):
            return self.get_doc_block(attribute)

        for klass in inspect.getmro(cls):
            doc = self._attribute_docs_for(klass).get(name)
            if doc is not None:
                return self.parse(doc)
        return None

    def parse(self, doc: str) -> DocBlock:
        """Parse a cleaned docstring."""
        lines = inspect.cleandoc(doc).splitlines()
        block = DocBlock()

        text_lines: list[str] = []
        index = 0
        while index < len(lines):
            line = lines[index]
            stripped = line.strip()

            tag_match = _TAG_RE.match(stripped)
            if tag_match and not line.startswith((" ", "\t")):
                block.tags.append(
                    self._parse_tag_line(tag_match.group("name"), tag_match.group("rest"))
                )
                index += 1
                continue

            if stripped.startswith(".. deprecated::"):
                block.tags.append(DocTag(name="deprecated"))
                index += 1
                continue

            section_match = _SECTION_RE.match(stripped)
            if (
                section_match
                and not line.startswith((" ", "\t"))
                and section_match.group("title").lower() in _SECTIONS
            ):
                tag_name = _SECTIONS[section_match.group("title").lower()]
                body, index = self._section_body(lines, index + 1)
                first = section_match.group("rest").strip()
                if first:
                    body.insert(0, first)
                block.tags.extend(self._parse_section(tag_name, body))
                continue

            text_lines.append(line)
            index += 1

        paragraphs = "\n".join(text_lines).strip().split("\n\n")
        block.summary = " ".join(paragraphs[0].split()) if paragraphs else ""
        block.description = "\n\n".join(
            paragraph.strip() for paragraph in paragraphs[1:] if paragraph.strip()
        )
        return block

    def _section_body(self, lines: list[str], index: int) -> tuple[list[str], int]:
        body: list[str] = []
        while index < len(lines):
            line = lines[index]
            if line.strip() and not line.startswith((" ", "\t")):
                break
            body.append(line)
            index += 1
        while body and not body[-1].strip():
            body.pop()
        return textwrap.dedent("\n".join(body)).splitlines(), index

    def _entries(self, body: list[str]) -> list[str]:
        """Group section lines into entries; indented lines continue an entry."""
        entries: list[str] = []
        for line in body:
            if not line.strip():
                continue
            if line.startswith((" ", "\t")) and entries:
                entries[-1] = f"{entries[-1]} {line.strip()}"
            else:
                entries.append(line.strip())
        return entries

    def _parse_section(self, tag_name: str, body: list[str]) -> list[DocTag]:
        if tag_name == "deprecated":
            return [DocTag(name="deprecated", description=" ".join(" ".join(body).split()))]

        if tag_name == "return":
            text = " ".join(" ".join(body).split())
            type_name, description = _split_type(text)
            return [DocTag(name="return", type=type_name, description=description)]

        tags: list[DocTag] = []
        for entry in self._entries(body):
            if tag_name == "param":
                match = _PARAM_RE.match(entry)
                if match is None:
                    continue
                tags.append(
                    DocTag(
                        name="param",
                        variable=match.group("name"),
                        type=(match.group("type") or "").strip() or None,
                        description=match.group("desc").strip(),
                    )
                )
            else:
                type_name, description = _split_type(entry)
                if type_name is None:
                    continue
                tags.append(DocTag(name="throws", type=type_name, description=description))
        return tags

    def _parse_tag_line(self, name: str, rest: str) -> DocTag:
        rest = rest.strip()
        if name == "param":
            type_name = variable = None
            if rest and not rest.startswith("$"):
                type_name, rest = _take_type(rest)
            if rest.startswith("$"):
                variable, _, rest = rest.partition(" ")
                variable = variable.lstrip("$")
            return DocTag(
                name="param", type=type_name, variable=variable, description=" ".join(rest.split())
            )
        if name in ("return", "returns", "throws", "raises"):
            type_name, rest = _take_type(rest) if rest else (None, "")
            normalized = {"returns": "return", "raises": "throws"}.get(name, name)
            return DocTag(name=normalized, type=type_name, description=" ".join(rest.split()))
        return DocTag(name=name, description=" ".join(rest.split()))

    def _complete_types(self, block: DocBlock, obj: Any) -> None:
        try:
            signature = inspect.signature(obj)
        except (TypeError, ValueError):
            return

        for tag in block.get_tags_by_name("param"):
            if tag.type is None and tag.variable in signature.parameters:
                tag.type = _annotation_name(signature.parameters[tag.variable].annotation)

        for tag in block.get_tags_by_name("return"):
            if tag.type is None:
                tag.type = _annotation_name(signature.return_annotation)

    def _attribute_docs_for(self, cls: type[Any]) -> dict[str, str]:
        if cls in self._attribute_docs:
            return self._attribute_docs[cls]

        docs: dict[str, str] = {}
        try:
            source = textwrap.dedent(inspect.getsource(cls))
            tree = ast.parse(source)
        except (OSError, TypeError, SyntaxError):
            tree = None

        if tree is not None and tree.body and isinstance(tree.body[0], ast.ClassDef):
            body = tree.body[0].body
            for statement, following in zip(body, body[1:]):
                if not (
                    isinstance(following, ast.Expr)
                    and isinstance(following.value, ast.Constant)
                    and isinstance(following.value.value, str)
                ):
                    continue
                if isinstance(statement, ast.AnnAssign) and isinstance(
                    statement.target, ast.Name
                ):
                    docs[statement.target.id] = inspect.cleandoc(following.value.value)
                elif isinstance(statement, ast.Assign):
                    for target in statement.targets:
                        if isinstance(target, ast.Name):
                            docs[target.id] = inspect.cleandoc(following.value.value)

        self._attribute_docs[cls] = docs
        return docs
