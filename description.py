from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Union

from command_types import CommandType
from errors import MultipleLineBreaksError

_WHITESPACE_RUN_RE = re.compile(r"\s+")

# Escaped only when one of these makes up the whole command body.
_ESCAPED_CONTENT = {"\\", "{", "}"}


# ---------------- Inline elements --------------------------------------------


@dataclass(frozen=True)
class TextSpan:
    """
    Plain text inside a paragraph or list item.

    Each run of whitespace is collapsed into the first character of that
    run, so "a \t b" becomes "a b" while "a\t\tb" keeps its tab.
    """
    text: str

    def __post_init__(self) -> None:
        if "\n\n" in self.text:
            raise MultipleLineBreaksError()
        object.__setattr__(
            self, "text", _WHITESPACE_RUN_RE.sub(lambda m: m.group(0)[0], self.text)
        )

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CommandSpan:
    type: CommandType
    text_span: TextSpan

    def __str__(self) -> str:
        out = "{" + self.type.canonical_command

        escaped_text = self.text_span.text
        if escaped_text in _ESCAPED_CONTENT:
            escaped_text = "\\" + escaped_text
        if escaped_text != "":
            out += " " + escaped_text

        return out + "}"


InlineElement = Union[TextSpan, CommandSpan]


def join_inline(elements: Iterable[InlineElement]) -> str:
    return "".join(str(element) for element in elements)


# ---------------- Block elements ---------------------------------------------


@dataclass(frozen=True)
class Paragraph:
    elements: tuple[InlineElement, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def __str__(self) -> str:
        return "\n" + join_inline(self.elements) + "\n"


@dataclass(frozen=True)
class DescriptionList:
    """Bulleted list; every item is its own sequence of inline elements."""
    items: tuple[tuple[InlineElement, ...], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(tuple(item) for item in self.items))

    def __str__(self) -> str:
        lines = ["* " + join_inline(item).replace("\n", "\n  ") for item in self.items]
        return "\n" + "\n".join(lines) + "\n"


BlockElement = Union[Paragraph, DescriptionList]


@dataclass(frozen=True)
class Description:
    elements: tuple[BlockElement, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def __str__(self) -> str:
        return "".join(str(element) for element in self.elements).strip()
