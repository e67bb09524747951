#!/usr/bin/env python3
"""
description_parser.py

Parser for description markup:

- parse_inline_elements() scans a single line into TextSpan / CommandSpan
- optimize_elements() merges adjacent text spans
- BlockAccumulator classifies the lines of one blank-line separated chunk
  into paragraphs and list items
- parse_description() drives all of the above for a whole document

Inline commands look like {e emphasized text}; they cannot be nested.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from command_types import CommandType
from description import (
    BlockElement,
    CommandSpan,
    Description,
    DescriptionList,
    InlineElement,
    Paragraph,
    TextSpan,
)
from errors import (
    BracesWithoutCommandError,
    UnclosedCommandError,
    UnknownCommandError,
)

LIST_ITEM_MARKER = "* "
LIST_CONTINUATION_INDENT = "  "
CHUNK_SEPARATOR = "\n\n"

_BLANK_LINE_RUN_RE = re.compile(r"\n{3,}")

_ESCAPABLE_IN_COMMAND = ("\\", "{", "}")


# ---------------- Inline scanning --------------------------------------------


def parse_inline_elements(line: str) -> list[InlineElement]:
    """
    Scan one line (no line breaks) into inline elements, left to right.

    Raises:
        BracesWithoutCommandError: '{' directly followed by whitespace or '}'
        UnknownCommandError: the command token matches no alias
        UnclosedCommandError: the line ends inside a command
    """
    elements: list[InlineElement] = []
    buffer: list[str] = []
    command_type: Optional[CommandType] = None

    def flush_plaintext() -> None:
        if buffer:
            elements.append(TextSpan("".join(buffer)))
            buffer.clear()

    length = len(line)
    i = 0
    while i < length:
        ch = line[i]

        # --- start of a command: {token ... -------------------------------
        if command_type is None and ch == "{":
            flush_plaintext()

            i += 1
            start = i
            while i < length and not line[i].isspace() and line[i] != "}":
                i += 1
            command = line[start:i]

            if command == "":
                raise BracesWithoutCommandError()

            # whitespace between token and content is not content
            while i < length and line[i].isspace():
                i += 1

            command_type = CommandType.from_command(command)
            if command_type is None:
                raise UnknownCommandError(command)
            continue

        if command_type is not None:
            # --- end of the command body ----------------------------------
            if ch == "}":
                elements.append(CommandSpan(command_type, TextSpan("".join(buffer))))
                buffer.clear()
                command_type = None
                i += 1
                continue

            # --- escapes: \\  \{  \} --------------------------------------
            if ch == "\\" and i + 1 < length and line[i + 1] in _ESCAPABLE_IN_COMMAND:
                buffer.append(line[i + 1])
                i += 2
                continue

        buffer.append(ch)
        i += 1

    if command_type is not None:
        raise UnclosedCommandError()
    flush_plaintext()

    return elements


def optimize_elements(elements: Iterable[InlineElement]) -> list[InlineElement]:
    """
    Merge adjacent TextSpans and drop empty ones.

    CommandSpans are kept as they are and are never merged across.
    """
    optimized: list[InlineElement] = []

    for element in elements:
        if not isinstance(element, TextSpan):
            optimized.append(element)
            continue

        if element.text == "":
            continue

        if optimized and isinstance(optimized[-1], TextSpan):
            optimized[-1] = TextSpan(optimized[-1].text + element.text)
        else:
            optimized.append(element)

    return optimized


# ---------------- Block segmentation -----------------------------------------


@dataclass
class BlockAccumulator:
    """
    Line classifier for one chunk of a description.

    At most one block is open at a time: `paragraph` while accumulating a
    paragraph, `list_items` while accumulating a list, neither when idle.
    Opening one kind of block flushes the other into `blocks`.
    """
    blocks: list[BlockElement] = field(default_factory=list)
    paragraph: Optional[list[InlineElement]] = None
    list_items: Optional[list[list[InlineElement]]] = None

    @property
    def is_idle(self) -> bool:
        return self.paragraph is None and self.list_items is None

    @property
    def is_in_list(self) -> bool:
        return self.list_items is not None

    def feed_line(self, line: str) -> None:
        if line.startswith(LIST_ITEM_MARKER):
            self._handle_list_item(line)
        elif self.is_in_list and line.startswith(LIST_CONTINUATION_INDENT):
            self._handle_list_continuation(line)
        else:
            self._handle_paragraph_line(line)

    def flush(self) -> None:
        """Close whichever block is open."""
        self._flush_paragraph()
        self._flush_list()

    def _handle_list_item(self, line: str) -> None:
        self._flush_paragraph()
        if self.list_items is None:
            self.list_items = []

        self.list_items.append(parse_inline_elements(line[len(LIST_ITEM_MARKER):]))

    def _handle_list_continuation(self, line: str) -> None:
        if not self.list_items:
            return
        item = self.list_items[-1]

        # three or more spaces continue the line, two start a new one
        if item and not line.startswith(LIST_CONTINUATION_INDENT + " "):
            item.append(TextSpan("\n"))
        item.extend(parse_inline_elements(line[len(LIST_CONTINUATION_INDENT):]))

    def _handle_paragraph_line(self, line: str) -> None:
        self._flush_list()
        if self.paragraph is None:
            self.paragraph = []

        if self.paragraph and not line.startswith(" "):
            self.paragraph.append(TextSpan("\n"))
        self.paragraph.extend(parse_inline_elements(line))

    def _flush_paragraph(self) -> None:
        if self.paragraph is not None:
            self.blocks.append(Paragraph(optimize_elements(self.paragraph)))
            self.paragraph = None

    def _flush_list(self) -> None:
        if self.list_items is not None:
            self.blocks.append(DescriptionList([optimize_elements(item) for item in self.list_items]))
            self.list_items = None


def split_chunks(text: str) -> list[str]:
    """
    Normalize blank lines and split a document into chunks.

    Surrounding whitespace is dropped and runs of blank lines count as one.
    """
    text = _BLANK_LINE_RUN_RE.sub(CHUNK_SEPARATOR, text.strip())
    return text.split(CHUNK_SEPARATOR)


def parse_description(text: str) -> Description:
    """
    Parse description markup into an immutable Description tree.

    The first error aborts the parse; no partial tree is returned.
    """
    blocks: list[BlockElement] = []

    for chunk in split_chunks(text):
        accumulator = BlockAccumulator(blocks=blocks)
        for line in chunk.split("\n"):
            accumulator.feed_line(line)
        accumulator.flush()

    return Description(blocks)


def format_description(text: str) -> str:
    """Return the canonical form of description markup."""
    return str(parse_description(text))


def is_canonical(text: str) -> bool:
    return format_description(text) == text
