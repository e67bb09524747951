from __future__ import annotations

from description import CommandSpan, Description, DescriptionList, InlineElement, Paragraph


def print_event_gray(text: str) -> None:
    """
    Print event/debug output in gray using ANSI escape codes.
    """
    GRAY = "\033[90m"
    RESET = "\033[0m"
    print(f"{GRAY}{text}{RESET}")


def _describe_inline(element: InlineElement) -> str:
    if isinstance(element, CommandSpan):
        return f"command {element.type} {element.text_span.text!r}"
    return f"text {element.text!r}"


def describe_tree(description: Description) -> list[str]:
    """
    Render a description as indented lines, one per node.

    Example:
        paragraph
          text 'Hello '
          command EMPHASIS 'world'
    """
    lines: list[str] = []
    for block in description.elements:
        if isinstance(block, Paragraph):
            lines.append("paragraph")
            lines.extend(f"  {_describe_inline(e)}" for e in block.elements)
        elif isinstance(block, DescriptionList):
            lines.append("list")
            for item in block.items:
                lines.append("  item")
                lines.extend(f"    {_describe_inline(e)}" for e in item)
    return lines
