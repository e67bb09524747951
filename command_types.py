from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(frozen=True)
class CommandType:
    """
    Catalog entry for an inline command, e.g. {e ...} for EMPHASIS.

    `commands` holds the aliases accepted inside braces; the first one is
    the canonical alias used when serializing.
    """
    ordinal: int
    name: str
    commands: tuple[str, ...]

    EMPHASIS: ClassVar[CommandType]
    STRONG_EMPHASIS: ClassVar[CommandType]
    PROPER_NAME: ClassVar[CommandType]
    CODE: ClassVar[CommandType]
    MESSAGE: ClassVar[CommandType]
    MESSAGE_PLACEHOLDER: ClassVar[CommandType]
    CURLY_BRACE_OPEN: ClassVar[CommandType]
    CURLY_BRACE_CLOSED: ClassVar[CommandType]

    def __str__(self) -> str:
        return self.name

    @property
    def canonical_command(self) -> str:
        return self.commands[0]

    @staticmethod
    def values() -> tuple[CommandType, ...]:
        return COMMAND_TYPES

    @staticmethod
    def from_name(name: str) -> Optional[CommandType]:
        for value in COMMAND_TYPES:
            if value.name == name:
                return value
        return None

    @staticmethod
    def from_command(command: str) -> Optional[CommandType]:
        """Look up a type by alias; the first catalog entry wins."""
        for value in COMMAND_TYPES:
            if command in value.commands:
                return value
        return None


# Definition order is lookup priority.
COMMAND_TYPES: tuple[CommandType, ...] = (
    CommandType(0, "EMPHASIS", ("e",)),
    CommandType(1, "STRONG_EMPHASIS", ("s",)),
    CommandType(2, "PROPER_NAME", ("p",)),
    CommandType(3, "CODE", ("c",)),
    CommandType(4, "MESSAGE", ("m",)),
    CommandType(5, "MESSAGE_PLACEHOLDER", ("mp",)),
    CommandType(6, "CURLY_BRACE_OPEN", ("cb", "cbo")),
    CommandType(7, "CURLY_BRACE_CLOSED", ("cbc",)),
)

for _command_type in COMMAND_TYPES:
    setattr(CommandType, _command_type.name, _command_type)
del _command_type
