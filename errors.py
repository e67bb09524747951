from __future__ import annotations

from typing import Optional


class DescriptionError(Exception):
    """
    Error raised while building or parsing a description.

    Carries a human-readable message and at most one linked cause.
    """

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None):
        self.message = message if isinstance(message, str) else ""
        super().__init__(self.message)
        self._cause: Optional[BaseException] = None
        if cause is not None:
            self.init_cause(cause)

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    def init_cause(self, cause: BaseException) -> None:
        """Attach a cause, unless one is already set."""
        if self._cause is None:
            self._cause = cause
            self.__cause__ = cause


class MultipleLineBreaksError(DescriptionError):
    def __init__(self) -> None:
        super().__init__("Text may not contain multiple line breaks in sequence")


class BracesWithoutCommandError(DescriptionError):
    def __init__(self) -> None:
        super().__init__("Braces without command")


class UnknownCommandError(DescriptionError):
    def __init__(self, command: str) -> None:
        super().__init__(f'Unknown command "{command}"')
        self.command = command


class UnclosedCommandError(DescriptionError):
    def __init__(self) -> None:
        super().__init__("Unclosed command")
