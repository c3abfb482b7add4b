# src/flatsh/core/errors.py
"""
Shell exceptions.

Parse errors are recoverable: the engine reports them once (NoCmd is silent)
and the loop reads the next line. CommandConstructionError is the only fatal
condition and ends the shell with a nonzero status.
"""
from typing import Optional


class ShellError(Exception):
    """Base exception for everything the shell core raises on purpose."""


class ParseError(ShellError):
    """
    The input line could not be turned into a command.

    Attributes:
        line: The raw input line that failed to parse.
    """

    diagnostic: Optional[str] = None

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.diagnostic is None:
            return ""
        return self.diagnostic.format(line=self.line)


class NoCmd(ParseError):
    """Blank line; silently re-prompt."""


class FailedParseArgs(ParseError):
    diagnostic = "{line}: bad arguments"


class TooManyArgs(ParseError):
    diagnostic = "Too many arguments: {line}"


class MissingArg(ParseError):
    diagnostic = "Missing argument in command: {line}"


class CommandConstructionError(ShellError):
    """Resources ran out while building the command tree for a line."""

    def __init__(self, line: str, cause: Optional[BaseException] = None) -> None:
        self.line = line
        self.cause = cause
        super().__init__("something went wrong")
