# src/flatsh/core/tokenizer.py
from __future__ import annotations

import re
from typing import Iterator, NamedTuple

# Tokens are maximal runs of anything but the space character.
_TOKEN_PATTERN = re.compile(r"[^ ]+")


class Token(NamedTuple):
    text: str
    start: int
    end: int


class Tokenizer:
    """
    Lazily splits a line on runs of spaces.

    Every call to iter() starts over from the beginning of the line, so the
    same Tokenizer can be walked more than once.
    """

    def __init__(self, line: str) -> None:
        self.line = line

    def __iter__(self) -> Iterator[Token]:
        for m in _TOKEN_PATTERN.finditer(self.line):
            yield Token(m.group(0), m.start(), m.end())

    def remainder(self, token: Token) -> str:
        """Returns the raw text after `token`, starting at the next non-space character."""
        return self.line[token.end:].lstrip(" ")

    def __repr__(self) -> str:
        return f"<Tokenizer line={self.line!r}>"
