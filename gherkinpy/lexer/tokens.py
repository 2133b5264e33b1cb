"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from gherkinpy.text import TextRange


class TokenKind(IntEnum):
    EOF = 1

    # Trivia
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12

    # Line content
    KEYWORD = 20
    TEXT = 21  # title / step text / description line, quoted strings included
    TAG = 22  # tag word without the leading @
    CELL = 23  # raw table cell text, trailing | excluded
    PIPE = 24
    FENCE = 25  # """
    DOC_LINE = 26


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token."""

    kind: TokenKind
    range: TextRange

    @property
    def start(self) -> int:
        return self.range.start.value

    @property
    def end(self) -> int:
        return self.range.end.value
