"""Character-level scanner for line-oriented Gherkin input."""

from dataclasses import dataclass

from gherkinpy.lexer.tokens import Token, TokenKind
from gherkinpy.text import TextRange, slice_text_range

WHITESPACE_CHARS = frozenset(" \t")
NEWLINE_CHARS = frozenset("\r\n")
# Characters that end an unquoted run of line text.
LINE_STOP_CHARS = frozenset('#"\\\r\n')
QUOTED_STOP_CHARS = frozenset('"\\\r\n')
WORD_STOP_CHARS = frozenset('#" \t\r\n')
CELL_STOP_CHARS = frozenset("|\r\n")


@dataclass(frozen=True, slots=True)
class LexerCheckpoint:
    """Lexer checkpoint."""

    position: int


class Lexer:
    """Backtracking cursor over the source buffer.

    Every ``eat_*`` method either consumes input and returns the matched
    token, or consumes nothing and returns ``None``. Failed matches are
    recorded so that the parser can report the furthest position reached
    together with the rules expected there.
    """

    def __init__(self, source: str) -> None:
        if not source.endswith(("\n", "\r")):
            source += "\n"
        self._source = source
        self._position = 0
        self._furthest = 0
        self._expected: list[str] = []

    @property
    def source(self) -> str:
        """Source text, with a trailing newline supplied when missing."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def furthest_position(self) -> int:
        return self._furthest

    @property
    def expected_rules(self) -> tuple[str, ...]:
        return tuple(self._expected)

    @property
    def checkpoint(self) -> LexerCheckpoint:
        return LexerCheckpoint(position=self._position)

    def rewind(self, checkpoint: LexerCheckpoint) -> None:
        self._position = checkpoint.position

    def expected(self, rule: str, position: int | None = None) -> None:
        """Record that ``rule`` failed to match at ``position``."""
        at = self._position if position is None else position
        if at > self._furthest:
            self._furthest = at
            self._expected = [rule]
        elif at == self._furthest and rule not in self._expected:
            self._expected.append(rule)

    def text(self, token: Token) -> str:
        return slice_text_range(self._source, token.range)

    # Lookahead, never consumes and never records failures.

    def at_literal(self, literal: str) -> bool:
        return self._source.startswith(literal, self._position)

    def at_line_end(self) -> bool:
        """True when only whitespace and an optional comment remain on the line."""
        index = self._position
        while self._char_at(index) in WHITESPACE_CHARS:
            index += 1
        ch = self._char_at(index)
        return ch == "#" or ch in NEWLINE_CHARS or ch == "\0"

    def at_tag(self) -> bool:
        """``@`` directly followed by a tag word."""
        return self._current_char() == "@" and self._peek_char() not in WORD_STOP_CHARS and self._peek_char() != "\0"

    def at_blank_line(self) -> bool:
        index = self._position
        while self._char_at(index) in WHITESPACE_CHARS:
            index += 1
        return self._char_at(index) in NEWLINE_CHARS

    def at_after_whitespace(self, literal: str) -> bool:
        index = self._position
        while self._char_at(index) in WHITESPACE_CHARS:
            index += 1
        return self._source.startswith(literal, index)

    # Matchers

    def eat_literal(self, literal: str, kind: TokenKind = TokenKind.KEYWORD) -> Token | None:
        if not self.at_literal(literal):
            self.expected(repr(literal))
            return None
        return self._token(kind, len(literal))

    def eat_whitespace(self) -> Token | None:
        """WS*; returns None when there was no whitespace to consume."""
        start = self._position
        while self._current_char() in WHITESPACE_CHARS:
            self._advance(1)
        if self._position == start:
            return None
        return Token(TokenKind.WHITESPACE, TextRange.from_offsets(start, self._position))

    def eat_newline(self) -> Token | None:
        ch = self._current_char()
        if ch == "\r" and self._peek_char() == "\n":
            return self._token(TokenKind.NEWLINE, 2)
        if ch in NEWLINE_CHARS:
            return self._token(TokenKind.NEWLINE, 1)
        self.expected("newline")
        return None

    def eat_line_comment(self) -> Token | None:
        """``#`` up to (not including) the line terminator."""
        if self._current_char() != "#":
            return None
        start = self._position
        while not self.is_eof and self._current_char() not in NEWLINE_CHARS:
            self._advance(1)
        return Token(TokenKind.COMMENT, TextRange.from_offsets(start, self._position))

    def eat_tag(self) -> Token | None:
        """``@`` followed by a word; the returned range excludes the ``@``."""
        if self._current_char() != "@":
            self.expected("tag")
            return None
        start = self._position + 1
        end = start
        while self._char_at(end) not in WORD_STOP_CHARS and self._char_at(end) != "\0":
            end += 1
        if end == start:
            self.expected("tag name", start)
            return None
        self._position = end
        return Token(TokenKind.TAG, TextRange.from_offsets(start, end))

    def eat_line_text(self, rule: str = "text") -> Token | None:
        """Escaped chars, quoted strings and anything but ``# " \\`` and newlines.

        The returned range is untrimmed; callers strip it.
        """
        start = self._position
        while True:
            ch = self._current_char()
            if ch == "\\":
                if not self._eat_escaped():
                    break
            elif ch == '"':
                if not self._eat_quoted():
                    break
            elif ch in LINE_STOP_CHARS or ch == "\0":
                break
            else:
                self._advance(1)
        if self._position == start:
            self.expected(rule)
            return None
        return Token(TokenKind.TEXT, TextRange.from_offsets(start, self._position))

    def eat_cell(self) -> Token | None:
        """Cell text followed by the closing ``|``; the range excludes the pipe."""
        start = self._position
        end = start
        while self._char_at(end) not in CELL_STOP_CHARS and self._char_at(end) != "\0":
            end += 1
        if self._char_at(end) != "|":
            self.expected("'|'", end)
            return None
        self._position = end + 1
        return Token(TokenKind.CELL, TextRange.from_offsets(start, end))

    def eat_rest_of_line(self) -> Token:
        """Everything up to the line terminator, possibly nothing."""
        start = self._position
        while not self.is_eof and self._current_char() not in NEWLINE_CHARS:
            self._advance(1)
        return Token(TokenKind.DOC_LINE, TextRange.from_offsets(start, self._position))

    def _eat_escaped(self) -> bool:
        if self._peek_char() in NEWLINE_CHARS or self._peek_char() == "\0":
            return False
        self._advance(2)
        return True

    def _eat_quoted(self) -> bool:
        index = self._position + 1
        while True:
            ch = self._char_at(index)
            if ch == '"':
                self._position = index + 1
                return True
            if ch == "\\" and self._char_at(index + 1) not in NEWLINE_CHARS and self._char_at(index + 1) != "\0":
                index += 2
                continue
            if ch in QUOTED_STOP_CHARS or ch == "\0":
                self.expected("closing quote", index)
                return False
            index += 1

    def _token(self, kind: TokenKind, length: int) -> Token:
        start = self._position
        self._advance(length)
        return Token(kind, TextRange.from_offsets(start, self._position))

    def _char_at(self, index: int) -> str:
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _current_char(self) -> str:
        return self._char_at(self._position)

    def _peek_char(self, ahead: int = 1) -> str:
        return self._char_at(self._position + ahead)

    def _advance(self, steps: int) -> None:
        self._position += steps
