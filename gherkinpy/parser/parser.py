"""Event-recording parser core."""

import logging
from dataclasses import dataclass

from gherkinpy.diagnostics import Diagnostic, DiagnosticSpec, ParseError
from gherkinpy.diagnostics.codes import PARSER_UNEXPECTED_INPUT
from gherkinpy.lexer import Lexer, LexerCheckpoint
from gherkinpy.parser.event import Event, describe_event
from gherkinpy.parser.options import ParserOptions
from gherkinpy.text import LineIndex, TextRange

logger = logging.getLogger(__name__)

EXCERPT_WIDTH = 40


@dataclass(frozen=True, slots=True)
class ParserCheckpoint:
    lexer_checkpoint: LexerCheckpoint
    events_len: int
    tags: tuple[str, ...]


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: int | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at offset {parser.position}")


class Parser:
    """Recursive-descent driver state: cursor, recorded events and the tag buffer.

    Grammar rules live in :mod:`gherkinpy.parser.grammar`; they call
    :meth:`checkpoint` before speculative matches and :meth:`rewind` on
    failure, which drops any events and tags recorded since.
    """

    def __init__(self, source: str, options: ParserOptions | None = None) -> None:
        self._lexer = Lexer(source)
        self._options = options or ParserOptions()
        self._events: list[Event] = []
        self._tags: tuple[str, ...] = ()
        self._line_index: LineIndex | None = None

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    @property
    def source(self) -> str:
        return self._lexer.source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def events(self) -> list[Event]:
        return self._events

    @property
    def position(self) -> int:
        return self._lexer.position

    @property
    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex(self.source)
        return self._line_index

    def checkpoint(self) -> ParserCheckpoint:
        return ParserCheckpoint(
            lexer_checkpoint=self._lexer.checkpoint,
            events_len=len(self._events),
            tags=self._tags,
        )

    def rewind(self, checkpoint: ParserCheckpoint) -> None:
        self._lexer.rewind(checkpoint.lexer_checkpoint)
        del self._events[checkpoint.events_len :]
        self._tags = checkpoint.tags

    def emit(self, event: Event) -> None:
        self._events.append(event)

    def insert(self, index: int, event: Event) -> None:
        self._events.insert(index, event)

    def push_tag(self, tag: str) -> None:
        self._tags = (*self._tags, tag)

    def take_tags(self) -> tuple[str, ...]:
        """Flush the tag buffer into the block being opened."""
        tags = self._tags
        self._tags = ()
        return tags

    def range_from(self, start: int) -> TextRange:
        return TextRange.from_offsets(start, self.position)

    def line_range(self, start: int) -> TextRange:
        """From ``start`` to the end of its line, line terminator excluded."""
        source = self.source
        end = start
        while end < len(source) and source[end] not in "\r\n":
            end += 1
        return TextRange.from_offsets(start, end)

    def error(
        self,
        spec: DiagnosticSpec,
        range: TextRange,
        *,
        expected: tuple[str, ...] = (),
    ) -> ParseError:
        line, column = self.line_index.line_col(range.start)
        diagnostic = Diagnostic(
            code=spec.code,
            message=spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
        return ParseError(
            diagnostic,
            line=line,
            column=column,
            excerpt=self._excerpt(line, column),
            expected=expected,
        )

    def unexpected(self) -> ParseError:
        """Error at the furthest position any rule reached."""
        offset = self._lexer.furthest_position
        return self.error(
            PARSER_UNEXPECTED_INPUT,
            self.line_range(offset),
            expected=self._lexer.expected_rules,
        )

    def finish(self) -> list[Event]:
        if logger.isEnabledFor(logging.DEBUG):
            for event in self._events:
                logger.debug(describe_event(event))
        return self._events

    def _excerpt(self, line: int, column: int) -> str:
        text = self.line_index.line_text(line)
        rest = text[column - 1 :]
        if not rest.strip():
            rest = text
        if len(rest) > EXCERPT_WIDTH:
            return rest[:EXCERPT_WIDTH] + "..."
        return rest
