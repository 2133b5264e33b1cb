"""High-level parse entrypoint for Gherkin source text."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from gherkinpy.parser.event import Event, EventBus, EventProcessor, dispatch_events
from gherkinpy.parser.grammar import parse_document
from gherkinpy.parser.options import ParseMode, ParserOptions
from gherkinpy.parser.parser import Parser

if TYPE_CHECKING:
    from gherkinpy.pipeline import GherkinParseResult

logger = logging.getLogger(__name__)


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


class GherkinParser:
    """Recognise a feature document, then replay its events to registered processors.

    ``parse()`` runs the recogniser to completion and raises
    :class:`~gherkinpy.diagnostics.ParseError` on malformed input, in which
    case no processor sees any event. ``execute()`` dispatches the recorded
    events, in source order, to every processor in registration order.
    """

    def __init__(self, content: str, options: ParserOptions | None = None) -> None:
        self._content = content
        self._options = options or ParserOptions()
        self._bus = EventBus()
        self._events: list[Event] | None = None

    @property
    def content(self) -> str:
        return self._content

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def events(self) -> list[Event] | None:
        """Recorded events, or None until ``parse()`` has succeeded."""
        return self._events

    def register(self, processor: EventProcessor | Callable[[Event], None]) -> None:
        self._bus.register(processor)

    def parse(self) -> None:
        parser = Parser(self._content, options=self._options)
        parse_document(parser)
        self._events = parser.finish()
        logger.debug("recognised %d events", len(self._events))

    def execute(self) -> None:
        if self._events is None:
            raise RuntimeError("execute() called before a successful parse()")
        dispatch_events(self._bus, self._events)


def parse_events(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> list[Event]:
    parser = GherkinParser(text, options=resolve_options(options, mode))
    parser.parse()
    return parser.events or []


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> GherkinParseResult:
    from gherkinpy.pipeline import GherkinParseResult

    resolved_options = resolve_options(options, mode)
    return GherkinParseResult(
        source_text=text,
        events=parse_events(text, options=resolved_options),
        options=resolved_options,
    )
