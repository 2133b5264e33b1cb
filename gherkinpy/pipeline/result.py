"""Parse carriers for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gherkinpy.parser.event import Event, EventBus, dispatch_events
from gherkinpy.parser.options import ParserOptions

if TYPE_CHECKING:
    from gherkinpy.dom import Feature
    from gherkinpy.parser.event import EventProcessor


@dataclass(slots=True)
class GherkinParseResult:
    """Recorded events of one successful parse, with a lazily built DOM."""

    source_text: str
    events: list[Event]
    options: ParserOptions
    _feature: Feature | None = field(default=None, init=False, repr=False)
    _built: bool = field(default=False, init=False, repr=False)

    def replay(self, *processors: EventProcessor) -> None:
        """Dispatch the recorded events to ``processors`` in order."""
        bus = EventBus()
        for processor in processors:
            bus.register(processor)
        dispatch_events(bus, self.events)

    def feature(self) -> Feature | None:
        if not self._built:
            from gherkinpy.dom import DomBuilder

            builder = DomBuilder()
            self.replay(builder)
            self._feature = builder.feature
            self._built = True
        return self._feature
