"""Parser infrastructure (scanner cursor + recursive-descent grammar + event bus)."""

from gherkinpy.parser.event import (
    BackgroundEndEvent,
    BackgroundEvent,
    BlankLineEvent,
    CommentEvent,
    DocStringEndEvent,
    DocStringEvent,
    DocStringLineEvent,
    Event,
    EventBus,
    EventProcessor,
    EventProcessorFn,
    FeatureEndEvent,
    FeatureEvent,
    OutlineEndEvent,
    OutlineEvent,
    OutlineExamplesEndEvent,
    OutlineExamplesEvent,
    ScenarioEndEvent,
    ScenarioEvent,
    StepEndEvent,
    StepEvent,
    TableCellEvent,
    TableEndEvent,
    TableEvent,
    TableRowEndEvent,
    TableRowEvent,
    describe_event,
    dispatch_events,
    is_begin,
    is_end,
)
from gherkinpy.parser.gherkin import GherkinParser, parse_events, parse_result, resolve_options
from gherkinpy.parser.grammar import parse_document
from gherkinpy.parser.options import ParseMode, ParserOptions
from gherkinpy.parser.parser import Parser, ParserCheckpoint, ParserProgress

__all__ = [
    "BackgroundEndEvent",
    "BackgroundEvent",
    "BlankLineEvent",
    "CommentEvent",
    "DocStringEndEvent",
    "DocStringEvent",
    "DocStringLineEvent",
    "Event",
    "EventBus",
    "EventProcessor",
    "EventProcessorFn",
    "FeatureEndEvent",
    "FeatureEvent",
    "GherkinParser",
    "OutlineEndEvent",
    "OutlineEvent",
    "OutlineExamplesEndEvent",
    "OutlineExamplesEvent",
    "ParseMode",
    "Parser",
    "ParserCheckpoint",
    "ParserOptions",
    "ParserProgress",
    "ScenarioEndEvent",
    "ScenarioEvent",
    "StepEndEvent",
    "StepEvent",
    "TableCellEvent",
    "TableEndEvent",
    "TableEvent",
    "TableRowEndEvent",
    "TableRowEvent",
    "describe_event",
    "dispatch_events",
    "is_begin",
    "is_end",
    "parse_document",
    "parse_events",
    "parse_result",
    "resolve_options",
]
