"""Gherkin feature-file parser, event stream, document model and pretty-printer."""

from gherkinpy.diagnostics import ParseError, TableArityError
from gherkinpy.dom import (
    Background,
    BlockView,
    DocString,
    DomBuilder,
    Feature,
    GherkinDomParser,
    Outline,
    OutlineExamples,
    Scenario,
    Step,
    Table,
    parse_feature,
)
from gherkinpy.format import GherkinPrettyFormatter, run_format
from gherkinpy.parser import (
    EventBus,
    GherkinParser,
    ParseMode,
    ParserOptions,
    parse_events,
    parse_result,
)
from gherkinpy.syntax import StepKeyword

__all__ = [
    "Background",
    "BlockView",
    "DocString",
    "DomBuilder",
    "EventBus",
    "Feature",
    "GherkinDomParser",
    "GherkinParser",
    "GherkinPrettyFormatter",
    "Outline",
    "OutlineExamples",
    "ParseError",
    "ParseMode",
    "ParserOptions",
    "Scenario",
    "Step",
    "StepKeyword",
    "Table",
    "TableArityError",
    "parse_events",
    "parse_feature",
    "parse_result",
    "run_format",
]
