"""Document object model and the event processor that builds it."""

from gherkinpy.dom.builder import DomBuilder
from gherkinpy.dom.nodes import (
    Background,
    BlankLine,
    Block,
    BlockLine,
    BlockView,
    Comment,
    DocString,
    Feature,
    Outline,
    OutlineExamples,
    Scenario,
    ScenarioBlock,
    Step,
    StepArgument,
    Table,
)
from gherkinpy.dom.parser import GherkinDomParser, parse_feature

__all__ = [
    "Background",
    "BlankLine",
    "Block",
    "BlockLine",
    "BlockView",
    "Comment",
    "DocString",
    "DomBuilder",
    "Feature",
    "GherkinDomParser",
    "Outline",
    "OutlineExamples",
    "Scenario",
    "ScenarioBlock",
    "Step",
    "StepArgument",
    "Table",
    "parse_feature",
]
