"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from gherkinpy.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_UNEXPECTED_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_INPUT",
    message="Unexpected input.",
    hint="Check the keyword spelling and the indentation of the offending line.",
    severity="error",
    category="parser",
)

PARSER_DUPLICATE_BACKGROUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DUPLICATE_BACKGROUND",
    message="A feature may declare at most one Background.",
    hint="Merge the Background sections into one.",
    severity="error",
    category="parser",
)

PARSER_MISPLACED_BACKGROUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISPLACED_BACKGROUND",
    message="Background must precede every Scenario and Scenario Outline.",
    hint="Move the Background directly below the feature description.",
    severity="error",
    category="parser",
)

PARSER_INCONSISTENT_TABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INCONSISTENT_TABLE",
    message="Table row has a different number of cells than the first row.",
    hint="Give every row of the table the same number of cells.",
    severity="error",
    category="parser",
)

TABLE_INCONSISTENT_CELL_COUNT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TABLE_INCONSISTENT_CELL_COUNT",
    message="Table rows have differing cell counts.",
    severity="error",
    category="dom",
)
