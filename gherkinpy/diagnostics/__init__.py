"""Diagnostics."""

from gherkinpy.diagnostics.codes import (
    PARSER_DUPLICATE_BACKGROUND,
    PARSER_INCONSISTENT_TABLE,
    PARSER_MISPLACED_BACKGROUND,
    PARSER_UNEXPECTED_INPUT,
    TABLE_INCONSISTENT_CELL_COUNT,
    DiagnosticSpec,
)
from gherkinpy.diagnostics.diagnostic import Diagnostic, Severity
from gherkinpy.diagnostics.errors import ParseError, TableArityError
from gherkinpy.diagnostics.report import render_diagnostic

__all__ = [
    "PARSER_DUPLICATE_BACKGROUND",
    "PARSER_INCONSISTENT_TABLE",
    "PARSER_MISPLACED_BACKGROUND",
    "PARSER_UNEXPECTED_INPUT",
    "TABLE_INCONSISTENT_CELL_COUNT",
    "Diagnostic",
    "DiagnosticSpec",
    "ParseError",
    "Severity",
    "TableArityError",
    "render_diagnostic",
]
