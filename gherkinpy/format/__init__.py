"""Pretty-printing."""

from gherkinpy.format.printer import AnsiStyle, GherkinPrettyFormatter, is_numeric_cell
from gherkinpy.format.runner import run_format

__all__ = [
    "AnsiStyle",
    "GherkinPrettyFormatter",
    "is_numeric_cell",
    "run_format",
]
