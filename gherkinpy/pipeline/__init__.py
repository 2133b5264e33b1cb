"""Pipeline result carriers."""

from gherkinpy.pipeline.result import GherkinParseResult
from gherkinpy.pipeline.results import FormatRunResult

__all__ = [
    "FormatRunResult",
    "GherkinParseResult",
]
