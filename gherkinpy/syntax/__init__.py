"""Syntax kinds and keywords."""

from gherkinpy.syntax.kind import (
    BACKGROUND_KEYWORD,
    BLOCK_KEYWORDS,
    DOC_STRING_FENCE,
    EXAMPLES_KEYWORD,
    FEATURE_KEYWORD,
    OUTLINE_KEYWORD,
    SCENARIO_KEYWORD,
    STEP_KEYWORDS,
    GherkinSyntaxKind,
    StepKeyword,
)

__all__ = [
    "BACKGROUND_KEYWORD",
    "BLOCK_KEYWORDS",
    "DOC_STRING_FENCE",
    "EXAMPLES_KEYWORD",
    "FEATURE_KEYWORD",
    "OUTLINE_KEYWORD",
    "SCENARIO_KEYWORD",
    "STEP_KEYWORDS",
    "GherkinSyntaxKind",
    "StepKeyword",
]
