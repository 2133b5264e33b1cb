"""Gherkin syntax vocabulary (structural kinds + keywords)."""

from enum import IntEnum, StrEnum
from typing import Final


class GherkinSyntaxKind(IntEnum):
    """Structural node kinds reported by parser events."""

    FEATURE = 1
    BACKGROUND = 2
    SCENARIO = 3
    OUTLINE = 4
    OUTLINE_EXAMPLES = 5
    STEP = 6
    DOC_STRING = 7
    DOC_STRING_LINE = 8
    TABLE = 9
    TABLE_ROW = 10
    TABLE_CELL = 11

    # Side channel
    BLANK_LINE = 20
    COMMENT = 21

    @property
    def is_block(self) -> bool:
        return self in (GherkinSyntaxKind.BACKGROUND, GherkinSyntaxKind.SCENARIO, GherkinSyntaxKind.OUTLINE)


class StepKeyword(StrEnum):
    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"
    AND = "And"
    BUT = "But"
    OR = "Or"  # reserved, never produced by the parser

    @property
    def is_reserved(self) -> bool:
        return self is StepKeyword.OR


FEATURE_KEYWORD: Final[str] = "Feature:"
BACKGROUND_KEYWORD: Final[str] = "Background:"
SCENARIO_KEYWORD: Final[str] = "Scenario:"
OUTLINE_KEYWORD: Final[str] = "Scenario Outline:"
EXAMPLES_KEYWORD: Final[str] = "Examples:"
DOC_STRING_FENCE: Final[str] = '"""'

# Longest literal first so that no keyword is shadowed by a prefix.
BLOCK_KEYWORDS: Final[tuple[str, ...]] = (OUTLINE_KEYWORD, BACKGROUND_KEYWORD, SCENARIO_KEYWORD)

STEP_KEYWORDS: Final[tuple[StepKeyword, ...]] = tuple(
    sorted(
        (keyword for keyword in StepKeyword if not keyword.is_reserved),
        key=lambda keyword: len(keyword.value),
        reverse=True,
    )
)
