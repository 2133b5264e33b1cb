"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Flags controlling how forgiving the recogniser is."""

    mode: ParseMode = ParseMode.PERMISSIVE
    reject_ragged_tables: bool = False

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(mode=mode, reject_ragged_tables=True)

        return ParserOptions(mode=mode, reject_ragged_tables=False)
