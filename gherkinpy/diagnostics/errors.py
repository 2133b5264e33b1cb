"""Exceptions raised by the parser and DOM checks."""

from gherkinpy.diagnostics.codes import TABLE_INCONSISTENT_CELL_COUNT
from gherkinpy.diagnostics.diagnostic import Diagnostic


class ParseError(Exception):
    """Input is not a well-formed feature document.

    Raised at the furthest position the recogniser reached. ``expected``
    names the grammar rules that could have continued there.
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        line: int,
        column: int,
        excerpt: str,
        expected: tuple[str, ...] = (),
    ) -> None:
        self.diagnostic = diagnostic
        self.line = line
        self.column = column
        self.excerpt = excerpt
        self.expected = expected
        super().__init__(self._render())

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def _render(self) -> str:
        where = f"(line {self.line} column {self.column}): {self.excerpt!r}"
        if self.expected:
            return f"parse error near {', '.join(self.expected)} {where}"
        return f"{self.diagnostic.message.rstrip('.')} {where}"


class TableArityError(ValueError):
    """Table rows disagree on their number of cells."""

    code = TABLE_INCONSISTENT_CELL_COUNT.code

    def __init__(self, expected: int, row_index: int, actual: int) -> None:
        self.expected = expected
        self.row_index = row_index
        self.actual = actual
        super().__init__(
            f"{TABLE_INCONSISTENT_CELL_COUNT.message} Row {row_index} has {actual} cells, expected {expected}."
        )
