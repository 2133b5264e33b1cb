"""Parser facade that materialises the document object model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gherkinpy.dom.builder import DomBuilder
from gherkinpy.dom.nodes import Feature
from gherkinpy.parser.gherkin import GherkinParser, resolve_options
from gherkinpy.parser.options import ParseMode, ParserOptions

if TYPE_CHECKING:
    from gherkinpy.format import GherkinPrettyFormatter


class GherkinDomParser(GherkinParser):
    """GherkinParser with a :class:`DomBuilder` registered first."""

    def __init__(self, content: str, options: ParserOptions | None = None) -> None:
        super().__init__(content, options=options)
        self._builder = DomBuilder()
        self._built = False
        self.register(self._builder)

    def parse_feature(self) -> Feature | None:
        self.parse()
        self.execute()
        self._built = True
        return self._builder.feature

    def feature(self) -> Feature | None:
        if not self._built:
            return self.parse_feature()
        return self._builder.feature

    def format(self, formatter: GherkinPrettyFormatter) -> str:
        return formatter.format(self.feature())


def parse_feature(
    content: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Feature | None:
    """Parse ``content`` into a Feature; None when the document holds no feature."""
    return GherkinDomParser(content, options=resolve_options(options, mode)).parse_feature()
