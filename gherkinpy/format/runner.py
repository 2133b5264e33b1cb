"""Format runner over a shared Gherkin parse result."""

from __future__ import annotations

from gherkinpy.format.printer import GherkinPrettyFormatter
from gherkinpy.parser import ParseMode, ParserOptions, parse_result
from gherkinpy.pipeline.result import GherkinParseResult
from gherkinpy.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: GherkinParseResult | None = None,
    formatter: GherkinPrettyFormatter | None = None,
) -> FormatRunResult:
    """Run formatting from a single parse lifecycle."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    resolved_formatter = formatter or GherkinPrettyFormatter()

    formatted_text = resolved_formatter.format(resolved_parse.feature())
    changed = formatted_text != resolved_parse.source_text

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        changed=changed,
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: GherkinParseResult | None,
) -> GherkinParseResult:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_result(text, options=options, mode=mode)
