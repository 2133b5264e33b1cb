"""Gherkin grammar routines that record parser events."""

from dataclasses import dataclass

from gherkinpy.diagnostics.codes import (
    PARSER_DUPLICATE_BACKGROUND,
    PARSER_INCONSISTENT_TABLE,
    PARSER_MISPLACED_BACKGROUND,
)
from gherkinpy.lexer import TokenKind
from gherkinpy.parser.event import (
    BackgroundEndEvent,
    BackgroundEvent,
    BlankLineEvent,
    CommentEvent,
    DocStringEndEvent,
    DocStringEvent,
    DocStringLineEvent,
    FeatureEndEvent,
    FeatureEvent,
    OutlineEndEvent,
    OutlineEvent,
    OutlineExamplesEndEvent,
    OutlineExamplesEvent,
    ScenarioEndEvent,
    ScenarioEvent,
    StepEndEvent,
    StepEvent,
    TableCellEvent,
    TableEndEvent,
    TableEvent,
    TableRowEndEvent,
    TableRowEvent,
)
from gherkinpy.parser.parser import Parser, ParserProgress
from gherkinpy.syntax import (
    BACKGROUND_KEYWORD,
    BLOCK_KEYWORDS,
    DOC_STRING_FENCE,
    EXAMPLES_KEYWORD,
    FEATURE_KEYWORD,
    OUTLINE_KEYWORD,
    SCENARIO_KEYWORD,
    STEP_KEYWORDS,
    StepKeyword,
)
from gherkinpy.text import TextRange, strip_indent, trim_multiline, trim_ws


@dataclass(slots=True)
class FeatureBodyState:
    has_background: bool = False
    has_scenarios: bool = False


def parse_document(parser: Parser) -> None:
    parse_blank_lines(parser)
    if not parser.lexer.is_eof and parse_feature(parser):
        parse_blank_lines(parser)

    if not parser.lexer.is_eof:
        parser.lexer.expected("end of input")
        raise parser.unexpected()


def parse_feature(parser: Parser) -> bool:
    checkpoint = parser.checkpoint()
    parse_tags(parser)
    parser.lexer.eat_whitespace()
    start = parser.position
    if parser.lexer.eat_literal(FEATURE_KEYWORD) is None:
        parser.rewind(checkpoint)
        return False

    parser.lexer.eat_whitespace()
    title = parse_title(parser)
    header_range = parser.line_range(start)
    tags = parser.take_tags()

    # Header and description comments follow the feature event.
    mark = len(parser.events)
    if not parse_line_end(parser):
        raise parser.unexpected()
    description = parse_description(parser)
    parser.insert(mark, FeatureEvent(title=title, description=description, tags=tags, range=header_range))

    state = FeatureBodyState()
    progress = ParserProgress()
    while not parser.lexer.is_eof:
        progress.assert_progressing(parser)
        if parse_background(parser, state):
            continue
        if parse_outline(parser):
            state.has_scenarios = True
            continue
        if parse_scenario(parser):
            state.has_scenarios = True
            continue
        if parse_blank_line(parser):
            continue
        break

    parser.emit(FeatureEndEvent(range=TextRange.empty_at(parser.position)))
    return True


def parse_description(parser: Parser) -> str:
    lines: list[str] = []
    lexer = parser.lexer
    while not lexer.is_eof:
        checkpoint = parser.checkpoint()
        lexer.eat_whitespace()
        if lexer.at_tag() or any(lexer.at_literal(keyword) for keyword in BLOCK_KEYWORDS):
            parser.rewind(checkpoint)
            break
        token = lexer.eat_line_text("description")
        if not parse_line_end(parser):
            parser.rewind(checkpoint)
            break
        lines.append(lexer.text(token) if token is not None else "")
    return trim_multiline("\n".join(lines))


def parse_background(parser: Parser, state: FeatureBodyState) -> bool:
    checkpoint = parser.checkpoint()
    parse_tags(parser)
    parser.lexer.eat_whitespace()
    start = parser.position
    keyword = parser.lexer.eat_literal(BACKGROUND_KEYWORD)
    if keyword is None:
        parser.rewind(checkpoint)
        return False

    if state.has_background:
        raise parser.error(PARSER_DUPLICATE_BACKGROUND, keyword.range)
    if state.has_scenarios:
        raise parser.error(PARSER_MISPLACED_BACKGROUND, keyword.range)
    state.has_background = True

    parser.lexer.eat_whitespace()
    title = parse_title(parser)
    parser.emit(BackgroundEvent(title=title, tags=parser.take_tags(), range=parser.line_range(start)))
    if not parse_line_end(parser):
        raise parser.unexpected()
    parse_steps(parser)
    parser.emit(BackgroundEndEvent(range=TextRange.empty_at(parser.position)))
    return True


def parse_scenario(parser: Parser) -> bool:
    checkpoint = parser.checkpoint()
    parse_tags(parser)
    parser.lexer.eat_whitespace()
    start = parser.position
    if parser.lexer.eat_literal(SCENARIO_KEYWORD) is None:
        parser.rewind(checkpoint)
        return False

    parser.lexer.eat_whitespace()
    title = parse_title(parser)
    parser.emit(ScenarioEvent(title=title, tags=parser.take_tags(), range=parser.line_range(start)))
    if not parse_line_end(parser):
        raise parser.unexpected()
    parse_steps(parser)
    parser.emit(ScenarioEndEvent(range=TextRange.empty_at(parser.position)))
    return True


def parse_outline(parser: Parser) -> bool:
    checkpoint = parser.checkpoint()
    parse_tags(parser)
    parser.lexer.eat_whitespace()
    start = parser.position
    if parser.lexer.eat_literal(OUTLINE_KEYWORD) is None:
        parser.rewind(checkpoint)
        return False

    parser.lexer.eat_whitespace()
    title = parse_title(parser)
    parser.emit(OutlineEvent(title=title, tags=parser.take_tags(), range=parser.line_range(start)))
    if not parse_line_end(parser):
        raise parser.unexpected()
    parse_steps(parser)

    progress = ParserProgress()
    while not parser.lexer.is_eof:
        progress.assert_progressing(parser)
        if parse_examples(parser) or parse_blank_line(parser):
            continue
        break

    parser.emit(OutlineEndEvent(range=TextRange.empty_at(parser.position)))
    return True


def parse_examples(parser: Parser) -> bool:
    checkpoint = parser.checkpoint()
    parse_blank_lines(parser)
    parser.lexer.eat_whitespace()
    start = parser.position
    if parser.lexer.eat_literal(EXAMPLES_KEYWORD) is None:
        parser.rewind(checkpoint)
        return False

    parser.lexer.eat_whitespace()
    title = parse_title(parser)
    parser.emit(OutlineExamplesEvent(title=title, range=parser.line_range(start)))
    if not parse_line_end(parser):
        raise parser.unexpected()
    parse_table(parser)
    parser.emit(OutlineExamplesEndEvent(range=TextRange.empty_at(parser.position)))
    return True


def parse_steps(parser: Parser) -> None:
    """Block body: ``(Step | BlankLine)*``."""
    progress = ParserProgress()
    while not parser.lexer.is_eof:
        progress.assert_progressing(parser)
        if parse_step(parser) or parse_blank_line(parser):
            continue
        break


def parse_step(parser: Parser) -> bool:
    checkpoint = parser.checkpoint()
    lexer = parser.lexer
    parse_tags(parser)
    lexer.eat_whitespace()
    start = parser.position
    keyword = parse_step_keyword(parser)
    if keyword is None:
        parser.rewind(checkpoint)
        return False

    lexer.eat_whitespace()
    text = lexer.eat_line_text("step text")
    if text is None:
        parser.rewind(checkpoint)
        return False

    parser.emit(
        StepEvent(
            keyword=keyword,
            text=trim_ws(lexer.text(text)),
            tags=parser.take_tags(),
            range=parser.line_range(start),
        )
    )
    if not parse_line_end(parser):
        raise parser.unexpected()

    if not parse_table(parser):
        parse_doc_string(parser)
    parser.emit(StepEndEvent(range=TextRange.empty_at(parser.position)))
    return True


def parse_step_keyword(parser: Parser) -> StepKeyword | None:
    # No word boundary after the keyword: "Andy" reads as "And" + "y".
    for keyword in STEP_KEYWORDS:
        if parser.lexer.eat_literal(keyword.value) is not None:
            return keyword
    return None


def parse_doc_string(parser: Parser) -> bool:
    checkpoint = parser.checkpoint()
    lexer = parser.lexer

    while lexer.at_blank_line():
        lexer.eat_whitespace()
        lexer.eat_newline()

    indent = lexer.eat_whitespace()
    width = 0 if indent is None else indent.range.len().value
    start = parser.position
    if lexer.eat_literal(DOC_STRING_FENCE, TokenKind.FENCE) is None:
        parser.rewind(checkpoint)
        return False
    lexer.eat_whitespace()
    if lexer.eat_newline() is None:
        parser.rewind(checkpoint)
        return False

    parser.emit(DocStringEvent(indent=width, range=parser.line_range(start)))
    while not lexer.at_after_whitespace(DOC_STRING_FENCE):
        if lexer.is_eof:
            lexer.expected(repr(DOC_STRING_FENCE))
            raise parser.unexpected()
        line = lexer.eat_rest_of_line()
        lexer.eat_newline()
        parser.emit(DocStringLineEvent(line=strip_indent(lexer.text(line), width), range=line.range))

    lexer.eat_whitespace()
    lexer.eat_literal(DOC_STRING_FENCE, TokenKind.FENCE)
    end = parser.position
    if not parse_line_end(parser):
        raise parser.unexpected()
    parser.emit(DocStringEndEvent(range=TextRange.empty_at(end)))
    return True


def parse_table(parser: Parser) -> bool:
    start = parser.position
    mark = len(parser.events)
    rows = 0
    arity: int | None = None
    while True:
        row_start = parser.position
        cells = parse_table_row(parser)
        if cells is None:
            break
        if arity is None:
            arity = cells
        elif cells != arity and parser.options.reject_ragged_tables:
            raise parser.error(PARSER_INCONSISTENT_TABLE, parser.line_range(row_start))
        rows += 1

    if rows == 0:
        return False
    parser.insert(mark, TableEvent(range=parser.range_from(start)))
    parser.emit(TableEndEvent(range=TextRange.empty_at(parser.position)))
    return True


def parse_table_row(parser: Parser) -> int | None:
    """Parse one ``| a | b |`` row and return its cell count."""
    checkpoint = parser.checkpoint()
    lexer = parser.lexer
    parse_blank_lines(parser)
    lexer.eat_whitespace()
    start = parser.position
    if lexer.eat_literal("|", TokenKind.PIPE) is None:
        parser.rewind(checkpoint)
        return None

    parser.emit(TableRowEvent(range=parser.line_range(start)))
    cells = 0
    while (cell := lexer.eat_cell()) is not None:
        parser.emit(TableCellEvent(content=lexer.text(cell).strip(" \t"), range=cell.range))
        cells += 1

    if cells == 0 or not parse_line_end(parser):
        parser.rewind(checkpoint)
        return None
    parser.emit(TableRowEndEvent(range=TextRange.empty_at(parser.position)))
    return cells


def parse_tags(parser: Parser) -> None:
    """``(Blank* WS* Tag (WS* Tag)* WS* LineEnd?)* Blank*``; tags go to the tag buffer."""
    lexer = parser.lexer
    while True:
        checkpoint = parser.checkpoint()
        parse_blank_lines(parser)
        lexer.eat_whitespace()
        tag = lexer.eat_tag()
        if tag is None:
            parser.rewind(checkpoint)
            break
        parser.push_tag(lexer.text(tag))

        while True:
            before = parser.checkpoint()
            lexer.eat_whitespace()
            tag = lexer.eat_tag()
            if tag is None:
                parser.rewind(before)
                break
            parser.push_tag(lexer.text(tag))

        lexer.eat_whitespace()
        # The block keyword may share the line with its tags.
        before = parser.checkpoint()
        if not parse_line_end(parser):
            parser.rewind(before)
            break

    parse_blank_lines(parser)


def parse_title(parser: Parser) -> str:
    token = parser.lexer.eat_line_text("title")
    if token is None:
        return ""
    return trim_ws(parser.lexer.text(token))


def parse_line_end(parser: Parser) -> bool:
    """``WS* LineComment? NL``; records the trailing comment."""
    checkpoint = parser.checkpoint()
    lexer = parser.lexer
    lexer.eat_whitespace()
    comment = lexer.eat_line_comment()
    if lexer.eat_newline() is None:
        parser.rewind(checkpoint)
        return False
    if comment is not None:
        parser.emit(CommentEvent(text=lexer.text(comment)[1:], range=comment.range))
    return True


def parse_blank_line(parser: Parser) -> bool:
    checkpoint = parser.checkpoint()
    lexer = parser.lexer
    start = parser.position
    lexer.eat_whitespace()
    comment = lexer.eat_line_comment()
    newline = lexer.eat_newline()
    if newline is None:
        parser.rewind(checkpoint)
        return False
    if comment is not None:
        parser.emit(CommentEvent(text=lexer.text(comment)[1:], range=comment.range))
    parser.emit(BlankLineEvent(range=TextRange.from_offsets(start, newline.start)))
    return True


def parse_blank_lines(parser: Parser) -> int:
    count = 0
    while not parser.lexer.is_eof and parse_blank_line(parser):
        count += 1
    return count
