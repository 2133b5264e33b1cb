"""Canonical pretty-printer for the document object model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TextIO

from gherkinpy.dom.nodes import (
    Block,
    BlockLine,
    Comment,
    DocString,
    Feature,
    Outline,
    OutlineExamples,
    Step,
    Table,
)
from gherkinpy.text import format_tags

STEP_INDENT = "    "
ARGUMENT_INDENT = "      "
CENTERED_KEYWORD_WIDTH = 9
DEFAULT_COMMENT_MIN_INDENT = 45


class AnsiStyle(StrEnum):
    BOLD = "1"
    WHITE = "29"
    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    BOLD_RED = "31;1"
    BOLD_GREEN = "32;1"
    BOLD_YELLOW = "33;1"
    BOLD_BLUE = "34;1"
    BOLD_MAGENTA = "35;1"
    BOLD_CYAN = "36;1"


def is_numeric_cell(text: str) -> bool:
    if not text or "_" in text:
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


@dataclass(slots=True)
class _Line:
    text: str
    width: int
    comment: Comment | None = None


@dataclass(slots=True)
class _Printer:
    options: GherkinPrettyFormatter
    lines: list[_Line] = field(default_factory=list)

    def colored(self, style: AnsiStyle, text: str) -> str:
        if self.options.ansi_colors and text:
            return f"\x1b[{style}m{text}\x1b[m"
        return text

    def write(self, plain: str, rendered: str | None = None, comment: Comment | None = None) -> None:
        self.lines.append(_Line(plain if rendered is None else rendered, len(plain), comment))

    def blank(self) -> None:
        self.write("")

    def feature(self, node: Feature) -> None:
        if node.tags:
            tags = format_tags(node.tags)
            self.write(tags, self.colored(AnsiStyle.CYAN, tags))
        header = _header(node.keyword, node.title)
        self.write(header, self.colored(AnsiStyle.BOLD, node.keyword) + header[len(node.keyword) :], node.comment)
        for line in node.description.split("\n") if node.description else ():
            self.write(f"  {line}" if line else "")
        self.blank()

        if node.background is not None and not self.options.skip_steps:
            self.block(node.background)
            self.blank()
        for scenario in node.scenarios:
            self.block(scenario)
            self.blank()

    def block(self, node: Block) -> None:
        if node.tags:
            tags = format_tags(node.tags)
            self.write(f"  {tags}", "  " + self.colored(AnsiStyle.CYAN, tags))
        keyword = f"{node.keyword}:"
        rendered = "  " + self.colored(AnsiStyle.BOLD, keyword)
        if node.title:
            rendered += " " + self.colored(AnsiStyle.WHITE, node.title)
        self.write("  " + _header(node.keyword, node.title), rendered, node.comment)

        if self.options.skip_steps:
            return
        for line in _block_lines(node):
            if isinstance(line, Step):
                self.step(line)
            elif line.comment is not None:
                self.standalone_comment(line.comment)
        if isinstance(node, Outline):
            for examples in node.all_examples:
                self.examples(examples)

    def examples(self, node: OutlineExamples) -> None:
        self.blank()
        header = STEP_INDENT + _header(node.keyword, node.title)
        self.write(header, self.colored(AnsiStyle.WHITE, header), node.comment)
        if node.table is not None:
            self.table(node.table)

    def step(self, node: Step) -> None:
        if node.tags:
            tags = format_tags(node.tags)
            self.write(STEP_INDENT + tags, STEP_INDENT + self.colored(AnsiStyle.CYAN, tags))

        keyword = node.keyword.value
        if self.options.center_steps:
            padded = f"{keyword:>{CENTERED_KEYWORD_WIDTH}}"
            plain = f"{padded} {node.text}"
            rendered = self.colored(AnsiStyle.BOLD_GREEN, padded) + self.colored(AnsiStyle.GREEN, f" {node.text}")
        else:
            plain = f"{STEP_INDENT}{keyword} {node.text}"
            rendered = (
                STEP_INDENT
                + self.colored(AnsiStyle.BOLD_GREEN, keyword)
                + " "
                + self.colored(AnsiStyle.GREEN, node.text)
            )
        self.write(plain, rendered, node.comment)

        if node.doc_string is not None:
            self.doc_string(node.doc_string)
        elif node.table is not None:
            self.table(node.table)

    def table(self, node: Table) -> None:
        widths: dict[int, int] = {}
        for row in node.rows:
            for column, cell in enumerate(row):
                widths[column] = max(widths.get(column, 0), len(cell))

        wood = self.colored(AnsiStyle.BOLD_YELLOW, "|")
        for index, row in enumerate(node.rows):
            plain = ARGUMENT_INDENT
            rendered = ARGUMENT_INDENT
            for column, cell in enumerate(row):
                if is_numeric_cell(cell):
                    padded = f" {cell:>{widths[column]}} "
                else:
                    padded = f" {cell:<{widths[column]}} "
                plain += "|" + padded
                rendered += wood + self.colored(AnsiStyle.YELLOW, padded)
            self.write(plain + "|", rendered + wood, node.row_comments.get(index))

    def doc_string(self, node: DocString) -> None:
        fence = ARGUMENT_INDENT + '"""'
        rendered_fence = ARGUMENT_INDENT + self.colored(AnsiStyle.BOLD, '"""')
        self.write(fence, rendered_fence)
        for line in node.lines:
            if line:
                self.write(ARGUMENT_INDENT + line, self.colored(AnsiStyle.YELLOW, ARGUMENT_INDENT + line))
            else:
                self.blank()
        self.write(fence, rendered_fence)

    def standalone_comment(self, comment: Comment) -> None:
        text = f"#{comment.text}"
        self.write(STEP_INDENT + text, STEP_INDENT + self.colored(AnsiStyle.MAGENTA, text))

    def render(self) -> str:
        column = 0
        if self.options.align_comments:
            commented = [line.width for line in self.lines if line.comment is not None]
            column = max([self.options.comment_min_indent, *(width + 1 for width in commented)])

        out: list[str] = []
        for line in self.lines:
            text = line.text
            if line.comment is not None:
                comment = self.colored(AnsiStyle.MAGENTA, f"#{line.comment.text}")
                gap = column - line.width if self.options.align_comments else 1
                text = f"{text}{' ' * gap}{comment}"
            out.append(text + "\n")
        return "".join(out)


def _header(keyword: str, title: str) -> str:
    if title:
        return f"{keyword}: {title}"
    return f"{keyword}:"


def _block_lines(node: Block) -> list[BlockLine]:
    """``lines`` when it agrees with ``steps``; otherwise just the steps."""
    listed = [line for line in node.lines if isinstance(line, Step)]
    if len(listed) == len(node.steps) and all(a is b for a, b in zip(listed, node.steps)):
        return node.lines
    return list(node.steps)


@dataclass(slots=True)
class GherkinPrettyFormatter:
    """Re-emit a Feature as canonical, aligned Gherkin text.

    ``format(parse(format(x)))`` equals ``format(x)`` for any feature that
    parses. Steps using the reserved ``Or`` keyword are printed as written,
    but the parser rejects them, so such output does not parse back.
    """

    ansi_colors: bool = False
    center_steps: bool = False
    skip_steps: bool = False
    align_comments: bool = True
    comment_min_indent: int = DEFAULT_COMMENT_MIN_INDENT

    def format(self, feature: Feature | None) -> str:
        if feature is None:
            return ""
        return self.format_feature(feature)

    def format_feature(self, feature: Feature) -> str:
        printer = _Printer(self)
        printer.feature(feature)
        return printer.render()

    def format_scenario(self, block: Block) -> str:
        printer = _Printer(self)
        printer.block(block)
        return printer.render()

    def format_step(self, step: Step) -> str:
        printer = _Printer(self)
        printer.step(step)
        return printer.render()

    def format_table(self, table: Table) -> str:
        printer = _Printer(self)
        printer.table(table)
        return printer.render()

    def format_doc_string(self, doc_string: DocString) -> str:
        printer = _Printer(self)
        printer.doc_string(doc_string)
        return printer.render()

    def write(self, feature: Feature | None, out: TextIO) -> None:
        out.write(self.format(feature))
