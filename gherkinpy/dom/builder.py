"""Event processor assembling the document object model."""

from __future__ import annotations

from gherkinpy.dom.nodes import (
    Background,
    BlankLine,
    Block,
    Comment,
    DocString,
    Feature,
    Outline,
    OutlineExamples,
    Scenario,
    Step,
    Table,
)
from gherkinpy.parser.event import (
    BackgroundEndEvent,
    BackgroundEvent,
    BlankLineEvent,
    CommentEvent,
    DocStringEndEvent,
    DocStringEvent,
    DocStringLineEvent,
    Event,
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
    is_begin,
    is_end,
)
from gherkinpy.text import TextRange


class DomBuilder:
    """Builds a :class:`Feature` tree from the parser's event stream.

    At most one block and one step are open at a time. A step's argument
    is decided when the step ends: a doc string wins over a table. An
    Examples section takes the most recently closed table.

    Trailing comments attach to whichever node owns the line they sit on.
    Standalone comment lines inside a block body are kept as
    :class:`BlankLine` entries of that block.
    """

    def __init__(self) -> None:
        self._feature: Feature | None = None
        self._block: Block | None = None
        self._step: Step | None = None
        self._examples: OutlineExamples | None = None

        self._doc_string: DocString | None = None
        self._table: Table | None = None
        self._closed_table: Table | None = None

        self._line_owner: object | None = None
        self._line_range: TextRange | None = None
        self._row_index: int | None = None
        self._pending_comment: Comment | None = None

    @property
    def feature(self) -> Feature | None:
        return self._feature

    def process_event(self, event: Event) -> None:
        if is_begin(event) or is_end(event):
            self._pending_comment = None

        match event:
            case FeatureEvent(title=title, description=description, tags=tags):
                self._feature = Feature(title=title, description=description, tags=list(tags))
                self._own_line(self._feature, event.range)
            case FeatureEndEvent():
                self._clear_line_owner()

            case BackgroundEvent(title=title, tags=tags):
                self._open_block(Background(title=title, tags=list(tags)), event.range)
            case ScenarioEvent(title=title, tags=tags):
                self._open_block(Scenario(title=title, tags=list(tags)), event.range)
            case OutlineEvent(title=title, tags=tags):
                self._open_block(Outline(title=title, tags=list(tags)), event.range)
            case BackgroundEndEvent() | ScenarioEndEvent() | OutlineEndEvent():
                self._close_block()

            case OutlineExamplesEvent(title=title):
                self._closed_table = None
                self._examples = OutlineExamples(title=title)
                self._own_line(self._examples, event.range)
            case OutlineExamplesEndEvent():
                if self._examples is not None:
                    self._examples.set_table(self._closed_table)
                    if isinstance(self._block, Outline):
                        self._block.add_examples(self._examples)
                self._examples = None
                self._closed_table = None
                self._clear_line_owner()

            case StepEvent(keyword=keyword, text=text, tags=tags):
                self._doc_string = None
                self._closed_table = None
                self._step = Step(keyword=keyword, text=text, tags=list(tags))
                self._own_line(self._step, event.range)
            case StepEndEvent():
                self._close_step()

            case DocStringEvent(indent=indent):
                self._doc_string = DocString(indent=indent)
                self._clear_line_owner()
            case DocStringLineEvent(line=line):
                if self._doc_string is not None:
                    self._doc_string.add_line(line)
            case DocStringEndEvent():
                self._clear_line_owner()

            case TableEvent():
                self._table = Table()
                self._closed_table = None
            case TableRowEvent():
                if self._table is not None:
                    self._table.add_row()
                    self._row_index = len(self._table.rows) - 1
                    self._own_line(self._table, event.range)
            case TableCellEvent(content=content):
                if self._table is not None:
                    self._table.add_cell(content)
            case TableRowEndEvent():
                self._row_index = None
                self._clear_line_owner()
            case TableEndEvent():
                self._closed_table = self._table
                self._table = None

            case CommentEvent(text=text):
                self._comment(Comment(text), event.range)
            case BlankLineEvent():
                self._blank_line()

    def _open_block(self, block: Block, header: TextRange) -> None:
        self._block = block
        self._step = None
        self._own_line(block, header)

    def _close_block(self) -> None:
        block = self._block
        self._block = None
        self._step = None
        self._doc_string = None
        self._closed_table = None
        self._clear_line_owner()
        if block is None or self._feature is None:
            return
        if isinstance(block, Background):
            self._feature.set_background(block)
        else:
            self._feature.add_scenario(block)

    def _close_step(self) -> None:
        step = self._step
        self._step = None
        if step is not None:
            if self._doc_string is not None:
                step.set_doc_string(self._doc_string)
            elif self._closed_table is not None:
                step.set_table(self._closed_table)
            if self._block is not None:
                self._block.add_step(step)
        self._doc_string = None
        self._closed_table = None
        self._clear_line_owner()

    def _own_line(self, owner: object, line: TextRange) -> None:
        self._line_owner = owner
        self._line_range = line

    def _clear_line_owner(self) -> None:
        self._line_owner = None
        self._line_range = None

    def _comment(self, comment: Comment, at: TextRange) -> None:
        owner = self._line_owner
        if owner is not None and self._line_range is not None and self._line_range.contains_range(at):
            if isinstance(owner, Table):
                if self._row_index is not None:
                    owner.set_row_comment(self._row_index, comment)
            else:
                owner.comment = comment
            return
        self._pending_comment = comment

    def _blank_line(self) -> None:
        comment = self._pending_comment
        self._pending_comment = None
        if comment is not None and self._block is not None and self._step is None:
            self._block.add_blank_line(BlankLine(comment))
