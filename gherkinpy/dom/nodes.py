"""Document object model for parsed feature files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from gherkinpy.diagnostics import TableArityError
from gherkinpy.syntax import GherkinSyntaxKind, StepKeyword


@dataclass(frozen=True, slots=True)
class Comment:
    """Text after ``#``, verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class BlankLine:
    """A standalone line inside a block body; kept only when it carries a comment."""

    comment: Comment | None = None


@dataclass(slots=True)
class DocString:
    node_type: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.DOC_STRING

    indent: int = 0
    lines: list[str] = field(default_factory=list)

    def add_line(self, line: str) -> DocString:
        self.lines.append(line)
        return self

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


@dataclass(slots=True)
class Table:
    node_type: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.TABLE

    rows: list[list[str]] = field(default_factory=list)
    row_comments: dict[int, Comment] = field(default_factory=dict)

    @staticmethod
    def from_rows(rows: list[list[str]]) -> Table:
        return Table(rows=[list(row) for row in rows])

    def add_row(self, cells: list[str] | None = None) -> Table:
        self.rows.append(list(cells or []))
        return self

    def add_cell(self, content: str) -> Table:
        if not self.rows:
            self.rows.append([])
        self.rows[-1].append(content)
        return self

    def set_row_comment(self, row_index: int, comment: Comment | None) -> Table:
        if comment is None:
            self.row_comments.pop(row_index, None)
        else:
            self.row_comments[row_index] = comment
        return self

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def is_rectangular(self) -> bool:
        return len({len(row) for row in self.rows}) <= 1

    def check_arity(self) -> None:
        """Raise ``TableArityError`` unless every row has as many cells as the first."""
        if not self.rows:
            return
        expected = len(self.rows[0])
        for index, row in enumerate(self.rows):
            if len(row) != expected:
                raise TableArityError(expected, index, len(row))


type StepArgument = DocString | Table | None


@dataclass(slots=True)
class Step:
    node_type: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.STEP

    keyword: StepKeyword
    text: str
    tags: list[str] = field(default_factory=list)
    argument: StepArgument = None
    comment: Comment | None = None

    @property
    def doc_string(self) -> DocString | None:
        return self.argument if isinstance(self.argument, DocString) else None

    @property
    def table(self) -> Table | None:
        return self.argument if isinstance(self.argument, Table) else None

    def set_doc_string(self, doc_string: DocString | None) -> Step:
        self.argument = doc_string
        return self

    def set_table(self, table: Table | None) -> Step:
        self.argument = table
        return self


type BlockLine = Step | BlankLine


@dataclass(slots=True)
class Background:
    node_type: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.BACKGROUND
    keyword: ClassVar[str] = "Background"

    title: str = ""
    tags: list[str] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    lines: list[BlockLine] = field(default_factory=list)
    comment: Comment | None = None

    def add_step(self, step: Step) -> Background:
        self.steps.append(step)
        self.lines.append(step)
        return self

    def add_blank_line(self, line: BlankLine) -> Background:
        self.lines.append(line)
        return self


@dataclass(slots=True)
class Scenario:
    node_type: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.SCENARIO
    keyword: ClassVar[str] = "Scenario"

    title: str = ""
    tags: list[str] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    lines: list[BlockLine] = field(default_factory=list)
    comment: Comment | None = None

    def add_step(self, step: Step) -> Scenario:
        self.steps.append(step)
        self.lines.append(step)
        return self

    def add_blank_line(self, line: BlankLine) -> Scenario:
        self.lines.append(line)
        return self


@dataclass(slots=True)
class OutlineExamples:
    node_type: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.OUTLINE_EXAMPLES
    keyword: ClassVar[str] = "Examples"

    title: str = ""
    table: Table | None = None
    comment: Comment | None = None

    def set_table(self, table: Table | None) -> OutlineExamples:
        self.table = table
        return self


@dataclass(slots=True)
class Outline:
    node_type: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.OUTLINE
    keyword: ClassVar[str] = "Scenario Outline"

    title: str = ""
    tags: list[str] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    lines: list[BlockLine] = field(default_factory=list)
    all_examples: list[OutlineExamples] = field(default_factory=list)
    comment: Comment | None = None

    def add_step(self, step: Step) -> Outline:
        self.steps.append(step)
        self.lines.append(step)
        return self

    def add_blank_line(self, line: BlankLine) -> Outline:
        self.lines.append(line)
        return self

    def add_examples(self, examples: OutlineExamples) -> Outline:
        self.all_examples.append(examples)
        return self

    @property
    def examples(self) -> OutlineExamples | None:
        """Single view over every Examples section: first title, rows concatenated."""
        if not self.all_examples:
            return None
        if len(self.all_examples) == 1:
            return self.all_examples[0]

        tables = [examples.table for examples in self.all_examples if examples.table is not None]
        merged = None
        if tables:
            merged = Table()
            for table in tables:
                merged.rows.extend(list(row) for row in table.rows)
        return OutlineExamples(title=self.all_examples[0].title, table=merged)


type Block = Background | Scenario | Outline
type ScenarioBlock = Scenario | Outline


@dataclass(slots=True)
class Feature:
    node_type: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.FEATURE
    keyword: ClassVar[str] = "Feature"

    title: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
    background: Background | None = None
    scenarios: list[ScenarioBlock] = field(default_factory=list)
    comment: Comment | None = None

    def set_background(self, background: Background | None) -> Feature:
        self.background = background
        return self

    def add_scenario(self, scenario: ScenarioBlock) -> Feature:
        self.scenarios.append(scenario)
        return self

    @property
    def blocks(self) -> list[Block]:
        """Background (when present) followed by the scenarios, in source order."""
        blocks: list[Block] = []
        if self.background is not None:
            blocks.append(self.background)
        blocks.extend(self.scenarios)
        return blocks


@dataclass(frozen=True, slots=True)
class BlockView:
    """Read-only accessor over any block variant."""

    block: Block

    @property
    def kind(self) -> GherkinSyntaxKind:
        return self.block.node_type

    @property
    def keyword(self) -> str:
        return self.block.keyword

    @property
    def title(self) -> str:
        return self.block.title

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self.block.tags)

    @property
    def steps(self) -> tuple[Step, ...]:
        return tuple(self.block.steps)

    @property
    def is_outline(self) -> bool:
        return isinstance(self.block, Outline)

    @property
    def examples(self) -> OutlineExamples | None:
        if isinstance(self.block, Outline):
            return self.block.examples
        return None
