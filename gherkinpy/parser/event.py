"""Parser events and the synchronous event bus."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar, Protocol

from gherkinpy.syntax import GherkinSyntaxKind, StepKeyword
from gherkinpy.text import TextRange

NO_RANGE = TextRange(0, 0)


@dataclass(frozen=True, slots=True)
class FeatureEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.FEATURE
    title: str
    description: str
    tags: tuple[str, ...] = ()
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class FeatureEndEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.FEATURE
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class BackgroundEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.BACKGROUND
    title: str
    tags: tuple[str, ...] = ()
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class BackgroundEndEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.BACKGROUND
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class ScenarioEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.SCENARIO
    title: str
    tags: tuple[str, ...] = ()
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class ScenarioEndEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.SCENARIO
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class OutlineEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.OUTLINE
    title: str
    tags: tuple[str, ...] = ()
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class OutlineEndEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.OUTLINE
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class OutlineExamplesEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.OUTLINE_EXAMPLES
    title: str = ""
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class OutlineExamplesEndEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.OUTLINE_EXAMPLES
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class StepEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.STEP
    keyword: StepKeyword
    text: str
    tags: tuple[str, ...] = ()
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class StepEndEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.STEP
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class DocStringEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.DOC_STRING
    indent: int
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class DocStringLineEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.DOC_STRING_LINE
    line: str
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class DocStringEndEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.DOC_STRING
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class TableEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.TABLE
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class TableRowEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.TABLE_ROW
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class TableCellEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.TABLE_CELL
    content: str
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class TableRowEndEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.TABLE_ROW
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class TableEndEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.TABLE
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class BlankLineEvent:
    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.BLANK_LINE
    range: TextRange = field(default=NO_RANGE, compare=False)


@dataclass(frozen=True, slots=True)
class CommentEvent:
    """Text after ``#``, verbatim (leading space included)."""

    kind: ClassVar[GherkinSyntaxKind] = GherkinSyntaxKind.COMMENT
    text: str
    range: TextRange = field(default=NO_RANGE, compare=False)


type BeginEvent = (
    FeatureEvent
    | BackgroundEvent
    | ScenarioEvent
    | OutlineEvent
    | OutlineExamplesEvent
    | StepEvent
    | DocStringEvent
    | TableEvent
    | TableRowEvent
)
type EndEvent = (
    FeatureEndEvent
    | BackgroundEndEvent
    | ScenarioEndEvent
    | OutlineEndEvent
    | OutlineExamplesEndEvent
    | StepEndEvent
    | DocStringEndEvent
    | TableRowEndEvent
    | TableEndEvent
)
type Event = BeginEvent | EndEvent | DocStringLineEvent | TableCellEvent | BlankLineEvent | CommentEvent

BEGIN_EVENTS: tuple[type, ...] = (
    FeatureEvent,
    BackgroundEvent,
    ScenarioEvent,
    OutlineEvent,
    OutlineExamplesEvent,
    StepEvent,
    DocStringEvent,
    TableEvent,
    TableRowEvent,
)
END_EVENTS: tuple[type, ...] = (
    FeatureEndEvent,
    BackgroundEndEvent,
    ScenarioEndEvent,
    OutlineEndEvent,
    OutlineExamplesEndEvent,
    StepEndEvent,
    DocStringEndEvent,
    TableRowEndEvent,
    TableEndEvent,
)


def is_begin(event: Event) -> bool:
    return isinstance(event, BEGIN_EVENTS)


def is_end(event: Event) -> bool:
    return isinstance(event, END_EVENTS)


def describe_event(event: Event) -> str:
    """One-line rendering used for debug logging and event dumps."""
    match event:
        case FeatureEvent(title=title, description=description, tags=tags):
            return f"BeginFeature: {title!r}: {description!r} tags:{list(tags)!r}"
        case BackgroundEvent(title=title, tags=tags):
            return f"BeginBackground: {title!r} tags:{list(tags)!r}"
        case ScenarioEvent(title=title, tags=tags):
            return f"BeginScenario: {title!r} tags:{list(tags)!r}"
        case OutlineEvent(title=title, tags=tags):
            return f"BeginOutline: {title!r} tags:{list(tags)!r}"
        case OutlineExamplesEvent(title=title):
            return f"BeginOutlineExamples: {title!r}"
        case StepEvent(keyword=keyword, text=text, tags=tags):
            return f"BeginStep: {keyword.value!r}: {text!r} tags:{list(tags)!r}"
        case DocStringEvent(indent=indent):
            return f"BeginPyString: indent={indent}"
        case DocStringLineEvent(line=line):
            return f"PyStringLine: {line!r}"
        case TableCellEvent(content=content):
            return f"TableCell: {content!r}"
        case CommentEvent(text=text):
            return f"Comment: {text!r}"
        case BlankLineEvent():
            return "BlankLine"
        case _:
            name = type(event).__name__.removesuffix("Event")
            if is_end(event):
                return f"End{name.removesuffix('End')}"
            return f"Begin{name}"


class EventProcessor(Protocol):
    def process_event(self, event: Event) -> None: ...


@dataclass(frozen=True, slots=True)
class EventProcessorFn:
    """Adapts a plain callable to the EventProcessor protocol."""

    fn: Callable[[Event], None]

    def process_event(self, event: Event) -> None:
        self.fn(event)


class EventBus:
    """Ordered, synchronous fan-out of events to registered processors."""

    def __init__(self) -> None:
        self._processors: list[EventProcessor] = []

    @property
    def processors(self) -> list[EventProcessor]:
        return self._processors

    def register(self, processor: EventProcessor | Callable[[Event], None]) -> None:
        if not hasattr(processor, "process_event"):
            if not callable(processor):
                raise TypeError(f"not an event processor: {processor!r}")
            processor = EventProcessorFn(processor)
        self._processors.append(processor)

    def emit(self, event: Event) -> None:
        for processor in self._processors:
            processor.process_event(event)


def dispatch_events(bus: EventBus, events: list[Event]) -> None:
    for event in events:
        bus.emit(event)
