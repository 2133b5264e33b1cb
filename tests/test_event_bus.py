from gherkinpy.diagnostics import ParseError
from gherkinpy.parser import (
    Event,
    EventBus,
    EventProcessorFn,
    FeatureEndEvent,
    FeatureEvent,
    GherkinParser,
    ScenarioEvent,
    dispatch_events,
)


class _Recorder:
    def __init__(self, name: str, log: list[tuple[str, Event]]) -> None:
        self.name = name
        self.log = log

    def process_event(self, event: Event) -> None:
        self.log.append((self.name, event))


def test_bus_dispatches_in_registration_order() -> None:
    log: list[tuple[str, Event]] = []
    bus = EventBus()
    bus.register(_Recorder("first", log))
    bus.register(_Recorder("second", log))

    feature = FeatureEvent(title="F", description="")
    end = FeatureEndEvent()
    dispatch_events(bus, [feature, end])

    assert log == [("first", feature), ("second", feature), ("first", end), ("second", end)]


def test_bus_wraps_plain_callables() -> None:
    seen: list[Event] = []
    bus = EventBus()
    bus.register(seen.append)
    assert isinstance(bus.processors[0], EventProcessorFn)

    bus.emit(FeatureEndEvent())
    assert seen == [FeatureEndEvent()]


def test_bus_rejects_non_processors() -> None:
    bus = EventBus()
    try:
        bus.register(42)  # type: ignore[arg-type]
    except TypeError:
        pass
    else:
        raise AssertionError("Expected TypeError for a non-callable processor")


def test_parser_execute_replays_every_event_once() -> None:
    seen: list[Event] = []
    parser = GherkinParser("Feature: F\n  Scenario: S\n")
    parser.register(seen.append)

    assert parser.events is None
    parser.parse()
    assert seen == []

    parser.execute()
    assert seen == parser.events
    assert isinstance(seen[0], FeatureEvent)
    assert ScenarioEvent(title="S") in seen


def test_execute_before_parse_is_an_error() -> None:
    parser = GherkinParser("Feature: F")
    try:
        parser.execute()
    except RuntimeError:
        pass
    else:
        raise AssertionError("Expected RuntimeError when executing before parse")


def test_failed_parse_delivers_no_events() -> None:
    seen: list[Event] = []
    parser = GherkinParser("Feature: F\n  Scenario: S\n    Given\n")
    parser.register(seen.append)
    try:
        parser.parse()
    except ParseError:
        pass
    else:
        raise AssertionError("Expected ParseError")

    assert parser.events is None
    assert seen == []


def test_processor_exception_aborts_dispatch() -> None:
    seen: list[Event] = []

    def explode(event: Event) -> None:
        raise ValueError("boom")

    parser = GherkinParser("Feature: F\n")
    parser.register(explode)
    parser.register(seen.append)
    parser.parse()
    try:
        parser.execute()
    except ValueError:
        pass
    else:
        raise AssertionError("Expected the processor's exception to propagate")
    assert seen == []
