import io
import textwrap

import pytest

from gherkinpy.diagnostics import ParseError
from gherkinpy.dom import DocString, Feature, Outline, Scenario, Step, Table, parse_feature
from gherkinpy.format import AnsiStyle, GherkinPrettyFormatter, is_numeric_cell
from gherkinpy.syntax import StepKeyword
from tests._debug import debug_dump_formatted
from tests._shared_cases import (
    CALCULATOR,
    CALCULATOR_CRLF,
    CALCULATOR_UNFORMATTED,
    COMMENTED,
    MULTIPLE_EXAMPLES,
    SHARED_CASES,
    STEP_TAGS,
    FeatureCase,
    case_id,
)

CALCULATOR_CENTERED = textwrap.dedent(
    '''
    @dead @simple
    Feature: Dead Simple Calculator
      Bla Bla
      Bla

      Background:
        Given a Simple Calculator

      @wip
      Scenario: Adding 2 numbers
         When I press the key "2"
          And I press the key "+"
          And I press the key "2"
          And I press the key "="
         Then the result should be 4

      @wip @expensive
      Scenario Outline: Simple Math
         When I press the key "<left>"
          And I press the key "<operator>"
          And I press the key "<right>"
          And I press the key "="
         Then the result should be "<result>"

        Examples:
          | left | operator | right | result |
          |    2 | +        |     2 |      4 |
          |    3 | +        |     4 |      7 |

      Scenario: Adding 3 numbers
         When I press the following keys:
          """
            2
          + 2
          + 5
            =
          """
         Then the result should be 9

      Scenario: Follow user actions
         When I do the following user actions:
          | action   | key |
          | key down |   2 |
          | key up   |   2 |
          | key down | +   |
          | key up   | +   |
          | key down |   4 |
          | key up   |   4 |
          And I press the key "="
         Then the result should be 6

    '''
).lstrip()

CALCULATOR_HEADLINES = textwrap.dedent(
    """
    @dead @simple
    Feature: Dead Simple Calculator
      Bla Bla
      Bla

      @wip
      Scenario: Adding 2 numbers

      @wip @expensive
      Scenario Outline: Simple Math

      Scenario: Adding 3 numbers

      Scenario: Follow user actions

    """
).lstrip()


def _format(name: str, source: str, formatter: GherkinPrettyFormatter | None = None) -> str:
    formatted = (formatter or GherkinPrettyFormatter()).format(parse_feature(source))
    debug_dump_formatted(name, formatted)
    return formatted


def test_format_unformatted_calculator() -> None:
    assert _format("unformatted_calculator", CALCULATOR_UNFORMATTED) == CALCULATOR


def test_format_crlf_input_writes_lf() -> None:
    assert _format("crlf_calculator", CALCULATOR_CRLF) == CALCULATOR


def test_format_centered_steps() -> None:
    formatter = GherkinPrettyFormatter(center_steps=True)
    assert _format("centered_calculator", CALCULATOR_UNFORMATTED, formatter) == CALCULATOR_CENTERED


def test_format_headlines_only() -> None:
    formatter = GherkinPrettyFormatter(skip_steps=True)
    assert _format("headlines_calculator", CALCULATOR, formatter) == CALCULATOR_HEADLINES


def test_format_none_is_empty() -> None:
    assert GherkinPrettyFormatter().format(None) == ""


def test_format_step_with_table() -> None:
    step = Step(keyword=StepKeyword.GIVEN, text="the following users:").set_table(
        Table.from_rows(
            [
                ["username", "email"],
                ["Foobar", "foo@bar.org"],
                ["JohnDoe", "naked-john74@hotmail.com"],
            ]
        )
    )
    assert GherkinPrettyFormatter().format_step(step) == (
        "    Given the following users:\n"
        "      | username | email                    |\n"
        "      | Foobar   | foo@bar.org              |\n"
        "      | JohnDoe  | naked-john74@hotmail.com |\n"
    )


def test_format_step_with_doc_string() -> None:
    doc_string = DocString().add_line("Jenny [follows] Mary, David").add_line("Bill [knows] Mary, Jenny, David")
    step = Step(keyword=StepKeyword.GIVEN, text="the following user relations:").set_doc_string(doc_string)
    assert GherkinPrettyFormatter().format_step(step) == (
        "    Given the following user relations:\n"
        '      """\n'
        "      Jenny [follows] Mary, David\n"
        "      Bill [knows] Mary, Jenny, David\n"
        '      """\n'
    )


def test_format_centered_step_keywords() -> None:
    formatter = GherkinPrettyFormatter(center_steps=True)
    steps = [
        Step(keyword=StepKeyword.GIVEN, text="I have 2 banannas"),
        Step(keyword=StepKeyword.WHEN, text="I eat 1 bananna"),
        Step(keyword=StepKeyword.AND, text="I throw 1 bananna away"),
        Step(keyword=StepKeyword.THEN, text="I should still have 2 banannas"),
    ]
    out = io.StringIO()
    for step in steps:
        out.write(formatter.format_step(step))
    assert out.getvalue() == (
        "    Given I have 2 banannas\n"
        "     When I eat 1 bananna\n"
        "      And I throw 1 bananna away\n"
        "     Then I should still have 2 banannas\n"
    )


def test_format_reserved_or_keyword_does_not_parse_back() -> None:
    feature = Feature(title="F").add_scenario(
        Scenario(title="S").add_step(Step(keyword=StepKeyword.OR, text="x"))
    )
    formatted = GherkinPrettyFormatter().format(feature)
    assert "    Or x\n" in formatted
    try:
        parse_feature(formatted)
    except ParseError as exc:
        assert exc.line == 4
    else:
        raise AssertionError("Expected ParseError for a step using Or")


def test_format_table_alignment() -> None:
    table = Table.from_rows([["a", "op", "b", "r"], ["2", "+", "12", "4"], ["3", "-", "4", "-1.5"]])
    assert GherkinPrettyFormatter().format_table(table) == (
        "      | a | op | b  | r    |\n"
        "      | 2 | +  | 12 |    4 |\n"
        "      | 3 | -  |  4 | -1.5 |\n"
    )


def test_format_table_counts_characters_not_bytes() -> None:
    table = Table.from_rows([["name"], ["Zoë"], ["Émilie"]])
    assert GherkinPrettyFormatter().format_table(table) == (
        "      | name   |\n"
        "      | Zoë    |\n"
        "      | Émilie |\n"
    )


@pytest.mark.parametrize(
    ("cell", "expected"),
    [("4", True), ("-1.5", True), ("1e3", True), ("", False), ("abc", False), ("1_000", False), ("+", False)],
)
def test_is_numeric_cell(cell: str, expected: bool) -> None:
    assert is_numeric_cell(cell) is expected


def test_format_empty_titles() -> None:
    feature = Feature(title="").add_scenario(Scenario().add_step(Step(keyword=StepKeyword.GIVEN, text="x")))
    assert GherkinPrettyFormatter().format(feature) == "Feature:\n\n  Scenario:\n    Given x\n\n"


def test_format_multiple_examples_sections() -> None:
    assert _format("multiple_examples", MULTIPLE_EXAMPLES) == textwrap.dedent(
        """
        Feature: F

          Scenario Outline: O
            Given <a>

            Examples: first
              | a |
              | 1 |

            Examples: second
              | a |
              | 2 |

        """
    ).lstrip()


def test_format_step_tags() -> None:
    assert _format("step_tags", STEP_TAGS) == (
        "Feature: Tagged steps\n\n  Scenario: S\n    @slow\n    Given a\n    When b\n\n"
    )


def test_format_aligns_comments() -> None:
    expected = (
        "@tagged\n"
        + 'Feature: Hello "#World"'.ljust(45)
        + "# header comment\n"
        + "\n"
        + "  Scenario: S".ljust(45)
        + "# scenario comment\n"
        + "    # standalone\n"
        + "    Given a".ljust(45)
        + "# step comment\n"
        + "      | a | b |".ljust(45)
        + "# row comment\n"
        + "\n"
    )
    assert _format("aligned_comments", COMMENTED) == expected


def test_format_comment_column_grows_past_minimum() -> None:
    formatter = GherkinPrettyFormatter(comment_min_indent=10)
    formatted = _format("comment_column", COMMENTED, formatter)
    lines = formatted.splitlines()
    assert lines[1] == 'Feature: Hello "#World" # header comment'
    assert lines[3] == "  Scenario: S".ljust(24) + "# scenario comment"


def test_format_unaligned_comments() -> None:
    formatter = GherkinPrettyFormatter(align_comments=False)
    lines = _format("unaligned_comments", COMMENTED, formatter).splitlines()
    assert lines[1] == 'Feature: Hello "#World" # header comment'
    assert lines[5] == "    Given a # step comment"


def test_format_ansi_colors() -> None:
    formatter = GherkinPrettyFormatter(ansi_colors=True)
    step = Step(keyword=StepKeyword.GIVEN, text="x").set_table(Table.from_rows([["a"]]))
    wood = f"\x1b[{AnsiStyle.BOLD_YELLOW}m|\x1b[m"
    assert formatter.format_step(step) == (
        "    \x1b[32;1mGiven\x1b[m \x1b[32mx\x1b[m\n"
        f"      {wood}\x1b[33m a \x1b[m{wood}\n"
    )

    feature = parse_feature("@t\nFeature: F # note\n")
    assert formatter.format(feature) == (
        "\x1b[36m@t\x1b[m\n"
        + "\x1b[1mFeature\x1b[m: F"
        + " " * (45 - len("Feature: F"))
        + "\x1b[35m# note\x1b[m\n"
        + "\n"
    )


def test_format_scenario_and_doc_string_helpers() -> None:
    feature = parse_feature(CALCULATOR)
    assert feature is not None
    formatter = GherkinPrettyFormatter()
    assert formatter.format_scenario(feature.scenarios[0]).startswith("  @wip\n  Scenario: Adding 2 numbers\n")

    doc_string = feature.scenarios[2].steps[0].doc_string
    assert doc_string is not None
    assert formatter.format_doc_string(doc_string).splitlines()[1] == "        2"


def test_write_to_stream() -> None:
    out = io.StringIO()
    GherkinPrettyFormatter().write(parse_feature("Feature: Hello World"), out)
    assert out.getvalue() == "Feature: Hello World\n\n"


@pytest.mark.parametrize("case", SHARED_CASES, ids=case_id)
def test_format_is_idempotent(case: FeatureCase) -> None:
    once = _format(case.name, case.source)
    assert _format(f"{case.name}_again", once) == once


def _argument_shape(step: Step) -> tuple[str, list[str] | list[list[str]]] | None:
    if step.doc_string is not None:
        return ("doc_string", step.doc_string.lines)
    if step.table is not None:
        return ("table", step.table.rows)
    return None


@pytest.mark.parametrize("case", SHARED_CASES, ids=case_id)
def test_format_round_trips_the_tree(case: FeatureCase) -> None:
    original = parse_feature(case.source)
    reparsed = parse_feature(_format(case.name, case.source))
    assert original is not None
    assert reparsed is not None

    assert reparsed.title == original.title
    assert reparsed.description == original.description
    assert reparsed.tags == original.tags
    assert len(reparsed.blocks) == len(original.blocks)
    for before, after in zip(original.blocks, reparsed.blocks):
        assert type(after) is type(before)
        assert (after.title, after.tags) == (before.title, before.tags)
        assert [(s.keyword, s.text, s.tags, _argument_shape(s)) for s in after.steps] == [
            (s.keyword, s.text, s.tags, _argument_shape(s)) for s in before.steps
        ]
        if isinstance(before, Outline) and isinstance(after, Outline):
            assert [(e.title, e.table.rows if e.table else None) for e in after.all_examples] == [
                (e.title, e.table.rows if e.table else None) for e in before.all_examples
            ]
