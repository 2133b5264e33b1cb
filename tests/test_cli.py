import io
import sys
from pathlib import Path

import pytest

from gherkinpy.cli import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, main
from tests._shared_cases import CALCULATOR, CALCULATOR_UNFORMATTED


class _TtyInput(io.StringIO):
    def isatty(self) -> bool:
        return True


def _write_feature(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "calculator.feature"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_formats_input_file_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_feature(tmp_path, CALCULATOR_UNFORMATTED)
    assert main(["-in", str(path)]) == EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == CALCULATOR
    assert captured.err == ""


def test_cli_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("Feature: Hello World"))
    assert main([]) == EXIT_OK
    assert capsys.readouterr().out == "Feature: Hello World\n\n"


def test_cli_writes_output_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write_feature(tmp_path, CALCULATOR_UNFORMATTED)
    target = tmp_path / "out.feature"
    assert main(["-in", str(source), "-out", str(target)]) == EXIT_OK
    assert target.read_text(encoding="utf-8") == CALCULATOR
    assert capsys.readouterr().out == ""


def test_cli_missing_input_is_a_usage_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "stdin", _TtyInput(""))
    assert main([]) == EXIT_USAGE
    err = capsys.readouterr().err
    assert "Error: Missing input (stdin OR -in flag)" in err
    assert "Use -h for help." in err


def test_cli_unreadable_input_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-in", str(tmp_path / "missing.feature")]) == EXIT_FAILURE
    assert capsys.readouterr().err.startswith("Error: ")


def test_cli_undecodable_input_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "latin1.feature"
    path.write_bytes(b"Feature: caf\xe9\n")
    assert main(["-in", str(path)]) == EXIT_FAILURE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")
    assert "utf-8" in captured.err


def test_cli_parse_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_feature(tmp_path, "Scenario:\n    Hurtz")
    assert main(["-in", str(path)]) == EXIT_FAILURE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Parsing failed. invalid gherkin" in captured.err
    assert "use -v to increase verbosity" in captured.err


def test_cli_verbose_parse_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_feature(tmp_path, "Scenario:\n    Hurtz")
    assert main(["-v", "-in", str(path)]) == EXIT_FAILURE
    err = capsys.readouterr().err
    assert "Error: Parsing failed. invalid gherkin" in err
    assert "(line 1 column 1)" in err
    assert "ERROR PARSER_UNEXPECTED_INPUT at 1:1" in err


def test_cli_center_steps(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_feature(tmp_path, CALCULATOR)
    assert main(["-centersteps", "-in", str(path)]) == EXIT_OK
    assert "     When I press the key \"2\"\n      And I press" in capsys.readouterr().out


def test_cli_explicit_false_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_feature(tmp_path, CALCULATOR)
    assert main(["-nosteps=false", "-in", str(path)]) == EXIT_OK
    assert capsys.readouterr().out == CALCULATOR


def test_cli_headlines_only(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_feature(tmp_path, CALCULATOR)
    assert main(["-nosteps", "-in", str(path)]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Scenario: Adding 2 numbers" in out
    assert "Given" not in out
    assert "Background" not in out


def test_cli_color_flags(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_feature(tmp_path, CALCULATOR)
    assert main(["-color", "-in", str(path)]) == EXIT_OK
    assert "\x1b[" in capsys.readouterr().out

    assert main(["-nocolor", "-in", str(path)]) == EXIT_OK
    assert "\x1b[" not in capsys.readouterr().out


def test_cli_color_flags_are_exclusive(capsys: pytest.CaptureFixture[str]) -> None:
    try:
        main(["-color", "-nocolor"])
    except SystemExit as exc:
        assert exc.code == EXIT_USAGE
    else:
        raise AssertionError("Expected argparse to reject -color with -nocolor")
    assert "not allowed with argument" in capsys.readouterr().err
