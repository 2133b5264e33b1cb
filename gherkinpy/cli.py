"""``gherkinfmt``: command-line formatter and pretty-printer for feature files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gherkinpy.diagnostics import ParseError, render_diagnostic
from gherkinpy.dom import GherkinDomParser
from gherkinpy.format import GherkinPrettyFormatter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

USAGE_EPILOG = """\
Examples:

  $ gherkinfmt -in path/to/some.feature

  $ cat path/to/some.feature | gherkinfmt -centersteps
"""


def _parse_bool(value: str) -> bool:
    match value.lower():
        case "1" | "t" | "true" | "yes":
            return True
        case "0" | "f" | "false" | "no":
            return False
        case _:
            raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gherkinfmt",
        description="Format and pretty-print Gherkin feature files.",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-centersteps",
        dest="center_steps",
        nargs="?",
        const=True,
        default=False,
        type=_parse_bool,
        metavar="BOOL",
        help="right-align step keywords in a nine-column field",
    )
    parser.add_argument(
        "-nosteps",
        dest="skip_steps",
        nargs="?",
        const=True,
        default=False,
        type=_parse_bool,
        metavar="BOOL",
        help="omit steps, just print scenario headlines",
    )
    colors = parser.add_mutually_exclusive_group()
    colors.add_argument("-color", dest="color", action="store_const", const=True, help="explicitly enable colors")
    colors.add_argument("-nocolor", dest="color", action="store_const", const=False, help="explicitly disable colors")
    parser.add_argument("-in", dest="input_path", type=Path, metavar="PATH", help="input file, defaults to stdin")
    parser.add_argument("-out", dest="output_path", type=Path, metavar="PATH", help="output file, defaults to stdout")
    parser.add_argument("-v", dest="verbose", action="store_true", help="more verbose error messages")
    return parser


def _usage_error(message: str) -> int:
    print(f"Error: {message}\n       Use -h for help.", file=sys.stderr)
    return EXIT_USAGE


def _read_input(input_path: Path | None) -> str | None:
    if input_path is not None:
        return input_path.read_text(encoding="utf-8")
    if sys.stdin is None or sys.stdin.isatty():
        return None
    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        content = _read_input(args.input_path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    if content is None:
        return _usage_error("Missing input (stdin OR -in flag)")

    colors = args.color
    if colors is None:
        colors = args.output_path is None and sys.stdout.isatty()

    formatter = GherkinPrettyFormatter(
        ansi_colors=colors,
        center_steps=args.center_steps,
        skip_steps=args.skip_steps,
    )

    try:
        feature = GherkinDomParser(content).parse_feature()
    except ParseError as exc:
        if args.verbose:
            print("Error: Parsing failed. invalid gherkin", file=sys.stderr)
            print(exc, file=sys.stderr)
            print(render_diagnostic(exc.diagnostic, line=exc.line, column=exc.column), file=sys.stderr)
        else:
            print(
                "Error: Parsing failed. invalid gherkin\n       Use -h for help or use -v to increase verbosity",
                file=sys.stderr,
            )
        return EXIT_FAILURE

    output = formatter.format(feature)
    logger.debug("formatted %d characters into %d", len(content), len(output))

    if args.output_path is None:
        sys.stdout.write(output)
        return EXIT_OK

    try:
        args.output_path.write_text(output, encoding="utf-8")
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
