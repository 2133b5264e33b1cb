#!/usr/bin/env python
"""Print the parser event stream of a feature file, one event per line."""

import argparse
import sys
from pathlib import Path

from gherkinpy.diagnostics import ParseError, render_diagnostic
from gherkinpy.parser import Event, describe_event, is_begin, is_end, parse_events


def format_event(idx: int, event: Event, depth: int) -> str:
    return f"[{idx:03d}] {'  ' * depth}{describe_event(event)} range={event.range.as_tuple()}"


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path)
    parser.add_argument("-o", "--output", type=Path, help="write to this file instead of stdout")
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    try:
        events = parse_events(text)
    except ParseError as exc:
        print(render_diagnostic(exc.diagnostic, line=exc.line, column=exc.column), file=sys.stderr)
        print(exc, file=sys.stderr)
        return 1

    lines: list[str] = []
    depth = 0
    for idx, event in enumerate(events):
        if is_end(event):
            depth -= 1
        lines.append(format_event(idx, event, depth))
        if is_begin(event):
            depth += 1

    if args.output is None:
        print("\n".join(lines))
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Wrote {len(events)} events to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
