"""Small string helpers shared by the parser and the printer."""

from collections.abc import Iterable

WS = " \t\r\n"


def trim_ws(text: str) -> str:
    return text.strip(WS)


def trim_multiline(text: str) -> str:
    """Trim every line, collapse runs of empty lines into one, drop outer empty lines."""
    lines: list[str] = []
    for line in (trim_ws(raw) for raw in text.split("\n")):
        if line:
            lines.append(line)
        elif lines and lines[-1]:
            lines.append("")
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines)


def strip_indent(line: str, indent: int) -> str:
    """Drop at most ``indent`` leading whitespace characters."""
    index = 0
    while index < indent and index < len(line) and line[index] in " \t":
        index += 1
    return line[index:]


def format_tags(tags: Iterable[str]) -> str:
    return " ".join(f"@{tag}" for tag in tags)
