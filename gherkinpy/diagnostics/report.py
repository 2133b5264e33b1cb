"""Diagnostics helpers."""

from __future__ import annotations

from gherkinpy.diagnostics.diagnostic import Diagnostic


def render_diagnostic(diagnostic: Diagnostic, *, line: int, column: int) -> str:
    text = f"{diagnostic.severity.upper()} {diagnostic.code} at {line}:{column}: {diagnostic.message}"
    if diagnostic.hint:
        text += f" ({diagnostic.hint})"
    return text
