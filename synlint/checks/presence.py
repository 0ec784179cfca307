"""Substring presence checks for required directives and calls."""

from __future__ import annotations

from collections.abc import Iterable

from synlint.diagnostics import Diagnostic, DiagnosticSink
from synlint.markers import RESERVED_WORDS, RequiredMarker
from synlint.options import DEFAULT_OPTIONS, CheckerOptions


def check_required_markers(
    text: str,
    markers: Iterable[RequiredMarker],
    sink: DiagnosticSink,
) -> tuple[Diagnostic, ...]:
    """Report one diagnostic per marker whose needle does not occur in `text`."""
    added: list[Diagnostic] = []
    for marker in markers:
        if marker.needle in text:
            continue
        added.append(sink.add(Diagnostic.from_spec(marker.spec)))
    return tuple(added)


def check_syntax(
    text: str,
    sink: DiagnosticSink,
    *,
    options: CheckerOptions | None = None,
) -> tuple[Diagnostic, ...]:
    """Require an include directive and a main function."""
    resolved = options if options is not None else DEFAULT_OPTIONS
    return check_required_markers(text, resolved.syntax_markers, sink)


def check_expressions(
    text: str,
    sink: DiagnosticSink,
    *,
    options: CheckerOptions | None = None,
) -> tuple[Diagnostic, ...]:
    """Require the `printf` and `scanf` calls."""
    resolved = options if options is not None else DEFAULT_OPTIONS
    return check_required_markers(text, resolved.expression_markers, sink)


def is_reserved_word(word: str) -> bool:
    """Lookup helper for callers; none of the checks consult it."""
    return word in RESERVED_WORDS
