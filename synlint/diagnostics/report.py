"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from synlint.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_diagnostics(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(True for _ in diagnostics)


def format_diagnostics(diagnostics: Iterable[Diagnostic], *, with_codes: bool = False) -> str:
    """Render diagnostics one per line, optionally prefixed with their code."""
    if with_codes:
        return "\n".join(f"[{d.code}] {d.message}" for d in diagnostics)
    return "\n".join(d.message for d in diagnostics)
