"""Append-only diagnostics store shared by one checking session."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from synlint.diagnostics.diagnostic import Diagnostic


class DiagnosticSink:
    """Accumulates diagnostics across check calls.

    Order is insertion order, oldest first. Nothing is deduplicated or
    validated, and entries only go away through `clear()`.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def add(self, message: str | Diagnostic) -> Diagnostic:
        """Append one diagnostic. Plain strings are wrapped as `MESSAGE` diagnostics."""
        diagnostic = message if isinstance(message, Diagnostic) else Diagnostic.from_message(message)
        self._diagnostics.append(diagnostic)
        return diagnostic

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        for diagnostic in diagnostics:
            self.add(diagnostic)

    def list(self) -> tuple[Diagnostic, ...]:
        """Snapshot of the current diagnostics. Does not mutate the sink."""
        return tuple(self._diagnostics)

    def messages(self) -> tuple[str, ...]:
        return tuple(d.message for d in self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._diagnostics))

    def __bool__(self) -> bool:
        return bool(self._diagnostics)

    def __repr__(self) -> str:
        return f"DiagnosticSink({len(self._diagnostics)} diagnostics)"
