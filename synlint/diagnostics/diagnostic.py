"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Final

from synlint.diagnostics.codes import DiagnosticSpec

MESSAGE_CODE: Final[str] = "MESSAGE"
"""Code assigned to diagnostics created from free text."""


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One recorded problem description. Carries no severity and no position."""

    code: str
    message: str
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, message: str | None = None) -> "Diagnostic":
        """Build a diagnostic from a catalogue entry, optionally overriding its text."""
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else message,
            hint=spec.hint,
            category=spec.category,
        )

    @staticmethod
    def from_message(message: str) -> "Diagnostic":
        return Diagnostic(code=MESSAGE_CODE, message=message)

    def __str__(self) -> str:
        return self.message
