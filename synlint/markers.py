"""Required-marker catalogue for presence checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from synlint.diagnostics.codes import (
    EXPRESSION_MISSING_PRINTF,
    EXPRESSION_MISSING_SCANF,
    SYNTAX_MISSING_INCLUDE,
    SYNTAX_MISSING_MAIN,
    DiagnosticSpec,
)


@dataclass(frozen=True, slots=True)
class RequiredMarker:
    """Literal substring that must occur in the source, and what to report when it does not."""

    needle: str
    spec: DiagnosticSpec

    def __post_init__(self) -> None:
        if not self.needle:
            raise ValueError("RequiredMarker needle cannot be empty")


SYNTAX_MARKERS: Final[tuple[RequiredMarker, ...]] = (
    RequiredMarker("#include", SYNTAX_MISSING_INCLUDE),
    RequiredMarker("int main", SYNTAX_MISSING_MAIN),
)

EXPRESSION_MARKERS: Final[tuple[RequiredMarker, ...]] = (
    RequiredMarker("printf", EXPRESSION_MISSING_PRINTF),
    RequiredMarker("scanf", EXPRESSION_MISSING_SCANF),
)

# Lookup table for `is_reserved_word`; no check reads it.
RESERVED_WORDS: Final[frozenset[str]] = frozenset(
    {
        "include",
        "main",
        "printf",
        "scanf",
        "if",
        "else",
        "for",
        "while",
        "switch",
        "case",
    }
)
