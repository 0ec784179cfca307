"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    category: str | None = None


BLOCK_UNBALANCED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BLOCK_UNBALANCED",
    message="Unbalanced block.",
    hint="Check that every `{`, `[`, `(` and quote has a closing counterpart.",
    category="block",
)

BLOCK_MISMATCHED_DELIMITER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BLOCK_MISMATCHED_DELIMITER",
    message="Closing delimiter does not match the innermost open delimiter.",
    hint="Close blocks in the reverse order they were opened.",
    category="block",
)

SYNTAX_MISSING_INCLUDE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MISSING_INCLUDE",
    message="Missing `#include` directive.",
    hint="Add an include line such as `#include <stdio.h>`.",
    category="syntax",
)

SYNTAX_MISSING_MAIN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MISSING_MAIN",
    message="Missing `main` function.",
    hint="Define the entry point as `int main(...)`.",
    category="syntax",
)

EXPRESSION_MISSING_PRINTF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EXPRESSION_MISSING_PRINTF",
    message="Missing `printf` call.",
    category="expression",
)

EXPRESSION_MISSING_SCANF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EXPRESSION_MISSING_SCANF",
    message="Missing `scanf` call.",
    category="expression",
)

SOURCE_UNAVAILABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SOURCE_UNAVAILABLE",
    message="Cannot open file.",
    hint="Check the file name and that it is readable.",
    category="source",
)
