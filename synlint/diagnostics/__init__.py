"""Diagnostics."""

from synlint.diagnostics.codes import (
    BLOCK_MISMATCHED_DELIMITER,
    BLOCK_UNBALANCED,
    EXPRESSION_MISSING_PRINTF,
    EXPRESSION_MISSING_SCANF,
    SOURCE_UNAVAILABLE,
    SYNTAX_MISSING_INCLUDE,
    SYNTAX_MISSING_MAIN,
    DiagnosticSpec,
)
from synlint.diagnostics.diagnostic import MESSAGE_CODE, Diagnostic
from synlint.diagnostics.report import collect_diagnostics, format_diagnostics, has_diagnostics
from synlint.diagnostics.sink import DiagnosticSink

__all__ = [
    "BLOCK_MISMATCHED_DELIMITER",
    "BLOCK_UNBALANCED",
    "EXPRESSION_MISSING_PRINTF",
    "EXPRESSION_MISSING_SCANF",
    "MESSAGE_CODE",
    "SOURCE_UNAVAILABLE",
    "SYNTAX_MISSING_INCLUDE",
    "SYNTAX_MISSING_MAIN",
    "Diagnostic",
    "DiagnosticSink",
    "DiagnosticSpec",
    "collect_diagnostics",
    "format_diagnostics",
    "has_diagnostics",
]
