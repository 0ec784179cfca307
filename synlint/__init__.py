"""Heuristic syntax checks: delimiter balance and required markers."""

from synlint.checks import check_blocks, check_expressions, check_syntax
from synlint.diagnostics import Diagnostic, DiagnosticSink
from synlint.errors import SourceUnavailableError, SynlintError
from synlint.options import CheckerOptions, PairingMode
from synlint.pipeline import CheckSession, Command, scan_paths

__all__ = [
    "CheckSession",
    "CheckerOptions",
    "Command",
    "Diagnostic",
    "DiagnosticSink",
    "PairingMode",
    "SourceUnavailableError",
    "SynlintError",
    "check_blocks",
    "check_expressions",
    "check_syntax",
    "scan_paths",
]
