"""Text checks that report into a `DiagnosticSink`."""

from synlint.checks.balance import CLOSERS, OPENERS, PARTNERS, check_blocks, unclosed_openers
from synlint.checks.presence import (
    check_expressions,
    check_required_markers,
    check_syntax,
    is_reserved_word,
)

__all__ = [
    "CLOSERS",
    "OPENERS",
    "PARTNERS",
    "check_blocks",
    "check_expressions",
    "check_required_markers",
    "check_syntax",
    "is_reserved_word",
    "unclosed_openers",
]
