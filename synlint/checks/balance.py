"""Stack-based delimiter balance check.

The scan is a single left-to-right pass over the text:

- `{`, `[`, `(`, `"` and `'` are openers and are always pushed. Quotes are
  not toggles, so a lone quote looks the same as an unterminated string and
  a quote inside a string literal still counts.
- `}`, `]` and `)` are closers. With an empty stack a closer is reported as
  an unbalanced block and the scan carries on. Otherwise the innermost opener
  is popped. In permissive mode the popped opener may be of any kind, so
  `(]` is accepted; strict mode reports a mismatch but still pops.
- Anything left open at the end yields a single unbalanced-block diagnostic,
  however many openers remain.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging
from types import MappingProxyType
from typing import Final, Mapping

from synlint.diagnostics import (
    BLOCK_MISMATCHED_DELIMITER,
    BLOCK_UNBALANCED,
    Diagnostic,
    DiagnosticSink,
)
from synlint.options import DEFAULT_OPTIONS, CheckerOptions, PairingMode

logger = logging.getLogger(__name__)

OPENERS: Final[frozenset[str]] = frozenset("{[(\"'")
CLOSERS: Final[frozenset[str]] = frozenset("}])")

PARTNERS: Final[Mapping[str, str]] = MappingProxyType({"}": "{", "]": "[", ")": "("})
"""Closer -> the opener it pairs with under strict pairing."""


def check_blocks(
    text: str,
    sink: DiagnosticSink,
    *,
    options: CheckerOptions | None = None,
) -> tuple[Diagnostic, ...]:
    """Check delimiter balance of `text`, appending findings to `sink`.

    Returns the diagnostics added by this call, in the order they were added.
    """
    resolved = options if options is not None else DEFAULT_OPTIONS
    strict = resolved.pairing == PairingMode.STRICT

    added: list[Diagnostic] = []
    stack: list[str] = []
    for char, opener in _scan(text, stack):
        if opener is None:
            added.append(sink.add(Diagnostic.from_spec(BLOCK_UNBALANCED)))
        elif strict and PARTNERS[char] != opener:
            added.append(
                sink.add(
                    Diagnostic.from_spec(
                        BLOCK_MISMATCHED_DELIMITER,
                        f"{BLOCK_MISMATCHED_DELIMITER.message} Found `{char}` closing `{opener}`.",
                    )
                )
            )

    if stack:
        logger.debug("%d delimiter(s) left open at end of input", len(stack))
        added.append(sink.add(Diagnostic.from_spec(BLOCK_UNBALANCED)))

    logger.debug(
        "block check scanned %d chars in %s mode: %d diagnostic(s)",
        len(text),
        resolved.pairing,
        len(added),
    )
    return tuple(added)


def unclosed_openers(text: str) -> tuple[str, ...]:
    """Openers still on the stack after a permissive scan, outermost first.

    Closers seen with an empty stack are skipped, as in `check_blocks`.
    """
    stack: list[str] = []
    for _ in _scan(text, stack):
        pass
    return tuple(stack)


def _scan(text: str, stack: list[str]) -> Iterator[tuple[str, str | None]]:
    """Push openers onto `stack` and yield `(closer, popped opener)` per closer.

    The opener is None when the closer met an empty stack. Whatever is left in
    `stack` afterwards was never closed.
    """
    for char in text:
        if char in OPENERS:
            stack.append(char)
        elif char in CLOSERS:
            yield char, (stack.pop() if stack else None)
