"""Filesystem loader for source files."""

from __future__ import annotations

import logging
from pathlib import Path

from synlint.diagnostics import SOURCE_UNAVAILABLE, Diagnostic, DiagnosticSink
from synlint.errors import SourceUnavailableError
from synlint.options import DEFAULT_OPTIONS, CheckerOptions

logger = logging.getLogger(__name__)


def read_source(path: str | Path, *, encoding: str = DEFAULT_OPTIONS.encoding) -> str:
    """Read a whole file into one text buffer.

    Decoding is byte-per-character by default, so any readable file loads.
    """
    source_path = Path(path)
    try:
        data = source_path.read_bytes()
    except OSError as exc:
        raise SourceUnavailableError(source_path, exc.strerror or str(exc)) from exc
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise SourceUnavailableError(source_path, str(exc)) from exc


def load_source(
    path: str | Path,
    sink: DiagnosticSink,
    *,
    options: CheckerOptions | None = None,
) -> str | None:
    """Read `path`, or record `SOURCE_UNAVAILABLE` in `sink` and return None."""
    resolved = options if options is not None else DEFAULT_OPTIONS
    try:
        text = read_source(path, encoding=resolved.encoding)
    except SourceUnavailableError as exc:
        logger.warning("%s", exc)
        sink.add(Diagnostic.from_spec(SOURCE_UNAVAILABLE))
        return None
    logger.debug("loaded %s (%d chars)", path, len(text))
    return text
