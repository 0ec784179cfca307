"""Run every check over many files, one sink per file."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path
from types import MappingProxyType

from tqdm import tqdm

from synlint.diagnostics import Diagnostic
from synlint.options import CheckerOptions
from synlint.pipeline.results import BatchScanResult
from synlint.pipeline.session import CheckSession, Command

logger = logging.getLogger(__name__)

BATCH_COMMANDS: tuple[Command, ...] = (
    Command.CHECK_BLOCKS,
    Command.CHECK_SYNTAX,
    Command.CHECK_EXPRESSIONS,
)


def scan_paths(
    paths: Iterable[str | Path],
    *,
    options: CheckerOptions | None = None,
    commands: tuple[Command, ...] = BATCH_COMMANDS,
    show_progress: bool = False,
) -> BatchScanResult:
    """Check each file independently and collect its diagnostics."""
    resolved_paths = [Path(path) for path in paths]
    iterator = (
        tqdm(resolved_paths, desc="scan", unit="file")
        if show_progress
        else resolved_paths
    )

    files: dict[Path, tuple[Diagnostic, ...]] = {}
    for path in iterator:
        session = CheckSession(options=options)
        for command in commands:
            result = session.run(command, path)
            # An unreadable file is reported once, not once per command.
            if not result.loaded:
                break
        files[path] = session.diagnostics()

    logger.debug("scanned %d file(s)", len(files))
    return BatchScanResult(files=MappingProxyType(files))


def collect_source_files(root: str | Path, patterns: tuple[str, ...] = ("*.c", "*.h")) -> list[Path]:
    base = Path(root)
    found = {path for pattern in patterns for path in base.rglob(pattern) if path.is_file()}
    return sorted(found)
