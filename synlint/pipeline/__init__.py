"""Session and batch entrypoints over the checks."""

from synlint.pipeline.batch import BATCH_COMMANDS, collect_source_files, scan_paths
from synlint.pipeline.results import BatchScanResult, CheckRunResult
from synlint.pipeline.session import CheckSession, Command

__all__ = [
    "BATCH_COMMANDS",
    "BatchScanResult",
    "CheckRunResult",
    "CheckSession",
    "Command",
    "collect_source_files",
    "scan_paths",
]
