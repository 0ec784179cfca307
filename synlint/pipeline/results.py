"""Run result carriers for session and batch entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from synlint.diagnostics import Diagnostic

if TYPE_CHECKING:
    from synlint.pipeline.session import Command


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Outcome of one check command against one file."""

    command: Command
    source_path: Path
    loaded: bool
    diagnostics: tuple[Diagnostic, ...]


@dataclass(frozen=True, slots=True)
class BatchScanResult:
    """Diagnostics per file for a batch scan."""

    files: Mapping[Path, tuple[Diagnostic, ...]] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def total_diagnostics(self) -> int:
        return sum(len(diagnostics) for diagnostics in self.files.values())

    @property
    def clean_files(self) -> tuple[Path, ...]:
        return tuple(path for path, diagnostics in self.files.items() if not diagnostics)
