"""Exception types for synlint."""

from __future__ import annotations

from pathlib import Path


class SynlintError(Exception):
    """Base class for errors raised outside of the diagnostics channel."""


class SourceUnavailableError(SynlintError):
    """Raised when a source file cannot be read into memory."""

    def __init__(self, path: str | Path, reason: str | None = None) -> None:
        message = f"Cannot open `{path}`"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = Path(path)
        self.reason = reason
