"""Checking session that owns one diagnostics sink across commands."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
import logging
from pathlib import Path
from typing import TypeAlias

from synlint.checks import check_blocks, check_expressions, check_syntax
from synlint.diagnostics import Diagnostic, DiagnosticSink
from synlint.options import DEFAULT_OPTIONS, CheckerOptions
from synlint.pipeline.results import CheckRunResult
from synlint.source import load_source

logger = logging.getLogger(__name__)

TextCheck: TypeAlias = Callable[..., tuple[Diagnostic, ...]]


class Command(StrEnum):
    """Operations offered by the interactive menu, in menu order."""

    CHECK_BLOCKS = "check-blocks"
    CHECK_SYNTAX = "check-syntax"
    CHECK_EXPRESSIONS = "check-expressions"
    SHOW_DIAGNOSTICS = "show-diagnostics"
    EXIT = "exit"

    @property
    def needs_source(self) -> bool:
        return self in _CHECKS


_CHECKS: dict[Command, TextCheck] = {
    Command.CHECK_BLOCKS: check_blocks,
    Command.CHECK_SYNTAX: check_syntax,
    Command.CHECK_EXPRESSIONS: check_expressions,
}


class CheckSession:
    """Loads files and runs checks, accumulating everything in one sink.

    Results are never replaced: running a check again appends further
    diagnostics until `clear()` is called.
    """

    def __init__(
        self,
        options: CheckerOptions | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.options = options if options is not None else DEFAULT_OPTIONS
        self.sink = sink if sink is not None else DiagnosticSink()

    def check_blocks(self, path: str | Path) -> CheckRunResult:
        return self.run(Command.CHECK_BLOCKS, path)

    def check_syntax(self, path: str | Path) -> CheckRunResult:
        return self.run(Command.CHECK_SYNTAX, path)

    def check_expressions(self, path: str | Path) -> CheckRunResult:
        return self.run(Command.CHECK_EXPRESSIONS, path)

    def run(self, command: Command | str, path: str | Path) -> CheckRunResult:
        """Load `path` and run the check behind `command`."""
        resolved = Command(command)
        check = _CHECKS.get(resolved)
        if check is None:
            raise ValueError(f"Command `{resolved}` does not run a check")

        source_path = Path(path)
        before = len(self.sink)
        text = load_source(source_path, self.sink, options=self.options)
        if text is not None:
            check(text, self.sink, options=self.options)
        added = self.sink.list()[before:]
        logger.debug("%s on %s added %d diagnostic(s)", resolved, source_path, len(added))
        return CheckRunResult(
            command=resolved,
            source_path=source_path,
            loaded=text is not None,
            diagnostics=added,
        )

    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self.sink.list()

    def clear(self) -> None:
        self.sink.clear()
