"""Interactive menu loop and console entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
import sys
from typing import TextIO

from synlint.diagnostics import Diagnostic
from synlint.options import CheckerOptions, PairingMode
from synlint.pipeline import CheckSession, Command

logger = logging.getLogger(__name__)

BANNER = "Welcome to synlint"

MENU_LABELS: dict[Command, str] = {
    Command.CHECK_BLOCKS: "Check blocks",
    Command.CHECK_SYNTAX: "Check syntax",
    Command.CHECK_EXPRESSIONS: "Check expressions",
    Command.SHOW_DIAGNOSTICS: "Show diagnostics",
    Command.EXIT: "Exit",
}


def parse_choice(raw: str) -> Command | None:
    """Map a menu number (1-5) or a command name to a `Command`."""
    choice = raw.strip().lower()
    commands = list(Command)
    if choice.isdecimal():
        index = int(choice) - 1
        return commands[index] if 0 <= index < len(commands) else None
    try:
        return Command(choice)
    except ValueError:
        return None


class MenuLoop:
    def __init__(
        self,
        session: CheckSession,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.session = session
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def run(self) -> int:
        self._write(BANNER)
        while True:
            self._write_menu()
            raw = self._read("Choose an option: ")
            if raw is None:
                self._write("Exiting...")
                return 0
            command = parse_choice(raw)
            if command is None:
                self._write("Invalid option!")
                continue
            if command == Command.EXIT:
                self._write("Exiting...")
                return 0
            if command == Command.SHOW_DIAGNOSTICS:
                self._write_diagnostics(self.session.diagnostics(), empty="No diagnostics.")
                continue

            path = self._read("Enter the name of the file to check:\n")
            if path is None:
                self._write("Exiting...")
                return 0
            if not path.strip():
                self._write("No file name given.")
                continue
            result = self.session.run(command, path.strip())
            self._write_diagnostics(result.diagnostics, empty="No problems found.")

    def _write_menu(self) -> None:
        self._write("\nMenu:")
        for number, command in enumerate(Command, start=1):
            self._write(f"{number}. {MENU_LABELS[command]}")

    def _write_diagnostics(self, diagnostics: Sequence[Diagnostic], *, empty: str) -> None:
        if not diagnostics:
            self._write(empty)
            return
        for diagnostic in diagnostics:
            self._write(f"Error: {diagnostic.message}")

    def _read(self, prompt: str) -> str | None:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="synlint",
        description="Heuristic syntax checks for C-like sources (delimiters and required markers)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require each closer to match the kind of the innermost opener",
    )
    parser.add_argument(
        "--encoding",
        default=CheckerOptions().encoding,
        help="Encoding used to read source files (default: latin-1)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    mode = PairingMode.STRICT if args.strict else PairingMode.PERMISSIVE
    try:
        options = CheckerOptions(pairing=mode, encoding=args.encoding)
    except ValueError as exc:
        parser.error(str(exc))
    logger.debug("starting session with %s", options)
    return MenuLoop(CheckSession(options=options), stdin=stdin, stdout=stdout).run()
