#!/usr/bin/env python3
"""Run all synlint checks over every C source under a directory."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from synlint.diagnostics import format_diagnostics
from synlint.options import CheckerOptions, PairingMode
from synlint.pipeline import collect_source_files, scan_paths

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Scan a source tree with synlint")
    parser.add_argument("root", type=Path, help="Directory to scan recursively")
    parser.add_argument(
        "--pattern",
        action="append",
        default=None,
        help="Glob pattern to include (repeatable, default: *.c and *.h)",
    )
    parser.add_argument("--strict", action="store_true", help="Use strict delimiter pairing")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )
    args = parser.parse_args()

    patterns = tuple(args.pattern) if args.pattern else ("*.c", "*.h")
    files = collect_source_files(args.root, patterns)
    if not files:
        logger.info("No matching files under %s", args.root)
        return 0

    mode = PairingMode.STRICT if args.strict else PairingMode.PERMISSIVE
    result = scan_paths(files, options=CheckerOptions(pairing=mode), show_progress=not args.no_progress)

    for path, diagnostics in result.files.items():
        if not diagnostics:
            continue
        print(f"{path}:")
        print(format_diagnostics(diagnostics, with_codes=True))
    logger.info(
        "%d file(s), %d clean, %d diagnostic(s)",
        len(result.files),
        len(result.clean_files),
        result.total_diagnostics,
    )
    return 1 if result.total_diagnostics else 0


if __name__ == "__main__":
    raise SystemExit(main())
