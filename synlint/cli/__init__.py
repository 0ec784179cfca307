"""Command-line surface."""

from synlint.cli.menu import MenuLoop, build_arg_parser, main, parse_choice

__all__ = ["MenuLoop", "build_arg_parser", "main", "parse_choice"]
