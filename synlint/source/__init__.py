"""Source file loading."""

from synlint.source.load import load_source, read_source

__all__ = ["load_source", "read_source"]
