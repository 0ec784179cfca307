"""Checker modes and configuration options."""

import codecs
from dataclasses import dataclass
from enum import StrEnum

from synlint.markers import EXPRESSION_MARKERS, SYNTAX_MARKERS, RequiredMarker


class PairingMode(StrEnum):
    """How a closing delimiter is matched against the innermost opener."""

    PERMISSIVE = "permissive"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class CheckerOptions:
    """Settings shared by the source loader and every check."""

    pairing: PairingMode = PairingMode.PERMISSIVE
    encoding: str = "latin-1"
    syntax_markers: tuple[RequiredMarker, ...] = SYNTAX_MARKERS
    expression_markers: tuple[RequiredMarker, ...] = EXPRESSION_MARKERS

    def __post_init__(self) -> None:
        if not isinstance(self.pairing, PairingMode):
            raise ValueError(f"Unknown pairing mode `{self.pairing}`; expected permissive/strict.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding `{self.encoding}`.") from exc

    @staticmethod
    def for_mode(mode: PairingMode) -> "CheckerOptions":
        return CheckerOptions(pairing=mode)


DEFAULT_OPTIONS = CheckerOptions()
