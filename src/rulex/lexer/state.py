"""Per-scan state and scan results.

ScanState is the mutable line/column context threaded through one scan and
handed to every callback. A callback that moves the position itself (as the
HTML_BREAK rule does) sets ``updated`` so the lexer leaves the position alone
for that match.

Thread Safety:
ScanState is created fresh for every scan and never shared. SkippedText and
ScanResult are frozen.

"""

from __future__ import annotations

from dataclasses import dataclass

from rulex.location import Position
from rulex.tokens import Token


@dataclass(slots=True)
class ScanState:
    """Mutable position of the scanner.

    Attributes:
        line: Current line (1-indexed)
        column: Current column (1-indexed)
        updated: Set by a callback that adjusted line/column itself

    """

    line: int = 1
    column: int = 1
    updated: bool = False

    def snapshot(self) -> Position:
        """Immutable copy of the current position."""
        return Position(self.line, self.column)


@dataclass(frozen=True, slots=True)
class SkippedText:
    """Input that no rule matched.

    Attributes:
        line: Line where the skipped span starts
        column: Column where the skipped span starts
        text: The skipped characters

    """

    line: int
    column: int
    text: str

    @property
    def position(self) -> Position:
        return Position(self.line, self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: skipped unexpected characters {self.text!r}"


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tokens and skipped spans from one scan.

    Attributes:
        tokens: Emitted tokens in source order
        skipped: Spans of input no rule matched, in source order

    """

    tokens: tuple[Token, ...]
    skipped: tuple[SkippedText, ...] = ()

    @property
    def ok(self) -> bool:
        """True when every character was matched by some rule."""
        return not self.skipped
