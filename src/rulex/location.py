"""Source position tracking for tokens and diagnostics.

Provides the Position dataclass snapshotted onto every token.

Thread Safety:
Position is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Line and column of a token's first character.

    Both are 1-indexed. Columns count characters of the scanned text, and
    an HTML line break resets the column to 1.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)

    Examples:
        >>> Position(line=2, column=7)
        Position(line=2, column=7)
        >>> str(Position(2, 7))
        '2:7'

    """

    line: int
    column: int

    def __str__(self) -> str:
        """Format as ``line:column`` for messages."""
        return f"{self.line}:{self.column}"
