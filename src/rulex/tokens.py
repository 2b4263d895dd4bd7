"""Token definition for the rulex lexer.

The lexer produces a sequence of Token objects labelled with the name of
the rule that matched them.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from typing import Any

from rulex.location import Position


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        name: Name of the rule that matched
        content: The callback's return value, or the matched text when the
            rule has no callback
        position: Line and column where the match started

    """

    name: str
    content: Any
    position: Position

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.content
        if isinstance(val, str) and len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.name}, {val!r}, {self.position})"

    @property
    def line(self) -> int:
        """Line number (convenience accessor)."""
        return self.position.line

    @property
    def column(self) -> int:
        """Column number (convenience accessor)."""
        return self.position.column
