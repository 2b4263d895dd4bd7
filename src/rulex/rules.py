"""Rule descriptions and their compiled form.

A rule pairs a name with a pattern, an optional callback that turns a match
into token content, and a discard flag. Callers describe rules with RuleSpec
(or a plain mapping with the same keys); the compiler turns each one into a
CompiledRule whose pattern has been normalized and renumbered for its place
inside the composite pattern.

Callback signature::

    def callback(captures: tuple[str | None, ...], state: ScanState) -> Any

``captures`` holds only the rule's own capturing groups. Returning None
suppresses the token.

Thread Safety:
RuleSpec and CompiledRule are frozen. Callbacks are caller code and may
mutate only the ScanState they are handed.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rulex.lexer.state import ScanState

Callback = Callable[[tuple["str | None", ...], "ScanState"], Any]


@dataclass(frozen=True, slots=True)
class RuleSpec:
    """A caller-supplied rule description.

    Attributes:
        name: Label given to tokens matched by this rule
        pattern: Compiled regex, or a literal string matched verbatim
        callback: Optional transform from captures to token content
        discard: Drop matches instead of emitting tokens

    Example:
        >>> RuleSpec("NUMBER", re.compile(r"(\\d+)"), lambda caps, st: int(caps[0]))

    """

    name: str
    pattern: str | re.Pattern[str]
    callback: Callback | None = None
    discard: bool = False


@dataclass(frozen=True, slots=True)
class CompiledRule:
    """A validated rule positioned inside the composite pattern.

    Attributes:
        name: Rule name
        pattern_text: Pattern source after escaping, entity substitution and
            backreference renumbering
        callback: Optional transform from captures to token content
        discard: Drop matches instead of emitting tokens
        num_captures: Capturing groups inside the rule (its wrapping group
            excluded), counted once during compilation
        group_index: Index of the rule's wrapping group in the composite

    """

    name: str
    pattern_text: str
    callback: Callback | None
    discard: bool
    num_captures: int
    group_index: int

    @property
    def group_span(self) -> range:
        """Composite group indices reserved for this rule's own captures."""
        return range(self.group_index + 1, self.group_index + 1 + self.num_captures)

    @property
    def wrapped(self) -> str:
        """Pattern text inside the rule's wrapping group."""
        return f"({self.pattern_text})"


def line_break(captures: tuple[str | None, ...], state: ScanState) -> None:
    """Callback that starts a new line: bumps the line, resets the column.

    Usable by any rule, e.g. ``RuleSpec("NEWLINE", "\\n", line_break, discard=True)``.
    """
    state.line += 1
    state.column = 1
    state.updated = True
    return None


# Always the first alternative of every composite pattern.
HTML_BREAK = CompiledRule(
    name="HTML_BREAK",
    pattern_text=r"<br\s*/?\s*>",
    callback=line_break,
    discard=True,
    num_captures=0,
    group_index=1,
)

# Convenience rule tables. "default" separates whitespace from everything else.
LANGUAGES: Mapping[str, Sequence[RuleSpec]] = {
    "default": (
        RuleSpec("WHITESPACE", re.compile(r"\s+"), discard=True),
        RuleSpec("WORD", re.compile(r"\w+|.")),
    ),
}


__all__ = [
    "HTML_BREAK",
    "LANGUAGES",
    "Callback",
    "CompiledRule",
    "RuleSpec",
    "line_break",
]
