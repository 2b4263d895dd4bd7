"""Capturing-group accounting for rule patterns.

Counts the groups a pattern contributes to the composite pattern, so each
rule can be given its own span of group indices.
"""

from __future__ import annotations

import re

# Alternatives, in order of precedence:
#   1. an escaped character, so "\(" never reads as a group
#   2. a whole character class; "(" inside it is punctuation
#   3. a whole comment "(?#...)", which ends at the first ")"
#   4. a conditional's condition "(?(1)" or "(?(name)"
#   5. a named group "(?P<name>"
#   6. any other open paren not starting "(?" syntax
_CAPTURE_RE = re.compile(
    r"""
    \\.
    | \[\^?\]?(?:\\.|[^\]\\])*\]
    | \(\?\#[^)]*\)
    | \(\?\(\w+\)
    | \(\?P<(?P<name>\w+)>
    | (?P<plain>\((?!\?))
    """,
    re.VERBOSE | re.DOTALL,
)


def count_captures(pattern_text: str) -> int:
    """Count the capturing groups in a pattern.

    Non-capturing groups, lookarounds, inline flags, comments, conditional
    conditions and parentheses that are escaped or sit inside a character
    class are not counted.

    Args:
        pattern_text: Regular-expression source

    Returns:
        Number of capturing groups

    Examples:
        >>> count_captures("(aaa(bbb(ccc)))")
        3
        >>> count_captures("(?:aaa(?!bbb))")
        0
        >>> count_captures("[abc(def)]")
        0
        >>> count_captures(r"(aaa\\(bbb)")
        1
    """
    return sum(
        1 for m in _CAPTURE_RE.finditer(pattern_text) if m.group("name", "plain") != (None, None)
    )


def group_names(pattern_text: str) -> tuple[str, ...]:
    """Names of the ``(?P<name>...)`` groups a pattern defines, in order."""
    return tuple(
        m.group("name") for m in _CAPTURE_RE.finditer(pattern_text) if m.group("name")
    )
