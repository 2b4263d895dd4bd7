"""Backreference renumbering for composed patterns.

A rule written on its own refers to its groups as \\1, \\2, ... Once the
rule sits inside the composite pattern, behind the groups of every earlier
rule and inside its own wrapping group, those numbers must be shifted.

Python's ``re`` reads at most two digits as a group reference, so a shifted
reference past group 99 cannot be written and is rejected. Conditionals
``(?(N)yes|no)`` name their group with a full number and are shifted the
same way, without that limit.
"""

from __future__ import annotations

import re

from rulex.errors import PatternError

MAX_BACKREFERENCE = 99

# Classes, comments and non-digit escapes are copied verbatim. "\N" and the
# "(?(N)" condition of a conditional are the numeric group references.
_BACKREF_RE = re.compile(
    r"""
    \[\^?\]?(?:\\.|[^\]\\])*\]
    | \(\?\#[^)]*\)
    | \\(?P<backref>\d+)
    | \(\?\((?P<condition>\d+)\)
    | \\.
    """,
    re.VERBOSE | re.DOTALL,
)

_OCTAL_DIGITS = frozenset("01234567")


def _octal_escape(digits: str) -> str:
    # Out-of-range references are read as legacy octal escapes.
    if set(digits) <= _OCTAL_DIGITS:
        return re.escape(chr(int(digits, 8)))
    return re.escape(digits)


def renumber_backreferences(
    pattern_text: str,
    num_captures: int,
    offset: int,
    *,
    rule: str | None = None,
) -> str:
    """Shift a rule's numeric backreferences to composite group indices.

    Args:
        pattern_text: The rule's pattern source
        num_captures: Capturing groups the rule itself defines
        offset: Groups contributed by everything before this rule in the
            composite, wrapping groups included
        rule: Rule name, used in error messages

    Returns:
        Pattern source whose ``\\N`` references point at composite groups

    Raises:
        PatternError: If a shifted reference would exceed group 99

    Example:
        >>> renumber_backreferences(r"(a)\\1", 1, offset=1)
        '(a)\\\\3'
    """

    def replace(m: re.Match[str]) -> str:
        condition = m.group("condition")
        if condition is not None:
            group = int(condition)
            if not 0 < group <= num_captures:
                return m.group()
            return f"(?({group + offset + 1})"
        digits = m.group("backref")
        if digits is None:
            return m.group()
        backref = int(digits)
        if not 0 < backref <= num_captures:
            return _octal_escape(digits)
        # +1 for the rule's own wrapping group
        shifted = backref + offset + 1
        if shifted > MAX_BACKREFERENCE:
            msg = (
                f"backreference \\{backref} maps to group {shifted}, "
                f"beyond the {MAX_BACKREFERENCE} groups re can refer to; "
                "move the rule earlier or use a named group"
            )
            raise PatternError(rule, msg, pattern_text)
        return f"\\{shifted}"

    return _BACKREF_RE.sub(replace, pattern_text)
