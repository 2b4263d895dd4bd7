"""Pattern normalization.

Turns a rule's pattern (a literal string or a compiled regex) into regex
source ready to be composed: literal strings are escaped so they match
verbatim, and ``&``, ``<``, ``>`` become HTML entities so rules match
HTML-escaped text. Group syntax that needs ``<`` itself (named groups and
lookbehinds) is left alone.
"""

from __future__ import annotations

import re

_ENTITIES = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}

_ENTITY_RE = re.compile(
    r"""
    (\\[^&<>])
    | (\(\?P<\w+>|\(\?<[=!])
    | \\?([&<>])
    """,
    re.VERBOSE | re.DOTALL,
)


def _entity_replace(m: re.Match[str]) -> str:
    char = m.group(3)
    if char is None:
        return m.group()
    return _ENTITIES[char]


def escape_entities(pattern_text: str) -> str:
    """Replace ``&``, ``<`` and ``>`` with their HTML entities.

    An escaped ``\\<`` is replaced as well, backslash included, since the
    entity text has no special meaning.

    Examples:
        >>> escape_entities("a<b")
        'a&lt;b'
        >>> escape_entities("(?P<tag>x)(?<=y)&")
        '(?P<tag>x)(?<=y)&amp;'
    """
    return _ENTITY_RE.sub(_entity_replace, pattern_text)


_SCOPED_FLAGS = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)

# Global inline flags "(?i)" are only legal at the very start of a pattern.
_GLOBAL_FLAGS_RE = re.compile(r"\A(?:\(\?[aiLmsux]+\))+")


def pattern_source(pattern: str | re.Pattern[str]) -> str:
    """Regex source for a rule pattern; literal strings are escaped.

    Flags compiled into a pattern are kept as a scoped inline group, so
    ``re.compile("abc", re.I)`` still ignores case inside the composite.
    A leading global flag group such as ``(?i)`` is folded into that scoped
    group, since ``pattern.flags`` already includes it.
    """
    if not isinstance(pattern, re.Pattern):
        return re.escape(pattern)
    source = _GLOBAL_FLAGS_RE.sub("", pattern.pattern, count=1)
    letters = "".join(letter for flag, letter in _SCOPED_FLAGS if pattern.flags & flag)
    if not letters:
        return source
    if pattern.flags & re.VERBOSE:
        # a trailing "# comment" would swallow the closing paren
        return f"(?{letters}:{source}\n)"
    return f"(?{letters}:{source})"


def normalize_pattern(
    pattern: str | re.Pattern[str],
    *,
    entities: bool = True,
) -> str:
    """Normalize a rule pattern for composition.

    Args:
        pattern: Literal string or compiled str pattern
        entities: Apply HTML-entity substitution

    Returns:
        Regex source text
    """
    source = pattern_source(pattern)
    if entities:
        source = escape_entities(source)
    return source
