"""Tests for pattern normalization: literal escaping and entity substitution."""

from __future__ import annotations

import re

from rulex.compiler import escape_entities, normalize_pattern


class TestEscapeEntities:
    def test_angle_brackets_and_ampersand(self) -> None:
        assert escape_entities("a<b>&c") == "a&lt;b&gt;&amp;c"

    def test_group_syntax_left_alone(self) -> None:
        assert escape_entities("(?P<tag>x)(?<=y)(?<!z)&") == "(?P<tag>x)(?<=y)(?<!z)&amp;"

    def test_escaped_bracket_becomes_entity(self) -> None:
        assert escape_entities(r"\<\&") == "&lt;&amp;"

    def test_escaped_backslash_before_bracket(self) -> None:
        assert escape_entities(r"\\<") == r"\\&lt;"

    def test_escaped_paren_before_lookbehind_text(self) -> None:
        """\\(?<= is a literal paren, so its < is plain text."""
        assert escape_entities(r"\(?<=") == r"\(?&lt;="

    def test_no_special_characters(self) -> None:
        assert escape_entities(r"\w+|.") == r"\w+|."


class TestNormalizePattern:
    def test_literal_string_is_escaped(self) -> None:
        source = normalize_pattern("a+b")
        assert re.fullmatch(source, "a+b")
        assert not re.fullmatch(source, "aab")

    def test_literal_markup_becomes_entities(self) -> None:
        assert normalize_pattern("<b>") == "&lt;b&gt;"

    def test_literal_ampersand_loses_escape(self) -> None:
        assert normalize_pattern("a&b") == "a&amp;b"

    def test_entities_disabled(self) -> None:
        assert normalize_pattern("<b>", entities=False) == "<b>"
        assert normalize_pattern(re.compile("a<b"), entities=False) == "a<b"

    def test_regex_source_is_used_verbatim(self) -> None:
        assert normalize_pattern(re.compile(r"(\d+)\.\d*")) == r"(\d+)\.\d*"

    def test_compiled_flags_become_scoped_group(self) -> None:
        assert normalize_pattern(re.compile("abc", re.IGNORECASE)) == "(?i:abc)"
        assert normalize_pattern(re.compile("a.b", re.DOTALL | re.IGNORECASE)) == "(?is:a.b)"

    def test_scoped_flags_still_apply(self) -> None:
        source = normalize_pattern(re.compile("abc", re.IGNORECASE))
        assert re.fullmatch(source, "ABC")

    def test_ascii_flag_kept(self) -> None:
        source = normalize_pattern(re.compile(r"\w+", re.ASCII))
        assert source == r"(?a:\w+)"
        assert re.compile(source).findall("été") == ["t"]

    def test_leading_global_flags_folded_into_scope(self) -> None:
        source = normalize_pattern(re.compile("(?i)abc"))
        assert source == "(?i:abc)"
        # still valid once it is no longer at the start of the expression
        assert re.fullmatch("x|(" + source + ")", "ABC")

    def test_verbose_trailing_comment_closed(self) -> None:
        source = normalize_pattern(re.compile(r"\d+  # digits", re.VERBOSE))
        assert re.fullmatch("(" + source + ")", "42")
