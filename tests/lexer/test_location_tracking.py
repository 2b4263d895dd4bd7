"""Tests for line/column tracking across matches, skips and HTML breaks."""

from __future__ import annotations

import pytest

from rulex import Lexer, LexerConfig, RuleSpec, lex
from rulex.location import Position


class TestHtmlBreak:
    """The built-in HTML_BREAK rule starts a new line and emits nothing."""

    def test_break_mid_input(self) -> None:
        tokens = lex("foo<br>bar")
        assert [(t.content, t.position) for t in tokens] == [
            ("foo", Position(1, 1)),
            ("bar", Position(2, 1)),
        ]

    @pytest.mark.parametrize("tag", ["<br>", "<br/>", "<br />", "<br  / >", "<br\t>"])
    def test_break_variants(self, tag: str) -> None:
        tokens = lex(f"a{tag}b")
        assert [t.content for t in tokens] == ["a", "b"]
        assert tokens[1].position == Position(2, 1)

    def test_consecutive_breaks(self) -> None:
        tokens = lex("a<br><br><br/>b")
        assert tokens[-1].position == Position(4, 1)

    def test_break_never_emitted(self) -> None:
        assert all(t.name != "HTML_BREAK" for t in lex("<br>x<br>"))

    def test_break_wins_over_earlier_rules(self) -> None:
        """HTML_BREAK is tried before every caller rule."""
        rules = [RuleSpec("ANY", "<"), RuleSpec("REST", "br>")]
        config = LexerConfig(escape_entities=False)
        tokens = Lexer(rules, config=config).lex("<br>")
        assert tokens == ()

    def test_column_after_break_continues_from_one(self) -> None:
        tokens = lex("ab<br>cd ef")
        assert tokens[-1].position == Position(2, 4)

    def test_not_a_break(self) -> None:
        tokens = lex("<bra>")
        assert all(t.line == 1 for t in tokens)


class TestColumns:
    def test_columns_advance_by_match_length(self) -> None:
        tokens = lex("one two  three")
        assert [t.column for t in tokens] == [1, 5, 10]

    def test_discarded_matches_still_advance(self) -> None:
        rules = [RuleSpec("A", "a"), RuleSpec("SKIP", "---", discard=True)]
        tokens = Lexer(rules).lex("a---a")
        assert [t.column for t in tokens] == [1, 5]

    def test_skipped_text_advances_column(self) -> None:
        tokens = Lexer([RuleSpec("A", "a")]).lex("xxa??a")
        assert [t.column for t in tokens] == [3, 6]

    def test_fresh_state_per_scan(self) -> None:
        lexer = Lexer()
        lexer.lex("a<br>b<br>c")
        tokens = lexer.lex("z")
        assert tokens[0].position == Position(1, 1)
