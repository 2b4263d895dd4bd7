"""Tests for the top-level rulex API."""

import re

from rulex import LANGUAGES, Lexer, LexerConfig, RuleSpec, lex
from rulex.location import Position


class TestLexFunction:
    def test_default_rules(self) -> None:
        tokens = lex("hello, world")
        assert [(t.name, t.content) for t in tokens] == [
            ("WORD", "hello"),
            ("WORD", ","),
            ("WORD", "world"),
        ]

    def test_custom_rules(self) -> None:
        rules = [
            RuleSpec("NUMBER", re.compile(r"(\d+)"), lambda caps, state: int(caps[0])),
            RuleSpec("PLUS", "+"),
            RuleSpec("WHITESPACE", re.compile(r"\s+"), discard=True),
        ]
        tokens = lex("12 + 34", rules)
        assert [(t.content, t.position) for t in tokens] == [
            (12, Position(1, 1)),
            ("+", Position(1, 4)),
            (34, Position(1, 6)),
        ]

    def test_mapping_rules(self) -> None:
        rules = [
            {"name": "LPAREN", "pattern": "("},
            {"name": "RPAREN", "pattern": ")"},
            {"name": "WHITESPACE", "pattern": re.compile(r"\s+"), "discard": True},
            {"name": "SYMBOL", "pattern": re.compile(r"\w+|.")},
        ]
        assert [str(t) for t in lex("(a b)", rules)] == ["LPAREN", "SYMBOL", "SYMBOL", "RPAREN"]

    def test_config_passed_through(self) -> None:
        tokens = lex("<", [RuleSpec("LT", "<")], config=LexerConfig(escape_entities=False))
        assert [t.content for t in tokens] == ["<"]

    def test_html_break(self) -> None:
        assert lex("a<br>b")[1].position == Position(2, 1)


class TestLexerDefaults:
    def test_default_rules_are_default_language(self) -> None:
        assert Lexer().compiled.names[1:] == tuple(r.name for r in LANGUAGES["default"])
