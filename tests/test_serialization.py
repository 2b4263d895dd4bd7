"""Tests for rulex.serialization: token JSON round-trip."""

import json

import pytest

from rulex import Lexer, RuleSpec
from rulex.location import Position
from rulex.serialization import from_dict, from_json, to_dict, to_json
from rulex.tokens import Token


def _tok(name: str, content: object, line: int = 1, column: int = 1) -> Token:
    return Token(name, content, Position(line, column))


class TestToDict:
    def test_shape(self) -> None:
        assert to_dict(_tok("WORD", "hi", 2, 5)) == {
            "_type": "Token",
            "name": "WORD",
            "content": "hi",
            "position": {"_type": "Position", "line": 2, "column": 5},
        }

    def test_non_string_content_kept(self) -> None:
        assert to_dict(_tok("NUM", 42))["content"] == 42


class TestFromDict:
    def test_round_trip(self) -> None:
        token = _tok("NUM", [1, 2], 3, 4)
        assert from_dict(to_dict(token)) == token

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"name": "X"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown token type"):
            from_dict({"_type": "Node"})


class TestJson:
    def test_lexer_output_round_trips(self) -> None:
        tokens = Lexer().lex("alpha beta<br>gamma")
        assert from_json(to_json(tokens)) == tokens

    def test_deterministic_output(self) -> None:
        tokens = Lexer().lex("x y")
        assert to_json(tokens) == to_json(tokens)
        assert json.loads(to_json(tokens))[0]["name"] == "WORD"

    def test_indent(self) -> None:
        assert "\n" in to_json([_tok("A", "a")], indent=2)

    def test_callback_content(self) -> None:
        rules = [RuleSpec("NUM", "7", lambda caps, state: 7)]
        tokens = Lexer(rules).lex("77")
        assert [t.content for t in from_json(to_json(tokens))] == [7, 7]

    def test_non_list_rejected(self) -> None:
        with pytest.raises(ValueError, match="Expected a list"):
            from_json('{"_type": "Token"}')
