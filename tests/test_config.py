"""Tests for ContextVar-based lexer configuration.

Validates thread isolation, context manager behavior, and how a Lexer
picks up the active config.
"""

import re
from threading import Thread

import pytest

from rulex import (
    Lexer,
    LexerConfig,
    RuleSpec,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)


class TestLexerConfigDataclass:
    """Test LexerConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexerConfig()
        assert config.escape_entities is True
        assert config.flags == 0
        assert config.on_skip is None
        assert config.log_skipped is True

    def test_immutability(self) -> None:
        config = LexerConfig()
        with pytest.raises(AttributeError):
            config.flags = re.IGNORECASE  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexerConfig.from_dict({"escape_entities": False, "unknown_key": 1})
        assert config.escape_entities is False
        assert config.flags == 0


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default_config(self) -> None:
        reset_lexer_config()
        assert get_lexer_config() == LexerConfig()

    def test_set_and_reset(self) -> None:
        custom = LexerConfig(flags=re.IGNORECASE)
        set_lexer_config(custom)
        try:
            assert get_lexer_config() is custom
        finally:
            reset_lexer_config()
        assert get_lexer_config() == LexerConfig()

    def test_context_manager_restores(self) -> None:
        before = get_lexer_config()
        with lexer_config_context(LexerConfig(log_skipped=False)):
            assert get_lexer_config().log_skipped is False
        assert get_lexer_config() is before

    def test_context_manager_restores_on_error(self) -> None:
        before = get_lexer_config()
        with pytest.raises(RuntimeError), lexer_config_context(LexerConfig(flags=re.I)):
            raise RuntimeError("fail")
        assert get_lexer_config() is before

    def test_thread_isolation(self) -> None:
        seen: list[LexerConfig] = []

        def worker() -> None:
            set_lexer_config(LexerConfig(flags=re.IGNORECASE))
            seen.append(get_lexer_config())

        reset_lexer_config()
        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen[0].flags == re.IGNORECASE
        assert get_lexer_config() == LexerConfig()


class TestLexerUsesConfig:
    def test_lexer_captures_context_config(self) -> None:
        with lexer_config_context(LexerConfig(flags=re.IGNORECASE)):
            lexer = Lexer([RuleSpec("KW", "select")])
        # config was captured at construction, not at lex time
        assert [t.content for t in lexer.lex("SELECT")] == ["SELECT"]

    def test_entities_disabled_matches_raw_markup(self) -> None:
        rules = [RuleSpec("TAG", re.compile(r"<(\w+)>"), lambda caps, state: caps[0])]
        with lexer_config_context(LexerConfig(escape_entities=False)):
            tokens = Lexer(rules).lex("<b><i>")
        assert [t.content for t in tokens] == ["b", "i"]

    def test_entities_enabled_by_default(self) -> None:
        rules = [RuleSpec("TAG", re.compile(r"<(\w+)>"), lambda caps, state: caps[0])]
        result = Lexer(rules, config=LexerConfig(log_skipped=False)).scan("<b>")
        assert result.tokens == ()
        assert result.skipped[0].text == "<b>"
