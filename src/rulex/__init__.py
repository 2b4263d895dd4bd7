"""
rulex: Regex-driven tokenizer generator

Compiles an ordered table of named pattern rules into one composite regular
expression and scans text into labelled tokens with line/column positions.
Aimed at toy languages, markup and config formats, where a hand-written DFA
is overkill and ad-hoc substring scanning is unreliable.

Quick Start:
    >>> import re
    >>> from rulex import Lexer, RuleSpec
    >>> lexer = Lexer([
    ...     RuleSpec("NUMBER", re.compile(r"(\\d+)"), lambda caps, state: int(caps[0])),
    ...     RuleSpec("PLUS", "+"),
    ...     RuleSpec("WHITESPACE", re.compile(r"\\s+"), discard=True),
    ... ])
    >>> lexer.lex("12 + 34")
    (Token(NUMBER, 12, 1:1), Token(PLUS, '+', 1:4), Token(NUMBER, 34, 1:6))

    >>> # Or use the default whitespace/word table
    >>> from rulex import lex
    >>> [t.content for t in lex("hello, world")]
    ['hello', ',', 'world']

HTML line breaks (``<br>``, ``<br/>``, ``<br />``) are always recognized,
never emitted, and start a new line.
"""

from collections.abc import Sequence

from rulex.compiler import (
    CompiledRuleSet,
    compile_rules,
    count_captures,
    escape_entities,
    normalize_pattern,
    renumber_backreferences,
)
from rulex.compiler.core import RuleInput
from rulex.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from rulex.errors import PatternError, RulexError, ValidationError
from rulex.lexer import Lexer, ScanResult, ScanState, SkippedText
from rulex.location import Position
from rulex.profiling import LexAccumulator, get_lex_accumulator, profiled_lex
from rulex.rules import HTML_BREAK, LANGUAGES, CompiledRule, RuleSpec, line_break
from rulex.serialization import from_dict, from_json, to_dict, to_json
from rulex.tokens import Token

__version__ = "0.3.0"


def lex(
    text: str,
    rules: Sequence[RuleInput] | None = LANGUAGES["default"],
    *,
    config: LexerConfig | None = None,
) -> tuple[Token, ...]:
    """Tokenize text with a one-off lexer.

    Args:
        text: Source text
        rules: Rules in priority order (defaults to LANGUAGES["default"])
        config: Lexer configuration (defaults to the active context config)

    Returns:
        Tokens in source order

    Raises:
        ValidationError: If the rule table is malformed

    Example:
        >>> lex("a<br>b")
        (Token(WORD, 'a', 1:1), Token(WORD, 'b', 2:1))

    """
    return Lexer(rules, config=config).lex(text)


__all__ = [
    # Lexer
    "Lexer",
    "lex",
    "ScanResult",
    "ScanState",
    "SkippedText",
    # Rules and compiler
    "CompiledRule",
    "CompiledRuleSet",
    "HTML_BREAK",
    "LANGUAGES",
    "RuleSpec",
    "compile_rules",
    "count_captures",
    "escape_entities",
    "line_break",
    "normalize_pattern",
    "renumber_backreferences",
    # Tokens
    "Position",
    "Token",
    # Configuration
    "LexerConfig",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
    # Errors
    "PatternError",
    "RulexError",
    "ValidationError",
    # Profiling
    "LexAccumulator",
    "get_lex_accumulator",
    "profiled_lex",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Version
    "__version__",
]
