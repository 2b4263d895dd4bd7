"""Scanning engine for rulex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ScanState, ScanResult, SkippedText
├── core.py              # Lexer class (compile, scan, lex, tokenize)
└── state.py             # Per-scan position state and results

Usage:
    >>> from rulex.lexer import Lexer
    >>> Lexer().lex("hello world")
    (Token(WORD, 'hello', 1:1), Token(WORD, 'world', 1:7))
"""

from rulex.lexer.core import Lexer
from rulex.lexer.state import ScanResult, ScanState, SkippedText

__all__ = ["Lexer", "ScanResult", "ScanState", "SkippedText"]
