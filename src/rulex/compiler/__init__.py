"""Rule compiler for rulex.

Turns a table of named rules into one composite regular expression.

Architecture:
compiler/
├── __init__.py          # Re-exports
├── core.py              # Validation, assembly, CompiledRuleSet
├── captures.py          # Capturing-group accounting
├── backrefs.py          # Backreference renumbering
└── patterns.py          # Literal escaping, HTML-entity substitution

Usage:
    >>> from rulex.compiler import compile_rules
    >>> compiled = compile_rules([{"name": "WORD", "pattern": re.compile(r"\\w+")}])
    >>> compiled.names
    ('HTML_BREAK', 'WORD')
"""

from rulex.compiler.backrefs import renumber_backreferences
from rulex.compiler.captures import count_captures, group_names
from rulex.compiler.core import CompiledRuleSet, compile_rules
from rulex.compiler.patterns import escape_entities, normalize_pattern

__all__ = [
    "CompiledRuleSet",
    "compile_rules",
    "count_captures",
    "escape_entities",
    "group_names",
    "normalize_pattern",
    "renumber_backreferences",
]
