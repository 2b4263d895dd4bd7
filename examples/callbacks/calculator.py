"""Callbacks turn matches into values; discarded rules still consume input."""

import re

from rulex import Lexer, RuleSpec, ScanState


def number(captures: tuple[str | None, ...], state: ScanState) -> float:
    whole, fraction = captures
    return float(f"{whole}.{fraction or 0}")


rules = [
    RuleSpec("NUMBER", re.compile(r"(\d+)(?:\.(\d+))?"), number),
    RuleSpec("OP", re.compile(r"[-+*/]")),
    RuleSpec("LPAREN", "("),
    RuleSpec("RPAREN", ")"),
    RuleSpec("WHITESPACE", re.compile(r"\s+"), discard=True),
]

result = Lexer(rules).scan("(1.5 + 2) * 40 % 3")

for token in result.tokens:
    print(f"{token.position}\t{token.name}\t{token.content!r}")
for gap in result.skipped:
    print("skipped:", gap)
