"""Lex the innerHTML of a rich-text editor: <br> starts a line, text is escaped."""

import re

from rulex import Lexer, RuleSpec

rules = [
    # matches the escaped form "&lt;tag&gt;" of what the user typed
    RuleSpec("TAG", re.compile(r"<(/?\w+)>"), lambda caps, state: caps[0]),
    RuleSpec("AMP", "&"),
    RuleSpec("SPACE", re.compile(r"\s+"), discard=True),
    RuleSpec("WORD", re.compile(r"\w+|.")),
]

source = "&lt;b&gt;bold&lt;/b&gt; &amp; plain<br>second line<br/>third"

for token in Lexer(rules).lex(source):
    print(f"{token.position}\t{token.name}\t{token.content!r}")
