"""Tokenize text with the default whitespace/word rules, zero config."""

from rulex import lex

for token in lex("Hello, lexer world!"):
    print(token.name, repr(token.content), token.position)
