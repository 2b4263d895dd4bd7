"""One compiled Lexer, many concurrent scans: each scan has its own state."""

from concurrent.futures import ThreadPoolExecutor

from rulex import Lexer
from rulex.serialization import to_json

lexer = Lexer()
lexer.compile()

docs = [f"document {i}<br>has two lines" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lexer.lex, docs))

print(f"Lexed {len(results)} documents in parallel")
print("Fingerprint:", lexer.compiled.fingerprint)
print(to_json(results[0], indent=2))
