"""Composite-pattern lexer.

Scans input with the composite pattern built by the rule compiler, in a
single forward pass:

1. Report any gap between the previous match and this one as SkippedText
2. Look up the owning rule from the match's wrapping group
3. Run the rule's callback (if any) to produce the token content
4. Emit a Token unless the rule discards or the content is None
5. Advance the column, unless the callback moved the position itself

Thread Safety:
The compiled rule set is immutable; every scan gets its own ScanState, so
one Lexer can serve many scans, sequential or concurrent.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from time import perf_counter

from rulex.compiler import CompiledRuleSet, compile_rules
from rulex.compiler.core import RuleInput
from rulex.config import LexerConfig, get_lexer_config
from rulex.lexer.state import ScanResult, ScanState, SkippedText
from rulex.profiling import get_lex_accumulator
from rulex.rules import LANGUAGES
from rulex.tokens import Token
from rulex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Tokenizer generated from an ordered table of named rules.

    Rule order matters: the composite pattern is an ordered alternation, so
    at each position the first rule that matches wins, not the longest.

    Usage:
        >>> lexer = Lexer([
        ...     {"name": "LPAREN", "pattern": "("},
        ...     {"name": "RPAREN", "pattern": ")"},
        ...     {"name": "WHITESPACE", "pattern": re.compile(r"\\s+")},
        ...     {"name": "SYMBOL", "pattern": re.compile(r"\\w+|.")},
        ... ])
        >>> lexer.lex("(foo bar)")
        (Token(LPAREN, '(', 1:1), Token(SYMBOL, 'foo', 1:2), ...)

    Thread Safety:
        compile() publishes a new CompiledRuleSet in one assignment and
        scans never mutate it.

    """

    __slots__ = ("_rules", "_config", "_compiled")

    def __init__(
        self,
        rules: Sequence[RuleInput] | None = LANGUAGES["default"],
        *,
        config: LexerConfig | None = None,
    ) -> None:
        """Initialize lexer with a rule table.

        Compilation is deferred to the first scan (or an explicit compile()).

        Args:
            rules: Rules in priority order (defaults to LANGUAGES["default"])
            config: Lexer configuration (defaults to the active context config)
        """
        self._rules = rules
        self._config = config if config is not None else get_lexer_config()
        self._compiled: CompiledRuleSet | None = None

    @property
    def config(self) -> LexerConfig:
        return self._config

    @property
    def compiled(self) -> CompiledRuleSet:
        """The compiled rule set, compiling on first access."""
        if self._compiled is None:
            self.compile()
        return self._compiled  # type: ignore[return-value]

    @property
    def is_compiled(self) -> bool:
        return self._compiled is not None

    def compile(self) -> None:
        """Validate the rules and (re)build the composite pattern.

        Deterministic: compiling the same rules again yields an identical
        pattern. On failure the previously compiled state is kept.

        Raises:
            ValidationError: If the rule table is malformed
        """
        self._compiled = compile_rules(self._rules, config=self._config)

    def lex(self, text: str) -> tuple[Token, ...]:
        """Tokenize text.

        Args:
            text: Source text (consumed whole)

        Returns:
            Tokens in source order
        """
        return self.scan(text).tokens

    def scan(self, text: str) -> ScanResult:
        """Tokenize text, also returning the spans no rule matched.

        Args:
            text: Source text (consumed whole)

        Returns:
            ScanResult with tokens and skipped spans
        """
        start = perf_counter()
        skipped: list[SkippedText] = []
        tokens = tuple(self._scan(text, skipped))
        self._record(text, len(tokens), len(skipped), start)
        return ScanResult(tokens=tokens, skipped=tuple(skipped))

    def tokenize(self, text: str) -> Iterator[Token]:
        """Tokenize text lazily.

        Skipped spans are still logged and passed to ``config.on_skip``.
        Profiling stats are recorded once the generator is exhausted; a
        generator closed early records nothing.

        Yields:
            Tokens in source order
        """
        start = perf_counter()
        skipped: list[SkippedText] = []
        count = 0
        for token in self._scan(text, skipped):
            count += 1
            yield token
        self._record(text, count, len(skipped), start)

    def _record(self, text: str, token_count: int, skipped_count: int, start: float) -> None:
        acc = get_lex_accumulator()
        if acc is not None:
            acc.record_lex(len(text), token_count, skipped_count)
        logger.debug(
            "lexed %d chars into %d tokens in %.2fms",
            len(text),
            token_count,
            (perf_counter() - start) * 1000,
        )

    def _scan(self, text: str, skipped: list[SkippedText]) -> Iterator[Token]:
        compiled = self.compiled
        state = ScanState()
        pos = 0

        # finditer steps past empty matches, so zero-length rules cannot loop
        for match in compiled.pattern.finditer(text):
            match_start = match.start()
            if match_start > pos:
                self._skip(state, text[pos:match_start], skipped)

            # The wrapping group of the matching alternative closes last.
            rule = compiled.rule_for_group(match.lastindex)
            value = match.group()
            if rule.callback is not None:
                group = rule.group_index
                captures = match.groups()[group : group + rule.num_captures]
                content = rule.callback(captures, state)
            else:
                content = value

            if not rule.discard and content is not None:
                yield Token(rule.name, content, state.snapshot())

            if state.updated:
                state.updated = False
            else:
                state.column += len(value)
            pos = match.end()

        if pos < len(text):
            self._skip(state, text[pos:], skipped)

    def _skip(self, state: ScanState, text: str, skipped: list[SkippedText]) -> None:
        gap = SkippedText(state.line, state.column, text)
        skipped.append(gap)
        if self._config.log_skipped:
            logger.warning(
                "%d:%d: skipped unexpected characters %r", gap.line, gap.column, gap.text
            )
        if self._config.on_skip is not None:
            self._config.on_skip(gap)
        state.column += len(text)
