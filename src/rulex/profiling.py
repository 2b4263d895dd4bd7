"""rulex LexAccumulator: opt-in profiling for lexing.

This module provides accumulated metrics during lexing:
- Total lex time
- Source length
- Token and skipped-span counts

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from rulex import Lexer
    from rulex.profiling import profiled_lex

    lexer = Lexer()
    with profiled_lex() as metrics:
        tokens = lexer.lex("hello world")

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 11, "token_count": 2, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LexAccumulator:
    """Accumulated metrics during lexing.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of the sources scanned.
        token_count: Number of tokens emitted.
        skipped_count: Number of unmatched spans reported.
        lex_calls: Number of scans recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    skipped_count: int = 0
    lex_calls: int = 0

    def record_lex(self, source_length: int, token_count: int, skipped_count: int = 0) -> None:
        """Record a scan.

        Args:
            source_length: Length of the scanned text.
            token_count: Number of tokens emitted.
            skipped_count: Number of unmatched spans.

        """
        self.lex_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.skipped_count += skipped_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of lex metrics.

        Returns:
            Dict with total_ms, source_length, token_count, skipped_count,
            lex_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "skipped_count": self.skipped_count,
            "lex_calls": self.lex_calls,
        }


_accumulator: ContextVar[LexAccumulator | None] = ContextVar(
    "lex_accumulator",
    default=None,
)


def get_lex_accumulator() -> LexAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_lex() -> Iterator[LexAccumulator]:
    """Context manager for profiled lexing.

    Creates a LexAccumulator and makes it available via
    get_lex_accumulator() for the duration of the with block.

    Yields:
        LexAccumulator that will be populated during scans.

    """
    acc = LexAccumulator()
    token: Token[LexAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
