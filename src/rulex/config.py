"""ContextVar-based lexer configuration for rulex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer captures the active config when it is constructed, unless one is
passed to it explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit config
    lexer = Lexer(rules, config=LexerConfig(escape_entities=False))

    # Or via context
    from rulex.config import lexer_config_context, LexerConfig

    with lexer_config_context(LexerConfig(flags=re.IGNORECASE)):
        lexer = Lexer(rules)
        tokens = lexer.lex(source)

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from rulex.lexer.state import SkippedText


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        escape_entities: Rewrite ``&``, ``<`` and ``>`` in rule patterns as
            HTML entities, so rules match HTML-escaped source text
        flags: Extra ``re`` flags ORed into the composite pattern's flags
        on_skip: Optional callback invoked with every SkippedText diagnostic
        log_skipped: Log skipped text at WARNING level

    """

    escape_entities: bool = True
    flags: int = 0
    on_skip: Callable[["SkippedText"], None] | None = None
    log_skipped: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Only includes keys that are valid LexerConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexerConfig attribute names.

        Returns:
            New LexerConfig instance with values from dict.

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "escape_entities": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.escape_entities
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (thread-local).

    Returns:
        The active LexerConfig for this thread/context.

    """
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexerConfig instance to use for this context.

    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexerConfig to use within the context.

    Yields:
        None

    Example:
        >>> with lexer_config_context(LexerConfig(escape_entities=False)):
        ...     tokens = Lexer(rules).lex("a < b")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
