"""Exception classes for rulex.

Provides standardized exceptions for rule-table validation. Scan-time gaps
are not errors: they are reported as SkippedText diagnostics instead.
"""

from __future__ import annotations


class RulexError(Exception):
    """Base exception for all rulex errors.

    Subclass this for specific error categories.
    """

    pass


class ValidationError(RulexError):
    """Error raised when a rule table is incorrectly specified.

    Raised by the rule compiler before any compiled state is published,
    so a failed compile never leaves a half-built lexer behind.
    """

    def __init__(self, rule: int | str | None, message: str) -> None:
        """Initialize validation error with the offending rule.

        Args:
            rule: 1-based index of the rule when it is structurally invalid,
                its name once the name itself has been validated, or None
                when the rule list as a whole is unusable
            message: Description of the problem
        """
        self.rule = rule
        self.message = message

        location = ""
        if isinstance(rule, str):
            location = f'in rule "{rule}": '
        elif rule is not None:
            location = f"in rule {rule}: "

        super().__init__(f"Validation Error: {location}{message}")


class PatternError(ValidationError):
    """Error when the regular-expression engine rejects a pattern.

    Raised when a rule's pattern, or the composite pattern built from the
    whole table, fails to compile.
    """

    def __init__(
        self,
        rule: int | str | None,
        message: str,
        pattern: str | None = None,
    ) -> None:
        """Initialize pattern error.

        Args:
            rule: Name of the rule whose pattern failed (None if unknown)
            message: Error reported by the regex engine
            pattern: Pattern text that failed to compile (optional)
        """
        self.pattern = pattern
        super().__init__(rule, message)
