"""Rule compiler: validation and composite-pattern assembly.

Validates a rule table, normalizes every rule's pattern, renumbers its
backreferences for its position in the composite, and compiles the whole
table into a single ordered alternation::

    (<br\\s*/?\\s*>)|(rule0)|(rule1)|...

Each rule's wrapping group is recorded, so the scanner can map a match back
to its rule with one lookup on ``match.lastindex``.

Thread Safety:
compile_rules is pure. CompiledRuleSet is immutable after creation and safe
to share across threads and scans.

"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from rulex.compiler.backrefs import renumber_backreferences
from rulex.compiler.captures import count_captures, group_names
from rulex.compiler.patterns import normalize_pattern
from rulex.config import LexerConfig, get_lexer_config
from rulex.errors import PatternError, ValidationError
from rulex.rules import HTML_BREAK, CompiledRule, RuleSpec
from rulex.utils.hashing import hash_str
from rulex.utils.logger import get_logger

logger = get_logger(__name__)

RuleInput = RuleSpec | Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class CompiledRuleSet:
    """Compiled rules plus the composite pattern that scans for them.

    Attributes:
        rules: Compiled rules in priority order, HTML_BREAK first
        pattern: The composite pattern

    """

    rules: tuple[CompiledRule, ...]
    pattern: re.Pattern[str]
    _by_group: dict[int, CompiledRule] = field(repr=False, compare=False)

    @property
    def source(self) -> str:
        """Composite pattern source text."""
        return self.pattern.pattern

    @property
    def flags(self) -> int:
        """Flags the composite pattern was compiled with."""
        return self.pattern.flags

    @property
    def fingerprint(self) -> str:
        """Stable hash of the composite source and flags."""
        return hash_str(f"{self.source}\x00{self.flags}", truncate=16)

    @property
    def names(self) -> tuple[str, ...]:
        """Rule names in priority order."""
        return tuple(rule.name for rule in self.rules)

    def rule_for_group(self, index: int | None) -> CompiledRule:
        """Get the rule whose wrapping group has the given index.

        Args:
            index: ``match.lastindex`` of a composite-pattern match

        Raises:
            KeyError: If no rule is wrapped by that group
        """
        return self._by_group[index]  # type: ignore[index]

    def __iter__(self) -> Iterator[CompiledRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)


def _field(rule: RuleInput, name: str) -> Any:
    if isinstance(rule, Mapping):
        return rule.get(name)
    return getattr(rule, name)


def _validate(index: int, rule: Any) -> tuple[str, str | re.Pattern[str], Any, bool]:
    """Check one rule description; first failing check wins."""
    if rule is None or not isinstance(rule, (RuleSpec, Mapping)):
        raise ValidationError(index, "invalid rule")

    name = _field(rule, "name")
    if name is None or name == "":
        raise ValidationError(index, "missing name")
    if not isinstance(name, str):
        raise ValidationError(index, f'invalid name "{name}"')

    pattern = _field(rule, "pattern")
    if pattern is None or pattern == "":
        raise ValidationError(name, "missing pattern")
    if isinstance(pattern, re.Pattern):
        if not isinstance(pattern.pattern, str):
            raise ValidationError(name, f'invalid pattern "{pattern.pattern!r}"')
    elif not isinstance(pattern, str):
        raise ValidationError(name, f'invalid pattern "{pattern}"')

    callback = _field(rule, "callback")
    if callback is not None and not callable(callback):
        raise ValidationError(name, f'invalid callback "{callback}"')

    return name, pattern, callback, bool(_field(rule, "discard"))


def compile_rules(
    rule_specs: Sequence[RuleInput] | None,
    *,
    config: LexerConfig | None = None,
) -> CompiledRuleSet:
    """Validate a rule table and compile it into one composite pattern.

    Args:
        rule_specs: Rules in priority order, as RuleSpec objects or mappings
            with ``name``, ``pattern``, ``callback`` and ``discard`` keys
        config: Lexer configuration (defaults to the active context config)

    Returns:
        CompiledRuleSet with HTML_BREAK prepended

    Raises:
        ValidationError: If the table or any rule is malformed
        PatternError: If a pattern is rejected by ``re``

    Example:
        >>> compiled = compile_rules([RuleSpec("WORD", re.compile(r"\\w+"))])
        >>> compiled.source
        '(<br\\\\s*/?\\\\s*>)|(\\\\w+)'
    """
    if config is None:
        config = get_lexer_config()
    if (
        not rule_specs
        or isinstance(rule_specs, (str, bytes, Mapping))
        or not isinstance(rule_specs, Sequence)
    ):
        raise ValidationError(None, "no rules provided")

    start = perf_counter()
    compiled: list[CompiledRule] = [HTML_BREAK]
    # Groups used so far; the HTML_BREAK wrapping group is group 1.
    offset = HTML_BREAK.group_index + HTML_BREAK.num_captures
    # group name -> rule that defined it
    defined_names: dict[str, str] = {}

    for index, rule in enumerate(rule_specs, start=1):
        name, pattern, callback, discard = _validate(index, rule)
        source = normalize_pattern(pattern, entities=config.escape_entities)
        num_captures = count_captures(source)
        # offset -1 keeps the rule's own numbering, out-of-range refs included
        standalone = renumber_backreferences(source, num_captures, -1, rule=name)
        try:
            re.compile(standalone, config.flags)
        except re.error as e:
            raise PatternError(name, str(e), source) from e
        for group_name in group_names(source):
            if group_name in defined_names:
                msg = (
                    f"redefinition of group name '{group_name}', "
                    f"already defined in rule \"{defined_names[group_name]}\""
                )
                raise PatternError(name, msg, source)
            defined_names[group_name] = name

        compiled.append(
            CompiledRule(
                name=name,
                pattern_text=renumber_backreferences(
                    source, num_captures, offset, rule=name
                ),
                callback=callback,
                discard=discard,
                num_captures=num_captures,
                group_index=offset + 1,
            )
        )
        offset += num_captures + 1

    composite = "|".join(rule.wrapped for rule in compiled)
    try:
        pattern_obj = re.compile(composite, re.MULTILINE | config.flags)
    except re.error as e:
        raise PatternError(None, str(e), composite) from e

    if pattern_obj.groups != offset:
        # count_captures disagrees with re: dispatch would pick the wrong rule
        msg = f"counted {offset} capturing groups but re found {pattern_obj.groups}"
        raise PatternError(None, msg, composite)

    logger.debug(
        "compiled %d rules into %d groups in %.2fms",
        len(compiled),
        offset,
        (perf_counter() - start) * 1000,
    )
    return CompiledRuleSet(
        rules=tuple(compiled),
        pattern=pattern_obj,
        _by_group={rule.group_index: rule for rule in compiled},
    )
