"""Ignore rules for fields whose path matches a regular expression."""

import logging
import re
from typing import List

from recursive_compare.dual_value import DualValue
from recursive_compare.exceptions import InvalidArgumentError, PatternSyntaxError

from .base_rules import BaseIgnoreRules

logger = logging.getLogger(__name__)


def compile_field_regex(regex: str) -> re.Pattern[str]:
    """Compile a field regex, translating compiler errors.

    Raises:
        InvalidArgumentError: If ``regex`` is not a non-empty string.
        PatternSyntaxError: If ``regex`` is not a valid regular expression.
    """
    if not isinstance(regex, str) or not regex:
        raise InvalidArgumentError(regex, f"Field regexes must be non-empty strings, got {regex!r}")
    try:
        return re.compile(regex)
    except re.error as e:
        raise PatternSyntaxError(e.msg, regex, e.pos) from e


class RegexIgnoreRules(BaseIgnoreRules):
    """Ignore fields whose whole dotted path matches one of the registered regexes.

    Regexes are compiled when registered and applied with ``fullmatch``, so
    ``"name"`` matches the path ``"name"`` but not ``"surname"``. Registering
    regexes never replaces earlier ones, and duplicates are kept.

    Attributes:
        patterns (List[re.Pattern[str]]): Compiled regexes in registration order.

    Example:
        >>> rules = RegexIgnoreRules()
        >>> rules.add_rules(".*name")
        >>> rules.should_ignore(DualValue(["surname"], "Doe", "Dee"))
        True
        >>> rules.should_ignore(DualValue(["name", "first"], "Jack", "John"))
        False
    """

    def __init__(self) -> None:
        self.patterns: List[re.Pattern[str]] = []

    def should_ignore(self, dual_value: DualValue) -> bool:
        path = dual_value.concatenated_path
        return any(pattern.fullmatch(path) for pattern in self.patterns)

    def has_rules(self) -> bool:
        return len(self.patterns) > 0

    def add_rules(self, *regexes: str) -> None:
        """Compile and register regexes.

        All regexes are compiled before any is registered.

        Raises:
            InvalidArgumentError: If a regex is not a non-empty string.
            PatternSyntaxError: If a regex does not compile.
        """
        compiled = [compile_field_regex(regex) for regex in regexes]
        self.patterns.extend(compiled)
        logger.debug("Registered ignored field regexes %s", [pattern.pattern for pattern in compiled])

    def get_patterns(self) -> List[re.Pattern[str]]:
        """Return a copy of the registered patterns."""
        return list(self.patterns)
