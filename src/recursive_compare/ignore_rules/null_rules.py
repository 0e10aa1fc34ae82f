"""Ignore rules for fields whose value is None on one side."""

from typing import Union

from recursive_compare.dual_value import DualValue
from recursive_compare.types import Side

from .base_rules import BaseIgnoreRules


class NullValueIgnoreRules(BaseIgnoreRules):
    """Ignore every field whose value is None on the watched side.

    One instance watches a single side of the pair. The rule is switched on and
    off through ``enabled`` instead of registering individual rules.

    Attributes:
        side (Side): Which value of the pair is inspected.
        enabled (bool): Whether the rule currently applies.

    Example:
        >>> rules = NullValueIgnoreRules(Side.ACTUAL, enabled=True)
        >>> rules.should_ignore(DualValue(["name"], None, "John"))
        True
        >>> rules.should_ignore(DualValue(["name"], "John", None))
        False
    """

    def __init__(self, side: Union[Side, str], enabled: bool = False):
        self.side = Side(side)
        self.enabled = enabled

    def should_ignore(self, dual_value: DualValue) -> bool:
        if not self.enabled:
            return False
        value = dual_value.actual if self.side is Side.ACTUAL else dual_value.expected
        return value is None

    def has_rules(self) -> bool:
        return self.enabled
