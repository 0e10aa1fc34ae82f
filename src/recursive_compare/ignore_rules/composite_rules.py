"""Composite ignore rules for combining several rule families."""

from typing import Sequence, Tuple

from recursive_compare.dual_value import DualValue

from .base_rules import BaseIgnoreRules


class CompositeIgnoreRules(BaseIgnoreRules):
    """Composite ignore rules that combine several rule families.

    A pair is ignored if ANY of the constituent families says it should be.
    Families are independent, so the order they are given in never changes the
    result, only how soon evaluation stops.

    Attributes:
        rules (Tuple[BaseIgnoreRules, ...]): Constituent rule families, fixed at construction.

    Example:
        >>> from recursive_compare.ignore_rules.null_rules import NullValueIgnoreRules
        >>> from recursive_compare.ignore_rules.path_rules import FieldPathIgnoreRules
        >>> paths = FieldPathIgnoreRules()
        >>> paths.add_rules("id")
        >>> composite = CompositeIgnoreRules([NullValueIgnoreRules("actual", enabled=True), paths])
        >>> composite.should_ignore(DualValue(["id"], 1, 2))
        True
        >>> composite.should_ignore(DualValue(["name"], None, "John"))
        True
        >>> composite.should_ignore(DualValue(["name"], "Jack", "John"))
        False
    """

    def __init__(self, rules: Sequence[BaseIgnoreRules]):
        """Initialize composite ignore rules.

        Args:
            rules: Sequence of rule families to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseIgnoreRules.
        """
        if not rules:
            raise ValueError("At least one ignore rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseIgnoreRules):
                raise TypeError(f"Rule at index {i} must implement BaseIgnoreRules, got {type(rule)}")

        self.rules: Tuple[BaseIgnoreRules, ...] = tuple(rules)

    def should_ignore(self, dual_value: DualValue) -> bool:
        """Check if a pair is ignored by any constituent family.

        Note:
            Uses short-circuit evaluation: stops checking as soon as any family
            returns True.
        """
        return any(rule.should_ignore(dual_value) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)
