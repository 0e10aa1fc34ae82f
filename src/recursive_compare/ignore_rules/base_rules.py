from abc import ABC, abstractmethod
from typing import Any

from recursive_compare.dual_value import DualValue


class BaseIgnoreRules(ABC):
    """
    Abstract base class defining the interface for one family of ignore rules.

    Each family (null values, exact field paths, field regexes, field types)
    decides on its own whether a compared pair of values should be ignored.
    Families are independent of each other and are combined with a logical OR
    by CompositeIgnoreRules. Evaluation only reads the registered rules, so a
    fully configured instance can be queried from several threads at once.

    Example:
        >>> class IgnoreIds(BaseIgnoreRules):
        ...     def should_ignore(self, dual_value: DualValue) -> bool:
        ...         return dual_value.field_name == "id"
        ...     def has_rules(self) -> bool:
        ...         return True
        >>> rules = IgnoreIds()
        >>> rules.should_ignore(DualValue(["person", "id"], 1, 2))
        True
        >>> rules.should_ignore(DualValue(["person", "name"], "a", "b"))
        False
    """

    @abstractmethod
    def should_ignore(self, dual_value: DualValue) -> bool:
        """
        Determine whether differences between the two values of a pair must be ignored.

        Implementations must not raise and must not modify any state.

        Args:
            dual_value (DualValue): The located pair of values to check.

        Returns:
            bool: True if the pair should be ignored, False otherwise.
        """
        pass

    @abstractmethod
    def has_rules(self) -> bool:
        """
        Check whether this family can ignore anything at all.

        Returns:
            bool: False if no rule is registered (or the family is switched off).
        """
        pass

    def add_rules(self, *rules: Any) -> None:
        """
        Register one or more rules of this family.

        This method may be overridden by families whose rules are registered
        incrementally (paths, regexes, types). Switch-like families use the default
        implementation, which raises NotImplementedError.

        Raises:
            NotImplementedError: If this family doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
