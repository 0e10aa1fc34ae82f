"""Ignore rules for fields holding values of registered types."""

import logging
from typing import Optional, Set

from recursive_compare.dual_value import DualValue
from recursive_compare.exceptions import InvalidArgumentError
from recursive_compare.primitives import canonical_type, is_type_descriptor
from recursive_compare.types import TypeDescriptor

from .base_rules import BaseIgnoreRules

logger = logging.getLogger(__name__)


def validate_type_descriptor(descriptor: TypeDescriptor) -> TypeDescriptor:
    """Check that ``descriptor`` can be registered as an ignored type and return it.

    Raises:
        InvalidArgumentError: If the descriptor is None or neither a type nor a PrimitiveKind.
    """
    if descriptor is None:
        raise InvalidArgumentError(descriptor, "Ignored types must not be None")
    if not is_type_descriptor(descriptor):
        raise InvalidArgumentError(
            descriptor, f"Ignored types must be types or PrimitiveKind members, got {descriptor!r}"
        )
    return descriptor


class TypeIgnoreRules(BaseIgnoreRules):
    """Ignore fields whose value is exactly of one of the registered types.

    The type checked is the runtime type of the actual value. When the actual
    value is None it has no type; in strict type checking mode the type of the
    expected value is used instead, otherwise the pair is not ignored by type.

    Membership is exact: registering ``numbers.Number`` does not ignore a
    ``float``, and registering ``int`` does not ignore a ``bool``. A primitive
    kind and its boxed type count as the same entry (see ``primitives``).

    Attributes:
        types (Set[TypeDescriptor]): Registered descriptors, deduplicated by identity.
        strict_type_checking (bool): Whether the expected value's type stands in for a None actual.

    Example:
        >>> from recursive_compare.primitives import PrimitiveKind
        >>> rules = TypeIgnoreRules()
        >>> rules.add_rules(PrimitiveKind.BOOLEAN)
        >>> rules.should_ignore(DualValue(["active"], True, False))
        True
        >>> rules.should_ignore(DualValue(["active"], None, False))
        False
        >>> rules.strict_type_checking = True
        >>> rules.should_ignore(DualValue(["active"], None, False))
        True
    """

    def __init__(self, strict_type_checking: bool = False):
        self.types: Set[TypeDescriptor] = set()
        self.strict_type_checking = strict_type_checking
        self._canonical_types: Set[type] = set()

    def effective_type(self, dual_value: DualValue) -> Optional[type]:
        """Return the type used to decide whether ``dual_value`` is ignored, or None if unknown."""
        if dual_value.actual is not None:
            return type(dual_value.actual)
        if self.strict_type_checking and dual_value.expected is not None:
            return type(dual_value.expected)
        return None

    def should_ignore(self, dual_value: DualValue) -> bool:
        value_type = self.effective_type(dual_value)
        if value_type is None:
            return False
        return value_type in self._canonical_types

    def has_rules(self) -> bool:
        return len(self.types) > 0

    def add_rules(self, *types: TypeDescriptor) -> None:
        """Register types or primitive kinds.

        All descriptors are validated before any is registered.

        Raises:
            InvalidArgumentError: If a descriptor is None or neither a type nor a PrimitiveKind.
        """
        for descriptor in [validate_type_descriptor(descriptor) for descriptor in types]:
            self.types.add(descriptor)
            self._canonical_types.add(canonical_type(descriptor))
        logger.debug("Registered ignored types %s", types)

    def get_types(self) -> Set[TypeDescriptor]:
        """Return a copy of the registered descriptors."""
        return set(self.types)
