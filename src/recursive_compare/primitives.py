"""Primitive kinds and their equivalence with the built-in types that hold them.

Ignored types may be registered either as a nominal Python type (``int``,
``uuid.UUID``, a user class) or as a ``PrimitiveKind``. A primitive kind and
its boxed built-in type are treated as the same entry: registering
``PrimitiveKind.BOOLEAN`` ignores ``bool`` values and registering ``bool``
matches the kind as well. No other widening is performed, in particular
``bool`` is not treated as an ``int`` even though it subclasses it.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional

from recursive_compare.types import TypeDescriptor


class PrimitiveKind(str, Enum):
    """Closed set of primitive-like value kinds.

    Values:
        BOOLEAN: Truth values, boxed as ``bool``
        INTEGER: Integral numbers, boxed as ``int``
        FLOAT: Floating point numbers, boxed as ``float``
        COMPLEX: Complex numbers, boxed as ``complex``
        CHARACTER: Text characters, boxed as ``str``

    Example:
        >>> PrimitiveKind.BOOLEAN.boxed_type
        <class 'bool'>
        >>> PrimitiveKind.of(float)
        <PrimitiveKind.FLOAT: 'float'>
    """

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    COMPLEX = "complex"
    CHARACTER = "character"

    @property
    def boxed_type(self) -> type:
        return BOXED_TYPES[self]

    @classmethod
    def of(cls, boxed_type: type) -> Optional["PrimitiveKind"]:
        """Return the kind whose boxed type is exactly ``boxed_type``, if any."""
        return _KINDS_BY_BOXED_TYPE.get(boxed_type)


BOXED_TYPES: Mapping[PrimitiveKind, type] = {
    PrimitiveKind.BOOLEAN: bool,
    PrimitiveKind.INTEGER: int,
    PrimitiveKind.FLOAT: float,
    PrimitiveKind.COMPLEX: complex,
    PrimitiveKind.CHARACTER: str,
}

_KINDS_BY_BOXED_TYPE: Dict[type, PrimitiveKind] = {boxed: kind for kind, boxed in BOXED_TYPES.items()}


def is_type_descriptor(value: Any) -> bool:
    """Check whether ``value`` can be registered as an ignored type."""
    return isinstance(value, (type, PrimitiveKind))


def canonical_type(descriptor: TypeDescriptor) -> type:
    """Normalize a type descriptor to the type used for membership tests.

    Primitive kinds are replaced by their boxed type, nominal types are returned as is.

    Example:
        >>> canonical_type(PrimitiveKind.INTEGER) is int
        True
        >>> canonical_type(bytes) is bytes
        True
    """
    if isinstance(descriptor, PrimitiveKind):
        return descriptor.boxed_type
    return descriptor
