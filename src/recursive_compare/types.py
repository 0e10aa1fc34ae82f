from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from recursive_compare.primitives import PrimitiveKind

# A nominal Python type or one of the closed primitive kinds
TypeDescriptor = Union[type, "PrimitiveKind"]


class Side(str, Enum):
    """Which side of a compared pair a rule looks at.

    Attributes:
        ACTUAL: The value taken from the object under test
        EXPECTED: The value taken from the reference object
    """

    ACTUAL = "actual"
    EXPECTED = "expected"
