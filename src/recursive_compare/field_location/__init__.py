"""Field locations and containers of field locations."""

from .field_location import SEPARATOR, FieldLocation
from .field_location_node import FieldLocationNode
from .field_location_set import FieldLocationSet, to_location

__all__ = [
    "SEPARATOR",
    "FieldLocation",
    "FieldLocationNode",
    "FieldLocationSet",
    "to_location",
]
