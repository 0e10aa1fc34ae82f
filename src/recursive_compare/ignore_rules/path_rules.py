"""Ignore rules for fields registered by their exact path."""

import logging
from typing import Set

from recursive_compare.dual_value import DualValue
from recursive_compare.exceptions import InvalidArgumentError
from recursive_compare.field_location import FieldLocation, FieldLocationSet

from .base_rules import BaseIgnoreRules

logger = logging.getLogger(__name__)


def parse_field_path(path: str) -> FieldLocation:
    """Parse a dotted field path given to a registration call.

    Raises:
        InvalidArgumentError: If ``path`` is not a string.
        InvalidPathError: If ``path`` is empty or has an empty segment.
    """
    if not isinstance(path, str):
        raise InvalidArgumentError(path, f"Field paths must be strings, got {type(path).__name__}")
    return FieldLocation.from_string(path)


class FieldPathIgnoreRules(BaseIgnoreRules):
    """Ignore fields whose dotted path equals one of the registered paths.

    Matching is exact: registering ``"father"`` ignores the pair located at
    ``"father"`` itself, not pairs located below it such as ``"father.name"``.
    Registering the same path more than once keeps a single entry.

    Attributes:
        locations (FieldLocationSet): The registered field locations.

    Example:
        >>> rules = FieldPathIgnoreRules()
        >>> rules.add_rules("name.first", "father")
        >>> rules.should_ignore(DualValue(["name", "first"], "Jack", "John"))
        True
        >>> rules.should_ignore(DualValue(["name", "last"], "Doe", "Dee"))
        False
    """

    def __init__(self) -> None:
        self.locations = FieldLocationSet()

    def should_ignore(self, dual_value: DualValue) -> bool:
        return dual_value.location in self.locations

    def has_rules(self) -> bool:
        return len(self.locations) > 0

    def add_rules(self, *paths: str) -> None:
        """Register dotted field paths.

        All paths are validated before any is registered.

        Raises:
            InvalidArgumentError: If a path is not a string.
            InvalidPathError: If a path is empty or has an empty segment.
        """
        locations = [parse_field_path(path) for path in paths]
        added = self.locations.update(locations)
        logger.debug("Registered %d new ignored field path(s) out of %d", added, len(locations))

    def get_locations(self) -> Set[FieldLocation]:
        """Return a copy of the registered locations."""
        return set(self.locations)
