"""Deduplicating container of field locations."""

import logging
from typing import Iterable, Iterator, List, Set, Union

from anytree import RenderTree

from .field_location import FieldLocation
from .field_location_node import FieldLocationNode

logger = logging.getLogger(__name__)

LocationOrPath = Union[FieldLocation, str]


def to_location(value: LocationOrPath) -> FieldLocation:
    """Return ``value`` as a FieldLocation, parsing dotted strings.

    Raises:
        InvalidPathError: If ``value`` is a string that is not a valid dotted path.
    """
    if isinstance(value, FieldLocation):
        return value
    return FieldLocation.from_string(value)


class FieldLocationSet:
    """Set of field locations, deduplicated by canonical path.

    Besides the flat set used for membership tests, the container keeps an
    anytree tree of the registered locations so that they can be rendered
    and inspected by prefix.

    Example:
        >>> locations = FieldLocationSet()
        >>> locations.add("father.name")
        True
        >>> locations.add("father.name")
        False
        >>> "father.name" in locations
        True
        >>> len(locations)
        1
    """

    def __init__(self, paths: Iterable[LocationOrPath] = ()):
        self._locations: Set[FieldLocation] = set()
        self._root = FieldLocationNode("")
        self.update(paths)

    def add(self, path: LocationOrPath) -> bool:
        """Register a location unless an equal one is already present.

        Args:
            path: A FieldLocation or a dotted path string.

        Returns:
            True if the location was added, False if it was already registered.

        Raises:
            InvalidPathError: If ``path`` is not a valid dotted path.
        """
        location = to_location(path)
        if location in self._locations:
            return False
        self._locations.add(location)
        self._index(location)
        logger.debug("Registered field location %s", location)
        return True

    def update(self, paths: Iterable[LocationOrPath]) -> int:
        """Register several locations at once.

        Every path is validated before any of them is registered, so an invalid
        path leaves the set unchanged.

        Returns:
            The number of locations that were not already present.
        """
        locations = [to_location(path) for path in paths]
        return sum(1 for location in locations if self.add(location))

    def covers_ancestor_of(self, path: LocationOrPath) -> bool:
        """Check whether a strict ancestor of ``path`` is registered.

        Example:
            >>> locations = FieldLocationSet(["father"])
            >>> locations.covers_ancestor_of("father.name.first")
            True
            >>> locations.covers_ancestor_of("father")
            False
        """
        location = to_location(path)
        node = self._root
        for segment in location.segments[:-1]:
            node = node.find_child(segment)
            if node is None:
                return False
            if node.registered:
                return True
        return False

    def render(self) -> str:
        """Render the registered locations as an indented tree, one segment per line.

        Registered locations are marked with ``*``.
        """
        lines: List[str] = []
        for top in self._root.children:
            for prefix, _, node in RenderTree(top):
                marker = " *" if node.registered else ""
                lines.append(f"{prefix}{node.name}{marker}")
        return "\n".join(lines)

    def _index(self, location: FieldLocation) -> None:
        node = self._root
        for depth, segment in enumerate(location.segments, start=1):
            child = node.find_child(segment)
            if child is None:
                child = FieldLocationNode(segment, parent=node, location=FieldLocation(location.segments[:depth]))
            node = child
        node.registered = True

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            try:
                item = FieldLocation.from_string(item)
            except ValueError:
                return False
        if not isinstance(item, FieldLocation):
            return False
        return item in self._locations

    def __iter__(self) -> Iterator[FieldLocation]:
        return iter(self._locations)

    def __len__(self) -> int:
        return len(self._locations)

    def __repr__(self) -> str:
        paths = ", ".join(sorted(repr(location.path) for location in self._locations))
        return f"FieldLocationSet({{{paths}}})"
