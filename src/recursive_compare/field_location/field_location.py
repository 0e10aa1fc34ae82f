"""Field location identifying a position inside a traversed object graph."""

from typing import Any, Iterable, Optional, Tuple

from recursive_compare.exceptions import InvalidPathError

SEPARATOR = "."


class FieldLocation:
    """Immutable location of a field, reached by following named segments from the root.

    A location is rendered canonically as its segments joined with dots. Two
    locations are equal if and only if their canonical strings are equal, which
    also makes them usable as set members and dictionary keys.

    Attributes:
        segments (Tuple[str, ...]): The field names from the root to this field.
        path (str): The canonical dotted representation.

    Example:
        >>> location = FieldLocation(["father", "name", "first"])
        >>> location.path
        'father.name.first'
        >>> location == FieldLocation.from_string("father.name.first")
        True
        >>> location.parent
        FieldLocation('father.name')
    """

    __slots__ = ("_segments", "_path")

    def __init__(self, segments: Iterable[str]):
        """Initialize a FieldLocation.

        Args:
            segments: Ordered field names, outermost first.

        Raises:
            InvalidPathError: If there are no segments, or any segment is not a non-empty string
                or contains the separator.
        """
        if isinstance(segments, str):
            raise InvalidPathError(segments, "segments must be given as a sequence, use from_string for dotted paths")
        segments = tuple(segments)
        if not segments:
            raise InvalidPathError(segments, "a field path needs at least one segment")
        for segment in segments:
            if not isinstance(segment, str) or not segment:
                raise InvalidPathError(segments)
            if SEPARATOR in segment:
                raise InvalidPathError(segments, f"segment {segment!r} contains the separator {SEPARATOR!r}")
        self._segments: Tuple[str, ...] = segments
        self._path = SEPARATOR.join(segments)

    @classmethod
    def from_string(cls, path: str) -> "FieldLocation":
        """Parse a dotted path such as ``"father.name.first"``.

        Raises:
            InvalidPathError: If the path is empty or has an empty segment (``"a..b"``, ``".a"``).
        """
        if not isinstance(path, str) or not path:
            raise InvalidPathError(path, "a field path must be a non-empty string")
        segments = path.split(SEPARATOR)
        if not all(segments):
            raise InvalidPathError(path)
        return cls(segments)

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    @property
    def path(self) -> str:
        return self._path

    @property
    def field_name(self) -> str:
        """The last segment, i.e. the name of the field itself."""
        return self._segments[-1]

    @property
    def depth(self) -> int:
        return len(self._segments)

    @property
    def parent(self) -> Optional["FieldLocation"]:
        """The enclosing field's location, or None for a top-level field."""
        if len(self._segments) == 1:
            return None
        return FieldLocation(self._segments[:-1])

    def child(self, name: str) -> "FieldLocation":
        return FieldLocation(self._segments + (name,))

    def is_ancestor_of(self, other: "FieldLocation") -> bool:
        """Check whether ``other`` lies strictly below this location.

        Example:
            >>> FieldLocation(["father"]).is_ancestor_of(FieldLocation(["father", "name"]))
            True
            >>> FieldLocation(["father"]).is_ancestor_of(FieldLocation(["fathers"]))
            False
        """
        return other.depth > self.depth and other.segments[: self.depth] == self._segments

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FieldLocation):
            return False
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"FieldLocation({self._path!r})"
