"""Pair of values found at the same location of two compared object graphs."""

from typing import Any, Iterable, Optional, Union

from recursive_compare.field_location import FieldLocation, to_location


class DualValue:
    """The actual and expected values found at one field location.

    Instances are produced by the code walking both object graphs in parallel and
    are evaluated once against a comparison configuration. They are read-only.

    Attributes:
        location (FieldLocation): Where both values were found.
        actual (Any): Value from the object under test, possibly None.
        expected (Any): Value from the reference object, possibly None.

    Example:
        >>> dual_value = DualValue(["father", "name"], "John", None)
        >>> dual_value.concatenated_path
        'father.name'
        >>> dual_value.actual_type
        <class 'str'>
        >>> dual_value.expected_type is None
        True
    """

    __slots__ = ("_location", "_actual", "_expected")

    def __init__(self, location: Union[FieldLocation, str, Iterable[str]], actual: Any, expected: Any):
        """Initialize a DualValue.

        Args:
            location: A FieldLocation, a dotted path or the ordered field names leading to the values.
            actual: The value on the actual side.
            expected: The value on the expected side.

        Raises:
            InvalidPathError: If ``location`` does not form a valid path.
        """
        if isinstance(location, (FieldLocation, str)):
            location = to_location(location)
        else:
            location = FieldLocation(location)
        self._location = location
        self._actual = actual
        self._expected = expected

    @property
    def location(self) -> FieldLocation:
        return self._location

    @property
    def actual(self) -> Any:
        return self._actual

    @property
    def expected(self) -> Any:
        return self._expected

    @property
    def concatenated_path(self) -> str:
        return self._location.path

    @property
    def field_name(self) -> str:
        return self._location.field_name

    @property
    def actual_type(self) -> Optional[type]:
        return None if self._actual is None else type(self._actual)

    @property
    def expected_type(self) -> Optional[type]:
        return None if self._expected is None else type(self._expected)

    def __repr__(self) -> str:
        return f"DualValue(path={self.concatenated_path!r}, actual={self._actual!r}, expected={self._expected!r})"
