import re
from typing import Any, Optional


class RecursiveComparisonError(Exception):
    """
    Base class for every error raised while configuring a recursive comparison.

    All errors are raised synchronously by registration calls. Evaluating a
    configuration against a value pair never raises.
    """

    pass


class InvalidPathError(RecursiveComparisonError, ValueError):
    """
    Exception raised when a field path is empty or contains an empty segment.

    Attributes:
        path (Any): The offending path, either a dotted string or a sequence of segments.

    Example:
        >>> error = InvalidPathError("father..name")
        >>> str(error)
        "Invalid field path 'father..name': path segments must be non-empty strings"
    """

    def __init__(self, path: Any, reason: str = "path segments must be non-empty strings") -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path: The path that could not be turned into a field location.
            reason: Why the path was rejected.
        """
        self.path = path
        super().__init__(f"Invalid field path {path!r}: {reason}")


class InvalidArgumentError(RecursiveComparisonError, ValueError):
    """
    Exception raised when a registration call receives a value it cannot accept.

    This covers ``None`` or non-type values given as ignored types, and empty or
    non-string values given as paths or regexes.

    Attributes:
        argument (Any): The rejected value.

    Example:
        >>> error = InvalidArgumentError(None, "ignored types must not be None")
        >>> str(error)
        'ignored types must not be None'
        >>> error.argument is None
        True
    """

    def __init__(self, argument: Any, message: str) -> None:
        self.argument = argument
        super().__init__(message)


class PatternSyntaxError(RecursiveComparisonError, re.error):
    """
    Exception raised when a field regex cannot be compiled.

    It is still an ``re.error``, so callers already catching compiler errors keep
    working. The original compiler error is chained as ``__cause__``.

    Attributes:
        pattern (str): The regex text that failed to compile.
        pos (Optional[int]): Index in ``pattern`` where compilation failed, if known.
    """

    def __init__(self, message: str, pattern: str, pos: Optional[int] = None) -> None:
        re.error.__init__(self, f"Invalid field regex: {message}", pattern, pos)
