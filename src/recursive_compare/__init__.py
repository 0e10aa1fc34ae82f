"""Exclusion engine for recursive object comparison.

This package decides whether a difference found while recursively comparing an
"actual" and an "expected" object graph should be ignored, based on field
paths, path regexes, field types and null values.
"""

from importlib.metadata import PackageNotFoundError, version

from recursive_compare.configuration import ConfigurationBuilder, RecursiveComparisonConfiguration
from recursive_compare.dual_value import DualValue
from recursive_compare.field_location import FieldLocation, FieldLocationSet
from recursive_compare.primitives import PrimitiveKind

try:
    __version__ = version("recursive-compare")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "ConfigurationBuilder",
    "DualValue",
    "FieldLocation",
    "FieldLocationSet",
    "PrimitiveKind",
    "RecursiveComparisonConfiguration",
]
