"""Configuration of the fields left out of a recursive comparison.

A ``RecursiveComparisonConfiguration`` is created for one comparison session,
filled with ignore rules before the object graphs are walked, and then queried
once per visited field through ``should_ignore``. Five independent families of
rules are combined with a logical OR:

- every field whose actual value is None (``set_ignore_all_actual_null_fields``)
- every field whose expected value is None (``set_ignore_all_expected_null_fields``)
- fields registered by exact dotted path (``ignore_fields``)
- fields whose whole dotted path matches a regex (``ignore_fields_matching_regexes``)
- fields holding a value of a registered type (``ignore_fields_of_types``)

Registration calls only ever add rules, and a call either registers all of its
arguments or, when one of them is invalid, none of them.
"""

import logging
import re
from typing import Any, Iterable, Iterator, List, Mapping, Set

from recursive_compare.dual_value import DualValue
from recursive_compare.exceptions import InvalidArgumentError
from recursive_compare.field_location import FieldLocation
from recursive_compare.ignore_rules import (
    CompositeIgnoreRules,
    FieldPathIgnoreRules,
    NullValueIgnoreRules,
    RegexIgnoreRules,
    TypeIgnoreRules,
    compile_field_regex,
    parse_field_path,
    validate_type_descriptor,
)
from recursive_compare.primitives import PrimitiveKind, is_type_descriptor
from recursive_compare.types import Side, TypeDescriptor

logger = logging.getLogger(__name__)

OPTION_IGNORED_FIELDS = "ignored_fields"
OPTION_IGNORED_FIELDS_REGEXES = "ignored_fields_regexes"
OPTION_IGNORED_TYPES = "ignored_types"
OPTION_IGNORE_ALL_ACTUAL_NULL_FIELDS = "ignore_all_actual_null_fields"
OPTION_IGNORE_ALL_EXPECTED_NULL_FIELDS = "ignore_all_expected_null_fields"
OPTION_STRICT_TYPE_CHECKING = "strict_type_checking"

OPTION_NAMES = (
    OPTION_IGNORED_FIELDS,
    OPTION_IGNORED_FIELDS_REGEXES,
    OPTION_IGNORED_TYPES,
    OPTION_IGNORE_ALL_ACTUAL_NULL_FIELDS,
    OPTION_IGNORE_ALL_EXPECTED_NULL_FIELDS,
    OPTION_STRICT_TYPE_CHECKING,
)

FLAG_OPTION_NAMES = (
    OPTION_IGNORE_ALL_ACTUAL_NULL_FIELDS,
    OPTION_IGNORE_ALL_EXPECTED_NULL_FIELDS,
    OPTION_STRICT_TYPE_CHECKING,
)


def describe_type(descriptor: TypeDescriptor) -> str:
    """Return a readable name for an ignored type descriptor.

    Example:
        >>> import uuid
        >>> describe_type(uuid.UUID)
        'uuid.UUID'
        >>> describe_type(str)
        'str'
        >>> describe_type(PrimitiveKind.BOOLEAN)
        'boolean'
    """
    if isinstance(descriptor, PrimitiveKind):
        return descriptor.value
    if descriptor.__module__ == "builtins":
        return descriptor.__qualname__
    return f"{descriptor.__module__}.{descriptor.__qualname__}"


def _as_values(option: str, value: Any) -> List[Any]:
    if isinstance(value, str) or is_type_descriptor(value):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    raise InvalidArgumentError(value, f"Option '{option}' expects a single value or an iterable of values")


def _as_flag(option: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgumentError(value, f"Option '{option}' expects a bool, got {value!r}")
    return value


class RecursiveComparisonConfiguration:
    """Set of rules deciding which fields are ignored in a recursive comparison.

    Attributes:
        ignore_all_actual_null_fields (bool): Whether fields with a None actual value are ignored.
        ignore_all_expected_null_fields (bool): Whether fields with a None expected value are ignored.
        strict_type_checking (bool): Whether the expected value's type is used for type-based
            ignoring when the actual value is None.

    Example:
        >>> configuration = RecursiveComparisonConfiguration()
        >>> configuration.ignore_fields("id").ignore_fields_matching_regexes(".*date")
        RecursiveComparisonConfiguration(ignored_fields=['id'], ignored_fields_regexes=['.*date'], ignored_types=[])
        >>> configuration.should_ignore(DualValue(["id"], 1, 2))
        True
        >>> configuration.should_ignore(DualValue(["birthdate"], 1, 2))
        True
        >>> configuration.should_ignore(DualValue(["name"], "Jack", "John"))
        False
    """

    def __init__(
        self,
        strict_type_checking: bool = False,
        ignore_all_actual_null_fields: bool = False,
        ignore_all_expected_null_fields: bool = False,
    ):
        self._actual_null_rules = NullValueIgnoreRules(Side.ACTUAL, enabled=ignore_all_actual_null_fields)
        self._expected_null_rules = NullValueIgnoreRules(Side.EXPECTED, enabled=ignore_all_expected_null_fields)
        self._path_rules = FieldPathIgnoreRules()
        self._regex_rules = RegexIgnoreRules()
        self._type_rules = TypeIgnoreRules(strict_type_checking=strict_type_checking)
        self._rules = CompositeIgnoreRules(
            [
                self._actual_null_rules,
                self._expected_null_rules,
                self._path_rules,
                self._regex_rules,
                self._type_rules,
            ]
        )

    @staticmethod
    def builder() -> "ConfigurationBuilder":
        return ConfigurationBuilder()

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "RecursiveComparisonConfiguration":
        """Create a configuration from user-supplied options.

        Recognized keys are ``ignored_fields``, ``ignored_fields_regexes`` and
        ``ignored_types`` (a single value or an iterable of values), and the flags
        ``ignore_all_actual_null_fields``, ``ignore_all_expected_null_fields`` and
        ``strict_type_checking``.

        Raises:
            InvalidArgumentError: If an option name is unknown or a value has the wrong shape.
                Flags must be given as bools, so strings such as "false" are rejected.
            InvalidPathError: If an ignored field path is invalid.
            PatternSyntaxError: If an ignored field regex does not compile.

        Example:
            >>> configuration = RecursiveComparisonConfiguration.from_options(
            ...     {"ignored_fields": ["id", "audit.created"], "strict_type_checking": True}
            ... )
            >>> sorted(location.path for location in configuration.get_ignored_fields())
            ['audit.created', 'id']
            >>> configuration.strict_type_checking
            True
        """
        unknown = sorted(set(options) - set(OPTION_NAMES))
        if unknown:
            raise InvalidArgumentError(unknown, f"Unknown comparison option(s): {', '.join(unknown)}")

        builder = ConfigurationBuilder()
        if OPTION_IGNORED_FIELDS in options:
            builder.with_ignored_fields(*_as_values(OPTION_IGNORED_FIELDS, options[OPTION_IGNORED_FIELDS]))
        if OPTION_IGNORED_FIELDS_REGEXES in options:
            regexes = _as_values(OPTION_IGNORED_FIELDS_REGEXES, options[OPTION_IGNORED_FIELDS_REGEXES])
            builder.with_ignored_fields_matching_regexes(*regexes)
        if OPTION_IGNORED_TYPES in options:
            builder.with_ignored_fields_of_types(*_as_values(OPTION_IGNORED_TYPES, options[OPTION_IGNORED_TYPES]))
        flags = {option: _as_flag(option, options.get(option, False)) for option in FLAG_OPTION_NAMES}
        builder.with_ignore_all_actual_null_fields(flags[OPTION_IGNORE_ALL_ACTUAL_NULL_FIELDS])
        builder.with_ignore_all_expected_null_fields(flags[OPTION_IGNORE_ALL_EXPECTED_NULL_FIELDS])
        builder.with_strict_type_checking(flags[OPTION_STRICT_TYPE_CHECKING])
        return builder.build()

    # Flags

    @property
    def ignore_all_actual_null_fields(self) -> bool:
        return self._actual_null_rules.enabled

    @property
    def ignore_all_expected_null_fields(self) -> bool:
        return self._expected_null_rules.enabled

    @property
    def strict_type_checking(self) -> bool:
        return self._type_rules.strict_type_checking

    def set_ignore_all_actual_null_fields(self, ignore: bool) -> "RecursiveComparisonConfiguration":
        self._actual_null_rules.enabled = ignore
        logger.debug("ignore_all_actual_null_fields set to %s", ignore)
        return self

    def set_ignore_all_expected_null_fields(self, ignore: bool) -> "RecursiveComparisonConfiguration":
        self._expected_null_rules.enabled = ignore
        logger.debug("ignore_all_expected_null_fields set to %s", ignore)
        return self

    def set_strict_type_checking(self, strict: bool) -> "RecursiveComparisonConfiguration":
        self._type_rules.strict_type_checking = strict
        logger.debug("strict_type_checking set to %s", strict)
        return self

    # Registration

    def ignore_fields(self, *paths: str) -> "RecursiveComparisonConfiguration":
        """Ignore the fields at the given dotted paths, e.g. ``"father.name.first"``.

        Only the exact path is matched. Paths already registered are not duplicated.

        Raises:
            InvalidArgumentError: If a path is not a string.
            InvalidPathError: If a path is empty or has an empty segment.
        """
        self._path_rules.add_rules(*paths)
        return self

    def ignore_fields_matching_regexes(self, *regexes: str) -> "RecursiveComparisonConfiguration":
        """Ignore the fields whose whole dotted path matches one of the given regexes.

        Raises:
            InvalidArgumentError: If a regex is not a non-empty string.
            PatternSyntaxError: If a regex does not compile.
        """
        self._regex_rules.add_rules(*regexes)
        return self

    def ignore_fields_of_types(self, *types: TypeDescriptor) -> "RecursiveComparisonConfiguration":
        """Ignore the fields whose value is exactly of one of the given types.

        Types may be Python types or PrimitiveKind members; a kind and its boxed
        type are interchangeable. Subclasses of a registered type are not ignored.

        Raises:
            InvalidArgumentError: If a type is None or not a type descriptor.
        """
        self._type_rules.add_rules(*types)
        return self

    # Introspection

    def get_ignored_fields(self) -> Set[FieldLocation]:
        return self._path_rules.get_locations()

    def get_ignored_fields_regexes(self) -> List[re.Pattern[str]]:
        return self._regex_rules.get_patterns()

    def get_ignored_types(self) -> Set[TypeDescriptor]:
        return self._type_rules.get_types()

    def has_fields_to_ignore(self) -> bool:
        """Check whether any ignore rule is configured."""
        return self._rules.has_rules()

    # Evaluation

    def should_ignore(self, dual_value: DualValue) -> bool:
        """Decide whether differences between the values of ``dual_value`` must be ignored.

        This only reads the configuration and never raises, so it can be called
        concurrently for different pairs once registration is over.
        """
        return self._rules.should_ignore(dual_value)

    def filter_dual_values(self, dual_values: Iterable[DualValue]) -> Iterator[DualValue]:
        """Yield the pairs that are not ignored, preserving their order."""
        for dual_value in dual_values:
            if not self.should_ignore(dual_value):
                yield dual_value

    def describe(self) -> str:
        """Describe the configured ignore rules, one line per active family.

        Example:
            >>> print(RecursiveComparisonConfiguration().ignore_fields("name", "id").describe())
            - the following fields were ignored in the comparison: id, name
        """
        lines = []
        if self.ignore_all_actual_null_fields:
            lines.append("- all actual null fields were ignored in the comparison")
        if self.ignore_all_expected_null_fields:
            lines.append("- all expected null fields were ignored in the comparison")
        if self._path_rules.has_rules():
            paths = sorted(location.path for location in self._path_rules.locations)
            lines.append(f"- the following fields were ignored in the comparison: {', '.join(paths)}")
        if self._regex_rules.has_rules():
            regexes = [pattern.pattern for pattern in self._regex_rules.patterns]
            lines.append(
                f"- the fields matching the following regexes were ignored in the comparison: {', '.join(regexes)}"
            )
        if self._type_rules.has_rules():
            types = sorted(describe_type(descriptor) for descriptor in self._type_rules.types)
            lines.append(f"- the following types were ignored in the comparison: {', '.join(types)}")
        if self.strict_type_checking:
            lines.append(
                "- strict type checking was enforced: fields with a null actual value were ignored by type "
                "when the expected value's type was ignored"
            )
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        paths = sorted(location.path for location in self._path_rules.locations)
        regexes = [pattern.pattern for pattern in self._regex_rules.patterns]
        types = sorted(describe_type(descriptor) for descriptor in self._type_rules.types)
        return (
            f"{self.__class__.__name__}(ignored_fields={paths}, ignored_fields_regexes={regexes}, "
            f"ignored_types={types})"
        )


class ConfigurationBuilder:
    """Builder collecting ignore rules before creating a configuration.

    Every ``with_*`` call validates its arguments immediately, so errors point at
    the offending call rather than at ``build()``. Each ``build()`` returns a new,
    independent configuration.

    Example:
        >>> configuration = (
        ...     RecursiveComparisonConfiguration.builder()
        ...     .with_ignored_fields("id")
        ...     .with_ignored_fields_of_types(PrimitiveKind.FLOAT)
        ...     .build()
        ... )
        >>> configuration.should_ignore(DualValue(["price"], 9.99, 10.0))
        True
    """

    def __init__(self) -> None:
        self._ignored_fields: List[str] = []
        self._ignored_fields_regexes: List[str] = []
        self._ignored_types: List[TypeDescriptor] = []
        self._ignore_all_actual_null_fields = False
        self._ignore_all_expected_null_fields = False
        self._strict_type_checking = False

    def with_ignored_fields(self, *paths: str) -> "ConfigurationBuilder":
        self._ignored_fields.extend([parse_field_path(path).path for path in paths])
        return self

    def with_ignored_fields_matching_regexes(self, *regexes: str) -> "ConfigurationBuilder":
        self._ignored_fields_regexes.extend([compile_field_regex(regex).pattern for regex in regexes])
        return self

    def with_ignored_fields_of_types(self, *types: TypeDescriptor) -> "ConfigurationBuilder":
        self._ignored_types.extend([validate_type_descriptor(descriptor) for descriptor in types])
        return self

    def with_ignore_all_actual_null_fields(self, ignore: bool = True) -> "ConfigurationBuilder":
        self._ignore_all_actual_null_fields = ignore
        return self

    def with_ignore_all_expected_null_fields(self, ignore: bool = True) -> "ConfigurationBuilder":
        self._ignore_all_expected_null_fields = ignore
        return self

    def with_strict_type_checking(self, strict: bool = True) -> "ConfigurationBuilder":
        self._strict_type_checking = strict
        return self

    def build(self) -> RecursiveComparisonConfiguration:
        configuration = RecursiveComparisonConfiguration(
            strict_type_checking=self._strict_type_checking,
            ignore_all_actual_null_fields=self._ignore_all_actual_null_fields,
            ignore_all_expected_null_fields=self._ignore_all_expected_null_fields,
        )
        configuration.ignore_fields(*self._ignored_fields)
        configuration.ignore_fields_matching_regexes(*self._ignored_fields_regexes)
        configuration.ignore_fields_of_types(*self._ignored_types)
        return configuration
