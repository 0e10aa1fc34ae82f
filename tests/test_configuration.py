"""Tests for configuring a RecursiveComparisonConfiguration."""

import re
import uuid

import pytest

from recursive_compare.configuration import ConfigurationBuilder, RecursiveComparisonConfiguration, describe_type
from recursive_compare.dual_value import DualValue
from recursive_compare.exceptions import InvalidArgumentError, InvalidPathError, PatternSyntaxError
from recursive_compare.primitives import PrimitiveKind


class Person:
    pass


def dual_value(actual, expected):
    return DualValue([f"field_{uuid.uuid4().hex}"], actual, expected)


def dual_value_at(*segments):
    return DualValue(segments, "actual", "expected")


class TestDefaults:
    """Test the state of a freshly created configuration."""

    def test_flags_default_to_false(self, configuration):
        assert configuration.ignore_all_actual_null_fields is False
        assert configuration.ignore_all_expected_null_fields is False
        assert configuration.strict_type_checking is False

    def test_no_rules_registered(self, configuration):
        assert configuration.get_ignored_fields() == set()
        assert configuration.get_ignored_fields_regexes() == []
        assert configuration.get_ignored_types() == set()
        assert not configuration.has_fields_to_ignore()

    def test_constructor_flags(self):
        configuration = RecursiveComparisonConfiguration(
            strict_type_checking=True,
            ignore_all_actual_null_fields=True,
            ignore_all_expected_null_fields=True,
        )

        assert configuration.strict_type_checking
        assert configuration.ignore_all_actual_null_fields
        assert configuration.ignore_all_expected_null_fields


class TestRegistration:
    """Test registration calls and their validation."""

    def test_registration_calls_are_chainable(self, configuration):
        result = (
            configuration.ignore_fields("id")
            .ignore_fields_matching_regexes(".*date")
            .ignore_fields_of_types(uuid.UUID)
            .set_ignore_all_actual_null_fields(True)
            .set_ignore_all_expected_null_fields(True)
            .set_strict_type_checking(True)
        )

        assert result is configuration

    def test_flag_setters_overwrite(self, configuration):
        configuration.set_ignore_all_actual_null_fields(True)
        configuration.set_ignore_all_actual_null_fields(False)

        assert not configuration.should_ignore(dual_value(None, "John"))

    @pytest.mark.parametrize("path", ["", ".", "name.", ".name", "father..name"])
    def test_invalid_paths_are_rejected(self, configuration, path):
        with pytest.raises(InvalidPathError):
            configuration.ignore_fields(path)

    @pytest.mark.parametrize("path", [None, 1, ["name"]])
    def test_non_string_paths_are_rejected(self, configuration, path):
        with pytest.raises(InvalidArgumentError, match="Field paths must be strings"):
            configuration.ignore_fields(path)

    def test_failed_path_registration_leaves_fields_unchanged(self, configuration):
        configuration.ignore_fields("id")

        with pytest.raises(InvalidPathError):
            configuration.ignore_fields("name", "father..name")

        assert {location.path for location in configuration.get_ignored_fields()} == {"id"}

    @pytest.mark.parametrize("regex", ["", None, 42])
    def test_invalid_regex_arguments_are_rejected(self, configuration, regex):
        with pytest.raises(InvalidArgumentError, match="Field regexes must be non-empty strings"):
            configuration.ignore_fields_matching_regexes(regex)

    def test_malformed_regex_raises_pattern_syntax_error(self, configuration):
        with pytest.raises(PatternSyntaxError) as exc_info:
            configuration.ignore_fields_matching_regexes("name[")

        assert exc_info.value.pattern == "name["
        assert isinstance(exc_info.value, re.error)
        assert isinstance(exc_info.value.__cause__, re.error)

    def test_failed_regex_registration_leaves_regexes_unchanged(self, configuration):
        configuration.ignore_fields_matching_regexes("foo")

        with pytest.raises(PatternSyntaxError):
            configuration.ignore_fields_matching_regexes("bar", "(baz")

        assert [pattern.pattern for pattern in configuration.get_ignored_fields_regexes()] == ["foo"]

    @pytest.mark.parametrize("descriptor", [None, "str", 1, uuid.uuid4()])
    def test_invalid_types_are_rejected(self, configuration, descriptor):
        with pytest.raises(InvalidArgumentError):
            configuration.ignore_fields_of_types(descriptor)

    def test_failed_type_registration_leaves_types_unchanged(self, configuration):
        configuration.ignore_fields_of_types(str)

        with pytest.raises(InvalidArgumentError, match="must not be None"):
            configuration.ignore_fields_of_types(uuid.UUID, None)

        assert configuration.get_ignored_types() == {str}

    def test_accessors_return_copies(self, configuration):
        configuration.ignore_fields("id").ignore_fields_matching_regexes("foo").ignore_fields_of_types(str)

        configuration.get_ignored_fields().clear()
        configuration.get_ignored_fields_regexes().clear()
        configuration.get_ignored_types().clear()

        assert len(configuration.get_ignored_fields()) == 1
        assert len(configuration.get_ignored_fields_regexes()) == 1
        assert len(configuration.get_ignored_types()) == 1

    @pytest.mark.parametrize(
        "configure",
        [
            lambda c: c.ignore_fields("id"),
            lambda c: c.ignore_fields_matching_regexes("id"),
            lambda c: c.ignore_fields_of_types(str),
            lambda c: c.set_ignore_all_actual_null_fields(True),
            lambda c: c.set_ignore_all_expected_null_fields(True),
        ],
    )
    def test_has_fields_to_ignore(self, configuration, configure):
        configure(configuration)

        assert configuration.has_fields_to_ignore()

    def test_strict_type_checking_alone_ignores_nothing(self, configuration):
        configuration.set_strict_type_checking(True)

        assert not configuration.has_fields_to_ignore()


class TestFilterDualValues:
    """Test filtering a stream of pairs."""

    def test_yields_pairs_that_are_not_ignored_in_order(self, configuration):
        configuration.ignore_fields("id").set_ignore_all_actual_null_fields(True)
        pairs = [dual_value_at("name"), dual_value_at("id"), dual_value(None, 1), dual_value_at("age")]

        kept = list(configuration.filter_dual_values(pairs))

        assert kept == [pairs[0], pairs[3]]


class TestDescribe:
    """Test the human-readable description of a configuration."""

    def test_empty_configuration(self, configuration):
        assert configuration.describe() == ""

    def test_every_active_family_is_described(self, configuration):
        configuration.ignore_fields("name", "id")
        configuration.ignore_fields_matching_regexes(".*date", "foo")
        configuration.ignore_fields_of_types(uuid.UUID, str, PrimitiveKind.BOOLEAN)
        configuration.set_ignore_all_actual_null_fields(True)
        configuration.set_ignore_all_expected_null_fields(True)
        configuration.set_strict_type_checking(True)

        lines = configuration.describe().splitlines()

        assert lines[:5] == [
            "- all actual null fields were ignored in the comparison",
            "- all expected null fields were ignored in the comparison",
            "- the following fields were ignored in the comparison: id, name",
            "- the fields matching the following regexes were ignored in the comparison: .*date, foo",
            "- the following types were ignored in the comparison: boolean, str, uuid.UUID",
        ]
        assert lines[5].startswith("- strict type checking was enforced")

    def test_str_is_description(self, configuration):
        configuration.ignore_fields("id")

        assert str(configuration) == configuration.describe()

    def test_repr(self, configuration):
        configuration.ignore_fields("id").ignore_fields_of_types(uuid.UUID)

        assert repr(configuration) == (
            "RecursiveComparisonConfiguration(ignored_fields=['id'], ignored_fields_regexes=[], "
            "ignored_types=['uuid.UUID'])"
        )

    def test_describe_type_of_local_class(self):
        assert describe_type(Person) == f"{__name__}.Person"


class TestBuilder:
    """Test ConfigurationBuilder."""

    def test_builder_factory(self):
        assert isinstance(RecursiveComparisonConfiguration.builder(), ConfigurationBuilder)

    def test_build_applies_every_setting(self):
        configuration = (
            RecursiveComparisonConfiguration.builder()
            .with_ignored_fields("id", "id", "father.name")
            .with_ignored_fields_matching_regexes(".*date")
            .with_ignored_fields_of_types(uuid.UUID)
            .with_ignore_all_actual_null_fields()
            .with_ignore_all_expected_null_fields()
            .with_strict_type_checking()
            .build()
        )

        assert {location.path for location in configuration.get_ignored_fields()} == {"id", "father.name"}
        assert [pattern.pattern for pattern in configuration.get_ignored_fields_regexes()] == [".*date"]
        assert configuration.get_ignored_types() == {uuid.UUID}
        assert configuration.ignore_all_actual_null_fields
        assert configuration.ignore_all_expected_null_fields
        assert configuration.strict_type_checking

    def test_build_returns_independent_configurations(self):
        builder = ConfigurationBuilder().with_ignored_fields("id")

        first = builder.build()
        second = builder.build()
        first.ignore_fields("name")

        assert first is not second
        assert {location.path for location in second.get_ignored_fields()} == {"id"}

    def test_builder_validates_eagerly(self):
        builder = ConfigurationBuilder()

        with pytest.raises(InvalidPathError):
            builder.with_ignored_fields("id", "")
        with pytest.raises(PatternSyntaxError):
            builder.with_ignored_fields_matching_regexes("(")
        with pytest.raises(InvalidArgumentError):
            builder.with_ignored_fields_of_types(None)

        assert not builder.build().has_fields_to_ignore()


class TestFromOptions:
    """Test creating a configuration from user-supplied options."""

    def test_all_options(self):
        configuration = RecursiveComparisonConfiguration.from_options(
            {
                "ignored_fields": ["id", "father.name"],
                "ignored_fields_regexes": [".*date"],
                "ignored_types": [uuid.UUID, PrimitiveKind.FLOAT],
                "ignore_all_actual_null_fields": True,
                "ignore_all_expected_null_fields": True,
                "strict_type_checking": True,
            }
        )

        assert {location.path for location in configuration.get_ignored_fields()} == {"id", "father.name"}
        assert [pattern.pattern for pattern in configuration.get_ignored_fields_regexes()] == [".*date"]
        assert configuration.get_ignored_types() == {uuid.UUID, PrimitiveKind.FLOAT}
        assert configuration.ignore_all_actual_null_fields
        assert configuration.ignore_all_expected_null_fields
        assert configuration.strict_type_checking

    def test_single_values(self):
        configuration = RecursiveComparisonConfiguration.from_options(
            {"ignored_fields": "id", "ignored_fields_regexes": ".*date", "ignored_types": str}
        )

        assert configuration.should_ignore(dual_value_at("id"))
        assert configuration.should_ignore(dual_value_at("birthdate"))
        assert configuration.should_ignore(dual_value("actual", "expected"))

    def test_empty_options(self):
        configuration = RecursiveComparisonConfiguration.from_options({})

        assert not configuration.has_fields_to_ignore()
        assert not configuration.strict_type_checking

    def test_unknown_option(self):
        with pytest.raises(InvalidArgumentError, match="Unknown comparison option\\(s\\): ignored_feilds"):
            RecursiveComparisonConfiguration.from_options({"ignored_feilds": ["id"]})

    def test_value_of_wrong_shape(self):
        with pytest.raises(InvalidArgumentError, match="expects a single value or an iterable of values"):
            RecursiveComparisonConfiguration.from_options({"ignored_fields": 42})

    @pytest.mark.parametrize(
        "option, value",
        [
            ("strict_type_checking", "false"),
            ("ignore_all_actual_null_fields", "true"),
            ("ignore_all_expected_null_fields", 1),
            ("strict_type_checking", None),
        ],
    )
    def test_non_bool_flag_is_rejected(self, option, value):
        with pytest.raises(InvalidArgumentError, match=f"Option '{option}' expects a bool"):
            RecursiveComparisonConfiguration.from_options({option: value})

    def test_string_false_does_not_enable_strict_type_checking(self):
        with pytest.raises(InvalidArgumentError):
            RecursiveComparisonConfiguration.from_options({"ignored_fields": ["id"], "strict_type_checking": "false"})

    def test_equivalent_to_builder(self):
        from_options = RecursiveComparisonConfiguration.from_options(
            {"ignored_fields": ["id"], "ignored_types": [str], "strict_type_checking": True}
        )
        from_builder = (
            RecursiveComparisonConfiguration.builder()
            .with_ignored_fields("id")
            .with_ignored_fields_of_types(str)
            .with_strict_type_checking()
            .build()
        )

        assert repr(from_options) == repr(from_builder)
        assert from_options.describe() == from_builder.describe()
