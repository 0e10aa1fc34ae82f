"""Ignore rules deciding which compared fields are left out of a comparison."""

from .base_rules import BaseIgnoreRules
from .composite_rules import CompositeIgnoreRules
from .null_rules import NullValueIgnoreRules
from .path_rules import FieldPathIgnoreRules, parse_field_path
from .regex_rules import RegexIgnoreRules, compile_field_regex
from .type_rules import TypeIgnoreRules, validate_type_descriptor

__all__ = [
    "BaseIgnoreRules",
    "CompositeIgnoreRules",
    "FieldPathIgnoreRules",
    "NullValueIgnoreRules",
    "RegexIgnoreRules",
    "TypeIgnoreRules",
    "compile_field_regex",
    "parse_field_path",
    "validate_type_descriptor",
]
