"""Rule metadata and message catalogs."""

from .builtin import (
    array_rule,
    number_rule,
    object_rule,
    required_rule,
    string_not_empty_rule,
    string_rule,
    unexpected_field_rule,
)
from .catalog import CATALOG_ENV_VAR, RuleCatalog
from .rule import Rule, RuleHint, RuleSet

__all__ = [
    "CATALOG_ENV_VAR",
    "Rule",
    "RuleCatalog",
    "RuleHint",
    "RuleSet",
    "array_rule",
    "number_rule",
    "object_rule",
    "required_rule",
    "string_not_empty_rule",
    "string_rule",
    "unexpected_field_rule",
]
