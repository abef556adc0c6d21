"""Tessera model layer -- public type re-exports."""

from tessera.model.diagnostic import Diagnostic, DiagnosticKind, Severity
from tessera.model.rule import (
    Modifier,
    Rule,
    combine_rules,
    create_dynamic_rule,
    create_rule,
    with_declaration_default,
    with_layer,
    wrap_with_media_query,
    wrap_with_selector,
    wrap_with_selector_template,
    wrap_with_supports_query,
)

__all__ = [
    # rule
    "Rule",
    "Modifier",
    "create_rule",
    "create_dynamic_rule",
    "combine_rules",
    "wrap_with_selector",
    "wrap_with_media_query",
    "wrap_with_supports_query",
    "wrap_with_selector_template",
    "with_declaration_default",
    "with_layer",
    # diagnostic
    "Severity",
    "DiagnosticKind",
    "Diagnostic",
]
