"""Pseudo-element modifiers.

``before`` and ``after`` need a ``content`` declaration to render at all,
so they add ``content: ""`` unless the rule already sets one.
"""

from __future__ import annotations

from tessera.model.rule import Rule, with_declaration_default, wrap_with_selector
from tessera.modifiers._base import selector_modifier


def before(rule: Rule) -> Rule:
    return with_declaration_default(wrap_with_selector(rule, "::before"), "content", '""')


def after(rule: Rule) -> Rule:
    return with_declaration_default(wrap_with_selector(rule, "::after"), "content", '""')


placeholder = selector_modifier("::placeholder")
file = selector_modifier("::file-selector-button")
marker = selector_modifier("::marker")
selection = selector_modifier("::selection")
first_line = selector_modifier("::first-line")
first_letter = selector_modifier("::first-letter")
backdrop = selector_modifier("::backdrop")
