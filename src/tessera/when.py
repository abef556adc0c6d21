"""Conditional application of modifiers to rules."""

from __future__ import annotations

from typing import Callable

from tessera.model.rule import Modifier, Rule, combine_rules


def apply_modifiers(rule: Rule, modifiers: tuple[Modifier, ...] | list[Modifier]) -> Rule:
    """Apply *modifiers* right to left: the last one wraps innermost."""
    for modifier in reversed(modifiers):
        rule = modifier(rule)
    return rule


def when(*modifiers: Modifier) -> Callable[..., Rule]:
    """Return a function that merges rules and wraps them in *modifiers*.

    ``when(hover, md)(bg("blue"), p(8))`` yields one rule rendered as
    ``@media (min-width: 768px) { .x:hover { ... } }``. Wrapping nests by
    query kind at render time (media outside supports outside selectors);
    the first modifier of each kind ends up outermost.
    """

    def apply(*rules: Rule) -> Rule:
        return apply_modifiers(combine_rules(rules), modifiers)

    return apply
