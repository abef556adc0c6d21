"""Modifier factories shared by the modifier modules."""

from __future__ import annotations

from tessera.model.rule import (
    Modifier,
    Rule,
    wrap_with_media_query,
    wrap_with_selector,
    wrap_with_selector_template,
    wrap_with_supports_query,
)


def selector_modifier(selector: str) -> Modifier:
    """Modifier appending *selector* directly after the class name."""

    def modifier(rule: Rule) -> Rule:
        return wrap_with_selector(rule, selector)

    modifier.__qualname__ = f"selector_modifier({selector!r})"
    return modifier


def media_modifier(query: str) -> Modifier:
    def modifier(rule: Rule) -> Rule:
        return wrap_with_media_query(rule, query)

    modifier.__qualname__ = f"media_modifier({query!r})"
    return modifier


def supports_modifier(query: str) -> Modifier:
    def modifier(rule: Rule) -> Rule:
        return wrap_with_supports_query(rule, query)

    modifier.__qualname__ = f"supports_modifier({query!r})"
    return modifier


def template_modifier(template: str) -> Modifier:
    """Modifier rendering the rule through *template* (``&`` is the class)."""

    def modifier(rule: Rule) -> Rule:
        return wrap_with_selector_template(rule, template)

    modifier.__qualname__ = f"template_modifier({template!r})"
    return modifier
