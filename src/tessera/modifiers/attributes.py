"""ARIA and data-attribute modifiers."""

from __future__ import annotations

from tessera.model.rule import Modifier
from tessera.modifiers._base import selector_modifier

aria_checked = selector_modifier('[aria-checked="true"]')
aria_disabled = selector_modifier('[aria-disabled="true"]')
aria_expanded = selector_modifier('[aria-expanded="true"]')
aria_hidden = selector_modifier('[aria-hidden="true"]')
aria_pressed = selector_modifier('[aria-pressed="true"]')
aria_readonly = selector_modifier('[aria-readonly="true"]')
aria_required = selector_modifier('[aria-required="true"]')
aria_selected = selector_modifier('[aria-selected="true"]')


def aria(attr: str) -> Modifier:
    """``aria("busy")`` matches ``[aria-busy]``; pass ``'busy="true"'`` for a value."""
    return selector_modifier(f"[aria-{attr}]")


def data(attr: str) -> Modifier:
    return selector_modifier(f"[data-{attr}]")
