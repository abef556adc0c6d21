"""Pseudo-class modifiers (``:hover``, ``:focus``, ...)."""

from __future__ import annotations

from tessera.model.rule import Modifier
from tessera.modifiers._base import selector_modifier

hover = selector_modifier(":hover")
focus = selector_modifier(":focus")
active = selector_modifier(":active")
disabled = selector_modifier(":disabled")
focus_visible = selector_modifier(":focus-visible")
focus_within = selector_modifier(":focus-within")
first_child = selector_modifier(":first-child")
last_child = selector_modifier(":last-child")
visited = selector_modifier(":visited")
checked = selector_modifier(":checked")
indeterminate = selector_modifier(":indeterminate")
default = selector_modifier(":default")
required = selector_modifier(":required")
valid = selector_modifier(":valid")
invalid = selector_modifier(":invalid")
in_range = selector_modifier(":in-range")
out_of_range = selector_modifier(":out-of-range")
placeholder_shown = selector_modifier(":placeholder-shown")
autofill = selector_modifier(":autofill")
read_only = selector_modifier(":read-only")
empty = selector_modifier(":empty")
even = selector_modifier(":nth-child(even)")
odd = selector_modifier(":nth-child(odd)")
first_of_type = selector_modifier(":first-of-type")
last_of_type = selector_modifier(":last-of-type")
only_child = selector_modifier(":only-child")
only_of_type = selector_modifier(":only-of-type")
target = selector_modifier(":target")
open_ = selector_modifier("[open]")


def has(selector: str) -> Modifier:
    """Match when the element contains something matching *selector*."""
    return selector_modifier(f":has({selector})")
