"""Group, peer, and direction modifiers.

These match on another element's state, so the generated class is not a
simple suffix target. They render through a selector template instead:
``.group:hover &`` becomes ``.group:hover .tcabc``.
"""

from __future__ import annotations

from tessera.model.rule import Modifier
from tessera.modifiers._base import template_modifier

group_hover = template_modifier(".group:hover &")
group_focus = template_modifier(".group:focus &")
group_active = template_modifier(".group:active &")
group_focus_visible = template_modifier(".group:focus-visible &")
group_focus_within = template_modifier(".group:focus-within &")
group_disabled = template_modifier(".group:disabled &")
group_checked = template_modifier(".group:checked &")
group_empty = template_modifier(".group:empty &")
group_first = template_modifier(".group:first-child &")
group_last = template_modifier(".group:last-child &")
group_odd = template_modifier(".group:nth-child(odd) &")
group_even = template_modifier(".group:nth-child(even) &")
group_open = template_modifier(".group[open] &")
group_visited = template_modifier(".group:visited &")

peer_hover = template_modifier(".peer:hover ~ &")
peer_focus = template_modifier(".peer:focus ~ &")
peer_active = template_modifier(".peer:active ~ &")
peer_focus_visible = template_modifier(".peer:focus-visible ~ &")
peer_focus_within = template_modifier(".peer:focus-within ~ &")
peer_disabled = template_modifier(".peer:disabled ~ &")
peer_checked = template_modifier(".peer:checked ~ &")
peer_invalid = template_modifier(".peer:invalid ~ &")
peer_required = template_modifier(".peer:required ~ &")
peer_placeholder_shown = template_modifier(".peer:placeholder-shown ~ &")
peer_empty = template_modifier(".peer:empty ~ &")
peer_first = template_modifier(".peer:first-child ~ &")
peer_last = template_modifier(".peer:last-child ~ &")
peer_odd = template_modifier(".peer:nth-child(odd) ~ &")
peer_even = template_modifier(".peer:nth-child(even) ~ &")
peer_open = template_modifier(".peer[open] ~ &")
peer_visited = template_modifier(".peer:visited ~ &")

rtl = template_modifier('[dir="rtl"] &')
ltr = template_modifier('[dir="ltr"] &')


def group_has(selector: str) -> Modifier:
    return template_modifier(f".group:has({selector}) &")


def peer_has(selector: str) -> Modifier:
    return template_modifier(f".peer:has({selector}) ~ &")
