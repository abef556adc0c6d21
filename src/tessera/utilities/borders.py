"""Border, radius, and ring utilities."""

from __future__ import annotations

from typing import Union

from tessera.dynamic import DynamicValue, declare, is_dynamic
from tessera.model.rule import Rule, create_rule
from tessera.theme.effects import RADII


def rounded(value: Union[str, DynamicValue, None] = None) -> Rule:
    """Set ``border-radius``; no argument means the default radius."""
    if is_dynamic(value):
        return declare("border-radius", value)
    if value is None:
        return create_rule({"border-radius": RADII["DEFAULT"]})
    return create_rule({"border-radius": RADII.get(value, value)})


def border(width: str = "1px") -> Rule:
    return create_rule({"border-width": width})


def border_t(width: str = "1px") -> Rule:
    return create_rule({"border-top-width": width})


def border_r(width: str = "1px") -> Rule:
    return create_rule({"border-right-width": width})


def border_b(width: str = "1px") -> Rule:
    return create_rule({"border-bottom-width": width})


def border_l(width: str = "1px") -> Rule:
    return create_rule({"border-left-width": width})


def border_style(value: str) -> Rule:
    return create_rule({"border-style": value})


def ring(width: str = "3px", color: str = "#3b82f6") -> Rule:
    return create_rule({"box-shadow": f"0 0 0 {width} {color}"})
