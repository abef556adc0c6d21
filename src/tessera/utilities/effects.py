"""Shadow and opacity utilities."""

from __future__ import annotations

from typing import Union

from tessera.dynamic import DynamicValue, declare, is_dynamic
from tessera.model.rule import Rule, create_rule
from tessera.theme.effects import SHADOWS


def shadow(value: Union[str, DynamicValue, None] = None) -> Rule:
    if is_dynamic(value):
        return declare("box-shadow", value)
    if value is None:
        return create_rule({"box-shadow": SHADOWS["DEFAULT"]})
    return create_rule({"box-shadow": SHADOWS.get(value, value)})


def opacity(value: Union[int, float, str, DynamicValue]) -> Rule:
    return declare("opacity", value)
