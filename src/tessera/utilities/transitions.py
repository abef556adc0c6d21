"""Transition presets and timing utilities.

Presets set property, timing function, and duration together; ``duration``,
``ease`` and ``delay`` refine a preset afterwards.
"""

from __future__ import annotations

from typing import Union

from tessera.dynamic import DynamicValue, declare, is_dynamic
from tessera.model.rule import Rule, create_rule
from tessera.theme.effects import DEFAULT_DURATION, DEFAULT_EASING, EASINGS

_COLORS = "color, background-color, border-color, text-decoration-color, fill, stroke"


def _preset(properties: str) -> Rule:
    return create_rule({
        "transition-property": properties,
        "transition-timing-function": DEFAULT_EASING,
        "transition-duration": DEFAULT_DURATION,
    })


def transition() -> Rule:
    return _preset(f"{_COLORS}, opacity, box-shadow, transform, filter, backdrop-filter")


def transition_all() -> Rule:
    return _preset("all")


def transition_colors() -> Rule:
    return _preset(_COLORS)


def transition_opacity() -> Rule:
    return _preset("opacity")


def transition_shadow() -> Rule:
    return _preset("box-shadow")


def transition_transform() -> Rule:
    return _preset("transform")


def transition_none() -> Rule:
    return create_rule({"transition-property": "none"})


def _ms(value: Union[int, float, str]) -> str:
    return f"{value:g}ms" if isinstance(value, (int, float)) else value


def duration(value: Union[int, str, DynamicValue]) -> Rule:
    """Integers are milliseconds: ``duration(300)`` is ``300ms``."""
    if is_dynamic(value):
        return declare("transition-duration", value)
    return create_rule({"transition-duration": _ms(value)})


def ease(value: Union[str, DynamicValue] = "in-out") -> Rule:
    if is_dynamic(value):
        return declare("transition-timing-function", value)
    return create_rule({"transition-timing-function": EASINGS.get(value, value)})


def delay(value: Union[int, str, DynamicValue]) -> Rule:
    if is_dynamic(value):
        return declare("transition-delay", value)
    return create_rule({"transition-delay": _ms(value)})
