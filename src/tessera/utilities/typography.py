"""Font and text utilities."""

from __future__ import annotations

from typing import Union

from tessera.dynamic import DynamicValue, declare, is_dynamic
from tessera.model.rule import Rule, create_rule
from tessera.theme.typography import FONT_WEIGHTS, LEADING, TEXT_SIZES, TRACKING, TextSize


def text(value: Union[TextSize, str, DynamicValue]) -> Rule:
    """Set the font size.

    Presets (``"lg"`` or a :class:`TextSize`) also set ``line-height``;
    raw lengths and dynamic values set ``font-size`` only.
    """
    if is_dynamic(value):
        return declare("font-size", value)
    if isinstance(value, str):
        if value not in TEXT_SIZES:
            return create_rule({"font-size": value})
        value = TEXT_SIZES[value]
    return create_rule({"font-size": value.font_size, "line-height": value.line_height})


def font(weight: Union[str, int, DynamicValue]) -> Rule:
    if is_dynamic(weight):
        return declare("font-weight", weight)
    return create_rule({"font-weight": FONT_WEIGHTS.get(str(weight), str(weight))})


def tracking(value: Union[str, DynamicValue]) -> Rule:
    if is_dynamic(value):
        return declare("letter-spacing", value)
    return create_rule({"letter-spacing": TRACKING.get(value, value)})


def leading(value: Union[str, int, float, DynamicValue]) -> Rule:
    if is_dynamic(value):
        return declare("line-height", value)
    return create_rule({"line-height": LEADING.get(str(value), str(value))})


def text_align(value: str) -> Rule:
    return create_rule({"text-align": value})


def italic() -> Rule:
    return create_rule({"font-style": "italic"})


def not_italic() -> Rule:
    return create_rule({"font-style": "normal"})


def uppercase() -> Rule:
    return create_rule({"text-transform": "uppercase"})


def lowercase() -> Rule:
    return create_rule({"text-transform": "lowercase"})


def truncate() -> Rule:
    return create_rule({
        "overflow": "hidden",
        "text-overflow": "ellipsis",
        "white-space": "nowrap",
    })


def content(value: str = '""') -> Rule:
    """Set ``content``; the value is emitted as given, quotes included."""
    return create_rule({"content": value})
