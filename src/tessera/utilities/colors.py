"""Color utilities. Values are raw CSS colors or dynamic values."""

from __future__ import annotations

from typing import Union

from tessera.dynamic import DynamicValue, declare
from tessera.model.rule import Rule

ColorInput = Union[str, DynamicValue]


def bg(color: ColorInput) -> Rule:
    """Set ``background-color``.

    ``bg("#3b82f6")`` inlines the color; ``bg(dynamic(color))`` emits
    ``var(--tc-dN)`` and leaves the value to the inline style.
    """
    return declare("background-color", color)


def text_color(color: ColorInput) -> Rule:
    return declare("color", color)


def border_color(color: ColorInput) -> Rule:
    return declare("border-color", color)
