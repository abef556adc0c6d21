"""Spacing scale: a step of 1 is 0.25rem."""

from __future__ import annotations

_NAMED = {"px": "1px", "auto": "auto", "full": "100%"}


def format_rem(value: float) -> str:
    if value == 0:
        return "0px"
    return f"{value:g}rem"


def resolve_spacing(value: int | float | str) -> str:
    """Map a scale step to a length; strings other than named steps pass through."""
    if isinstance(value, bool):
        raise TypeError("spacing step must be a number or string")
    if isinstance(value, (int, float)):
        return format_rem(value * 0.25)
    return _NAMED.get(value, value)
