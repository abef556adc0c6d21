"""Width/height keywords on top of the spacing scale."""

from __future__ import annotations

import re

from tessera.theme.spacing import resolve_spacing

SIZES = {
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
    "auto": "auto",
}

_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")


def resolve_size(value: int | float | str, screen: str = "100vw") -> str:
    """Resolve ``4``, ``"full"``, ``"screen"``, or ``"1/2"`` to a CSS length."""
    if value == "screen":
        return screen
    if isinstance(value, str):
        if value in SIZES:
            return SIZES[value]
        match = _FRACTION_RE.match(value)
        if match:
            num, den = int(match.group(1)), int(match.group(2))
            return f"{num / den * 100:g}%"
    return resolve_spacing(value)
