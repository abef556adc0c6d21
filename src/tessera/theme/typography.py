"""Text size presets, font weights, tracking, and leading."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextSize:
    font_size: str
    line_height: str


TEXT_SIZES = {
    "xs": TextSize("0.75rem", "1rem"),
    "sm": TextSize("0.875rem", "1.25rem"),
    "base": TextSize("1rem", "1.5rem"),
    "lg": TextSize("1.125rem", "1.75rem"),
    "xl": TextSize("1.25rem", "1.75rem"),
    "2xl": TextSize("1.5rem", "2rem"),
    "3xl": TextSize("1.875rem", "2.25rem"),
    "4xl": TextSize("2.25rem", "2.5rem"),
    "5xl": TextSize("3rem", "1"),
}

FONT_WEIGHTS = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

TRACKING = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

LEADING = {
    "none": "1",
    "tight": "1.25",
    "snug": "1.375",
    "normal": "1.5",
    "relaxed": "1.625",
    "loose": "2",
}
