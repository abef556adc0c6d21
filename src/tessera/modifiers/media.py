"""User-preference and device media modifiers."""

from __future__ import annotations

from tessera.modifiers._base import media_modifier

dark = media_modifier("(prefers-color-scheme: dark)")
motion_reduce = media_modifier("(prefers-reduced-motion: reduce)")
motion_safe = media_modifier("(prefers-reduced-motion: no-preference)")
print_ = media_modifier("print")
portrait = media_modifier("(orientation: portrait)")
landscape = media_modifier("(orientation: landscape)")
contrast_more = media_modifier("(prefers-contrast: more)")
contrast_less = media_modifier("(prefers-contrast: less)")
forced_colors = media_modifier("(forced-colors: active)")
