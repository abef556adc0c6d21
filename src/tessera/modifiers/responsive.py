"""Breakpoint modifiers. ``sm``..``_2xl`` are min-width, ``max_*`` max-width."""

from __future__ import annotations

from tessera.modifiers._base import media_modifier

sm = media_modifier("(min-width: 640px)")
md = media_modifier("(min-width: 768px)")
lg = media_modifier("(min-width: 1024px)")
xl = media_modifier("(min-width: 1280px)")
_2xl = media_modifier("(min-width: 1536px)")

max_sm = media_modifier("(max-width: 639px)")
max_md = media_modifier("(max-width: 767px)")
max_lg = media_modifier("(max-width: 1023px)")
max_xl = media_modifier("(max-width: 1279px)")
max_2xl = media_modifier("(max-width: 1535px)")
