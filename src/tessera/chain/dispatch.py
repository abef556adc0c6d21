"""Dispatch table for the chain builder: attribute name -> handler.

The builder never guesses what a name means. It looks the name up here
and, when nothing matches, treats it as a literal class name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from tessera import modifiers as mods
from tessera import utilities as u


class HandlerKind(Enum):
    STYLE = "style"  # zero-argument utility
    RAW = "raw"  # literal class name
    UTILITY = "utility"  # utility taking arguments
    MODIFIER = "modifier"
    PARAM_MODIFIER = "param_modifier"  # factory(args) -> modifier


@dataclass(frozen=True)
class Handler:
    kind: HandlerKind
    target: Callable | str


STYLES: dict[str, Callable] = {
    # layout
    "flex": u.flex, "inline_flex": u.inline_flex, "block": u.block,
    "inline_block": u.inline_block, "hidden": u.hidden,
    "flex_col": u.flex_col, "flex_row": u.flex_row, "flex_wrap": u.flex_wrap,
    "flex_1": u.flex_1,
    "static": u.static, "relative": u.relative, "absolute": u.absolute,
    "fixed": u.fixed, "sticky": u.sticky,
    # typography
    "italic": u.italic, "not_italic": u.not_italic, "uppercase": u.uppercase,
    "lowercase": u.lowercase, "truncate": u.truncate,
    # transitions
    "transition": u.transition, "transition_all": u.transition_all,
    "transition_colors": u.transition_colors,
    "transition_opacity": u.transition_opacity,
    "transition_shadow": u.transition_shadow,
    "transition_transform": u.transition_transform,
    "transition_none": u.transition_none,
}

RAW: dict[str, str] = {
    "group": "group",
    "peer": "peer",
}

UTILITIES: dict[str, Callable] = {
    # spacing
    "p": u.p, "px": u.px, "py": u.py, "pt": u.pt, "pr": u.pr, "pb": u.pb, "pl": u.pl,
    "m": u.m, "mx": u.mx, "my": u.my, "mt": u.mt, "mr": u.mr, "mb": u.mb, "ml": u.ml,
    "gap": u.gap, "gap_x": u.gap_x, "gap_y": u.gap_y,
    # colors
    "bg": u.bg, "text_color": u.text_color, "border_color": u.border_color,
    # layout
    "display": u.display, "grow": u.grow, "shrink": u.shrink,
    "items": u.items, "justify": u.justify, "self": u.self_,
    "grid": u.grid, "grid_cols": u.grid_cols, "grid_rows": u.grid_rows,
    "w": u.w, "h": u.h, "size": u.size,
    "min_w": u.min_w, "min_h": u.min_h, "max_w": u.max_w, "max_h": u.max_h,
    "overflow": u.overflow, "overflow_x": u.overflow_x, "overflow_y": u.overflow_y,
    "top": u.top, "right": u.right, "bottom": u.bottom, "left": u.left,
    "inset": u.inset, "z": u.z,
    # typography
    "text": u.text, "font": u.font, "tracking": u.tracking, "leading": u.leading,
    "text_align": u.text_align, "content": u.content,
    # borders
    "rounded": u.rounded, "border": u.border, "border_t": u.border_t,
    "border_r": u.border_r, "border_b": u.border_b, "border_l": u.border_l,
    "border_style": u.border_style, "ring": u.ring,
    # effects
    "shadow": u.shadow, "opacity": u.opacity,
    # transitions
    "duration": u.duration, "ease": u.ease, "delay": u.delay,
    # interactivity
    "cursor": u.cursor, "select": u.select, "pointer_events": u.pointer_events,
}

MODIFIERS: dict[str, Callable] = {
    # pseudo-classes
    "hover": mods.hover, "focus": mods.focus, "active": mods.active,
    "disabled": mods.disabled, "focus_visible": mods.focus_visible,
    "focus_within": mods.focus_within, "first_child": mods.first_child,
    "last_child": mods.last_child, "visited": mods.visited, "checked": mods.checked,
    "indeterminate": mods.indeterminate, "default": mods.default,
    "required": mods.required, "valid": mods.valid, "invalid": mods.invalid,
    "in_range": mods.in_range, "out_of_range": mods.out_of_range,
    "placeholder_shown": mods.placeholder_shown, "autofill": mods.autofill,
    "read_only": mods.read_only, "empty": mods.empty, "even": mods.even,
    "odd": mods.odd, "first_of_type": mods.first_of_type,
    "last_of_type": mods.last_of_type, "only_child": mods.only_child,
    "only_of_type": mods.only_of_type, "target": mods.target, "open": mods.open_,
    # responsive
    "sm": mods.sm, "md": mods.md, "lg": mods.lg, "xl": mods.xl, "_2xl": mods._2xl,
    "max_sm": mods.max_sm, "max_md": mods.max_md, "max_lg": mods.max_lg,
    "max_xl": mods.max_xl, "max_2xl": mods.max_2xl,
    # media
    "dark": mods.dark, "motion_reduce": mods.motion_reduce,
    "motion_safe": mods.motion_safe, "print": mods.print_,
    "portrait": mods.portrait, "landscape": mods.landscape,
    "contrast_more": mods.contrast_more, "contrast_less": mods.contrast_less,
    "forced_colors": mods.forced_colors,
    # pseudo-elements
    "before": mods.before, "after": mods.after, "placeholder": mods.placeholder,
    "file": mods.file, "marker": mods.marker, "selection": mods.selection,
    "first_line": mods.first_line, "first_letter": mods.first_letter,
    "backdrop": mods.backdrop,
    # aria
    "aria_checked": mods.aria_checked, "aria_disabled": mods.aria_disabled,
    "aria_expanded": mods.aria_expanded, "aria_hidden": mods.aria_hidden,
    "aria_pressed": mods.aria_pressed, "aria_readonly": mods.aria_readonly,
    "aria_required": mods.aria_required, "aria_selected": mods.aria_selected,
    # group / peer / direction
    "group_hover": mods.group_hover, "group_focus": mods.group_focus,
    "group_active": mods.group_active, "group_focus_visible": mods.group_focus_visible,
    "group_focus_within": mods.group_focus_within,
    "group_disabled": mods.group_disabled, "group_checked": mods.group_checked,
    "group_empty": mods.group_empty, "group_first": mods.group_first,
    "group_last": mods.group_last, "group_odd": mods.group_odd,
    "group_even": mods.group_even, "group_open": mods.group_open,
    "group_visited": mods.group_visited,
    "peer_hover": mods.peer_hover, "peer_focus": mods.peer_focus,
    "peer_active": mods.peer_active, "peer_focus_visible": mods.peer_focus_visible,
    "peer_focus_within": mods.peer_focus_within,
    "peer_disabled": mods.peer_disabled, "peer_checked": mods.peer_checked,
    "peer_invalid": mods.peer_invalid, "peer_required": mods.peer_required,
    "peer_placeholder_shown": mods.peer_placeholder_shown,
    "peer_empty": mods.peer_empty, "peer_first": mods.peer_first,
    "peer_last": mods.peer_last, "peer_odd": mods.peer_odd,
    "peer_even": mods.peer_even, "peer_open": mods.peer_open,
    "peer_visited": mods.peer_visited,
    "rtl": mods.rtl, "ltr": mods.ltr,
}

PARAM_MODIFIERS: dict[str, Callable] = {
    "has": mods.has,
    "aria": mods.aria,
    "data": mods.data,
    "supports": mods.supports,
    "group_has": mods.group_has,
    "peer_has": mods.peer_has,
}


def _build_table() -> dict[str, Handler]:
    table: dict[str, Handler] = {}
    for kind, entries in (
        (HandlerKind.STYLE, STYLES),
        (HandlerKind.RAW, RAW),
        (HandlerKind.UTILITY, UTILITIES),
        (HandlerKind.MODIFIER, MODIFIERS),
        (HandlerKind.PARAM_MODIFIER, PARAM_MODIFIERS),
    ):
        for name, target in entries.items():
            if name in table:
                raise ValueError(f"Duplicate chain name: {name!r}")
            table[name] = Handler(kind, target)
    return table


DISPATCH: dict[str, Handler] = _build_table()

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")
_DIGIT_RE = re.compile(r"(?<=[a-z])(?=\d)")


def normalize(name: str) -> str:
    """``flexCol`` -> ``flex_col``, ``max2xl`` -> ``max_2xl``.

    snake_case names are unchanged.
    """
    name = _DIGIT_RE.sub("_", name)
    return _CAMEL_RE.sub(lambda m: "_" + m.group(1).lower(), name)


def lookup(name: str) -> Handler | None:
    """Return the handler for *name*, trying its snake_case spelling second."""
    handler = DISPATCH.get(name)
    if handler is None:
        handler = DISPATCH.get(normalize(name))
    return handler
