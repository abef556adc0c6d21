"""Bundled utilities. Each is a pure function returning a Rule."""

from tessera.utilities.borders import (
    border,
    border_b,
    border_l,
    border_r,
    border_style,
    border_t,
    ring,
    rounded,
)
from tessera.utilities.colors import bg, border_color, text_color
from tessera.utilities.effects import opacity, shadow
from tessera.utilities.interactivity import cursor, pointer_events, select
from tessera.utilities.layout import (
    absolute,
    block,
    bottom,
    display,
    fixed,
    flex,
    flex_1,
    flex_col,
    flex_row,
    flex_wrap,
    grid,
    grid_cols,
    grid_rows,
    grow,
    h,
    hidden,
    inline_block,
    inline_flex,
    inset,
    items,
    justify,
    left,
    max_h,
    max_w,
    min_h,
    min_w,
    overflow,
    overflow_x,
    overflow_y,
    relative,
    right,
    self_,
    shrink,
    size,
    static,
    sticky,
    top,
    w,
    z,
)
from tessera.utilities.spacing import (
    gap,
    gap_x,
    gap_y,
    m,
    mb,
    ml,
    mr,
    mt,
    mx,
    my,
    p,
    pb,
    pl,
    pr,
    pt,
    px,
    py,
)
from tessera.utilities.transitions import (
    delay,
    duration,
    ease,
    transition,
    transition_all,
    transition_colors,
    transition_none,
    transition_opacity,
    transition_shadow,
    transition_transform,
)
from tessera.utilities.typography import (
    content,
    font,
    italic,
    leading,
    lowercase,
    not_italic,
    text,
    text_align,
    tracking,
    truncate,
    uppercase,
)

__all__ = [
    # spacing
    "p", "px", "py", "pt", "pr", "pb", "pl",
    "m", "mx", "my", "mt", "mr", "mb", "ml",
    "gap", "gap_x", "gap_y",
    # colors
    "bg", "text_color", "border_color",
    # layout
    "flex", "inline_flex", "block", "inline_block", "hidden", "display",
    "flex_col", "flex_row", "flex_wrap", "flex_1", "grow", "shrink",
    "items", "justify", "self_",
    "grid", "grid_cols", "grid_rows",
    "w", "h", "size", "min_w", "min_h", "max_w", "max_h",
    "overflow", "overflow_x", "overflow_y",
    "static", "relative", "absolute", "fixed", "sticky",
    "top", "right", "bottom", "left", "inset", "z",
    # typography
    "text", "font", "tracking", "leading", "text_align",
    "italic", "not_italic", "uppercase", "lowercase", "truncate", "content",
    # borders
    "rounded", "border", "border_t", "border_r", "border_b", "border_l",
    "border_style", "ring",
    # effects
    "shadow", "opacity",
    # transitions
    "transition", "transition_all", "transition_colors", "transition_opacity",
    "transition_shadow", "transition_transform", "transition_none",
    "duration", "ease", "delay",
    # interactivity
    "cursor", "select", "pointer_events",
]
