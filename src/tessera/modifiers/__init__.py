"""Modifiers: pure Rule -> Rule transforms adding selector or query context."""

from tessera.modifiers.attributes import (
    aria,
    aria_checked,
    aria_disabled,
    aria_expanded,
    aria_hidden,
    aria_pressed,
    aria_readonly,
    aria_required,
    aria_selected,
    data,
)
from tessera.modifiers.media import (
    contrast_less,
    contrast_more,
    dark,
    forced_colors,
    landscape,
    motion_reduce,
    motion_safe,
    portrait,
    print_,
)
from tessera.modifiers.pseudo import (
    active,
    autofill,
    checked,
    default,
    disabled,
    empty,
    even,
    first_child,
    first_of_type,
    focus,
    focus_visible,
    focus_within,
    has,
    hover,
    in_range,
    indeterminate,
    invalid,
    last_child,
    last_of_type,
    odd,
    only_child,
    only_of_type,
    open_,
    out_of_range,
    placeholder_shown,
    read_only,
    required,
    target,
    valid,
    visited,
)
from tessera.modifiers.pseudo_elements import (
    after,
    backdrop,
    before,
    file,
    first_letter,
    first_line,
    marker,
    placeholder,
    selection,
)
from tessera.modifiers.relational import (
    group_active,
    group_checked,
    group_disabled,
    group_empty,
    group_even,
    group_first,
    group_focus,
    group_focus_visible,
    group_focus_within,
    group_has,
    group_hover,
    group_last,
    group_odd,
    group_open,
    group_visited,
    ltr,
    peer_active,
    peer_checked,
    peer_disabled,
    peer_empty,
    peer_even,
    peer_first,
    peer_focus,
    peer_focus_visible,
    peer_focus_within,
    peer_has,
    peer_hover,
    peer_invalid,
    peer_last,
    peer_odd,
    peer_open,
    peer_placeholder_shown,
    peer_required,
    peer_visited,
    rtl,
)
from tessera.modifiers.responsive import (
    _2xl,
    lg,
    max_2xl,
    max_lg,
    max_md,
    max_sm,
    max_xl,
    md,
    sm,
    xl,
)
from tessera.modifiers.supports import supports

__all__ = [
    # pseudo-classes
    "hover", "focus", "active", "disabled", "focus_visible", "focus_within",
    "first_child", "last_child", "visited", "checked", "indeterminate",
    "default", "required", "valid", "invalid", "in_range", "out_of_range",
    "placeholder_shown", "autofill", "read_only", "empty", "even", "odd",
    "first_of_type", "last_of_type", "only_child", "only_of_type", "target",
    "open_", "has",
    # responsive
    "sm", "md", "lg", "xl", "_2xl",
    "max_sm", "max_md", "max_lg", "max_xl", "max_2xl",
    # media
    "dark", "motion_reduce", "motion_safe", "print_", "portrait", "landscape",
    "contrast_more", "contrast_less", "forced_colors",
    # pseudo-elements
    "before", "after", "placeholder", "file", "marker", "selection",
    "first_line", "first_letter", "backdrop",
    # attributes
    "aria_checked", "aria_disabled", "aria_expanded", "aria_hidden",
    "aria_pressed", "aria_readonly", "aria_required", "aria_selected",
    "aria", "data",
    # feature queries
    "supports",
    # relational
    "group_hover", "group_focus", "group_active", "group_focus_visible",
    "group_focus_within", "group_disabled", "group_checked", "group_empty",
    "group_first", "group_last", "group_odd", "group_even", "group_open",
    "group_visited", "group_has",
    "peer_hover", "peer_focus", "peer_active", "peer_focus_visible",
    "peer_focus_within", "peer_disabled", "peer_checked", "peer_invalid",
    "peer_required", "peer_placeholder_shown", "peer_empty", "peer_first",
    "peer_last", "peer_odd", "peer_even", "peer_open", "peer_visited",
    "peer_has",
    "rtl", "ltr",
]
