"""Display, flexbox, grid, sizing, and positioning utilities."""

from __future__ import annotations

from typing import Union

from tessera.dynamic import DynamicValue, declare, is_dynamic
from tessera.model.rule import Rule, create_rule
from tessera.theme.sizes import resolve_size
from tessera.theme.spacing import resolve_spacing

SizeInput = Union[int, float, str, DynamicValue]


def _size(prop: str, value: SizeInput, screen: str = "100vw") -> Rule:
    if is_dynamic(value):
        return declare(prop, value)
    return declare(prop, resolve_size(value, screen=screen))


def _offset(props: str | list[str], value: SizeInput) -> Rule:
    if is_dynamic(value):
        return declare(props, value)
    return declare(props, resolve_spacing(value))


# --- display ------------------------------------------------------------------


def flex() -> Rule:
    return create_rule({"display": "flex"})


def inline_flex() -> Rule:
    return create_rule({"display": "inline-flex"})


def block() -> Rule:
    return create_rule({"display": "block"})


def inline_block() -> Rule:
    return create_rule({"display": "inline-block"})


def hidden() -> Rule:
    return create_rule({"display": "none"})


def display(value: str) -> Rule:
    return create_rule({"display": value})


# --- flexbox ------------------------------------------------------------------


def flex_col() -> Rule:
    return create_rule({"flex-direction": "column"})


def flex_row() -> Rule:
    return create_rule({"flex-direction": "row"})


def flex_wrap() -> Rule:
    return create_rule({"flex-wrap": "wrap"})


def flex_1() -> Rule:
    return create_rule({"flex": "1 1 0%"})


def grow(value: int = 1) -> Rule:
    return create_rule({"flex-grow": str(value)})


def shrink(value: int = 1) -> Rule:
    return create_rule({"flex-shrink": str(value)})


def items(value: str) -> Rule:
    return create_rule({"align-items": value})


def justify(value: str) -> Rule:
    return create_rule({"justify-content": value})


def self_(value: str) -> Rule:
    return create_rule({"align-self": value})


# --- grid ---------------------------------------------------------------------


def grid(cols: int | None = None) -> Rule:
    """``display: grid``, optionally with *cols* equal columns."""
    decls = {"display": "grid"}
    if cols is not None:
        decls["grid-template-columns"] = f"repeat({cols}, minmax(0, 1fr))"
    return create_rule(decls)


def grid_cols(n: int) -> Rule:
    return create_rule({"grid-template-columns": f"repeat({n}, minmax(0, 1fr))"})


def grid_rows(n: int) -> Rule:
    return create_rule({"grid-template-rows": f"repeat({n}, minmax(0, 1fr))"})


# --- sizing -------------------------------------------------------------------


def w(value: SizeInput) -> Rule:
    return _size("width", value)


def h(value: SizeInput) -> Rule:
    return _size("height", value, screen="100vh")


def size(value: SizeInput) -> Rule:
    if is_dynamic(value):
        return declare(["width", "height"], value)
    return declare(["width", "height"], resolve_size(value))


def min_w(value: SizeInput) -> Rule:
    return _size("min-width", value)


def min_h(value: SizeInput) -> Rule:
    return _size("min-height", value, screen="100vh")


def max_w(value: SizeInput) -> Rule:
    return _size("max-width", value)


def max_h(value: SizeInput) -> Rule:
    return _size("max-height", value, screen="100vh")


# --- overflow -----------------------------------------------------------------


def overflow(value: str) -> Rule:
    return create_rule({"overflow": value})


def overflow_x(value: str) -> Rule:
    return create_rule({"overflow-x": value})


def overflow_y(value: str) -> Rule:
    return create_rule({"overflow-y": value})


# --- positioning --------------------------------------------------------------


def static() -> Rule:
    return create_rule({"position": "static"})


def relative() -> Rule:
    return create_rule({"position": "relative"})


def absolute() -> Rule:
    return create_rule({"position": "absolute"})


def fixed() -> Rule:
    return create_rule({"position": "fixed"})


def sticky() -> Rule:
    return create_rule({"position": "sticky"})


def top(value: SizeInput) -> Rule:
    return _offset("top", value)


def right(value: SizeInput) -> Rule:
    return _offset("right", value)


def bottom(value: SizeInput) -> Rule:
    return _offset("bottom", value)


def left(value: SizeInput) -> Rule:
    return _offset("left", value)


def inset(value: SizeInput) -> Rule:
    return _offset("inset", value)


def z(value: int | str | DynamicValue) -> Rule:
    return declare("z-index", value)
