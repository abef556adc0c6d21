"""Padding, margin, and gap utilities on the spacing scale."""

from __future__ import annotations

from typing import Union

from tessera.dynamic import DynamicValue, declare, is_dynamic
from tessera.model.rule import Rule
from tessera.theme.spacing import resolve_spacing

SpacingInput = Union[int, float, str, DynamicValue]


def _spacing(props: str | list[str], value: SpacingInput) -> Rule:
    if is_dynamic(value):
        return declare(props, value)
    return declare(props, resolve_spacing(value))


def p(value: SpacingInput) -> Rule:
    return _spacing("padding", value)


def px(value: SpacingInput) -> Rule:
    return _spacing(["padding-left", "padding-right"], value)


def py(value: SpacingInput) -> Rule:
    return _spacing(["padding-top", "padding-bottom"], value)


def pt(value: SpacingInput) -> Rule:
    return _spacing("padding-top", value)


def pr(value: SpacingInput) -> Rule:
    return _spacing("padding-right", value)


def pb(value: SpacingInput) -> Rule:
    return _spacing("padding-bottom", value)


def pl(value: SpacingInput) -> Rule:
    return _spacing("padding-left", value)


def m(value: SpacingInput) -> Rule:
    return _spacing("margin", value)


def mx(value: SpacingInput) -> Rule:
    return _spacing(["margin-left", "margin-right"], value)


def my(value: SpacingInput) -> Rule:
    return _spacing(["margin-top", "margin-bottom"], value)


def mt(value: SpacingInput) -> Rule:
    return _spacing("margin-top", value)


def mr(value: SpacingInput) -> Rule:
    return _spacing("margin-right", value)


def mb(value: SpacingInput) -> Rule:
    return _spacing("margin-bottom", value)


def ml(value: SpacingInput) -> Rule:
    return _spacing("margin-left", value)


def gap(value: SpacingInput) -> Rule:
    return _spacing("gap", value)


def gap_x(value: SpacingInput) -> Rule:
    return _spacing("column-gap", value)


def gap_y(value: SpacingInput) -> Rule:
    return _spacing("row-gap", value)
