"""Runtime helper pairing a prebuilt class name with live custom properties."""

from __future__ import annotations

from typing import Mapping

from tessera.compose import DynamicResult


def bind(class_name: str, bindings: Mapping[str, object]) -> DynamicResult:
    """Return *class_name* with *bindings* as its inline style.

    Used when the class name was computed ahead of time and only the
    custom property values change, e.g. ``bind(cls, {"--tc-d0": color})``.
    """
    return DynamicResult(
        class_name=class_name,
        style={name: str(value) for name, value in bindings.items()},
    )
