"""Dynamic values: literals bound at runtime through CSS custom properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from tessera.model.rule import Rule, create_dynamic_rule, create_rule
from tessera.session import BuildSession, get_session


@dataclass(frozen=True)
class DynamicValue:
    """A runtime value and the custom property that carries it.

    Utilities given a DynamicValue emit ``var(<id>)`` in the static CSS and
    record ``<id> -> str(value)`` as a dynamic binding.
    """

    value: str | int | float
    id: str

    @property
    def var(self) -> str:
        return f"var({self.id})"


def dynamic(value: str | int | float, *, session: BuildSession | None = None) -> DynamicValue:
    """Wrap *value* with a freshly allocated custom property name."""
    session = session or get_session()
    return DynamicValue(value=value, id=session.next_dynamic_id())


def is_dynamic(value: Any) -> bool:
    return isinstance(value, DynamicValue)


def declare(props: str | Sequence[str], value: Any) -> Rule:
    """Build a rule setting every property in *props* to *value*.

    A DynamicValue becomes a ``var()`` reference plus its binding; anything
    else is rendered with ``str()``.
    """
    names = [props] if isinstance(props, str) else list(props)
    if isinstance(value, DynamicValue):
        return create_dynamic_rule(
            {name: value.var for name in names},
            {value.id: str(value.value)},
        )
    return create_rule({name: str(value) for name in names})
