"""Rule composition: turn rules into registered class names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from tessera.conflicts import find_conflicts
from tessera.model.rule import Rule, combine_rules, create_rule, with_layer
from tessera.session import BuildSession, get_session


@dataclass(frozen=True)
class DynamicResult:
    """Class names plus the inline custom properties they reference."""

    class_name: str
    style: dict[str, str] = field(default_factory=dict)


def flatten(items: Iterable[Any]) -> list[Rule | str]:
    """Expand chains into their accumulated items.

    ``None``, ``False`` and empty strings are dropped so callers can write
    ``cx(p(4), active and bg("red"))``.
    """
    flat: list[Rule | str] = []
    for item in items:
        if item is None or item is False or item == "":
            continue
        if isinstance(item, (Rule, str)):
            flat.append(item)
            continue
        nested = getattr(item, "__tessera_items__", None)
        if nested is None:
            raise TypeError(f"Cannot compose {type(item).__name__!r}; expected a Rule, str, or chain")
        flat.extend(nested())
    return flat


def _compose(items: list[Rule | str], session: BuildSession) -> list[str]:
    if session.config.diagnostics:
        for diagnostic in find_conflicts(items):
            session.report(diagnostic)

    tokens: list[str] = []
    for item in items:
        if isinstance(item, str):
            tokens.append(item)
        elif not item.is_empty:
            tokens.append(session.submit(item))
    return tokens


def cx(*items: Any, session: BuildSession | None = None) -> str:
    """Register every rule in order and return the space-joined class names.

    Raw strings pass through in place, so ``cx(p(4), "card", bg("red"))``
    keeps "card" between the two generated names.
    """
    session = session or get_session()
    return " ".join(_compose(flatten(items), session))


def dcx(*items: Any, session: BuildSession | None = None) -> DynamicResult:
    """Like :func:`cx`, also collecting every rule's dynamic bindings."""
    session = session or get_session()
    flat = flatten(items)
    style: dict[str, str] = {}
    for item in flat:
        if isinstance(item, Rule) and item.dynamic_bindings:
            style.update(item.dynamic_bindings)
    return DynamicResult(class_name=" ".join(_compose(flat, session)), style=style)


def layer(priority: int):
    """Pin rules to an explicit cascade layer.

    ``cx(layer(0)(bg("white")), p(4))`` renders the background first no
    matter how many rules were composed before it.
    """

    def apply(*rules: Rule) -> Rule:
        combined = rules[0] if len(rules) == 1 else combine_rules(rules)
        return with_layer(combined, priority)

    return apply


def css(declarations: Mapping[str, str] | None = None, **props: str) -> Rule:
    """Build a raw rule. Keyword names use underscores for hyphens."""
    merged = dict(declarations or {})
    for name, value in props.items():
        merged[name.replace("_", "-")] = value
    return create_rule(merged)
