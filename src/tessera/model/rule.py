"""Rule model: the immutable style rule threaded through every layer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Mapping


@dataclass(frozen=True)
class Rule:
    """CSS declarations plus the selector and query context they render in.

    Attributes:
        declarations: Property -> value, in insertion order.
        selectors: Suffixes appended to the generated class (``:hover``).
        media_queries: ``@media`` conditions, one wrapping block each.
        supports_queries: ``@supports`` conditions, one wrapping block each.
        selector_template: Full selector with ``&`` standing for the class.
        dynamic_bindings: Custom property -> runtime value, or None.
        layer: Explicit cascade layer, or None to take the next one.
    """

    declarations: dict[str, str] = field(default_factory=dict)
    selectors: tuple[str, ...] = ()
    media_queries: tuple[str, ...] = ()
    supports_queries: tuple[str, ...] = ()
    selector_template: str | None = None
    dynamic_bindings: dict[str, str] | None = None
    layer: int | None = None

    def __post_init__(self) -> None:
        # Own copies so callers can't mutate a rule through a shared dict.
        object.__setattr__(self, "declarations", dict(self.declarations))
        object.__setattr__(self, "selectors", tuple(self.selectors))
        object.__setattr__(self, "media_queries", tuple(self.media_queries))
        object.__setattr__(self, "supports_queries", tuple(self.supports_queries))
        if self.dynamic_bindings is not None:
            object.__setattr__(self, "dynamic_bindings", dict(self.dynamic_bindings))

    @property
    def is_empty(self) -> bool:
        """True when the rule has nothing to emit."""
        return not self.declarations and not self.dynamic_bindings

    @property
    def conditions(self) -> frozenset[tuple[str, str]]:
        """All media and supports conditions, tagged by kind."""
        return frozenset(
            [("media", q) for q in self.media_queries]
            + [("supports", q) for q in self.supports_queries]
        )

    @property
    def context(self) -> tuple[frozenset[str], frozenset[tuple[str, str]], str | None]:
        """Rendering context compared with set semantics."""
        return (frozenset(self.selectors), self.conditions, self.selector_template)


Modifier = Callable[[Rule], Rule]


def create_rule(declarations: Mapping[str, str]) -> Rule:
    """Build a static rule with no selector or query context."""
    return Rule(declarations=dict(declarations))


def create_dynamic_rule(
    declarations: Mapping[str, str], dynamic_bindings: Mapping[str, str]
) -> Rule:
    """Build a rule whose declarations reference runtime custom properties."""
    return Rule(declarations=dict(declarations), dynamic_bindings=dict(dynamic_bindings))


def _union(target: list[str], values: Iterable[str]) -> None:
    for value in values:
        if value not in target:
            target.append(value)


def combine_rules(rules: Iterable[Rule]) -> Rule:
    """Merge rules into one.

    Declarations are last-write-wins. Selectors and queries are unioned in
    first-seen order. Dynamic bindings merge; the last explicit template and
    layer win.
    """
    declarations: dict[str, str] = {}
    selectors: list[str] = []
    media: list[str] = []
    supports: list[str] = []
    bindings: dict[str, str] | None = None
    template: str | None = None
    layer: int | None = None
    for rule in rules:
        declarations.update(rule.declarations)
        _union(selectors, rule.selectors)
        _union(media, rule.media_queries)
        _union(supports, rule.supports_queries)
        if rule.dynamic_bindings:
            if bindings is None:
                bindings = {}
            bindings.update(rule.dynamic_bindings)
        if rule.selector_template is not None:
            template = rule.selector_template
        if rule.layer is not None:
            layer = rule.layer
    return Rule(
        declarations=declarations,
        selectors=tuple(selectors),
        media_queries=tuple(media),
        supports_queries=tuple(supports),
        selector_template=template,
        dynamic_bindings=bindings,
        layer=layer,
    )


def wrap_with_selector(rule: Rule, selector: str) -> Rule:
    """Return a copy with *selector* appended after the class name."""
    return replace(rule, selectors=rule.selectors + (selector,))


def wrap_with_media_query(rule: Rule, query: str) -> Rule:
    return replace(rule, media_queries=rule.media_queries + (query,))


def wrap_with_supports_query(rule: Rule, query: str) -> Rule:
    return replace(rule, supports_queries=rule.supports_queries + (query,))


def wrap_with_selector_template(rule: Rule, template: str) -> Rule:
    """Return a copy rendered through *template* (``&`` is the class)."""
    return replace(rule, selector_template=template)


def with_declaration_default(rule: Rule, prop: str, value: str) -> Rule:
    """Put ``prop: value`` first unless the rule already declares *prop*."""
    if prop in rule.declarations:
        return rule
    return replace(rule, declarations={prop: value, **rule.declarations})


def with_layer(rule: Rule, layer: int) -> Rule:
    return replace(rule, layer=layer)
