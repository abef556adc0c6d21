"""Conflict analysis for the rules passed to a single ``cx`` call.

Two checks run over every pair of rules that write different values to
the same property:

- same-context conflict: both rules render in an equivalent context, so
  the earlier value is dead code.
- cascade hazard: the rules sit under media/supports condition sets that
  do not nest, so which value wins depends on which conditions match.

Findings are advisory. They never change what gets registered.
"""

from __future__ import annotations

from typing import Sequence

from tessera.model.diagnostic import Diagnostic, DiagnosticKind, Severity
from tessera.model.rule import Rule

# Anchor property -> properties a preset declaring the anchor expects to
# be refined afterwards. ``transition_all()`` followed by ``duration(300)``
# overrides the preset's duration on purpose.
REFINEMENTS: dict[str, frozenset[str]] = {
    "transition-property": frozenset({
        "transition-duration",
        "transition-timing-function",
        "transition-delay",
    }),
    "font-size": frozenset({"line-height"}),
    "animation-name": frozenset({
        "animation-duration",
        "animation-timing-function",
        "animation-delay",
        "animation-iteration-count",
    }),
}


def is_refinement(prop: str, first: Rule, second: Rule) -> bool:
    """True when *first* is a preset whose *prop* the later *second* refines.

    Order matters: a refinement placed before the preset is overridden by
    it, so that pair is still a conflict.
    """
    for anchor, refined in REFINEMENTS.items():
        if prop not in refined:
            continue
        if anchor in first.declarations and anchor not in second.declarations:
            return True
    return False


def _describe(conditions: frozenset[tuple[str, str]]) -> str:
    return " and ".join(f"@{kind} {query}" for kind, query in sorted(conditions))


def _nested(a: frozenset[tuple[str, str]], b: frozenset[tuple[str, str]]) -> bool:
    return a <= b or b <= a


def find_conflicts(items: Sequence[Rule | str]) -> list[Diagnostic]:
    """Return the deduplicated diagnostics for *items*.

    Positions refer to indexes in *items*; raw class-name strings are
    skipped but still count as positions.
    """
    rules = [(i, item) for i, item in enumerate(items) if isinstance(item, Rule)]
    diagnostics: list[Diagnostic] = []
    seen: set[str] = set()

    for n, (pos_a, a) in enumerate(rules):
        for pos_b, b in rules[n + 1:]:
            for prop, value_a in a.declarations.items():
                value_b = b.declarations.get(prop)
                if value_b is None or value_b == value_a:
                    continue
                diagnostic = _check_pair(prop, (pos_a, a, value_a), (pos_b, b, value_b))
                if diagnostic is None or diagnostic.message in seen:
                    continue
                seen.add(diagnostic.message)
                diagnostics.append(diagnostic)

    return diagnostics


def _check_pair(
    prop: str,
    first: tuple[int, Rule, str],
    second: tuple[int, Rule, str],
) -> Diagnostic | None:
    pos_a, a, value_a = first
    pos_b, b, value_b = second

    if a.context == b.context:
        if is_refinement(prop, a, b):
            return None
        return Diagnostic(
            kind=DiagnosticKind.CONFLICT,
            severity=Severity.WARNING,
            message=(
                f'Conflicting values for "{prop}" in the same context: '
                f'"{value_a}" is overridden by "{value_b}".'
            ),
            prop=prop,
            positions=(pos_a, pos_b),
            values=(value_a, value_b),
        )

    cond_a, cond_b = a.conditions, b.conditions
    if _nested(cond_a, cond_b):
        return None
    return Diagnostic(
        kind=DiagnosticKind.CASCADE_HAZARD,
        severity=Severity.WARNING,
        message=(
            f'Cascade hazard for "{prop}": "{value_a}" under {_describe(cond_a)} '
            f'and "{value_b}" under {_describe(cond_b)} do not nest, so the result '
            f"depends on which conditions match and on source order."
        ),
        prop=prop,
        positions=(pos_a, pos_b),
        values=(value_a, value_b),
    )
