from __future__ import annotations

from tessera.model.rule import Rule, create_rule


def cursor(value: str = "pointer") -> Rule:
    return create_rule({"cursor": value})


def select(value: str) -> Rule:
    return create_rule({"user-select": value})


def pointer_events(value: str) -> Rule:
    return create_rule({"pointer-events": value})
