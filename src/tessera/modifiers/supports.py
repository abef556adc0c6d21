from __future__ import annotations

from tessera.model.rule import Modifier
from tessera.modifiers._base import supports_modifier


def supports(query: str) -> Modifier:
    """Wrap in ``@supports <query>``; pass the parenthesized condition."""
    return supports_modifier(query)
