"""Identity hash: deterministic class names for rules at a cascade layer."""

from __future__ import annotations

import hashlib
import json

from tessera.model.rule import Rule

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def hash_input(rule: Rule, layer: int) -> str:
    """Serialize everything that decides how and where *rule* renders.

    Declarations are key-sorted so two maps with the same content agree
    regardless of insertion order. Dynamic bindings are left out: they
    carry runtime values, not rendering context.
    """
    payload = {
        "declarations": rule.declarations,
        "selectors": list(rule.selectors),
        "media": list(rule.media_queries),
        "supports": list(rule.supports_queries),
        "template": rule.selector_template or "",
        "layer": layer,
    }
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))


def generate_hash(rule: Rule, layer: int, prefix: str = "tc") -> str:
    """Return the class name for *rule* registered at *layer*.

    The name is *prefix* followed by 64 bits of SHA-256 in base 36, so it
    only contains ``[a-z0-9]`` and never starts with a digit as long as the
    prefix starts with a letter.
    """
    digest = hashlib.sha256(hash_input(rule, layer).encode()).hexdigest()
    return prefix + _base36(int(digest[:16], 16))
