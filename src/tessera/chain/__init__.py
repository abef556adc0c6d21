"""Fluent chain builder: ``tw.flex.p(4).hover.bg("blue")``."""

from tessera.chain.builder import Chain, ModifierChain, ParamModifier, UtilityCall
from tessera.chain.dispatch import DISPATCH, Handler, HandlerKind, lookup, normalize

tw = Chain()

__all__ = [
    "Chain",
    "DISPATCH",
    "Handler",
    "HandlerKind",
    "ModifierChain",
    "ParamModifier",
    "UtilityCall",
    "lookup",
    "normalize",
    "tw",
]
