"""The fluent chain builder behind ``tw``.

A :class:`Chain` is an immutable accumulator of resolved items (Rules and
raw class names) plus the modifiers waiting for the next utility. Every
attribute access or call returns a new chain, so branches taken from the
same intermediate chain never see each other's items::

    base = tw.flex.flex_col
    a = base.gap(4)      # flex, flex_col, gap-4
    b = base.gap(8)      # flex, flex_col, gap-8
    str(base)            # flex, flex_col only

Names are resolved through :mod:`tessera.chain.dispatch`; anything it does
not know is appended as a literal class name.
"""

from __future__ import annotations

from typing import Any, Callable

from tessera.chain.dispatch import DISPATCH, HandlerKind, lookup
from tessera.compose import cx, flatten
from tessera.model.rule import Modifier, Rule
from tessera.session import BuildSession, get_session
from tessera.when import apply_modifiers

Item = Rule | str


def _is_private(name: str) -> bool:
    # Dunders and private names are never chain vocabulary, except table
    # entries such as ``_2xl``.
    return name.startswith("__") or (name.startswith("_") and name not in DISPATCH)


class Chain:
    """Immutable accumulator of rules, raw class names and pending modifiers."""

    __slots__ = ("_items", "_pending", "_session", "_cache")

    def __init__(
        self,
        items: tuple[Item, ...] = (),
        pending: tuple[Modifier, ...] = (),
        session: BuildSession | None = None,
    ) -> None:
        self._items = tuple(items)
        self._pending = tuple(pending)
        self._session = session
        self._cache: tuple[BuildSession, int, str] | None = None

    # --- dispatch -------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        if _is_private(name):
            raise AttributeError(name)
        return self.dispatch(name)

    def dispatch(self, name: str) -> Any:
        """Resolve *name* against the dispatch table.

        Returns a new :class:`Chain` for styles and raw names, a
        :class:`ModifierChain` for modifiers, and a callable wrapper for
        utilities and parameterized modifiers.
        """
        handler = lookup(name)
        if handler is None:
            return self._extend(name)

        if handler.kind is HandlerKind.STYLE:
            return self._extend(self._wrap(handler.target()))
        if handler.kind is HandlerKind.RAW:
            return self._extend(handler.target)
        if handler.kind is HandlerKind.MODIFIER:
            return ModifierChain(self._items, self._pending + (handler.target,), self._session)
        if handler.kind is HandlerKind.PARAM_MODIFIER:
            return ParamModifier(self, handler.target)
        return UtilityCall(self, handler.target)

    def _wrap(self, rule: Rule) -> Rule:
        return apply_modifiers(rule, self._pending) if self._pending else rule

    def _extend(self, *items: Item) -> Chain:
        """Append *items* and consume the pending modifiers."""
        return Chain(self._items + items, (), self._session)

    # --- merging --------------------------------------------------------------

    def __call__(self, *args: Any) -> Chain:
        """Merge chains, rules and class names into this chain.

        Pending modifiers stay pending: ``tw.hover(tw.p(4))`` is handled by
        :class:`ModifierChain`, while ``tw(tw.p(4)).hover.bg("red")`` keeps
        chaining.
        """
        return Chain(self._items + tuple(flatten(args)), self._pending, self._session)

    def with_session(self, session: BuildSession) -> Chain:
        """Return this chain bound to *session* for resolution."""
        return Chain(self._items, self._pending, session)

    # --- inspection -----------------------------------------------------------

    @property
    def rules(self) -> tuple[Item, ...]:
        return self._items

    @property
    def pending(self) -> tuple[Modifier, ...]:
        return self._pending

    def __tessera_items__(self) -> list[Item]:
        return list(self._items)

    def __repr__(self) -> str:
        parts = [
            item if isinstance(item, str) else repr(item.declarations)
            for item in self._items
        ]
        text = f"Chain({', '.join(parts)})"
        if self._pending:
            names = ", ".join(getattr(m, "__qualname__", repr(m)) for m in self._pending)
            text += f" pending=[{names}]"
        return text

    # --- resolution -----------------------------------------------------------

    def resolve(self) -> str:
        """Compose the accumulated items into a class string.

        The result is cached on the chain. Layers are part of a rule's
        identity, so composing the same chain twice would otherwise mint
        new class names. The cache is dropped once the session is reset or
        its registry cleared, so the names it returns are always registered.
        """
        session = self._session or get_session()
        cache = self._cache
        if cache is not None and cache[0] is session and cache[1] == session.generation:
            return cache[2]
        text = cx(*self._items, session=session)
        self._cache = (session, session.generation, text)
        return text

    @property
    def value(self) -> str:
        return self.resolve()

    @property
    def class_name(self) -> str:
        return self.resolve()

    def __str__(self) -> str:
        return self.resolve()

    def __add__(self, other: object) -> str:
        if isinstance(other, str):
            return self.resolve() + other
        return NotImplemented

    def __radd__(self, other: object) -> str:
        if isinstance(other, str):
            return other + self.resolve()
        return NotImplemented


class ModifierChain(Chain):
    """A chain whose last access was a modifier.

    Chained further (``tw.hover.bg("blue")``) it behaves like any chain and
    the modifier waits in ``pending``. Called with chains or rules
    (``tw.hover(tw.bg("blue"), tw.p(4))``) it applies every pending modifier
    to each argument's rules and appends them, ignoring whatever the
    arguments themselves had pending.
    """

    __slots__ = ()

    def __call__(self, *args: Any) -> Chain:
        if not args:
            return self
        wrapped = tuple(
            apply_modifiers(item, self._pending) if isinstance(item, Rule) else item
            for item in flatten(args)
        )
        return Chain(self._items + wrapped, (), self._session)


class ParamModifier:
    """``tw.aria("busy")``: builds the modifier, then acts like a ModifierChain."""

    __slots__ = ("_chain", "_factory")

    def __init__(self, chain: Chain, factory: Callable[..., Modifier]) -> None:
        self._chain = chain
        self._factory = factory

    def __call__(self, *args: Any) -> ModifierChain:
        modifier = self._factory(*args)
        chain = self._chain
        return ModifierChain(chain._items, chain._pending + (modifier,), chain._session)

    def __repr__(self) -> str:
        return f"ParamModifier({self._factory.__name__})"


class UtilityCall:
    """A utility awaiting its arguments.

    Calling it appends the utility's rule. Chaining past it without a call
    (``tw.shadow.hover``) uses the utility's default arguments.
    """

    __slots__ = ("_chain", "_fn")

    def __init__(self, chain: Chain, fn: Callable[..., Rule]) -> None:
        self._chain = chain
        self._fn = fn

    def __call__(self, *args: Any, **kwargs: Any) -> Chain:
        chain = self._chain
        return chain._extend(chain._wrap(self._fn(*args, **kwargs)))

    def __getattr__(self, name: str) -> Any:
        if _is_private(name):
            raise AttributeError(name)
        return getattr(self(), name)

    def __tessera_items__(self) -> list[Item]:
        return self().__tessera_items__()

    def __str__(self) -> str:
        return str(self())

    def __repr__(self) -> str:
        return f"UtilityCall({self._fn.__name__})"
