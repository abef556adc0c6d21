"""Deduplicating store of generated class names and their rules."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterator

from tessera.model.rule import Rule

logger = logging.getLogger("tessera")


@dataclass(frozen=True)
class RegistryEntry:
    """A registered rule and the layer that orders it in the output."""

    class_name: str
    rule: Rule
    layer: int


def render_rule(class_name: str, rule: Rule, placeholder: str = "&") -> str:
    """Render one rule as a CSS block.

    The selector block is wrapped by each supports query (first one
    innermost) and then by each media query, one block per condition.
    """
    decls = "\n".join(f"  {prop}: {value};" for prop, value in rule.declarations.items())

    if rule.selector_template:
        selector = rule.selector_template.replace(placeholder, f".{class_name}")
    else:
        selector = f".{class_name}" + "".join(rule.selectors)

    css = f"{selector} {{\n{decls}\n}}"
    for query in rule.supports_queries:
        css = f"@supports {query} {{\n{css}\n}}"
    for query in rule.media_queries:
        css = f"@media {query} {{\n{css}\n}}"
    return css


class Registry:
    """Insert-once map of class name -> (rule, layer) with change listeners.

    Listeners are called synchronously, in subscription order, once per
    new insertion. A listener must not register rules itself.
    """

    def __init__(self, placeholder: str = "&") -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, RegistryEntry] = {}
        self._listeners: list[Callable[[], None]] = []
        self._placeholder = placeholder

    # --- mutation -------------------------------------------------------------

    def register(self, class_name: str, rule: Rule, layer: int) -> bool:
        """Insert *rule* under *class_name* unless it is already present.

        Returns True when the entry is new (and listeners were notified).
        """
        with self._lock:
            if class_name in self._entries:
                return False
            self._entries[class_name] = RegistryEntry(class_name, rule, layer)
            listeners = list(self._listeners)
        logger.debug("Registered .%s at layer %d", class_name, layer)
        for callback in listeners:
            callback()
        return True

    def on_change(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Subscribe *callback*; returns a function that unsubscribes it."""
        with self._lock:
            self._listeners.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._listeners:
                    self._listeners.remove(callback)

        return unsubscribe

    def clear(self) -> None:
        """Drop every entry. Listeners are not notified."""
        with self._lock:
            self._entries.clear()

    def clear_listeners(self) -> None:
        with self._lock:
            self._listeners.clear()

    # --- read -----------------------------------------------------------------

    def get(self, class_name: str) -> RegistryEntry | None:
        with self._lock:
            return self._entries.get(class_name)

    def entries(self) -> list[RegistryEntry]:
        """All entries sorted by layer; equal layers keep insertion order."""
        with self._lock:
            entries = list(self._entries.values())
        return sorted(entries, key=lambda e: e.layer)

    def generate_css(self) -> str:
        """Render every entry in layer order, separated by blank lines."""
        blocks = [
            render_rule(e.class_name, e.rule, self._placeholder) for e in self.entries()
        ]
        return "\n\n".join(blocks)

    # --- dunder helpers -------------------------------------------------------

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, class_name: str) -> bool:
        with self._lock:
            return class_name in self._entries

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self.entries())
