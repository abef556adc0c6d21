"""Build sessions: the layer counter, dynamic-id counter, and registry.

Every piece of shared state lives on a :class:`BuildSession`. The module
level functions below operate on a process-wide default session so callers
can write ``cx(...)`` without threading a session through; tests call
:func:`reset` between cases.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from tessera.config import TesseraConfig
from tessera.hashing import generate_hash
from tessera.model.diagnostic import Diagnostic
from tessera.model.rule import Rule
from tessera.registry import Registry, RegistryEntry

logger = logging.getLogger("tessera")

DiagnosticCallback = Callable[[Diagnostic], None]


class BuildSession:
    """Scoped state for one stylesheet build.

    Counters are guarded by a lock so a session stays consistent when a
    threaded host shares it; the registry guards itself.
    """

    def __init__(self, config: TesseraConfig | None = None) -> None:
        self.config = config or TesseraConfig()
        self._lock = threading.Lock()
        self._layer = 0
        self._dynamic = 0
        self._generation = 0
        self.registry = Registry(placeholder=self.config.placeholder)
        self._diagnostic_listeners: list[DiagnosticCallback] = []

    # --- counters -------------------------------------------------------------

    def next_layer(self) -> int:
        """Return the next cascade layer number (0, 1, 2, ...)."""
        with self._lock:
            layer = self._layer
            self._layer += 1
            return layer

    def next_dynamic_id(self) -> str:
        """Return a fresh custom property name (``--tc-d0``, ``--tc-d1``, ...)."""
        with self._lock:
            ident = f"{self.config.dynamic_prefix}{self._dynamic}"
            self._dynamic += 1
            return ident

    # --- registry -------------------------------------------------------------

    def register(self, class_name: str, rule: Rule, layer: int) -> bool:
        return self.registry.register(class_name, rule, layer)

    def submit(self, rule: Rule) -> str:
        """Assign *rule* a layer, hash it, register it, return its class name.

        A rule pinned with an explicit layer keeps it and does not advance
        the counter.
        """
        layer = rule.layer if rule.layer is not None else self.next_layer()
        class_name = generate_hash(rule, layer, prefix=self.config.class_prefix)
        self.registry.register(class_name, rule, layer)
        return class_name

    def on_change(self, callback: Callable[[], None]) -> Callable[[], None]:
        return self.registry.on_change(callback)

    def generate_css(self) -> str:
        return self.registry.generate_css()

    def entries(self) -> list[RegistryEntry]:
        return self.registry.entries()

    def clear_registry(self) -> None:
        with self._lock:
            self._generation += 1
        self.registry.clear()

    @property
    def generation(self) -> int:
        """Bumped whenever registered entries are discarded."""
        return self._generation

    # --- diagnostics ----------------------------------------------------------

    def on_diagnostic(self, callback: DiagnosticCallback) -> Callable[[], None]:
        """Receive every diagnostic this session reports."""
        with self._lock:
            self._diagnostic_listeners.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._diagnostic_listeners:
                    self._diagnostic_listeners.remove(callback)

        return unsubscribe

    def report(self, diagnostic: Diagnostic) -> None:
        """Log *diagnostic* and hand it to subscribers. Never raises it."""
        logger.warning("%s", diagnostic)
        with self._lock:
            listeners = list(self._diagnostic_listeners)
        for callback in listeners:
            callback(diagnostic)

    # --- lifecycle ------------------------------------------------------------

    def reset(self) -> None:
        """Restore a fresh state: counters, entries, and all listeners.

        Test isolation only.
        """
        with self._lock:
            self._layer = 0
            self._dynamic = 0
            self._generation += 1
            self._diagnostic_listeners.clear()
        self.registry.clear()
        self.registry.clear_listeners()


_default_session = BuildSession()


def get_session() -> BuildSession:
    """Return the process-wide default session."""
    return _default_session


def reset() -> None:
    """Reset the default session. Test isolation only."""
    _default_session.reset()


def next_layer() -> int:
    return _default_session.next_layer()


def register(class_name: str, rule: Rule, layer: int) -> bool:
    return _default_session.register(class_name, rule, layer)


def on_change(callback: Callable[[], None]) -> Callable[[], None]:
    return _default_session.on_change(callback)


def on_diagnostic(callback: DiagnosticCallback) -> Callable[[], None]:
    return _default_session.on_diagnostic(callback)


def generate_css() -> str:
    return _default_session.generate_css()


def clear_registry() -> None:
    """Empty the default registry. Test isolation only."""
    _default_session.clear_registry()
