"""Tessera: atomic CSS generation from composable Python style rules."""
from __future__ import annotations

__version__ = "0.1.0"

from tessera.compose import DynamicResult, css, cx, dcx, layer  # noqa: E402
from tessera.config import TesseraConfig  # noqa: E402
from tessera.dynamic import DynamicValue, dynamic, is_dynamic  # noqa: E402
from tessera.model import Diagnostic, DiagnosticKind, Rule, Severity  # noqa: E402
from tessera.runtime import bind  # noqa: E402
from tessera.session import (  # noqa: E402
    BuildSession,
    clear_registry,
    generate_css,
    get_session,
    on_change,
    on_diagnostic,
    reset,
)
from tessera.when import when  # noqa: E402
from tessera.chain import Chain, tw  # noqa: E402
from tessera.publish import FilePublisher, StylesheetPublisher  # noqa: E402

__all__ = [
    "__version__",
    # composition
    "cx",
    "dcx",
    "css",
    "layer",
    "when",
    "tw",
    "Chain",
    # dynamic values
    "dynamic",
    "is_dynamic",
    "DynamicValue",
    "DynamicResult",
    "bind",
    # model
    "Rule",
    "Diagnostic",
    "DiagnosticKind",
    "Severity",
    # session
    "BuildSession",
    "TesseraConfig",
    "get_session",
    "reset",
    "on_change",
    "on_diagnostic",
    "generate_css",
    "clear_registry",
    # publishing
    "StylesheetPublisher",
    "FilePublisher",
]
