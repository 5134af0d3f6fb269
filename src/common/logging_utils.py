"""Logging helpers shared by the CLI and the versioning package.

Library modules only create module-level loggers; handlers and levels are
installed by ``configure_logging`` from the entrypoint.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from constants import Constants

# Attributes present on every LogRecord; extra fields must not collide.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or Constants.DEFAULT_LOG_LEVEL).upper()
    value = getattr(logging, name, None)
    if not isinstance(value, int):
        return logging.INFO
    return value


def configure_logging(level: Optional[str] = None) -> None:
    """Install the root handler and level.

    Args:
        level: Explicit level name; falls back to ``PLUGINKIT_LOG_LEVEL``
            and then to ``Constants.DEFAULT_LOG_LEVEL``.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(_resolve_level(level))


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured debug traces.

    ``None`` values are dropped and names that clash with LogRecord
    attributes are prefixed with ``ctx_``.
    """
    context: Dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        if key in _RESERVED_ATTRS:
            key = f"ctx_{key}"
        context[key] = value
    return context
