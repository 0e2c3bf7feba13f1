"""
Internal diagnostics for imgsign.

Diagnostics are structured payloads (``component``, ``message``, ``level``
plus free-form fields) describing non-fatal conditions such as building a URL
without credentials. They are off by default and are enabled with
``IMGSIGN_CORE__INTERNAL_LOGGING_ENABLED=true``. The setting is read once and
cached; ``set_enabled`` overrides it.

Payloads go to the stdlib ``imgsign`` logger unless a writer is installed with
``set_writer_for_tests``. Diagnostics never raise and never alter errors that
the library propagates.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

_LOGGER = logging.getLogger("imgsign")

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
}

# Cached `core.internal_logging_enabled`; None means "not read yet"
_internal_logging_enabled: bool | None = None
_writer: Callable[[dict[str, Any]], None] | None = None


def _is_enabled() -> bool:
    global _internal_logging_enabled
    if _internal_logging_enabled is None:
        from .settings import CoreSettings

        _internal_logging_enabled = CoreSettings().internal_logging_enabled
    return _internal_logging_enabled


def set_enabled(enabled: bool | None) -> None:
    """Force diagnostics on or off; ``None`` re-reads the environment."""
    global _internal_logging_enabled
    _internal_logging_enabled = enabled


def set_writer_for_tests(writer: Callable[[dict[str, Any]], None] | None) -> None:
    """Install a payload writer (``None`` restores the logging writer)."""
    global _writer
    _writer = writer


def _log_writer(payload: dict[str, Any]) -> None:
    fields = {
        k: v for k, v in payload.items() if k not in {"component", "message", "level"}
    }
    text = f"[{payload['component']}] {payload['message']}"
    if fields:
        text = f"{text} {fields}"
    _LOGGER.log(
        _LEVELS.get(payload["level"], logging.INFO),
        text,
        extra={"imgsign": payload},
    )


def _emit(level: str, component: str, message: str, fields: dict[str, Any]) -> None:
    if not _is_enabled():
        return
    payload: dict[str, Any] = {
        "component": component,
        "message": message,
        "level": level,
        **fields,
    }
    writer = _writer or _log_writer
    try:
        writer(payload)
    except Exception:
        # A broken writer must not turn a diagnostic into a failure
        return


def debug(component: str, message: str, **fields: Any) -> None:
    _emit("DEBUG", component, message, fields)


def warn(component: str, message: str, **fields: Any) -> None:
    _emit("WARN", component, message, fields)


__all__ = ["debug", "set_enabled", "set_writer_for_tests", "warn"]
