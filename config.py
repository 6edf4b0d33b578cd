"""
Central configuration for AutoClicker.

Defaults can be overridden through environment variables; nothing is persisted.
"""
from __future__ import annotations
import logging
import os

from models.settings import MAX_DELAY_MS, ButtonKind

log = logging.getLogger(__name__)

# ── Timing ───────────────────────────────────────────────────────────
SIMULATE_SETTLE_MS = 10   # let the OS register each injected event
POLL_INTERVAL_MS   = 15   # UI thread drains the control queue this often
WORKER_JOIN_S      = 1.0

# ── Logging ──────────────────────────────────────────────────────────
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _env_int(name: str, default: int, minimum: int = 0, maximum: int = None) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        log.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value < minimum:
        log.warning("Ignoring %s=%r: must be >= %d", name, raw, minimum)
        return default
    if maximum is not None and value > maximum:
        log.warning("Ignoring %s=%r: must be <= %d", name, raw, maximum)
        return default
    return value


def _env_choice(name: str, default: str, choices) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value not in choices:
        log.warning("Ignoring %s=%r: expected one of %s", name, raw, ", ".join(choices))
        return default
    return value


def _env_key(name: str, default: str) -> str:
    raw = (os.environ.get(name) or "").strip().lower()
    return raw or default


DEFAULT_HOTKEY   = _env_key("AUTOCLICKER_HOTKEY", "f9")
DEFAULT_DELAY_MS = _env_int("AUTOCLICKER_DELAY_MS", 20, maximum=MAX_DELAY_MS)
DEFAULT_BUTTON   = _env_choice("AUTOCLICKER_BUTTON", ButtonKind.LEFT, ButtonKind.ALL)
LOG_LEVEL        = _env_choice("AUTOCLICKER_LOG_LEVEL", "info",
                               ["debug", "info", "warning", "error", "critical"]).upper()
