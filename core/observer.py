"""
Global key observer using pynput — works even when the app is in background.
Every key press becomes a KeyObserved message for the control plane.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional

from core.errors import SubscribeError
from models.messages import ControlMessage, KeyObserved

log = logging.getLogger(__name__)


def key_name(key) -> str:
    """Normalise a pynput key to the string used for hotkey matching."""
    name = getattr(key, "name", None)
    if name:
        return name.lower()
    char = getattr(key, "char", None)
    if char:
        return char.lower()
    return str(key).lower()


def _pynput_listener(on_press):
    from pynput import keyboard as kb
    return kb.Listener(on_press=on_press)


class GlobalInputObserver:
    def __init__(self, send: Callable[[ControlMessage], None], listener_factory=None):
        self._send = send
        self._factory = listener_factory or _pynput_listener
        self._listener = None

    @property
    def running(self) -> bool:
        return self._listener is not None and self._listener.is_alive()

    def start(self):
        """Subscribe for the rest of the process lifetime. Raises SubscribeError."""
        if self._listener is not None:
            return
        try:
            listener = self._factory(on_press=self._on_press)
            listener.start()
            listener.wait()
        except Exception as e:
            raise SubscribeError(f"Could not listen for global key events: {e}") from e
        if not listener.is_alive():
            raise SubscribeError("Global key listener exited during startup")
        self._listener = listener
        log.info("Listening for global key events")

    def stop(self):
        if self._listener is not None:
            self._listener.stop()
            self._listener = None

    def _on_press(self, key):
        self._send(KeyObserved(key_name(key)))
