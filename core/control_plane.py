"""
Control plane — the single owner of the clicker state.

All state changes happen here, one message at a time, on whichever thread
drains the inbox (the tkinter thread in the app). Other threads only send.
"""
from __future__ import annotations
import queue
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from core.errors import InvariantViolation, SpawnError
from core.stop_signal import StopSender
from core.worker import RepeatWorker, spawn_worker
from models.messages import (
    ControlMessage, HotkeyBound, KeyObserved, RebindRequested, ToggleRequested,
)
from models.settings import ClickSettings

log = logging.getLogger(__name__)

_SHUTDOWN = object()


class Presenter(Protocol):
    def click_settings(self) -> Optional[ClickSettings]: ...
    def set_hotkey_label(self, key: str) -> None: ...
    def set_awaiting_rebind(self, awaiting: bool) -> None: ...
    def set_running(self, running: bool) -> None: ...
    def show_notice(self, text: str) -> None: ...


@dataclass
class ControlState:
    armed: bool = False
    hotkey: Optional[str] = None
    awaiting_rebind: bool = False


class ControlPlane:
    def __init__(self, simulator, presenter: Presenter, default_hotkey: str, spawn=spawn_worker):
        self._sim = simulator
        self._presenter = presenter
        self._default_hotkey = default_hotkey
        self._spawn = spawn
        self._inbox: "queue.Queue[ControlMessage]" = queue.Queue()
        self._state = ControlState()
        self._stop: Optional[StopSender] = None
        self._worker: Optional[RepeatWorker] = None

    # ── Inspection ───────────────────────────────────────────────────
    @property
    def armed(self) -> bool:
        return self._state.armed

    @property
    def hotkey(self) -> Optional[str]:
        return self._state.hotkey

    @property
    def awaiting_rebind(self) -> bool:
        return self._state.awaiting_rebind

    @property
    def worker(self) -> Optional[RepeatWorker]:
        return self._worker

    # ── Inbox ────────────────────────────────────────────────────────
    def send(self, msg: ControlMessage):
        """Thread-safe; callable from the observer, the UI or the plane itself."""
        self._inbox.put(msg)

    def start(self):
        self.send(HotkeyBound(self._default_hotkey))

    def process_pending(self) -> int:
        """Handle every queued message without blocking. Returns how many ran."""
        count = 0
        while True:
            try:
                msg = self._inbox.get_nowait()
            except queue.Empty:
                return count
            if msg is _SHUTDOWN:
                return count
            self.handle(msg)
            count += 1

    def run(self):
        """Blocking loop until shutdown() is called."""
        while True:
            msg = self._inbox.get()
            if msg is _SHUTDOWN:
                break
            self.handle(msg)

    def shutdown(self):
        self._inbox.put(_SHUTDOWN)

    def close(self):
        if self._state.armed:
            self._disarm()

    # ── Transitions ──────────────────────────────────────────────────
    def handle(self, msg: ControlMessage):
        if isinstance(msg, ToggleRequested):
            self._toggle()
        elif isinstance(msg, KeyObserved):
            self._key_observed(msg.key)
        elif isinstance(msg, RebindRequested):
            if not self._state.awaiting_rebind:
                log.info("Waiting for a key to bind")
            self._state.awaiting_rebind = True
            self._presenter.set_awaiting_rebind(True)
        elif isinstance(msg, HotkeyBound):
            self._state.hotkey = msg.key
            log.info("Hotkey bound to %s", msg.key)
            self._presenter.set_hotkey_label(msg.key)
        else:
            raise TypeError(f"unknown control message: {msg!r}")

    def _key_observed(self, key: str):
        if self._state.awaiting_rebind:
            self._state.awaiting_rebind = False
            self._state.hotkey = key
            self._presenter.set_awaiting_rebind(False)
            self.send(HotkeyBound(key))
        elif self._state.hotkey is not None and key == self._state.hotkey:
            self.send(ToggleRequested())

    def _toggle(self):
        self._check_invariant()
        if self._state.armed:
            self._disarm()
        else:
            self._arm()

    def _arm(self):
        settings = self._presenter.click_settings()
        if settings is None:
            return
        try:
            sender, worker = self._spawn(self._sim, settings)
        except SpawnError as e:
            log.error("%s", e)
            self._presenter.show_notice(str(e))
            return
        self._stop = sender
        self._worker = worker
        self._state.armed = True
        self._presenter.set_running(True)

    def _disarm(self):
        self._stop.fire()
        self._stop = None
        self._worker = None
        self._state.armed = False
        self._presenter.set_running(False)

    def _check_invariant(self):
        if self._state.armed != (self._stop is not None):
            raise InvariantViolation(
                f"armed={self._state.armed} but stop handle "
                f"{'present' if self._stop is not None else 'missing'}"
            )
