"""
Repeat worker — presses and releases one mouse button at a fixed delay until
its stop signal fires.
"""
from __future__ import annotations
import time
import threading
import logging
from typing import Optional, Tuple

from core.errors import SimulateError, SpawnError
from core.stop_signal import StopReceiver, StopSender, stop_signal
from models.settings import ActionDescriptor, ClickSettings

log = logging.getLogger(__name__)


class RepeatWorker:
    def __init__(self, simulator, settings: ClickSettings, stop: StopReceiver):
        self._sim = simulator
        self._settings = settings
        self._stop = stop
        self._thread: Optional[threading.Thread] = None
        self.cycles = 0

    @property
    def settings(self) -> ClickSettings:
        return self._settings

    def start(self):
        self._thread = threading.Thread(target=self._run, daemon=True, name="RepeatWorker")
        try:
            self._thread.start()
        except RuntimeError as e:
            self._thread = None
            raise SpawnError(f"Could not start clicking: {e}") from e

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the thread to exit. Returns True once it has."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    # ── Main loop ────────────────────────────────────────────────────
    def _run(self):
        log.info("Start clicking (%s button, %d ms)", self._settings.button, self._settings.delay_ms)
        press = ActionDescriptor.press(self._settings.button)
        release = ActionDescriptor.release(self._settings.button)
        delay_s = self._settings.delay_ms / 1000.0

        while True:
            self._simulate(press)
            self._simulate(release)
            self.cycles += 1
            time.sleep(delay_s)
            if self._stop.fired():
                break

        log.info("Stop clicking after %d cycles", self.cycles)

    def _simulate(self, action: ActionDescriptor):
        try:
            self._sim.simulate(action)
        except SimulateError as e:
            log.warning("%s", e)


def spawn_worker(simulator, settings: ClickSettings) -> Tuple[StopSender, RepeatWorker]:
    """Start a worker and hand back the only sender able to stop it."""
    sender, receiver = stop_signal()
    worker = RepeatWorker(simulator, settings, receiver)
    try:
        worker.start()
    except SpawnError:
        sender.close()
        raise
    return sender, worker
