"""
One-shot stop signal shared by exactly one control plane and one worker.

Dropping the sender without firing it counts as firing, so an abandoned
worker still terminates.
"""
from __future__ import annotations
import threading
import weakref
from typing import Tuple


class StopReceiver:
    def __init__(self, event: threading.Event):
        self._event = event

    def fired(self) -> bool:
        """Non-blocking check."""
        return self._event.is_set()

    def wait(self, timeout: float = None) -> bool:
        return self._event.wait(timeout)


class StopSender:
    def __init__(self, event: threading.Event):
        self._event = event
        self._fired = False
        # Runs when the sender is garbage collected or closed explicitly.
        self._finalizer = weakref.finalize(self, event.set)

    @property
    def fired(self) -> bool:
        return self._fired

    def fire(self):
        if self._fired:
            raise RuntimeError("stop signal already fired")
        self._fired = True
        self._finalizer()

    def close(self):
        """Release the sender; the worker sees this as a stop."""
        self._finalizer()


def stop_signal() -> Tuple[StopSender, StopReceiver]:
    event = threading.Event()
    return StopSender(event), StopReceiver(event)
