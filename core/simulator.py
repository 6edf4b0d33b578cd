"""
Action simulator — injects single mouse press/release events via pynput.
"""
from __future__ import annotations
import time
import logging

import config
from core.errors import SimulateError
from models.settings import ActionDescriptor

log = logging.getLogger(__name__)


class ActionSimulator:
    """
    Performs one primitive input action, then blocks briefly so the OS
    registers it before the next call.
    """

    def __init__(self, controller=None, buttons=None, settle_ms: int = config.SIMULATE_SETTLE_MS):
        if controller is None:
            # pynput needs a display at import time; import it only when injecting for real.
            from pynput.mouse import Button, Controller as MouseCtrl
            controller = MouseCtrl()
            buttons = {"left": Button.left, "right": Button.right, "middle": Button.middle}
        self._mouse = controller
        self._buttons = buttons or {}
        self._settle_s = settle_ms / 1000.0

    def simulate(self, action: ActionDescriptor):
        btn = self._buttons.get(action.button, action.button)
        try:
            if action.pressed:
                self._mouse.press(btn)
            else:
                self._mouse.release(btn)
        except Exception as e:
            raise SimulateError(f"Could not send {action.label()}: {e}") from e
        time.sleep(self._settle_s)
