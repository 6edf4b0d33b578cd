"""
Shared fakes for the clicker tests.

Nothing here touches pynput: the simulator, the presenter and the key
listener are all stand-ins. The app tests import tkinter but swap every
widget for a mock, so no window is ever opened.
"""
import sys
import time
import threading
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.errors import SimulateError  # noqa: E402
from models.settings import ClickSettings  # noqa: E402


class FakeSimulator:
    def __init__(self, fail=False):
        self.fail = fail
        self.actions = []

    def simulate(self, action):
        self.actions.append(action)
        if self.fail:
            raise SimulateError(f"Could not send {action.label()}")


class FakePresenter:
    def __init__(self, settings=ClickSettings(delay_ms=1)):
        self.settings = settings
        self.hotkey_labels = []
        self.rebind_flags = []
        self.running = []
        self.notices = []

    def click_settings(self):
        return self.settings

    def set_hotkey_label(self, key):
        self.hotkey_labels.append(key)

    def set_awaiting_rebind(self, awaiting):
        self.rebind_flags.append(awaiting)

    def set_running(self, running):
        self.running.append(running)

    def show_notice(self, text):
        self.notices.append(text)


class FakeListener:
    def __init__(self, on_press, die_on_start=False):
        self.on_press = on_press
        self.die_on_start = die_on_start
        self.started = False
        self.stopped = False

    def start(self):
        self.started = True

    def wait(self):
        pass

    def is_alive(self):
        return self.started and not self.stopped and not self.die_on_start

    def stop(self):
        self.stopped = True


@pytest.fixture
def simulator():
    return FakeSimulator()


@pytest.fixture
def failing_simulator():
    return FakeSimulator(fail=True)


@pytest.fixture
def presenter():
    return FakePresenter()


class ListenerFactory:
    def __init__(self):
        self.created = []
        self.die_on_start = False

    def __call__(self, on_press):
        listener = FakeListener(on_press, die_on_start=self.die_on_start)
        self.created.append(listener)
        return listener


@pytest.fixture
def listener_factory():
    return ListenerFactory()


@pytest.fixture
def wait_until():
    def _wait(predicate, timeout=2.0):
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if predicate():
                return True
            time.sleep(0.001)
        return predicate()

    return _wait


@pytest.fixture(autouse=True)
def no_leaked_workers():
    yield
    for t in threading.enumerate():
        if t.name == "RepeatWorker":
            t.join(2.0)
            assert not t.is_alive(), "repeat worker still running after test"
