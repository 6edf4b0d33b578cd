"""
Error taxonomy for the clicker core.
"""


class ClickerError(Exception):
    pass


class SimulateError(ClickerError):
    """A single simulated input did not reach the OS. Non-fatal."""


class SubscribeError(ClickerError):
    """The global key listener could not be started. Fatal at startup."""


class SpawnError(ClickerError):
    """A repeat worker thread could not be started."""


class InvariantViolation(ClickerError):
    """Armed flag and worker handle disagree. Never caught."""
