"""
Click settings and primitive action descriptors.
"""
from __future__ import annotations
from dataclasses import dataclass


# time.sleep overflows on some platforms well before int limits.
MAX_DELAY_MS = 24 * 60 * 60 * 1000


class ButtonKind:
    LEFT   = "left"
    RIGHT  = "right"
    MIDDLE = "middle"

    ALL = [LEFT, RIGHT, MIDDLE]


@dataclass(frozen=True)
class ClickSettings:
    delay_ms: int = 20
    button: str = ButtonKind.LEFT

    def __post_init__(self):
        if not 0 <= self.delay_ms <= MAX_DELAY_MS:
            raise ValueError(f"delay_ms must be between 0 and {MAX_DELAY_MS}, got {self.delay_ms}")
        if self.button not in ButtonKind.ALL:
            raise ValueError(f"unknown button: {self.button!r}")


@dataclass(frozen=True)
class ActionDescriptor:
    """One press or release of a mouse button."""
    button: str
    pressed: bool

    @classmethod
    def press(cls, button: str) -> ActionDescriptor:
        return cls(button=button, pressed=True)

    @classmethod
    def release(cls, button: str) -> ActionDescriptor:
        return cls(button=button, pressed=False)

    def label(self) -> str:
        return f"{self.button.capitalize()} {'press' if self.pressed else 'release'}"
