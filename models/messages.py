"""
Control messages consumed by the control plane.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ToggleRequested:
    pass


@dataclass(frozen=True)
class KeyObserved:
    key: str


@dataclass(frozen=True)
class RebindRequested:
    pass


@dataclass(frozen=True)
class HotkeyBound:
    key: str


ControlMessage = Union[ToggleRequested, KeyObserved, RebindRequested, HotkeyBound]
