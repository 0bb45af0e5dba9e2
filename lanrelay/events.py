"""Pointer and keyboard input events exchanged between peers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .scancode import Linux

__all__ = [
    "BTN_LEFT",
    "BTN_RIGHT",
    "BTN_MIDDLE",
    "BTN_BACK",
    "BTN_FORWARD",
    "Motion",
    "Button",
    "Axis",
    "AxisDiscrete120",
    "Key",
    "Modifiers",
    "PointerEvent",
    "KeyboardEvent",
    "Event",
    "is_pointer_event",
    "is_keyboard_event",
]

BTN_LEFT = 0x110
BTN_RIGHT = 0x111
BTN_MIDDLE = 0x112
BTN_BACK = 0x113
BTN_FORWARD = 0x114

_BUTTON_NAMES = {
    BTN_LEFT: "left",
    BTN_RIGHT: "right",
    BTN_MIDDLE: "middle",
    BTN_FORWARD: "forward",
    BTN_BACK: "back",
}


def _format_float(value: float) -> str:
    """Format a float the shortest way, without exponent or trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        text = str(int(value))
        return "-0" if value == 0 and math.copysign(1.0, value) < 0 else text
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


@dataclass(frozen=True)
class Motion:
    """Relative pointer motion."""

    time: int
    dx: float
    dy: float

    def __str__(self) -> str:
        return f"motion({_format_float(self.dx)},{_format_float(self.dy)})"


@dataclass(frozen=True)
class Button:
    """Mouse button press (state 1) or release (state 0)."""

    time: int
    button: int
    state: int

    def __str__(self) -> str:
        name = _BUTTON_NAMES.get(self.button)
        if name is not None:
            return f"button({name}, {self.state})"
        return f"button({self.button}, {self.state}"


@dataclass(frozen=True)
class Axis:
    """Continuous scroll, as produced by touchpads."""

    time: int
    axis: int
    value: float

    def __str__(self) -> str:
        return f"scroll({self.axis}, {_format_float(self.value)})"


@dataclass(frozen=True)
class AxisDiscrete120:
    """Discrete scroll for mouse wheels; 120 is one tick."""

    axis: int
    value: int

    def __str__(self) -> str:
        return f"scroll-120 ({self.axis}, {self.value})"


@dataclass(frozen=True)
class Key:
    """Key press (state 1) or release (state 0) of a Linux key code."""

    time: int
    key: int
    state: int

    def __str__(self) -> str:
        try:
            label = Linux(self.key).name
        except ValueError:
            label = str(self.key)
        return f"key({label}, {self.state})"


@dataclass(frozen=True)
class Modifiers:
    """Change of the keyboard modifier state."""

    depressed: int
    latched: int
    locked: int
    group: int

    def __str__(self) -> str:
        return f"modifiers({self.depressed},{self.latched},{self.locked},{self.group})"


PointerEvent = Union[Motion, Button, Axis, AxisDiscrete120]
KeyboardEvent = Union[Key, Modifiers]
Event = Union[PointerEvent, KeyboardEvent]

_POINTER_TYPES = (Motion, Button, Axis, AxisDiscrete120)
_KEYBOARD_TYPES = (Key, Modifiers)


def is_pointer_event(event: object) -> bool:
    """Tell whether the event is a pointer event."""
    return isinstance(event, _POINTER_TYPES)


def is_keyboard_event(event: object) -> bool:
    """Tell whether the event is a keyboard event."""
    return isinstance(event, _KEYBOARD_TYPES)