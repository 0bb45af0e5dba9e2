import dataclasses

import pytest

from lanrelay.events import (
    BTN_BACK,
    BTN_FORWARD,
    BTN_LEFT,
    BTN_MIDDLE,
    BTN_RIGHT,
    Axis,
    AxisDiscrete120,
    Button,
    Key,
    Modifiers,
    Motion,
    is_keyboard_event,
    is_pointer_event,
)
from lanrelay.scancode import Linux


def test_motion_integral_values_have_no_fraction():
    assert str(Motion(time=0, dx=3.0, dy=-4.0)) == "motion(3,-4)"


def test_motion_fractional_values():
    assert str(Motion(time=7, dx=1.5, dy=0.25)) == "motion(1.5,0.25)"


def test_motion_small_value_has_no_exponent():
    text = str(Motion(time=0, dx=1e-7, dy=0.0))
    assert "e" not in text
    assert text == "motion(0.0000001,0)"


@pytest.mark.parametrize(
    "button, name",
    [
        (BTN_LEFT, "left"),
        (BTN_RIGHT, "right"),
        (BTN_MIDDLE, "middle"),
        (BTN_FORWARD, "forward"),
        (BTN_BACK, "back"),
    ],
)
def test_named_buttons(button, name):
    assert str(Button(time=0, button=button, state=1)) == f"button({name}, 1)"


def test_unknown_button_uses_number():
    assert str(Button(time=0, button=5, state=0)) == "button(5, 0"


def test_axis_str():
    assert str(Axis(time=0, axis=1, value=-2.5)) == "scroll(1, -2.5)"


def test_axis_discrete_str():
    assert str(AxisDiscrete120(axis=0, value=120)) == "scroll-120 (0, 120)"


def test_key_uses_linux_name():
    assert str(Key(time=0, key=int(Linux.KeyLeftShift), state=1)) == "key(KeyLeftShift, 1)"


def test_unknown_key_uses_number():
    assert str(Key(time=0, key=9999, state=0)) == "key(9999, 0)"


def test_modifiers_str():
    assert str(Modifiers(depressed=1, latched=0, locked=2, group=3)) == "modifiers(1,0,2,3)"


@pytest.mark.parametrize(
    "event",
    [
        Motion(0, 1.0, 1.0),
        Button(0, BTN_LEFT, 1),
        Axis(0, 0, 1.0),
        AxisDiscrete120(0, 120),
    ],
)
def test_pointer_classification(event):
    assert is_pointer_event(event)
    assert not is_keyboard_event(event)


@pytest.mark.parametrize("event", [Key(0, 30, 1), Modifiers(0, 0, 0, 0)])
def test_keyboard_classification(event):
    assert is_keyboard_event(event)
    assert not is_pointer_event(event)


def test_non_events_are_neither():
    assert not is_pointer_event("motion")
    assert not is_keyboard_event(42)


def test_events_are_value_objects():
    assert Key(1, 30, 1) == Key(1, 30, 1)
    assert Key(1, 30, 1) != Key(1, 30, 0)
    assert len({Key(1, 30, 1), Key(1, 30, 1)}) == 1


def test_events_are_immutable():
    event = Motion(0, 1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.dx = 5.0
    assert event.dx == 1.0
    assert str(event) == "motion(1,2)"


def test_button_constants_follow_linux_codes():
    rendered = [str(Button(time=0, button=code, state=0)) for code in range(0x110, 0x115)]
    assert rendered == [
        "button(left, 0)",
        "button(right, 0)",
        "button(middle, 0)",
        "button(back, 0)",
        "button(forward, 0)",
    ]