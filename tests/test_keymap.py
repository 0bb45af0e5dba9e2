import pytest

from lanrelay.keymap import (
    ScancodeError,
    linux_keycode_to_windows_scancode,
    linux_to_windows,
    windows_to_linux,
)
from lanrelay.scancode import Linux, Windows


@pytest.mark.parametrize(
    "linux, windows",
    [
        (Linux.KeyA, Windows.KeyA),
        (Linux.KeyBackspace, Windows.KeyDelete),
        (Linux.KeyDelete, Windows.KeyDeleteForward),
        (Linux.KeyLeftMeta, Windows.KeyLeftGUI),
        (Linux.KeyKp7, Windows.Keypad7Home),
        (Linux.KeyZenkakuhankaku, Windows.KeyF24),
        (Linux.KeyLinefeed, Windows.KeyEnter),
        (Linux.KeyPower, Windows.Shutdown),
        (Linux.KeyF24, Windows.KeyF24),
    ],
)
def test_linux_to_windows_pairs(linux, windows):
    assert linux_to_windows(linux) is windows


@pytest.mark.parametrize(
    "windows, linux",
    [
        (Windows.KeyDelete, Linux.KeyBackspace),
        (Windows.ErrorRollOver, Linux.KeyRo),
        (Windows.KeyFakeRightShift, Linux.KeyRightShift),
        (Windows.KeyApplication, Linux.KeyMenu),
        (Windows.ACStop, Linux.KeyStop),
        (Windows.KeyStop, Linux.KeyStopcd),
    ],
)
def test_windows_to_linux_pairs(windows, linux):
    assert windows_to_linux(windows) is linux


def test_accepts_plain_ints():
    assert linux_to_windows(int(Linux.KeyQ)) is Windows.KeyQ
    assert windows_to_linux(int(Windows.KeyQ)) is Linux.KeyQ


@pytest.mark.parametrize(
    "key", [Linux.KeyReserved, Linux.KeyMacro, Linux.KeyCut, Linux.KeyCount, Linux.Invalid]
)
def test_unmapped_linux_keys_raise(key):
    with pytest.raises(ScancodeError):
        linux_to_windows(key)


def test_unmapped_windows_code_raises():
    with pytest.raises(ScancodeError):
        windows_to_linux(Windows.ALConsumerControlConfiguration)


def test_unknown_codes_raise():
    with pytest.raises(ScancodeError):
        linux_to_windows(5000)
    with pytest.raises(ScancodeError):
        windows_to_linux(0x7FFFFF)


def test_scancode_error_is_value_error():
    with pytest.raises(ValueError):
        linux_to_windows(Linux.KeyUndo)


def test_every_windows_code_except_one_maps_to_linux():
    failed = []
    for code in Windows:
        try:
            windows_to_linux(code)
        except ScancodeError:
            failed.append(code)
    assert failed == [Windows.ALConsumerControlConfiguration]


def test_shared_names_round_trip():
    for key in Linux:
        try:
            code = linux_to_windows(key)
        except ScancodeError:
            continue
        if code.name == key.name:
            assert windows_to_linux(code) is key


def test_raw_keycode_translation():
    assert linux_keycode_to_windows_scancode(int(Linux.KeyA)) == int(Windows.KeyA)
    assert linux_keycode_to_windows_scancode(int(Linux.KeyUp)) == int(Windows.KeyUp)


def test_raw_keycode_fits_sixteen_bits():
    for key in Linux:
        code = linux_keycode_to_windows_scancode(int(key))
        if code is not None:
            assert 0 <= code <= 0xFFFF


def test_raw_keycode_failures_return_none():
    assert linux_keycode_to_windows_scancode(100000) is None
    assert linux_keycode_to_windows_scancode(int(Linux.KeyMacro)) is None