"""Translation between Linux evdev key codes and Windows scan codes."""

from __future__ import annotations

import logging
import string

from .scancode import Linux, Windows

__all__ = [
    "ScancodeError",
    "linux_to_windows",
    "windows_to_linux",
    "linux_keycode_to_windows_scancode",
]

log = logging.getLogger(__name__)


class ScancodeError(ValueError):
    """Raised when a key code has no counterpart in the target table."""


_SHARED_NAMES: tuple[str, ...] = (
    *(f"Key{c}" for c in string.ascii_uppercase),
    *(f"Key{d}" for d in string.digits),
    *(f"KeyF{n}" for n in range(1, 25)),
    "KeyEsc",
    "KeyMinus",
    "KeyEqual",
    "KeyTab",
    "KeyEnter",
    "KeyLeftCtrl",
    "KeyApostrophe",
    "KeyGrave",
    "KeyLeftShift",
    "KeyBackslash",
    "KeyComma",
    "KeyDot",
    "KeySlash",
    "KeyRightShift",
    "KeyLeftAlt",
    "KeySpace",
    "KeyCapsLock",
    "KeyScrollLock",
    "KeyRightCtrl",
    "KeyHome",
    "KeyUp",
    "KeyLeft",
    "KeyRight",
    "KeyEnd",
    "KeyDown",
    "KeyInsert",
    "KeyMute",
    "KeyVolumeDown",
    "KeyVolumeUp",
    "KeyPause",
)

_L, _W = Linux, Windows

_LINUX_TO_WINDOWS: dict[Linux, Windows] = {
    **{_L[name]: _W[name] for name in _SHARED_NAMES},
    _L.KeyBackspace: _W.KeyDelete,
    _L.KeyLeftbrace: _W.KeyLeftBrace,
    _L.KeyRightbrace: _W.KeyRightBrace,
    _L.KeySemicolon: _W.KeySemiColon,
    _L.KeyKpAsterisk: _W.KeypadStar,
    _L.KeyNumlock: _W.KeypadNumLock,
    _L.KeyKp7: _W.Keypad7Home,
    _L.KeyKp8: _W.Keypad8UpArrow,
    _L.KeyKp9: _W.Keypad9PageUp,
    _L.KeyKpMinus: _W.KeypadDash,
    _L.KeyKp4: _W.Keypad4LeftArrow,
    _L.KeyKp5: _W.Keypad5,
    _L.KeyKp6: _W.Keypad6RightArrow,
    _L.KeyKpplus: _W.KeypadPlus,
    _L.KeyKp1: _W.Keypad1End,
    _L.KeyKp2: _W.Keypad2DownArrow,
    _L.KeyKp3: _W.Keypad3PageDn,
    _L.KeyKp0: _W.Keypad0Insert,
    _L.KeyKpDot: _W.KeypadDot,
    _L.KeyZenkakuhankaku: _W.KeyF24,
    _L.Key102nd: _W.KeyNonUSSlashBar,
    _L.KeyRo: _W.KeyInternational1,
    _L.KeyKatakana: _W.KeyLANG3,
    _L.KeyHiragana: _W.KeyLANG4,
    _L.KeyHenkan: _W.KeyInternational4,
    _L.KeyKatakanahiragana: _W.KeyInternational2,
    _L.KeyMuhenkan: _W.KeyInternational5,
    _L.KeyKpJpComma: _W.KeypadComma,
    _L.KeyKpEnter: _W.KeypadEnter,
    _L.KeyKpslash: _W.KeypadSlash,
    _L.KeySysrq: _W.KeyPrintScreen,
    _L.KeyRightalt: _W.KeyRightAlt,
    _L.KeyLinefeed: _W.KeyEnter,
    _L.KeyPageup: _W.KeyPageUp,
    _L.KeyPagedown: _W.KeyPageDown,
    _L.KeyDelete: _W.KeyDeleteForward,
    _L.KeyPower: _W.Shutdown,
    _L.KeyKpequal: _W.KeypadEquals,
    _L.KeyKpplusminus: _W.KeypadPlus,
    _L.KeyKpcomma: _W.KeypadComma,
    _L.KeyHanguel: _W.KeyLANG1,
    _L.KeyHanja: _W.KeyLANG2,
    _L.KeyYen: _W.KeyInternational3,
    _L.KeyLeftMeta: _W.KeyLeftGUI,
    _L.KeyRightmeta: _W.KeyRightGUI,
    _L.KeyCompose: _W.KeyApplication,
    _L.KeyStop: _W.ACStop,
    _L.KeyFind: _W.ACSearch,
    _L.KeyHelp: _W.KeyF1,
    _L.KeyMenu: _W.KeyApplication,
    _L.KeyCalc: _W.ALCalculator,
    _L.KeySleep: _W.SystemSleep,
    _L.KeyWakeup: _W.SystemWakeUp,
    _L.KeyFile: _W.ALLocalMachineBrowser,
    _L.KeyWww: _W.ACSearch,
    _L.KeyMail: _W.ALEmailReader,
    _L.KeyBookmarks: _W.ACBookmarks,
    _L.KeyComputer: _W.ACHome,
    _L.KeyBack: _W.ACBack,
    _L.KeyForward: _W.ACForward,
    _L.KeyNextsong: _W.KeyScanNextTrack,
    _L.KeyPlaypause: _W.KeyPlayPause,
    _L.KeyPrevioussong: _W.KeyScanPreviousTrack,
    _L.KeyStopcd: _W.KeyStop,
    _L.KeyHomepage: _W.ACHome,
    _L.KeyRefresh: _W.ACRefresh,
}

_WINDOWS_TO_LINUX: dict[Windows, Linux] = {
    **{_W[name]: _L[name] for name in _SHARED_NAMES},
    _W.Shutdown: _L.KeyPower,
    _W.SystemSleep: _L.KeySleep,
    _W.SystemWakeUp: _L.KeyWakeup,
    _W.ErrorRollOver: _L.KeyRo,
    _W.KeyDelete: _L.KeyBackspace,
    _W.KeyLeftBrace: _L.KeyLeftbrace,
    _W.KeyRightBrace: _L.KeyRightbrace,
    _W.KeySemiColon: _L.KeySemicolon,
    _W.KeyPrintScreen: _L.KeySysrq,
    _W.KeyPageUp: _L.KeyPageup,
    _W.KeyDeleteForward: _L.KeyDelete,
    _W.KeyPageDown: _L.KeyPagedown,
    _W.KeypadNumLock: _L.KeyNumlock,
    _W.KeypadSlash: _L.KeyKpslash,
    _W.KeypadStar: _L.KeyKpAsterisk,
    _W.KeypadDash: _L.KeyKpMinus,
    _W.KeypadPlus: _L.KeyKpplus,
    _W.KeypadEnter: _L.KeyKpEnter,
    _W.Keypad1End: _L.KeyKp1,
    _W.Keypad2DownArrow: _L.KeyKp2,
    _W.Keypad3PageDn: _L.KeyKp3,
    _W.Keypad4LeftArrow: _L.KeyKp4,
    _W.Keypad5: _L.KeyKp5,
    _W.Keypad6RightArrow: _L.KeyKp6,
    _W.Keypad7Home: _L.KeyKp7,
    _W.Keypad8UpArrow: _L.KeyKp8,
    _W.Keypad9PageUp: _L.KeyKp9,
    _W.Keypad0Insert: _L.KeyKp0,
    _W.KeypadDot: _L.KeyKpDot,
    _W.KeyNonUSSlashBar: _L.Key102nd,
    _W.KeyApplication: _L.KeyMenu,
    _W.KeypadEquals: _L.KeyKpequal,
    _W.KeypadComma: _L.KeyKpcomma,
    _W.KeyInternational1: _L.KeyRo,
    _W.KeyInternational2: _L.KeyKatakanahiragana,
    _W.KeyInternational3: _L.KeyYen,
    _W.KeyInternational4: _L.KeyHenkan,
    _W.KeyInternational5: _L.KeyMuhenkan,
    _W.KeyLANG1: _L.KeyHanguel,
    _W.KeyLANG2: _L.KeyHanja,
    _W.KeyLANG3: _L.KeyKatakana,
    _W.KeyLANG4: _L.KeyHiragana,
    _W.KeyLeftGUI: _L.KeyLeftMeta,
    _W.KeyFakeRightShift: _L.KeyRightShift,
    _W.KeyRightAlt: _L.KeyRightalt,
    _W.KeyRightGUI: _L.KeyRightmeta,
    _W.KeyScanNextTrack: _L.KeyNextsong,
    _W.KeyScanPreviousTrack: _L.KeyPrevioussong,
    _W.KeyStop: _L.KeyStopcd,
    _W.KeyPlayPause: _L.KeyPlaypause,
    _W.ALEmailReader: _L.KeyMail,
    _W.ALCalculator: _L.KeyCalc,
    _W.ALLocalMachineBrowser: _L.KeyFile,
    _W.ACSearch: _L.KeyWww,
    _W.ACHome: _L.KeyHomepage,
    _W.ACBack: _L.KeyBack,
    _W.ACForward: _L.KeyForward,
    _W.ACStop: _L.KeyStop,
    _W.ACRefresh: _L.KeyRefresh,
    _W.ACBookmarks: _L.KeyBookmarks,
}


def linux_to_windows(key: Linux | int) -> Windows:
    """Return the Windows scan code for a Linux key code."""
    try:
        linux_key = Linux(key)
    except ValueError as exc:
        raise ScancodeError(f"unknown linux key code: {key}") from exc
    try:
        return _LINUX_TO_WINDOWS[linux_key]
    except KeyError:
        raise ScancodeError(f"no windows scancode for {linux_key.name}") from None


def windows_to_linux(code: Windows | int) -> Linux:
    """Return the Linux key code for a Windows scan code."""
    try:
        windows_code = Windows(code)
    except ValueError as exc:
        raise ScancodeError(f"unknown windows scancode: {code:#x}") from exc
    try:
        return _WINDOWS_TO_LINUX[windows_code]
    except KeyError:
        raise ScancodeError(f"no linux key code for {windows_code.name}") from None


def linux_keycode_to_windows_scancode(keycode: int) -> int | None:
    """Translate a raw Linux key code to a 16-bit Windows scan code.

    Returns ``None`` (after logging a warning) when the code is unknown or
    has no Windows counterpart.
    """
    try:
        linux_key = Linux(keycode)
    except ValueError:
        log.warning("unknown keycode: %s", keycode)
        return None
    log.debug("linux code: %s", linux_key.name)
    try:
        windows_code = linux_to_windows(linux_key)
    except ScancodeError:
        log.warning(
            "failed to translate linux code into windows scancode: %s", linux_key.name
        )
        return None
    log.debug("windows code: %s", windows_code.name)
    return int(windows_code) & 0xFFFF