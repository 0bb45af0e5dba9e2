"""Keyboard modifier tracking using the X11 modifier mask layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntFlag

from .events import Modifiers
from .scancode import Linux

__all__ = ["XMods", "ModifierState"]

log = logging.getLogger(__name__)


class XMods(IntFlag):
    """Modifier masks as defined by the X protocol."""

    ShiftMask = 1 << 0
    LockMask = 1 << 1
    ControlMask = 1 << 2
    Mod1Mask = 1 << 3
    Mod2Mask = 1 << 4
    Mod3Mask = 1 << 5
    Mod4Mask = 1 << 6
    Mod5Mask = 1 << 7


_ALL_BITS = 0xFF
_NONE = XMods(0)

_LOCK_MASKS = XMods.LockMask | XMods.Mod2Mask | XMods.Mod3Mask
_PRESSED_MASKS = XMods.ShiftMask | XMods.ControlMask | XMods.Mod1Mask | XMods.Mod4Mask

_PRESSED_KEYS: dict[Linux, XMods] = {
    Linux.KeyLeftShift: XMods.ShiftMask,
    Linux.KeyRightShift: XMods.ShiftMask,
    Linux.KeyLeftCtrl: XMods.ControlMask,
    Linux.KeyRightCtrl: XMods.ControlMask,
    Linux.KeyLeftAlt: XMods.Mod1Mask,
    Linux.KeyRightalt: XMods.Mod1Mask,
    Linux.KeyLeftMeta: XMods.Mod4Mask,
    Linux.KeyRightmeta: XMods.Mod4Mask,
}

_LOCK_KEYS: dict[Linux, XMods] = {
    Linux.KeyCapsLock: XMods.LockMask,
    Linux.KeyNumlock: XMods.Mod2Mask,
    Linux.KeyScrollLock: XMods.Mod3Mask,
}


def _truncate(bits: int) -> XMods:
    return XMods(int(bits) & _ALL_BITS)


@dataclass
class ModifierState:
    """Modifier state of one virtual keyboard, kept in step with key events."""

    mods: XMods = field(default=_NONE)

    def update_by_mods_event(self, event: object) -> None:
        """Take over the depressed and locked modifiers of a modifiers event."""
        if isinstance(event, Modifiers):
            self.mods = _truncate(event.depressed) | _truncate(event.locked)

    def update_by_key_event(self, key: int, state: int) -> bool:
        """Apply a key press or release; return whether it was a modifier key."""
        try:
            linux_key = Linux(key)
        except ValueError:
            return False
        log.debug("attempting to process modifier from: %s", linux_key.name)
        pressed_mask = _PRESSED_KEYS.get(linux_key, _NONE)
        locked_mask = _LOCK_KEYS.get(linux_key, _NONE)
        if not pressed_mask and not locked_mask:
            log.debug("%s is not a modifier key", linux_key.name)
            return False
        if state == 1:
            self.mods = self.mods | pressed_mask
        else:
            cleared = int(self.mods) & ~int(pressed_mask)
            self.mods = _truncate(cleared ^ int(locked_mask))
        return True

    def mask_locks(self) -> XMods:
        """The lock modifiers (caps, num and scroll lock) currently active."""
        return _truncate(self.mods & _LOCK_MASKS)

    def mask_pressed(self) -> XMods:
        """The held modifiers (shift, control, alt, super) currently active."""
        return _truncate(self.mods & _PRESSED_MASKS)