"""Input emulation front end: key bookkeeping on top of a pluggable backend."""

from __future__ import annotations

import abc
import logging
from enum import Enum
from typing import Awaitable, Callable

from .errors import EmulationCreationError, EmulationError, NoAvailableBackend
from .events import Event, Key, Modifiers
from .scancode import Linux

__all__ = ["Backend", "Emulation", "DummyEmulation", "InputEmulation"]

log = logging.getLogger(__name__)


class Backend(Enum):
    """Available emulation backends, in order of preference."""

    DUMMY = "dummy"

    def __str__(self) -> str:
        return self.value


class Emulation(abc.ABC):
    """A backend that turns input events into emulated input."""

    @abc.abstractmethod
    async def consume(self, event: Event, handle: int) -> None:
        """Emulate one event on behalf of the client ``handle``."""

    @abc.abstractmethod
    async def create(self, handle: int) -> None:
        """Prepare emulation for a new client."""

    @abc.abstractmethod
    async def destroy(self, handle: int) -> None:
        """Release everything held for a client."""

    @abc.abstractmethod
    async def terminate(self) -> None:
        """Shut the backend down."""


class DummyEmulation(Emulation):
    """Fallback backend that logs the events it receives.

    It keeps track of the clients it was told about, so that its state can
    be inspected, but emulates nothing.
    """

    def __init__(self) -> None:
        self.clients: set[int] = set()
        self.terminated = False

    async def consume(self, event: Event, handle: int) -> None:
        log.info("received event: (%s) %s", handle, event)

    async def create(self, handle: int) -> None:
        self.clients.add(handle)

    async def destroy(self, handle: int) -> None:
        self.clients.discard(handle)

    async def terminate(self) -> None:
        self.clients.clear()
        self.terminated = True


async def _make_dummy() -> Emulation:
    return DummyEmulation()


_FACTORIES: dict[Backend, Callable[[], Awaitable[Emulation]]] = {
    Backend.DUMMY: _make_dummy,
}


class InputEmulation:
    """Tracks clients and their pressed keys, forwarding events to a backend.

    Repeated presses or releases of the same key are filtered out, so the
    backend never sees a key pressed twice or released while up.
    """

    def __init__(self, emulation: Emulation) -> None:
        self.emulation = emulation
        self._handles: set[int] = set()
        self._pressed_keys: dict[int, set[int]] = {}

    @classmethod
    async def with_backend(cls, backend: Backend) -> InputEmulation:
        """Create an emulation using exactly the given backend."""
        factory = _FACTORIES[Backend(backend)]
        emulation = await factory()
        return cls(emulation)

    @classmethod
    async def new(cls, backend: Backend | None = None) -> InputEmulation:
        """Create an emulation, trying every backend in turn if none is given.

        A backend that the user explicitly refused stops the search.
        """
        if backend is not None:
            result = await cls.with_backend(backend)
            log.info("using emulation backend: %s", backend)
            return result

        for candidate in Backend:
            try:
                result = await cls.with_backend(candidate)
            except EmulationCreationError as exc:
                if exc.cancelled_by_user():
                    raise
                log.warning("%s", exc)
                continue
            log.info("using emulation backend: %s", candidate)
            return result

        raise NoAvailableBackend()

    async def consume(self, event: Event, handle: int) -> None:
        """Forward an event, dropping duplicate key presses and releases."""
        if isinstance(event, Key):
            if self._update_pressed_keys(handle, event.key, event.state):
                await self.emulation.consume(event, handle)
            return
        await self.emulation.consume(event, handle)

    async def create(self, handle: int) -> bool:
        """Register a client; return ``False`` if it was already known."""
        if handle in self._handles:
            return False
        self._handles.add(handle)
        self._pressed_keys[handle] = set()
        await self.emulation.create(handle)
        return True

    async def destroy(self, handle: int) -> None:
        """Release the client's keys and forget about it."""
        try:
            await self.release_keys(handle)
        except EmulationError as exc:
            log.debug("releasing keys of %s failed: %s", handle, exc)
        if handle in self._handles:
            self._handles.discard(handle)
            self._pressed_keys.pop(handle, None)
            await self.emulation.destroy(handle)

    async def terminate(self) -> None:
        """Destroy every client, then shut the backend down."""
        for handle in list(self._handles):
            await self.destroy(handle)
        await self.emulation.terminate()

    async def release_keys(self, handle: int) -> None:
        """Release every key still held by the client and reset modifiers."""
        keys = self._pressed_keys.get(handle)
        if keys is not None:
            held = list(keys)
            keys.clear()
            for key in held:
                await self.emulation.consume(Key(time=0, key=key, state=0), handle)
                try:
                    name = Linux(key).name
                except ValueError:
                    continue
                log.warning("releasing stuck key: %s", name)

        reset = Modifiers(depressed=0, latched=0, locked=0, group=0)
        await self.emulation.consume(reset, handle)

    def has_pressed_keys(self, handle: int) -> bool:
        """Tell whether the client currently holds any key down."""
        return bool(self._pressed_keys.get(handle))

    def _update_pressed_keys(self, handle: int, key: int, state: int) -> bool:
        pressed = self._pressed_keys.get(handle)
        if pressed is None:
            return False
        if state == 0:
            if key in pressed:
                pressed.discard(key)
                return True
            return False
        if key in pressed:
            return False
        pressed.add(key)
        return True