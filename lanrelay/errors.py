"""Errors raised while creating an input emulation or emulating input."""

from __future__ import annotations

__all__ = [
    "EmulationError",
    "EndOfStream",
    "EmulationIoError",
    "EmulationCreationError",
    "NoAvailableBackend",
    "InputEmulationError",
]


class EmulationError(Exception):
    """Failure while emulating an input event."""


class EndOfStream(EmulationError):
    """The event stream of the backend was closed."""

    def __init__(self) -> None:
        super().__init__("event stream closed")


class EmulationIoError(EmulationError):
    """An I/O error occurred while emulating input."""

    def __init__(self, error: OSError) -> None:
        super().__init__(f"io error: `{error}`")
        self.error = error
        self.__cause__ = error


class EmulationCreationError(Exception):
    """Failure while setting up an emulation backend.

    ``cancelled`` marks a request the user deliberately denied, which stops
    the search for a fallback backend.
    """

    def __init__(self, message: str = "", *, cancelled: bool = False) -> None:
        super().__init__(message)
        self.cancelled = cancelled

    def cancelled_by_user(self) -> bool:
        """Tell whether the request was intentionally denied by the user."""
        return self.cancelled


class NoAvailableBackend(EmulationCreationError):
    """None of the emulation backends could be started."""

    def __init__(self) -> None:
        super().__init__("capture error")


class InputEmulationError(Exception):
    """Either a creation or an emulation error, described by its origin."""

    def __init__(self, cause: EmulationCreationError | EmulationError) -> None:
        if isinstance(cause, EmulationCreationError):
            message = f"error creating input-emulation: `{cause}`"
        elif isinstance(cause, EmulationError):
            message = f"error emulating input: `{cause}`"
        else:
            raise TypeError(f"unsupported error type: {type(cause).__name__}")
        super().__init__(message)
        self.cause = cause
        self.__cause__ = cause