"""Parsing of the interactive command line."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Position",
    "CommandType",
    "InvalidCommand",
    "UsageError",
    "Command",
    "HELP_COMMANDS",
    "parse_command",
]

_U16_MAX = 0xFFFF
_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


class Position(Enum):
    """Side of the screen a client is attached to."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value


class InvalidCommand(ValueError):
    """The first word of the line is not a known command."""

    def __init__(self, command: str) -> None:
        super().__init__(f'invalid command: "{command}"')
        self.command = command


class CommandType(Enum):
    """Kinds of commands understood by the command line."""

    NO_COMMAND = ""
    HELP = "help"
    CONNECT = "connect"
    DISCONNECT = "disconnect"
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"
    LIST = "list"
    SET_HOST = "set-host"
    SET_PORT = "set-port"

    @classmethod
    def from_name(cls, name: str) -> CommandType:
        """Look up a command by the word that starts it."""
        if name:
            try:
                return cls(name)
            except ValueError:
                pass
        raise InvalidCommand(name)

    def usage(self) -> str:
        """One-line usage description of the command."""
        return _USAGE[self]


_USAGE = {
    CommandType.HELP: "help",
    CommandType.NO_COMMAND: "",
    CommandType.CONNECT: "connect left|right|top|bottom <host> [<port>]",
    CommandType.DISCONNECT: "disconnect <id>",
    CommandType.ACTIVATE: "activate <id>",
    CommandType.DEACTIVATE: "deactivate <id>",
    CommandType.LIST: "list",
    CommandType.SET_HOST: "set-host <id> <host>",
    CommandType.SET_PORT: "set-port <id> <host>",
}

HELP_COMMANDS = (
    CommandType.LIST,
    CommandType.CONNECT,
    CommandType.DISCONNECT,
    CommandType.ACTIVATE,
    CommandType.DEACTIVATE,
    CommandType.SET_HOST,
    CommandType.SET_PORT,
)


class UsageError(ValueError):
    """A known command was given missing or malformed arguments."""

    def __init__(self, command_type: CommandType) -> None:
        super().__init__(f"usage: {command_type.usage()}")
        self.command_type = command_type


@dataclass(frozen=True)
class Command:
    """A parsed command line with the arguments its kind takes."""

    kind: CommandType
    handle: int | None = None
    position: Position | None = None
    host: str | None = None
    port: int | None = None


def _parse_unsigned(text: str, limit: int) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value <= limit else None


def _require_handle(args: list[str], kind: CommandType) -> int:
    if not args:
        raise UsageError(kind)
    handle = _parse_unsigned(args.pop(0), _U64_MAX)
    if handle is None:
        raise UsageError(kind)
    return handle


def _optional_port(args: list[str]) -> int | None:
    if not args:
        return None
    return _parse_unsigned(args.pop(0), _U16_MAX)


def parse_command(line: str) -> Command:
    """Parse one line of input into a command.

    Raises ``InvalidCommand`` for an unknown command word and ``UsageError``
    when the arguments do not fit the command.
    """
    words = line.split()
    if not words:
        return Command(CommandType.NO_COMMAND)
    kind = CommandType.from_name(words[0])
    args = words[1:]

    if kind in (CommandType.HELP, CommandType.LIST):
        return Command(kind)
    if kind is CommandType.CONNECT:
        if not args:
            raise UsageError(kind)
        try:
            position = Position(args.pop(0))
        except ValueError:
            raise UsageError(kind) from None
        if not args:
            raise UsageError(kind)
        host = args.pop(0)
        return Command(kind, position=position, host=host, port=_optional_port(args))
    if kind in (CommandType.DISCONNECT, CommandType.ACTIVATE, CommandType.DEACTIVATE):
        return Command(kind, handle=_require_handle(args, kind))
    if kind is CommandType.SET_HOST:
        handle = _require_handle(args, kind)
        if not args:
            raise UsageError(kind)
        return Command(kind, handle=handle, host=args.pop(0))
    # CommandType.SET_PORT
    handle = _require_handle(args, kind)
    return Command(kind, handle=handle, port=_optional_port(args))