# lanrelay

Building blocks for sharing one mouse and keyboard across several machines
on a local network. The package depends only on the standard library.

## Modules

- `lanrelay.scancode`: Linux evdev key codes (`Linux`) and Windows set-1
  scancodes (`Windows`), both as `IntEnum`s.
- `lanrelay.keymap`: translation between the two tables.
  `linux_to_windows` and `windows_to_linux` raise `ScancodeError` (a
  `ValueError`) when a code is unknown or has no counterpart.
  `linux_keycode_to_windows_scancode` takes a raw Linux key code and returns
  the Windows scancode as a 16-bit integer. If the code cannot be translated,
  it logs a warning and returns `None`.
- `lanrelay.events`: frozen dataclasses for pointer events (`Motion`,
  `Button`, `Axis`, `AxisDiscrete120`) and keyboard events (`Key`,
  `Modifiers`). Each has a short readable `str()`, for example
  `key(KeyA, 1)` or `button(left, 1)`. The module also provides the button
  constants `BTN_LEFT`, `BTN_RIGHT`, `BTN_MIDDLE`, `BTN_BACK` and
  `BTN_FORWARD`, and the helpers `is_pointer_event` and `is_keyboard_event`.
- `lanrelay.modifiers`: X11 modifier masks (`XMods`) and `ModifierState`.
  `ModifierState` follows modifier and lock keys through
  `update_by_key_event` and takes over the state from a `Modifiers` event
  through `update_by_mods_event`. `mask_pressed` and `mask_locks` split the
  current state into held modifiers and lock modifiers.
- `lanrelay.errors`: the exception hierarchy.
  - `EmulationError`, with the subclasses `EndOfStream` and
    `EmulationIoError`.
  - `EmulationCreationError`, whose `cancelled_by_user()` tells whether a
    user refused the request, and its subclass `NoAvailableBackend`.
  - `InputEmulationError`, which wraps either of the two kinds above.
- `lanrelay.emulation`: `InputEmulation` passes events to an `Emulation`
  backend. It records which keys each client holds down and drops repeated
  presses and releases. When a client is destroyed, it releases that
  client's held keys and resets its modifiers. `InputEmulation.new()` tries
  each `Backend` in turn. A backend that the user cancelled stops the
  search, and `NoAvailableBackend` is raised when every backend fails. The
  only built-in backend is `DummyEmulation` (`Backend.DUMMY`), which logs
  the events it receives.
- `lanrelay.command`: `parse_command` turns one line of the interactive
  command language into a `Command`. The language has `connect`,
  `disconnect`, `activate`, `deactivate`, `list`, `set-host`, `set-port` and
  `help`. An unknown command word raises `InvalidCommand`, and bad arguments
  raise `UsageError`, whose message gives the usage line. `HELP_COMMANDS`
  lists the commands that help text covers, and `CommandType.usage()` gives
  the usage line for each.

## Installation

```
pip install lanrelay
```

## Example

```python
import asyncio

from lanrelay.emulation import Backend, InputEmulation
from lanrelay.events import Key

async def demo():
    emulation = await InputEmulation.new(Backend.DUMMY)
    await emulation.create(1)
    await emulation.consume(Key(time=0, key=30, state=1), 1)
    print(emulation.has_pressed_keys(1))  # True
    await emulation.terminate()

asyncio.run(demo())
```

Parsing a command line:

```python
from lanrelay.command import CommandType, Position, parse_command

command = parse_command("connect left laptop 4242")
assert command.kind is CommandType.CONNECT
assert command.position is Position.LEFT
assert command.host == "laptop"
assert command.port == 4242
```

## What the package does not do

- It does not inject input into a real desktop. `DummyEmulation` is the only
  backend, and it only logs events. To emulate input, implement the
  `Emulation` interface yourself and pass an instance to `InputEmulation`.
- It does not capture input and has no networking.
- It has no command-line program. `lanrelay.command` parses command lines
  but does not execute them or talk to a running service.

## Development

```
pip install -e ".[test]"
pytest
```