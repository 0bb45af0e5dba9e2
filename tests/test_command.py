import pytest

from lanrelay.command import (
    HELP_COMMANDS,
    Command,
    CommandType,
    InvalidCommand,
    Position,
    UsageError,
    parse_command,
)


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_empty_line_is_no_command(line):
    assert parse_command(line) == Command(CommandType.NO_COMMAND)


@pytest.mark.parametrize(
    "line,kind", [("help", CommandType.HELP), ("list", CommandType.LIST)]
)
def test_simple_commands(line, kind):
    assert parse_command(line) == Command(kind)


def test_invalid_command_message():
    with pytest.raises(InvalidCommand) as info:
        parse_command("frobnicate 1 2")
    assert str(info.value) == 'invalid command: "frobnicate"'
    assert info.value.command == "frobnicate"


def test_connect_full():
    cmd = parse_command("connect left somehost 4242")
    assert cmd == Command(
        CommandType.CONNECT, position=Position.LEFT, host="somehost", port=4242
    )


def test_connect_without_port():
    cmd = parse_command("  connect bottom   otherhost ")
    assert cmd.position is Position.BOTTOM
    assert cmd.host == "otherhost"
    assert cmd.port is None


@pytest.mark.parametrize("port", ["65536", "abc", "-1"])
def test_connect_bad_port_is_ignored(port):
    cmd = parse_command(f"connect top h {port}")
    assert cmd.port is None
    assert cmd.host == "h"


@pytest.mark.parametrize(
    "line", ["connect", "connect middle host", "connect right", "connect LEFT host"]
)
def test_connect_usage(line):
    with pytest.raises(UsageError) as info:
        parse_command(line)
    assert str(info.value) == "usage: connect left|right|top|bottom <host> [<port>]"
    assert info.value.command_type is CommandType.CONNECT


@pytest.mark.parametrize(
    "word,kind",
    [
        ("disconnect", CommandType.DISCONNECT),
        ("activate", CommandType.ACTIVATE),
        ("deactivate", CommandType.DEACTIVATE),
    ],
)
def test_handle_commands(word, kind):
    assert parse_command(f"{word} 17") == Command(kind, handle=17)
    with pytest.raises(UsageError) as info:
        parse_command(f"{word} x")
    assert info.value.command_type is kind
    with pytest.raises(UsageError):
        parse_command(word)


def test_negative_handle_rejected():
    with pytest.raises(UsageError):
        parse_command("activate -3")


def test_set_host():
    assert parse_command("set-host 2 newhost") == Command(
        CommandType.SET_HOST, handle=2, host="newhost"
    )
    with pytest.raises(UsageError) as info:
        parse_command("set-host 2")
    assert str(info.value) == "usage: set-host <id> <host>"


def test_set_port():
    assert parse_command("set-port 5 1234") == Command(
        CommandType.SET_PORT, handle=5, port=1234
    )
    assert parse_command("set-port 5").port is None
    with pytest.raises(UsageError) as info:
        parse_command("set-port")
    assert str(info.value) == "usage: set-port <id> <host>"


def test_from_name_round_trip():
    for kind in CommandType:
        if kind is CommandType.NO_COMMAND:
            continue
        assert CommandType.from_name(kind.value) is kind


def test_from_name_rejects_empty():
    with pytest.raises(InvalidCommand):
        CommandType.from_name("")


def test_usage_strings():
    assert CommandType.DISCONNECT.usage() == "disconnect <id>"
    assert CommandType.NO_COMMAND.usage() == ""
    assert all(kind.usage() for kind in HELP_COMMANDS)


def test_position_str_round_trip():
    for position in Position:
        assert Position(str(position)) is position