import io

import pytest

from vtermkit.command import Command, execute, queue


class _Print(Command):
    def __init__(self, text):
        self.text = text

    def write_ansi(self):
        return self.text


class _Recorder:
    """A text writer that records writes and flushes in order."""

    def __init__(self):
        self.log = []

    def write(self, text):
        if not isinstance(text, str):
            raise TypeError("text expected")
        self.log.append(("write", text))
        return len(text)

    def flush(self):
        self.log.append(("flush",))


class _FailingWriter:
    def write(self, text):
        raise OSError("disk gone")

    def flush(self):
        pass


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_str_is_ansi_representation():
    command = _Print("\x1b[?25l")
    out = io.StringIO()
    queue(out, command)
    assert Command.__str__(command) == "\x1b[?25l"
    assert f"{command}" == out.getvalue()


def test_queue_writes_to_text_writer_in_order():
    out = io.StringIO()
    queue(out, _Print("foo 1\n"), _Print("foo 2"))
    assert out.getvalue() == "foo 1\nfoo 2"


def test_queue_writes_utf8_to_binary_writer():
    out = io.BytesIO()
    queue(out, _Print("√"), _Print("x"))
    assert out.getvalue() == "√x".encode("utf-8")


def test_queue_returns_writer_for_chaining():
    out = io.StringIO()
    result = queue(queue(out, _Print("a")), _Print("b"))
    assert result is out
    assert out.getvalue() == "ab"


def test_queue_does_not_flush():
    writer = _Recorder()
    queue(writer, _Print("a"), _Print("b"))
    assert writer.log == [("write", "a"), ("write", "b")]


def test_execute_flushes_after_writing():
    writer = _Recorder()
    result = execute(writer, _Print("sum:\n"), _Print("1 + 1 = 2"))
    assert result is writer
    assert writer.log == [
        ("write", "sum:\n"),
        ("write", "1 + 1 = 2"),
        ("flush",),
    ]


def test_execute_without_commands_only_flushes():
    writer = _Recorder()
    execute(writer)
    assert writer.log == [("flush",)]


def test_queue_rejects_non_command():
    out = io.StringIO()
    with pytest.raises(TypeError):
        queue(out, "plain text")
    assert out.getvalue() == ""


def test_write_error_propagates():
    with pytest.raises(OSError, match="disk gone"):
        execute(_FailingWriter(), _Print("a"))
    with pytest.raises(OSError):
        queue(_FailingWriter(), _Print("a"))


def test_queue_then_execute_preserves_order():
    writer = _Recorder()
    queue(writer, _Print("first"))
    execute(writer, _Print("second"))
    texts = [entry[1] for entry in writer.log if entry[0] == "write"]
    assert texts == ["first", "second"]
    assert writer.log[-1] == ("flush",)