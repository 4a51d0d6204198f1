from __future__ import annotations

import io

from rich.console import Console

from attrguard.sinks import CaptureSink, ConsoleSink


def _console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, width=40, color_system=None)


def test_console_sink_prints_lines_verbatim() -> None:
    buffer = io.StringIO()
    line = "Owner of file [/srv/:smile:.yml] used to be [root], but now is [bob]"

    ConsoleSink(_console(buffer)).write_line(line)

    assert buffer.getvalue() == line + "\n"


def test_console_sink_keeps_markup_like_names() -> None:
    buffer = io.StringIO()
    line = "Group of file [[bold]app.yml] used to be [root], but now is [wheel]"

    ConsoleSink(_console(buffer)).write_line(line)

    assert buffer.getvalue() == line + "\n"


def test_capture_sink_collects_lines_in_order() -> None:
    sink = CaptureSink()

    sink.write_line("first")
    sink.write_line("second")

    assert sink.lines == ["first", "second"]
