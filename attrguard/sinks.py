"""Line-oriented destinations for change warnings."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console


class OutputSink(Protocol):
    def write_line(self, line: str) -> None: ...


class ConsoleSink:
    """Write warnings to a rich console, one physical line each."""

    def __init__(self, console: Console, *, style: str | None = "yellow") -> None:
        self._console = console
        self._style = style

    def write_line(self, line: str) -> None:
        # Paths and names are printed verbatim: no markup, highlighting, or emoji codes.
        self._console.print(
            line,
            style=self._style,
            markup=False,
            highlight=False,
            soft_wrap=True,
            emoji=False,
        )


class CaptureSink:
    """Collect warning lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)
