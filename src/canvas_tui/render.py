"""Turning a canvas into output.

``paint`` walks a canvas row by row and feeds every cell to a ``Sink``. The
text sink drops colors; the styled sink colors each cell for a 24-bit color
terminal with ``click.style``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import click

from canvas_tui.types import Color, Vec2

if TYPE_CHECKING:
    from canvas_tui.canvas import Canvas
    from canvas_tui.config import RenderConfig


class Sink(Protocol):
    """Receives the cells of a canvas in reading order."""

    def cell(self, text: str, foreground: Color | None, background: Color | None) -> None:
        """Write one cell."""
        ...

    def end_row(self) -> None:
        """Finish the current row."""
        ...


class TextSink:
    """Collects the canvas text, ignoring colors."""

    def __init__(self) -> None:
        self.rows: list[str] = []
        self._row: list[str] = []

    def cell(self, text: str, foreground: Color | None, background: Color | None) -> None:
        self._row.append(text)

    def end_row(self) -> None:
        self.rows.append("".join(self._row))
        self._row = []

    def getvalue(self) -> str:
        return "".join(row + "\n" for row in self.rows)


class StyledSink(TextSink):
    """Collects the canvas text with ANSI colors on every highlighted cell."""

    def cell(self, text: str, foreground: Color | None, background: Color | None) -> None:
        if foreground is None and background is None:
            self._row.append(text)
            return
        self._row.append(
            click.style(
                text,
                fg=foreground.rgb if foreground is not None else None,
                bg=background.rgb if background is not None else None,
            )
        )


def paint(canvas: Canvas, sink: Sink) -> None:
    """Feed every cell of ``canvas`` to ``sink``, one row at a time."""
    for y in range(canvas.height):
        for x in range(canvas.width):
            cell = canvas.get(Vec2(x, y))
            sink.cell(cell.text, cell.foreground, cell.background)
        sink.end_row()


def to_string(canvas: Canvas) -> str:
    """The text of ``canvas`` without colors, every row ending in a newline."""
    sink = TextSink()
    paint(canvas, sink)
    return sink.getvalue()


def render(canvas: Canvas, config: RenderConfig) -> str:
    """Render ``canvas`` with colors unless ``config.color`` is off."""
    sink = StyledSink() if config.color else TextSink()
    paint(canvas, sink)
    return sink.getvalue()
