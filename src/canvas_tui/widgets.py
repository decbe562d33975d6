"""Widgets: reusable drawings that know their own size.

``Canvas.draw(justification, widget)`` asks the widget for its size, places a
window of exactly that size, and lets the widget draw into it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from canvas_tui.justification import Centered
from canvas_tui.types import Color, Vec2

if TYPE_CHECKING:
    from canvas_tui.canvas import Canvas
    from canvas_tui.result import DrawResult


class Widget(Protocol):
    """Protocol that all widgets must implement."""

    name: str

    def size(self, container: Vec2) -> Vec2:
        """The size the widget needs, given the size of the canvas it goes on."""
        ...

    def draw(self, canvas: Canvas) -> DrawResult | None:
        """Draw onto ``canvas``, which is exactly ``size()`` big."""
        ...


@dataclass
class Title:
    """A line of text with one cell of padding on each side, all highlighted.

        foo   ->  [ foo ]   (brackets mark the highlighted cells)
    """

    text: str
    foreground: Color | None = None
    background: Color | None = None
    name: str = "title"

    def size(self, container: Vec2) -> Vec2:
        return Vec2.from_unsigned(len(self.text) + 2, 1)

    def draw(self, canvas: Canvas) -> DrawResult:
        return canvas.text(Centered(), self.text).grow_profile((1, 0)).colored(self.foreground, self.background)
