"""canvas-tui: compose text, boxes and grids onto a fixed-size character canvas."""

from canvas_tui.canvas import Basic, Canvas, ErrorCatcher, Window
from canvas_tui.charset import ASCII, HEAVY, LIGHT, ROUNDED, Arms, BoxChars, CharSet
from canvas_tui.config import RenderConfig
from canvas_tui.errors import (
    CanvasError,
    ItemTooBig,
    JustificationOutOfBounds,
    NegativeValue,
    OutOfBounds,
    RecoveryError,
    TextOverflow,
    TooLarge,
)
from canvas_tui.justification import (
    At,
    AtUnchecked,
    BottomLeft,
    BottomRight,
    Centered,
    CenteredOnRow,
    CenterBottom,
    CenterLeft,
    CenterRight,
    CenterTop,
    Just,
    LeftOfRow,
    OffBottomLeftBy,
    OffBottomRightBy,
    OffsetFrom,
    OffsetFromUnchecked,
    OffTopLeftBy,
    OffTopRightBy,
    RightOfRow,
    TopLeft,
    TopRight,
)
from canvas_tui.render import StyledSink, TextSink, paint, render, to_string
from canvas_tui.result import DrawResult
from canvas_tui.shapes import Grid, GrowFrom, Rect, Single
from canvas_tui.types import Cell, Color, Vec2, check_bounds
from canvas_tui.widgets import Title, Widget

__all__ = [
    "ASCII",
    "HEAVY",
    "LIGHT",
    "ROUNDED",
    "Arms",
    "At",
    "AtUnchecked",
    "Basic",
    "BottomLeft",
    "BottomRight",
    "BoxChars",
    "Canvas",
    "CanvasError",
    "Cell",
    "CenterBottom",
    "CenterLeft",
    "CenterRight",
    "CenterTop",
    "Centered",
    "CenteredOnRow",
    "CharSet",
    "Color",
    "DrawResult",
    "ErrorCatcher",
    "Grid",
    "GrowFrom",
    "ItemTooBig",
    "Just",
    "JustificationOutOfBounds",
    "LeftOfRow",
    "NegativeValue",
    "OffBottomLeftBy",
    "OffBottomRightBy",
    "OffTopLeftBy",
    "OffTopRightBy",
    "OffsetFrom",
    "OffsetFromUnchecked",
    "OutOfBounds",
    "RecoveryError",
    "Rect",
    "RenderConfig",
    "RightOfRow",
    "Single",
    "StyledSink",
    "TextOverflow",
    "TextSink",
    "Title",
    "TooLarge",
    "TopLeft",
    "TopRight",
    "Vec2",
    "Widget",
    "Window",
    "check_bounds",
    "paint",
    "render",
    "to_string",
]
