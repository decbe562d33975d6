"""Errors raised and carried by canvas operations.

Every error a draw call can produce is a ``CanvasError``. Draw calls do not let
these escape: they are caught at the public method boundary and carried inside
the returned ``DrawResult`` instead (see ``canvas_tui.result``). Reads such as
``Canvas.get`` and window creation raise them directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from canvas_tui.types import Vec2


class CanvasError(ValueError):
    """Base class for every error produced by a canvas operation."""


class OutOfBounds(CanvasError):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"tried to access out of bounds position ({x}, {y})")


class TooLarge(CanvasError):
    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {value} is too large to fit in a signed index")


class NegativeValue(CanvasError):
    def __init__(self, value: int, name: str) -> None:
        self.value = value
        self.name = name
        super().__init__(f"{name} {value} is negative, expected positive")


class JustificationOutOfBounds(CanvasError):
    def __init__(self, canvas: Vec2, object: Vec2, justification: object) -> None:
        self.canvas = canvas
        self.object = object
        self.justification = justification
        super().__init__(
            f"justification {justification!r} could not fit object of size {object} in canvas of size {canvas}"
        )


class TextOverflow(CanvasError):
    """A run of text ran past the edge of the canvas.

    ``ending`` is the position of the first character that did not fit.
    """

    def __init__(self, starting: Vec2, text: str, ending: Vec2, canvas: Vec2) -> None:
        self.starting = starting
        self.text = text
        self.ending = ending
        self.canvas = canvas
        super().__init__(
            f"text {text!r} starting at {starting} overflowed canvas of size {canvas} at {ending}"
        )


class ItemTooBig(CanvasError):
    def __init__(self, pos: Vec2, size: Vec2, canvas: Vec2, name: str) -> None:
        self.pos = pos
        self.size = size
        self.canvas = canvas
        self.name = name
        super().__init__(f"{name} of size {size} at {pos} does not fit in canvas of size {canvas}")


class RecoveryError(RuntimeError):
    """A ``when_error`` callback failed while recovering from another error.

    This is not retried: running the callback again could recurse forever.
    """
