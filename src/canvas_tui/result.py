"""DrawResult: the outcome of a draw call, and the post-processing pipeline.

A successful result remembers the canvas it drew on and the ``Shape`` it
touched (its profile). The pipeline methods reuse that profile::

    canvas.rect(Centered(), (9, 5), LIGHT).fill_inside(".").foreground(Color.WHITE)

A failed result carries the first error of the chain. Every pipeline method
and every canvas operation on it is a no-op returning the same error.
"""

from __future__ import annotations

import logging

from canvas_tui import shapes
from canvas_tui.canvas import Canvas, Window
from canvas_tui.errors import CanvasError
from canvas_tui.shapes import Drawer, GrowFrom, Shape
from canvas_tui.types import Cell, Color, Vec2, VecLike, as_vec2

logger = logging.getLogger(__name__)


class DrawResult(Canvas):
    """Either ``(canvas, shape)`` after a successful draw, or the error that stopped it.

    Use ``success`` and ``failure`` rather than the constructor.
    """

    def __init__(self, canvas: Canvas | None, shape: Shape | None, error: CanvasError | None) -> None:
        self._canvas = canvas
        self._shape = shape
        self._error = error

    @classmethod
    def success(cls, canvas: Canvas, shape: Shape) -> DrawResult:
        return cls(canvas, shape, None)

    @classmethod
    def failure(cls, error: CanvasError) -> DrawResult:
        return cls(None, None, error)

    @property
    def ok(self) -> bool:
        return self._error is None

    @property
    def error(self) -> CanvasError | None:
        return self._error

    @property
    def shape(self) -> Shape:
        """The profile of the last draw. Raises the carried error on a failed result."""
        self.check()
        assert self._shape is not None
        return self._shape

    @property
    def canvas(self) -> Canvas:
        self.check()
        assert self._canvas is not None
        return self._canvas

    def check(self) -> DrawResult:
        """Raise the carried error, or return this result unchanged."""
        if self._error is not None:
            raise self._error
        return self

    def discard_result(self) -> None:
        """Drop the result; errors were already thrown where they happened."""

    def discard_info(self) -> CanvasError | None:
        """Drop the canvas and profile, keeping only the error (if any)."""
        return self._error

    def log_result(self, level: int = logging.ERROR) -> None:
        """Log the carried error at ``level``, then drop the result."""
        if self._error is not None:
            logger.log(level, "draw failed: %s", self._error)

    # Canvas interface: everything goes to the canvas that was drawn on.

    @property
    def size(self) -> Vec2:
        return self.canvas.size

    def base_canvas(self) -> Canvas:
        return self.canvas

    def _set(self, pos: Vec2, char: str) -> None:
        self.canvas._set(pos, char)

    def _highlight(self, pos: Vec2, foreground: Color | None, background: Color | None) -> None:
        self.canvas._highlight(pos, foreground, background)

    def get(self, pos: VecLike) -> Cell:
        return self.canvas.get(pos)

    def window_absolute(self, pos: VecLike, size: VecLike) -> Window:
        return self.canvas.window_absolute(pos, size)

    def throw(self, err: CanvasError) -> None:
        if self._canvas is not None:
            self._canvas.throw(err)

    # Pipeline

    def _with_shape(self, shape: Shape) -> DrawResult:
        return DrawResult.success(self._canvas, shape)  # type: ignore[arg-type]

    def _apply(self, operation) -> DrawResult:
        """Run ``operation(shape, canvas)`` and keep the profile, or carry its error."""
        if self._error is not None:
            return self
        try:
            operation(self._shape, self._canvas)
        except CanvasError as err:
            return DrawResult.failure(err)
        return self

    def colored(self, foreground: Color | None = None, background: Color | None = None) -> DrawResult:
        """Highlight every cell of the profile; a color left as None is unchanged."""
        return self._apply(lambda shape, canvas: shapes.color(shape, canvas, foreground, background))

    def foreground(self, color: Color) -> DrawResult:
        return self.colored(foreground=color)

    def background(self, color: Color) -> DrawResult:
        return self.colored(background=color)

    def filled(self, char: str) -> DrawResult:
        """Write ``char`` over every cell of the profile."""
        return self._apply(lambda shape, canvas: shapes.fill(shape, canvas, char))

    def grow_profile(self, by: VecLike) -> DrawResult:
        """Inflate the profile by ``by`` on every side; negative values shrink it."""
        if self._error is not None:
            return self
        return self._with_shape(shapes.grow(self._shape, as_vec2(by)))  # type: ignore[arg-type]

    def inside(self) -> DrawResult:
        """The profile shrunk by one on every side: the inside of a box or of each grid cell."""
        return self.grow_profile(-1)

    def expand_profile(
        self,
        x: int | None = None,
        y: int | None = None,
        grow_from: GrowFrom = GrowFrom.Center,
    ) -> DrawResult:
        """Resize the profile to width ``x`` and/or height ``y`` keeping ``grow_from`` in place."""
        if self._error is not None:
            return self
        return self._with_shape(shapes.expand_to(self._shape, x, y, grow_from))  # type: ignore[arg-type]

    def draw_inside(self, drawer: Drawer) -> DrawResult:
        """Hand the inside of the profile to ``drawer`` as a window.

        A grid calls ``drawer(window, cell)`` once per cell; anything else calls
        ``drawer(window)``. The result keeps the outer profile.
        """
        return self.inside()._apply(lambda shape, canvas: shapes.draw(shape, canvas, drawer)).grow_profile(1)

    def fill_inside(self, char: str) -> DrawResult:
        """Fill the inside of the profile with ``char``, keeping the outer profile."""
        return self.inside().filled(char).grow_profile(1)

    def __repr__(self) -> str:
        if self._error is not None:
            return f"DrawResult(error={self._error!r})"
        return f"DrawResult(shape={self._shape!r})"
