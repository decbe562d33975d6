"""Canvas: a fixed-size grid of characters and colors.

``Basic`` owns the cells. ``Window`` is an offset, size-limited view into
another canvas. ``ErrorCatcher`` wraps a canvas and runs a recovery callback
whenever an error is thrown on it.

Every drawing method returns a ``DrawResult``, which is itself a canvas, so
calls chain::

    canvas.set((1, 1), "a").set((2, 2), "b").text_absolute((0, 3), "hello")

The first failing call stops the chain: later calls on the failed result do
nothing and hand back the same error. Calls made before the failure keep their
effect.

Errors are thrown once, where they are first detected. ``throw`` does nothing
on a ``Basic`` canvas, forwards to the backing canvas from a ``Window``, and
runs the callback of an ``ErrorCatcher``.

A window holds its backing canvas for as long as it is in use. Only one of
them should be written to at a time; none of these types are thread-safe.
"""

from __future__ import annotations

import functools
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TypeVar

from canvas_tui.charset import BoxChars
from canvas_tui.errors import CanvasError, OutOfBounds, RecoveryError, TextOverflow
from canvas_tui.grid import full_grid_size, grid_plan, rect_plan
from canvas_tui.shapes import Grid, Rect, Single
from canvas_tui.types import Cell, Color, Vec2, VecLike, as_vec2, check_bounds

if TYPE_CHECKING:
    from canvas_tui.justification import Just
    from canvas_tui.widgets import Widget

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def chained(method: F) -> F:
    """Make a drawing method safe to call on a failed ``DrawResult``.

    On a failed result the method is skipped and the same error is handed back.
    Otherwise it runs against the underlying canvas, and any ``CanvasError`` it
    raises is returned as a failed ``DrawResult``.
    """

    @functools.wraps(method)
    def wrapper(self: Canvas, *args: Any, **kwargs: Any) -> DrawResult:
        error = self.error
        if error is not None:
            return DrawResult.failure(error)
        try:
            return method(self.base_canvas(), *args, **kwargs)
        except CanvasError as err:
            return DrawResult.failure(err)

    return wrapper  # type: ignore[return-value]


def _check_char(char: str) -> None:
    """Every cell holds exactly one character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"a cell holds exactly one character, got {char!r}")


class Canvas(ABC):
    """Base class of all canvases.

    Subclasses provide storage access (``_set``, ``_highlight``, ``get``),
    ``window_absolute`` and ``throw``; every drawing operation is built on those.
    """

    @property
    @abstractmethod
    def size(self) -> Vec2: ...

    @property
    def width(self) -> int:
        return self.size.x

    @property
    def height(self) -> int:
        return self.size.y

    @property
    def error(self) -> CanvasError | None:
        """The error carried by this canvas, only ever set on a failed ``DrawResult``."""
        return None

    def base_canvas(self) -> Canvas:
        """The canvas drawing calls actually go to."""
        return self

    @abstractmethod
    def _set(self, pos: Vec2, char: str) -> None:
        """Write ``char`` at ``pos`` without throwing. Raises ``OutOfBounds``."""

    @abstractmethod
    def _highlight(self, pos: Vec2, foreground: Color | None, background: Color | None) -> None:
        """Color ``pos`` without throwing. Raises ``OutOfBounds``."""

    @abstractmethod
    def get(self, pos: VecLike) -> Cell:
        """The character and colors at ``pos``.

        Raises:
            OutOfBounds: If ``pos`` is outside the canvas.
        """

    @abstractmethod
    def window_absolute(self, pos: VecLike, size: VecLike) -> Window:
        """A window of ``size`` whose top-left corner is at ``pos``.

        Raises:
            ItemTooBig: If the window would not fit inside this canvas.
        """

    @abstractmethod
    def throw(self, err: CanvasError) -> None:
        """Handle a newly detected error (see ``when_error``)."""

    @contextmanager
    def catching(self) -> Iterator[None]:
        """Throw any ``CanvasError`` raised inside the block before letting it propagate."""
        try:
            yield
        except CanvasError as err:
            self.throw(err)
            raise

    def window(self, justification: Just, size: VecLike) -> Window:
        """A window of ``size`` placed inside this canvas with ``justification``.

        Raises:
            CanvasError: If this canvas already carries an error, or the window
                cannot be placed.
        """
        if self.error is not None:
            raise self.error
        canvas = self.base_canvas()
        with canvas.catching():
            pos = justification.resolve(canvas, size)
        return canvas.window_absolute(pos, size)

    def when_error(self, callback: Callable[[Canvas, CanvasError], object]) -> ErrorCatcher:
        """Wrap this canvas so ``callback(canvas, error)`` runs whenever an error is thrown.

        The callback receives this (unwrapped) canvas, typically to draw a fallback.
        """
        return ErrorCatcher(self, callback)

    @chained
    def set(self, pos: VecLike, char: str) -> DrawResult:
        _check_char(char)
        pos = as_vec2(pos)
        with self.catching():
            self._set(pos, char)
        return DrawResult.success(self, Single(pos))

    @chained
    def highlight(self, pos: VecLike, foreground: Color | None = None, background: Color | None = None) -> DrawResult:
        """Color ``pos``; a color left as None keeps the existing one."""
        pos = as_vec2(pos)
        with self.catching():
            self._highlight(pos, foreground, background)
        return DrawResult.success(self, Single(pos))

    @chained
    def fill(self, char: str) -> DrawResult:
        """Write ``char`` over the whole canvas."""
        size = self.size
        for pos in size.positions():
            self.set(pos, char).check()
        return DrawResult.success(self, Rect(Vec2.ZERO, size))

    @chained
    def fill_box(self, pos: VecLike, size: VecLike, char: str) -> DrawResult:
        pos = as_vec2(pos)
        size = as_vec2(size)
        with self.catching():
            check_bounds(pos, size, self, "fill")
        for offset in size.positions():
            self.set(pos + offset, char).check()
        return DrawResult.success(self, Rect(pos, size))

    @chained
    def highlight_box(
        self,
        pos: VecLike,
        size: VecLike,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> DrawResult:
        pos = as_vec2(pos)
        size = as_vec2(size)
        with self.catching():
            check_bounds(pos, size, self, "highlight")
        for offset in size.positions():
            self.highlight(pos + offset, foreground, background).check()
        return DrawResult.success(self, Rect(pos, size))

    @chained
    def text(self, justification: Just, string: str) -> DrawResult:
        """Write ``string`` on one row, placed with ``justification``."""
        with self.catching():
            size = Vec2.from_unsigned(len(string), 1)
            pos = justification.resolve(self, size)
        return self.text_absolute(pos, string)

    @chained
    def text_absolute(self, pos: VecLike, string: str) -> DrawResult:
        """Write ``string`` one character per column starting at ``pos``.

        Characters before the first one that does not fit stay written; the
        ``TextOverflow`` error points at that first character.
        """
        pos = as_vec2(pos)
        canvas_size = self.size
        for i, char in enumerate(string):
            at = pos.add_x(i)
            try:
                self._set(at, char)
            except OutOfBounds:
                overflow = TextOverflow(starting=pos, text=string, ending=at, canvas=canvas_size)
                self.throw(overflow)
                raise overflow from None
        with self.catching():
            size = Vec2.from_unsigned(len(string), 1)
        return DrawResult.success(self, Rect(pos, size))

    @chained
    def rect(self, justification: Just, size: VecLike, chars: BoxChars) -> DrawResult:
        """Draw a box outline of ``size`` placed with ``justification``."""
        size = as_vec2(size)
        with self.catching():
            pos = justification.resolve(self, size)
        return self.rect_absolute(pos, size, chars)

    @chained
    def rect_absolute(self, pos: VecLike, size: VecLike, chars: BoxChars) -> DrawResult:
        pos = as_vec2(pos)
        size = as_vec2(size)
        with self.catching():
            check_bounds(pos, size, self, "rect")
        for offset, mask in rect_plan(size):
            self.set(pos + offset, chars[mask]).check()
        return DrawResult.success(self, Rect(pos, size))

    @chained
    def grid(self, justification: Just, cell_size: VecLike, dims: VecLike, chars: BoxChars) -> DrawResult:
        """Draw a ``dims`` (columns, rows) grid of ``cell_size`` cells placed with ``justification``."""
        cell_size = as_vec2(cell_size)
        dims = as_vec2(dims)
        with self.catching():
            pos = justification.resolve(self, full_grid_size(cell_size, dims))
        return self.grid_absolute(pos, cell_size, dims, chars)

    @chained
    def grid_absolute(self, pos: VecLike, cell_size: VecLike, dims: VecLike, chars: BoxChars) -> DrawResult:
        """Draw a grid whose top-left corner is at ``pos``.

        The returned profile covers every cell together with its border: cells
        are ``cell_size + 2`` big and overlap their neighbours by one
        (``spacing`` of -1), so ``inside()`` gives exactly the cell interiors.
        """
        pos = as_vec2(pos)
        cell_size = as_vec2(cell_size)
        dims = as_vec2(dims)
        with self.catching():
            check_bounds(pos, full_grid_size(cell_size, dims), self, "grid")
        for offset, mask in grid_plan(cell_size, dims):
            self.set(pos + offset, chars[mask]).check()
        return DrawResult.success(self, Grid(pos + 1, dims, cell_size + 2, Vec2(-1, -1)))

    @chained
    def draw(self, justification: Just, widget: Widget) -> DrawResult:
        """Draw ``widget`` onto a window of exactly the size it asks for."""
        with self.catching():
            size = as_vec2(widget.size(self.size))
            pos = justification.resolve(self, size)
            check_bounds(pos, size, self, widget.name)
        window = self.window_absolute(pos, size)
        drawn = widget.draw(window)
        if drawn is not None:
            drawn.check()
        return DrawResult.success(self, Rect(pos, size))

    def to_string(self) -> str:
        """The canvas text without color, one line per row."""
        return to_string(self)


class Basic(Canvas):
    """A canvas that owns its cells.

    Text, foreground and background are kept in three parallel row-major grids.
    """

    def __init__(
        self,
        size: VecLike,
        fill: str = " ",
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> None:
        size = as_vec2(size)
        _check_char(fill)
        width = size.width_unsigned()
        height = size.height_unsigned()
        self._size = size
        self._text: list[list[str]] = [[fill] * width for _ in range(height)]
        self._foreground: list[list[Color | None]] = [[foreground] * width for _ in range(height)]
        self._background: list[list[Color | None]] = [[background] * width for _ in range(height)]

    @classmethod
    def filled_with_text(cls, size: VecLike, char: str) -> Basic:
        return cls(size, char)

    @classmethod
    def filled_with(cls, size: VecLike, char: str, foreground: Color | None, background: Color | None) -> Basic:
        return cls(size, char, foreground, background)

    @property
    def size(self) -> Vec2:
        return self._size

    def _index(self, pos: Vec2) -> tuple[int, int]:
        if not (0 <= pos.x < self._size.x and 0 <= pos.y < self._size.y):
            raise OutOfBounds(pos.x, pos.y)
        return pos.to_unsigned()

    def _set(self, pos: Vec2, char: str) -> None:
        x, y = self._index(pos)
        self._text[y][x] = char

    def _highlight(self, pos: Vec2, foreground: Color | None, background: Color | None) -> None:
        x, y = self._index(pos)
        if foreground is not None:
            self._foreground[y][x] = foreground
        if background is not None:
            self._background[y][x] = background

    def get(self, pos: VecLike) -> Cell:
        x, y = self._index(as_vec2(pos))
        return Cell(self._text[y][x], self._foreground[y][x], self._background[y][x])

    def window_absolute(self, pos: VecLike, size: VecLike) -> Window:
        pos = as_vec2(pos)
        size = as_vec2(size)
        with self.catching():
            check_bounds(pos, size, self, "window")
        return Window(self, pos, size)

    def throw(self, err: CanvasError) -> None:
        pass

    def __repr__(self) -> str:
        return f"Basic(size={self._size})"


class Window(Canvas):
    """A view into ``canvas`` of ``size``, with every position shifted by ``offset``.

    Positions are only checked against the backing canvas, so a window can
    still reach just past its own edge (see ``Just.offset_unchecked``).
    """

    def __init__(self, canvas: Canvas, offset: Vec2, size: Vec2) -> None:
        self.canvas = canvas
        self.offset = offset
        self._size = size

    @property
    def size(self) -> Vec2:
        return self._size

    def _set(self, pos: Vec2, char: str) -> None:
        self.canvas._set(pos + self.offset, char)

    def _highlight(self, pos: Vec2, foreground: Color | None, background: Color | None) -> None:
        self.canvas._highlight(pos + self.offset, foreground, background)

    def get(self, pos: VecLike) -> Cell:
        return self.canvas.get(as_vec2(pos) + self.offset)

    def window_absolute(self, pos: VecLike, size: VecLike) -> Window:
        pos = as_vec2(pos)
        size = as_vec2(size)
        with self.catching():
            check_bounds(pos, size, self, "window")
        return Window(self.canvas, pos + self.offset, size)

    def throw(self, err: CanvasError) -> None:
        self.canvas.throw(err)

    def __repr__(self) -> str:
        return f"Window(offset={self.offset}, size={self._size})"


class ErrorCatcher(Canvas):
    """A canvas that runs ``callback(canvas, error)`` for every error thrown on it.

    The callback gets the wrapped canvas, not the catcher, so drawing a
    fallback cannot trigger it again. If the callback itself fails, a
    ``RecoveryError`` is raised instead of retrying.
    """

    def __init__(self, canvas: Canvas, callback: Callable[[Canvas, CanvasError], object]) -> None:
        self.canvas = canvas
        self.callback = callback

    @property
    def size(self) -> Vec2:
        return self.canvas.size

    def _set(self, pos: Vec2, char: str) -> None:
        self.canvas._set(pos, char)

    def _highlight(self, pos: Vec2, foreground: Color | None, background: Color | None) -> None:
        self.canvas._highlight(pos, foreground, background)

    def get(self, pos: VecLike) -> Cell:
        return self.canvas.get(pos)

    def window_absolute(self, pos: VecLike, size: VecLike) -> Window:
        # windows wrap the catcher itself so their throws come back here
        pos = as_vec2(pos)
        size = as_vec2(size)
        with self.catching():
            check_bounds(pos, size, self, "window")
        return Window(self, pos, size)

    def throw(self, err: CanvasError) -> None:
        logger.debug("running error callback for: %s", err)
        try:
            outcome = self.callback(self.canvas, err)
            if isinstance(outcome, DrawResult):
                outcome.check()
        except CanvasError as failure:
            raise RecoveryError(f"error callback failed while handling '{err}': {failure}") from failure

    def __repr__(self) -> str:
        return f"ErrorCatcher({self.canvas!r})"


# DrawResult is itself a Canvas, so it can only be imported once Canvas exists.
from canvas_tui.render import to_string  # noqa: E402
from canvas_tui.result import DrawResult  # noqa: E402
