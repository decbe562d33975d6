"""Shapes describing what a draw call just touched.

Every draw call returns one of these as its profile:

- ``Single``: one cell (``set``, ``highlight``)
- ``Rect``: a box (``text``, ``rect``, ``fill_box``, widgets)
- ``Grid``: a grid of equally sized cells separated by ``spacing`` (``grid``)

The functions below dispatch on the shape with ``match``. ``grow`` and
``expand_to`` only compute a new profile; ``color``, ``fill`` and ``draw``
touch the canvas and raise ``CanvasError`` on failure (errors first seen here
are thrown on the canvas before being raised).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

from canvas_tui.errors import ItemTooBig
from canvas_tui.types import Color, Vec2, VecLike, as_vec2, check_bounds, trunc_div

if TYPE_CHECKING:
    from canvas_tui.canvas import Canvas, Window
    from canvas_tui.result import DrawResult


class GrowFrom(Enum):
    """Which point stays fixed when a profile is expanded to a target size."""

    Center = auto()
    CenterPreferRight = auto()  # odd leftovers go to the right instead of the left
    TopLeft = auto()
    TopRight = auto()
    BottomLeft = auto()
    BottomRight = auto()

    def grow(self, pos: Vec2, current: Vec2, goal: Vec2) -> Vec2:
        """New top-left position when a box at ``pos`` grows from ``current`` to ``goal``."""
        match self:
            case GrowFrom.Center:
                return pos - (goal - current).tdiv(2)
            case GrowFrom.CenterPreferRight:
                return pos - (goal - current + 1).tdiv(2)
            case GrowFrom.TopLeft:
                return pos
            case GrowFrom.TopRight:
                return pos.sub_x(goal.x - current.x)
            case GrowFrom.BottomLeft:
                return pos.sub_y(goal.y - current.y)
            case GrowFrom.BottomRight:
                return pos - (goal - current)


@dataclass(frozen=True)
class Single:
    pos: Vec2


@dataclass(frozen=True)
class Rect:
    pos: Vec2
    size: Vec2


@dataclass(frozen=True)
class Grid:
    """A grid of ``dims`` cells, each ``cell_size`` big, ``spacing`` apart.

    Cell ``c`` starts at ``pos + c * (cell_size + spacing) + spacing``. A
    negative spacing makes neighbouring cells overlap, which is how a bordered
    grid shares one line between two cells.
    """

    pos: Vec2
    dims: Vec2
    cell_size: Vec2
    spacing: Vec2

    def full_size(self) -> Vec2:
        """The size of the grid from edge to edge."""
        return self.dims * (self.cell_size + self.spacing) + self.spacing

    def cell_size_from_full_size(self, goal: Vec2) -> Vec2:
        """Largest cell size whose full size does not exceed ``goal`` (axes with no cells keep theirs)."""
        # goal = dims * (cell_size + spacing) + spacing
        x, y = self.cell_size
        if self.dims.x:
            x = trunc_div(goal.x - self.spacing.x, self.dims.x) - self.spacing.x
        if self.dims.y:
            y = trunc_div(goal.y - self.spacing.y, self.dims.y) - self.spacing.y
        return Vec2(x, y)

    def cells(self) -> Iterator[tuple[Vec2, Vec2]]:
        """Yield ``(cell, position)`` for every cell, column by column."""
        stride = self.cell_size + self.spacing
        for cell in self.dims.positions():
            yield cell, self.pos + cell * stride + self.spacing


Shape = Union[Single, Rect, Grid]

# A drawer for Single/Rect gets a window; a drawer for Grid gets a window and the cell.
Drawer = Callable[..., "DrawResult | None"]


def grow(shape: Shape, by: VecLike) -> Shape:
    """Inflate ``shape`` by ``by`` on every side (negative values shrink it)."""
    by = as_vec2(by)
    match shape:
        case Single(pos=pos):
            return Rect(pos=pos - by, size=Vec2.ONE + by * 2)
        case Rect(pos=pos, size=size):
            return Rect(pos=pos - by, size=size + by * 2)
        case Grid():
            return replace(
                shape,
                pos=shape.pos + by,
                cell_size=shape.cell_size + by * 2,
                spacing=shape.spacing - by * 2,
            )
    raise TypeError(f"not a shape: {shape!r}")


def expand_to(shape: Shape, x: int | None, y: int | None, grow_from: GrowFrom) -> Shape:
    """Resize ``shape`` to width ``x`` and/or height ``y``, keeping ``grow_from`` fixed.

    A grid keeps its dims and spacing, so it only gets as close to the target
    as whole cell sizes allow.
    """
    match shape:
        case Single(pos=pos):
            size = Vec2(1 if x is None else x, 1 if y is None else y)
            return Rect(pos=grow_from.grow(pos, Vec2.ONE, size), size=size)
        case Rect(pos=pos, size=current):
            goal = Vec2(current.x if x is None else x, current.y if y is None else y)
            return Rect(pos=grow_from.grow(pos, current, goal), size=goal)
        case Grid():
            current = shape.full_size()
            goal = Vec2(current.x if x is None else x, current.y if y is None else y)
            cell_size = shape.cell_size_from_full_size(goal)
            # integer cell sizes may fall short of the goal
            reached = replace(shape, cell_size=cell_size).full_size()
            return replace(shape, pos=grow_from.grow(shape.pos, current, reached), cell_size=cell_size)
    raise TypeError(f"not a shape: {shape!r}")


def _check_grid(grid: Grid, canvas: Canvas) -> None:
    # every cell box is checked before any cell is touched
    with canvas.catching():
        for _, pos in grid.cells():
            if pos.x < 0 or pos.y < 0:
                raise ItemTooBig(pos=pos, size=grid.cell_size, canvas=as_vec2(canvas), name="grid")
            check_bounds(pos, grid.cell_size, canvas, "grid")


def color(shape: Shape, canvas: Canvas, foreground: Color | None, background: Color | None) -> None:
    """Highlight exactly the cells covered by ``shape``."""
    match shape:
        case Single(pos=pos):
            canvas.highlight(pos, foreground, background).check()
        case Rect(pos=pos, size=size):
            canvas.highlight_box(pos, size, foreground, background).check()
        case Grid():
            _check_grid(shape, canvas)
            for _, pos in shape.cells():
                canvas.highlight_box(pos, shape.cell_size, foreground, background).check()
        case _:
            raise TypeError(f"not a shape: {shape!r}")


def fill(shape: Shape, canvas: Canvas, char: str) -> None:
    """Write ``char`` over exactly the cells covered by ``shape``."""
    match shape:
        case Single(pos=pos):
            canvas.set(pos, char).check()
        case Rect(pos=pos, size=size):
            canvas.fill_box(pos, size, char).check()
        case Grid():
            _check_grid(shape, canvas)
            for _, pos in shape.cells():
                canvas.fill_box(pos, shape.cell_size, char).check()
        case _:
            raise TypeError(f"not a shape: {shape!r}")


def _run(drawer_result: object) -> None:
    # drawers may return nothing, or the DrawResult of their last call
    check = getattr(drawer_result, "check", None)
    if check is not None:
        check()


def draw(shape: Shape, canvas: Canvas, drawer: Drawer) -> None:
    """Run ``drawer`` on a window over ``shape``; once per cell for a grid."""
    window: Window
    match shape:
        case Single(pos=pos):
            window = canvas.window_absolute(pos, Vec2.ONE)
            _run(drawer(window))
        case Rect(pos=pos, size=size):
            window = canvas.window_absolute(pos, size)
            _run(drawer(window))
        case Grid():
            for cell, pos in shape.cells():
                window = canvas.window_absolute(pos, shape.cell_size)
                _run(drawer(window, cell))
        case _:
            raise TypeError(f"not a shape: {shape!r}")
