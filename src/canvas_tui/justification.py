"""Justification: where an object of a given size goes inside a container.

A justification is one of a closed set of placement rules. ``Just.resolve``
turns a rule, a container size, and an object size into the absolute top-left
position of the object.

Most rules keep a margin of one cell from the container edge. The ``Off*By``
corner rules take an explicit margin instead (a margin of 0 touches the edge).
Centering divides the leftover space by two and truncates, so when the leftover
is odd the object sits one cell closer to the top/left.

    .....
    .ox..   Centered, container (5, 4), object (2, 2) -> (1, 1)
    .xx..
    .....
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from canvas_tui.errors import JustificationOutOfBounds
from canvas_tui.types import Vec2, VecLike, as_vec2

if TYPE_CHECKING:
    from canvas_tui.canvas import Canvas, Window


class Just:
    """Base class of every placement rule."""

    def resolve(self, container: VecLike | Canvas, obj: VecLike) -> Vec2:
        """Top-left position of an object of size ``obj`` inside ``container``.

        Raises:
            JustificationOutOfBounds: If the object does not fit with this rule
                (unchecked rules skip the final check).
        """
        canvas = as_vec2(container)
        obj = as_vec2(obj)

        if obj.x > canvas.x or obj.y > canvas.y:
            raise self._out_of_bounds(canvas, obj)

        low = Vec2.ONE
        high = canvas - obj - 1
        center = (canvas - obj) // 2

        match self:
            case AtUnchecked(pos=pos):
                return as_vec2(pos)
            case OffsetFromUnchecked(base=base, delta=delta):
                return base.resolve(canvas, obj) + delta
            case OffsetFrom(base=base, delta=delta):
                pos = base.resolve(canvas, obj) + delta
            case At(pos=pos):
                pos = as_vec2(pos)
            case Centered():
                pos = center

            # sides of a row
            case LeftOfRow(row=row):
                pos = low.with_y(row)
            case RightOfRow(row=row):
                pos = high.with_y(row)
            case CenteredOnRow(row=row):
                pos = center.with_y(row)

            # corners with a custom margin
            case OffTopLeftBy(margin=m):
                pos = Vec2(m, m)
            case OffTopRightBy(margin=m):
                pos = Vec2((high.x + 1) - m, m)
            case OffBottomLeftBy(margin=m):
                pos = Vec2(m, (high.y + 1) - m)
            case OffBottomRightBy(margin=m):
                pos = (high + 1) - m

            # corners with a margin of one
            case TopLeft():
                pos = low
            case TopRight():
                pos = Vec2(high.x, low.y)
            case BottomLeft():
                pos = Vec2(low.x, high.y)
            case BottomRight():
                pos = high

            # centers of the sides
            case CenterTop():
                pos = Vec2(center.x, low.y)
            case CenterBottom():
                pos = Vec2(center.x, high.y)
            case CenterLeft():
                pos = Vec2(low.x, center.y)
            case CenterRight():
                pos = Vec2(high.x, center.y)
            case _:
                raise TypeError(f"unknown justification {self!r}")

        bottom_right = pos + obj
        if bottom_right.x > canvas.x or bottom_right.y > canvas.y:
            raise self._out_of_bounds(canvas, obj)
        return pos

    def _out_of_bounds(self, canvas: Vec2, obj: Vec2) -> JustificationOutOfBounds:
        return JustificationOutOfBounds(canvas=canvas, object=obj, justification=self)

    def offset(self, delta: VecLike) -> OffsetFrom:
        """This justification moved by ``delta``, still checked against the container."""
        return OffsetFrom(self, as_vec2(delta))

    def offset_unchecked(self, delta: VecLike) -> OffsetFromUnchecked:
        """This justification moved by ``delta`` with no final bounds check.

        Useful for writing onto the edge just outside a window.
        """
        return OffsetFromUnchecked(self, as_vec2(delta))

    def window(self, canvas: Canvas, size: VecLike) -> Window:
        """Open a window of ``size`` on ``canvas`` placed with this justification."""
        return canvas.window(self, size)


@dataclass(frozen=True)
class At(Just):
    pos: Vec2


@dataclass(frozen=True)
class AtUnchecked(Just):
    pos: Vec2


@dataclass(frozen=True)
class Centered(Just):
    pass


@dataclass(frozen=True)
class LeftOfRow(Just):
    row: int


@dataclass(frozen=True)
class RightOfRow(Just):
    row: int


@dataclass(frozen=True)
class CenteredOnRow(Just):
    row: int


@dataclass(frozen=True)
class OffTopLeftBy(Just):
    margin: int


@dataclass(frozen=True)
class OffTopRightBy(Just):
    margin: int


@dataclass(frozen=True)
class OffBottomLeftBy(Just):
    margin: int


@dataclass(frozen=True)
class OffBottomRightBy(Just):
    margin: int


@dataclass(frozen=True)
class TopLeft(Just):
    pass


@dataclass(frozen=True)
class TopRight(Just):
    pass


@dataclass(frozen=True)
class BottomLeft(Just):
    pass


@dataclass(frozen=True)
class BottomRight(Just):
    pass


@dataclass(frozen=True)
class CenterTop(Just):
    pass


@dataclass(frozen=True)
class CenterBottom(Just):
    pass


@dataclass(frozen=True)
class CenterLeft(Just):
    pass


@dataclass(frozen=True)
class CenterRight(Just):
    pass


@dataclass(frozen=True)
class OffsetFrom(Just):
    base: Just
    delta: Vec2


@dataclass(frozen=True)
class OffsetFromUnchecked(Just):
    base: Just
    delta: Vec2
