"""Shared type definitions for canvas-tui.

Small value types used across the canvas, justification, and shape modules.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, Union

from canvas_tui.errors import ItemTooBig, NegativeValue, TooLarge


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass(frozen=True)
class Vec2:
    """A pair of integers, used as either a position or a size.

    Arithmetic is element-wise. The other operand may be a Vec2, an (x, y)
    tuple, or a single int applied to both axes.
    """

    x: int
    y: int

    ZERO: ClassVar[Vec2]
    ONE: ClassVar[Vec2]

    @classmethod
    def from_unsigned(cls, x: int, y: int) -> Vec2:
        """Build a Vec2 from unsigned storage values, rejecting ones past the signed range."""
        if x > sys.maxsize:
            raise TooLarge("x value", x)
        if y > sys.maxsize:
            raise TooLarge("y value", y)
        return cls(x, y)

    @property
    def width(self) -> int:
        return self.x

    @property
    def height(self) -> int:
        return self.y

    def with_x(self, x: int) -> Vec2:
        return Vec2(x, self.y)

    def with_y(self, y: int) -> Vec2:
        return Vec2(self.x, y)

    def add_x(self, off: int) -> Vec2:
        return Vec2(self.x + off, self.y)

    def add_y(self, off: int) -> Vec2:
        return Vec2(self.x, self.y + off)

    def sub_x(self, off: int) -> Vec2:
        return Vec2(self.x - off, self.y)

    def sub_y(self, off: int) -> Vec2:
        return Vec2(self.x, self.y - off)

    def to_unsigned(self, name: str = "index") -> tuple[int, int]:
        """Return (x, y) as storage indices; negative components are rejected."""
        if self.x < 0:
            raise NegativeValue(self.x, name)
        if self.y < 0:
            raise NegativeValue(self.y, name)
        return self.x, self.y

    def width_unsigned(self) -> int:
        if self.x < 0:
            raise NegativeValue(self.x, "width")
        return self.x

    def height_unsigned(self) -> int:
        if self.y < 0:
            raise NegativeValue(self.y, "height")
        return self.y

    def positions(self) -> Iterator[Vec2]:
        """Yield every position inside a size of this Vec2, column by column."""
        for x in range(self.x):
            for y in range(self.y):
                yield Vec2(x, y)

    def tdiv(self, other: VecLike) -> Vec2:
        """Element-wise division truncating toward zero."""
        o = as_vec2(other)
        return Vec2(trunc_div(self.x, o.x), trunc_div(self.y, o.y))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __add__(self, other: VecLike) -> Vec2:
        o = as_vec2(other)
        return Vec2(self.x + o.x, self.y + o.y)

    __radd__ = __add__

    def __sub__(self, other: VecLike) -> Vec2:
        o = as_vec2(other)
        return Vec2(self.x - o.x, self.y - o.y)

    def __rsub__(self, other: VecLike) -> Vec2:
        o = as_vec2(other)
        return Vec2(o.x - self.x, o.y - self.y)

    def __mul__(self, other: VecLike) -> Vec2:
        o = as_vec2(other)
        return Vec2(self.x * o.x, self.y * o.y)

    __rmul__ = __mul__

    def __floordiv__(self, other: VecLike) -> Vec2:
        o = as_vec2(other)
        return Vec2(self.x // o.x, self.y // o.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Vec2.ZERO = Vec2(0, 0)
Vec2.ONE = Vec2(1, 1)

VecLike = Union[Vec2, tuple[int, int], int]


def as_vec2(value: object) -> Vec2:
    """Coerce a Vec2, an (x, y) tuple, an int, or anything with a ``size`` into a Vec2."""
    if isinstance(value, Vec2):
        return value
    if isinstance(value, bool):
        raise TypeError(f"cannot use {value!r} as a Vec2")
    if isinstance(value, int):
        return Vec2(value, value)
    if isinstance(value, tuple) and len(value) == 2:
        return Vec2(int(value[0]), int(value[1]))
    size = getattr(value, "size", None)
    if isinstance(size, Vec2):
        return size
    raise TypeError(f"cannot use {value!r} as a Vec2")


def check_bounds(pos: VecLike, size: VecLike, container: object, name: str) -> None:
    """Check that an item at ``pos`` of ``size`` fits inside ``container``.

    ``name`` identifies the item in the error.

    Raises:
        ItemTooBig: If ``pos + size`` goes past the container on either axis.
    """
    pos = as_vec2(pos)
    size = as_vec2(size)
    canvas = as_vec2(container)
    outer = pos + size
    if outer.x > canvas.x or outer.y > canvas.y:
        raise ItemTooBig(pos=pos, size=size, canvas=canvas, name=name)


@dataclass(frozen=True)
class Color:
    """A 24-bit RGB color."""

    r: int
    g: int
    b: int

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]

    @classmethod
    def grayscale(cls, value: int) -> Color:
        return cls(value, value, value)

    @classmethod
    def from_hex(cls, code: str) -> Color:
        """Parse ``#rrggbb`` (the leading ``#`` is optional)."""
        digits = code.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"expected a 6 digit hex color, got '{code}'")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


Color.WHITE = Color.grayscale(255)
Color.BLACK = Color.grayscale(0)


@dataclass(frozen=True)
class Cell:
    """The character and highlight at one position of a canvas."""

    text: str
    foreground: Color | None = None
    background: Color | None = None
