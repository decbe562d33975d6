"""Character sets and junction masks for box-drawing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Bit order of a junction mask: up, down, left, right.
UP = 0b1000
DOWN = 0b0100
LEFT = 0b0010
RIGHT = 0b0001


@dataclass(frozen=True)
class Arms:
    """Which arms of a junction cell are active."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @classmethod
    def from_mask(cls, mask: int) -> Arms:
        if not 0 <= mask <= 0b1111:
            raise ValueError(f"junction mask must be in 0..15, got {mask}")
        return cls(
            up=bool(mask & UP),
            down=bool(mask & DOWN),
            left=bool(mask & LEFT),
            right=bool(mask & RIGHT),
        )

    @property
    def mask(self) -> int:
        return (UP if self.up else 0) | (DOWN if self.down else 0) | (LEFT if self.left else 0) | (
            RIGHT if self.right else 0
        )


class BoxChars:
    """Sixteen box-drawing characters indexed by junction mask.

    ``chars[0b1100]`` is the vertical line (up and down present), ``chars[0b0011]``
    the horizontal one, ``chars[0b1111]`` the four-way cross.
    """

    def __init__(self, chars: str | list[str], name: str = "custom") -> None:
        chars = list(chars)
        if len(chars) != 16:
            raise ValueError(f"a box character set needs 16 characters, got {len(chars)}")
        self._chars = tuple(chars)
        self.name = name

    def __getitem__(self, mask: int) -> str:
        return self._chars[mask]

    def __len__(self) -> int:
        return 16

    def __repr__(self) -> str:
        return f"BoxChars({self.name})"

    @property
    def horizontal(self) -> str:
        return self._chars[LEFT | RIGHT]

    @property
    def vertical(self) -> str:
        return self._chars[UP | DOWN]

    def with_corners(self, top_left: str, top_right: str, bottom_left: str, bottom_right: str, name: str) -> BoxChars:
        chars = list(self._chars)
        chars[DOWN | RIGHT] = top_left
        chars[DOWN | LEFT] = top_right
        chars[UP | RIGHT] = bottom_left
        chars[UP | LEFT] = bottom_right
        return BoxChars(chars, name)


#                 0    1    2    3    4    5    6    7    8    9    10   11   12   13   14   15
LIGHT = BoxChars([" ", "╶", "╴", "─", "╷", "┌", "┐", "┬", "╵", "└", "┘", "┴", "│", "├", "┤", "┼"], "light")
HEAVY = BoxChars([" ", "╺", "╸", "━", "╻", "┏", "┓", "┳", "╹", "┗", "┛", "┻", "┃", "┣", "┫", "╋"], "heavy")
ROUNDED = LIGHT.with_corners("╭", "╮", "╰", "╯", "rounded")
ASCII = BoxChars([" ", "-", "-", "-", "|", "+", "+", "+", "|", "+", "+", "+", "|", "+", "+", "+"], "ascii")


class CharSet(Enum):
    """Named box-drawing sets, for configuration and the command line."""

    Light = "light"
    Heavy = "heavy"
    Rounded = "rounded"
    Ascii = "ascii"

    @property
    def chars(self) -> BoxChars:
        return _BY_NAME[self]


_BY_NAME: dict[CharSet, BoxChars] = {
    CharSet.Light: LIGHT,
    CharSet.Heavy: HEAVY,
    CharSet.Rounded: ROUNDED,
    CharSet.Ascii: ASCII,
}
