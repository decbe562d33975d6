"""Box and grid layout: which junction goes where.

The planners here are pure. They return ``(offset, mask)`` placements relative
to the top-left corner of the drawn item, in the order they should be painted
(later placements overwrite earlier ones). The canvas turns each mask into a
character with a ``BoxChars`` lookup, so one table lookup replaces per-case
branching on which lines meet at a cell.

A 2 x 2 grid with cells of size (2, 1)::

    ┌──┬──┐
    │  │  │
    ├──┼──┤
    │  │  │
    └──┴──┘
"""

from __future__ import annotations

from canvas_tui.charset import Arms
from canvas_tui.types import Vec2

HORIZONTAL = Arms(left=True, right=True).mask
VERTICAL = Arms(up=True, down=True).mask
TOP_LEFT = Arms(down=True, right=True).mask
TOP_RIGHT = Arms(down=True, left=True).mask
BOTTOM_LEFT = Arms(up=True, right=True).mask
BOTTOM_RIGHT = Arms(up=True, left=True).mask
TEE_RIGHT = Arms(up=True, down=True, right=True).mask
TEE_LEFT = Arms(up=True, down=True, left=True).mask
TEE_DOWN = Arms(down=True, left=True, right=True).mask
TEE_UP = Arms(up=True, left=True, right=True).mask
CROSS = Arms(up=True, down=True, left=True, right=True).mask

Placement = tuple[Vec2, int]


def full_grid_size(cell_size: Vec2, dims: Vec2) -> Vec2:
    """Size of a grid including its outer border and one-cell separators."""
    return (cell_size + 1) * dims + 1


def rect_plan(size: Vec2) -> list[Placement]:
    """Outline of a box of ``size``: edges first, then the four corners."""
    plan: list[Placement] = []
    top, bottom = 0, size.y - 1
    left, right = 0, size.x - 1

    for x in range(left + 1, right):
        plan.append((Vec2(x, top), HORIZONTAL))
        plan.append((Vec2(x, bottom), HORIZONTAL))

    for y in range(top + 1, bottom):
        plan.append((Vec2(left, y), VERTICAL))
        plan.append((Vec2(right, y), VERTICAL))

    plan.append((Vec2(left, top), TOP_LEFT))
    plan.append((Vec2(right, top), TOP_RIGHT))
    plan.append((Vec2(left, bottom), BOTTOM_LEFT))
    plan.append((Vec2(right, bottom), BOTTOM_RIGHT))
    return plan


def grid_plan(cell_size: Vec2, dims: Vec2) -> list[Placement]:
    """Outline, separators, and intersections of a ``dims`` grid of ``cell_size`` cells."""
    full_size = full_grid_size(cell_size, dims)
    top, bottom = 0, full_size.y - 1
    left, right = 0, full_size.x - 1

    plan = rect_plan(full_size)

    # separators between rows
    for row in range(1, dims.y):
        y = row * (cell_size.y + 1)
        plan.append((Vec2(left, y), TEE_RIGHT))
        plan.append((Vec2(right, y), TEE_LEFT))
        for x in range(left + 1, right):
            plan.append((Vec2(x, y), HORIZONTAL))

    # separators between columns
    for col in range(1, dims.x):
        x = col * (cell_size.x + 1)
        plan.append((Vec2(x, top), TEE_DOWN))
        plan.append((Vec2(x, bottom), TEE_UP))
        for y in range(top + 1, bottom):
            plan.append((Vec2(x, y), VERTICAL))

    for crossing in (dims - 1).positions():
        plan.append(((crossing + 1) * (cell_size + 1), CROSS))

    return plan
