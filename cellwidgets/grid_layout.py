"""Layout arithmetic for grids: item selection, track sizes and positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .primitive import Primitive


@dataclass(eq=False)
class GridItem:
    """A primitive placed on a grid, with the grid size from which it applies.

    ``x``, ``y``, ``w`` and ``h`` hold the position of the item the last time
    the grid was laid out; they are meaningful only while ``visible`` is true.
    """

    item: Optional[Primitive]
    row: int
    column: int
    row_span: int
    col_span: int
    min_grid_height: int = 0
    min_grid_width: int = 0
    focus: bool = False
    visible: bool = False
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def min_size(self) -> int:
        """The larger of the two minimum grid dimensions."""
        return max(self.min_grid_width, self.min_grid_height)

    def conflicts_with(self, other: "GridItem") -> bool:
        """Whether the two items share a primitive or overlap on the grid."""
        if self.item is other.item:
            return True
        return not (
            self.row >= other.row + other.row_span
            or self.row + self.row_span <= other.row
            or self.column >= other.column + other.col_span
            or self.column + self.col_span <= other.column
        )


def select_items(items: Sequence[GridItem], width: int, height: int) -> list[GridItem]:
    """Return the items that apply to a grid of the given size.

    Every item is first marked invisible. Items without a primitive, with an
    empty span or whose minimum grid size is not met are dropped. Of two
    conflicting items the one with the larger minimum size wins; on a tie the
    one added later wins.
    """
    selected: list[GridItem] = []
    for item in items:
        item.visible = False
        if (
            item.item is None
            or item.col_span <= 0
            or item.row_span <= 0
            or width < item.min_grid_width
            or height < item.min_grid_height
        ):
            continue
        for index, existing in enumerate(selected):
            if not item.conflicts_with(existing):
                continue
            if item.min_size >= existing.min_size:
                selected[index] = item
            break
        else:
            selected.append(item)
    return selected


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def distribute(
    spec: Sequence[int],
    count: int,
    available: int,
    minimum: int,
    gap: int,
    borders: bool,
) -> list[int]:
    """Return the sizes of ``count`` rows or columns.

    Positive values in ``spec`` are absolute sizes; zero and negative values
    are proportional weights (0 counts as -1). Tracks beyond ``spec`` have
    weight 1. Gaps (or single-cell borders) are taken off the available space
    first, and no size falls below ``minimum``.
    """
    sizes = [0] * count
    remaining = available
    proportional = 0
    for index, value in enumerate(spec[:count]):
        if value > 0:
            value = max(value, minimum)
            remaining -= value
            sizes[index] = value
        elif value == 0:
            proportional += 1
        else:
            proportional -= value

    if borders:
        remaining -= count + 1
    else:
        remaining -= (count - 1) * gap
    if count > len(spec):
        proportional += count - len(spec)

    for index in range(count):
        value = spec[index] if index < len(spec) else 0
        if value > 0:
            continue
        weight = 1 if value == 0 else -value
        size = _trunc_div(weight * remaining, proportional)
        remaining -= size
        proportional -= weight
        sizes[index] = max(size, minimum)
    return sizes


def positions(sizes: Sequence[int], gap: int, borders: bool) -> list[int]:
    """Return the start offset of each track, relative to the grid's corner."""
    step_gap = 1 if borders else gap
    start = 1 if borders else 0
    result = []
    for size in sizes:
        result.append(start)
        start += size + step_gap
    return result