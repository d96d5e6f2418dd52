"""Integer row/column positions, sizes and rectangles within a grid."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["UINT_MAX", "GridPos", "GridSize", "GridRect", "add", "get_intersection", "is_empty"]

UINT_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class GridPos:
    row: int = 0
    column: int = 0


@dataclass(frozen=True)
class GridSize:
    rows: int = 0
    columns: int = 0


@dataclass(frozen=True)
class GridRect:
    pos: GridPos = field(default_factory=GridPos)
    size: GridSize = field(default_factory=GridSize)


def add(pos: GridPos, size: GridSize) -> GridPos:
    """Return *pos* moved by *size*, saturating at UINT_MAX."""
    return GridPos(min(pos.row + size.rows, UINT_MAX), min(pos.column + size.columns, UINT_MAX))


def get_intersection(a: GridRect, b: GridRect) -> GridRect:
    """Return the overlap of *a* and *b*, or an all-zero rectangle if none."""
    a_max = add(a.pos, a.size)
    b_max = add(b.pos, b.size)
    r_min = max(a.pos.row, b.pos.row)
    r_max = min(a_max.row, b_max.row)
    c_min = max(a.pos.column, b.pos.column)
    c_max = min(a_max.column, b_max.column)
    if r_min <= r_max and c_min <= c_max:
        return GridRect(GridPos(r_min, c_min), GridSize(r_max - r_min, c_max - c_min))
    return GridRect()


def is_empty(item: GridSize | GridRect) -> bool:
    """True if a size, or the size of a rectangle, has no rows or no columns."""
    size = item.size if isinstance(item, GridRect) else item
    return size.rows == 0 or size.columns == 0