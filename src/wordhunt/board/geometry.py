"""Compass directions and adjacency helpers for square letter grids."""

from typing import Dict, List, Tuple

from .models import Position


# 8 compass directions as (row delta, col delta)
COMPASS: Dict[str, Tuple[int, int]] = {
    "N": (-1, 0),
    "NE": (-1, 1),
    "E": (0, 1),
    "SE": (1, 1),
    "S": (1, 0),
    "SW": (1, -1),
    "W": (0, -1),
    "NW": (-1, -1),
}

DIRECTIONS: Tuple[Tuple[int, int], ...] = tuple(COMPASS.values())


def direction_name(direction: Tuple[int, int]) -> str:
    """Return the compass name of a direction vector ("?" if unknown)."""
    for name, vector in COMPASS.items():
        if vector == tuple(direction):
            return name
    return "?"


def is_unit_step(direction: Tuple[int, int]) -> bool:
    """True for the eight single-cell steps (the zero vector excluded)."""
    dr, dc = direction
    return dr in (-1, 0, 1) and dc in (-1, 0, 1) and (dr, dc) != (0, 0)


def in_bounds(position: Tuple[int, int], size: int) -> bool:
    row, col = position
    return 0 <= row < size and 0 <= col < size


def is_adjacent(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """Chebyshev distance of exactly one: touching, diagonals included."""
    row_diff = abs(a[0] - b[0])
    col_diff = abs(a[1] - b[1])
    return row_diff <= 1 and col_diff <= 1 and not (row_diff == 0 and col_diff == 0)


def walk(start: Tuple[int, int], direction: Tuple[int, int], length: int) -> List[Position]:
    """Positions covered by a straight run of `length` cells from `start`."""
    dr, dc = direction
    return [Position(start[0] + i * dr, start[1] + i * dc) for i in range(length)]
