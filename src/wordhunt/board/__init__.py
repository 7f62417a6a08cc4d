"""Word-search board generation."""

from .models import Position, Placement, Board
from .geometry import COMPASS, DIRECTIONS, direction_name, in_bounds, is_adjacent, is_unit_step, walk
from .generator import ALPHABET, MAX_PLACEMENT_ATTEMPTS, generate
from .grid import placement_map, render_grid, render_placements

__all__ = [
    # Models
    "Position",
    "Placement",
    "Board",
    # Geometry
    "COMPASS",
    "DIRECTIONS",
    "direction_name",
    "in_bounds",
    "is_adjacent",
    "is_unit_step",
    "walk",
    # Generation
    "ALPHABET",
    "MAX_PLACEMENT_ATTEMPTS",
    "generate",
    # Rendering
    "placement_map",
    "render_grid",
    "render_placements",
]
