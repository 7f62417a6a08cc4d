"""Grid rendering utilities."""

from typing import Dict, List, Optional, Sequence, Tuple

from .geometry import direction_name
from .models import Board, Position


def placement_map(board: Board) -> Dict[Position, List[str]]:
    """Map each covered cell to the placed words running through it."""
    covered: Dict[Position, List[str]] = {}
    for placement in board.placements:
        for position in placement.positions:
            covered.setdefault(position, []).append(placement.word)
    return covered


def render_grid(
    board: Board,
    selection: Optional[Sequence[Tuple[int, int]]] = None,
    reveal: bool = False,
) -> str:
    """
    Render the board as space-separated letters, one row per line.

    Selected cells are wrapped in brackets. With `reveal`, filler cells
    are shown lowercase so the hidden words stand out (answer key).
    """
    selected = {tuple(pos) for pos in selection or []}
    covered = placement_map(board) if reveal else {}

    lines = []
    for row in range(board.size):
        cells = []
        for col in range(board.size):
            letter = board.rows[row][col]
            if reveal and (row, col) not in covered:
                letter = letter.lower()
            cells.append(f"[{letter}]" if (row, col) in selected else f" {letter} ")
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def render_placements(board: Board) -> str:
    """List each placed word with its start cell and heading."""
    return "\n".join(
        f"{p.word:<12} row {p.start.row}, col {p.start.col} {direction_name(p.direction)}"
        for p in board.placements
    )
