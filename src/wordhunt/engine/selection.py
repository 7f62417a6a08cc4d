"""The player's in-progress chain of adjacent cells."""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from ..board.geometry import is_adjacent
from ..board.models import Board, Position


class SelectionPath(BaseModel):
    """
    Ordered cells selected by the player; changes only at the tail.

    Invariants: no cell repeats, and every cell after the first touches its
    predecessor (diagonals included).
    """

    positions: List[Position] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def tail(self) -> Optional[Position]:
        return self.positions[-1] if self.positions else None

    def is_selected(self, position: Tuple[int, int]) -> bool:
        return Position(*position) in self.positions

    def can_extend(self, position: Tuple[int, int]) -> bool:
        """Any cell starts an empty path; otherwise it must be new and touch the tail."""
        if self.is_selected(position):
            return False
        return self.tail is None or is_adjacent(self.tail, position)

    def extend(self, position: Tuple[int, int]) -> bool:
        """Append `position` if allowed. Returns whether it was appended."""
        if not self.can_extend(position):
            return False
        self.positions.append(Position(*position))
        return True

    def retract(self) -> Optional[Position]:
        """Remove and return the tail, if any."""
        return self.positions.pop() if self.positions else None

    def clear(self) -> List[Position]:
        """Empty the path, returning what it held."""
        consumed, self.positions = self.positions, []
        return consumed

    def word(self, board: Board) -> str:
        """The word candidate spelled by the path on `board`."""
        return board.word_for(self.positions)
