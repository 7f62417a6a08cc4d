"""Data models for generated boards."""

from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Position(NamedTuple):
    """A cell on the grid, 0-indexed."""
    row: int
    col: int


class Placement(BaseModel):
    """A target word embedded in the grid and the cells it occupies."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    direction: Tuple[int, int]
    positions: List[Position]

    @property
    def start(self) -> Position:
        return self.positions[0]


class Board(BaseModel):
    """
    An N x N letter grid plus the record of which target words were placed.

    Boards are immutable for the lifetime of a session; a new target set
    means a new board.

    Attributes:
        size: Grid dimension N
        rows: N strings of N uppercase letters each
        placements: Target words actually embedded, in placement order
    """

    model_config = ConfigDict(frozen=True)

    size: int = Field(..., ge=1)
    rows: List[str]
    placements: List[Placement] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_shape(self) -> "Board":
        if len(self.rows) != self.size:
            raise ValueError(f"Expected {self.size} rows, got {len(self.rows)}")
        for index, row in enumerate(self.rows):
            if len(row) != self.size:
                raise ValueError(f"Row {index} has {len(row)} cells, expected {self.size}")
            if not (row.isalpha() and row.isupper()):
                raise ValueError(f"Row {index} must hold uppercase letters only: {row!r}")
        return self

    @property
    def placed_words(self) -> List[str]:
        """Words the player can actually find, in placement order."""
        return [p.word for p in self.placements]

    @property
    def cell_count(self) -> int:
        return sum(len(row) for row in self.rows)

    def contains(self, position: Tuple[int, int]) -> bool:
        row, col = position
        return 0 <= row < self.size and 0 <= col < self.size

    def letter_at(self, position: Tuple[int, int]) -> str:
        """Letter at `position`. Raises IndexError outside the grid."""
        if not self.contains(position):
            raise IndexError(f"Position {tuple(position)} outside {self.size}x{self.size} grid")
        row, col = position
        return self.rows[row][col]

    def word_for(self, path: Sequence[Tuple[int, int]]) -> str:
        """Concatenate the letters along a path of positions."""
        return "".join(self.letter_at(pos) for pos in path)

    def positions(self) -> Iterator[Position]:
        """All positions in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield Position(row, col)

    def placement_for(self, word: str) -> Optional[Placement]:
        """The placement record of `word`, if it was placed."""
        word = word.upper()
        for placement in self.placements:
            if placement.word == word:
                return placement
        return None
