"""
Word-search board generation.

Places target words as straight runs in any of the eight compass
directions. Each word gets a bounded number of random (direction, start)
attempts; a word that never fits is dropped, so the placed set is a subset
of the request. Remaining cells are filled with random alphabet letters.
"""

import random
import string
from typing import List, Optional, Sequence, Tuple

from ..utils.logger import get_logger
from .geometry import DIRECTIONS, in_bounds, walk
from .models import Board, Placement


LOGGER = get_logger(__name__)

ALPHABET = string.ascii_uppercase
MAX_PLACEMENT_ATTEMPTS = 100

Cells = List[List[Optional[str]]]


def prepare_words(words: Sequence[str], grid_size: int, alphabet: str = ALPHABET) -> List[str]:
    """
    Normalize the request: uppercase, deduplicate, and drop words that can
    never be placed (too long for the grid or using letters outside the
    alphabet).
    """
    allowed = set(alphabet)
    prepared: List[str] = []
    for raw in words:
        word = raw.strip().upper()
        if not word or word in prepared:
            continue
        if len(word) > grid_size:
            LOGGER.debug("Skipping '%s': longer than grid size %s", word, grid_size)
            continue
        if not set(word) <= allowed:
            LOGGER.debug("Skipping '%s': letters outside alphabet", word)
            continue
        prepared.append(word)
    return prepared


def placement_order(words: List[str], rng: random.Random) -> List[str]:
    """Longest first; equal lengths keep a shuffled order so puzzles vary."""
    shuffled = list(words)
    rng.shuffle(shuffled)
    return sorted(shuffled, key=len, reverse=True)


def fits(cells: Cells, word: str, start: Tuple[int, int], direction: Tuple[int, int]) -> bool:
    """Every traversed cell is in bounds and empty or already holds the letter."""
    size = len(cells)
    for letter, (row, col) in zip(word, walk(start, direction, len(word))):
        if not in_bounds((row, col), size):
            return False
        existing = cells[row][col]
        if existing is not None and existing != letter:
            return False
    return True


def try_place(
    cells: Cells,
    word: str,
    rng: random.Random,
    directions: Sequence[Tuple[int, int]],
    max_attempts: int,
) -> Optional[Placement]:
    """
    Attempt to place `word` with random direction and start cell.

    Returns the placement (and writes the letters) on the first fit, or
    None once `max_attempts` is exhausted.
    """
    size = len(cells)
    for attempt in range(1, max_attempts + 1):
        direction = tuple(rng.choice(directions))
        start = (rng.randrange(size), rng.randrange(size))
        if not fits(cells, word, start, direction):
            continue

        path = walk(start, direction, len(word))
        for letter, (row, col) in zip(word, path):
            cells[row][col] = letter
        LOGGER.debug(
            "Placed '%s' at %s heading %s (attempt %s)", word, start, direction, attempt
        )
        return Placement(word=word, direction=direction, positions=path)
    return None


def fill_empty_cells(cells: Cells, rng: random.Random, alphabet: str = ALPHABET) -> None:
    """Fill every unassigned cell with a uniformly random alphabet letter."""
    for row in cells:
        for col, letter in enumerate(row):
            if letter is None:
                row[col] = rng.choice(alphabet)


def generate(
    target_words: Sequence[str],
    grid_size: int,
    rng: Optional[random.Random] = None,
    directions: Sequence[Tuple[int, int]] = DIRECTIONS,
    alphabet: str = ALPHABET,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Board:
    """
    Build a board concealing as many of `target_words` as fit.

    Args:
        target_words: Words to hide; case-insensitive
        grid_size: Grid dimension N (the board is N x N)
        rng: Random source; pass a seeded ``random.Random`` for repeatable boards
        directions: Allowed (row delta, col delta) vectors
        alphabet: Letters used for filler cells
        max_attempts: Random placement attempts per word before it is dropped

    Returns:
        A fully filled Board whose placements are the words actually hidden

    Raises:
        ValueError: If the grid size, alphabet or direction set is unusable
    """
    if grid_size < 1:
        raise ValueError(f"Grid size must be positive, got {grid_size}")
    if not alphabet:
        raise ValueError("Alphabet must contain at least one letter")
    if not directions:
        raise ValueError("At least one placement direction is required")

    rng = rng or random.Random()
    cells: Cells = [[None] * grid_size for _ in range(grid_size)]
    placements: List[Placement] = []
    dropped: List[str] = []

    words = placement_order(prepare_words(target_words, grid_size, alphabet), rng)
    for word in words:
        placement = try_place(cells, word, rng, directions, max_attempts)
        if placement is None:
            LOGGER.debug("Dropping '%s' after %s attempts", word, max_attempts)
            dropped.append(word)
        else:
            placements.append(placement)

    fill_empty_cells(cells, rng, alphabet)

    if target_words and not placements:
        LOGGER.warning("No target words could be placed on a %sx%s grid", grid_size, grid_size)
    LOGGER.info(
        "Generated %sx%s board: %s placed, %s dropped",
        grid_size, grid_size, len(placements), len(dropped),
    )

    return Board(
        size=grid_size,
        rows=["".join(row) for row in cells],
        placements=placements,
    )

