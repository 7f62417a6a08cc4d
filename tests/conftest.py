"""Shared fixtures: small fixed dictionaries and hand-built boards."""

import pytest

from wordhunt.board import Board, Placement
from wordhunt.data import WordList
from wordhunt.engine import GameOptions, GameSession


# D O G
# X Q Z
# C A T
FIXED_ROWS = ["DOG", "XQZ", "CAT"]
CAT_PATH = [(2, 0), (2, 1), (2, 2)]
DOG_PATH = [(0, 0), (0, 1), (0, 2)]


@pytest.fixture
def small_dictionary():
    return WordList(["CAT", "DOG", "COD", "GOT", "TAX"])


@pytest.fixture
def fixed_board():
    return Board(
        size=3,
        rows=FIXED_ROWS,
        placements=[Placement(word="CAT", direction=(0, 1), positions=CAT_PATH)],
    )


@pytest.fixture
def fixed_session(small_dictionary, fixed_board):
    """An ACTIVE session on the hand-built board with CAT as the only target."""
    session = GameSession(options=GameOptions(grid_size=3), dictionary=small_dictionary)
    session.board = fixed_board
    session.target_words = fixed_board.placed_words
    session.status = "ACTIVE"
    return session


def select(session, path):
    """Feed every cell of `path` to the session."""
    return [session.extend_selection(cell) for cell in path]
