"""Word Hunt: word-search board generation and game sessions."""

from .board import Board, Placement, Position, generate
from .data import Dictionary, WordList, load_word_list
from .engine import GameOptions, GameSession, SubmitResult, options_for_difficulty
from .errors import DictionaryLoadError, WordHuntError

__all__ = [
    "Board",
    "Placement",
    "Position",
    "generate",
    "Dictionary",
    "WordList",
    "load_word_list",
    "GameOptions",
    "GameSession",
    "SubmitResult",
    "options_for_difficulty",
    "DictionaryLoadError",
    "WordHuntError",
]

__version__ = "0.1.0"
