"""
Pydantic models for the session engine.

This module contains the options, results and summaries exchanged with the
presentation layer. The session state machine itself lives in session.py.
"""

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from ..board.generator import ALPHABET, MAX_PLACEMENT_ATTEMPTS
from ..board.geometry import DIRECTIONS, is_unit_step


# Type aliases
SessionStatus = Literal["IDLE", "ACTIVE", "OVER"]
SubmitOutcome = Literal[
    "TOO_SHORT",
    "ALREADY_FOUND",
    "TARGET_WORD_FOUND",
    "VALID_WORD",
    "NOT_IN_DICTIONARY",
    "SESSION_INACTIVE",
]

OUTCOME_MESSAGES: Dict[str, str] = {
    "TOO_SHORT": "Too short",
    "ALREADY_FOUND": "Already found",
    "TARGET_WORD_FOUND": "Target word found!",
    "VALID_WORD": "Valid word!",
    "NOT_IN_DICTIONARY": "Not in dictionary",
    "SESSION_INACTIVE": "Game is not running",
}


class GameOptions(BaseModel):
    """Configuration for a game session."""
    grid_size: int = Field(default=8, ge=1)
    directions: List[Tuple[int, int]] = Field(default_factory=lambda: list(DIRECTIONS))
    min_word_length: int = Field(default=3, ge=1)
    time_limit_seconds: Optional[int] = Field(default=None, ge=1)  # None = no time limit
    target_word_count: int = Field(default=10, ge=0)
    target_min_length: int = Field(default=4, ge=1)
    alphabet: str = Field(default=ALPHABET, min_length=1, pattern=r'^[A-Z]+$')
    max_placement_attempts: int = Field(default=MAX_PLACEMENT_ATTEMPTS, ge=1)

    @field_validator("directions")
    @classmethod
    def check_directions(cls, value: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
        if not value:
            raise ValueError("At least one direction is required")
        unique: List[Tuple[int, int]] = []
        for direction in value:
            if not is_unit_step(direction):
                raise ValueError(f"Direction {direction} is not a compass step")
            if direction not in unique:
                unique.append(direction)
        return unique

    @model_validator(mode="after")
    def check_grid_fits_words(self) -> "GameOptions":
        if self.grid_size < self.min_word_length:
            raise ValueError(
                f"Grid size {self.grid_size} cannot hold a word of the minimum "
                f"length {self.min_word_length}"
            )
        return self

    @property
    def is_timed(self) -> bool:
        return self.time_limit_seconds is not None


# Fixed per-difficulty overrides; grid size is never adapted
DIFFICULTY_PRESETS: Dict[str, Dict[str, Any]] = {
    "EASY": {"target_word_count": 6, "time_limit_seconds": None},
    "MEDIUM": {"target_word_count": 10, "time_limit_seconds": None},
    "HARD": {"target_word_count": 12, "time_limit_seconds": 180},
}


def options_for_difficulty(difficulty: str, **overrides: Any) -> GameOptions:
    """
    Build options from a named preset, with explicit overrides on top.

    Raises:
        ValueError: If the difficulty name is unknown
    """
    key = difficulty.upper()
    if key not in DIFFICULTY_PRESETS:
        raise ValueError(
            f"Unknown difficulty '{difficulty}' (expected one of {', '.join(DIFFICULTY_PRESETS)})"
        )
    return GameOptions(**{**DIFFICULTY_PRESETS[key], **overrides})


class Progress(BaseModel):
    """How many target words have been found."""
    found: int = 0
    total: int = 0

    @property
    def percentage(self) -> int:
        if self.total == 0:
            return 0
        return round(self.found / self.total * 100)


class SubmitResult(BaseModel):
    """Classification of a submitted word plus the updated totals."""
    outcome: SubmitOutcome
    word: str = ""
    points: int = 0
    score: int = 0
    progress: Progress = Field(default_factory=Progress)

    @property
    def accepted(self) -> bool:
        """True when the word scored."""
        return self.outcome in ("TARGET_WORD_FOUND", "VALID_WORD")

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self.outcome]


class SessionSummary(BaseModel):
    """End-of-game figures for the summary display."""
    score: int
    found_words: List[str] = Field(default_factory=list)
    targets_found: List[str] = Field(default_factory=list)
    targets_missed: List[str] = Field(default_factory=list)
    progress: Progress = Field(default_factory=Progress)
    status: SessionStatus = "OVER"
