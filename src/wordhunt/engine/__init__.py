"""Game session engine for Word Hunt."""

from .models import (
    SessionStatus,
    SubmitOutcome,
    OUTCOME_MESSAGES,
    GameOptions,
    DIFFICULTY_PRESETS,
    options_for_difficulty,
    Progress,
    SubmitResult,
    SessionSummary,
)
from .scoring import word_points, target_bonus, score_word
from .selection import SelectionPath
from .session import GameSession

__all__ = [
    "SessionStatus",
    "SubmitOutcome",
    "OUTCOME_MESSAGES",
    "GameOptions",
    "DIFFICULTY_PRESETS",
    "options_for_difficulty",
    "Progress",
    "SubmitResult",
    "SessionSummary",
    "word_points",
    "target_bonus",
    "score_word",
    "SelectionPath",
    "GameSession",
]
