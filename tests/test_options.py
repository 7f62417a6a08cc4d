"""Tests for game options and difficulty presets."""

import pytest
from pydantic import ValidationError

from wordhunt.board import DIRECTIONS
from wordhunt.engine import GameOptions, SubmitResult, options_for_difficulty


class TestGameOptions:
    """Option defaults and validation."""

    def test_defaults(self):
        options = GameOptions()
        assert options.grid_size == 8
        assert options.min_word_length == 3
        assert options.time_limit_seconds is None
        assert options.is_timed is False
        assert sorted(options.directions) == sorted(DIRECTIONS)
        assert len(options.directions) == 8

    def test_grid_too_small_for_min_length(self):
        """A grid that cannot hold a minimum-length word is rejected."""
        with pytest.raises(ValidationError):
            GameOptions(grid_size=2)

    def test_non_compass_direction(self):
        """Directions must be single compass steps."""
        with pytest.raises(ValidationError):
            GameOptions(directions=[(2, 0)])
        with pytest.raises(ValidationError):
            GameOptions(directions=[(0, 0)])

    def test_empty_directions(self):
        with pytest.raises(ValidationError):
            GameOptions(directions=[])

    def test_duplicate_directions_collapsed(self):
        options = GameOptions(directions=[(0, 1), (0, 1), (1, 0)])
        assert options.directions == [(0, 1), (1, 0)]

    def test_non_positive_time_limit(self):
        with pytest.raises(ValidationError):
            GameOptions(time_limit_seconds=0)


class TestDifficulty:
    """Named presets."""

    def test_hard_is_timed(self):
        options = options_for_difficulty("hard")
        assert options.time_limit_seconds == 180
        assert options.grid_size == 8

    def test_overrides_win(self):
        options = options_for_difficulty("EASY", grid_size=6, target_word_count=3)
        assert options.grid_size == 6
        assert options.target_word_count == 3

    def test_unknown_difficulty(self):
        with pytest.raises(ValueError):
            options_for_difficulty("nightmare")


class TestSubmitResult:
    """Result display helpers."""

    def test_messages(self):
        assert SubmitResult(outcome="TOO_SHORT").message == "Too short"
        assert SubmitResult(outcome="TARGET_WORD_FOUND").message == "Target word found!"

    def test_accepted(self):
        assert SubmitResult(outcome="VALID_WORD").accepted
        assert not SubmitResult(outcome="ALREADY_FOUND").accepted

    def test_unknown_outcome_rejected(self):
        with pytest.raises(ValidationError):
            SubmitResult(outcome="BINGO")
