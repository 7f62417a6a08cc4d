"""
Game session state machine.

A session moves IDLE -> ACTIVE on start, stays ACTIVE through selection
changes and submissions, and becomes OVER on end_session (or when a timed
game runs out). restart() returns to a fresh ACTIVE session with a new
board from any state.
"""

import random
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..board.generator import generate
from ..board.models import Board, Position
from ..data.wordlist import WordList, choose_target_words, normalize
from ..utils.logger import get_logger
from .models import GameOptions, Progress, SessionStatus, SessionSummary, SubmitResult
from .scoring import score_word
from .selection import SelectionPath


LOGGER = get_logger(__name__)


class GameSession(BaseModel):
    """
    Owns one game: the board, the selection path, score and found words.

    Ordinary gameplay never raises: rejected selections are ignored and
    every submission comes back as a classified SubmitResult.

    Attributes:
        options: Grid size, timing and target selection settings
        dictionary: Collaborator answering ``contains(word) -> bool``
        word_pool: Words target sets are drawn from
        board: Current board (None until started)
        status: IDLE, ACTIVE or OVER
        score: Points scored this game
        found_words: Accepted words in the order they were found
        target_words: Target words actually placed on the board
        selection: The in-progress path
        time_left: Seconds remaining, None when untimed
        seed: Optional random seed for reproducible boards
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    options: GameOptions = Field(default_factory=GameOptions)
    dictionary: Any = None
    word_pool: List[str] = Field(default_factory=list)
    board: Optional[Board] = None
    status: SessionStatus = "IDLE"
    score: int = Field(default=0, ge=0)
    found_words: List[str] = Field(default_factory=list)
    target_words: List[str] = Field(default_factory=list)
    selection: SelectionPath = Field(default_factory=SelectionPath)
    time_left: Optional[int] = None
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random source and fall back to the built-in word list."""
        self._rng = random.Random(self.seed)
        if self.dictionary is None:
            self.dictionary = WordList.default()
        if not self.word_pool:
            self.word_pool = list(getattr(self.dictionary, "words", []))

    @classmethod
    def create(
        cls,
        options: Optional[GameOptions] = None,
        dictionary: Any = None,
        word_pool: Optional[Sequence[str]] = None,
        seed: Optional[int] = None,
        target_words: Optional[Sequence[str]] = None,
    ) -> "GameSession":
        """
        Factory method to create and start a session.

        Args:
            options: Session options (defaults to GameOptions())
            dictionary: Dictionary collaborator (defaults to the built-in word list)
            word_pool: Candidate target words (defaults to the dictionary's words)
            seed: Optional random seed for reproducibility
            target_words: Explicit targets instead of a random draw

        Returns:
            An ACTIVE session with a freshly generated board
        """
        session = cls(
            options=options or GameOptions(),
            dictionary=dictionary,
            word_pool=list(word_pool or []),
            seed=seed,
        )
        session.start(target_words)
        return session

    @property
    def is_active(self) -> bool:
        return self.status == "ACTIVE"

    @property
    def game_over(self) -> bool:
        return self.status == "OVER"

    @property
    def current_word(self) -> str:
        """Letters along the current selection."""
        if self.board is None:
            return ""
        return self.selection.word(self.board)

    def start(self, target_words: Optional[Sequence[str]] = None) -> Board:
        """
        Generate a board and reset all counters.

        Without explicit `target_words`, draws ``target_word_count`` words of
        at least ``target_min_length`` letters from the word pool. Only the
        words actually placed become targets.
        """
        if target_words is None:
            target_words = choose_target_words(
                self.word_pool,
                self.options.target_word_count,
                self.options.target_min_length,
                rng=self._rng,
            )

        self.board = generate(
            target_words,
            self.options.grid_size,
            rng=self._rng,
            directions=self.options.directions,
            alphabet=self.options.alphabet,
            max_attempts=self.options.max_placement_attempts,
        )
        self.target_words = self.board.placed_words
        self.score = 0
        self.found_words = []
        self.selection.clear()
        self.time_left = self.options.time_limit_seconds
        self.status = "ACTIVE"

        LOGGER.info(
            "Session started: %sx%s grid, %s of %s targets placed",
            self.board.size, self.board.size, len(self.target_words), len(target_words),
        )
        return self.board

    def restart(self, target_word_count: Optional[int] = None) -> Board:
        """Start over with a new target set and board, optionally resizing the target set."""
        if target_word_count is not None:
            self.options = GameOptions(
                **{**self.options.model_dump(), "target_word_count": target_word_count}
            )
        return self.start()

    def extend_selection(self, position: Tuple[int, int]) -> bool:
        """
        Append `position` to the path if it is on the board, not yet selected,
        and touches the current tail. Anything else is ignored.

        Returns:
            Whether the cell was appended
        """
        if not self.is_active or self.board is None or not self.board.contains(position):
            return False
        return self.selection.extend(position)

    def retract_last(self) -> Optional[Position]:
        """Remove the tail of the path, returning it."""
        if not self.is_active:
            return None
        return self.selection.retract()

    def toggle(self, position: Tuple[int, int]) -> bool:
        """
        Tap handler: tapping the tail retracts it, tapping a free adjacent
        cell extends the path.

        Returns:
            Whether the selection changed
        """
        if self.selection.tail is not None and self.selection.tail == Position(*position):
            return self.retract_last() is not None
        return self.extend_selection(position)

    def submit(self) -> SubmitResult:
        """Classify the word spelled by the current path. Always clears the path."""
        word = self.current_word
        self.selection.clear()
        return self._classify(word)

    def submit_word(self, word: str) -> SubmitResult:
        """Classify a typed word. Also clears any in-progress path."""
        self.selection.clear()
        return self._classify(normalize(word))

    def _classify(self, word: str) -> SubmitResult:
        if not self.is_active:
            return self._result("SESSION_INACTIVE", word)

        if len(word) < self.options.min_word_length:
            return self._result("TOO_SHORT", word)

        if word in self.found_words:
            return self._result("ALREADY_FOUND", word)

        # Target words take priority over plain dictionary words
        if word in self.target_words:
            return self._accept(word, is_target=True)

        if self._in_dictionary(word):
            return self._accept(word, is_target=False)

        LOGGER.debug("Rejected '%s': not in dictionary", word)
        return self._result("NOT_IN_DICTIONARY", word)

    def _accept(self, word: str, is_target: bool) -> SubmitResult:
        points = score_word(word, is_target)
        self.score += points
        self.found_words.append(word)
        outcome = "TARGET_WORD_FOUND" if is_target else "VALID_WORD"
        LOGGER.debug("Accepted '%s' (%s): +%s", word, outcome, points)
        return self._result(outcome, word, points)

    def _in_dictionary(self, word: str) -> bool:
        """Dictionary lookup; a failing collaborator counts as 'not found'."""
        try:
            return bool(self.dictionary.contains(word))
        except Exception:
            LOGGER.exception("Dictionary lookup failed for '%s'", word)
            return False

    def _result(self, outcome: str, word: str, points: int = 0) -> SubmitResult:
        return SubmitResult(
            outcome=outcome,
            word=word,
            points=points,
            score=self.score,
            progress=self.progress(),
        )

    def end_session(self) -> None:
        """Finish the game, freezing score and found words. No-op unless ACTIVE."""
        if not self.is_active:
            return
        self.selection.clear()
        self.status = "OVER"
        LOGGER.info(
            "Session over: score %s, %s words found", self.score, len(self.found_words)
        )

    def tick(self, seconds: int = 1) -> Optional[int]:
        """
        Timer callback for timed games. Counts down and ends the session at
        zero; does nothing for untimed or finished games.

        Returns:
            Seconds left (None when untimed)
        """
        if not self.is_active or self.time_left is None:
            return self.time_left
        self.time_left = max(0, self.time_left - seconds)
        if self.time_left == 0:
            self.end_session()
        return self.time_left

    def progress(self) -> Progress:
        """Target words found so far out of those placed."""
        found = sum(1 for word in self.target_words if word in self.found_words)
        return Progress(found=found, total=len(self.target_words))

    def hint(self) -> Optional[Position]:
        """Start cell of the first target word not found yet."""
        if self.board is None:
            return None
        for placement in self.board.placements:
            if placement.word not in self.found_words:
                return placement.start
        return None

    def summary(self) -> SessionSummary:
        """Figures for the end-of-game display."""
        return SessionSummary(
            score=self.score,
            found_words=list(self.found_words),
            targets_found=[w for w in self.target_words if w in self.found_words],
            targets_missed=[w for w in self.target_words if w not in self.found_words],
            progress=self.progress(),
            status=self.status,
        )
