"""Dictionary lookup and target-word selection."""

import random
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, Union

from ..errors import DictionaryLoadError
from ..utils.logger import get_logger
from .words import DEFAULT_WORDS


LOGGER = get_logger(__name__)

MIN_DICTIONARY_WORD_LENGTH = 3


class Dictionary(Protocol):
    """Anything that answers membership queries over uppercase words."""

    def contains(self, word: str) -> bool:
        ...


def normalize(word: str) -> str:
    return word.strip().upper()


class WordList:
    """
    Read-only set of uppercase dictionary words.

    Entries shorter than `min_length` or containing non-letters are
    discarded on construction. Lookups are case-insensitive.
    """

    def __init__(self, words: Iterable[str], min_length: int = MIN_DICTIONARY_WORD_LENGTH):
        self.min_length = min_length
        self._words = frozenset(
            w for w in (normalize(raw) for raw in words)
            if len(w) >= min_length and w.isalpha()
        )

    def contains(self, word: str) -> bool:
        return normalize(word) in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(sorted(self._words))

    @property
    def words(self) -> List[str]:
        """All entries, sorted."""
        return sorted(self._words)

    @classmethod
    def default(cls) -> "WordList":
        """The built-in starter word list."""
        return cls(DEFAULT_WORDS)


def load_word_list(path: Union[str, Path], min_length: int = MIN_DICTIONARY_WORD_LENGTH) -> WordList:
    """
    Load a plain-text word list, one word per line. Blank lines and lines
    starting with '#' are ignored.

    Raises:
        DictionaryLoadError: If the file cannot be read
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Cannot read word list {path}: {e}") from e

    lines = (line for line in text.splitlines() if line.strip() and not line.lstrip().startswith("#"))
    word_list = WordList(lines, min_length=min_length)
    LOGGER.info("Loaded %s words from %s", len(word_list), path)
    return word_list


def choose_target_words(
    pool: Sequence[str],
    count: int,
    min_length: int,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Draw up to `count` distinct words of at least `min_length` letters.

    Returns fewer words when the pool does not have enough candidates.
    """
    rng = rng or random.Random()
    candidates = sorted({normalize(w) for w in pool if len(normalize(w)) >= min_length})
    if len(candidates) < count:
        LOGGER.warning(
            "Only %s candidate words of length >= %s for %s targets",
            len(candidates), min_length, count,
        )
    return rng.sample(candidates, min(count, len(candidates)))
