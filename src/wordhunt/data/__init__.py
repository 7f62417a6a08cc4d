"""Word lists for Word Hunt."""

from .words import DEFAULT_WORDS
from .wordlist import (
    MIN_DICTIONARY_WORD_LENGTH,
    Dictionary,
    WordList,
    choose_target_words,
    load_word_list,
    normalize,
)

__all__ = [
    "DEFAULT_WORDS",
    "MIN_DICTIONARY_WORD_LENGTH",
    "Dictionary",
    "WordList",
    "choose_target_words",
    "load_word_list",
    "normalize",
]
