"""Exceptions raised for engineering errors (never for gameplay outcomes)."""


class WordHuntError(Exception):
    """Base exception for Word Hunt failures."""


class DictionaryLoadError(WordHuntError):
    """Raised when a word-list file cannot be read."""
