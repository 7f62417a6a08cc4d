"""Point values for accepted words."""


def word_points(word: str) -> int:
    """Base score: one point per letter beyond two, never less than one."""
    return max(1, len(word) - 2)


def target_bonus(word: str) -> int:
    """Extra points for finding a target word: its length."""
    return len(word)


def score_word(word: str, is_target: bool) -> int:
    points = word_points(word)
    if is_target:
        points += target_bonus(word)
    return points
