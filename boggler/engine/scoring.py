"""
Word scoring: 2 ** (length - 3).

3 letters = 1pt, 4 = 2, 5 = 4, 6 = 8, 7 = 16, 8 = 32, 9 = 64.
"""

MIN_WORD_LENGTH = 3


def score_for_length(length: int) -> int:
    if length < MIN_WORD_LENGTH:
        return 0
    return 2 ** (length - MIN_WORD_LENGTH)


def calculate_score(word: str) -> int:
    """Points for a word. Words shorter than 3 letters score 0."""
    return score_for_length(len(word))
