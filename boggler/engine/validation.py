"""
Word submission validation.

Checks, in order:
1. Minimum length
2. Adjacency of every consecutive pair of positions (cells may be revisited)
3. Every position lies on the grid
4. The word has not already been found
5. The word is in the validation dictionary
"""

from typing import Iterable, List, Sequence, Set, Union

from .grid import are_adjacent, read_path
from .models import Grid, Position, ValidationResult
from .scoring import MIN_WORD_LENGTH
from ..dictionary.provider import DictionaryProvider, normalize


def is_valid_path(positions: Sequence[Position]) -> bool:
    """True if every consecutive pair is adjacent. A path may cross itself."""
    if not positions:
        return False
    return all(are_adjacent(a, b) for a, b in zip(positions, positions[1:]))


def _found_texts(found_words: Iterable[Union[str, object]]) -> Set[str]:
    """Accept plain strings or records carrying a .text attribute, in any case."""
    return {normalize(w if isinstance(w, str) else w.text) for w in found_words}


def validate_word_submission(
    grid: Grid,
    positions: List[Position],
    found_words: Iterable[Union[str, object]],
    dictionary: DictionaryProvider,
    language: str = "english",
) -> ValidationResult:
    """
    Decide whether a selected path is a new, valid word.

    Pure function: the caller records the word and updates the score.

    Args:
        grid: The game grid
        positions: Selected cells, in order
        found_words: Words already found this game (uppercase text or FoundWord)
        dictionary: Membership test for the game's language
        language: Dictionary language

    Returns:
        ValidationResult; rejected submissions carry error and code
    """
    if len(positions) < MIN_WORD_LENGTH:
        return ValidationResult(
            is_valid=False,
            error=f"Word must be at least {MIN_WORD_LENGTH} letters",
            code="TOO_SHORT",
        )

    if not is_valid_path(positions):
        return ValidationResult(
            is_valid=False,
            error="Letters must be adjacent",
            code="NOT_ADJACENT",
        )

    try:
        word = read_path(grid, positions)
    except IndexError:
        return ValidationResult(
            is_valid=False,
            error="Invalid position in path",
            code="INVALID_POSITION",
        )

    if word in _found_texts(found_words):
        return ValidationResult(
            is_valid=False,
            word=word,
            error="Word already found",
            code="ALREADY_FOUND",
        )

    if not dictionary.is_member(language, word):
        return ValidationResult(
            is_valid=False,
            word=word,
            error="Word not in dictionary",
            code="NOT_IN_DICTIONARY",
        )

    return ValidationResult(is_valid=True, word=word)
