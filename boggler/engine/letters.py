"""Weighted filler-letter sampling for generated grids."""

from typing import Dict

from .rng import SeededRandom


# English letter frequencies, adjusted for gameplay
LETTER_FREQUENCIES: Dict[str, float] = {
    "A": 8.2, "B": 1.5, "C": 2.8, "D": 4.3, "E": 12.7, "F": 2.2, "G": 2.0,
    "H": 6.1, "I": 7.0, "J": 0.15, "K": 0.77, "L": 4.0, "M": 2.4, "N": 6.7,
    "O": 7.5, "P": 1.9, "Q": 0.095, "R": 6.0, "S": 6.3, "T": 9.1, "U": 2.8,
    "V": 0.98, "W": 2.4, "X": 0.15, "Y": 2.0, "Z": 0.074,
}


def sample_letter(rng: SeededRandom, frequencies: Dict[str, float] = LETTER_FREQUENCIES) -> str:
    """
    Draw one letter with probability weight / total weight.

    Args:
        rng: Uniform source exposing next() -> float in [0, 1)
        frequencies: Letter -> relative weight

    Returns:
        A single uppercase letter
    """
    letters = list(frequencies)
    remaining = rng.next() * sum(frequencies.values())
    for letter in letters:
        remaining -= frequencies[letter]
        if remaining <= 0:
            return letter
    # Float drift can leave a sliver past the last weight
    return letters[0]
