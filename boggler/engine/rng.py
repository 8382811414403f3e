"""
Seeded pseudo-random source for reproducible grids.

Every random decision made while generating a grid (filler letters, word
choice, start cells, neighbour order) is drawn from one SeededRandom, so a
seed shared in a URL rebuilds the exact same grid.
"""

import random
import re
import time
from typing import List, Sequence, TypeVar, Union

T = TypeVar("T")

# Seeds live in [0, SEED_LIMIT) so they fit a signed 32-bit int in a URL segment
SEED_LIMIT = 2_147_483_647

_MASK = 0xFFFFFFFF
_SEED_PATTERN = re.compile(r'^\d+$')


class SeededRandom:
    """
    Deterministic mulberry32 generator.

    Any integer seed is accepted (0, negative, or wider than 32 bits) and
    folded into 32 bits of state. Two instances built from the same seed
    return identical values for identical call sequences.
    """

    def __init__(self, seed: int):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"Seed must be an integer, got {type(seed).__name__}")
        self.seed = seed
        self._state = seed & _MASK

    def next(self) -> float:
        """Return a float in [0, 1) and advance the state."""
        self._state = (self._state + 0x6D2B79F5) & _MASK
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & _MASK
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & _MASK)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / 4294967296

    def next_int(self, min_value: int, max_value: int) -> int:
        """Return an integer in [min_value, max_value)."""
        if max_value <= min_value:
            raise ValueError(f"Empty range [{min_value}, {max_value})")
        return min_value + int(self.next() * (max_value - min_value))

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.next_int(0, len(items))]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a shuffled copy of items (Fisher-Yates). The input is left untouched."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return result


def generate_seed() -> int:
    """Fresh seed in [1, SEED_LIMIT) for games started without one."""
    entropy = time.time_ns() ^ random.getrandbits(31)
    return entropy % (SEED_LIMIT - 1) + 1


def parse_seed(value: Union[str, int]) -> int:
    """
    Parse a seed taken from a URL path segment or the command line.

    Raises:
        ValueError: If the value is not a decimal integer in [0, SEED_LIMIT)
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid seed {value!r}")
    if isinstance(value, int):
        seed = value
    else:
        text = str(value).strip()
        if not _SEED_PATTERN.match(text):
            raise ValueError(f"Invalid seed '{value}': expected a non-negative integer")
        seed = int(text)
    if not 0 <= seed < SEED_LIMIT:
        raise ValueError(f"Seed {seed} out of range [0, {SEED_LIMIT})")
    return seed
