"""
Grid generation: weighted random filler plus a quota of seeded words.

The seed fixes everything. Filler letters, candidate words, start cells and
the neighbour order used by the placement search all come from a single
SeededRandom owned by the call, so (size, seed, dictionary, config) always
yields the same Grid.
"""

from typing import Callable, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .grid import build_grid, create_grid
from .letters import sample_letter
from .models import Grid, Position, SeededWord
from .placement import DEFAULT_MAX_STEPS, place_word
from .rng import SeededRandom, generate_seed
from ..dictionary.provider import DictionaryProvider, DictionaryUnavailableError


def default_quota(size: int, length: int) -> int:
    """
    How many words of a given length to seed into a size x size grid.

    Every length up to a knee gets the same base count; past the knee the
    count halves per extra letter. Small grids seed a couple of short words,
    large grids seed many words and reach further into long ones.

        size 4:  3->2 4->2 5->1
        size 9:  3..6->3 7->1
        size 16: 3..8->10 9->5
    """
    if length > size * size:
        return 0
    base = max(2, (size * size) // 24)
    knee = min(9, 3 + size // 3)
    if length <= knee:
        return base
    return base >> (length - knee)


class GeneratorConfig(BaseModel):
    """Tuning knobs for grid generation."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    language: str = "english"
    min_length: int = Field(default=3, ge=1)
    max_length: int = Field(default=9, ge=1)
    placement_retries: int = Field(default=20, ge=1)  # start cells tried per word
    draw_attempts: int = Field(default=4, ge=1)  # candidate words drawn per quota slot
    max_steps: int = Field(default=DEFAULT_MAX_STEPS, ge=1)  # search budget per start cell
    quota: Callable[[int, int], int] = Field(default=default_quota, exclude=True)

    @model_validator(mode='after')
    def _check_lengths(self) -> "GeneratorConfig":
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) is greater than max_length ({self.max_length})"
            )
        return self


def _place_with_retries(
    letters: List[List[str]],
    word: str,
    rng: SeededRandom,
    locked: Dict[Position, str],
    config: GeneratorConfig,
) -> Optional[List[Position]]:
    """Try the word from several random start cells."""
    size = len(letters)
    for _ in range(config.placement_retries):
        start = Position(rng.next_int(0, size), rng.next_int(0, size))
        path = place_word(letters, word, start, rng, locked=locked, max_steps=config.max_steps)
        if path is not None:
            return path
    return None


def generate_grid(
    size: int,
    dictionary: DictionaryProvider,
    seed: Optional[int] = None,
    config: Optional[GeneratorConfig] = None,
    verbose: bool = False,
) -> Grid:
    """
    Build a playable grid.

    Args:
        size: Grid side length (any positive integer)
        dictionary: Source of seeding words
        seed: Generation seed; a fresh one is drawn when omitted
        config: Generation tuning, defaults to GeneratorConfig()
        verbose: If True, print a placement summary to stdout

    Returns:
        The finished Grid with seeded_words and seed filled in

    Raises:
        ValueError: If size is not positive
        DictionaryUnavailableError: If no seeding words exist for the configured lengths
    """
    config = config or GeneratorConfig()
    if seed is None:
        seed = generate_seed()
    rng = SeededRandom(seed)

    letters = create_grid(size, lambda: sample_letter(rng))

    pools = dictionary.words_by_length(config.language, config.min_length, config.max_length)
    if not any(pools.values()):
        raise DictionaryUnavailableError(
            f"No seeding words of length {config.min_length}-{config.max_length} "
            f"for language '{config.language}'"
        )

    locked: Dict[Position, str] = {}
    seeded_words: List[SeededWord] = []
    seeded_texts = set()
    skipped = 0

    for length in range(config.min_length, config.max_length + 1):
        pool = pools.get(length)
        quota = config.quota(size, length)
        if not pool or quota <= 0:
            continue

        for _ in range(quota):
            for _ in range(config.draw_attempts):
                word = rng.choice(pool)
                if word in seeded_texts:
                    continue
                path = _place_with_retries(letters, word, rng, locked, config)
                if path is None:
                    skipped += 1
                    continue
                for position, letter in zip(path, word):
                    locked[position] = letter
                seeded_words.append(SeededWord(text=word, positions=path))
                seeded_texts.add(word)
                break

    if verbose:
        print(f"Generated {size}x{size} grid (seed={seed}): "
              f"{len(seeded_words)} words seeded, {skipped} placements skipped")

    return build_grid(letters, seeded_words, seed=seed)
