"""
Word placement: carve a self-avoiding king-move path that spells a word.

The search is a depth-first backtrack run on an explicit stack. Each time
the path grows onto a cell, that cell's neighbours are shuffled with the
generation RNG, which varies the shapes of seeded words while keeping them
reproducible for a given seed.
"""

from typing import Dict, List, Optional

from .grid import in_bounds, neighbors
from .models import Position
from .rng import SeededRandom


DEFAULT_MAX_STEPS = 2000


def _usable(position: Position, letter: str, locked: Dict[Position, str]) -> bool:
    """A cell is usable if no seeded word owns it, or the owner put the same letter there."""
    owner_letter = locked.get(position)
    return owner_letter is None or owner_letter == letter


def find_path(
    size: int,
    word: str,
    start: Position,
    rng: SeededRandom,
    locked: Optional[Dict[Position, str]] = None,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> Optional[List[Position]]:
    """
    Search for a path spelling word that begins on start.

    Args:
        size: Grid side length
        word: Uppercase word to lay out
        start: Cell for the first letter
        rng: Generation RNG, used to order neighbours
        locked: Cells already claimed by seeded words, mapped to their letters
        max_steps: Node budget; the search gives up once it is spent

    Returns:
        The ordered positions, or None if no path was found
    """
    locked = locked if locked is not None else {}
    start = Position(*start)
    if not word or not in_bounds(start, size) or not _usable(start, word[0], locked):
        return None

    path: List[Position] = [start]
    on_path = {start}
    # pending[i] holds the untried neighbours of path[i]
    pending: List[List[Position]] = [rng.shuffle(neighbors(start, size))] if len(word) > 1 else []
    steps = 0

    while len(path) < len(word):
        steps += 1
        if steps > max_steps:
            return None

        options = pending[-1]
        letter = word[len(path)]
        chosen = None
        while options:
            candidate = options.pop()
            if candidate not in on_path and _usable(candidate, letter, locked):
                chosen = candidate
                break

        if chosen is None:
            # Dead end: drop this cell and resume from its predecessor
            pending.pop()
            if not pending:
                return None
            on_path.discard(path.pop())
            continue

        path.append(chosen)
        on_path.add(chosen)
        if len(path) < len(word):
            pending.append(rng.shuffle(neighbors(chosen, size)))

    return path


def place_word(
    letters: List[List[str]],
    word: str,
    start: Position,
    rng: SeededRandom,
    locked: Optional[Dict[Position, str]] = None,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> Optional[List[Position]]:
    """
    Try to write word onto letters along a fresh path from start.

    On success the cells along the path are overwritten in order and the
    path is returned. On failure None is returned and letters is untouched;
    a word too long for the grid is just a failure, never an error.
    """
    word = word.upper()
    path = find_path(len(letters), word, start, rng, locked=locked, max_steps=max_steps)
    if path is None:
        return None

    for position, letter in zip(path, word):
        letters[position.row][position.col] = letter
    return path
