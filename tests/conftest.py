import pytest

from boggler.dictionary import WordListDictionary
from boggler.engine import Grid


SEED_WORDS = [
    "cat", "dog", "sun", "map", "red", "hat", "pen", "box",
    "word", "tree", "rain", "star", "fish", "bird", "road", "lamp",
    "house", "water", "light", "river", "stone", "plant",
    "garden", "planet", "silver", "winter",
    "kitchen", "weather", "morning",
    "building", "mountain",
    "adventure", "butterfly",
]

VALIDATION_WORDS = SEED_WORDS + ["act", "cod", "god", "tog", "tot", "dot", "ago", "cot"]


@pytest.fixture
def dictionary():
    """Small hermetic dictionary: seeding words plus a few extra validation words."""
    return WordListDictionary(
        {"english": SEED_WORDS},
        {"english": VALIDATION_WORDS},
    )


@pytest.fixture
def cat_grid():
    """
    C A T
    D O G
    X Y Z
    """
    return Grid.from_letters(["CAT", "DOG", "XYZ"])
