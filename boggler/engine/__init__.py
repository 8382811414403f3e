"""Grid generation and word validation engine for Boggler."""

from .models import Position, GridCell, Grid, SeededWord, ValidationResult
from .rng import SeededRandom, generate_seed, parse_seed, SEED_LIMIT
from .letters import LETTER_FREQUENCIES, sample_letter
from .grid import create_grid, build_grid, get_cell_at, are_adjacent, neighbors, read_path, render_grid
from .placement import find_path, place_word
from .generator import GeneratorConfig, default_quota, generate_grid
from .validation import is_valid_path, validate_word_submission
from .scoring import MIN_WORD_LENGTH, calculate_score, score_for_length
from .parsing import parse_path

__all__ = [
    # Models
    "Position",
    "GridCell",
    "Grid",
    "SeededWord",
    "ValidationResult",
    # Randomness
    "SeededRandom",
    "generate_seed",
    "parse_seed",
    "SEED_LIMIT",
    "LETTER_FREQUENCIES",
    "sample_letter",
    # Grid utilities
    "create_grid",
    "build_grid",
    "get_cell_at",
    "are_adjacent",
    "neighbors",
    "read_path",
    "render_grid",
    # Generation
    "find_path",
    "place_word",
    "GeneratorConfig",
    "default_quota",
    "generate_grid",
    # Validation and scoring
    "is_valid_path",
    "validate_word_submission",
    "MIN_WORD_LENGTH",
    "calculate_score",
    "score_for_length",
    "parse_path",
]
