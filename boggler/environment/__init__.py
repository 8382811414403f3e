"""Game environment for Boggler."""

from .models import (
    GameState,
    GameConfig,
    FoundWord,
    LetterSelection,
    SubmissionResult,
    GRID_SIZES,
    TIMER_DURATIONS,
    DEFAULT_GRID_SIZE,
    DEFAULT_TIMER_DURATION,
    TIMER_WARNING_THRESHOLD,
)
from .session import GameSession, TRANSITIONS

__all__ = [
    "GameState",
    "GameConfig",
    "FoundWord",
    "LetterSelection",
    "SubmissionResult",
    "GRID_SIZES",
    "TIMER_DURATIONS",
    "DEFAULT_GRID_SIZE",
    "DEFAULT_TIMER_DURATION",
    "TIMER_WARNING_THRESHOLD",
    "GameSession",
    "TRANSITIONS",
]
