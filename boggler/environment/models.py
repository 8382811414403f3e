"""
Pydantic models for the game environment.

Configuration, found-word records, the in-progress letter selection and
submission results. The session logic itself lives in session.py.
"""

import uuid
from datetime import datetime
from typing import List, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..engine.generator import GeneratorConfig
from ..engine.models import Position, ValidationResult
from ..engine.rng import parse_seed


# Type aliases
GameState = Literal["setup", "playing", "paused", "gameover"]

GRID_SIZES = (4, 9, 16)
TIMER_DURATIONS = (30, 60, 180, 300)  # seconds
DEFAULT_GRID_SIZE = 9
DEFAULT_TIMER_DURATION = 180
TIMER_WARNING_THRESHOLD = 10  # seconds


class GameConfig(BaseModel):
    """Settings for a single game."""
    grid_size: int = Field(default=DEFAULT_GRID_SIZE, ge=1)
    timer_duration: int = Field(default=DEFAULT_TIMER_DURATION, gt=0)
    language: str = "english"
    seed: Optional[int] = None
    dictionary_root: Optional[str] = None  # None uses the bundled word lists
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)

    @field_validator("seed", mode="before")
    @classmethod
    def _check_seed(cls, value):
        if value is None:
            return value
        return parse_seed(value)


class FoundWord(BaseModel):
    """A word the player found. Never changes once recorded."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    text: str
    positions: List[Position] = Field(default_factory=list)
    score: int = 0
    timestamp: datetime = Field(default_factory=datetime.now)
    player_id: Optional[str] = None  # reserved for multiplayer


class LetterSelection(BaseModel):
    """Cells picked so far in the current drag, with the letters they spell."""
    positions: List[Position] = Field(default_factory=list)
    word_text: str = ""

    @model_validator(mode='after')
    def _check_length(self) -> "LetterSelection":
        if len(self.word_text) != len(self.positions):
            raise ValueError(
                f"Selection text '{self.word_text}' does not match {len(self.positions)} positions"
            )
        return self


class SubmissionResult(BaseModel):
    """Result of submitting a selection."""
    success: bool
    message: str
    found_word: Optional[FoundWord] = None
    validation: Optional[ValidationResult] = None
