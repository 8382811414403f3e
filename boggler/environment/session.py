import json
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from .models import (
    DEFAULT_GRID_SIZE,
    DEFAULT_TIMER_DURATION,
    TIMER_WARNING_THRESHOLD,
    FoundWord,
    GameConfig,
    GameState,
    LetterSelection,
    SubmissionResult,
)
from ..dictionary.provider import DictionaryProvider, FileDictionaryProvider
from ..engine.generator import generate_grid
from ..engine.grid import get_cell_at, render_grid
from ..engine.models import Grid, Position, SeededWord
from ..engine.scoring import calculate_score
from ..engine.validation import validate_word_submission


# Allowed state transitions
TRANSITIONS: Dict[str, List[str]] = {
    "setup": ["playing"],
    "playing": ["paused", "gameover"],
    "paused": ["playing", "gameover"],
    "gameover": ["setup"],
}


class GameSession(BaseModel):
    """
    Holds the state of one game.

    Owns the grid, the countdown, the found words and the running score, and
    drives the selection lifecycle (start, extend, submit or cancel). Word
    checks are delegated to the engine's validator.

    Attributes:
        grid: The generated letter grid
        time_remaining: Seconds left on the clock
        score: Sum of found-word scores
        found_words: Words found so far, in order
        game_state: One of setup, playing, paused, gameover
        current_selection: The selection being built, if any
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    grid: Grid
    grid_size: int = DEFAULT_GRID_SIZE
    timer_duration: int = DEFAULT_TIMER_DURATION
    time_remaining: int = DEFAULT_TIMER_DURATION
    score: int = 0
    found_words: List[FoundWord] = Field(default_factory=list)
    game_state: GameState = "setup"
    language: str = "english"
    created_at: datetime = Field(default_factory=datetime.now)
    ended_at: Optional[datetime] = None
    current_selection: Optional[LetterSelection] = None
    _dictionary: Optional[DictionaryProvider] = None

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        dictionary: Optional[DictionaryProvider] = None,
        verbose: bool = False,
        **config_kwargs: Any
    ) -> "GameSession":
        """
        Factory method to create a session with a freshly generated grid.

        Args:
            config: Optional GameConfig instance
            dictionary: Word lists; defaults to config.dictionary_root or the bundled lists
            verbose: If True, print generation progress
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new GameSession in the setup state

        Raises:
            DictionaryUnavailableError: If the word lists cannot be loaded
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if dictionary is None:
            if config.dictionary_root:
                dictionary = FileDictionaryProvider(config.dictionary_root)
            else:
                dictionary = FileDictionaryProvider.bundled()

        generator_config = config.generator.model_copy(update={"language": config.language})
        grid = generate_grid(
            config.grid_size,
            dictionary,
            seed=config.seed,
            config=generator_config,
            verbose=verbose,
        )

        session = cls(
            grid=grid,
            grid_size=config.grid_size,
            timer_duration=config.timer_duration,
            time_remaining=config.timer_duration,
            language=config.language,
        )
        session._dictionary = dictionary
        return session

    def attach_dictionary(self, dictionary: DictionaryProvider) -> None:
        """Set the dictionary used to check submissions (e.g. after loading a saved session)."""
        self._dictionary = dictionary

    @property
    def seed(self) -> Optional[int]:
        return self.grid.seed

    @property
    def is_warning(self) -> bool:
        """True once the clock is at or below the warning threshold."""
        return self.time_remaining <= TIMER_WARNING_THRESHOLD

    @property
    def found_texts(self) -> List[str]:
        return [w.text for w in self.found_words]

    # State machine

    @staticmethod
    def validate_transition(current: str, new: str) -> bool:
        """Check whether a state change is allowed."""
        return new in TRANSITIONS.get(current, [])

    def _transition(self, new: GameState) -> None:
        if not self.validate_transition(self.game_state, new):
            raise ValueError(f"Cannot move from '{self.game_state}' to '{new}'")
        self.game_state = new

    def start(self) -> None:
        """Begin play."""
        self._transition("playing")

    def pause(self) -> None:
        self._transition("paused")

    def resume(self) -> None:
        self._transition("playing")

    def end_game(self) -> None:
        """Stop the game, zero the clock and drop any selection. Ending twice is a no-op."""
        if self.game_state == "gameover":
            return
        self._transition("gameover")
        self.ended_at = datetime.now()
        self.time_remaining = 0
        self.current_selection = None

    def restart(self) -> None:
        """Return a finished game to setup on the same grid."""
        self._transition("setup")
        self.time_remaining = self.timer_duration
        self.score = 0
        self.found_words = []
        self.ended_at = None
        self.current_selection = None

    def tick(self, seconds: int = 1) -> None:
        """
        Advance the countdown while playing.

        The clock never goes below zero; reaching zero ends the game.

        Raises:
            ValueError: If seconds is negative
        """
        if seconds < 0:
            raise ValueError(f"Cannot tick by a negative amount ({seconds}s)")
        if self.game_state != "playing":
            return
        self.time_remaining = max(0, self.time_remaining - seconds)
        if self.time_remaining == 0:
            self.end_game()

    # Selection lifecycle

    def start_selection(self, position: Position) -> LetterSelection:
        """
        Begin a new selection on one cell.

        Raises:
            IndexError: If the position is off the grid
        """
        position = Position(*position)
        letter = get_cell_at(self.grid, position).letter
        self.current_selection = LetterSelection(positions=[position], word_text=letter)
        return self.current_selection

    def extend_selection(self, position: Position) -> LetterSelection:
        """Add a cell to the selection. Revisiting an earlier cell is allowed."""
        if self.current_selection is None:
            return self.start_selection(position)

        position = Position(*position)
        letter = get_cell_at(self.grid, position).letter
        self.current_selection = LetterSelection(
            positions=self.current_selection.positions + [position],
            word_text=self.current_selection.word_text + letter,
        )
        return self.current_selection

    def remove_last_from_selection(self) -> Optional[LetterSelection]:
        """Drop the most recent cell; an emptied selection is cleared."""
        if self.current_selection is None:
            return None
        if len(self.current_selection.positions) <= 1:
            self.current_selection = None
            return None
        self.current_selection = LetterSelection(
            positions=self.current_selection.positions[:-1],
            word_text=self.current_selection.word_text[:-1],
        )
        return self.current_selection

    def cancel_selection(self) -> None:
        self.current_selection = None

    def submit_selection(self) -> SubmissionResult:
        """Submit the current selection and clear it."""
        if self.current_selection is None:
            return SubmissionResult(success=False, message="No active game or selection")
        positions = self.current_selection.positions
        self.current_selection = None
        return self.submit_path(positions)

    def submit_path(self, positions: List[Position]) -> SubmissionResult:
        """
        Validate a path and record the word if it is accepted.

        Args:
            positions: Selected cells, in order

        Returns:
            SubmissionResult with a player-facing message
        """
        if self.game_state != "playing":
            return SubmissionResult(success=False, message="Game is not in progress")
        if self._dictionary is None:
            raise ValueError("Session has no dictionary attached")

        positions = [Position(*p) for p in positions]
        validation = validate_word_submission(
            self.grid,
            positions,
            self.found_texts,
            self._dictionary,
            language=self.language,
        )
        if not validation.is_valid:
            return SubmissionResult(
                success=False,
                message=validation.error or "Invalid word",
                validation=validation,
            )

        found = self.add_found_word(validation.word, positions)
        return SubmissionResult(
            success=True,
            message=f'Found "{found.text}" for {found.score} points!',
            found_word=found,
            validation=validation,
        )

    def add_found_word(self, text: str, positions: List[Position]) -> FoundWord:
        """Record a found word and add its score."""
        found = FoundWord(text=text, positions=list(positions), score=calculate_score(text))
        self.found_words.append(found)
        self.score += found.score
        return found

    def missed_words(self) -> List[SeededWord]:
        """Seeded words the player never found."""
        found = set(self.found_texts)
        return [w for w in self.grid.seeded_words if w.text not in found]

    def summary(self) -> str:
        """End-of-game report: score, found words and the seeded words left on the board."""
        lines = [
            f"Score: {self.score}",
            f"Words found: {', '.join(self.found_texts) or '(none)'}",
        ]
        missed = self.missed_words()
        if missed:
            lines.append(f"Missed: {', '.join(w.text for w in missed)}")
        return "\n".join(lines)

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Useful for serialization and logging.

        Returns:
            Dictionary containing session state
        """
        return {
            "id": self.id,
            "seed": self.seed,
            "grid_size": self.grid_size,
            "grid": render_grid(self.grid),
            "game_state": self.game_state,
            "time_remaining": self.time_remaining,
            "is_warning": self.is_warning,
            "score": self.score,
            "found_words": self.found_texts,
            "seeded_words": [w.text for w in self.grid.seeded_words],
            "missed_words": [w.text for w in self.missed_words()],
        }

    def save_result(self, path: str | Path) -> None:
        """
        Save the full session to a JSON file.

        Args:
            path: Path to save the result file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(self.model_dump(), f, indent=2, default=str)
