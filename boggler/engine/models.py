"""Data models for the grid engine."""

from typing import List, Optional, NamedTuple, Sequence, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Position(NamedTuple):
    """A (row, col) coordinate on the grid."""
    row: int
    col: int


class GridCell(BaseModel):
    """A single lettered cell. Immutable once the grid is built."""
    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    letter: str = Field(..., min_length=1, max_length=1)

    @field_validator("letter")
    @classmethod
    def _check_letter(cls, value: str) -> str:
        if not (value.isalpha() and value.isupper()):
            raise ValueError(f"Cell letter must be an uppercase letter, got '{value}'")
        return value


class SeededWord(BaseModel):
    """A word placed on purpose during generation, with the path that spells it."""
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)
    positions: List[Position]

    @model_validator(mode='after')
    def _check_path(self) -> "SeededWord":
        if not (self.text.isalpha() and self.text.isupper()):
            raise ValueError(f"Seeded word '{self.text}' must be uppercase letters")
        if len(self.positions) != len(self.text):
            raise ValueError(
                f"Seeded word '{self.text}' has {len(self.positions)} positions "
                f"for {len(self.text)} letters"
            )
        if len(set(self.positions)) != len(self.positions):
            raise ValueError(f"Seeded word '{self.text}' reuses a cell")
        for a, b in zip(self.positions, self.positions[1:]):
            if max(abs(a.row - b.row), abs(a.col - b.col)) != 1:
                raise ValueError(f"Seeded word '{self.text}' steps from {tuple(a)} to {tuple(b)}")
        return self


class Grid(BaseModel):
    """A size x size letter grid plus the words seeded into it."""
    model_config = ConfigDict(frozen=True)

    size: int = Field(..., ge=1)
    cells: List[List[GridCell]]
    seeded_words: List[SeededWord] = Field(default_factory=list)
    seed: Optional[int] = None

    @model_validator(mode='after')
    def _check_shape(self) -> "Grid":
        if len(self.cells) != self.size:
            raise ValueError(f"Grid of size {self.size} has {len(self.cells)} rows")
        for r, row in enumerate(self.cells):
            if len(row) != self.size:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {self.size}")
            for c, cell in enumerate(row):
                if cell.row != r or cell.col != c:
                    raise ValueError(
                        f"Cell at [{r}][{c}] reports position ({cell.row}, {cell.col})"
                    )
        return self

    def letters(self) -> List[List[str]]:
        """Return the letter matrix."""
        return [[cell.letter for cell in row] for row in self.cells]

    @classmethod
    def from_letters(
        cls,
        rows: Sequence[Union[str, Sequence[str]]],
        seeded_words: Optional[List[SeededWord]] = None,
        seed: Optional[int] = None,
    ) -> "Grid":
        """Build a grid from rows of letters, e.g. ``["CAT", "DOG", "XYZ"]``."""
        cells = [
            [GridCell(row=r, col=c, letter=letter.upper()) for c, letter in enumerate(row)]
            for r, row in enumerate(rows)
        ]
        return cls(size=len(cells), cells=cells, seeded_words=seeded_words or [], seed=seed)


class ValidationResult(BaseModel):
    """Outcome of a word submission. Rejections are values, not exceptions."""
    is_valid: bool
    word: Optional[str] = None
    error: Optional[str] = None
    code: Optional[str] = None  # TOO_SHORT, NOT_ADJACENT, INVALID_POSITION, ALREADY_FOUND, NOT_IN_DICTIONARY
