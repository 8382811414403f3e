"""Grid building, lookup and rendering utilities."""

from typing import Callable, List, Optional, Sequence

from .models import Grid, GridCell, Position, SeededWord


# King moves, row-major
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def create_grid(size: int, letter_source: Callable[[], str]) -> List[List[str]]:
    """Allocate a size x size letter matrix, filled row by row from letter_source."""
    if size < 1:
        raise ValueError(f"Grid size must be a positive integer, got {size}")
    return [[letter_source() for _ in range(size)] for _ in range(size)]


def build_grid(letters: List[List[str]], seeded_words: List[SeededWord], seed: Optional[int] = None) -> Grid:
    """Freeze a working letter matrix into a Grid."""
    cells = [
        [GridCell(row=r, col=c, letter=letter) for c, letter in enumerate(row)]
        for r, row in enumerate(letters)
    ]
    return Grid(size=len(letters), cells=cells, seeded_words=seeded_words, seed=seed)


def in_bounds(position: Position, size: int) -> bool:
    return 0 <= position.row < size and 0 <= position.col < size


def get_cell_at(grid: Grid, position: Position) -> GridCell:
    """
    Look up a cell.

    Raises:
        IndexError: If the position is outside the grid
    """
    row, col = position
    if row < 0 or row >= grid.size or col < 0 or col >= grid.size:
        raise IndexError(f"Position ({row}, {col}) is out of bounds for grid size {grid.size}")
    return grid.cells[row][col]


def are_adjacent(a: Position, b: Position) -> bool:
    """True when b is one king move from a. A cell is never adjacent to itself."""
    row_diff = abs(a[0] - b[0])
    col_diff = abs(a[1] - b[1])
    if row_diff == 0 and col_diff == 0:
        return False
    return row_diff <= 1 and col_diff <= 1


def neighbors(position: Position, size: int) -> List[Position]:
    """In-bounds king-move neighbours of a position."""
    result = []
    for dr, dc in DIRECTIONS:
        candidate = Position(position[0] + dr, position[1] + dc)
        if in_bounds(candidate, size):
            result.append(candidate)
    return result


def read_path(grid: Grid, positions: Sequence[Position]) -> str:
    """Concatenate the letters along a path. Raises IndexError on out-of-bounds positions."""
    return ''.join(get_cell_at(grid, p).letter for p in positions)


def render_grid(grid: Grid) -> str:
    """Render the grid to a string."""
    return '\n'.join(' '.join(cell.letter for cell in row) for row in grid.cells)
