"""Path parsing utilities for typed submissions."""

import re
from typing import List

from .models import Position


_CELL = re.compile(r'\(?\s*(-?\d+)\s*,\s*(-?\d+)\s*\)?')
_SEPARATOR = re.compile(r'\s*(?:->|;|\s)\s*')


def parse_path(text: str) -> List[Position]:
    """
    Parse a typed path into positions.

    Accepts "0,0 0,1 1,2", "(0,0)->(0,1)->(1,2)" or "0,0; 0,1; 1,2".
    Only the syntax is checked here; bounds and adjacency are left to the validator.

    Raises:
        ValueError: If a token is not a row,col pair
    """
    text = text.strip()
    if not text:
        raise ValueError("Empty path")

    # Normalise "( 0 , 1 )" to "(0,1)" so whitespace only separates cells
    compact = re.sub(r'\s*,\s*', ',', text)
    compact = re.sub(r'\(\s*', '(', compact)
    compact = re.sub(r'\s*\)', ')', compact)

    positions: List[Position] = []
    for token in _SEPARATOR.split(compact):
        if not token:
            continue
        match = _CELL.fullmatch(token)
        if not match:
            raise ValueError(f"Invalid cell '{token}': expected row,col")
        positions.append(Position(int(match.group(1)), int(match.group(2))))
    return positions
