"""Suko grid representation."""

from __future__ import annotations
import numpy as np
from typing import Iterable, Iterator, Tuple

from .layout import GRID_SIZE, GRID_WIDTH, LINE_WIDTH


class SukoGrid:
    """
    A fully filled 3x3 Suko grid.

    Values are held in row-major order, positions 0-8. The grid is
    immutable; it is used as a read-only candidate during the search.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int]):
        """
        Initialize a grid.

        Args:
            values: Nine cell values in row-major order.
        """
        values = tuple(int(v) for v in values)
        if len(values) != GRID_SIZE:
            raise ValueError(f"Grid must have {GRID_SIZE} values, got {len(values)}")
        self._values = values

    @property
    def values(self) -> Tuple[int, ...]:
        return self._values

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return GRID_SIZE

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col)."""
        return self._values[row * GRID_WIDTH + col]

    def get_row(self, row: int) -> Tuple[int, ...]:
        """Get all values in a row."""
        start = row * GRID_WIDTH
        return self._values[start:start + GRID_WIDTH]

    def is_permutation(self) -> bool:
        """Check that the grid holds each digit 1-9 exactly once."""
        return sorted(self._values) == list(range(1, GRID_SIZE + 1))

    def to_string(self) -> str:
        """Convert grid to a compact 9-character string."""
        return ''.join(str(v) for v in self._values)

    @classmethod
    def from_string(cls, s: str) -> SukoGrid:
        """
        Create a grid from a string of digits.

        Whitespace, commas and '|' separators are ignored, so both
        "873942651" and "8 7 3 | 9 4 2 | 6 5 1" are accepted.
        """
        digits = [c for c in s if c not in " \t\n,|"]
        if len(digits) != GRID_SIZE or not all(c.isdigit() for c in digits):
            raise ValueError(f"Grid string must hold {GRID_SIZE} digits, got {s!r}")
        return cls(int(c) for c in digits)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> SukoGrid:
        """Create a grid from a numpy row of the candidate table."""
        return cls(arr.tolist())

    def format(self, width: int = GRID_WIDTH) -> str:
        """
        Render the grid as space-separated rows.

        Args:
            width: 3 for a 3x3 block, 9 for a single line. Any other
                   value falls back to the 3x3 block.
        """
        if width not in (GRID_WIDTH, LINE_WIDTH):
            width = GRID_WIDTH
        rows = [self._values[i:i + width] for i in range(0, GRID_SIZE, width)]
        return '\n'.join(' '.join(str(v) for v in row) for row in rows)

    def __str__(self) -> str:
        return self.format(GRID_WIDTH)

    def __repr__(self) -> str:
        return f"SukoGrid('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SukoGrid):
            return False
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)
