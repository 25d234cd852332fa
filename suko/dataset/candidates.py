"""Read-only table of candidate Suko grids."""

from __future__ import annotations
import itertools
import os
from functools import lru_cache
from typing import Iterator, Union

import numpy as np

from ..core.grid import SukoGrid
from ..core.layout import DIGITS, GRID_SIZE


@lru_cache(maxsize=1)
def _all_permutations() -> np.ndarray:
    table = np.array(list(itertools.permutations(DIGITS)), dtype=np.int8)
    table.setflags(write=False)
    return table


class CandidateDataset:
    """
    An ordered, read-only collection of candidate grids.

    The table is an (N, 9) integer array, one grid per row in row-major
    cell order. Solvers scan it in row order and never modify it.
    """

    CHUNK = 4096

    def __init__(self, table: np.ndarray, source: str = "<memory>"):
        """
        Initialize the dataset.

        Args:
            table: Array of shape (N, 9).
            source: Where the table came from, for display.
        """
        table = np.asarray(table)
        if table.ndim != 2 or table.shape[1] != GRID_SIZE:
            raise ValueError(f"Candidate table must have shape (N, {GRID_SIZE}), got {table.shape}")
        if table.flags.writeable:
            table = table.astype(np.int8, copy=True)
            table.setflags(write=False)
        self._table = table
        self.source = source

    @classmethod
    def default(cls) -> CandidateDataset:
        """All permutations of 1-9 in lexicographic order, built once per process."""
        return cls(_all_permutations(), source="permutations")

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> CandidateDataset:
        """
        Load a candidate table from disk.

        `.npy` files are read with numpy. Any other file is read as text,
        one grid per line; blank lines and lines starting with '#' are
        skipped, separators between digits are ignored.
        """
        path = os.fspath(path)
        if path.endswith(".npy"):
            table = np.load(path, allow_pickle=False)
        else:
            rows = []
            with open(path) as f:
                for lineno, line in enumerate(f, 1):
                    line = line.strip()
                    if not line or line.startswith("#"):
                        continue
                    try:
                        rows.append(SukoGrid.from_string(line).values)
                    except ValueError as e:
                        raise ValueError(f"{path}:{lineno}: {e}") from e
            table = np.array(rows, dtype=np.int8).reshape(-1, GRID_SIZE)
        return cls(table, source=path)

    @property
    def array(self) -> np.ndarray:
        """The underlying read-only table."""
        return self._table

    def grid(self, index: int) -> SukoGrid:
        """Get the candidate at row `index`."""
        return SukoGrid.from_array(self._table[index])

    def rows(self) -> Iterator[tuple]:
        """Iterate over candidates as plain int tuples, in table order."""
        for start in range(0, len(self), self.CHUNK):
            for row in self._table[start:start + self.CHUNK].tolist():
                yield tuple(row)

    def __iter__(self) -> Iterator[SukoGrid]:
        for row in self.rows():
            yield SukoGrid(row)

    def __len__(self) -> int:
        return int(self._table.shape[0])

    def __repr__(self) -> str:
        return f"CandidateDataset(source={self.source!r}, grids={len(self)})"
