"""Whole-table constraint check with numpy."""

from __future__ import annotations
from typing import Iterator

import numpy as np

from .base_solver import BaseSolver
from ..core.constraints import ConstraintModel
from ..core.grid import SukoGrid
from ..core.layout import CIRCLE_CELLS


class VectorizedSolver(BaseSolver):
    """
    Evaluates every constraint against the whole candidate table at once.

    Produces the same matches in the same order as ScanSolver; the boolean
    mask is computed up front and matches are yielded lazily from it.
    """

    name = "Vectorized"

    def match_mask(self, model: ConstraintModel) -> np.ndarray:
        """Boolean array with one entry per candidate, True where it matches."""
        table = self.dataset.array
        mask = np.ones(len(self.dataset), dtype=bool)

        for name, required in model.circles.sums():
            mask &= table[:, list(CIRCLE_CELLS[name])].sum(axis=1) == required

        if not model.matrix_only:
            for group in model.groups:
                members = list(group.members)
                if not members:
                    continue
                mask &= table[:, members].sum(axis=1) == group.total

        return mask

    def _iter_matches(self, model: ConstraintModel) -> Iterator[SukoGrid]:
        mask = self.match_mask(model)
        self.stats.candidates_checked = len(self.dataset)
        for index in np.flatnonzero(mask):
            yield self.dataset.grid(int(index))
