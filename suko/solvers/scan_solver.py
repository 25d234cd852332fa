"""Exhaustive candidate scan, one grid at a time."""

from __future__ import annotations
from typing import Iterator, Optional

from tqdm import tqdm

from .base_solver import BaseSolver, SearchPolicy
from ..core.constraints import ConstraintModel
from ..core.grid import SukoGrid
from ..dataset import CandidateDataset


class ScanSolver(BaseSolver):
    """
    Brute-force solver.

    Walks the candidate table in order and evaluates the constraint model
    on each grid. Circles are checked first since they reject almost
    every candidate.
    """

    name = "Scan"

    def __init__(
        self,
        dataset: Optional[CandidateDataset] = None,
        policy: SearchPolicy = SearchPolicy.ALL,
        track_memory: bool = False,
        show_progress: bool = False,
    ):
        """
        Initialize the scan solver.

        Args:
            show_progress: Show a tqdm progress bar while scanning.
        """
        super().__init__(dataset, policy, track_memory)
        self.show_progress = show_progress

    def _iter_matches(self, model: ConstraintModel) -> Iterator[SukoGrid]:
        rows = tqdm(
            self.dataset.rows(),
            total=len(self.dataset),
            desc="Scanning",
            disable=not self.show_progress,
        )
        try:
            for row in rows:
                self.stats.candidates_checked += 1
                if model.evaluate(row):
                    yield SukoGrid(row)
        finally:
            rows.close()
