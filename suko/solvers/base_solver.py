"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple
import time
import tracemalloc

from ..core.constraints import ConstraintModel
from ..core.grid import SukoGrid
from ..dataset import CandidateDataset


class SearchPolicy(Enum):
    """How many matches `BaseSolver.solve` collects."""
    FIRST = "first"  # single-answer mode
    ALL = "all"      # enumerate every match


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0

    # Search metrics
    candidates_checked: int = 0
    matches: int = 0

    # Additional metadata
    algorithm: str = ""
    policy: str = SearchPolicy.ALL.value
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "candidates_checked": self.candidates_checked,
            "matches": self.matches,
            "algorithm": self.algorithm,
            "policy": self.policy,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Abstract base class for Suko search engines.

    A solver scans a fixed candidate dataset and reports every grid that
    satisfies a ConstraintModel, in dataset order.
    """

    name: str = "BaseSolver"

    def __init__(
        self,
        dataset: Optional[CandidateDataset] = None,
        policy: SearchPolicy = SearchPolicy.ALL,
        track_memory: bool = False,
    ):
        """
        Initialize the solver.

        Args:
            dataset: Candidate grids to scan (default: all permutations of 1-9).
            policy: Stop at the first match or collect all of them.
            track_memory: Record peak memory with tracemalloc during `solve`.
        """
        self.dataset = dataset if dataset is not None else CandidateDataset.default()
        self.policy = policy
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name, policy=policy.value)

    def iter_solutions(self, model: ConstraintModel) -> Iterator[SukoGrid]:
        """
        Lazily yield every candidate satisfying `model`.

        The sequence is finite and can be restarted by calling this again;
        each call scans the dataset from the beginning.
        """
        self.stats.candidates_checked = 0
        return self._iter_matches(model)

    def solve(
        self,
        model: ConstraintModel,
        policy: Optional[SearchPolicy] = None,
    ) -> Tuple[List[SukoGrid], SolverStats]:
        """
        Search the dataset with timing.

        Args:
            model: The puzzle clues.
            policy: Overrides the solver's policy for this call.

        Returns:
            Tuple of (matching grids in dataset order, stats). An empty
            list means the puzzle has no solution in the dataset.
        """
        policy = policy or self.policy
        self.stats = SolverStats(algorithm=self.name, policy=policy.value)

        started_tracing = self.track_memory and not tracemalloc.is_tracing()
        if started_tracing:
            tracemalloc.start()

        start_time = time.perf_counter()

        solutions: List[SukoGrid] = []
        for grid in self.iter_solutions(model):
            solutions.append(grid)
            if policy is SearchPolicy.FIRST:
                break

        self.stats.time_seconds = time.perf_counter() - start_time

        if self.track_memory:
            current, peak = tracemalloc.get_traced_memory()
            if started_tracing:
                tracemalloc.stop()
            self.stats.memory_bytes = peak

        self.stats.matches = len(solutions)
        self.stats.solved = bool(solutions)
        return solutions, self.stats

    @abstractmethod
    def _iter_matches(self, model: ConstraintModel) -> Iterator[SukoGrid]:
        """
        Yield matching grids in dataset order.

        Implementations should update `self.stats.candidates_checked`.
        """
        pass
