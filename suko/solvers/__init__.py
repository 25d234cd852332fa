"""Solvers module for Suko puzzles."""

from .base_solver import BaseSolver, SolverStats, SearchPolicy
from .scan_solver import ScanSolver
from .vectorized_solver import VectorizedSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SearchPolicy",
    "ScanSolver",
    "VectorizedSolver",
]
