"""Core module for Suko grid representation, constraints and validation."""

from .grid import SukoGrid
from .constraints import CircleConstraint, GroupConstraint, ConstraintModel
from .validator import ClueError, build_model

__all__ = [
    "SukoGrid",
    "CircleConstraint",
    "GroupConstraint",
    "ConstraintModel",
    "ClueError",
    "build_model",
]
