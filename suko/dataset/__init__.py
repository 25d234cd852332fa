"""Dataset module holding the candidate grids scanned by the solvers."""

from .candidates import CandidateDataset

__all__ = ["CandidateDataset"]
