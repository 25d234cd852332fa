"""Circle and group (color) constraints over a Suko grid."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .layout import (
    CIRCLE_CELLS,
    GRID_SIZE,
    GROUP_NAMES,
    MAX_GROUPS,
    MAX_GROUP_CELLS,
)


@dataclass(frozen=True)
class CircleConstraint:
    """
    The four circle sums of a Suko puzzle.

    Each circle equals the sum of the 2x2 block of cells around it
    (see `layout.CIRCLE_CELLS`).
    """
    top_left: int
    top_right: int
    bottom_left: int
    bottom_right: int

    def __post_init__(self):
        for name, required in self.sums():
            if required < 0:
                raise ValueError(f"Circle {name} sum must be non-negative, got {required}")

    def sums(self) -> Tuple[Tuple[str, int], ...]:
        """Required sums paired with their circle name, in layout order."""
        return (
            ("top-left", self.top_left),
            ("top-right", self.top_right),
            ("bottom-left", self.bottom_left),
            ("bottom-right", self.bottom_right),
        )

    def evaluate(self, grid: Sequence[int]) -> bool:
        """Check whether all four block sums of `grid` match."""
        return (
            self.top_left == grid[0] + grid[1] + grid[3] + grid[4]
            and self.top_right == grid[1] + grid[2] + grid[4] + grid[5]
            and self.bottom_left == grid[3] + grid[4] + grid[6] + grid[7]
            and self.bottom_right == grid[4] + grid[5] + grid[7] + grid[8]
        )

    def failures(self, grid: Sequence[int]) -> List[str]:
        """Names of the circles whose sum does not match `grid`."""
        return [
            name for name, required in self.sums()
            if required != sum(grid[i] for i in CIRCLE_CELLS[name])
        ]


@dataclass(frozen=True)
class GroupConstraint:
    """
    A color group: the listed cells must add up to `total`.

    `cells` holds 0-indexed positions in the order they were given.
    If `count` is set only the first `count` cells take part in the sum.
    """
    total: int
    cells: Tuple[int, ...]
    count: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "cells", tuple(int(c) for c in self.cells))
        if self.total < 0:
            raise ValueError(f"Group sum must be non-negative, got {self.total}")
        if len(self.cells) > MAX_GROUP_CELLS:
            raise ValueError(
                f"Group may hold at most {MAX_GROUP_CELLS} cells, got {len(self.cells)}"
            )
        for cell in self.cells:
            if cell < 0 or cell >= GRID_SIZE:
                raise ValueError(f"Cell index must be 0-{GRID_SIZE - 1}, got {cell}")
        if self.count is not None and not 0 <= self.count <= len(self.cells):
            raise ValueError(f"Member count must be 0-{len(self.cells)}, got {self.count}")

    @classmethod
    def from_one_indexed(cls, total: int, cells: Iterable[int]) -> GroupConstraint:
        """Build a group from cell numbers 1-9 as written on the puzzle."""
        return cls(total, tuple(int(c) - 1 for c in cells))

    @property
    def members(self) -> Tuple[int, ...]:
        """The cells that take part in the sum."""
        if self.count is None:
            return self.cells
        return self.cells[:self.count]

    def evaluate(self, grid: Sequence[int]) -> bool:
        """Check whether the member cells of `grid` add up to `total`."""
        members = self.members
        if not members:
            return True
        return self.total == sum(grid[i] for i in members)


@dataclass(frozen=True)
class ConstraintModel:
    """
    All clues of one puzzle.

    With `matrix_only` set the groups are ignored and only the circles
    decide, which lists every grid matching the basic circle pattern.
    """
    circles: CircleConstraint
    groups: Tuple[GroupConstraint, ...] = field(default_factory=tuple)
    matrix_only: bool = False

    def __post_init__(self):
        object.__setattr__(self, "groups", tuple(self.groups))
        if len(self.groups) > MAX_GROUPS:
            raise ValueError(f"At most {MAX_GROUPS} groups allowed, got {len(self.groups)}")

    def evaluate(self, grid: Sequence[int]) -> bool:
        """
        Check whether `grid` satisfies the puzzle.

        Circles are checked first, then groups in declaration order;
        evaluation stops at the first failing constraint.
        """
        if not self.circles.evaluate(grid):
            return False
        if self.matrix_only:
            return True
        return all(group.evaluate(grid) for group in self.groups)

    def failures(self, grid: Sequence[int]) -> List[str]:
        """Names of every constraint that `grid` breaks."""
        failed = self.circles.failures(grid)
        if not self.matrix_only:
            for name, group in zip(GROUP_NAMES, self.groups):
                if not group.evaluate(grid):
                    failed.append(f"group {name}")
        return failed

    def describe(self) -> str:
        """Human-readable dump of the clues, cells shown 1-indexed."""
        c = self.circles
        lines = [
            "Values for suko puzzle solution.",
            "",
            "Circle values:",
            "",
            f"  ({c.top_left:2d})  ({c.top_right:2d})",
            f"  ({c.bottom_left:2d})  ({c.bottom_right:2d})",
            "",
        ]
        if self.matrix_only:
            lines.append("Color values: ignored (matrix only)")
        for name, group in zip(GROUP_NAMES, self.groups):
            squares = ' '.join(f"{i + 1:2d}" for i in group.members)
            lines.append(f"Color {name} values: sum= {group.total:2d}, squares= {squares}")
        return '\n'.join(lines)
