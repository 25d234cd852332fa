"""Validation of puzzle clues before they reach the solver."""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .constraints import CircleConstraint, ConstraintModel, GroupConstraint
from .layout import (
    CELL_INDEX_MAX,
    CELL_INDEX_MIN,
    CIRCLE_CELLS,
    CIRCLE_MAX,
    CIRCLE_MIN,
    GROUP_NAMES,
    MAX_GROUPS,
    MAX_GROUP_CELLS,
    MIN_GROUP_CELLS,
    group_sum_bounds,
)


class ClueError(ValueError):
    """A puzzle clue is out of range or malformed."""

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"{message} in parameter #{position}"
        super().__init__(message)
        self.position = position


def validate_circle(value: int, name: str, position: Optional[int] = None) -> int:
    """
    Check a circle sum.

    Args:
        value: The sum written in the circle.
        name: Circle name, e.g. "top-left".
        position: Parameter number for error messages.

    Returns:
        The validated value.
    """
    if not CIRCLE_MIN <= value <= CIRCLE_MAX:
        raise ClueError(
            f"Bad {name} circle value '{value}'; must be from {CIRCLE_MIN} .. {CIRCLE_MAX}",
            position,
        )
    return value


def validate_group(
    total: int,
    cells: Sequence[int],
    name: str,
    position: Optional[int] = None,
) -> GroupConstraint:
    """
    Check a color group given with 1-indexed cells and build it.

    Sum bounds depend on the group size: a group of n cells must add up
    to at least 1+..+n and at most the sum of the n largest digits.

    Args:
        total: Required sum.
        cells: Cell numbers 1-9.
        name: Group name for error messages.
        position: Parameter number of `total`; cells follow it.
    """
    if not MIN_GROUP_CELLS <= len(cells) <= MAX_GROUP_CELLS:
        raise ClueError(
            f"Color {name} must list {MIN_GROUP_CELLS} .. {MAX_GROUP_CELLS} squares, "
            f"got {len(cells)}",
            position,
        )

    low, high = group_sum_bounds(len(cells))
    if not low <= total <= high:
        raise ClueError(
            f"Bad color {name} sum '{total}'; must be from {low} .. {high}",
            position,
        )

    seen = set()
    for offset, cell in enumerate(cells, 1):
        where = position + offset if position is not None else None
        if not CELL_INDEX_MIN <= cell <= CELL_INDEX_MAX:
            raise ClueError(
                f"Bad square index '{cell}'; must be from {CELL_INDEX_MIN} .. {CELL_INDEX_MAX}",
                where,
            )
        if cell in seen:
            raise ClueError(f"Square index '{cell}' repeated in color {name}", where)
        seen.add(cell)

    return GroupConstraint.from_one_indexed(total, cells)


def build_model(
    circles: Sequence[int],
    groups: Sequence[Tuple[int, Sequence[int]]] = (),
    matrix_only: bool = False,
) -> ConstraintModel:
    """
    Validate raw clues and build the constraint model.

    Args:
        circles: Four circle sums: top-left, top-right, bottom-left, bottom-right.
        groups: Up to three (sum, 1-indexed cells) pairs.
        matrix_only: Ignore groups when solving.

    Returns:
        A ConstraintModel ready for the solver.

    Raises:
        ClueError: If any clue is out of range.
    """
    if len(circles) != len(CIRCLE_CELLS):
        raise ClueError(f"Expected {len(CIRCLE_CELLS)} circle values, got {len(circles)}")
    if len(groups) > MAX_GROUPS:
        raise ClueError(f"At most {MAX_GROUPS} colors allowed, got {len(groups)}")

    position = 1
    values: List[int] = []
    for name, value in zip(CIRCLE_CELLS, circles):
        values.append(validate_circle(value, name, position))
        position += 1

    built = []
    for name, (total, cells) in zip(GROUP_NAMES, groups):
        built.append(validate_group(total, cells, name, position))
        position += 1 + len(cells)

    return ConstraintModel(CircleConstraint(*values), tuple(built), matrix_only)
