"""Fixed layout constants for the 3x3 Suko grid."""

from typing import Dict, Tuple

# Cells are numbered 0-8 in row-major order:
#
#   0 1 2
#   3 4 5
#   6 7 8
GRID_SIZE = 9
GRID_WIDTH = 3
LINE_WIDTH = GRID_SIZE

DIGITS = tuple(range(1, GRID_SIZE + 1))

# Each circle sits on the corner shared by four cells.
CIRCLE_CELLS: Dict[str, Tuple[int, int, int, int]] = {
    "top-left": (0, 1, 3, 4),
    "top-right": (1, 2, 4, 5),
    "bottom-left": (3, 4, 6, 7),
    "bottom-right": (4, 5, 7, 8),
}

MAX_GROUPS = 3
MIN_GROUP_CELLS = 2
MAX_GROUP_CELLS = GRID_SIZE

# Group names used when reporting, in declaration order.
GROUP_NAMES = ("a", "b", "c")

# Cell counts of the three colors in the classic puzzle layout.
CLASSIC_GROUP_SIZES = (4, 3, 2)

CIRCLE_MIN = 10
CIRCLE_MAX = 30

CELL_INDEX_MIN = 1
CELL_INDEX_MAX = 9


def group_sum_bounds(cells: int) -> Tuple[int, int]:
    """
    Smallest and largest sums reachable by `cells` distinct digits.

    For the classic 4/3/2 layout this gives 10..30, 6..24 and 3..17.
    """
    if cells < 0 or cells > GRID_SIZE:
        raise ValueError(f"Group size must be 0-{GRID_SIZE}, got {cells}")
    low = sum(DIGITS[:cells])
    high = sum(DIGITS[GRID_SIZE - cells:])
    return low, high
