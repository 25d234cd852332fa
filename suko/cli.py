"""Command-line interface for the Suko solver."""

import argparse
import json
import sys
from typing import List, Optional, Sequence, Tuple

from . import __version__
from .core.constraints import ConstraintModel
from .core.grid import SukoGrid
from .core.layout import CIRCLE_CELLS, CLASSIC_GROUP_SIZES, GRID_WIDTH, LINE_WIDTH
from .core.validator import ClueError, build_model
from .dataset import CandidateDataset
from .solvers import ScanSolver, SearchPolicy, VectorizedSolver


EXIT_FOUND = 0
EXIT_NOT_FOUND = 1

CLUE_SYNTAX = "tl tr bl br  [a a1 a2 a3 a4  [b b1 b2 b3  [c c1 c2]]]"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="suko",
        description="Suko puzzle solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Clues are the four circle values (top-left, top-right, bottom-left,
bottom-right) followed by up to three colors. Each color is its sum and
the squares that add up to it, numbered 1-9 from the top-left corner:
four squares for the first color, three for the second, two for the third.

Examples:
  # Solve a puzzle
  suko solve 28 16 24 12  13 2 3 6 9  21 1 4 5  11 7 8

  # List every grid matching the circles only, one per line
  suko solve -M -l 28 16 24 12

  # Check a grid against the clues
  suko check 873942651 28 16 24 12  13 2 3 6 9  21 1 4 5  11 7 8
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser(
        "solve", help="Find every grid satisfying the clues",
        usage=f"%(prog)s [flags] {CLUE_SYNTAX}",
    )
    width = solve_parser.add_mutually_exclusive_group()
    width.add_argument(
        "--grid", "-g", dest="width", action="store_const", const=GRID_WIDTH,
        help="Write output as a 3x3 grid (default)"
    )
    width.add_argument(
        "--line", "-l", dest="width", action="store_const", const=LINE_WIDTH,
        help="Write output in a line"
    )
    solve_parser.set_defaults(width=GRID_WIDTH)
    solve_parser.add_argument(
        "--first", "-1", action="store_true",
        help="Stop at the first matching grid"
    )
    solve_parser.add_argument(
        "--algorithm", "-a", choices=["scan", "vectorized"], default="vectorized",
        help="Search engine to use (default: vectorized)"
    )
    solve_parser.add_argument(
        "--dataset", type=str, default=None,
        help="Candidate table to scan (.npy, or text with one grid per line); "
             "default: all permutations of 1-9"
    )
    solve_parser.add_argument(
        "--json", action="store_true",
        help="Print matches and statistics as JSON"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show puzzle input parameters and search statistics on stderr"
    )
    _add_clue_arguments(solve_parser)

    # Check command
    check_parser = subparsers.add_parser(
        "check", help="Check one grid against the clues",
        usage=f"%(prog)s [flags] grid {CLUE_SYNTAX}",
    )
    check_parser.add_argument(
        "grid", type=str,
        help="Grid as 9 digits in row-major order, e.g. 873942651"
    )
    _add_clue_arguments(check_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_NOT_FOUND

    if args.command == "solve":
        return cmd_solve(args, solve_parser)
    elif args.command == "check":
        return cmd_check(args, check_parser)


def _add_clue_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "clues", type=int, nargs="*", metavar="N",
        help="Circle values, then colors as: sum square square ..."
    )
    parser.add_argument(
        "--group", "-c", action="append", default=[], metavar="SUM:SQUARES",
        help="Add a color of any size, e.g. 13:2,3,6,9 (repeatable)"
    )
    parser.add_argument(
        "--matrix-only", "-M", action="store_true",
        help="Ignore colors; list every grid matching the four circles"
    )


def parse_clues(
    values: Sequence[int],
    group_specs: Sequence[str] = (),
) -> Tuple[List[int], List[Tuple[int, List[int]]]]:
    """
    Split positional clue values into circles and colors.

    Positional colors follow the classic layout of 4, 3 and 2 squares.
    Colors given as "SUM:SQUARES" strings are appended after them.

    Returns:
        Tuple of (circle values, [(sum, squares), ...]).

    Raises:
        ClueError: If the values do not fit the layout.
    """
    circle_count = len(CIRCLE_CELLS)
    if len(values) < circle_count:
        raise ClueError(
            f"Too few parameters ({len(values)}) to solve puzzle ({circle_count} needed)"
        )

    circles = list(values[:circle_count])
    rest = list(values[circle_count:])
    groups = []
    for size in CLASSIC_GROUP_SIZES:
        if not rest:
            break
        if len(rest) < 1 + size:
            raise ClueError(
                f"Color #{len(groups) + 1} needs a sum and {size} squares, "
                f"got {len(rest)} value(s)"
            )
        groups.append((rest[0], rest[1:1 + size]))
        rest = rest[1 + size:]
    if rest:
        raise ClueError(f"Too many parameters; {len(rest)} value(s) left over")

    for spec in group_specs:
        total, sep, squares = spec.partition(":")
        try:
            if not sep:
                raise ValueError
            groups.append((int(total), [int(s) for s in squares.split(",") if s.strip()]))
        except ValueError:
            raise ClueError(f"Bad color '{spec}'; expected SUM:SQUARES, e.g. 13:2,3,6,9") from None

    return circles, groups


def _model_from_args(args, parser: argparse.ArgumentParser) -> ConstraintModel:
    try:
        circles, groups = parse_clues(args.clues, args.group)
        return build_model(circles, groups, matrix_only=args.matrix_only)
    except ClueError as e:
        parser.error(str(e))


def cmd_solve(args, parser: argparse.ArgumentParser) -> int:
    """Handle the solve command."""
    model = _model_from_args(args, parser)

    if args.dataset:
        try:
            dataset = CandidateDataset.load(args.dataset)
        except (OSError, ValueError) as e:
            parser.error(f"Error loading dataset: {e}")
    else:
        dataset = CandidateDataset.default()

    policy = SearchPolicy.FIRST if args.first else SearchPolicy.ALL
    if args.algorithm == "scan":
        solver = ScanSolver(dataset, policy, show_progress=args.verbose)
    else:
        solver = VectorizedSolver(dataset, policy)

    if args.verbose:
        print(model.describe(), file=sys.stderr)
        print(f"\nScanning {len(dataset):,} candidates from {dataset.source}...\n",
              file=sys.stderr)

    solutions, stats = solver.solve(model)

    if args.json:
        print(json.dumps({
            "solutions": [grid.to_string() for grid in solutions],
            "stats": stats.to_dict(),
        }, indent=2))
    else:
        for i, grid in enumerate(solutions):
            if i and args.width == GRID_WIDTH:
                print()
            print(grid.format(args.width))

    if args.verbose:
        mark = "✓" if stats.solved else "✗"
        print(f"\n{mark} {stats.matches} solution(s) found with {solver.name} "
              f"in {stats.time_seconds:.4f}s", file=sys.stderr)
        print(f"  Candidates checked: {stats.candidates_checked:,}", file=sys.stderr)

    return EXIT_FOUND if solutions else EXIT_NOT_FOUND


def cmd_check(args, parser: argparse.ArgumentParser) -> int:
    """Handle the check command."""
    model = _model_from_args(args, parser)

    try:
        grid = SukoGrid.from_string(args.grid)
    except ValueError as e:
        parser.error(f"Error parsing grid: {e}")

    print(grid)
    print()

    failures = model.failures(grid)
    if not grid.is_permutation():
        failures.insert(0, "digits 1-9 used once")

    if failures:
        print(f"✗ Not a solution; broken: {', '.join(failures)}")
        return EXIT_NOT_FOUND
    print("✓ Grid satisfies all clues")
    return EXIT_FOUND


if __name__ == "__main__":
    sys.exit(main())
