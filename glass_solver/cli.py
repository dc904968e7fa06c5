"""
Command line interface.

Usage:
    glass-solver solve demo
    glass-solver solve my-window.in.txt --svg solution.svg --verbose
    glass-solver demo pinwheel
    glass-solver list
    glass-solver random 6 3 --seed 7 --save random.in.txt
"""

import argparse
from pathlib import Path

from . import config
from .geometry import InvalidPuzzleError, Triangle
from .puzzle_io import PuzzleFormatError, read_puzzle, resolve_puzzle_path, save_puzzle
from .puzzles import ALL_PUZZLES, get_puzzle, random_puzzle
from .solver import solve
from .viz import display_solution, render_svg

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_INVALID = 2


def run_solver(triangles: list[Triangle], svg: Path | None = None,
               verbose: bool = False, show_sides: bool = False) -> int:
    """Solve, print the order and optionally render it. Returns an exit code."""
    try:
        solution = solve(triangles, verbose=verbose)
    except InvalidPuzzleError as e:
        print(f"Invalid puzzle: {e}")
        return EXIT_INVALID

    if solution is None:
        print(config.NO_SOLUTION_MESSAGE)
        return EXIT_NO_SOLUTION

    display_solution(solution, show_sides=show_sides)
    if svg is not None:
        print(f"SVG saved to: {render_svg(solution, str(svg))}")
    return EXIT_OK


def cmd_solve(args) -> int:
    path = resolve_puzzle_path(args.path)
    try:
        triangles = read_puzzle(path)
    except OSError:
        print(f"Invalid file: {path}")
        return EXIT_INVALID
    except (PuzzleFormatError, InvalidPuzzleError) as e:
        print(f"Invalid puzzle file {path}: {e}")
        return EXIT_INVALID
    print(f"Loaded {len(triangles)} triangles from {path}")
    return run_solver(triangles, args.svg, args.verbose, args.sides)


def cmd_demo(args) -> int:
    try:
        triangles = get_puzzle(args.name)
    except ValueError as e:
        print(e)
        return EXIT_INVALID
    print(f"Solving demo {args.name!r} ({len(triangles)} triangles)")
    return run_solver(triangles, args.svg, args.verbose, args.sides)


def cmd_list(args) -> int:
    for name, triangles in ALL_PUZZLES.items():
        print(f"{name:16} {len(triangles):3d} triangles")
    return EXIT_OK


def cmd_random(args) -> int:
    triangles = random_puzzle(args.width, args.height, seed=args.seed)
    if args.save is not None:
        print(f"Saved {len(triangles)} triangles to {save_puzzle(args.save, triangles)}")
    return run_solver(triangles, args.svg, args.verbose, args.sides)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glass-solver",
        description="Find an order to drop triangular glass shards back into a window",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_output_options(sub):
        sub.add_argument("--svg", type=Path, default=None, help="Write the solution as SVG")
        sub.add_argument("--verbose", action="store_true", help="Print every insertion step")
        sub.add_argument("--sides", action="store_true", help="Print each triangle's sides")

    solve_parser = subparsers.add_parser("solve", help="Solve a puzzle file")
    solve_parser.add_argument("path", help='Puzzle file, or "demo" for the bundled demo')
    add_output_options(solve_parser)
    solve_parser.set_defaults(func=cmd_solve)

    demo_parser = subparsers.add_parser("demo", help="Solve a built-in puzzle")
    demo_parser.add_argument("name", nargs="?", default="shattered-glass",
                             choices=sorted(ALL_PUZZLES), help="Built-in puzzle name")
    add_output_options(demo_parser)
    demo_parser.set_defaults(func=cmd_demo)

    list_parser = subparsers.add_parser("list", help="List built-in puzzles")
    list_parser.set_defaults(func=cmd_list)

    random_parser = subparsers.add_parser("random", help="Generate and solve a random grid puzzle")
    random_parser.add_argument("width", type=int, help="Number of cell columns")
    random_parser.add_argument("height", type=int, help="Number of cell rows")
    random_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    random_parser.add_argument("--save", type=Path, default=None, help="Save the puzzle to a file")
    add_output_options(random_parser)
    random_parser.set_defaults(func=cmd_random)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
