"""
glass_solver - reassemble a shattered window by dropping shards in from above

Core components:
- Point, Edge, Triangle: window geometry
- BoundaryLines: exposed surface of the shards placed so far
- does_not_block: obstruction test for a candidate shard
- solve: insertion-order solver
"""

from .geometry import Point, Edge, Triangle, PuzzleBorder, InvalidPuzzleError, find_puzzle_border, validate_triangles
from .boundary import BoundaryLines, exposed_edges
from .obstruction import is_concave, define_obstructed_line, does_not_block
from .solver import SolverState, Insertion, find_starting_triangles, iter_solve, solve, solve_puzzle
from .puzzle_io import PuzzleFormatError, parse_puzzle, read_puzzle, format_puzzle, save_puzzle
from .puzzles import ALL_PUZZLES, get_puzzle, grid_puzzle, random_puzzle
from .viz import display_solution, render_svg
