"""
Insertion-order solver for a shattered glass window.

Strategy:
- Find the starting triangles: those resting on the bottom border that are
  concave with respect to it. Their exposed sides seed the boundary lines.
- Repeatedly scan boundary lines (outer), remaining triangles (middle) and
  each triangle's sides (inner). The first side that matches a boundary line
  and does not block a later triangle is inserted next.
- Stop when the boundary lines run out. If triangles are left over, or no
  insertion exists while boundary lines remain, the puzzle has no solution.

The procedure is greedy: an insertion is never undone.
"""

from collections import Counter
from dataclasses import dataclass, field

from .boundary import BoundaryLines, exposed_edges
from .geometry import Edge, PuzzleBorder, Triangle, find_puzzle_border, validate_triangles
from .obstruction import does_not_block, is_concave


@dataclass(frozen=True)
class Insertion:
    """A chosen (boundary line, triangle, side) triple."""
    line_index: int       # Position in boundary lines
    triangle_index: int   # Position in remaining triangles
    side_index: int       # Which of the triangle's sides touches the line
    contact_line: Edge
    obstructed_line: Edge | None = None  # Covered line of a safe overhang


@dataclass
class SolverState:
    """Everything a single solve owns: border, remaining, solution, boundary lines."""
    border: PuzzleBorder
    remaining: list[Triangle]
    solution: list[Triangle] = field(default_factory=list)
    boundary_lines: BoundaryLines = None

    def __post_init__(self):
        if self.boundary_lines is None:
            self.boundary_lines = BoundaryLines(self.border)

    @classmethod
    def start(cls, triangles: list[Triangle]) -> "SolverState":
        """Validate the input, find the border and place the starting triangles."""
        validate_triangles(triangles)
        state = cls(border=find_puzzle_border(triangles), remaining=list(triangles))
        find_starting_triangles(state)
        return state

    def copy(self) -> "SolverState":
        return SolverState(
            border=self.border,
            remaining=list(self.remaining),
            solution=list(self.solution),
            boundary_lines=self.boundary_lines.copy(),
        )

    @property
    def total(self) -> int:
        return len(self.solution) + len(self.remaining)

    def is_solved(self) -> bool:
        """True if every triangle is placed and nothing is left exposed."""
        return not self.remaining and not self.boundary_lines

    def is_consistent(self) -> bool:
        """True if the boundary lines are exactly the exposed sides of the solution."""
        return exposed_edges(self.solution, self.border) == Counter(self.boundary_lines)

    def step(self) -> Triangle | None:
        """Insert the next triangle. Returns it, or None if nothing fits."""
        insertion = find_next_insertion(self)
        if insertion is None:
            return None
        return apply_insertion(self, insertion)


def find_starting_triangles(state: SolverState) -> list[Triangle]:
    """Move concave triangles lying on the bottom border into the solution.

    Scans in input order. Returns the starting triangles found.
    """
    starters = []
    for triangle in list(state.remaining):
        for side in triangle.sides:
            if not state.border.is_on_bottom(side):
                continue
            concave, _ = is_concave(triangle, side)
            if concave:
                starters.append(triangle)
                break

    for triangle in starters:
        state.solution.append(triangle)
        for side in triangle.sides:
            state.boundary_lines.add_if_interior(side)
        state.remaining.remove(triangle)

    # Two starters can share a side.
    state.boundary_lines.cancel_duplicates()
    return starters


def find_next_insertion(state: SolverState) -> Insertion | None:
    """Find the first safe (boundary line, triangle, side) triple in scan order."""
    for line_index, boundary_line in enumerate(state.boundary_lines):
        for triangle_index, triangle in enumerate(state.remaining):
            for side_index, side in enumerate(triangle.sides):
                if side != boundary_line:
                    continue
                safe, obstructed_line = does_not_block(state.boundary_lines, triangle, side)
                if safe:
                    return Insertion(
                        line_index=line_index,
                        triangle_index=triangle_index,
                        side_index=side_index,
                        contact_line=boundary_line,
                        obstructed_line=obstructed_line,
                    )
    return None


def apply_insertion(state: SolverState, insertion: Insertion) -> Triangle:
    """Commit an insertion (mutates state). Returns the inserted triangle."""
    triangle = state.remaining[insertion.triangle_index]
    boundary_lines = state.boundary_lines

    # The contact line is now covered.
    boundary_lines.remove_at(insertion.line_index)

    for side in triangle.other_sides(insertion.side_index):
        if side == insertion.obstructed_line:
            continue
        boundary_lines.add_if_interior(side)

    # A safe overhang also rests on the obstructed line.
    if insertion.obstructed_line is not None:
        boundary_lines.remove_match(insertion.obstructed_line)

    boundary_lines.cancel_duplicates()

    state.solution.append(triangle)
    del state.remaining[insertion.triangle_index]
    return triangle


def iter_solve(triangles: list[Triangle]):
    """Yield the solver state after the starting triangles and after each insertion.

    The same state object is yielded every time; copy it to keep a snapshot.
    """
    state = SolverState.start(triangles)
    yield state
    while state.boundary_lines:
        if state.step() is None:
            return
        yield state


def solve(triangles: list[Triangle], verbose: bool = False) -> list[Triangle] | None:
    """
    Find an insertion order. Returns the ordered triangles or None if there is
    no solution.

    Raises InvalidPuzzleError for malformed input.

    Args:
        triangles: The shards, each with a unique num
        verbose: Print the starting triangles and every insertion
    """
    state = SolverState.start(triangles)
    if verbose:
        print(f"border {state.border}")
        print(f"starting triangles {[t.num for t in state.solution]} "
              f"boundary lines {len(state.boundary_lines)}")

    while state.boundary_lines:
        insertion = find_next_insertion(state)
        if insertion is None:
            if verbose:
                print(f"stuck with {len(state.boundary_lines)} boundary lines "
                      f"and {len(state.remaining)} triangles left")
            return None
        triangle = apply_insertion(state, insertion)
        if verbose:
            print(f"step {len(state.solution)}: triangle {triangle.num} "
                  f"on {insertion.contact_line} remaining {len(state.remaining)}")

    # Nothing exposed but triangles left: no starters, or an unreachable part.
    if state.remaining:
        if verbose:
            print(f"no boundary lines left but {len(state.remaining)} triangles remain")
        return None

    return state.solution


def solve_puzzle(path, verbose: bool = False) -> list[Triangle] | None:
    """
    Main entry point. Reads a puzzle file (or "demo") and solves it.
    """
    from .puzzle_io import read_puzzle, resolve_puzzle_path

    triangles = read_puzzle(resolve_puzzle_path(path))
    return solve(triangles, verbose=verbose)
