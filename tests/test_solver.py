import io
import unittest
from contextlib import redirect_stdout

from glass_solver.geometry import Edge, InvalidPuzzleError, Triangle
from glass_solver.puzzles import ALL_PUZZLES, FAN, PINWHEEL, SHATTERED_GLASS, UNIT_SQUARE
from glass_solver.solver import (
    SolverState,
    apply_insertion,
    find_next_insertion,
    iter_solve,
    solve,
    solve_puzzle,
)


def nums(triangles):
    return [t.num for t in triangles]


def snapshots(triangles):
    return [state.copy() for state in iter_solve(triangles)]


class ScenarioTests(unittest.TestCase):
    def test_two_triangle_square(self) -> None:
        states = snapshots(UNIT_SQUARE)

        self.assertEqual(nums(states[0].solution), [0])
        self.assertEqual(list(states[0].boundary_lines), [Edge.between(0, 0, 1, 1)])
        self.assertEqual(nums(states[-1].solution), [0, 1])
        self.assertEqual(len(states[-1].boundary_lines), 0)
        self.assertEqual(nums(solve(UNIT_SQUARE)), [0, 1])

    def test_pinwheel_starts_from_bottom_triangle(self) -> None:
        state = SolverState.start(PINWHEEL)
        self.assertEqual(nums(state.solution), [0])
        self.assertEqual(nums(state.remaining), [1, 2, 3])

        order = nums(solve(PINWHEEL))
        self.assertEqual(order, [0, 1, 3, 2])
        self.assertEqual(sorted(order), [0, 1, 2, 3])

    def test_missing_support_is_unsolvable(self) -> None:
        without_left = PINWHEEL[:3]
        self.assertIsNone(solve(without_left))

        states = snapshots(without_left)
        stuck = states[-1]
        self.assertEqual(nums(stuck.solution), [0, 1])
        self.assertEqual(nums(stuck.remaining), [2])
        # The top triangle touches a boundary line but would hang over a gap
        self.assertTrue(stuck.boundary_lines.contains(Edge.between(1, 1, 2, 2)))
        self.assertIsNone(find_next_insertion(stuck))

    def test_fan(self) -> None:
        self.assertEqual(nums(solve(FAN)), [0, 2, 1])

    def test_shattered_glass(self) -> None:
        self.assertEqual(nums(solve(SHATTERED_GLASS)), [0, 1, 2, 3, 4, 7, 5, 9, 8, 6])

    def test_bundled_demo_file(self) -> None:
        self.assertEqual(nums(solve_puzzle("demo")), nums(solve(SHATTERED_GLASS)))


class InsertionTests(unittest.TestCase):
    def test_overhang_covers_its_support(self) -> None:
        state = SolverState.start(SHATTERED_GLASS)
        self.assertEqual(nums(state.solution), [0, 1])

        insertion = find_next_insertion(state)
        self.assertEqual(state.remaining[insertion.triangle_index].num, 2)
        self.assertEqual(insertion.contact_line, Edge.between(3, 0, 2, 2))
        self.assertEqual(insertion.obstructed_line, Edge.between(4, 2, 3, 0))

        inserted = apply_insertion(state, insertion)

        self.assertEqual(inserted.num, 2)
        self.assertFalse(state.boundary_lines.contains(Edge.between(4, 2, 3, 0)))
        self.assertEqual(
            list(state.boundary_lines),
            [Edge.between(2, 2, 0, 0), Edge.between(6, 0, 4, 2), Edge.between(4, 2, 2, 2)],
        )

    def test_step_returns_inserted_triangle(self) -> None:
        state = SolverState.start(UNIT_SQUARE)
        self.assertEqual(state.step().num, 1)
        self.assertTrue(state.is_solved())
        self.assertIsNone(state.step())


class InvariantTests(unittest.TestCase):
    def test_boundary_lines_match_exposed_sides_at_every_step(self) -> None:
        for name, triangles in ALL_PUZZLES.items():
            with self.subTest(puzzle=name):
                for state in iter_solve(triangles):
                    self.assertTrue(state.is_consistent())

    def test_every_step_places_exactly_one_triangle(self) -> None:
        for name, triangles in ALL_PUZZLES.items():
            with self.subTest(puzzle=name):
                states = snapshots(triangles)
                for state in states:
                    self.assertEqual(state.total, len(triangles))
                for before, after in zip(states, states[1:]):
                    self.assertEqual(len(after.remaining), len(before.remaining) - 1)
                self.assertLessEqual(len(states) - 1, len(triangles))
                self.assertTrue(states[-1].is_solved())

    def test_solution_is_a_permutation(self) -> None:
        for name, triangles in ALL_PUZZLES.items():
            with self.subTest(puzzle=name):
                self.assertEqual(sorted(nums(solve(triangles))), nums(triangles))

    def test_same_input_same_order(self) -> None:
        for triangles in ALL_PUZZLES.values():
            self.assertEqual(nums(solve(triangles)), nums(solve(list(triangles))))

    def test_input_is_not_mutated(self) -> None:
        triangles = list(SHATTERED_GLASS)
        solve(triangles)
        self.assertEqual(triangles, SHATTERED_GLASS)


class FailureTests(unittest.TestCase):
    def test_no_starting_triangle(self) -> None:
        # Rests on the bottom border but leans out past its base
        leaning = [Triangle.from_coords(0, [0, 0, 2, 0, 3, 1])]
        self.assertIsNone(solve(leaning))

        state = SolverState.start(leaning)
        self.assertEqual(len(state.boundary_lines), 0)
        self.assertEqual(len(state.remaining), 1)
        self.assertFalse(state.is_solved())

    def test_unreachable_triangle(self) -> None:
        floating = Triangle.from_coords(2, [5, 5, 6, 5, 6, 6])
        self.assertIsNone(solve(UNIT_SQUARE + [floating]))

    def test_invalid_input_is_rejected_before_solving(self) -> None:
        with self.assertRaises(InvalidPuzzleError):
            solve([])
        with self.assertRaises(InvalidPuzzleError):
            solve([Triangle.from_coords(0, [0, 0, 1, 1, 2, 2])])

    def test_verbose_output(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            solve(PINWHEEL, verbose=True)
        text = out.getvalue()
        self.assertIn("starting triangles [0]", text)
        self.assertIn("step 4: triangle 2", text)

        out = io.StringIO()
        with redirect_stdout(out):
            solve(PINWHEEL[:3], verbose=True)
        self.assertIn("stuck", out.getvalue())


if __name__ == "__main__":
    unittest.main()
