import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from glass_solver.geometry import Edge
from glass_solver.puzzles import FAN, UNIT_SQUARE
from glass_solver.solver import solve
from glass_solver.viz import display_solution, format_line, format_solution, render_svg, solution_svg


class TextOutputTests(unittest.TestCase):
    def test_format_solution(self) -> None:
        self.assertEqual(format_solution(solve(FAN)), "Solution: 0 2 1")

    def test_format_line(self) -> None:
        self.assertEqual(format_line(Edge.between(0, 0, 3, 0), 1), "Line 1: (0,0) --> (3,0)")

    def test_display_solution(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            display_solution(solve(UNIT_SQUARE))
        self.assertEqual(out.getvalue(), "\nSolution: 0 1\n")

    def test_display_sides(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            display_solution(solve(UNIT_SQUARE), show_sides=True)
        lines = out.getvalue().splitlines()
        self.assertIn("****** step 2: triangle 1 ******", lines)
        self.assertIn("Line 3: (0,0) --> (1,1)", lines)
        self.assertEqual(sum(line.startswith("Line ") for line in lines), 6)


class SvgTests(unittest.TestCase):
    def test_one_polygon_per_triangle(self) -> None:
        svg = solution_svg(solve(FAN))
        self.assertTrue(svg.startswith("<svg"))
        self.assertTrue(svg.endswith("</svg>"))
        self.assertEqual(svg.count("<polygon"), 3)
        self.assertIn("#3</text>", svg)

    def test_render_svg_writes_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            filename = os.path.join(tmp, "fan.svg")
            self.assertEqual(render_svg(solve(FAN), filename), filename)
            with open(filename) as f:
                self.assertEqual(f.read(), solution_svg(solve(FAN)))


if __name__ == "__main__":
    unittest.main()
