"""
Puzzle file format.

    N
    x1 y1 x2 y2 x3 y3
    ...            (N lines in total)

The first non-blank line is the triangle count. Each following line holds the
three vertices of one triangle; its number is the 0-based line index.
"""

from pathlib import Path

from . import config
from .geometry import Triangle


class PuzzleFormatError(ValueError):
    """Raised when puzzle text cannot be parsed."""


def parse_puzzle(text: str) -> list[Triangle]:
    """Parse puzzle file text into numbered triangles."""
    lines = text.splitlines()

    # Skip leading blank lines before the count
    while lines and not lines[0].strip():
        lines.pop(0)
    if not lines:
        raise PuzzleFormatError("Puzzle file is empty")

    try:
        num_triangles = int(lines[0].strip())
    except ValueError:
        raise PuzzleFormatError(f"Expected a triangle count, got {lines[0]!r}") from None
    if num_triangles < 0:
        raise PuzzleFormatError(f"Negative triangle count {num_triangles}")

    rows = lines[1:]
    if len(rows) < num_triangles:
        raise PuzzleFormatError(
            f"Expected {num_triangles} triangles, found {len(rows)} lines"
        )

    triangles = []
    for num in range(num_triangles):
        tokens = rows[num].split()
        if len(tokens) != 6:
            raise PuzzleFormatError(
                f"Line {num + 2}: expected 6 coordinates, got {len(tokens)}"
            )
        try:
            coords = [int(token) for token in tokens]
        except ValueError:
            raise PuzzleFormatError(f"Line {num + 2}: coordinates must be integers") from None
        triangles.append(Triangle.from_coords(num, coords))

    return triangles


def read_puzzle(path) -> list[Triangle]:
    """Load a puzzle file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError:
        raise PuzzleFormatError(f"{path} is not a text file") from None
    return parse_puzzle(text)


def format_puzzle(triangles: list[Triangle]) -> str:
    """Write triangles in puzzle file format.

    Each line holds the first side's two endpoints and the second side's far
    endpoint, which are the triangle's three vertices in order.
    """
    lines = [str(len(triangles))]
    for triangle in triangles:
        first, second = triangle.sides[0], triangle.sides[1]
        lines.append(
            f"{first.p1.x} {first.p1.y} {first.p2.x} {first.p2.y} {second.p2.x} {second.p2.y}"
        )
    return "\n".join(lines) + "\n"


def save_puzzle(path, triangles: list[Triangle]) -> Path:
    """Save triangles to a puzzle file. Returns the path."""
    path = Path(path)
    path.write_text(format_puzzle(triangles), encoding="utf-8")
    return path


def resolve_puzzle_path(name) -> Path:
    """Map a user-supplied name to a file. "demo" opens the bundled demo."""
    if str(name) == "demo":
        return config.PUZZLES_DIR / config.DEMO_PUZZLE
    path = Path(name)
    if not path.exists() and (config.PUZZLES_DIR / path.name).exists():
        return config.PUZZLES_DIR / path.name
    return path
