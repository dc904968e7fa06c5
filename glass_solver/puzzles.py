"""
Built-in puzzles.

Each puzzle is a list of triangles numbered in order. Coordinates are given
as (x1, y1, x2, y2, x3, y3) tuples, the same as a puzzle file line.
"""

import random

from .geometry import Triangle


def make_puzzle(coords: list[tuple[int, int, int, int, int, int]]) -> list[Triangle]:
    """Helper to create a puzzle from coordinate tuples."""
    return [Triangle.from_coords(num, c) for num, c in enumerate(coords)]


# Unit square split along its diagonal
UNIT_SQUARE = make_puzzle([
    (0, 0, 1, 0, 1, 1),
    (1, 1, 0, 1, 0, 0),
])

# 2x2 square split into four triangles meeting at the centre:
# bottom, right, top, left
PINWHEEL = make_puzzle([
    (0, 0, 2, 0, 1, 1),
    (2, 0, 2, 2, 1, 1),
    (2, 2, 0, 2, 1, 1),
    (0, 2, 0, 0, 1, 1),
])

# Wide base triangle with two side wedges
FAN = make_puzzle([
    (0, 0, 4, 0, 2, 2),
    (0, 0, 2, 2, 0, 2),
    (4, 0, 4, 2, 2, 2),
])

# Ten shards in a 6x4 window. Shards 2, 8 and 6 hang over their neighbours
# and can only go in once the shard underneath is in place.
SHATTERED_GLASS = make_puzzle([
    (0, 0, 3, 0, 2, 2),
    (3, 0, 6, 0, 4, 2),
    (3, 0, 4, 2, 2, 2),
    (0, 0, 2, 2, 0, 2),
    (6, 0, 6, 2, 4, 2),
    (0, 2, 2, 2, 0, 4),
    (2, 2, 2, 4, 0, 4),
    (2, 2, 4, 2, 2, 4),
    (4, 2, 6, 4, 2, 4),
    (4, 2, 6, 2, 6, 4),
])


def grid_puzzle(width: int, height: int, diagonals) -> list[Triangle]:
    """
    Split a width x height grid of unit cells along one diagonal each.

    Args:
        width: Number of cell columns
        height: Number of cell rows
        diagonals: One '/' or '\\' per cell, row by row from the bottom row,
                   left to right
    """
    diagonals = list(diagonals)
    if len(diagonals) != width * height:
        raise ValueError(f"Need {width * height} diagonals, got {len(diagonals)}")

    coords = []
    for j in range(height):
        for i in range(width):
            diagonal = diagonals[j * width + i]
            if diagonal == "/":
                coords.append((i, j, i + 1, j, i + 1, j + 1))
                coords.append((i, j, i + 1, j + 1, i, j + 1))
            elif diagonal == "\\":
                coords.append((i, j, i + 1, j, i, j + 1))
                coords.append((i + 1, j, i + 1, j + 1, i, j + 1))
            else:
                raise ValueError(f"Unknown diagonal {diagonal!r}")
    return make_puzzle(coords)


# 4x2 grid with alternating diagonals
ZIGZAG = grid_puzzle(4, 2, "/\\/\\\\/\\/")


def random_puzzle(width: int, height: int, seed: int | None = None) -> list[Triangle]:
    """Random grid puzzle.

    Picks a diagonal per cell, then shuffles the triangles and starts each one
    at a random vertex with a random winding.
    """
    rng = random.Random(seed)
    diagonals = [rng.choice("/\\") for _ in range(width * height)]

    shards = []
    for triangle in grid_puzzle(width, height, diagonals):
        vertices = list(triangle.vertices)
        if rng.random() < 0.5:
            vertices.reverse()
        shift = rng.randrange(3)
        shards.append(vertices[shift:] + vertices[:shift])
    rng.shuffle(shards)

    return [
        Triangle.from_points(num, *vertices) for num, vertices in enumerate(shards)
    ]


ALL_PUZZLES: dict[str, list[Triangle]] = {
    "unit-square": UNIT_SQUARE,
    "pinwheel": PINWHEEL,
    "fan": FAN,
    "zigzag": ZIGZAG,
    "shattered-glass": SHATTERED_GLASS,
}


def get_puzzle(name: str) -> list[Triangle]:
    """Look up a built-in puzzle by name."""
    try:
        return ALL_PUZZLES[name]
    except KeyError:
        raise ValueError(f"Unknown puzzle {name!r}") from None
