"""
Glass window geometry.

Coordinate system:
- x (horizontal), y (vertical) are integer grid coordinates
- y increases UPWARD: shards are dropped in from max_y and fall towards min_y
- The window is the axis-aligned rectangle spanned by all shard vertices

A triangle is stored as three directed sides forming a closed cycle:
    sides[0] = a -> b, sides[1] = b -> c, sides[2] = c -> a
The cyclic order is kept as given; the obstruction analysis walks it.
"""

from dataclasses import dataclass


class InvalidPuzzleError(ValueError):
    """Raised when the triangle set cannot describe a window."""


@dataclass(frozen=True)
class Point:
    """A vertex on the integer grid."""
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True, eq=False)
class Edge:
    """A side between two points.

    Stored directionally as p1 -> p2, but two edges are equal when they join
    the same two points, whichever way round.
    """
    p1: Point
    p2: Point

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            (self.p1 == other.p1 and self.p2 == other.p2) or
            (self.p1 == other.p2 and self.p2 == other.p1)
        )

    def __hash__(self):
        return hash(frozenset((self.p1, self.p2)))

    def __str__(self) -> str:
        return f"{self.p1}-{self.p2}"

    @classmethod
    def between(cls, x1: int, y1: int, x2: int, y2: int) -> "Edge":
        return cls(Point(x1, y1), Point(x2, y2))

    def reversed(self) -> "Edge":
        return Edge(self.p2, self.p1)

    @property
    def min_x(self) -> int:
        return min(self.p1.x, self.p2.x)

    @property
    def max_x(self) -> int:
        return max(self.p1.x, self.p2.x)


@dataclass(frozen=True)
class Triangle:
    """A numbered shard defined by three sides in cyclic order."""
    num: int
    sides: tuple[Edge, Edge, Edge]

    @classmethod
    def from_points(cls, num: int, a: Point, b: Point, c: Point) -> "Triangle":
        """Create a triangle with sides a->b, b->c, c->a."""
        return cls(num, (Edge(a, b), Edge(b, c), Edge(c, a)))

    @classmethod
    def from_coords(cls, num: int, coords) -> "Triangle":
        """Create a triangle from a flat sequence x1 y1 x2 y2 x3 y3."""
        if len(coords) != 6:
            raise InvalidPuzzleError(
                f"Triangle {num} needs 6 coordinates, got {len(coords)}"
            )
        x1, y1, x2, y2, x3, y3 = (int(v) for v in coords)
        return cls.from_points(num, Point(x1, y1), Point(x2, y2), Point(x3, y3))

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return tuple(side.p1 for side in self.sides)

    def to_coords(self) -> list[int]:
        """Flat x1 y1 x2 y2 x3 y3 list, the inverse of from_coords."""
        coords = []
        for vertex in self.vertices:
            coords.extend((vertex.x, vertex.y))
        return coords

    def other_sides(self, side_index: int) -> list[Edge]:
        """The two sides that are not sides[side_index], in cyclic order."""
        return [side for i, side in enumerate(self.sides) if i != side_index]

    def twice_area(self) -> int:
        """Twice the signed area (positive for counter-clockwise winding)."""
        a, b, c = self.vertices
        return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


@dataclass(frozen=True)
class PuzzleBorder:
    """The min/max coordinates of the window's rectangular border."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    def is_on_border(self, edge: Edge) -> bool:
        """True if the edge lies along one of the four border sides."""
        if edge.p1.x == self.min_x and edge.p2.x == self.min_x:
            return True
        if edge.p1.x == self.max_x and edge.p2.x == self.max_x:
            return True
        if edge.p1.y == self.min_y and edge.p2.y == self.min_y:
            return True
        if edge.p1.y == self.max_y and edge.p2.y == self.max_y:
            return True
        return False

    def is_on_bottom(self, edge: Edge) -> bool:
        """True if the edge lies along the bottom border."""
        return edge.p1.y == self.min_y and edge.p2.y == self.min_y


def find_puzzle_border(triangles: list[Triangle]) -> PuzzleBorder:
    """Find the bounding rectangle of every vertex of every triangle."""
    if not triangles:
        raise InvalidPuzzleError("Cannot find the border of an empty puzzle")
    xs = [v.x for t in triangles for v in t.vertices]
    ys = [v.y for t in triangles for v in t.vertices]
    return PuzzleBorder(min(xs), min(ys), max(xs), max(ys))


def validate_triangles(triangles: list[Triangle]) -> None:
    """Reject input the solver cannot work with.

    Checks for an empty set, duplicate numbers, sides that do not close into
    a cycle, zero-length sides and collinear vertices.
    """
    if not triangles:
        raise InvalidPuzzleError("The puzzle has no triangles")

    seen = set()
    for triangle in triangles:
        if triangle.num in seen:
            raise InvalidPuzzleError(f"Duplicate triangle number {triangle.num}")
        seen.add(triangle.num)

        if len(triangle.sides) != 3:
            raise InvalidPuzzleError(f"Triangle {triangle.num} must have 3 sides")
        for i, side in enumerate(triangle.sides):
            following = triangle.sides[(i + 1) % 3]
            if side.p2 != following.p1:
                raise InvalidPuzzleError(
                    f"Triangle {triangle.num}: sides {i} and {(i + 1) % 3} are not joined"
                )
            if side.p1 == side.p2:
                raise InvalidPuzzleError(
                    f"Triangle {triangle.num}: side {i} has zero length"
                )
        if triangle.twice_area() == 0:
            raise InvalidPuzzleError(f"Triangle {triangle.num} has collinear vertices")
