"""
Boundary lines: the exposed upper surface of the shards placed so far.

A boundary line is a side of a placed triangle that is not on the window
border and is not yet covered by another placed triangle. When two placed
triangles share a side, both copies cancel out.
"""

from collections import Counter
from dataclasses import dataclass, field

from .geometry import Edge, PuzzleBorder, Triangle


@dataclass
class BoundaryLines:
    """Ordered list of boundary lines. Order matters for the solver's scan."""
    border: PuzzleBorder
    lines: list[Edge] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def __getitem__(self, index: int) -> Edge:
        return self.lines[index]

    def copy(self) -> "BoundaryLines":
        return BoundaryLines(self.border, list(self.lines))

    def contains(self, edge: Edge) -> bool:
        return edge in self.lines

    def add_if_interior(self, edge: Edge) -> bool:
        """Append edge unless it lies on the border. Returns True if added."""
        if self.border.is_on_border(edge):
            return False
        self.lines.append(edge)
        return True

    def remove_at(self, index: int) -> Edge:
        return self.lines.pop(index)

    def remove_match(self, edge: Edge) -> bool:
        """Remove the first line equal to edge (either direction)."""
        for i, line in enumerate(self.lines):
            if line == edge:
                del self.lines[i]
                return True
        return False

    def cancel_duplicates(self) -> int:
        """Remove both copies of every pair of equal lines.

        A side shared by two placed triangles is interior and no longer
        exposed. Survivors keep their relative order. Returns the number of
        pairs removed.
        """
        counts = Counter(self.lines)
        # Odd counts keep their first occurrence.
        keep = {edge: count % 2 for edge, count in counts.items()}
        survivors = []
        for line in self.lines:
            if keep[line]:
                survivors.append(line)
                keep[line] -= 1
        removed = (len(self.lines) - len(survivors)) // 2
        self.lines = survivors
        return removed


def exposed_edges(placed: list[Triangle], border: PuzzleBorder) -> Counter:
    """Non-border sides belonging to exactly one placed triangle.

    This is what BoundaryLines should hold at every point of a solve.
    """
    counts = Counter(
        side for triangle in placed for side in triangle.sides
        if not border.is_on_border(side)
    )
    return Counter({edge: 1 for edge, count in counts.items() if count == 1})
