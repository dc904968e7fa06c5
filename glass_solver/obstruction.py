"""
Will inserting a triangle now block a triangle that has to come later?

The triangle lands on a contact line A-B. Look at its third point C:

- If C's x-coordinate is between A and B, the triangle is "concave" with
  respect to the contact line and cannot hang over anything. Safe.
- Otherwise C over-extends, and the side from C down to the lower contact
  endpoint is the obstructed line: the surface some other shard under the
  overhang would have to land on. Inserting now is only safe if that line is
  already a boundary line (the shard underneath is in place) or it lies on
  the bottom border (there is nothing underneath).

None of these functions mutate their arguments, so the solver can try as many
candidates as it likes.
"""

from .boundary import BoundaryLines
from .geometry import Edge, Triangle


def is_concave(triangle: Triangle, contact_line: Edge) -> tuple[bool, Edge | None]:
    """Check whether every vertex projects within the contact line's x-span.

    Returns (True, None) when concave. Otherwise returns False and the first
    side (in cyclic order) touching an over-extending point, oriented so that
    it starts at that point.
    """
    min_x = contact_line.min_x
    max_x = contact_line.max_x
    for side in triangle.sides:
        if side.p1.x < min_x or side.p1.x > max_x:
            return False, side
        if side.p2.x < min_x or side.p2.x > max_x:
            return False, side.reversed()
    return True, None


def define_obstructed_line(triangle: Triangle, obstructed_line: Edge) -> Edge:
    """Follow the sides leaving the over-extending point to the lowest end.

    obstructed_line starts at the over-extending point C. Each side touching C
    whose other end is strictly lower than the current far end replaces it.
    """
    start = obstructed_line.p1
    end = obstructed_line.p2
    for side in triangle.sides:
        if side.p1 == start and side.p2.y < end.y:
            end = side.p2
        elif side.p2 == start and side.p1.y < end.y:
            end = side.p1
    return Edge(start, end)


def does_not_block(
    boundary_lines: BoundaryLines,
    triangle: Triangle,
    contact_line: Edge,
) -> tuple[bool, Edge | None]:
    """Decide whether triangle can be dropped onto contact_line now.

    Returns (safe, obstructed_line). obstructed_line is None for concave
    placements and for unsafe ones; for a safe overhang it is the line the
    triangle now also covers.
    """
    concave, obstructed_line = is_concave(triangle, contact_line)
    if concave:
        return True, None

    obstructed_line = define_obstructed_line(triangle, obstructed_line)
    if boundary_lines.border.is_on_bottom(obstructed_line):
        return True, obstructed_line
    if boundary_lines.contains(obstructed_line):
        return True, obstructed_line
    return False, None
