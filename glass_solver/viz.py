"""
Visualization utilities for solved windows.
"""

from . import config
from .geometry import Edge, Triangle, find_puzzle_border


def format_solution(solution: list[Triangle]) -> str:
    """One line listing triangle numbers in insertion order."""
    return "Solution: " + " ".join(str(t.num) for t in solution)


def format_line(line: Edge, num: int) -> str:
    return f"Line {num}: ({line.p1.x},{line.p1.y}) --> ({line.p2.x},{line.p2.y})"


def display_solution(solution: list[Triangle], show_sides: bool = False) -> None:
    """
    Print the insertion order. With show_sides, also print each triangle's
    three sides in the order they are inserted.
    """
    print()
    print(format_solution(solution))
    if not show_sides:
        return

    for step, triangle in enumerate(solution, start=1):
        print(f"****** step {step}: triangle {triangle.num} ******")
        for i, side in enumerate(triangle.sides, start=1):
            print(format_line(side, i))
        print()


def solution_svg(solution: list[Triangle]) -> str:
    """
    Build an SVG drawing of the window. Each shard is labelled with its
    number and, underneath, its insertion step.
    """
    border = find_puzzle_border(solution)
    scale = config.SVG_SCALE
    margin = config.SVG_MARGIN

    def vertex_to_pixel(x: int, y: int) -> tuple[float, float]:
        """Grid point to SVG pixel (SVG y increases downward)."""
        px = margin + (x - border.min_x) * scale
        py = margin + (border.max_y - y) * scale
        return (px, py)

    width = margin * 2 + border.width * scale
    height = margin * 2 + border.height * scale

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}">',
        f'<rect width="100%" height="100%" fill="{config.SVG_BACKGROUND}"/>',
    ]

    for step, triangle in enumerate(solution, start=1):
        points = [vertex_to_pixel(v.x, v.y) for v in triangle.vertices]
        points_str = " ".join(f"{px:.1f},{py:.1f}" for px, py in points)
        svg_parts.append(
            f'<polygon points="{points_str}" fill="{config.SVG_FILL}" '
            f'stroke="{config.SVG_OUTLINE}" stroke-width="1"/>'
        )

        cx = sum(p[0] for p in points) / 3
        cy = sum(p[1] for p in points) / 3
        svg_parts.append(
            f'<text x="{cx:.1f}" y="{cy:.1f}" text-anchor="middle" '
            f'dominant-baseline="middle" font-size="12" fill="{config.SVG_LABEL}">'
            f'{triangle.num}</text>'
        )
        svg_parts.append(
            f'<text x="{cx:.1f}" y="{cy + 12:.1f}" text-anchor="middle" '
            f'dominant-baseline="middle" font-size="8" fill="{config.SVG_LABEL}">'
            f'#{step}</text>'
        )

    svg_parts.append(
        f'<rect x="{margin}" y="{margin}" width="{border.width * scale}" '
        f'height="{border.height * scale}" fill="none" '
        f'stroke="{config.SVG_BORDER}" stroke-width="2"/>'
    )
    svg_parts.append('</svg>')
    return "\n".join(svg_parts)


def render_svg(solution: list[Triangle], filename: str = "solution.svg") -> str:
    """
    Render a solution to an SVG file.
    Returns the filename.
    """
    with open(filename, "w") as f:
        f.write(solution_svg(solution))
    return filename
