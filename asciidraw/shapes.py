"""Render simple filled shapes as text made of asterisks."""


def _line(spaces: int, start: int, end: int) -> str:
    """Return one output line.

    ``spaces`` blanks are written first, ending at column ``start``; then
    stars fill the columns from ``start`` up to but not including ``end``.
    """
    return " " * max(0, spaces) + "*" * max(0, end - start) + "\n"


def render_square(left_col: int, size: int) -> str:
    """Return a size-by-size square whose left edge is at ``left_col``."""
    first = max(0, left_col)
    end_col = left_col + size
    return "".join(_line(first, first, end_col) for _ in range(size))


def render_triangle(left_col: int, size: int) -> str:
    """Return a triangle of ``size + 1`` rows whose left edge is at ``left_col``."""
    lines = []
    for row in range(size + 1):
        min_col = max(0, left_col + size - row)
        max_col = left_col + size + row
        lines.append(_line(min_col, min_col, max_col + 1))
    return "".join(lines)


def render_arrow(left_col: int, size: int) -> str:
    """Return an arrow: a triangular head drawn four columns further left,
    followed by a square shaft at ``left_col``."""
    lines = []
    for row in range(size + 1):
        min_col = left_col + size - row
        max_col = left_col + size + row
        start = max(4, min_col)
        lines.append(_line(start - 4, start, max_col + 1))
    return "".join(lines) + render_square(left_col, size)