"""Render characters of the 5x7 font as text."""

from asciidraw.font5x7 import HEIGHT, glyph


def render_char_5x7(char: str) -> str:
    """Return ``char`` drawn with asterisks, one font column per line.

    Each font column becomes a line of seven cells, bottom row first, and a
    blank line follows the glyph.  Raises ValueError for characters the font
    lacks.
    """
    lines = []
    for column in glyph(char):
        cells = (
            "*" if column & (1 << (HEIGHT - 1 - row)) else " "
            for row in range(HEIGHT)
        )
        lines.append("".join(cells) + "\n")
    return "".join(lines) + "\n"