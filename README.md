# asciidraw

Draw simple shapes and bitmap-font characters as ASCII art.

## Installation

```
pip install .
```

## Interactive use

```
asciidraw
```

The program prints `Welcome!` and asks you to pick a shape:

- `t`: a triangle
- `s`: a square
- `a`: an arrow
- `c`: the letters `a`, `b` and `c` in the 5x7 font
- `q`: prints `Bye!` and quits

Input is read one character at a time, and newlines are skipped. Any other
character prints `Unrecognized option '<char>', please try again!` and the
prompt appears again. The program also stops at end of input.

## Library use

The shape functions return the drawing as a string, one line per row, each
line ending in a newline:

```python
from asciidraw.shapes import render_square, render_triangle, render_arrow

print(render_square(5, 5), end="")    # 5 rows of 5 stars, indented 5 columns
print(render_triangle(5, 7), end="")  # 8 rows, widening by two stars per row
print(render_arrow(5, 7), end="")     # a triangular head followed by a square shaft
```

`render_char_5x7` draws a character from the 5x7 font. Each of the five glyph
columns becomes one output line of seven cells, and a blank line follows the
glyph:

```python
from asciidraw.chars import render_char_5x7

print(render_char_5x7("a"), end="")
```

Three bitmap fonts are included. Each module has a `glyph(char)` function and
`WIDTH` and `HEIGHT` constants:

- `asciidraw.font5x7`: five column bytes; bit 0 is the top row. Covers space
  through `~`, plus `"\x7f"` as a degree sign.
- `asciidraw.font8x12`: twelve row bytes; bit 7 is the leftmost pixel. Covers
  space through `~`.
- `asciidraw.font11x16`: eleven 16-bit column words; bit 0 is the top row.
  Covers space through `~`.

`glyph` raises `ValueError` when given anything other than a single character,
or a character the font has no glyph for. `render_char_5x7` raises the same
error.

To drive the interactive loop with your own streams, call
`asciidraw.cli.run(stdin, stdout)`; it returns when `q` is read or the input
ends.

## Limits

Only the 5x7 font has a renderer. The 8x12 and 11x16 fonts are provided as
glyph data through their `glyph` functions; nothing in the package draws them,
and the interactive menu offers no way to show them.

## Running the tests

```
pip install ".[test]"
pytest
```