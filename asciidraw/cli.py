"""Interactive menu that draws shapes and characters on a text stream."""

import sys
from collections.abc import Iterator
from typing import TextIO

from asciidraw.chars import render_char_5x7
from asciidraw.shapes import render_arrow, render_square, render_triangle

PROMPT = (
    "Select which shape you want to print "
    "(Triangle = t, Square = s, Arrow = a, Chars = c) or 'q' to quit\n> "
)


def _chars(stream: TextIO) -> Iterator[str]:
    """Yield the characters of ``stream`` one at a time until end of input."""
    return iter(lambda: stream.read(1), "")


def _next_choice(chars: Iterator[str]) -> str | None:
    """Return the next character that is not a newline, or None at end of input."""
    return next((c for c in chars if c != "\n"), None)


def _render_chars() -> str:
    return "".join(render_char_5x7(c) for c in "abc")


_CHOICES = {
    "t": ("triangle", lambda: render_triangle(5, 7)),
    "s": ("square", lambda: render_square(5, 5)),
    "a": ("arrow", lambda: render_arrow(5, 7)),
    "c": ("chars", _render_chars),
}


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu, reading choices from ``stdin`` and drawing on ``stdout``.

    Returns when the user chooses 'q' or the input ends.
    """
    stdout.write("Welcome!\n")
    chars = _chars(stdin)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        choice = _next_choice(chars)
        if choice is None:
            return
        if choice == "q":
            stdout.write("Bye!\n")
            return
        entry = _CHOICES.get(choice)
        if entry is None:
            stdout.write(f"Unrecognized option '{choice}', please try again!\n")
            continue
        name, draw = entry
        stdout.write(f"You selected {name}:\n")
        stdout.write(draw())


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on the standard streams."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())