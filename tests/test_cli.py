import io

import pytest

from asciidraw.chars import render_char_5x7
from asciidraw.cli import PROMPT, main, run
from asciidraw.shapes import render_arrow, render_square, render_triangle

SOURCE_PROMPT = (
    "Select which shape you want to print (Triangle = t, Square = s, "
    "Arrow = a, Chars = c) or 'q' to quit\n> "
)


def _run(text: str) -> str:
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def test_prompt_matches_source_text():
    assert PROMPT == SOURCE_PROMPT
    assert _run("").endswith(SOURCE_PROMPT)


def test_empty_input_prints_welcome_and_one_prompt():
    assert _run("") == "Welcome!\n" + SOURCE_PROMPT


def test_square_then_quit_full_transcript():
    expected = (
        "Welcome!\n"
        + SOURCE_PROMPT
        + "You selected square:\n"
        + render_square(5, 5)
        + SOURCE_PROMPT
        + "Bye!\n"
    )
    assert _run("s\nq\n") == expected


@pytest.mark.parametrize(
    "key, heading, drawing",
    [
        ("t", "You selected triangle:\n", render_triangle(5, 7)),
        ("s", "You selected square:\n", render_square(5, 5)),
        ("a", "You selected arrow:\n", render_arrow(5, 7)),
    ],
)
def test_shape_choices(key, heading, drawing):
    out = _run(key + "\n")
    assert out == "Welcome!\n" + SOURCE_PROMPT + heading + drawing + SOURCE_PROMPT


def test_chars_choice_draws_a_b_c():
    glyphs = render_char_5x7("a") + render_char_5x7("b") + render_char_5x7("c")
    out = _run("c\n")
    assert out == (
        "Welcome!\n" + SOURCE_PROMPT + "You selected chars:\n" + glyphs + SOURCE_PROMPT
    )


def test_unrecognized_option_reports_character():
    out = _run("x\n")
    assert "Unrecognized option 'x', please try again!\n" in out
    assert out.count(SOURCE_PROMPT) == 2


def test_quit_stops_processing_further_input():
    out = _run("q\nt\n")
    assert out.endswith("Bye!\n")
    assert "triangle" not in out


def test_newlines_are_ignored():
    assert _run("\n\n\nt\n\n") == _run("t\n")


def test_characters_on_one_line_are_each_handled():
    out = _run("ts\n")
    triangle_at = out.index("You selected triangle:\n")
    square_at = out.index("You selected square:\n")
    assert triangle_at < square_at
    assert out.count(SOURCE_PROMPT) == 3


def test_main_uses_standard_streams(monkeypatch):
    fake_out = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    monkeypatch.setattr("sys.stdout", fake_out)
    assert main() == 0
    assert fake_out.getvalue() == "Welcome!\n" + SOURCE_PROMPT + "Bye!\n"