import pytest

from asciidraw.chars import render_char_5x7
from asciidraw.font5x7 import glyph

PRINTABLE = [chr(code) for code in range(0x20, 0x80)]


def _decode(text):
    """Rebuild column bytes from rendered output."""
    assert text.endswith("\n\n")
    columns = []
    for line in text[:-1].splitlines():
        value = 0
        for cell in line:
            value = (value << 1) | (cell == "*")
        columns.append(value)
    return tuple(columns)


@pytest.mark.parametrize("char", PRINTABLE)
def test_output_shape(char):
    text = render_char_5x7(char)
    lines = text.split("\n")
    assert lines[-2:] == ["", ""]
    body = lines[:-2]
    assert len(body) == 5
    assert all(len(line) == 7 and set(line) <= {"*", " "} for line in body)


@pytest.mark.parametrize("char", PRINTABLE)
def test_output_round_trips_to_glyph(char):
    assert _decode(render_char_5x7(char)) == glyph(char)


def test_space_is_blank():
    assert render_char_5x7(" ") == ("       \n" * 5) + "\n"


def test_pinned_exclamation():
    # 0x5F in the middle column: bits 0-4 and 6 set, drawn bottom row first
    assert render_char_5x7("!").splitlines()[2] == "* *****"


@pytest.mark.parametrize("bad", ["", "ab", "\x1f"])
def test_invalid_character_raises(bad):
    with pytest.raises(ValueError):
        render_char_5x7(bad)