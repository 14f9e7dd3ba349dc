import pytest

from asciidraw.font11x16 import HEIGHT, WIDTH, glyph

PRINTABLE = [chr(code) for code in range(0x20, 0x7F)]


@pytest.mark.parametrize("char", PRINTABLE)
def test_every_printable_has_eleven_columns(char):
    columns = glyph(char)
    assert len(columns) == WIDTH
    assert all(0 <= column < (1 << HEIGHT) for column in columns)


def test_space_is_blank():
    assert glyph(" ") == (0,) * WIDTH


def test_pinned_values_from_table():
    assert glyph("A")[0] == 0x3800
    assert glyph("_") == (0xC000,) * WIDTH
    assert glyph("0")[5] == 0x30C3


def test_backslash_is_present():
    assert glyph("\\")[0] == 0x000E


def test_letters_differ():
    assert glyph("O") != glyph("Q")


@pytest.mark.parametrize("bad", ["", "ab", "\x7f", "\x1f", "é"])
def test_invalid_characters_raise(bad):
    with pytest.raises(ValueError):
        glyph(bad)


def test_non_string_raises():
    with pytest.raises(ValueError):
        glyph(65)