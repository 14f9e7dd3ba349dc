import string

import pytest

from asciidraw.font5x7 import HEIGHT, WIDTH, glyph

PRINTABLE = [chr(code) for code in range(0x20, 0x80)]


@pytest.mark.parametrize("char", PRINTABLE)
def test_every_glyph_has_width_columns_within_height(char):
    columns = glyph(char)
    assert len(columns) == WIDTH
    assert all(0 <= column < (1 << HEIGHT) for column in columns)


def test_space_is_blank():
    assert glyph(" ") == (0x00,) * WIDTH


def test_exclamation_matches_table():
    assert glyph("!") == (0x00, 0x00, 0x5F, 0x00, 0x00)


def test_capital_a_matches_table():
    assert glyph("A") == (0x7E, 0x11, 0x11, 0x11, 0x7E)


def test_degree_sign_present():
    assert glyph("\x7f") == (0x00, 0x06, 0x09, 0x09, 0x06)


@pytest.mark.parametrize("left, right", [("(", ")"), ("[", "]"), ("<", ">")])
def test_bracket_pairs_are_mirror_images(left, right):
    assert glyph(left) == tuple(reversed(glyph(right)))


def test_uppercase_glyphs_are_distinct():
    assert len({glyph(c) for c in string.ascii_uppercase}) == 26


def test_digit_glyphs_are_distinct():
    assert len({glyph(c) for c in string.digits}) == 10


@pytest.mark.parametrize("char", [c for c in PRINTABLE if c != " "])
def test_every_non_space_glyph_has_ink(char):
    lit_columns = [column for column in glyph(char) if column > 0]
    assert len(lit_columns) >= 1


@pytest.mark.parametrize("bad", ["", "ab", "\x1f", "\n", "\x80", "\u00e9"])
def test_rejects_characters_outside_font(bad):
    with pytest.raises(ValueError):
        glyph(bad)


def test_rejects_non_string():
    with pytest.raises(ValueError):
        glyph(65)