import string

import pytest

from asciidraw.font8x12 import HEIGHT, WIDTH, glyph

PRINTABLE = [chr(code) for code in range(0x20, 0x7F)]


def _mirror(row):
    return int(format(row, "08b")[::-1], 2)


@pytest.mark.parametrize("char", PRINTABLE)
def test_every_glyph_has_height_rows_within_width(char):
    rows = glyph(char)
    assert len(rows) == HEIGHT
    assert all(0 <= row < (1 << WIDTH) for row in rows)


def test_space_is_blank():
    assert glyph(" ") == (0x00,) * HEIGHT


def test_underscore_is_full_bottom_row():
    rows = glyph("_")
    assert rows[-1] == 0xFF
    assert not any(rows[:-1])


def test_capital_a_matches_table():
    assert glyph("A") == (
        0x00, 0x38, 0x6C, 0xC6, 0xC6, 0xC6, 0xFE, 0xC6, 0xC6, 0xC6, 0x00, 0x00
    )


def test_parentheses_are_horizontal_mirrors():
    assert tuple(_mirror(row) for row in glyph("(")) == glyph(")")


def test_uppercase_glyphs_are_distinct():
    assert len({glyph(c) for c in string.ascii_uppercase}) == 26


def test_lowercase_glyphs_are_distinct():
    assert len({glyph(c) for c in string.ascii_lowercase}) == 26


@pytest.mark.parametrize("char", [c for c in PRINTABLE if c != " "])
def test_every_non_space_glyph_has_ink(char):
    lit_rows = [row for row in glyph(char) if row > 0]
    assert len(lit_rows) >= 1


def test_descenders_reach_last_row():
    assert all(glyph(c)[-1] for c in "gjpqy")


@pytest.mark.parametrize("bad", ["", "xy", "\x1f", "\t", "\x7f", "\u00e9"])
def test_rejects_characters_outside_font(bad):
    with pytest.raises(ValueError):
        glyph(bad)


def test_rejects_non_string():
    with pytest.raises(ValueError):
        glyph(None)