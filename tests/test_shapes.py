import pytest

from asciidraw.shapes import render_arrow, render_square, render_triangle


def _lines(text):
    assert text.endswith("\n") or text == ""
    return text.splitlines()


@pytest.mark.parametrize("left, size", [(0, 1), (5, 5), (2, 7), (0, 3)])
def test_square_rows(left, size):
    lines = _lines(render_square(left, size))
    assert len(lines) == size
    assert all(line == " " * left + "*" * size for line in lines)


def test_square_zero_size_is_empty():
    assert render_square(5, 0) == ""


def test_square_negative_left_clips():
    lines = _lines(render_square(-2, 5))
    assert lines == ["*" * 3] * 5


def test_square_pinned():
    assert render_square(1, 2) == " **\n **\n"


@pytest.mark.parametrize("left, size", [(0, 0), (5, 7), (3, 4)])
def test_triangle_rows(left, size):
    lines = _lines(render_triangle(left, size))
    assert len(lines) == size + 1
    for row, line in enumerate(lines):
        stripped = line.lstrip(" ")
        assert stripped == "*" * (2 * row + 1)
        assert len(line) - len(stripped) == left + size - row


def test_triangle_pinned():
    assert render_triangle(0, 1) == " *\n***\n"


def test_triangle_is_symmetric_about_apex():
    left, size = 5, 7
    lines = _lines(render_triangle(left, size))
    apex = left + size
    for line in lines:
        start = line.index("*")
        end = len(line) - 1
        assert apex - start == end - apex


def test_arrow_structure():
    left, size = 5, 7
    lines = _lines(render_arrow(left, size))
    assert len(lines) == 2 * size + 1
    head, shaft = lines[: size + 1], lines[size + 1 :]
    for row, line in enumerate(head):
        stripped = line.lstrip(" ")
        assert len(line) - len(stripped) == left + size - row - 4
        assert stripped == "*" * (2 * row + 1)
    assert shaft == _lines(render_square(left, size))