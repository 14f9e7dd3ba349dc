"""ASCII-art shapes, bitmap fonts and an interactive drawing menu."""

__version__ = "0.1.0"
__all__ = ["chars", "cli", "font5x7", "font8x12", "font11x16", "shapes"]