"""Declarations synthesized into the media blocks."""

from __future__ import annotations

from pxmedia.css.model import Declaration
from pxmedia.transforms.scaling import format_number

BORDER_COLOR = "#eee"

MARGIN_LEFT = Declaration("margin-left", "auto", important=True)
MARGIN_RIGHT = Declaration("margin-right", "auto", important=True)
LEFT = Declaration("left", "0", important=True)
RIGHT = Declaration("right", "0", important=True)
CONTENT_BOX = Declaration("box-sizing", "content-box")
MIN_FULL_HEIGHT = Declaration("min-height", "100vh")
AUTO_HEIGHT = Declaration("height", "auto", important=True)


def width(w: float) -> Declaration:
    return Declaration("width", f"{format_number(w)}px")


def max_width(w: float) -> Declaration:
    return Declaration("max-width", f"{format_number(w)}px", important=True)


def border_left(color: str = BORDER_COLOR) -> Declaration:
    return Declaration("border-left", f"1px solid {color}")


def border_right(color: str = BORDER_COLOR) -> Declaration:
    return Declaration("border-right", f"1px solid {color}")
