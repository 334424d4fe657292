"""Named colour palette."""

from __future__ import annotations

from enum import IntEnum

Color = tuple[float, float, float, float]


class ColorName(IntEnum):
    YELLOW = 0
    GREEN = 1
    RED = 2
    BLUE = 3
    ORANGE = 4
    PURPLE = 5
    PINK = 6
    BROWN = 7
    BLACK = 8
    WHITE = 9


# The table holds one entry fewer than there are names.
PALETTE: tuple[Color, ...] = (
    (1.0, 1.0, 0.0, 1.0),
    (0.0, 1.0, 0.0, 1.0),
    (1.0, 0.0, 0.0, 1.0),
    (0.0, 0.0, 1.0, 1.0),
    (1.0, 0.5, 0.2, 1.0),
    (1.0, 0.0, 1.0, 1.0),
    (1.0, 0.25, 0.5, 1.0),
    (0.0, 0.0, 0.0, 1.0),
    (1.0, 1.0, 1.0, 1.0),
)


def color_for(index: int) -> Color:
    """RGBA colour at ``index`` of the palette."""
    position = int(index)
    if not 0 <= position < len(PALETTE):
        raise IndexError(f"no colour at index {position}")
    return PALETTE[position]