"""Mirrored cell grid synthesis."""
import math
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

from .prng import XorShift128

# floor(draw * SPREAD) gives background and foreground ~43% each, spot ~13%
SPREAD = 2.3


class Cell(IntEnum):
    BACKGROUND = 0
    FOREGROUND = 1
    SPOT = 2


def split_width(width: int) -> Tuple[int, int]:
    """Return (data_width, mirror_width) for a row of `width` cells."""
    data_width = math.ceil(width / 2)
    return data_width, width - data_width


def create_image_data(rng: XorShift128, width: int, height: Optional[int] = None) -> List[Cell]:
    """Draw a width x width grid whose rows read the same in both directions.

    Only the left half (including the center column when `width` is odd) is
    drawn; the right half is the reversed copy. Draws happen row-major, so the
    engine advances exactly ``width * ceil(width / 2)`` times.

    Returns the cells as one flat, row-major list.
    """
    if height is None:
        height = width
    if height != width:
        raise ValueError("only square grids are supported")

    data_width, mirror_width = split_width(width)
    cells: List[Cell] = []
    for _ in range(height):
        row = [Cell(math.floor(rng.next() * SPREAD)) for _ in range(data_width)]
        cells.extend(row)
        cells.extend(reversed(row[:mirror_width]))
    return cells


def rows(cells: Sequence[Cell], width: int) -> List[Sequence[Cell]]:
    return [cells[i:i + width] for i in range(0, len(cells), width)]


def is_mirrored(cells: Sequence[Cell], width: int) -> bool:
    return all(list(row) == list(reversed(row)) for row in rows(cells, width))
