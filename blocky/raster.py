"""Expand a cell grid into a scaled RGBA sample buffer."""
from dataclasses import dataclass
from typing import Sequence

from .color import RGB
from .grid import Cell

OPAQUE = 255
BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class Palette:
    background: RGB
    foreground: RGB
    spot: RGB

    def color_for(self, cell: Cell) -> RGB:
        cell = Cell(cell)
        if cell is Cell.BACKGROUND:
            return self.background
        if cell is Cell.FOREGROUND:
            return self.foreground
        if cell is Cell.SPOT:
            return self.spot
        raise AssertionError(f"unhandled cell: {cell!r}")


def compose(cells: Sequence[Cell], size: int, scale: int, palette: Palette) -> bytearray:
    """Paint every cell as a scale x scale opaque block.

    The result is row-major RGBA, ``(size * scale) ** 2`` pixels long. Cell
    (row, col) covers pixels starting at (row * scale, col * scale).
    """
    if len(cells) != size * size:
        raise ValueError(f"expected {size * size} cells, got {len(cells)}")

    width = size * scale
    stride = width * BYTES_PER_PIXEL
    samples = bytearray(stride * width)

    for i, cell in enumerate(cells):
        row, col = divmod(i, size)
        r, g, b = palette.color_for(cell)
        block_row = bytes((r, g, b, OPAQUE)) * scale
        start = row * scale * stride + col * scale * BYTES_PER_PIXEL
        for y in range(scale):
            offset = start + y * stride
            samples[offset:offset + len(block_row)] = block_row
    return samples
