"""Blocky identicon generation.

This module wires the pieces together: options are resolved, a fresh
`XorShift128` is seeded, a color and a mirrored cell grid are drawn from it,
and the grid is painted into an RGBA buffer that Pillow encodes as PNG.

The same seed always yields the same bytes. Each call owns its engine, so
calls may run concurrently from several threads.
"""
import logging
from dataclasses import dataclass
from typing import Any, List

from PIL import Image, ImageDraw

from .color import random_color
from .encoder import encode_png, samples_to_image, to_data_url
from .grid import Cell, create_image_data
from .options import Options, resolve_options
from .prng import XorShift128
from .raster import Palette, compose

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rendering:
    """Un-encoded result of one generation run."""

    options: Options
    cells: List[Cell]
    palette: Palette
    samples: bytearray

    @property
    def width(self) -> int:
        return self.options.width

    @property
    def height(self) -> int:
        return self.options.width


def render_samples(options: Any = None, **overrides: Any) -> Rendering:
    """Run the pipeline up to the RGBA sample buffer.

    Args:
        options:   `Options`, a mapping of option values (snake_case or
                   camelCase keys) or None for all defaults.
        overrides: Individual option values, applied on top of `options`.

    Raises:
        InvalidOptionsError: if size/scale/seed/colors are invalid. Raised
            before anything is drawn from the engine.
    """
    opts = resolve_options(options, **overrides)
    logger.debug("Rendering %dx%d icon at scale %d", opts.size, opts.size, opts.scale)

    rng = XorShift128.from_seed(opts.seed)

    # The color is always drawn first, even when both colors are supplied,
    # so the grid for a given seed does not depend on the color options.
    derived = random_color(rng)
    palette = Palette(
        background=opts.bg_color,
        foreground=derived if opts.fg_color is None else opts.fg_color,
        spot=derived if opts.spot_color is None else opts.spot_color,
    )

    cells = create_image_data(rng, opts.size)
    samples = compose(cells, opts.size, opts.scale, palette)
    return Rendering(options=opts, cells=cells, palette=palette, samples=samples)


def generate_buffer(options: Any = None, **overrides: Any) -> bytes:
    """Return the identicon as PNG bytes."""
    rendering = render_samples(options, **overrides)
    return encode_png(rendering.samples, rendering.width, rendering.height)


def generate_data_url(options: Any = None, **overrides: Any) -> str:
    """Return the identicon as a ``data:image/png;base64,...`` URL."""
    return to_data_url(generate_buffer(options, **overrides))


def generate_image(options: Any = None, *, circular: bool = False, **overrides: Any) -> Image.Image:
    """Return the identicon as a Pillow RGBA image.

    With `circular` set, everything outside the inscribed circle is made
    transparent, the usual avatar look.
    """
    rendering = render_samples(options, **overrides)
    img = samples_to_image(rendering.samples, rendering.width, rendering.height)
    if circular:
        mask = Image.new("L", img.size, 0)
        ImageDraw.Draw(mask).ellipse((0, 0, img.width - 1, img.height - 1), fill=255)
        img.putalpha(mask)
    return img
