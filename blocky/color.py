"""Seed-derived icon colors.

`create_hsl` draws a hue/saturation/lightness triple from the engine and
`hsl_to_rgb` turns it into 8-bit channels.
"""
import logging
import math
from typing import Tuple

from .prng import XorShift128

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]

# Draws consumed by create_hsl: hue, saturation, four lightness samples
HSL_DRAWS = 6


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _to_byte(value: float) -> int:
    # Round half up, then keep the channel inside 0..255
    return min(255, max(0, int(math.floor(value * 255 + 0.5))))


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL components in [0, 1] to an RGB triple of ints in 0..255."""
    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return _to_byte(r), _to_byte(g), _to_byte(b)


def create_hsl(rng: XorShift128) -> HSL:
    # hue is the whole color spectrum
    h = rng.next()
    # saturation stays within 0.4..1 to avoid greyish colors
    s = rng.next() * 0.6 + 0.4
    # lightness averages four draws: a bell curve around 0.5
    l = sum(rng.draws(4)) / 4
    return h, s, l


def random_color(rng: XorShift128) -> RGB:
    rgb = hsl_to_rgb(*create_hsl(rng))
    logger.debug("Derived icon color %s", rgb)
    return rgb
