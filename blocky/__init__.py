"""Deterministic blocky identicons rendered as PNG."""
from .errors import BlockyError, EncodingError, InvalidOptionsError
from .color import hsl_to_rgb
from .grid import Cell
from .identicon import Rendering, generate_buffer, generate_data_url, generate_image, render_samples
from .options import Options
from .prng import XorShift128

__version__ = "1.0.0"

__all__ = [
    "BlockyError",
    "Cell",
    "EncodingError",
    "InvalidOptionsError",
    "Options",
    "Rendering",
    "XorShift128",
    "generate_buffer",
    "generate_data_url",
    "generate_image",
    "hsl_to_rgb",
    "render_samples",
]
