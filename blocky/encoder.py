"""PNG serialization of RGBA sample buffers, backed by Pillow."""
import base64
import io
import logging

from PIL import Image

from .errors import EncodingError

logger = logging.getLogger(__name__)

PNG_MIME = "image/png"
# Truecolor with alpha; never a palette image
SAMPLE_MODE = "RGBA"


def samples_to_image(samples: bytes, width: int, height: int) -> Image.Image:
    try:
        return Image.frombytes(SAMPLE_MODE, (width, height), bytes(samples))
    except (ValueError, OSError) as exc:
        raise EncodingError(f"cannot build {width}x{height} image: {exc}") from exc


def encode_image(img: Image.Image) -> bytes:
    output = io.BytesIO()
    try:
        img.save(output, format="PNG")
    except (ValueError, OSError) as exc:
        raise EncodingError(f"PNG encoding failed: {exc}") from exc
    data = output.getvalue()
    logger.debug("Encoded %dx%d PNG (%d bytes)", img.width, img.height, len(data))
    return data


def encode_png(samples: bytes, width: int, height: int) -> bytes:
    """Serialize a row-major RGBA buffer of ``width * height`` pixels as PNG."""
    return encode_image(samples_to_image(samples, width, height))


def to_data_url(data: bytes, mime: str = PNG_MIME) -> str:
    return f"data:{mime};base64," + base64.b64encode(data).decode("ascii")


def open_png(data: bytes) -> Image.Image:
    """Decode PNG bytes back into a loaded Pillow image."""
    img = Image.open(io.BytesIO(data))
    img.load()
    return img
