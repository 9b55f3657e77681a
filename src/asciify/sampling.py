import io
import logging
import math

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciify.errors import DecodeError, NoInputError

logger = logging.getLogger(__name__)


def decode_image(data: bytes) -> Image.Image:
    """Decode image bytes into a fully loaded Pillow image."""
    if not data:
        raise NoInputError()
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise DecodeError(f"Could not decode image ({len(data)} bytes): {e}") from e
    logger.debug("Decoded %s image %dx%d (%s)", image.format, image.width, image.height, image.mode)
    return image


def grid_size(width: int, height: int, target_width: int, height_scale: float) -> tuple[int, int]:
    """Return (cols, rows) of the character grid for a width x height source."""
    scale = width / target_width
    rows = math.floor(height / scale * height_scale)
    return target_width, max(rows, 0)


def to_eight_bit(image: Image.Image) -> Image.Image:
    """Scale a 16-bit integer ("I", "I;16*") or float ("F") image down to an 8-bit "L" image.

    Samples are read on the 0-65535 scale that 16-bit PNG and TIFF files use.
    """
    if image.mode == "F":
        levels = np.clip(np.asarray(image, dtype=np.float64), 0, 65535) / 256
    else:
        levels = np.clip(np.asarray(image.convert("I"), dtype=np.int64), 0, 65535) >> 8
    return Image.fromarray(levels.astype(np.uint8))


def resample(
    image: Image.Image,
    target_width: int,
    height_scale: float,
    method: Image.Resampling = Image.Resampling.LANCZOS,
) -> np.ndarray:
    """Resize to one pixel per character cell and return luminance as a (rows, cols) uint8 array.

    Luminance comes from Pillow's "L" conversion, which weights channels
    0.299 R + 0.587 G + 0.114 B.
    """
    cols, rows = grid_size(image.width, image.height, target_width, height_scale)
    if rows == 0:
        return np.zeros((0, cols), dtype=np.uint8)

    if image.mode == "F" or image.mode.startswith("I"):
        image = to_eight_bit(image)
    elif image.mode not in ("L", "RGB"):
        image = image.convert("RGB")
    if image.size != (cols, rows):
        image = image.resize((cols, rows), method)
    gray = image.convert("L")
    return np.asarray(gray, dtype=np.uint8)
