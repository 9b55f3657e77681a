import io

import numpy as np
from PIL import Image


def make_image(values) -> Image.Image:
    """Build an L, RGB or RGBA image from a (rows, cols[, channels]) array of levels."""
    return Image.fromarray(np.asarray(values, dtype=np.uint8))


def png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def gradient_png(width: int = 64, height: int = 48) -> bytes:
    """Horizontal black-to-white gradient."""
    row = np.linspace(0, 255, width).astype(np.uint8)
    return png_bytes(make_image(np.tile(row, (height, 1))))


def gradient16_png(width: int = 40, height: int = 40) -> bytes:
    """Horizontal black-to-white gradient with 16-bit samples."""
    row = np.linspace(0, 65535, width).astype(np.uint16)
    return png_bytes(Image.fromarray(np.tile(row, (height, 1))))


# 2x2 luminances used as the end-to-end oracle, in raster order
QUAD = [[0, 85], [170, 255]]
