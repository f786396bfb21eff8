"""Luma conversion - reduce an RGBA pixel plane to one brightness channel."""

import numpy as np

from img2spectro.utils.helpers import InvalidInputLength, InvalidDimension

# BT.709 luma weights
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Pixels with alpha below this are treated as white background
ALPHA_THRESHOLD = 10


def as_byte_array(data) -> np.ndarray:
    """View bytes-like data (or a sequence of ints) as a flat uint8 array."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8)
    return np.asarray(data, dtype=np.uint8).ravel()


def rgba_to_luma(data, width: int, height: int) -> np.ndarray:
    """
    Convert an RGBA byte plane to a luma plane.

    Each pixel becomes floor(0.2126*R + 0.7152*G + 0.0722*B). Pixels
    with alpha < 10 become 255 (white) whatever their colour.

    Args:
        data: RGBA bytes, row-major, 4 bytes per pixel
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        Luma values as a flat uint8 array of length width * height

    Raises:
        InvalidInputLength: If the byte count is not a multiple of 4
        InvalidDimension: If the pixel count does not match width * height
    """
    if width < 0 or height < 0:
        raise InvalidDimension(f"Negative image size: {width}x{height}")

    raw = as_byte_array(data)

    if raw.size % 4 != 0:
        raise InvalidInputLength(
            f"RGBA data length {raw.size} is not a multiple of 4 "
            f"({raw.size % 4} trailing bytes)"
        )

    n_pixels = raw.size // 4
    if n_pixels != width * height:
        raise InvalidDimension(
            f"RGBA data holds {n_pixels} pixels, expected {width}x{height} = {width * height}"
        )

    pixels = raw.reshape(n_pixels, 4)
    r = pixels[:, 0].astype(np.float64)
    g = pixels[:, 1].astype(np.float64)
    b = pixels[:, 2].astype(np.float64)

    # Summed in this order so results match the reference bit for bit
    luma = r * LUMA_WEIGHTS[0]
    luma += g * LUMA_WEIGHTS[1]
    luma += b * LUMA_WEIGHTS[2]
    luma = np.floor(luma).astype(np.uint8)

    transparent = pixels[:, 3] < ALPHA_THRESHOLD
    luma[transparent] = 255

    return luma
