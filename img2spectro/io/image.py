"""Image loading and preview utilities."""

from pathlib import Path

from PIL import Image

from img2spectro.core.raster import RasterBuffer
from img2spectro.utils.helpers import IMAGE_EXTENSIONS, UnsupportedFormatError, ProcessingError


def load_rgba(path: str) -> tuple:
    """
    Load an image from disk as a flat RGBA byte plane.

    Transparency is kept as-is; the luma converter decides how to treat
    transparent pixels.

    Args:
        path: Path to image file

    Returns:
        (rgba_bytes, width, height)

    Raises:
        FileNotFoundError: If the file does not exist
        UnsupportedFormatError: If file extension not supported
        ProcessingError: If image cannot be loaded
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Image not found: {path}")

    ext = path.suffix.lower()
    if ext not in IMAGE_EXTENSIONS:
        raise UnsupportedFormatError(f"Unsupported image format: {ext}")

    try:
        with Image.open(path) as img:
            if img.mode != "RGBA":
                img = img.convert("RGBA")
            width, height = img.size
            return img.tobytes(), width, height
    except Exception as e:
        raise ProcessingError(f"Failed to load image: {e}")


def validate_rgba(data: bytes, width: int, height: int) -> None:
    """
    Validate a decoded RGBA plane before processing.

    Raises:
        ProcessingError: If the image is empty or the data does not match its size
    """
    if data is None:
        raise ProcessingError("Image is None")

    if width < 1 or height < 1:
        raise ProcessingError(f"Image too small: {width}x{height}")

    if len(data) != width * height * 4:
        raise ProcessingError(f"Expected {width * height * 4} RGBA bytes for {width}x{height}, got {len(data)}")


def raster_to_image(raster: RasterBuffer) -> Image.Image:
    """Wrap a raster's RGBA export in a Pillow image."""
    return Image.frombytes("RGBA", (raster.width, raster.height), raster.to_rgba())


def save_preview(path: str, raster: RasterBuffer) -> None:
    """
    Save a raster as a greyscale PNG for inspection.

    Args:
        path: Output file path
        raster: Raster to export
    """
    if raster.width == 0 or raster.height == 0:
        raise ProcessingError(f"Cannot preview an empty raster: {raster.width}x{raster.height}")

    raster_to_image(raster).save(path, format="PNG")
