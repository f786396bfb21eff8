"""Input/output utilities for images and previews."""

from img2spectro.io.image import load_rgba, validate_rgba, save_preview

__all__ = [
    "load_rgba",
    "validate_rgba",
    "save_preview",
]
