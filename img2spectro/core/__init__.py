"""Core image-to-spectrogram transform."""

from img2spectro.core.luma import rgba_to_luma
from img2spectro.core.raster import RasterBuffer
from img2spectro.core.spectral import synthesize, synthesize_row
from img2spectro.core.audio import AudioBuffer
from img2spectro.core.pipeline import (
    image_to_audio,
    prepare_raster,
    padded_height,
    MAX_SPECTROGRAM_FREQ,
    DEFAULT_SAMPLE_RATE,
)

__all__ = [
    "rgba_to_luma",
    "RasterBuffer",
    "synthesize",
    "synthesize_row",
    "AudioBuffer",
    "image_to_audio",
    "prepare_raster",
    "padded_height",
    "MAX_SPECTROGRAM_FREQ",
    "DEFAULT_SAMPLE_RATE",
]
