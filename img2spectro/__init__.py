"""img2spectro - Encode images as audio that draws them in a spectrogram."""

__version__ = "0.1.0"

from img2spectro.core.raster import RasterBuffer
from img2spectro.core.audio import AudioBuffer
from img2spectro.core.pipeline import image_to_audio, MAX_SPECTROGRAM_FREQ

__all__ = [
    "RasterBuffer",
    "AudioBuffer",
    "image_to_audio",
    "MAX_SPECTROGRAM_FREQ",
]
