"""Image-to-audio pipeline - encode an image so it shows up in a spectrogram."""

from img2spectro.core.raster import RasterBuffer
from img2spectro.core.spectral import synthesize
from img2spectro.core.audio import AudioBuffer
from img2spectro.utils.helpers import SampleRateTooLow

# Top of the display range in common spectrogram viewers
MAX_SPECTROGRAM_FREQ = 8000

DEFAULT_SAMPLE_RATE = 44100


def padded_height(height: int, sample_rate: int, max_spectrogram_freq: int = MAX_SPECTROGRAM_FREQ) -> int:
    """
    Number of frequency rows needed so the image fills 0..max_spectrogram_freq.

    The image rows cover the bottom of the spectrum; the full spectrum up
    to Nyquist is height * sample_rate / (2 * max_spectrogram_freq) rows,
    truncated toward zero.

    Raises:
        SampleRateTooLow: If sample_rate < 2 * max_spectrogram_freq
    """
    if max_spectrogram_freq <= 0:
        raise ValueError(f"Maximum spectrogram frequency must be positive, got {max_spectrogram_freq}")

    if sample_rate < 2 * max_spectrogram_freq:
        raise SampleRateTooLow(
            f"Sample rate {sample_rate} Hz is below {2 * max_spectrogram_freq} Hz "
            f"(twice the {max_spectrogram_freq} Hz spectrogram ceiling)"
        )

    scaling_factor = sample_rate / (2 * max_spectrogram_freq)
    rows = int(height * scaling_factor)

    if rows < height:
        raise SampleRateTooLow(f"Sample rate {sample_rate} Hz leaves {rows} rows for a {height}-row image")

    return rows


def prepare_raster(
    data,
    width: int,
    height: int,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    max_spectrogram_freq: int = MAX_SPECTROGRAM_FREQ,
) -> RasterBuffer:
    """
    Build the raster the synthesizer consumes: one mirrored spectrum per row.

    Converts RGBA to luma, pads the top with white up to the full
    frequency range, inverts (dark = loud), rotates clockwise so image
    columns become rows, and mirror-extends each row.

    Args:
        data: RGBA bytes, row-major
        width: Image width in pixels
        height: Image height in pixels
        sample_rate: Target audio sample rate
        max_spectrogram_freq: Frequency the top image row maps to

    Returns:
        Prepared RasterBuffer, width 2 * padded height, height = image width
    """
    raster = RasterBuffer.from_rgba(data, width, height)

    target_height = padded_height(height, sample_rate, max_spectrogram_freq)
    raster.pad_top(target_height - height)
    raster.invert()
    raster.rotate90_clockwise()
    raster.reflect_horizontal_mirror_extend()

    return raster


def image_to_audio(
    data,
    width: int,
    height: int,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    max_spectrogram_freq: int = MAX_SPECTROGRAM_FREQ,
) -> AudioBuffer:
    """
    Convert an RGBA image to audio whose spectrogram shows the image.

    X axis = time (one block of 2 * padded height samples per image
    column), Y axis = frequency (bottom row = 0 Hz, top row =
    max_spectrogram_freq), darkness = magnitude.

    Args:
        data: RGBA bytes, row-major, 4 bytes per pixel
        width: Image width in pixels
        height: Image height in pixels
        sample_rate: Output sample rate in Hz
        max_spectrogram_freq: Frequency the top image row maps to

    Returns:
        AudioBuffer with zero mean and unit peak

    Raises:
        InvalidInputLength: If the RGBA byte count is not a multiple of 4
        InvalidDimension: If the data does not match width x height
        SampleRateTooLow: If sample_rate < 2 * max_spectrogram_freq
        EmptyBuffer: If the image has no pixels
        SilentSignal: If the image produces no signal at all (all white)
    """
    raster = prepare_raster(data, width, height, sample_rate, max_spectrogram_freq)

    audio = AudioBuffer(sample_rate)
    audio.append(synthesize(raster, raster.width))

    audio.remove_dc_bias()
    audio.normalize_peak()

    return audio
