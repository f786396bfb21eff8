"""Common utilities, constants and exceptions."""

import re
import fcntl
from datetime import datetime
from pathlib import Path


# Supported file extensions
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".tiff", ".tif", ".bmp", ".webp", ".gif"}


class Img2SpectroError(Exception):
    """Base exception for img2spectro."""

    pass


class UnsupportedFormatError(Img2SpectroError):
    """Raised when input format is not supported."""

    pass


class ProcessingError(Img2SpectroError):
    """Raised when an image cannot be loaded or validated."""

    pass


class InvalidInputLength(Img2SpectroError):
    """Raised when an RGBA byte count is not a multiple of 4."""

    pass


class InvalidDimension(Img2SpectroError):
    """Raised when width, height or a row count does not fit the buffer."""

    pass


class SampleRateTooLow(Img2SpectroError):
    """Raised when the sample rate cannot reach the spectrogram's top frequency."""

    pass


class EmptyBuffer(Img2SpectroError):
    """Raised when post-processing is applied to zero samples."""

    pass


class SilentSignal(Img2SpectroError):
    """Raised when an all-zero signal is peak-normalized."""

    pass


def get_input_type(path: str) -> str:
    """
    Check that a path has a supported image extension.

    Args:
        path: Path to input file

    Returns:
        'image'

    Raises:
        UnsupportedFormatError: If extension not recognized
    """
    ext = Path(path).suffix.lower()

    if ext in IMAGE_EXTENSIONS:
        return "image"

    raise UnsupportedFormatError(
        f"Unsupported file type: {ext}. "
        f"Supported images: {', '.join(sorted(IMAGE_EXTENSIONS))}."
    )


def format_duration(seconds: float) -> str:
    """
    Format duration in seconds to human-readable string.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string (e.g., "1:23.45" or "0:05.12")
    """
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}:{secs:05.2f}"


def generate_output_path(input_path: str, mode: str = None, output_dir: str = None, extension: str = ".wav") -> Path:
    """
    Generate a versioned output path in date-based folder structure.

    Creates paths like: YYMMDD/YYMMDD_<filename>_<mode>_v001.wav
    Auto-increments version number if file exists.
    Uses file locking so concurrent runs never pick the same version.

    Args:
        input_path: Path to input file (used to extract base name)
        mode: Command name (encode, preview)
        output_dir: Base output directory (default: current directory)
        extension: Output file extension (default: .wav)

    Returns:
        Path object for the versioned output file
    """
    input_path = Path(input_path)
    base_name = input_path.stem

    date_str = datetime.now().strftime("%y%m%d")

    if output_dir:
        base_dir = Path(output_dir)
    else:
        base_dir = Path.cwd()

    date_folder = base_dir / date_str
    date_folder.mkdir(parents=True, exist_ok=True)

    if mode:
        name_base = f"{date_str}_{base_name}_{mode}"
    else:
        name_base = f"{date_str}_{base_name}"

    lock_file = date_folder / ".img2spectro.lock"

    with open(lock_file, "w") as lf:
        fcntl.flock(lf.fileno(), fcntl.LOCK_EX)

        try:
            version = 1
            # Any extension counts, so a .wav and its .nfo share a version
            pattern = re.compile(rf"^{re.escape(name_base)}_v(\d{{3}})\.[a-zA-Z0-9]+$")

            for existing_file in date_folder.iterdir():
                if not existing_file.is_file() or existing_file.name.startswith("."):
                    continue
                match = pattern.match(existing_file.name)
                if match:
                    version = max(version, int(match.group(1)) + 1)

            output_path = date_folder / f"{name_base}_v{version:03d}{extension}"

            # Reserve this version number
            output_path.touch()

        finally:
            fcntl.flock(lf.fileno(), fcntl.LOCK_UN)

    return output_path


def write_nfo(wav_path: str, settings: dict) -> Path:
    """
    Write NFO file with render settings alongside WAV file.

    Args:
        wav_path: Path to the WAV file
        settings: Dictionary of settings used for the render

    Returns:
        Path to the NFO file
    """
    wav_path = Path(wav_path)
    nfo_path = wav_path.with_suffix(".nfo")

    lines = [
        "img2spectro render settings",
        "==========================",
        "",
        f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        "",
    ]

    for key, value in settings.items():
        if value is not None:
            display_key = key.replace("_", " ").title()
            lines.append(f"{display_key}: {value}")

    nfo_path.write_text("\n".join(lines))

    return nfo_path
