"""Utility functions."""

from img2spectro.utils.helpers import (
    get_input_type,
    format_duration,
    generate_output_path,
    write_nfo,
    IMAGE_EXTENSIONS,
    Img2SpectroError,
    UnsupportedFormatError,
    ProcessingError,
    InvalidInputLength,
    InvalidDimension,
    SampleRateTooLow,
    EmptyBuffer,
    SilentSignal,
)

__all__ = [
    "get_input_type",
    "format_duration",
    "generate_output_path",
    "write_nfo",
    "IMAGE_EXTENSIONS",
    "Img2SpectroError",
    "UnsupportedFormatError",
    "ProcessingError",
    "InvalidInputLength",
    "InvalidDimension",
    "SampleRateTooLow",
    "EmptyBuffer",
    "SilentSignal",
]
