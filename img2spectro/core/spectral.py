"""Spectral synthesis - turn each raster row into a block of time-domain samples."""

import numpy as np

from img2spectro.core.raster import RasterBuffer
from img2spectro.utils.helpers import InvalidDimension


def synthesize_row(row: np.ndarray, n_fft: int) -> np.ndarray:
    """
    Synthesize one block of samples from a zero-phase magnitude row.

    The row is taken as a complex spectrum (real = magnitude, imag = 0),
    run through a forward DFT of length n_fft, and the real part kept.

    Args:
        row: Magnitude values, length n_fft
        n_fft: Transform length

    Returns:
        n_fft float64 samples
    """
    if row.shape[-1] != n_fft:
        raise InvalidDimension(f"Row length {row.shape[-1]} does not match transform length {n_fft}")

    spectrum = row.astype(np.complex128)
    return np.fft.fft(spectrum, n=n_fft).real


def synthesize(raster: RasterBuffer, n_fft: int) -> np.ndarray:
    """
    Synthesize a sample stream from every row of a prepared raster.

    Rows are transformed in order and their blocks concatenated back to
    back, without windowing or overlap: row k's samples start right
    after row k-1's.

    Args:
        raster: Mirror-extended raster, one spectrum per row
        n_fft: Transform length, must equal raster.width

    Returns:
        raster.height * n_fft float64 samples

    Raises:
        InvalidDimension: If n_fft differs from the raster width
    """
    if n_fft != raster.width:
        raise InvalidDimension(f"Transform length {n_fft} does not match raster width {raster.width}")

    if raster.height == 0 or n_fft == 0:
        return np.zeros(0, dtype=np.float64)

    # One transform per row along the last axis
    blocks = synthesize_row(raster.rows(), n_fft)
    return blocks.ravel()
