"""Audio buffer: DC removal, peak normalization and 16-bit PCM encoding."""

import io

import numpy as np
from scipy.io import wavfile

from img2spectro.utils.helpers import EmptyBuffer, SilentSignal

PCM16_SCALE = 32767


class AudioBuffer:
    """
    Mono sample stream with its sample rate.

    Samples are float64 in arbitrary scale until normalize_peak()
    rescales them to [-1, 1].
    """

    def __init__(self, sample_rate: int, samples: np.ndarray = None):
        if sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive, got {sample_rate}")
        self.sample_rate = int(sample_rate)
        if samples is None:
            self.samples = np.zeros(0, dtype=np.float64)
        else:
            self.samples = np.asarray(samples, dtype=np.float64).ravel().copy()

    def __len__(self) -> int:
        return self.samples.size

    @property
    def duration(self) -> float:
        """Length in seconds."""
        return self.samples.size / self.sample_rate

    def append(self, block: np.ndarray) -> None:
        """Concatenate a block of samples onto the end of the stream."""
        block = np.asarray(block, dtype=np.float64).ravel()
        self.samples = np.concatenate([self.samples, block])

    def remove_dc_bias(self) -> None:
        """
        Subtract the mean from every sample.

        Raises:
            EmptyBuffer: If there are no samples
        """
        if self.samples.size == 0:
            raise EmptyBuffer("Cannot remove DC bias from an empty buffer")
        self.samples = self.samples - np.mean(self.samples)

    def normalize_peak(self) -> None:
        """
        Divide every sample by the largest absolute sample value.

        Raises:
            EmptyBuffer: If there are no samples
            SilentSignal: If every sample is zero
        """
        if self.samples.size == 0:
            raise EmptyBuffer("Cannot normalize an empty buffer")

        peak = np.max(np.abs(self.samples))
        if peak == 0:
            raise SilentSignal("Cannot normalize a silent (all-zero) signal")

        self.samples = self.samples / peak

    def to_pcm16(self, gain: float = 1.0) -> np.ndarray:
        """
        Convert samples to 16-bit integers.

        Each value is trunc(gain * sample * 32767). Nothing is clamped:
        values outside the int16 range wrap around (two's complement),
        so gain > 1.0 may produce wraparound artifacts.

        Args:
            gain: Linear gain applied before scaling

        Returns:
            int16 sample array
        """
        scaled = np.trunc(gain * self.samples * PCM16_SCALE)
        # Through int64 so out-of-range values wrap instead of being undefined
        return scaled.astype(np.int64).astype(np.int16)

    def encode_pcm16(self, gain: float = 1.0) -> bytes:
        """
        Encode as a mono 16-bit little-endian PCM WAV file.

        See to_pcm16() for the sample conversion and its wraparound
        behavior when gain > 1.0.

        Args:
            gain: Linear gain applied before scaling

        Returns:
            WAV file contents
        """
        buf = io.BytesIO()
        wavfile.write(buf, self.sample_rate, self.to_pcm16(gain))
        return buf.getvalue()

    def write_wav(self, path: str, gain: float = 1.0) -> None:
        """
        Write audio to a mono 16-bit WAV file.

        Args:
            path: Output file path
            gain: Linear gain applied before scaling
        """
        wavfile.write(path, self.sample_rate, self.to_pcm16(gain))

    def __repr__(self) -> str:
        return f"AudioBuffer(sample_rate={self.sample_rate}, samples={self.samples.size})"
