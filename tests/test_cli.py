"""Tests for the img2spectro CLI."""

import numpy as np
import pytest
from click.testing import CliRunner
from PIL import Image
from scipy.io import wavfile

from img2spectro import __version__
from img2spectro.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def image_file(tmp_path):
    """8x4 image: black square on white."""
    img = np.full((4, 8, 3), 255, dtype=np.uint8)
    img[1:3, 2:6] = 0
    path = tmp_path / "square.png"
    Image.fromarray(img).save(path)
    return str(path)


class TestEncode:
    def test_writes_wav_and_nfo(self, runner, image_file, tmp_path):
        out = tmp_path / "out.wav"
        result = runner.invoke(cli, ["encode", image_file, "-o", str(out), "--sample-rate", "16000"])

        assert result.exit_code == 0, result.output
        assert "Written" in result.output

        rate, samples = wavfile.read(str(out))
        assert rate == 16000
        assert samples.dtype == np.int16
        # 8 columns, 2 * 4 samples each
        assert len(samples) == 64
        assert np.max(np.abs(samples)) == 32767

        nfo = out.with_suffix(".nfo").read_text()
        assert "Max Freq: 8000 Hz" in nfo
        assert "Image Size: 8x4" in nfo

    def test_gain(self, runner, image_file, tmp_path):
        out = tmp_path / "quiet.wav"
        result = runner.invoke(
            cli, ["encode", image_file, "-o", str(out), "--sample-rate", "16000", "--gain", "0.5"]
        )
        assert result.exit_code == 0, result.output

        _, samples = wavfile.read(str(out))
        assert np.max(np.abs(samples)) == 16383
        assert "Gain: 0.5" in out.with_suffix(".nfo").read_text()

    def test_verbose(self, runner, image_file, tmp_path):
        out = tmp_path / "out.wav"
        result = runner.invoke(cli, ["encode", image_file, "-o", str(out), "-v"])
        assert result.exit_code == 0, result.output
        assert "Image size: 8x4" in result.output
        assert "Spectrum rows: 11" in result.output

    def test_sample_rate_too_low(self, runner, image_file, tmp_path):
        out = tmp_path / "out.wav"
        result = runner.invoke(cli, ["encode", image_file, "-o", str(out), "--sample-rate", "8000"])
        assert result.exit_code != 0
        assert "16000 Hz" in result.output
        assert not out.exists()

    def test_unsupported_input(self, runner, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        result = runner.invoke(cli, ["encode", str(path), "-o", str(tmp_path / "out.wav")])
        assert result.exit_code != 0
        assert "Unsupported file type" in result.output

    def test_auto_versioned_output(self, runner, image_file, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["encode", image_file, "--sample-rate", "16000"])
            assert result.exit_code == 0, result.output
            assert "_square_encode_v001.wav" in result.output


class TestPreview:
    def test_writes_raster_png(self, runner, image_file, tmp_path):
        out = tmp_path / "spectrum.png"
        result = runner.invoke(cli, ["preview", image_file, "-o", str(out), "--sample-rate", "16000"])
        assert result.exit_code == 0, result.output

        with Image.open(out) as img:
            # one row per image column, two mirrored copies of the image height
            assert img.size == (8, 8)


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
