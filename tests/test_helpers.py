"""Tests for helper utilities and the exception hierarchy."""

import pytest

from img2spectro.utils.helpers import (
    get_input_type,
    format_duration,
    generate_output_path,
    write_nfo,
    Img2SpectroError,
    UnsupportedFormatError,
    ProcessingError,
    InvalidInputLength,
    InvalidDimension,
    SampleRateTooLow,
    EmptyBuffer,
    SilentSignal,
)


class TestErrors:
    @pytest.mark.parametrize(
        "exc",
        [
            UnsupportedFormatError,
            ProcessingError,
            InvalidInputLength,
            InvalidDimension,
            SampleRateTooLow,
            EmptyBuffer,
            SilentSignal,
        ],
    )
    def test_share_base_class(self, exc):
        assert issubclass(exc, Img2SpectroError)


class TestInputType:
    def test_image(self):
        assert get_input_type("photo.PNG") == "image"
        assert get_input_type("dir/photo.jpeg") == "image"

    def test_unsupported(self):
        with pytest.raises(UnsupportedFormatError, match=".mp4"):
            get_input_type("clip.mp4")


class TestFormatDuration:
    def test_seconds(self):
        assert format_duration(5.123) == "0:05.12"

    def test_minutes(self):
        assert format_duration(83.45) == "1:23.45"


class TestOutputPath:
    def test_versions_increment(self, tmp_path):
        first = generate_output_path("in/logo.png", mode="encode", output_dir=str(tmp_path))
        second = generate_output_path("in/logo.png", mode="encode", output_dir=str(tmp_path))

        assert first.parent.parent == tmp_path
        assert first.name.endswith("_logo_encode_v001.wav")
        assert second.name.endswith("_logo_encode_v002.wav")
        assert first.exists()

    def test_extension(self, tmp_path):
        path = generate_output_path("logo.png", mode="preview", output_dir=str(tmp_path), extension=".png")
        assert path.suffix == ".png"

    def test_nfo_counts_as_taken(self, tmp_path):
        first = generate_output_path("logo.png", output_dir=str(tmp_path))
        first.unlink()
        first.with_suffix(".nfo").write_text("")
        second = generate_output_path("logo.png", output_dir=str(tmp_path))
        assert second.name.endswith("_logo_v002.wav")


class TestWriteNfo:
    def test_skips_none(self, tmp_path):
        wav = tmp_path / "out.wav"
        nfo = write_nfo(str(wav), {"sample_rate": "16000 Hz", "gain": None})
        text = nfo.read_text()

        assert nfo == tmp_path / "out.nfo"
        assert "Sample Rate: 16000 Hz" in text
        assert "Gain" not in text
