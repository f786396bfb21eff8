"""Command-line interface for img2spectro."""

import click
from pathlib import Path

from img2spectro import __version__
from img2spectro.core.pipeline import (
    image_to_audio,
    prepare_raster,
    padded_height,
    MAX_SPECTROGRAM_FREQ,
    DEFAULT_SAMPLE_RATE,
)
from img2spectro.io.image import load_rgba, validate_rgba, save_preview
from img2spectro.utils.helpers import get_input_type, format_duration, generate_output_path, write_nfo, Img2SpectroError


@click.group()
@click.version_option(version=__version__)
def cli():
    """img2spectro - Hide images in sound.

    Encodes an image as audio so that a spectrogram viewer shows the
    image: X = time, Y = frequency (0 Hz at the bottom, --max-freq at
    the top), dark pixels = loud.

    Output files are auto-versioned: YYMMDD/YYMMDD_<filename>_<mode>_v001.wav
    Settings saved to matching .nfo file.
    """
    pass


@cli.command()
@click.argument("input", type=click.Path(exists=True))
@click.option("-o", "--output", default=None, help="Output WAV file path (auto-versioned if not specified)")
@click.option("--sample-rate", default=DEFAULT_SAMPLE_RATE, type=int, help="Sample rate in Hz")
@click.option(
    "--max-freq",
    default=MAX_SPECTROGRAM_FREQ,
    type=int,
    help="Frequency the top of the image maps to, in Hz (sample rate must be at least twice this)",
)
@click.option(
    "--gain",
    default=1.0,
    type=float,
    help="Output gain (values above 1.0 wrap around and distort, they are not clipped)",
)
@click.option("-v", "--verbose", is_flag=True, help="Print processing info")
def encode(input, output, sample_rate, max_freq, gain, verbose):
    """Encode an image as spectrogram audio.

    Each image column becomes one block of samples, so wider images give
    longer audio. Transparent pixels count as white (silent).

    \b
    Examples:
      img2spectro encode logo.png
      img2spectro encode logo.png --sample-rate 48000
      img2spectro encode logo.png --max-freq 20000 --sample-rate 44100
    """
    try:
        input_type = get_input_type(input)

        if output is None:
            output = str(generate_output_path(input, mode="encode"))

        if verbose:
            click.echo(f"Input: {input} ({input_type})")
            click.echo(f"Sample rate: {sample_rate} Hz")
            click.echo(f"Max frequency: {max_freq} Hz")
            if gain != 1.0:
                click.echo(f"Gain: {gain}")

        data, width, height = load_rgba(input)
        validate_rgba(data, width, height)

        if verbose:
            click.echo(f"Image size: {width}x{height}")
            click.echo(f"Spectrum rows: {padded_height(height, sample_rate, max_freq)}")

        audio = image_to_audio(
            data,
            width,
            height,
            sample_rate=sample_rate,
            max_spectrogram_freq=max_freq,
        )

        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        audio.write_wav(str(output_path), gain=gain)

        settings = {
            "mode": "encode",
            "input": input,
            "image_size": f"{width}x{height}",
            "output": str(output_path),
            "sample_rate": f"{sample_rate} Hz",
            "bit_depth": 16,
            "duration": f"{audio.duration:.2f}s",
            "max_freq": f"{max_freq} Hz",
            "gain": gain if gain != 1.0 else None,
        }
        write_nfo(str(output_path), settings)

        click.echo(f"Written {output_path} ({format_duration(audio.duration)})")

    except Img2SpectroError as e:
        raise click.ClickException(str(e))
    except Exception as e:
        raise click.ClickException(f"Processing failed: {e}")


@cli.command()
@click.argument("input", type=click.Path(exists=True))
@click.option("-o", "--output", default=None, help="Output PNG file path (auto-versioned if not specified)")
@click.option("--sample-rate", default=DEFAULT_SAMPLE_RATE, type=int, help="Sample rate in Hz")
@click.option("--max-freq", default=MAX_SPECTROGRAM_FREQ, type=int, help="Frequency the top of the image maps to, in Hz")
@click.option("-v", "--verbose", is_flag=True, help="Print processing info")
def preview(input, output, sample_rate, max_freq, verbose):
    """Save the spectrum raster that would be synthesized.

    Writes a greyscale PNG with one row per output block: the padded,
    inverted, rotated and mirrored image.

    \b
    Examples:
      img2spectro preview logo.png
      img2spectro preview logo.png -o spectrum.png --sample-rate 16000
    """
    try:
        get_input_type(input)

        if output is None:
            output = str(generate_output_path(input, mode="preview", extension=".png"))

        data, width, height = load_rgba(input)
        validate_rgba(data, width, height)

        raster = prepare_raster(data, width, height, sample_rate=sample_rate, max_spectrogram_freq=max_freq)

        if verbose:
            click.echo(f"Image size: {width}x{height}")
            click.echo(f"Raster size: {raster.width}x{raster.height}")

        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        save_preview(str(output_path), raster)

        click.echo(f"Written {output_path}")

    except Img2SpectroError as e:
        raise click.ClickException(str(e))
    except Exception as e:
        raise click.ClickException(f"Processing failed: {e}")


if __name__ == "__main__":
    cli()
