"""Command-line interface for LottieThis."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .core.export import export_filename, save_lottie
from .core.session import ConversionSession
from .utils.image import get_image_info


def configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')


def _print_image_info(input_file: Path) -> None:
    info = get_image_info(input_file)
    click.echo("🖼️  Image information:")
    click.echo(f"   Width: {info['width']}px")
    click.echo(f"   Height: {info['height']}px")
    click.echo(f"   Type: {info['mime_type'] or info['format']}")
    click.echo(f"   Mode: {info['mode']}")
    if info["is_animated"]:
        click.echo(f"   Frames: {info['n_frames']} (only the first frame is shown by renderers)")


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output JSON file path (default: <name>_lottie.json in --output-dir)",
)
@click.option(
    "--output-dir",
    default=Path("."),
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the default output file name",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite existing output without asking")
@click.option("--info", is_flag=True, help="Only print image information")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(
    input_file: Path,
    output: Optional[Path],
    output_dir: Path,
    force: bool,
    info: bool,
    verbose: bool,
) -> None:
    """Convert an image to a static Lottie animation JSON file.

    Examples:
        lottify photo.jpg
        lottify logo.png -o animations/logo.json
        lottify banner.webp --output-dir exports --force
    """
    configure_logging(verbose)

    click.echo(f"🎞️  LottieThis v{__version__} - Image to Lottie Converter")
    click.echo()

    session = ConversionSession()

    try:
        if info:
            session.select_file(input_file)
            _print_image_info(input_file)
            return

        # Reject non-images before touching any existing output
        asset = session.select_file(input_file)

        if output is None:
            output = output_dir / export_filename(input_file.name)

        if output.exists() and not force:
            if not click.confirm(f"Output file {output} exists. Overwrite?"):
                click.echo("Aborted.")
                return

        if verbose:
            click.echo(f"Loaded image: {input_file}")
            click.echo(f"Image dimensions: {asset.width}x{asset.height}")
            click.echo(f"Image type: {asset.mime_type}")

        document = session.build_document()
        save_lottie(document, output)

        file_size_kb = output.stat().st_size / 1024
        doc_info = session.encoder.get_document_info(document)

        click.echo(f"\n✅ Successfully created {output}")
        click.echo("📊 Final statistics:")
        click.echo(f"   Canvas: {doc_info['width']}x{doc_info['height']}")
        click.echo(f"   Duration: {doc_info['frames']} frames @ {doc_info['frame_rate']}fps")
        click.echo(f"   File size: {file_size_kb:.1f} KB")

    except Exception as e:
        click.echo(f"\n❌ Error: {e}", err=True)
        if verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
