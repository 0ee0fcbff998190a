"""
CLI tool to write a synthetic EAN-13 barcode image.

Usage:
    python -m tools.render_barcode.main 400638133393 --output sample.png
    python -m tools.render_barcode.main 4006381333931 -o sample.png --module-width 3
"""

import sys
from pathlib import Path

import click
import cv2

from src.barcode import render_ean13_image
from src.config import get_settings


@click.command()
@click.argument("code")
@click.option(
    "--output", "-o",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output image path (format chosen by extension)",
)
@click.option("--module-width", type=click.IntRange(min=1), default=2, help="Pixels per module")
@click.option("--height", type=click.IntRange(min=1), default=50, help="Image height in pixels")
@click.option("--quiet-zone", type=click.IntRange(min=0), default=9, help="Blank modules per side")
def main(code: str, output: Path, module_width: int, height: int, quiet_zone: int) -> None:
    """Render CODE (12 or 13 digits) as a noise-free EAN-13 image."""
    settings = get_settings()

    try:
        image = render_ean13_image(
            code,
            height=height,
            module_width=module_width,
            quiet_zone=quiet_zone,
            black=settings.scanline_black,
            white=settings.scanline_white,
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not cv2.imwrite(str(output), image):
        click.echo(f"Error: could not write {output}", err=True)
        sys.exit(1)

    click.echo(f"Barcode written to: {output}")


if __name__ == "__main__":
    main()
