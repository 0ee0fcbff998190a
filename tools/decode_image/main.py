"""
CLI tool to decode EAN-13 barcodes from cropped, upright barcode images.

Each image is binarized and scanned row by row; the first readable row wins.

Usage:
    python -m tools.decode_image.main barcode.png
    python -m tools.decode_image.main ./crops/ --format json
    python -m tools.decode_image.main barcode.png --threshold 100 --no-otsu
"""

import json
import sys
import time
from pathlib import Path

import click
import structlog

from src.barcode import Ean13Decoder
from src.config import configure_logging, get_settings
from src.models import ScanReport
from src.preprocess import BinarizeConfig, Binarizer

logger = structlog.get_logger(__name__)

# Supported image extensions
SUPPORTED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".bmp", ".tif", ".tiff", ".webp"}


def find_images(source_dir: Path) -> list[Path]:
    """Find all supported image files in a directory."""
    return sorted(
        path
        for path in source_dir.iterdir()
        if path.is_file() and path.suffix.lower() in SUPPORTED_EXTENSIONS
    )


def scan_file(file_path: Path, binarizer: Binarizer, decoder: Ean13Decoder) -> ScanReport:
    """Binarize and decode a single image file."""
    start_time = time.time()
    report = ScanReport(source=str(file_path))

    try:
        binary, prep_info = binarizer.preprocess(file_path.read_bytes())
        report.preprocessing = prep_info

        result = decoder.decode(binary)
        report.rows_scanned = result.rows_scanned
        if result.decoded:
            report.decoded = True
            report.code = result.code
            report.formatted = result.formatted
            report.number = result.number
            report.row = result.row

    except (OSError, ValueError) as e:  # InvalidImageError is a ValueError
        logger.error("Failed to scan image", file=str(file_path), error=str(e))
        report.error = str(e)

    report.duration_ms = int((time.time() - start_time) * 1000)
    return report


def format_table(reports: list[ScanReport]) -> str:
    """Format reports as a fixed-width table."""
    lines = [
        f"{'Source':<40} {'Code':<17} {'Row':<6} {'Rows':<6}",
        "-" * 72,
    ]
    for r in reports:
        code = r.formatted if r.decoded else (f"error: {r.error}" if r.error else "not decoded")
        row = str(r.row) if r.row is not None else "-"
        lines.append(f"{r.source:<40} {code:<17} {row:<6} {r.rows_scanned:<6}")
    lines.append("-" * 72)
    decoded = sum(1 for r in reports if r.decoded)
    lines.append(f"Decoded: {decoded}/{len(reports)}")
    return "\n".join(lines)


def format_json(reports: list[ScanReport]) -> str:
    """Format reports as a JSON array."""
    return json.dumps([r.model_dump(mode="json") for r in reports], indent=2)


@click.command()
@click.argument(
    "sources",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
@click.option(
    "--threshold",
    type=click.IntRange(0, 255),
    default=None,
    help="Fixed binarization threshold (default: from settings)",
)
@click.option(
    "--no-otsu",
    is_flag=True,
    help="Use the fixed threshold instead of Otsu",
)
def main(
    sources: tuple[Path, ...],
    output_format: str,
    threshold: int | None,
    no_otsu: bool,
) -> None:
    """Decode EAN-13 barcodes from binarized scanlines of each image."""
    configure_logging()
    settings = get_settings()

    config = BinarizeConfig(
        threshold=settings.binarize_threshold if threshold is None else threshold,
        use_otsu=settings.binarize_use_otsu and not no_otsu,
        black=settings.scanline_black,
        white=settings.scanline_white,
    )
    binarizer = Binarizer(config)
    decoder = Ean13Decoder()

    images: list[Path] = []
    for source in sources:
        if source.is_dir():
            images.extend(find_images(source))
        else:
            images.append(source)

    if not images:
        click.echo("No images found.", err=True)
        sys.exit(1)

    reports = [scan_file(path, binarizer, decoder) for path in images]

    if output_format == "json":
        click.echo(format_json(reports))
    else:
        click.echo(format_table(reports))

    if not any(r.decoded for r in reports):
        sys.exit(1)


if __name__ == "__main__":
    main()
