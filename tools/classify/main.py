"""
CLI tool to classify and validate barcodes in batch.

Usage:
    poetry run python -m tools.classify.main 4006381333931 "*CODE39*"
    poetry run python -m tools.classify.main --file codes.txt --format json
    cat codes.txt | poetry run python -m tools.classify.main --strict --stats
    poetry run python -m tools.classify.main --image shelf.jpg --format csv
"""

import csv
import json
import sys
from io import StringIO

import click  # type: ignore

from src.barcode import classify, get_type_icon, resolve_hint
from src.config import Settings, configure_logging, get_settings
from src.models import ClassificationResult
from src.scanning import TypeStats, compute_type_stats


def read_codes(codes: tuple[str, ...], file: str | None) -> list[str]:
    """Collect codes from arguments, a file, or stdin; blank lines are skipped."""
    lines: list[str] = list(codes)

    if file:
        with open(file, encoding="utf-8") as f:
            lines.extend(f.read().splitlines())
    elif not codes:
        stdin = click.get_text_stream("stdin")
        if not stdin.isatty():
            lines.extend(stdin.read().splitlines())

    return [line for line in lines if line.strip()]


def decode_images(images: tuple[str, ...], settings: Settings) -> list[ClassificationResult]:
    """Decode every barcode found in the given image files."""
    # Loading the decoder requires the ZBar shared library
    from src.barcode.decoder import BarcodeDecoder

    decoder = BarcodeDecoder.from_settings(settings)
    results: list[ClassificationResult] = []
    for path in images:
        decoded = decoder.decode_file(path)
        if not decoded:
            click.echo(f"No barcode found in: {path}", err=True)
        results.extend(d.classification for d in decoded)
    return results


def format_table(results: list[ClassificationResult]) -> str:
    """Format results as a fixed-width table."""
    lines = [
        "-" * 80,
        f"{'Code':<30} {'Format':<10} {'Valid':<6} {'Check':<6} {'Icon':<4}",
        "-" * 80,
    ]
    for r in results:
        valid = "✓" if r.is_valid else "✗"
        check = r.check_digit or "-"
        lines.append(
            f"{r.code:<30} {r.format:<10} {valid:<6} {check:<6} {get_type_icon(r.symbology):<4}"
        )
    lines.append("-" * 80)
    lines.append(f"Total: {len(results)} code(s)")
    return "\n".join(lines)


def format_json(results: list[ClassificationResult]) -> str:
    """Format results as a JSON array."""
    return json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False)


def format_csv(results: list[ClassificationResult]) -> str:
    """Format results as CSV."""
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(["code", "format", "is_valid", "check_digit", "description"])
    for r in results:
        writer.writerow([r.code, r.format, r.is_valid, r.check_digit or "", r.description])
    return output.getvalue()


def format_stats(stats: TypeStats) -> str:
    """Format type statistics as text."""
    lines = [
        "",
        f"Scanned: {stats.total}",
        f"Valid: {stats.validation_rate:.0f}%",
    ]
    for symbology, count in stats.counts:
        lines.append(f"  {get_type_icon(symbology)} {symbology.value:<10} {count}")
    if stats.most_scanned is not None:
        lines.append(f"Most scanned: {stats.most_scanned.value}")
    return "\n".join(lines)


FORMATTERS = {
    "table": format_table,
    "json": format_json,
    "csv": format_csv,
}


def validate_hint(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and resolve_hint(value) is None:
        raise click.BadParameter(f"Unknown symbology: {value}")
    return value


@click.command()
@click.argument("codes", nargs=-1)
@click.option(
    "--file", "-i",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="File with one code per line (defaults to stdin when no codes are given)",
)
@click.option(
    "--hint",
    default=None,
    callback=validate_hint,
    help="Symbology reported by the scanner, e.g. EAN_13 or Code128",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["table", "json", "csv"]),
    default="table",
    help="Output format (default: table)",
)
@click.option(
    "--image",
    "images",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Image file to decode barcodes from (repeatable)",
)
@click.option("--stats", is_flag=True, help="Append per-type statistics")
@click.option("--strict", is_flag=True, help="Exit with status 1 if any code is invalid")
def main(
    codes: tuple[str, ...],
    file: str | None,
    hint: str | None,
    images: tuple[str, ...],
    output_format: str,
    stats: bool,
    strict: bool,
) -> None:
    """Classify barcodes and report their format, validity and check digit."""
    settings = get_settings()
    configure_logging(settings)

    raw_codes = read_codes(codes, file) if codes or file or not images else []

    results = [
        classify(code, hint, locale=settings.description_locale) for code in raw_codes
    ]
    if images:
        results.extend(decode_images(images, settings))

    if not results:
        click.echo("No codes to classify", err=True)
        sys.exit(1)

    click.echo(FORMATTERS[output_format](results))

    if stats:
        click.echo(format_stats(compute_type_stats(results)))

    if strict and not all(r.is_valid for r in results):
        sys.exit(1)


if __name__ == "__main__":
    main()
