"""Command-line interface for the easel blade calculator.

Usage:
    # Blade readings for 35mm on landscape 8x10 with a half-inch border
    easel calculate --paper-size 8x10 --aspect-ratio 3:2 --min-border 0.5

    # Same, from saved calculator settings, in centimeters
    easel calculate --settings my_setup.json --unit cm

    # Border suggestions and a printable setup sheet
    easel round --min-border 0.37
    easel render --preset 35mm-on-8x10 --output setup.pdf
"""

import json
import logging
import sys
from collections.abc import Callable
from typing import Any

import click
from pydantic import ValidationError

from easel.catalog import (
    ASPECT_RATIO_CHOICES,
    ASPECT_RATIOS,
    DEFAULT_PRESETS,
    EASEL_SIZES,
    PAPER_SIZE_CHOICES,
    PAPER_SIZES,
)
from easel.config import BLADE_WARNING_THRESHOLD, DEFAULT_MIN_BORDER, DISPLAY_UNITS
from easel.coordinates import format_length
from easel.engine import calculate
from easel.orientation import resolve_orientation, with_paper_size
from easel.quarter_inch import find_optimal_min_border, round_min_border_to_quarter_inch
from easel.rendering import render as render_result
from easel.validation import (
    CalculationResult,
    CalculatorInput,
    Dimensions,
    load_calculator_input,
)

# Configure root logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def input_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the calculator input options shared by every command."""
    options = [
        click.option("--settings", "settings_path", type=click.Path(), help="Calculator settings JSON"),
        click.option("--preset", type=click.Choice(sorted(DEFAULT_PRESETS)), help="Built-in preset"),
        click.option("--paper-size", type=click.Choice(PAPER_SIZE_CHOICES), help="Paper size"),
        click.option(
            "--custom-paper", nargs=2, type=float, metavar="W H", help="Custom paper size (in)"
        ),
        click.option("--aspect-ratio", type=click.Choice(ASPECT_RATIO_CHOICES), help="Aspect ratio"),
        click.option("--custom-ratio", nargs=2, type=float, metavar="W H", help="Custom ratio"),
        click.option("--min-border", type=float, help="Minimum border (in)"),
        click.option(
            "--offset", nargs=2, type=float, metavar="H V",
            help="Offset (in): positive moves the print left / down",
        ),
        click.option("--ignore-min-border", is_flag=True, help="Let offsets eat the border"),
        click.option(
            "--orientation",
            type=click.Choice(["auto", "landscape", "portrait"]),
            help="Override paper orientation",
        ),
        click.option("--flip-ratio", is_flag=True, help="Flip the aspect ratio"),
        click.option(
            "--last-valid-min-border", type=float, default=None,
            help="Border to fall back to if --min-border is unusable",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_input(
    settings_path: str | None,
    preset: str | None,
    paper_size: str | None,
    custom_paper: tuple[float, float] | None,
    aspect_ratio: str | None,
    custom_ratio: tuple[float, float] | None,
    min_border: float | None,
    offset: tuple[float, float] | None,
    ignore_min_border: bool,
    orientation: str | None,
    flip_ratio: bool,
) -> CalculatorInput:
    """Merge settings file, preset and explicit options into one input.

    Explicit options win over the settings file or preset. Selecting paper
    re-derives orientation unless it was chosen with --orientation.

    Raises:
        click.ClickException: If the settings are missing or malformed
    """
    data: dict[str, Any] = {}
    try:
        if settings_path:
            data = load_calculator_input(settings_path).model_dump()
        elif preset:
            data = CalculatorInput.model_validate(DEFAULT_PRESETS[preset]).model_dump()
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e
    except (json.JSONDecodeError, ValidationError) as e:
        raise click.ClickException(f"Invalid settings: {e}") from e

    if custom_ratio:
        data["aspect_ratio"] = "custom"
        data["custom_aspect_width"], data["custom_aspect_height"] = custom_ratio
    if aspect_ratio:
        data["aspect_ratio"] = aspect_ratio
    if min_border is not None:
        data["min_border"] = min_border
    if offset:
        data["enable_offset"] = True
        data["horizontal_offset"], data["vertical_offset"] = offset
    if ignore_min_border:
        data["ignore_min_border"] = True
    if orientation == "auto":
        data["has_manually_flipped_paper"] = False
    elif orientation:
        data["is_landscape"] = orientation == "landscape"
        data["has_manually_flipped_paper"] = True
    if flip_ratio:
        data["is_ratio_flipped"] = True

    try:
        calculator_input = CalculatorInput.model_validate(data)
        if paper_size or custom_paper or orientation == "auto":
            width, height = custom_paper or (None, None)
            calculator_input = with_paper_size(
                calculator_input,
                paper_size or ("custom" if custom_paper else calculator_input.paper_size),
                custom_paper_width=width,
                custom_paper_height=height,
            )
        return calculator_input
    except ValidationError as e:
        raise click.ClickException(f"Invalid settings: {e}") from e


def _input_and_result(
    kwargs: dict[str, Any], blade_threshold: float = BLADE_WARNING_THRESHOLD
) -> tuple[CalculatorInput, CalculationResult]:
    last_valid = kwargs.pop("last_valid_min_border")
    calculator_input = build_input(**kwargs)
    logger.debug(f"Calculator input: {calculator_input.model_dump_json()}")
    result = calculate(
        calculator_input,
        last_valid_min_border=DEFAULT_MIN_BORDER if last_valid is None else last_valid,
        blade_warning_threshold=blade_threshold,
    )
    return calculator_input, result


def echo_result(result: CalculationResult, unit: str) -> None:
    """Print blade readings, print size and warnings."""
    orientation = "landscape" if result.is_landscape else "portrait"
    click.echo(
        f"📄 Paper: {format_length(result.paper_width, unit)} x "
        f"{format_length(result.paper_height, unit)} ({orientation})"
    )
    click.echo(
        f"🖼️  Print: {format_length(result.print_width, unit)} x "
        f"{format_length(result.print_height, unit)}"
    )
    click.echo("📐 Blade readings:")
    for edge, reading in result.blade_readings.items():
        click.echo(f"  {edge:<6} {format_length(reading, unit)}")
    if result.easel_size_label:
        click.echo(f"🗂️  Easel slot: {result.easel_size_label}")
    for warning in result.warnings:
        click.echo(f"⚠ {warning}", err=True)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Easel blade calculator for darkroom printing."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command(name="calculate")
@input_options
@click.option("--unit", default="in", type=click.Choice(DISPLAY_UNITS), help="Display unit")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")
@click.option(
    "--blade-threshold", default=BLADE_WARNING_THRESHOLD, type=float,
    help="Warn when a blade reading is below this (in)",
)
def calculate_cmd(unit: str, as_json: bool, blade_threshold: float, **kwargs: Any) -> None:
    """Calculate print size and easel blade readings."""
    _, result = _input_and_result(kwargs, blade_threshold)

    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return
    echo_result(result, unit)


@cli.command(name="round")
@input_options
def round_cmd(**kwargs: Any) -> None:
    """Suggest a minimum border that puts the smallest blade on a 1/4" mark."""
    calculator_input, result = _input_and_result(kwargs)
    oriented = resolve_orientation(calculator_input)

    suggestion = round_min_border_to_quarter_inch(
        oriented["oriented_paper"],
        oriented["oriented_ratio"],
        result.min_border,
        Dimensions(width=result.print_width, height=result.print_height),
    )
    if suggestion is None:
        click.echo("✓ No quarter-inch adjustment needed or possible")
        return
    click.echo(f"✓ Suggested minimum border: {suggestion:g} in")


@cli.command()
@input_options
def optimize(**kwargs: Any) -> None:
    """Search near the current border for one that puts all blades near 1/4" marks."""
    calculator_input, result = _input_and_result(kwargs)
    oriented = resolve_orientation(calculator_input)

    best = find_optimal_min_border(
        oriented["oriented_paper"], oriented["oriented_ratio"], result.min_border
    )
    click.echo(f"✓ Best minimum border near {result.min_border:g} in: {best:g} in")


@cli.command()
@input_options
@click.option("--output", "-o", required=True, type=click.Path(), help="Output .pdf or .png")
@click.option("--unit", default="in", type=click.Choice(DISPLAY_UNITS), help="Display unit")
def render(output: str, unit: str, **kwargs: Any) -> None:
    """Render a PDF setup sheet or a PNG preview."""
    _, result = _input_and_result(kwargs)

    try:
        render_result(result, output, unit=unit)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    for warning in result.warnings:
        click.echo(f"⚠ {warning}", err=True)
    click.echo(f"📁 Saved to: {output}")


@cli.command()
def sizes() -> None:
    """List catalog paper sizes, aspect ratios and presets."""
    click.echo("Paper sizes:")
    for key, paper in PAPER_SIZES.items():
        slot = "" if paper.is_standard else "  (no easel slot)"
        click.echo(f"  {key:<12} {paper.width_in:g} x {paper.height_in:g} in{slot}")
    click.echo("Aspect ratios:")
    for key, ratio in ASPECT_RATIOS.items():
        click.echo(f"  {key:<12} {ratio.label}")
    click.echo("  even-borders Match the paper ratio")
    click.echo("Easel slots: " + ", ".join(easel.label for easel in EASEL_SIZES))
    click.echo("Presets: " + ", ".join(sorted(DEFAULT_PRESETS)))


if __name__ == "__main__":
    cli()
