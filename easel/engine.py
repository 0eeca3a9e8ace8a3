"""Border calculation pipeline.

One synchronous pass: orientation → print size → borders and blades →
warnings. The pass is pure: identical input always yields an identical
result, and degenerate input produces warnings rather than exceptions.
"""

import logging
import math

from easel.config import BLADE_WARNING_THRESHOLD, DEFAULT_MIN_BORDER
from easel.layout import blade_thickness, border_percent, compute_borders, size_print
from easel.orientation import effective_landscape, resolve_orientation
from easel.validation import (
    CalculationResult,
    CalculatorInput,
    Dimensions,
    check_blade_readings,
    check_min_border,
    check_offsets,
    check_paper_size,
    check_print_fits,
)

logger = logging.getLogger(__name__)


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def calculate(
    calculator_input: CalculatorInput,
    last_valid_min_border: float = DEFAULT_MIN_BORDER,
    blade_warning_threshold: float = BLADE_WARNING_THRESHOLD,
) -> CalculationResult:
    """Compute print size, blade readings and warnings for one input snapshot.

    Args:
        calculator_input: Current calculator form snapshot
        last_valid_min_border: Minimum border of the previous valid result
        blade_warning_threshold: Readings below this raise a blade warning (in)

    Returns:
        CalculationResult. When the minimum border is unusable the result
        carries a warning and echoes last_valid_min_border unchanged.
    """
    oriented = resolve_orientation(calculator_input)
    paper = oriented["oriented_paper"]
    ratio = oriented["oriented_ratio"]

    requested_border = calculator_input.min_border
    min_border = requested_border
    if not math.isfinite(min_border) or min_border < 0:
        min_border = 0.0

    size = size_print(paper, ratio, min_border)
    min_border_warning = check_min_border(
        requested_border, paper, last_valid_min_border, degenerate=size["degenerate"]
    )
    if min_border_warning is None:
        last_valid_min_border = requested_border
    else:
        logger.debug(f"Minimum border {requested_border} rejected: {min_border_warning}")

    if calculator_input.enable_offset:
        requested_offsets = (
            _finite_or_zero(calculator_input.horizontal_offset),
            _finite_or_zero(calculator_input.vertical_offset),
        )
    else:
        requested_offsets = (0.0, 0.0)

    print_dims = Dimensions(width=size["print_width"], height=size["print_height"])
    borders = compute_borders(
        paper,
        print_dims,
        min_border,
        horizontal_offset=requested_offsets[0],
        vertical_offset=requested_offsets[1],
        ignore_min_border=calculator_input.ignore_min_border,
    )
    applied_offsets = (borders["horizontal_offset"], borders["vertical_offset"])

    if not check_print_fits(paper, print_dims, *applied_offsets):
        logger.error(f"Print left the paper after clamping: {borders}")

    fit = check_paper_size(paper)
    easel = fit["easel"]

    return CalculationResult(
        paper_width=paper.width,
        paper_height=paper.height,
        is_landscape=effective_landscape(calculator_input),
        min_border=min_border,
        print_width=size["print_width"],
        print_height=size["print_height"],
        print_width_percent=border_percent(size["print_width"], paper.width),
        print_height_percent=border_percent(size["print_height"], paper.height),
        left_border=borders["left"],
        right_border=borders["right"],
        top_border=borders["top"],
        bottom_border=borders["bottom"],
        left_border_percent=border_percent(borders["left"], paper.width),
        right_border_percent=border_percent(borders["right"], paper.width),
        top_border_percent=border_percent(borders["top"], paper.height),
        bottom_border_percent=border_percent(borders["bottom"], paper.height),
        # Blades sit on the print edges, so readings are the borders themselves
        left_blade_reading=borders["left"],
        right_blade_reading=borders["right"],
        top_blade_reading=borders["top"],
        bottom_blade_reading=borders["bottom"],
        blade_thickness=blade_thickness(paper),
        clamped_horizontal_offset=applied_offsets[0],
        clamped_vertical_offset=applied_offsets[1],
        is_non_standard_paper_size=fit["is_non_standard"],
        easel_size_label=easel.label if easel else None,
        easel_size=(
            Dimensions(width=easel.width_in, height=easel.height_in) if easel else None
        ),
        offset_warning=check_offsets(
            requested_offsets, applied_offsets, calculator_input.ignore_min_border
        ),
        blade_warning=check_blade_readings(
            (borders["left"], borders["right"], borders["top"], borders["bottom"]),
            blade_warning_threshold,
        ),
        min_border_warning=min_border_warning,
        paper_size_warning=fit["warning"],
        last_valid_min_border=last_valid_min_border,
    )
