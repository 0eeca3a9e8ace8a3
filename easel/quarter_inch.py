"""Minimum border suggestions that land blades on easel markings.

Manual easels are usually marked in quarter inches, so a blade reading of
0.37" is awkward to set. These helpers propose a nearby minimum border
instead; they never change the calculator state themselves.
"""

import logging
import math

from easel.config import (
    OPTIMAL_MIN_BORDER_FLOOR,
    OPTIMAL_SEARCH_SPAN,
    OPTIMAL_SEARCH_STEP,
    QUARTER_INCH,
    QUARTER_INCH_TOLERANCE,
    ROUNDING_PLACES,
)
from easel.layout import binding_axis, size_print
from easel.validation import Dimensions

logger = logging.getLogger(__name__)


def is_quarter_increment(value: float) -> bool:
    """Check whether value sits on a 0.25" mark."""
    if not math.isfinite(value):
        return False
    scaled = value / QUARTER_INCH
    return abs(scaled - round(scaled)) < QUARTER_INCH_TOLERANCE


def _nominal_borders(paper: Dimensions, print_width: float, print_height: float) -> tuple[float, float]:
    return (paper.width - print_width) / 2, (paper.height - print_height) / 2


def round_min_border_to_quarter_inch(
    oriented_paper: Dimensions,
    oriented_ratio: Dimensions,
    current_min_border: float,
    print_dims: Dimensions,
) -> float | None:
    """Suggest a minimum border that puts the smallest blade reading on a 0.25" mark.

    Args:
        oriented_paper: Paper after orientation (in)
        oriented_ratio: Image ratio after orientation
        current_min_border: Minimum border in use (in)
        print_dims: Print size for current_min_border (in)

    Returns:
        The suggested minimum border, or None if the reading is already
        aligned or no candidate keeps the same binding axis on the paper

    Note:
        Both the quarter-inch mark below and above the current reading are
        tried, nearest first. A candidate is rejected if it is negative,
        leaves no printable area, or changes which axis limits the print.
    """
    if (
        oriented_paper.width <= 0
        or oriented_paper.height <= 0
        or oriented_ratio.width <= 0
        or oriented_ratio.height <= 0
        or print_dims.width <= 0
        or print_dims.height <= 0
        or not math.isfinite(current_min_border)
    ):
        return None

    smallest = min(_nominal_borders(oriented_paper, print_dims.width, print_dims.height))
    if is_quarter_increment(smallest):
        return None

    current_axis = binding_axis(oriented_paper, oriented_ratio, current_min_border)
    if current_axis is None:
        return None

    below = math.floor(smallest / QUARTER_INCH) * QUARTER_INCH
    above = below + QUARTER_INCH
    targets = sorted((below, above), key=lambda target: abs(target - smallest))

    for target in targets:
        candidate = current_min_border + (target - smallest)
        if candidate < 0:
            continue

        size = size_print(oriented_paper, oriented_ratio, candidate)
        if size["degenerate"]:
            continue

        axis = binding_axis(oriented_paper, oriented_ratio, candidate)
        if current_axis != "both" and axis not in (current_axis, "both"):
            logger.debug(f"Candidate border {candidate} flips the binding axis to {axis}")
            continue

        new_smallest = min(
            _nominal_borders(oriented_paper, size["print_width"], size["print_height"])
        )
        if is_quarter_increment(new_smallest):
            return round(candidate, ROUNDING_PLACES)

    return None


def _distance_to_marks(borders: tuple[float, ...]) -> float:
    score = 0.0
    for border in borders:
        remainder = border % QUARTER_INCH
        score += min(remainder, QUARTER_INCH - remainder)
    return score


def find_optimal_min_border(
    oriented_paper: Dimensions,
    oriented_ratio: Dimensions,
    start: float,
) -> float:
    """Scan around start for the border whose four borders best hit 0.25" marks.

    Args:
        oriented_paper: Paper after orientation (in)
        oriented_ratio: Image ratio after orientation
        start: Current minimum border (in)

    Returns:
        Best minimum border found, rounded to 2 places; start if nothing fits
    """
    if oriented_ratio.height <= 0:
        return start

    lower = max(OPTIMAL_MIN_BORDER_FLOOR, start - OPTIMAL_SEARCH_SPAN)
    upper = start + OPTIMAL_SEARCH_SPAN
    steps = int(round((upper - lower) / OPTIMAL_SEARCH_STEP))

    best = start
    best_score = math.inf
    for i in range(steps + 1):
        candidate = lower + i * OPTIMAL_SEARCH_STEP
        size = size_print(oriented_paper, oriented_ratio, candidate)
        if size["degenerate"]:
            continue

        horizontal, vertical = _nominal_borders(
            oriented_paper, size["print_width"], size["print_height"]
        )
        score = _distance_to_marks((horizontal, horizontal, vertical, vertical))
        if score < best_score - 1e-9:
            best_score = score
            best = candidate
            if best_score < 1e-9:
                break

    return round(best, 2)
