"""Print sizing and border layout on the oriented paper.

This module handles:
- Fitting the image ratio inside the paper minus the minimum border
- Distributing the remaining border around the print, with offsets
- Converting borders to blade readings and preview percentages
"""

import logging
from typing import Literal, TypedDict

from easel.config import (
    BASE_PAPER_AREA,
    BINDING_AXIS_TOLERANCE,
    BLADE_THICKNESS,
    DIMENSION_EPSILON,
    MAX_BLADE_SCALE,
    OFFSET_TOLERANCE,
)
from easel.validation import Dimensions

logger = logging.getLogger(__name__)

BindingAxis = Literal["width", "height", "both"]


class PrintSize(TypedDict):
    """Realized print dimensions."""

    print_width: float
    print_height: float
    degenerate: bool  # True when the border leaves no printable area


class BorderLayout(TypedDict):
    """Per-edge borders after offsets (inches)."""

    left: float
    right: float
    top: float
    bottom: float
    horizontal_offset: float  # Applied, after clamping
    vertical_offset: float


def size_print(
    oriented_paper: Dimensions,
    oriented_ratio: Dimensions,
    min_border: float,
) -> PrintSize:
    """Fit the ratio inside the paper minus a border on every side.

    Args:
        oriented_paper: Paper after orientation (in)
        oriented_ratio: Image ratio after orientation
        min_border: Border to keep on every side (in)

    Returns:
        PrintSize; zero-area and degenerate if the border swallows the paper

    Note:
        Uses the "contain" rule: the smaller of the two axis scales wins.
    """
    available_w = oriented_paper.width - 2 * min_border
    available_h = oriented_paper.height - 2 * min_border

    if available_w <= 0 or available_h <= 0:
        logger.debug(
            f"No printable area: {oriented_paper.width}x{oriented_paper.height} "
            f"paper with {min_border} border"
        )
        return PrintSize(print_width=0.0, print_height=0.0, degenerate=True)

    scale = min(available_w / oriented_ratio.width, available_h / oriented_ratio.height)
    return PrintSize(
        print_width=oriented_ratio.width * scale,
        print_height=oriented_ratio.height * scale,
        degenerate=False,
    )


def binding_axis(
    oriented_paper: Dimensions,
    oriented_ratio: Dimensions,
    min_border: float,
) -> BindingAxis | None:
    """Which paper axis limits the print size for a given border.

    Returns:
        "width", "height", "both", or None when there is no printable area
    """
    available_w = oriented_paper.width - 2 * min_border
    available_h = oriented_paper.height - 2 * min_border
    if available_w <= 0 or available_h <= 0:
        return None

    scale_w = available_w / oriented_ratio.width
    scale_h = available_h / oriented_ratio.height
    if scale_w < scale_h * (1 - BINDING_AXIS_TOLERANCE):
        return "width"
    if scale_h < scale_w * (1 - BINDING_AXIS_TOLERANCE):
        return "height"
    return "both"


def _shift_axis(nominal: float, requested: float, floor: float) -> tuple[float, float, float]:
    """Shift one axis of the print by an offset, clamped to the border floor.

    Returns:
        (applied offset, growing border, shrinking border). The first
        border grows with a positive offset, the second shrinks.
    """
    slack = max(nominal - floor, 0.0)
    applied = max(-slack, min(slack, requested))
    growing = nominal + applied
    shrinking = nominal - applied

    # Pin a clamped side to the floor exactly
    if nominal >= floor:
        if applied == slack:
            shrinking = floor
        elif applied == -slack:
            growing = floor
    return applied, growing, shrinking


def compute_borders(
    oriented_paper: Dimensions,
    print_dims: Dimensions,
    min_border: float,
    horizontal_offset: float = 0.0,
    vertical_offset: float = 0.0,
    ignore_min_border: bool = False,
) -> BorderLayout:
    """Distribute the border around the print and apply offsets.

    Args:
        oriented_paper: Paper after orientation (in)
        print_dims: Print size from size_print (in)
        min_border: Minimum border (in)
        horizontal_offset: Requested shift, positive moves the print left
        vertical_offset: Requested shift, positive moves the print down
        ignore_min_border: Only keep the print on the paper, not off the border

    Returns:
        BorderLayout with all four borders and the applied offsets

    Note:
        Offsets are clamped so no border drops below min_border, or below
        zero when ignore_min_border is set.
    """
    nominal_h = (oriented_paper.width - print_dims.width) / 2
    nominal_v = (oriented_paper.height - print_dims.height) / 2
    floor = 0.0 if ignore_min_border else min_border

    applied_h, right, left = _shift_axis(nominal_h, horizontal_offset, floor)
    applied_v, top, bottom = _shift_axis(nominal_v, vertical_offset, floor)

    if abs(applied_h - horizontal_offset) > OFFSET_TOLERANCE or abs(
        applied_v - vertical_offset
    ) > OFFSET_TOLERANCE:
        logger.debug(
            f"Offsets clamped from ({horizontal_offset}, {vertical_offset}) "
            f"to ({applied_h}, {applied_v})"
        )

    return BorderLayout(
        left=left,
        right=right,
        top=top,
        bottom=bottom,
        horizontal_offset=applied_h,
        vertical_offset=applied_v,
    )


def border_percent(border: float, paper_dimension: float) -> float:
    """Border as a percentage of the matching paper dimension."""
    if paper_dimension <= 0:
        return 0.0
    return border / paper_dimension * 100


def blade_thickness(oriented_paper: Dimensions) -> int:
    """Preview blade thickness in px, thicker for smaller paper.

    Scaled against a 20x24 sheet and capped at MAX_BLADE_SCALE.
    """
    if oriented_paper.width <= 0 or oriented_paper.height <= 0:
        return BLADE_THICKNESS

    area = oriented_paper.width * oriented_paper.height
    scale = min(BASE_PAPER_AREA / max(area, DIMENSION_EPSILON), MAX_BLADE_SCALE)
    return int(BLADE_THICKNESS * scale + 0.5)
