"""Unit conversion and coordinate helpers for presenting results.

This module handles:
- Inch ↔ centimeter conversion for display
- Inch → point conversion for ReportLab
- Coordinate system transforms (top-left inches → ReportLab bottom-left points)

The calculation engine always works in inches; these helpers are only used
by the CLI and renderers.
"""

from easel.config import CM_PER_INCH, DISPLAY_UNITS, POINTS_PER_INCH


def in_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def cm_to_in(cm: float) -> float:
    """Convert centimeters to inches."""
    return cm / CM_PER_INCH


def in_to_pt(inches: float) -> float:
    """Convert inches to PDF points (1pt = 1/72 inch)."""
    return inches * POINTS_PER_INCH


def format_length(inches: float, unit: str = "in", places: int = 2) -> str:
    """Format an inch value for display in the requested unit.

    Args:
        inches: Length in inches
        unit: "in" or "cm"
        places: Decimal places

    Returns:
        Formatted string, e.g. "3.25 in" or "8.26 cm"

    Raises:
        ValueError: If unit is not supported
    """
    if unit not in DISPLAY_UNITS:
        raise ValueError(f"Unsupported unit: {unit}")
    value = in_to_cm(inches) if unit == "cm" else inches
    return f"{value:.{places}f} {unit}"


def in_to_pdf_coords(x_in: float, y_in: float, page_height_in: float) -> tuple[float, float]:
    """Convert top-left inch coordinates to ReportLab bottom-left points.

    Args:
        x_in: X coordinate in inches from the left edge
        y_in: Y coordinate in inches from the top edge
        page_height_in: Total page height in inches

    Returns:
        Tuple of (x_pt, y_pt)

    Note:
        ReportLab uses bottom-left origin, so Y axis is flipped.
    """
    return in_to_pt(x_in), in_to_pt(page_height_in - y_in)
