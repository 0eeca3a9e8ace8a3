"""Orientation resolution for paper and aspect ratio.

Paper and ratio flip independently. Every downstream stage works on the
oriented dimensions produced here.
"""

import math
from typing import TypedDict

from easel.catalog import CUSTOM
from easel.config import DIMENSION_EPSILON
from easel.validation import (
    AutoOrientation,
    CalculatorInput,
    CustomRatio,
    Dimensions,
    EvenBorders,
    ManualOrientation,
    NamedRatio,
)


class OrientedDimensions(TypedDict):
    """Paper and ratio after orientation."""

    oriented_paper: Dimensions
    oriented_ratio: Dimensions


def sanitize_dimension(value: float) -> float:
    """Replace non-finite or non-positive values with a tiny positive one."""
    if not math.isfinite(value) or value <= 0:
        return DIMENSION_EPSILON
    return value


def auto_landscape(calculator_input: CalculatorInput) -> bool:
    """Orientation the calculator picks for newly selected paper.

    Catalog paper is stored portrait and shown landscape. Custom paper is
    landscape when entered taller than wide.
    """
    if calculator_input.paper_size == CUSTOM:
        return calculator_input.custom_paper_width < calculator_input.custom_paper_height
    return True


def with_paper_size(
    calculator_input: CalculatorInput,
    paper_size: str,
    custom_paper_width: float | None = None,
    custom_paper_height: float | None = None,
) -> CalculatorInput:
    """Select a new paper, re-deriving orientation unless the user chose it.

    Args:
        calculator_input: Current calculator form snapshot
        paper_size: Catalog key or "custom"
        custom_paper_width: New custom width (in), if changing it
        custom_paper_height: New custom height (in), if changing it

    Returns:
        A new CalculatorInput. With AutoOrientation is_landscape follows
        auto_landscape for the new paper; ManualOrientation keeps it.

    Raises:
        pydantic.ValidationError: If paper_size is not in the catalog
    """
    data = calculator_input.model_dump()
    data["paper_size"] = paper_size
    if custom_paper_width is not None:
        data["custom_paper_width"] = custom_paper_width
    if custom_paper_height is not None:
        data["custom_paper_height"] = custom_paper_height
    updated = CalculatorInput.model_validate(data)

    orientation = updated.orientation
    if isinstance(orientation, ManualOrientation):
        return updated
    if isinstance(orientation, AutoOrientation):
        return updated.model_copy(update={"is_landscape": auto_landscape(updated)})
    raise TypeError(f"Unsupported orientation: {orientation!r}")


def effective_landscape(calculator_input: CalculatorInput) -> bool:
    """Whether the paper is currently oriented landscape."""
    return calculator_input.orientation.landscape


def resolve_orientation(calculator_input: CalculatorInput) -> OrientedDimensions:
    """Resolve the effective paper and ratio dimensions.

    Args:
        calculator_input: Current calculator form snapshot

    Returns:
        OrientedDimensions with positive, finite paper and ratio

    Note:
        Landscape swaps the stored width and height. Even borders use the
        oriented paper as the ratio, so ratio flipping never applies to it.
    """
    paper = calculator_input.paper_entry
    paper_w = sanitize_dimension(paper.width_in)
    paper_h = sanitize_dimension(paper.height_in)

    if effective_landscape(calculator_input):
        oriented_paper = Dimensions(width=paper_h, height=paper_w)
    else:
        oriented_paper = Dimensions(width=paper_w, height=paper_h)

    ratio = calculator_input.ratio
    if isinstance(ratio, EvenBorders):
        return OrientedDimensions(oriented_paper=oriented_paper, oriented_ratio=oriented_paper)

    if isinstance(ratio, NamedRatio):
        ratio_w, ratio_h = ratio.entry.width_units, ratio.entry.height_units
    elif isinstance(ratio, CustomRatio):
        ratio_w, ratio_h = ratio.width, ratio.height
    else:
        raise TypeError(f"Unsupported aspect ratio: {ratio!r}")

    ratio_w = sanitize_dimension(ratio_w)
    ratio_h = sanitize_dimension(ratio_h)
    if calculator_input.is_ratio_flipped:
        ratio_w, ratio_h = ratio_h, ratio_w

    return OrientedDimensions(
        oriented_paper=oriented_paper,
        oriented_ratio=Dimensions(width=ratio_w, height=ratio_h),
    )
