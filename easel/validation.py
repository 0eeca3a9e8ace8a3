"""Calculator models and validity checks.

This module defines:
- Pydantic models for calculator input and calculation results
- Closed sum types for aspect ratio and paper orientation
- Warning predicates evaluated over a calculation pass
"""

import json
import math
from collections.abc import Iterable
from pathlib import Path
from typing import Literal, TypedDict

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from easel.catalog import (
    ASPECT_RATIO_CHOICES,
    CUSTOM,
    EASEL_SIZES,
    EVEN_BORDERS,
    PAPER_SIZE_CHOICES,
    AspectRatioEntry,
    PaperSizeEntry,
    find_easel_slot,
    get_aspect_ratio,
    get_paper_size,
    is_standard_size,
)
from easel.config import (
    BLADE_WARNING_THRESHOLD,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_CUSTOM_ASPECT_HEIGHT,
    DEFAULT_CUSTOM_ASPECT_WIDTH,
    DEFAULT_CUSTOM_PAPER_HEIGHT,
    DEFAULT_CUSTOM_PAPER_WIDTH,
    DEFAULT_MIN_BORDER,
    DEFAULT_PAPER_SIZE,
    OFFSET_TOLERANCE,
)


class Dimensions(BaseModel):
    """Width and height, in inches or ratio units."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float


class NamedRatio(BaseModel):
    """A catalog aspect ratio."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    entry: AspectRatioEntry


class CustomRatio(BaseModel):
    """A user-entered aspect ratio."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    width: float
    height: float


class EvenBorders(BaseModel):
    """Ratio equal to the paper's own, giving proportionally even borders."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["even-borders"] = "even-borders"


AspectRatio = NamedRatio | CustomRatio | EvenBorders


class AutoOrientation(BaseModel):
    """Paper orientation derived from the paper; re-derived when the paper changes."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["auto"] = "auto"
    landscape: bool


class ManualOrientation(BaseModel):
    """Paper orientation chosen by the user; paper changes keep it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["manual"] = "manual"
    landscape: bool


Orientation = AutoOrientation | ManualOrientation


class CalculatorInput(BaseModel):
    """One snapshot of the calculator form.

    Accepts snake_case names or the camelCase keys of saved calculator
    settings. Numeric values are not range-checked here: the engine clamps
    nonsensical dimensions and reports warnings instead of failing.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    paper_size: str = Field(default=DEFAULT_PAPER_SIZE, description="Catalog key or 'custom'")
    custom_paper_width: float = Field(default=DEFAULT_CUSTOM_PAPER_WIDTH, description="Inches")
    custom_paper_height: float = Field(default=DEFAULT_CUSTOM_PAPER_HEIGHT, description="Inches")
    aspect_ratio: str = Field(
        default=DEFAULT_ASPECT_RATIO, description="Catalog key, 'custom' or 'even-borders'"
    )
    custom_aspect_width: float = Field(default=DEFAULT_CUSTOM_ASPECT_WIDTH, description="Ratio units")
    custom_aspect_height: float = Field(default=DEFAULT_CUSTOM_ASPECT_HEIGHT, description="Ratio units")
    min_border: float = Field(default=DEFAULT_MIN_BORDER, description="Inches")
    enable_offset: bool = False
    ignore_min_border: bool = False
    horizontal_offset: float = Field(
        default=0.0, description="Inches, positive moves the print left"
    )
    vertical_offset: float = Field(default=0.0, description="Inches, positive moves the print down")
    is_landscape: bool = True
    is_ratio_flipped: bool = False
    has_manually_flipped_paper: bool = False

    @field_validator("paper_size")
    @classmethod
    def check_paper_size_key(cls, v: str) -> str:
        """Reject paper sizes missing from the catalog."""
        if v not in PAPER_SIZE_CHOICES:
            raise ValueError(f"Unknown paper size: {v}")
        return v

    @field_validator("aspect_ratio")
    @classmethod
    def check_aspect_ratio_key(cls, v: str) -> str:
        """Reject aspect ratios missing from the catalog."""
        if v not in ASPECT_RATIO_CHOICES:
            raise ValueError(f"Unknown aspect ratio: {v}")
        return v

    @field_validator("is_ratio_flipped")
    @classmethod
    def check_ratio_flip(cls, v: bool, info: ValidationInfo) -> bool:
        """Even borders already follow the paper, so flipping is meaningless."""
        if info.data.get("aspect_ratio") == EVEN_BORDERS:
            return False
        return v

    @property
    def ratio(self) -> AspectRatio:
        """The selected aspect ratio as a tagged variant."""
        if self.aspect_ratio == EVEN_BORDERS:
            return EvenBorders()
        if self.aspect_ratio == CUSTOM:
            return CustomRatio(width=self.custom_aspect_width, height=self.custom_aspect_height)
        return NamedRatio(entry=get_aspect_ratio(self.aspect_ratio))

    @property
    def orientation(self) -> Orientation:
        """Paper orientation, tagged by whether the user chose it."""
        if self.has_manually_flipped_paper:
            return ManualOrientation(landscape=self.is_landscape)
        return AutoOrientation(landscape=self.is_landscape)

    @property
    def paper_entry(self) -> PaperSizeEntry:
        """Catalog entry, or an entry built from the custom dimensions."""
        if self.paper_size == CUSTOM:
            return PaperSizeEntry(
                label="Custom",
                width_in=self.custom_paper_width,
                height_in=self.custom_paper_height,
                is_standard=is_standard_size(self.custom_paper_width, self.custom_paper_height),
            )
        return get_paper_size(self.paper_size)


class CalculationResult(BaseModel):
    """Everything the preview, results and warnings displays need."""

    model_config = ConfigDict(frozen=True)

    paper_width: float = Field(description="Oriented paper width (in)")
    paper_height: float = Field(description="Oriented paper height (in)")
    is_landscape: bool = Field(description="Effective paper orientation")
    min_border: float = Field(description="Minimum border used for the calculation (in)")

    print_width: float
    print_height: float
    print_width_percent: float
    print_height_percent: float

    left_border: float
    right_border: float
    top_border: float
    bottom_border: float
    left_border_percent: float
    right_border_percent: float
    top_border_percent: float
    bottom_border_percent: float

    left_blade_reading: float
    right_blade_reading: float
    top_blade_reading: float
    bottom_blade_reading: float
    blade_thickness: int = Field(description="Preview blade thickness in px")

    clamped_horizontal_offset: float
    clamped_vertical_offset: float

    is_non_standard_paper_size: bool
    easel_size_label: str | None
    easel_size: Dimensions | None

    offset_warning: str | None = None
    blade_warning: str | None = None
    min_border_warning: str | None = None
    paper_size_warning: str | None = None
    last_valid_min_border: float

    @property
    def blade_readings(self) -> dict[str, float]:
        """Blade readings keyed by edge."""
        return {
            "left": self.left_blade_reading,
            "right": self.right_blade_reading,
            "top": self.top_blade_reading,
            "bottom": self.bottom_blade_reading,
        }

    @property
    def warnings(self) -> list[str]:
        """All active warnings, in display order."""
        candidates = (
            self.min_border_warning,
            self.offset_warning,
            self.blade_warning,
            self.paper_size_warning,
        )
        return [w for w in candidates if w]


class PaperFit(TypedDict):
    """Easel slot guidance for a sheet of paper."""

    is_non_standard: bool
    easel: PaperSizeEntry | None
    warning: str | None


def load_calculator_input(settings_path: str) -> CalculatorInput:
    """Load calculator settings from a JSON file.

    Args:
        settings_path: Path to a JSON object in the calculator-settings shape

    Returns:
        Validated CalculatorInput

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the settings are malformed
    """
    path = Path(settings_path)
    if not path.exists():
        raise FileNotFoundError(f"Settings JSON not found: {settings_path}")
    return CalculatorInput.model_validate(json.loads(path.read_text()))


def check_min_border(
    min_border: float,
    oriented_paper: Dimensions,
    last_valid_min_border: float,
    degenerate: bool = False,
) -> str | None:
    """Check the requested minimum border against the paper.

    Args:
        min_border: Requested minimum border (in)
        oriented_paper: Paper after orientation
        last_valid_min_border: Fallback value offered to the user
        degenerate: Whether print sizing found no printable area

    Returns:
        Warning message, or None if the border is usable
    """
    if not math.isfinite(min_border) or min_border < 0:
        return (
            f"Minimum border cannot be negative; using 0 "
            f"(last valid value {last_valid_min_border:g} in)."
        )
    limit = min(oriented_paper.width, oriented_paper.height) / 2
    if degenerate or min_border >= limit:
        return (
            f"Minimum border {min_border:g} in is too large for "
            f"{oriented_paper.width:g}x{oriented_paper.height:g} in paper; "
            f"last valid value was {last_valid_min_border:g} in."
        )
    return None


def check_offsets(
    requested: tuple[float, float],
    applied: tuple[float, float],
    ignore_min_border: bool,
) -> str | None:
    """Report which offset axes were clamped.

    Args:
        requested: (horizontal, vertical) offsets the user asked for
        applied: (horizontal, vertical) offsets after clamping
        ignore_min_border: Whether only the paper edge constrained the offsets

    Returns:
        Warning naming the constrained axes, or None
    """
    axes = [
        name
        for name, req, app in zip(("horizontal", "vertical"), requested, applied)
        if abs(req - app) > OFFSET_TOLERANCE
    ]
    if not axes:
        return None

    reason = "keep the print on the paper" if ignore_min_border else "honour the minimum border"
    if len(axes) == 2:
        return f"Horizontal and vertical offsets adjusted to {reason}."
    return f"{axes[0].capitalize()} offset adjusted to {reason}."


def check_blade_readings(
    readings: Iterable[float],
    threshold: float = BLADE_WARNING_THRESHOLD,
) -> str | None:
    """Flag blade readings too close to the paper edge to set reliably."""
    if any(reading < threshold for reading in readings):
        return (
            f"A blade reading is below {threshold:g} in; the blade sits at "
            f"the paper edge and cannot be set reliably."
        )
    return None


def check_paper_size(oriented_paper: Dimensions) -> PaperFit:
    """Match the paper against the standard easel slots.

    Returns:
        PaperFit with the slot to use and a warning for non-standard paper

    Note:
        Manual easels only have fixed slots, so non-standard paper goes in
        the smallest slot that holds it, aligned against one corner.
    """
    width, height = oriented_paper.width, oriented_paper.height
    easel = find_easel_slot(width, height)

    if is_standard_size(width, height):
        return PaperFit(is_non_standard=False, easel=easel, warning=None)

    if easel is None:
        largest = EASEL_SIZES[-1]
        return PaperFit(
            is_non_standard=True,
            easel=None,
            warning=(
                f"{width:g}x{height:g} in paper exceeds the largest "
                f"standard easel ({largest.label})."
            ),
        )

    return PaperFit(
        is_non_standard=True,
        easel=easel,
        warning=(
            f"{width:g}x{height:g} in paper has no standard easel slot; "
            f"place it in the {easel.label} slot aligned against one corner."
        ),
    )


def check_print_fits(
    paper: Dimensions,
    print_dims: Dimensions,
    horizontal_offset: float,
    vertical_offset: float,
) -> bool:
    """Check that an offset print stays on the paper.

    Returns:
        True if every border is non-negative, False otherwise
    """
    half_w = (paper.width - print_dims.width) / 2
    half_h = (paper.height - print_dims.height) / 2
    return (
        half_w + horizontal_offset >= 0
        and half_w - horizontal_offset >= 0
        and half_h + vertical_offset >= 0
        and half_h - vertical_offset >= 0
    )
