"""Paper size, aspect ratio and easel slot reference data.

All dimensions are in inches. Paper sizes are stored portrait
(width <= height); the orientation resolver swaps them for landscape.
"""

from pydantic import BaseModel, ConfigDict, Field

CUSTOM = "custom"
EVEN_BORDERS = "even-borders"


class PaperSizeEntry(BaseModel):
    """A named paper size."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Display label")
    width_in: float = Field(description="Stored width in inches")
    height_in: float = Field(description="Stored height in inches")
    is_standard: bool = Field(description="Whether a manual easel has a slot for it")

    @property
    def area(self) -> float:
        """Paper area in square inches."""
        return self.width_in * self.height_in


class AspectRatioEntry(BaseModel):
    """A named image aspect ratio."""

    model_config = ConfigDict(frozen=True)

    label: str
    width_units: float = Field(gt=0)
    height_units: float = Field(gt=0)


PAPER_SIZES: dict[str, PaperSizeEntry] = {
    "5x7": PaperSizeEntry(label="5x7", width_in=5, height_in=7, is_standard=True),
    "3.875x5.875": PaperSizeEntry(
        label="3⅞x5⅞ (postcard)", width_in=3.875, height_in=5.875, is_standard=False
    ),
    "8x10": PaperSizeEntry(label="8x10", width_in=8, height_in=10, is_standard=True),
    "11x14": PaperSizeEntry(label="11x14", width_in=11, height_in=14, is_standard=True),
    "16x20": PaperSizeEntry(label="16x20", width_in=16, height_in=20, is_standard=True),
    "20x24": PaperSizeEntry(label="20x24", width_in=20, height_in=24, is_standard=True),
}

ASPECT_RATIOS: dict[str, AspectRatioEntry] = {
    "3:2": AspectRatioEntry(label="35mm standard frame, 6x9 (3:2)", width_units=3, height_units=2),
    "65:24": AspectRatioEntry(label="XPan Pano (65:24)", width_units=65, height_units=24),
    "4:3": AspectRatioEntry(label="6x4.5/6x8/35mm Half Frame (4:3)", width_units=4, height_units=3),
    "1:1": AspectRatioEntry(label="6x6/Square (1:1)", width_units=1, height_units=1),
    "7:6": AspectRatioEntry(label="6x7", width_units=7, height_units=6),
    "5:4": AspectRatioEntry(label="4x5", width_units=5, height_units=4),
    "7:5": AspectRatioEntry(label="5x7", width_units=7, height_units=5),
    "16:9": AspectRatioEntry(label="HDTV (16:9)", width_units=16, height_units=9),
    "1.37:1": AspectRatioEntry(label="Academy Ratio (1.37:1)", width_units=1.37, height_units=1),
    "1.85:1": AspectRatioEntry(label="Widescreen (1.85:1)", width_units=1.85, height_units=1),
    "2:1": AspectRatioEntry(label="Univisium (2:1)", width_units=2, height_units=1),
    "2.39:1": AspectRatioEntry(label="CinemaScope (2.39:1)", width_units=2.39, height_units=1),
    "2.76:1": AspectRatioEntry(label="Ultra Panavision (2.76:1)", width_units=2.76, height_units=1),
}

PAPER_SIZE_CHOICES = (*PAPER_SIZES, CUSTOM)
ASPECT_RATIO_CHOICES = (*ASPECT_RATIOS, EVEN_BORDERS, CUSTOM)

# Easel slots, smallest first
EASEL_SIZES: tuple[PaperSizeEntry, ...] = tuple(
    sorted((p for p in PAPER_SIZES.values() if p.is_standard), key=lambda p: p.area)
)

# Built-in presets, in the calculator-settings JSON shape
DEFAULT_PRESETS: dict[str, dict[str, object]] = {
    "35mm-on-8x10": {
        "aspectRatio": "3:2",
        "paperSize": "8x10",
        "customAspectWidth": 0,
        "customAspectHeight": 0,
        "customPaperWidth": 0,
        "customPaperHeight": 0,
        "minBorder": 0.5,
        "enableOffset": False,
        "ignoreMinBorder": False,
        "horizontalOffset": 0,
        "verticalOffset": 0,
        "isLandscape": True,
        "isRatioFlipped": False,
        "hasManuallyFlippedPaper": False,
    },
}


def get_paper_size(key: str) -> PaperSizeEntry:
    """Look up a catalog paper size.

    Raises:
        KeyError: If key is not a catalog paper size
    """
    if key not in PAPER_SIZES:
        raise KeyError(f"Unknown paper size: {key}")
    return PAPER_SIZES[key]


def get_aspect_ratio(key: str) -> AspectRatioEntry:
    """Look up a catalog aspect ratio (sentinels are not entries).

    Raises:
        KeyError: If key is not a named aspect ratio
    """
    if key not in ASPECT_RATIOS:
        raise KeyError(f"Unknown aspect ratio: {key}")
    return ASPECT_RATIOS[key]


def is_standard_size(width: float, height: float) -> bool:
    """Check whether width x height exactly matches an easel slot, in either orientation."""
    short, long = sorted((width, height))
    return any(
        short == easel.width_in and long == easel.height_in for easel in EASEL_SIZES
    )


def find_easel_slot(width: float, height: float) -> PaperSizeEntry | None:
    """Find the smallest easel slot that holds a width x height sheet.

    Comparison is orientation independent: the sheet may be rotated to fit.

    Returns:
        The easel entry, or None if the sheet is larger than every slot
    """
    short, long = sorted((width, height))
    for easel in EASEL_SIZES:
        if easel.width_in >= short and easel.height_in >= long:
            return easel
    return None
