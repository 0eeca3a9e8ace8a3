"""Centralized configuration constants for darkroom-easel."""

# Calculator defaults
DEFAULT_PAPER_SIZE = "8x10"
DEFAULT_ASPECT_RATIO = "3:2"
DEFAULT_MIN_BORDER = 0.5  # inches
DEFAULT_CUSTOM_PAPER_WIDTH = 13.0
DEFAULT_CUSTOM_PAPER_HEIGHT = 10.0
DEFAULT_CUSTOM_ASPECT_WIDTH = 2.0
DEFAULT_CUSTOM_ASPECT_HEIGHT = 3.0

# Numeric sanity
DIMENSION_EPSILON = 1e-6  # Replaces non-finite or non-positive dimensions
OFFSET_TOLERANCE = 1e-9  # Requested vs applied offset comparison

# Warnings
BLADE_WARNING_THRESHOLD = 0.05  # inches; readings below this sit on the paper edge

# Quarter-inch assist
QUARTER_INCH = 0.25
QUARTER_INCH_TOLERANCE = 1e-3
BINDING_AXIS_TOLERANCE = 1e-9
ROUNDING_PLACES = 4

# Optimal border search (scan around a starting border)
OPTIMAL_SEARCH_SPAN = 0.5
OPTIMAL_SEARCH_STEP = 0.01
OPTIMAL_MIN_BORDER_FLOOR = 0.01

# Preview helpers
BLADE_THICKNESS = 15  # px at the 20x24 reference size
BASE_PAPER_AREA = 20 * 24  # square inches
MAX_BLADE_SCALE = 2.0

# Units
CM_PER_INCH = 2.54
POINTS_PER_INCH = 72.0
DISPLAY_UNITS = ("in", "cm")

# Rendering
PREVIEW_WIDTH_PX = 800  # Longest side of the PNG preview
PREVIEW_MARGIN_PX = 40
SHEET_PAGE_SIZE_IN = (8.5, 11.0)  # Letter, portrait
SHEET_MARGIN_IN = 0.75
SHEET_PREVIEW_BOX_IN = 5.0
SHEET_PX_PER_IN = 100  # Preview blade px per inch on the setup sheet
