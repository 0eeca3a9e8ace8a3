"""Preview and setup-sheet rendering from calculation results.

This module handles:
- Laying out paper, print and blade rectangles from the result percentages
- Drawing a PNG preview with Pillow
- Generating a one-page PDF setup sheet with ReportLab
"""

import logging
from pathlib import Path
from typing import TypedDict

from PIL import Image, ImageDraw
from reportlab.lib.units import inch as reportlab_inch
from reportlab.pdfgen import canvas

from easel.config import (
    PREVIEW_MARGIN_PX,
    PREVIEW_WIDTH_PX,
    SHEET_MARGIN_IN,
    SHEET_PAGE_SIZE_IN,
    SHEET_PREVIEW_BOX_IN,
    SHEET_PX_PER_IN,
)
from easel.coordinates import format_length, in_to_pdf_coords
from easel.validation import CalculationResult

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (235, 235, 235)
PAPER_COLOR = (255, 255, 255)
PRINT_COLOR = (120, 120, 120)
BLADE_COLOR = (40, 40, 40)


class Rect(TypedDict):
    """Axis-aligned rectangle, top-left origin."""

    x: float
    y: float
    width: float
    height: float


class PreviewLayout(TypedDict):
    """Rectangles for one preview drawing."""

    paper: Rect
    print_area: Rect
    blades: list[Rect]  # left, right, top, bottom


def preview_layout(
    result: CalculationResult,
    box_width: float,
    box_height: float,
    blade_thickness: float | None = None,
) -> PreviewLayout:
    """Place the paper, print and blades inside a drawing box.

    Args:
        result: Calculation result (only percentage fields and paper ratio are used)
        box_width: Available drawing width, any unit
        box_height: Available drawing height, same unit
        blade_thickness: Blade bar thickness in box units (default: result.blade_thickness)

    Returns:
        PreviewLayout with the paper centered in the box
    """
    scale = min(box_width / result.paper_width, box_height / result.paper_height)
    paper_w = result.paper_width * scale
    paper_h = result.paper_height * scale
    paper = Rect(
        x=(box_width - paper_w) / 2,
        y=(box_height - paper_h) / 2,
        width=paper_w,
        height=paper_h,
    )

    print_area = Rect(
        x=paper["x"] + paper_w * result.left_border_percent / 100,
        y=paper["y"] + paper_h * result.top_border_percent / 100,
        width=paper_w * result.print_width_percent / 100,
        height=paper_h * result.print_height_percent / 100,
    )

    t = result.blade_thickness if blade_thickness is None else blade_thickness
    blades = [
        Rect(x=print_area["x"] - t, y=paper["y"], width=t, height=paper_h),
        Rect(x=print_area["x"] + print_area["width"], y=paper["y"], width=t, height=paper_h),
        Rect(x=paper["x"], y=print_area["y"] - t, width=paper_w, height=t),
        Rect(x=paper["x"], y=print_area["y"] + print_area["height"], width=paper_w, height=t),
    ]
    blades = [_clip(blade, paper) for blade in blades]
    return PreviewLayout(paper=paper, print_area=print_area, blades=blades)


def _clip(rect: Rect, bounds: Rect) -> Rect:
    x0 = max(rect["x"], bounds["x"])
    y0 = max(rect["y"], bounds["y"])
    x1 = min(rect["x"] + rect["width"], bounds["x"] + bounds["width"])
    y1 = min(rect["y"] + rect["height"], bounds["y"] + bounds["height"])
    return Rect(x=x0, y=y0, width=max(x1 - x0, 0.0), height=max(y1 - y0, 0.0))


def _box(rect: Rect, offset: float = 0.0) -> tuple[float, float, float, float]:
    x0 = rect["x"] + offset
    y0 = rect["y"] + offset
    return (x0, y0, x0 + rect["width"], y0 + rect["height"])


def render_preview_png(result: CalculationResult, output_path: str) -> None:
    """Draw the easel preview as a PNG.

    Args:
        result: Calculation result to draw
        output_path: Where to save the PNG

    Note:
        The longest paper side is PREVIEW_WIDTH_PX wide; blades are drawn
        outside the print edges so the print area stays visible.
    """
    scale = PREVIEW_WIDTH_PX / max(result.paper_width, result.paper_height)
    width_px = int(round(result.paper_width * scale)) + 2 * PREVIEW_MARGIN_PX
    height_px = int(round(result.paper_height * scale)) + 2 * PREVIEW_MARGIN_PX

    layout = preview_layout(
        result, width_px - 2 * PREVIEW_MARGIN_PX, height_px - 2 * PREVIEW_MARGIN_PX
    )

    img = Image.new("RGB", (width_px, height_px), color=BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)
    draw.rectangle(_box(layout["paper"], PREVIEW_MARGIN_PX), fill=PAPER_COLOR, outline=BLADE_COLOR)
    for blade in layout["blades"]:
        draw.rectangle(_box(blade, PREVIEW_MARGIN_PX), fill=BLADE_COLOR)
    if layout["print_area"]["width"] > 0 and layout["print_area"]["height"] > 0:
        draw.rectangle(_box(layout["print_area"], PREVIEW_MARGIN_PX), fill=PRINT_COLOR)

    output_path_obj = Path(output_path)
    output_path_obj.parent.mkdir(parents=True, exist_ok=True)
    img.save(output_path_obj, "PNG")
    logger.info(f"Saved preview to {output_path}")


def _sheet_lines(result: CalculationResult, unit: str) -> list[str]:
    lines = [
        f"Paper: {format_length(result.paper_width, unit)} x "
        f"{format_length(result.paper_height, unit)}"
        f" ({'landscape' if result.is_landscape else 'portrait'})",
        f"Print: {format_length(result.print_width, unit)} x "
        f"{format_length(result.print_height, unit)}",
        f"Minimum border: {format_length(result.min_border, unit)}",
        "",
        f"Left blade: {format_length(result.left_blade_reading, unit)}",
        f"Right blade: {format_length(result.right_blade_reading, unit)}",
        f"Top blade: {format_length(result.top_blade_reading, unit)}",
        f"Bottom blade: {format_length(result.bottom_blade_reading, unit)}",
    ]
    if result.easel_size_label:
        lines.append(f"Easel slot: {result.easel_size_label}")
    if result.warnings:
        lines.append("")
        lines.extend(f"Warning: {warning}" for warning in result.warnings)
    return lines


def render_pdf(
    result: CalculationResult,
    output_path: str,
    unit: str = "in",
    title: str = "Easel blade setup",
) -> None:
    """Generate a one-page setup sheet with preview and blade readings.

    Args:
        result: Calculation result to print
        output_path: Where to save the generated PDF
        unit: Display unit for lengths ("in" or "cm")
        title: Heading printed at the top of the sheet

    Raises:
        ValueError: If unit is not supported
    """
    page_w_in, page_h_in = SHEET_PAGE_SIZE_IN
    lines = _sheet_lines(result, unit)

    output_path_obj = Path(output_path)
    output_path_obj.parent.mkdir(parents=True, exist_ok=True)

    c = canvas.Canvas(
        str(output_path),
        pagesize=(page_w_in * reportlab_inch, page_h_in * reportlab_inch),
    )

    x_pt, y_pt = in_to_pdf_coords(SHEET_MARGIN_IN, SHEET_MARGIN_IN, page_h_in)
    c.setFont("Helvetica-Bold", 16)
    c.drawString(x_pt, y_pt, title)

    # Preview box sits under the title, centered horizontally
    box_top_in = SHEET_MARGIN_IN + 0.5
    box_left_in = (page_w_in - SHEET_PREVIEW_BOX_IN) / 2
    layout = preview_layout(
        result,
        SHEET_PREVIEW_BOX_IN,
        SHEET_PREVIEW_BOX_IN,
        blade_thickness=result.blade_thickness / SHEET_PX_PER_IN,
    )

    def draw_rect(rect: Rect, fill_rgb: tuple[int, int, int], stroke: bool = False) -> None:
        x, y = in_to_pdf_coords(
            box_left_in + rect["x"], box_top_in + rect["y"] + rect["height"], page_h_in
        )
        c.setFillColorRGB(*(channel / 255 for channel in fill_rgb))
        c.rect(
            x,
            y,
            rect["width"] * reportlab_inch,
            rect["height"] * reportlab_inch,
            stroke=1 if stroke else 0,
            fill=1,
        )

    draw_rect(layout["paper"], PAPER_COLOR, stroke=True)
    for blade in layout["blades"]:
        draw_rect(blade, BLADE_COLOR)
    if layout["print_area"]["width"] > 0 and layout["print_area"]["height"] > 0:
        draw_rect(layout["print_area"], PRINT_COLOR)

    c.setFillColorRGB(0, 0, 0)
    c.setFont("Helvetica", 11)
    line_top_in = box_top_in + SHEET_PREVIEW_BOX_IN + 0.5
    for i, line in enumerate(lines):
        x_pt, y_pt = in_to_pdf_coords(SHEET_MARGIN_IN, line_top_in + i * 0.25, page_h_in)
        c.drawString(x_pt, y_pt, line)

    c.showPage()
    c.save()
    logger.info(f"Saved setup sheet to {output_path}")


def render(result: CalculationResult, output_path: str, unit: str = "in") -> None:
    """Render to PDF or PNG depending on the output file extension.

    Raises:
        ValueError: If the extension is neither .pdf nor .png
    """
    suffix = Path(output_path).suffix.lower()
    if suffix == ".pdf":
        render_pdf(result, output_path, unit=unit)
    elif suffix == ".png":
        render_preview_png(result, output_path)
    else:
        raise ValueError(f"Unsupported output format: {suffix or output_path}")
