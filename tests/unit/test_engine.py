"""Unit tests for easel/engine.py."""

import math

import pytest

from easel.engine import calculate
from easel.validation import CalculationResult, CalculatorInput, Dimensions


def _readings(result: CalculationResult) -> list[float]:
    return list(result.blade_readings.values())


class TestCalculateScenarios:
    """Worked examples on common darkroom setups."""

    def test_35mm_on_landscape_8x10(self) -> None:
        """Test 3:2 on landscape 8x10 with a half-inch border."""
        result = calculate(CalculatorInput())

        assert result.paper_width == 10
        assert result.paper_height == 8
        assert result.is_landscape is True
        assert result.print_width == pytest.approx(9.0)
        assert result.print_height == pytest.approx(6.0)
        assert result.left_blade_reading == pytest.approx(0.5)
        assert result.right_blade_reading == pytest.approx(0.5)
        assert result.top_blade_reading == pytest.approx(1.0)
        assert result.bottom_blade_reading == pytest.approx(1.0)
        assert result.warnings == []

    def test_35mm_on_portrait_8x10(self) -> None:
        """Test 3:2 on manually-portrait 8x10."""
        result = calculate(
            CalculatorInput(is_landscape=False, has_manually_flipped_paper=True)
        )

        assert result.is_landscape is False
        assert result.print_width == pytest.approx(7.0)
        assert result.print_height == pytest.approx(14 / 3)
        assert result.left_border == pytest.approx(0.5)
        assert result.top_border == pytest.approx((10 - 14 / 3) / 2)

    def test_portrait_flag_without_manual_flip(self) -> None:
        """Test that a stored portrait orientation is honoured as is."""
        result = calculate(CalculatorInput(paper_size="8x10", is_landscape=False))

        assert result.paper_width == 8
        assert result.paper_height == 10
        assert result.is_landscape is False

    def test_percentages(self) -> None:
        """Test that preview percentages follow the oriented paper."""
        result = calculate(CalculatorInput())

        assert result.print_width_percent == pytest.approx(90.0)
        assert result.print_height_percent == pytest.approx(75.0)
        assert result.left_border_percent == pytest.approx(5.0)
        assert result.top_border_percent == pytest.approx(12.5)

    def test_blade_thickness(self) -> None:
        """Test that blade thickness comes from the paper area."""
        assert calculate(CalculatorInput()).blade_thickness == 30
        assert calculate(CalculatorInput(paper_size="20x24")).blade_thickness == 15

    def test_easel_fields_for_standard_paper(self) -> None:
        """Test that standard paper reports its own slot."""
        result = calculate(CalculatorInput())

        assert result.is_non_standard_paper_size is False
        assert result.easel_size_label == "8x10"
        assert result.easel_size == Dimensions(width=8, height=10)
        assert result.paper_size_warning is None


class TestCalculateInvariants:
    """Properties every calculation must hold."""

    @pytest.mark.parametrize(
        "calculator_input",
        [
            CalculatorInput(),
            CalculatorInput(paper_size="11x14", aspect_ratio="65:24", min_border=0.8),
            CalculatorInput(aspect_ratio="1:1", is_ratio_flipped=True, min_border=0.3),
            CalculatorInput(
                paper_size="custom",
                custom_paper_width=9.5,
                custom_paper_height=12,
                aspect_ratio="custom",
                custom_aspect_width=5,
                custom_aspect_height=7,
            ),
        ],
    )
    def test_aspect_and_fill(self, calculator_input: CalculatorInput) -> None:
        """Test ratio preservation and that borders plus print fill the paper."""
        result = calculate(calculator_input)
        paper = Dimensions(width=result.paper_width, height=result.paper_height)

        assert (
            result.left_border + result.print_width + result.right_border
            == pytest.approx(paper.width)
        )
        assert (
            result.top_border + result.print_height + result.bottom_border
            == pytest.approx(paper.height)
        )
        assert min(_readings(result)) >= result.min_border - 1e-9

    def test_ratio_preserved(self) -> None:
        """Test that the print keeps the named ratio."""
        result = calculate(CalculatorInput(paper_size="16x20", aspect_ratio="16:9"))
        assert result.print_width / result.print_height == pytest.approx(16 / 9)

    def test_idempotent(self) -> None:
        """Test that the same input always gives the same result."""
        calculator_input = CalculatorInput(
            aspect_ratio="4:3", enable_offset=True, horizontal_offset=0.2, vertical_offset=-0.4
        )
        assert calculate(calculator_input) == calculate(calculator_input)

    def test_symmetric_without_offsets(self) -> None:
        """Test that offsets are ignored while disabled."""
        result = calculate(CalculatorInput(horizontal_offset=0.3, vertical_offset=0.3))

        assert result.left_border == pytest.approx(result.right_border)
        assert result.top_border == pytest.approx(result.bottom_border)
        assert result.offset_warning is None

    def test_even_borders_equal_percentages(self) -> None:
        """Test that even borders give the same percentage on every edge."""
        result = calculate(CalculatorInput(aspect_ratio="even-borders"))

        assert result.print_width == pytest.approx(8.75)
        assert result.print_height == pytest.approx(7.0)
        assert result.left_border_percent == pytest.approx(result.top_border_percent)
        assert result.right_border_percent == pytest.approx(result.bottom_border_percent)


class TestCalculateOffsets:
    """Tests for offset handling."""

    def test_offset_applied(self) -> None:
        """Test that a positive vertical offset moves the print down."""
        result = calculate(
            CalculatorInput(enable_offset=True, vertical_offset=0.3)
        )

        assert result.clamped_vertical_offset == pytest.approx(0.3)
        assert result.top_blade_reading == pytest.approx(1.3)
        assert result.bottom_blade_reading == pytest.approx(0.7)
        assert result.offset_warning is None

    def test_positive_horizontal_offset_moves_print_left(self) -> None:
        """Test that a positive horizontal offset shrinks the left border."""
        result = calculate(
            CalculatorInput(aspect_ratio="1:1", enable_offset=True, horizontal_offset=0.3)
        )

        assert result.clamped_horizontal_offset == pytest.approx(0.3)
        assert result.left_blade_reading == pytest.approx(1.2)
        assert result.right_blade_reading == pytest.approx(1.8)
        assert result.offset_warning is None

    def test_negative_horizontal_offset_moves_print_right(self) -> None:
        """Test that a negative horizontal offset grows the left border."""
        result = calculate(
            CalculatorInput(aspect_ratio="1:1", enable_offset=True, horizontal_offset=-0.3)
        )

        assert result.left_blade_reading == pytest.approx(1.8)
        assert result.right_blade_reading == pytest.approx(1.2)

    def test_offset_clamped_exactly(self) -> None:
        """Test that a clamped side sits exactly on the minimum border."""
        result = calculate(
            CalculatorInput(enable_offset=True, vertical_offset=0.8)
        )

        assert result.bottom_blade_reading == 0.5
        assert result.clamped_vertical_offset == pytest.approx(0.5)
        assert result.offset_warning == "Vertical offset adjusted to honour the minimum border."

    def test_ignore_min_border_reaches_edge(self) -> None:
        """Test that ignoring the border allows a zero reading with a blade warning."""
        result = calculate(
            CalculatorInput(
                enable_offset=True, ignore_min_border=True, horizontal_offset=0.6
            )
        )

        assert result.left_blade_reading == 0.0
        assert result.right_blade_reading == pytest.approx(1.0)
        assert result.offset_warning == "Horizontal offset adjusted to keep the print on the paper."
        assert result.blade_warning is not None

    def test_non_finite_offset_ignored(self) -> None:
        """Test that a NaN offset is treated as zero."""
        result = calculate(
            CalculatorInput(enable_offset=True, horizontal_offset=math.nan)
        )

        assert result.clamped_horizontal_offset == 0.0
        assert result.left_border == pytest.approx(result.right_border)


class TestCalculateWarnings:
    """Tests for degenerate input and warnings."""

    def test_border_too_large_keeps_last_valid(self) -> None:
        """Test that an unusable border gives a zero-area print and echoes last valid."""
        result = calculate(CalculatorInput(min_border=4.5), last_valid_min_border=0.75)

        assert result.print_width == 0
        assert result.print_height == 0
        assert result.min_border_warning is not None
        assert result.last_valid_min_border == 0.75

    def test_last_valid_follows_chained_edits(self) -> None:
        """Test growing the border until no area is left, feeding back last valid."""
        last_valid = 0.5
        results = []
        for min_border in (0.5, 3.5, 4.0, 4.5):
            result = calculate(
                CalculatorInput(paper_size="8x10", aspect_ratio="3:2", min_border=min_border),
                last_valid_min_border=last_valid,
            )
            last_valid = result.last_valid_min_border
            results.append(result)

        assert [r.min_border_warning is None for r in results] == [True, True, False, False]
        assert results[1].last_valid_min_border == 3.5
        assert results[2].last_valid_min_border == 3.5
        assert results[3].last_valid_min_border == 3.5
        assert results[3].print_width == 0

    def test_valid_border_updates_last_valid(self) -> None:
        """Test that a usable border becomes the last valid value."""
        result = calculate(CalculatorInput(min_border=0.6), last_valid_min_border=0.75)
        assert result.last_valid_min_border == 0.6

    def test_negative_border_clamped(self) -> None:
        """Test that a negative border is used as zero with a warning."""
        result = calculate(CalculatorInput(min_border=-1))

        assert result.min_border == 0
        assert result.print_width == pytest.approx(10.0)
        assert result.min_border_warning is not None
        assert result.blade_warning is not None

    def test_blade_threshold_override(self) -> None:
        """Test that the blade warning threshold is configurable."""
        calculator_input = CalculatorInput(min_border=0.2)

        assert calculate(calculator_input).blade_warning is None
        assert calculate(calculator_input, blade_warning_threshold=0.25).blade_warning is not None

    def test_non_standard_custom_paper(self) -> None:
        """Test that 5.1x7.1 paper is placed in the 8x10 slot."""
        result = calculate(
            CalculatorInput(paper_size="custom", custom_paper_width=5.1, custom_paper_height=7.1)
        )

        assert result.is_non_standard_paper_size is True
        assert result.easel_size_label == "8x10"
        assert result.paper_size_warning is not None

    def test_postcard_is_non_standard(self) -> None:
        """Test that catalog postcard paper is flagged non-standard."""
        result = calculate(CalculatorInput(paper_size="3.875x5.875"))

        assert result.is_non_standard_paper_size is True
        assert result.easel_size_label == "5x7"

    def test_oversize_paper(self) -> None:
        """Test that paper larger than every easel has no slot."""
        result = calculate(
            CalculatorInput(paper_size="custom", custom_paper_width=30, custom_paper_height=40)
        )

        assert result.easel_size_label is None
        assert result.easel_size is None
        assert "exceeds" in result.paper_size_warning

    def test_zero_custom_paper_does_not_raise(self) -> None:
        """Test that zero custom paper yields warnings rather than an exception."""
        result = calculate(
            CalculatorInput(paper_size="custom", custom_paper_width=0, custom_paper_height=0)
        )

        assert result.print_width == 0
        assert result.min_border_warning is not None

    def test_warning_order(self) -> None:
        """Test that warnings are listed border first."""
        result = calculate(
            CalculatorInput(
                paper_size="custom",
                custom_paper_width=5.1,
                custom_paper_height=7.1,
                min_border=-1,
            )
        )

        assert result.warnings[0] == result.min_border_warning
        assert result.warnings[-1] == result.paper_size_warning
