"""Unit tests for easel/catalog.py."""

import pytest

from easel.catalog import (
    ASPECT_RATIO_CHOICES,
    DEFAULT_PRESETS,
    EASEL_SIZES,
    PAPER_SIZE_CHOICES,
    PAPER_SIZES,
    find_easel_slot,
    get_aspect_ratio,
    get_paper_size,
    is_standard_size,
)


class TestCatalogData:
    """Tests for the static reference tables."""

    def test_paper_sizes_stored_portrait(self) -> None:
        """Test that every catalog paper is stored with width <= height."""
        for paper in PAPER_SIZES.values():
            assert paper.width_in <= paper.height_in

    def test_postcard_is_not_standard(self) -> None:
        """Test that the postcard size has no easel slot."""
        assert PAPER_SIZES["3.875x5.875"].is_standard is False
        assert PAPER_SIZES["8x10"].is_standard is True

    def test_easel_sizes_sorted_by_area(self) -> None:
        """Test that easel slots run from smallest to largest."""
        labels = [easel.label for easel in EASEL_SIZES]
        assert labels == ["5x7", "8x10", "11x14", "16x20", "20x24"]

    def test_choices_include_sentinels(self) -> None:
        """Test that custom and even-borders are offered as choices."""
        assert "custom" in PAPER_SIZE_CHOICES
        assert "even-borders" in ASPECT_RATIO_CHOICES
        assert "custom" in ASPECT_RATIO_CHOICES

    def test_default_preset_keys_are_camel_case(self) -> None:
        """Test the built-in preset uses the saved-settings key shape."""
        preset = DEFAULT_PRESETS["35mm-on-8x10"]
        assert preset["paperSize"] == "8x10"
        assert preset["minBorder"] == 0.5


class TestLookups:
    """Tests for get_paper_size and get_aspect_ratio."""

    def test_get_paper_size(self) -> None:
        """Test looking up a known paper size."""
        paper = get_paper_size("11x14")
        assert paper.width_in == 11
        assert paper.height_in == 14

    def test_unknown_paper_size_raises(self) -> None:
        """Test that an unknown paper size raises KeyError."""
        with pytest.raises(KeyError, match="Unknown paper size"):
            get_paper_size("A4")

    def test_get_aspect_ratio(self) -> None:
        """Test looking up a known aspect ratio."""
        ratio = get_aspect_ratio("65:24")
        assert ratio.width_units == 65
        assert ratio.height_units == 24

    def test_sentinel_is_not_an_entry(self) -> None:
        """Test that even-borders is not a catalog ratio entry."""
        with pytest.raises(KeyError, match="Unknown aspect ratio"):
            get_aspect_ratio("even-borders")


class TestEaselSlots:
    """Tests for is_standard_size and find_easel_slot."""

    def test_standard_in_either_orientation(self) -> None:
        """Test that standard detection ignores orientation."""
        assert is_standard_size(8, 10)
        assert is_standard_size(10, 8)

    def test_near_standard_is_not_standard(self) -> None:
        """Test that 5.1x7.1 does not count as 5x7."""
        assert not is_standard_size(5.1, 7.1)

    def test_find_slot_exact(self) -> None:
        """Test that a standard sheet goes in its own slot."""
        slot = find_easel_slot(7, 5)
        assert slot is not None
        assert slot.label == "5x7"

    def test_find_slot_next_size_up(self) -> None:
        """Test that a slightly oversize sheet goes in the next slot."""
        slot = find_easel_slot(5.1, 7.1)
        assert slot is not None
        assert slot.label == "8x10"

    def test_find_slot_rotated(self) -> None:
        """Test that a sheet may be rotated to fit a slot."""
        slot = find_easel_slot(13, 10)
        assert slot is not None
        assert slot.label == "11x14"

    def test_too_large_has_no_slot(self) -> None:
        """Test that paper larger than every easel has no slot."""
        assert find_easel_slot(30, 40) is None
