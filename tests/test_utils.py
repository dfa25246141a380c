"""Unit tests for utility functions."""

from decimal import Decimal

from projectsapp.utils import to_hours


class TestToHours:
    """Test cases for to_hours()."""

    def test_pads_whole_numbers(self):
        """Test whole numbers get two fractional digits."""
        assert str(to_hours(Decimal("10"))) == "10.00"

    def test_rounds_half_up(self):
        """Test extra digits are rounded half-up."""
        assert str(to_hours(Decimal("2.345"))) == "2.35"
        assert str(to_hours(Decimal("2.344"))) == "2.34"

    def test_accepts_strings_and_numbers(self):
        """Test strings, ints and floats are converted."""
        assert to_hours("1.5") == Decimal("1.50")
        assert to_hours(3) == Decimal("3.00")
        assert to_hours(0.1) == Decimal("0.10")

    def test_returns_none_for_none(self):
        """Test returns None when input is None."""
        assert to_hours(None) is None
