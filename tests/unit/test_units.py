"""Unit tests for point/millimetre conversion."""

import pytest

from audiomark.core.units import mm_to_pt, pt_to_mm


class TestUnitConversion:
    """Tests for mm_to_pt and pt_to_mm."""

    def test_inch(self):
        """Test one inch in both directions."""
        assert mm_to_pt(25.4) == pytest.approx(72.0)
        assert pt_to_mm(72.0) == pytest.approx(25.4)

    def test_zero(self):
        """Test zero maps to zero."""
        assert mm_to_pt(0.0) == 0.0
        assert pt_to_mm(0.0) == 0.0

    def test_letter_page(self):
        """Test US Letter page size in points."""
        assert mm_to_pt(215.9) == pytest.approx(612.0)
        assert mm_to_pt(279.4) == pytest.approx(792.0)

    @pytest.mark.parametrize("value", [-3.5, 0.1, 10.0, 279.4])
    def test_inverse(self, value):
        """Test the conversions are inverses."""
        assert pt_to_mm(mm_to_pt(value)) == pytest.approx(value)
        assert mm_to_pt(pt_to_mm(value)) == pytest.approx(value)

    def test_symbol_size(self):
        """Test a 10pt symbol box side in millimetres."""
        assert pt_to_mm(10.0) == pytest.approx(3.527777, abs=1e-6)
