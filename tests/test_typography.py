"""Tests for the typography module."""

import math

import pytest

from typesize.geometry import ScreenSpec, compute_ppi
from typesize.typography import TypographySpec, compute_typography_metrics


class TestComputeTypographyMetrics:
    """Tests for compute_typography_metrics."""

    def test_at_96_ppi(self) -> None:
        """Test that 16px at 96 PPI is exactly 12pt."""
        size = compute_typography_metrics(TypographySpec(16, "Roboto"), 96, 0.5)
        assert size.size_pt == 12.0
        assert size.size_mm == pytest.approx(4.2333, abs=1e-4)
        assert size.x_height_mm == pytest.approx(2.117, abs=1e-3)

    def test_on_24_inch_monitor(self, hd_24: ScreenSpec) -> None:
        """Test 16px on a 24-inch 1080p monitor."""
        size = compute_typography_metrics(TypographySpec(16, "Roboto"), compute_ppi(hd_24), 0.53)
        assert size.size_pt == pytest.approx(12.55, abs=0.01)

    def test_x_height_scales_with_ratio(self) -> None:
        """Test that the x-height is the em size times the ratio."""
        size = compute_typography_metrics(TypographySpec(24, "Verdana"), 100, 0.55)
        assert size.x_height_mm == pytest.approx(size.size_mm * 0.55)

    def test_monotonic_in_design_size(self) -> None:
        """Test that a larger design size gives a larger physical size."""
        sizes = [
            compute_typography_metrics(TypographySpec(px, "Inter"), 91.79, 0.55)
            for px in (8, 12, 16, 24, 48)
        ]
        for smaller, larger in zip(sizes, sizes[1:]):
            assert larger.size_pt > smaller.size_pt
            assert larger.size_mm > smaller.size_mm

    def test_idempotent(self) -> None:
        """Test that identical input gives identical output."""
        spec = TypographySpec(16, "Lato")
        assert compute_typography_metrics(spec, 91.79, 0.51) == compute_typography_metrics(
            spec, 91.79, 0.51
        )

    def test_unusable_ppi_falls_back(self) -> None:
        """Test that zero, negative and NaN densities use 96 PPI."""
        spec = TypographySpec(16, "Roboto")
        for ppi in (0, -50, math.nan, math.inf):
            size = compute_typography_metrics(spec, ppi, 0.5)
            assert size.size_pt == 12.0
            assert math.isfinite(size.size_mm)
            assert math.isfinite(size.x_height_mm)
