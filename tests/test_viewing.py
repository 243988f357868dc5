"""Tests for the viewing distance module."""

import math

import pytest

from typesize.viewing import (
    ApparentMetrics,
    compute_apparent_metrics,
    compute_recommended_distances,
)


class TestRecommendedDistances:
    """Tests for compute_recommended_distances."""

    def test_formulas(self) -> None:
        """Test the three distance formulas."""
        distances = compute_recommended_distances(80, 55)
        assert distances.min_ft == 1.0
        assert distances.max_res_ft == 412 / 80
        assert distances.ideal_ft == 55 / (0.84 * 12)

    def test_uhd_55(self) -> None:
        """Test distances for a 55-inch 4K TV."""
        distances = compute_recommended_distances(80.11, 55)
        assert distances.min_ft == pytest.approx(1.0, abs=0.01)
        assert distances.max_res_ft == pytest.approx(5.14, abs=0.01)
        assert distances.ideal_ft == pytest.approx(5.46, abs=0.01)


class TestApparentMetrics:
    """Tests for compute_apparent_metrics."""

    def test_unset_distance(self) -> None:
        """Test that no distance gives no metrics."""
        assert compute_apparent_metrics(12.0, 96) is None
        assert compute_apparent_metrics(12.0, 96, None) is None

    def test_zero_and_negative_distance(self) -> None:
        """Test that non-positive distances give no metrics."""
        assert compute_apparent_metrics(12.0, 96, 0) is None
        assert compute_apparent_metrics(12.0, 96, -3) is None

    def test_positive_distance(self) -> None:
        """Test the apparent PPI and size at 2 feet."""
        metrics = compute_apparent_metrics(12.0, 96, 2)
        assert isinstance(metrics, ApparentMetrics)
        assert metrics.apparent_ppi == 192
        assert metrics.apparent_size_pt == (12.0 * 108) / 192

    def test_zero_size_still_reported(self) -> None:
        """Test that a zero size is reported rather than dropped."""
        metrics = compute_apparent_metrics(0.0, 96, 2)
        assert metrics is not None
        assert metrics.apparent_size_pt == 0.0

    def test_nan_distance(self) -> None:
        """Test that a non-finite distance gives no metrics."""
        assert compute_apparent_metrics(12.0, 96, math.nan) is None
        assert compute_apparent_metrics(12.0, 96, math.inf) is None

    def test_unusable_ppi_falls_back(self) -> None:
        """Test that zero, negative and NaN densities use 96 PPI."""
        for ppi in (0, -80, math.nan):
            metrics = compute_apparent_metrics(12.0, ppi, 2)
            assert metrics == compute_apparent_metrics(12.0, 96, 2)
            assert metrics.apparent_ppi == 192


class TestRecommendedDistancesFallback:
    """Tests for recommended distances with unusable densities."""

    def test_unusable_ppi_falls_back(self) -> None:
        """Test that zero, negative and NaN densities use 96 PPI."""
        for ppi in (0, -80, math.nan):
            distances = compute_recommended_distances(ppi, 24)
            assert distances.min_ft == 80 / 96
            assert distances.max_res_ft == 412 / 96
            assert distances.ideal_ft == 24 / (0.84 * 12)
