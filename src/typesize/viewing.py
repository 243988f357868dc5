"""Viewing distance analysis.

Recommended distances depend only on the screen. Apparent metrics scale
the physical type size by the viewing distance, relative to an 18-inch
reading distance (calibration figure 108), and are only produced for a
positive distance.
"""

import math
from dataclasses import dataclass

from typesize.geometry import usable_ppi

MIN_DISTANCE_FACTOR = 80
MAX_RESOLUTION_FACTOR = 412
THX_RATIO = 0.84
APPARENT_CALIBRATION = 108


@dataclass(frozen=True)
class RecommendedDistances:
    """Recommended viewing distances in feet."""

    min_ft: float  # closer than this, individual pixels are visible
    max_res_ft: float  # farther than this, full detail is lost
    ideal_ft: float


@dataclass(frozen=True)
class ApparentMetrics:
    """Type metrics as perceived at a viewing distance."""

    apparent_ppi: float
    apparent_size_pt: float


def compute_recommended_distances(ppi: float, diagonal_in: float) -> RecommendedDistances:
    """Compute recommended viewing distances for a screen.

    Args:
        ppi: Screen pixel density; DEFAULT_PPI is used if not finite and positive
        diagonal_in: Screen diagonal in inches

    Returns:
        RecommendedDistances in feet
    """
    ppi = usable_ppi(ppi)
    return RecommendedDistances(
        min_ft=MIN_DISTANCE_FACTOR / ppi,
        max_res_ft=MAX_RESOLUTION_FACTOR / ppi,
        ideal_ft=diagonal_in / (THX_RATIO * 12),
    )


def is_usable_distance(view_dist_ft: float | None) -> bool:
    """Whether a viewing distance can be used for apparent metrics."""
    return view_dist_ft is not None and math.isfinite(view_dist_ft) and view_dist_ft > 0


def compute_apparent_metrics(
    size_pt: float,
    ppi: float,
    view_dist_ft: float | None = None,
) -> ApparentMetrics | None:
    """Compute apparent PPI and type size at a viewing distance.

    Args:
        size_pt: Physical type size in points
        ppi: Screen pixel density; DEFAULT_PPI is used if not finite and positive
        view_dist_ft: Viewing distance in feet, or None if unset

    Returns:
        ApparentMetrics, or None when the distance is unset or not positive
    """
    if not is_usable_distance(view_dist_ft):
        return None
    apparent_ppi = usable_ppi(ppi) * view_dist_ft
    return ApparentMetrics(
        apparent_ppi=apparent_ppi,
        apparent_size_pt=(size_pt * APPARENT_CALIBRATION) / apparent_ppi,
    )
