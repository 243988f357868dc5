"""Recompute every derived value from the calculator state."""

from dataclasses import dataclass
from functools import lru_cache

from typesize.catalogs import COMPLIANCE_REQUIREMENTS, FontMetrics, get_font
from typesize.compliance import (
    ComplianceResult,
    ComplianceStatus,
    compliance_status,
    evaluate_compliance,
)
from typesize.geometry import DerivedGeometry, resolve_geometry
from typesize.presets import CalculatorState
from typesize.typography import PhysicalSize, compute_typography_metrics
from typesize.viewing import (
    ApparentMetrics,
    RecommendedDistances,
    compute_apparent_metrics,
    compute_recommended_distances,
)


@dataclass(frozen=True)
class TypeSizeReport:
    """Full set of results for one calculator state."""

    state: CalculatorState
    font: FontMetrics
    geometry: DerivedGeometry
    physical: PhysicalSize
    distances: RecommendedDistances
    apparent: ApparentMetrics | None
    checks: tuple[ComplianceResult, ...]
    status: ComplianceStatus


@lru_cache(maxsize=128)
def calculate(state: CalculatorState) -> TypeSizeReport:
    """Run the full calculation chain for a state.

    Screen geometry feeds the typography metrics, which feed the viewing
    distance analysis and the compliance checks.

    Args:
        state: Current calculator inputs

    Returns:
        TypeSizeReport with every derived value
    """
    font = get_font(state.font_id)
    geometry = resolve_geometry(state.screen)
    physical = compute_typography_metrics(state.typography, geometry.ppi, font.x_height)
    return TypeSizeReport(
        state=state,
        font=font,
        geometry=geometry,
        physical=physical,
        distances=compute_recommended_distances(geometry.ppi, state.diagonal_in),
        apparent=compute_apparent_metrics(physical.size_pt, geometry.ppi, state.view_dist_ft),
        checks=tuple(evaluate_compliance(physical.size_pt, COMPLIANCE_REQUIREMENTS)),
        status=compliance_status(physical.size_pt, COMPLIANCE_REQUIREMENTS),
    )
