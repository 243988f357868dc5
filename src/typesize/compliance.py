"""Check physical type size against minimum-size requirements."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ComplianceRequirement:
    """A minimum physical type size."""

    name: str
    required_pt: float
    assumed_distance_ft: float
    description: str


@dataclass(frozen=True)
class ComplianceResult:
    """Outcome of checking one requirement."""

    requirement: ComplianceRequirement
    measured_pt: float
    passed: bool


@dataclass(frozen=True)
class ComplianceStatus:
    """Overall verdict against the primary requirement."""

    compliant: bool
    status: str
    message: str
    detail: str


def evaluate_compliance(
    size_pt: float,
    requirements: Sequence[ComplianceRequirement],
) -> list[ComplianceResult]:
    """Check a physical size against each requirement, in order."""
    return [
        ComplianceResult(
            requirement=requirement,
            measured_pt=size_pt,
            passed=size_pt >= requirement.required_pt,
        )
        for requirement in requirements
    ]


def compliance_status(
    size_pt: float,
    requirements: Sequence[ComplianceRequirement],
) -> ComplianceStatus:
    """Reduce compliance to a single verdict on the first requirement.

    Args:
        size_pt: Physical type size in points
        requirements: Requirements in priority order

    Returns:
        ComplianceStatus for the primary requirement; non-compliant if
        there are no requirements
    """
    if not requirements:
        return ComplianceStatus(
            compliant=False,
            status="non-compliant",
            message="No compliance requirement",
            detail="There is no minimum size to check this type size against.",
        )

    primary = requirements[0]
    if size_pt >= primary.required_pt:
        return ComplianceStatus(
            compliant=True,
            status="compliant",
            message=f"ADA Compliant for {primary.name}",
            detail=(
                "This type size meets the minimum physical requirements for ADA compliant "
                f"{primary.name.lower().removesuffix('s')} elements."
            ),
        )
    return ComplianceStatus(
        compliant=False,
        status="non-compliant",
        message=f"Non-Compliant for {primary.name}",
        detail=(
            f"The required minimum size for {primary.name.lower()} is "
            f"{primary.required_pt:.0f} pt. This size fails the compliance check."
        ),
    )
