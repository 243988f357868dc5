"""Screen geometry: pixel density, aspect ratio and physical dimensions."""

import math
from dataclasses import dataclass

DEFAULT_PPI = 96.0


@dataclass(frozen=True)
class ScreenSpec:
    """Nominal screen resolution and diagonal size."""

    width_px: float
    height_px: float
    diagonal_in: float


@dataclass(frozen=True)
class DerivedGeometry:
    """Geometry derived from a ScreenSpec."""

    ppi: float
    aspect_ratio: tuple[int, int] | None  # None when not derivable
    width_in: float
    height_in: float

    @property
    def aspect_ratio_label(self) -> str:
        """Aspect ratio as "W:H", or "N/A"."""
        if self.aspect_ratio is None:
            return "N/A"
        return f"{self.aspect_ratio[0]}:{self.aspect_ratio[1]}"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def gcd(a: float, b: float) -> int:
    """Greatest common divisor of two values rounded to the nearest integer.

    gcd(a, 0) == |a|, so two zero-rounded values give 0. The result is
    never negative.
    """
    a, b = abs(_round_half_up(a)), abs(_round_half_up(b))
    while b:
        a, b = b, a % b
    return a


def usable_ppi(ppi: float) -> float:
    """Return ppi if finite and positive, else DEFAULT_PPI."""
    if not math.isfinite(ppi) or ppi <= 0:
        return DEFAULT_PPI
    return ppi


def compute_ppi(spec: ScreenSpec) -> float:
    """Pixels per inch along the diagonal, or DEFAULT_PPI if not finite and positive."""
    diagonal_px = math.sqrt(spec.width_px * spec.width_px + spec.height_px * spec.height_px)
    try:
        ppi = diagonal_px / spec.diagonal_in
    except ZeroDivisionError:
        return DEFAULT_PPI
    return usable_ppi(ppi)


def _usable(value: float) -> bool:
    return math.isfinite(value) and value > 0


def resolve_geometry(spec: ScreenSpec) -> DerivedGeometry:
    """Resolve pixel density, aspect ratio and physical size of a screen.

    Degenerate specs (any non-positive or non-finite field) report no
    aspect ratio and zero physical dimensions; the PPI then falls back
    to DEFAULT_PPI where it cannot be computed.

    Args:
        spec: Screen resolution and diagonal

    Returns:
        DerivedGeometry for the screen
    """
    ppi = compute_ppi(spec)

    if not all(_usable(v) for v in (spec.width_px, spec.height_px, spec.diagonal_in)):
        return DerivedGeometry(ppi=ppi, aspect_ratio=None, width_in=0.0, height_in=0.0)

    divisor = gcd(spec.width_px, spec.height_px)
    if divisor == 0:
        aspect_ratio = None
    else:
        aspect_ratio = (
            _round_half_up(spec.width_px) // divisor,
            _round_half_up(spec.height_px) // divisor,
        )

    # H = D / sqrt(r^2 + 1), W = r * H
    ratio = spec.width_px / spec.height_px
    height_in = spec.diagonal_in / math.sqrt(ratio * ratio + 1)
    width_in = ratio * height_in

    return DerivedGeometry(
        ppi=ppi,
        aspect_ratio=aspect_ratio,
        width_in=width_in,
        height_in=height_in,
    )
