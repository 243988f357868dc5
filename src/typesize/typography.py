"""Physical type size from a design size in pixels and screen density."""

from dataclasses import dataclass

from typesize.geometry import usable_ppi

POINTS_PER_INCH = 72
MM_PER_INCH = 25.4


@dataclass(frozen=True)
class TypographySpec:
    """Type as specified in a design tool."""

    design_size_px: float
    font_id: str


@dataclass(frozen=True)
class PhysicalSize:
    """Type size as rendered on a physical screen."""

    size_pt: float  # full em square
    size_mm: float
    x_height_mm: float


def compute_typography_metrics(
    spec: TypographySpec,
    ppi: float,
    x_height_ratio: float,
) -> PhysicalSize:
    """Convert a design size in pixels to physical points and millimeters.

    Args:
        spec: Design size and font
        ppi: Screen pixel density; DEFAULT_PPI is used if not finite and positive
        x_height_ratio: Font x-height as a fraction of the em square

    Returns:
        PhysicalSize of the type on screen
    """
    inches = spec.design_size_px / usable_ppi(ppi)
    size_mm = inches * MM_PER_INCH
    return PhysicalSize(
        size_pt=inches * POINTS_PER_INCH,
        size_mm=size_mm,
        x_height_mm=size_mm * x_height_ratio,
    )
