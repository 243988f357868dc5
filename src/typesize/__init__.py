"""type-size-calculator: Physical and apparent type size for on-screen typography."""

__version__ = "0.1.0"

from typesize.calculator import TypeSizeReport, calculate
from typesize.compliance import evaluate_compliance
from typesize.geometry import ScreenSpec, resolve_geometry
from typesize.presets import CalculatorState, apply_preset, revert_to_custom
from typesize.typography import TypographySpec, compute_typography_metrics
from typesize.viewing import compute_apparent_metrics, compute_recommended_distances

__all__ = [
    "__version__",
    "apply_preset",
    "calculate",
    "CalculatorState",
    "compute_apparent_metrics",
    "compute_recommended_distances",
    "compute_typography_metrics",
    "evaluate_compliance",
    "resolve_geometry",
    "revert_to_custom",
    "ScreenSpec",
    "TypeSizeReport",
    "TypographySpec",
]
