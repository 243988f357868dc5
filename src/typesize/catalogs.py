"""Reference catalogs: font x-height ratios, screen presets and compliance minimums."""

from dataclasses import dataclass

from typesize.compliance import ComplianceRequirement


@dataclass(frozen=True)
class FontMetrics:
    """X-height data for a font family."""

    name: str
    x_height: float
    label: str


@dataclass(frozen=True)
class ScreenPreset:
    """Display preset configuration."""

    name: str
    width_px: float
    height_px: float
    diagonal_in: float
    label: str
    assumes_viewing_distance: bool = False


GENERIC_FONT = "Other/Generic"
CUSTOM_PRESET = "custom"

FONT_DATA: dict[str, FontMetrics] = {
    "Roboto": FontMetrics("Roboto", 0.53, "Large"),
    "Inter": FontMetrics("Inter", 0.55, "Large"),
    "Open Sans": FontMetrics("Open Sans", 0.54, "Large"),
    "Lato": FontMetrics("Lato", 0.51, "Neutral"),
    "Montserrat": FontMetrics("Montserrat", 0.53, "Large"),
    "Arial": FontMetrics("Arial", 0.52, "Neutral"),
    "Helvetica": FontMetrics("Helvetica", 0.52, "Neutral"),
    "Times New Roman": FontMetrics("Times New Roman", 0.45, "Small"),
    "Georgia": FontMetrics("Georgia", 0.48, "Neutral"),
    "Verdana": FontMetrics("Verdana", 0.55, "Very Large"),
    "Merriweather": FontMetrics("Merriweather", 0.50, "Neutral"),
    "Playfair Display": FontMetrics("Playfair Display", 0.45, "Small"),
    GENERIC_FONT: FontMetrics(GENERIC_FONT, 0.50, "Standard"),
}

SCREEN_PRESETS: dict[str, ScreenPreset] = {
    CUSTOM_PRESET: ScreenPreset(
        name="Custom",
        width_px=1920,
        height_px=1080,
        diagonal_in=24,
        label="Custom Input",
    ),
    "hd-27": ScreenPreset(
        name='27" HD Monitor',
        width_px=1920,
        height_px=1080,
        diagonal_in=27,
        label='27" HD Monitor (1080p)',
        assumes_viewing_distance=True,
    ),
    "hd-32": ScreenPreset(
        name='32" HD Monitor',
        width_px=1920,
        height_px=1080,
        diagonal_in=32,
        label='32" HD Monitor (1080p)',
        assumes_viewing_distance=True,
    ),
    "4k-55": ScreenPreset(
        name='55" 4K TV',
        width_px=3840,
        height_px=2160,
        diagonal_in=55,
        label='55" 4K Monitor (4K)',
        assumes_viewing_distance=True,
    ),
    "4k-65": ScreenPreset(
        name='65" 4K TV',
        width_px=3840,
        height_px=2160,
        diagonal_in=65,
        label='65" 4K Monitor (4K)',
        assumes_viewing_distance=True,
    ),
}

# Only the touch-interactive minimum is tracked.
COMPLIANCE_REQUIREMENTS: tuple[ComplianceRequirement, ...] = (
    ComplianceRequirement(
        name="Touch Interactives",
        required_pt=21,
        assumed_distance_ft=2,
        description="Minimum required physical size for interactive text.",
    ),
)


def get_font(name: str) -> FontMetrics:
    """Look up a font by name.

    Args:
        name: Font family name (e.g., "Roboto", "Times New Roman")

    Returns:
        FontMetrics for the font, or the generic entry if the name is unknown
    """
    return FONT_DATA.get(name, FONT_DATA[GENERIC_FONT])


def font_x_height(name: str) -> float:
    """Return the x-height ratio for a font, 0.5 for unknown fonts."""
    return get_font(name).x_height


def get_preset(preset_id: str) -> ScreenPreset:
    """Look up a screen preset by id.

    Args:
        preset_id: Preset id (e.g., "hd-27", "4k-55")

    Returns:
        ScreenPreset configuration, or the custom entry if the id is unknown
    """
    return SCREEN_PRESETS.get(preset_id, SCREEN_PRESETS[CUSTOM_PRESET])


def x_height_insight(label: str) -> str:
    """Describe how a font's x-height label affects legibility."""
    if label == "Small":
        return (
            "This font has short lowercase letters. "
            "It will appear visually smaller than standard fonts."
        )
    if label in ("Large", "Very Large"):
        return "This font has tall lowercase letters, making it highly legible at smaller sizes."
    return "This font has standard proportions."
