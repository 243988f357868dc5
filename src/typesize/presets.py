"""Preset selection and manual input transitions for calculator state.

Every transition is a pure function taking a CalculatorState and
returning a new one.
"""

import dataclasses
from dataclasses import dataclass

from typesize.catalogs import CUSTOM_PRESET, SCREEN_PRESETS, get_preset
from typesize.geometry import ScreenSpec
from typesize.typography import TypographySpec

PRESET_VIEWING_DISTANCE_FT = 2.0

_DEFAULT_SCREEN = SCREEN_PRESETS[CUSTOM_PRESET]


@dataclass(frozen=True)
class CalculatorState:
    """All user inputs to the calculator."""

    preset_id: str = CUSTOM_PRESET
    width_px: float = _DEFAULT_SCREEN.width_px
    height_px: float = _DEFAULT_SCREEN.height_px
    diagonal_in: float = _DEFAULT_SCREEN.diagonal_in
    design_size_px: float = 16
    font_id: str = "Roboto"
    view_dist_ft: float | None = None

    @property
    def screen(self) -> ScreenSpec:
        return ScreenSpec(self.width_px, self.height_px, self.diagonal_in)

    @property
    def typography(self) -> TypographySpec:
        return TypographySpec(self.design_size_px, self.font_id)

    @property
    def is_custom(self) -> bool:
        return self.preset_id == CUSTOM_PRESET


def apply_preset(preset_id: str, state: CalculatorState) -> CalculatorState:
    """Select a named preset, overwriting the screen geometry.

    Presets that assume a viewing distance also set it to 2 ft. An
    unknown id is treated as a switch back to custom.

    Args:
        preset_id: Id of a preset in SCREEN_PRESETS
        state: Current state

    Returns:
        New state with the preset applied
    """
    if preset_id == CUSTOM_PRESET or preset_id not in SCREEN_PRESETS:
        return revert_to_custom(state)

    preset = get_preset(preset_id)
    view_dist_ft = state.view_dist_ft
    if preset.assumes_viewing_distance:
        view_dist_ft = PRESET_VIEWING_DISTANCE_FT

    return dataclasses.replace(
        state,
        preset_id=preset_id,
        width_px=preset.width_px,
        height_px=preset.height_px,
        diagonal_in=preset.diagonal_in,
        view_dist_ft=view_dist_ft,
    )


def revert_to_custom(state: CalculatorState) -> CalculatorState:
    """Switch to custom input, keeping the current screen geometry.

    A viewing distance of exactly 2 ft is cleared, whether it came from
    a preset or was typed in; any other value is kept.
    """
    view_dist_ft = state.view_dist_ft
    if view_dist_ft == PRESET_VIEWING_DISTANCE_FT:
        view_dist_ft = None
    return dataclasses.replace(state, preset_id=CUSTOM_PRESET, view_dist_ft=view_dist_ft)


def select_preset(state: CalculatorState, preset_id: str) -> CalculatorState:
    """Apply a preset selection from a dropdown, including "custom"."""
    if preset_id == state.preset_id:
        return state
    return apply_preset(preset_id, state)


def edit_screen(
    state: CalculatorState,
    width_px: float | None = None,
    height_px: float | None = None,
    diagonal_in: float | None = None,
) -> CalculatorState:
    """Manually edit screen geometry; the preset becomes custom.

    Fields left as None keep their current value. The viewing distance
    is never touched.
    """
    return dataclasses.replace(
        state,
        preset_id=CUSTOM_PRESET,
        width_px=state.width_px if width_px is None else width_px,
        height_px=state.height_px if height_px is None else height_px,
        diagonal_in=state.diagonal_in if diagonal_in is None else diagonal_in,
    )


def set_viewing_distance(state: CalculatorState, value: float | str | None) -> CalculatorState:
    """Set the viewing distance in feet; None or an empty string unsets it."""
    if value is None or value == "":
        view_dist_ft = None
    else:
        view_dist_ft = float(value)
    return dataclasses.replace(state, view_dist_ft=view_dist_ft)


def set_typography(
    state: CalculatorState,
    design_size_px: float | None = None,
    font_id: str | None = None,
) -> CalculatorState:
    """Change the design size or font without touching screen inputs."""
    return dataclasses.replace(
        state,
        design_size_px=state.design_size_px if design_size_px is None else design_size_px,
        font_id=state.font_id if font_id is None else font_id,
    )
