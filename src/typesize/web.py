"""Streamlit web interface for type-size-calculator."""

import streamlit as st

from typesize.calculator import calculate
from typesize.catalogs import FONT_DATA, SCREEN_PRESETS, x_height_insight
from typesize.presets import (
    CalculatorState,
    edit_screen,
    select_preset,
    set_typography,
    set_viewing_distance,
)

st.set_page_config(
    page_title="Type Size Calculator",
    page_icon="🔠",
    layout="wide",
)


def _sync_widgets(state: CalculatorState) -> None:
    """Copy state values into the widgets that mirror them."""
    st.session_state.width_px = float(state.width_px)
    st.session_state.height_px = float(state.height_px)
    st.session_state.diagonal_in = float(state.diagonal_in)
    st.session_state.view_dist_ft = state.view_dist_ft


def _on_preset_change() -> None:
    state = select_preset(st.session_state.calc, st.session_state.preset)
    st.session_state.calc = state
    _sync_widgets(state)


def _on_screen_edit() -> None:
    state = edit_screen(
        st.session_state.calc,
        width_px=st.session_state.width_px,
        height_px=st.session_state.height_px,
        diagonal_in=st.session_state.diagonal_in,
    )
    st.session_state.calc = state
    st.session_state.preset = state.preset_id


def _on_distance_edit() -> None:
    st.session_state.calc = set_viewing_distance(
        st.session_state.calc, st.session_state.view_dist_ft
    )


def _on_typography_edit() -> None:
    st.session_state.calc = set_typography(
        st.session_state.calc,
        design_size_px=st.session_state.design_size_px,
        font_id=st.session_state.font_id,
    )


if "calc" not in st.session_state:
    initial = CalculatorState()
    st.session_state.calc = initial
    st.session_state.preset = initial.preset_id
    st.session_state.design_size_px = float(initial.design_size_px)
    st.session_state.font_id = initial.font_id
    _sync_widgets(initial)

calc: CalculatorState = st.session_state.calc
report = calculate(calc)

st.title("Type Size Calculator")
st.markdown(
    "Ensure your typography is legible across devices. Calculate physical type size, "
    "verify ADA compliance, and analyze viewing distances."
)

inputs, results = st.columns([1, 2])

with inputs:
    st.subheader("Screen Dimensions & Viewing Distance")
    st.selectbox(
        "Preset screen size",
        list(SCREEN_PRESETS.keys()),
        format_func=lambda preset_id: SCREEN_PRESETS[preset_id].label,
        key="preset",
        on_change=_on_preset_change,
    )
    col1, col2 = st.columns(2)
    with col1:
        st.number_input(
            "Width (px)",
            step=1.0,
            format="%.0f",
            key="width_px",
            on_change=_on_screen_edit,
            disabled=not calc.is_custom,
        )
    with col2:
        st.number_input(
            "Height (px)",
            step=1.0,
            format="%.0f",
            key="height_px",
            on_change=_on_screen_edit,
            disabled=not calc.is_custom,
        )
    st.number_input(
        "Diagonal size (inches)",
        step=0.1,
        key="diagonal_in",
        on_change=_on_screen_edit,
        disabled=not calc.is_custom,
    )
    st.number_input(
        "Viewing distance (feet)",
        value=None,
        step=0.5,
        placeholder="e.g., 2 (default for presets)",
        key="view_dist_ft",
        on_change=_on_distance_edit,
    )
    st.info(f"Calculated density: **{round(report.geometry.ppi)} PPI**")

    st.subheader("Screen Geometry")
    geo1, geo2, geo3 = st.columns(3)
    geo1.metric("Aspect Ratio", report.geometry.aspect_ratio_label)
    geo2.metric("Width (in)", f"{report.geometry.width_in:.2f}")
    geo3.metric("Height (in)", f"{report.geometry.height_in:.2f}")

    st.subheader("Typography Settings")
    st.number_input(
        "Design tool font size (px)",
        step=1.0,
        key="design_size_px",
        on_change=_on_typography_edit,
    )
    st.selectbox(
        "Font family",
        list(FONT_DATA.keys()),
        key="font_id",
        on_change=_on_typography_edit,
    )
    st.caption(f"**X-Height Analysis: {report.font.label}**")
    st.caption(x_height_insight(report.font.label))

with results:
    hero, verdict = st.columns(2)
    with hero:
        st.metric("Physical Size on Screen (pt)", f"{report.physical.size_pt:.1f}")
        st.caption("Total height (em square)")
        st.metric("Visual X-Height (mm)", f"{report.physical.x_height_mm:.2f}")
        st.caption("Height of lowercase 'x'")
    with verdict:
        if report.status.compliant:
            st.success(f"**{report.status.message}**\n\n{report.status.detail}")
        else:
            st.error(f"**{report.status.message}**\n\n{report.status.detail}")

    st.subheader("Viewing Distance Analysis")
    recommended, apparent = st.columns([1, 2])
    with recommended:
        st.metric("Minimum View Distance (ft)", f"{report.distances.min_ft:.1f}")
        st.caption("Prevents pixel perception (based on PPI).")
        st.metric("Max Resolution View Distance (ft)", f"{report.distances.max_res_ft:.1f}")
        st.caption("Max distance for perceiving full screen detail (based on PPI).")
        st.metric("Ideal View Distance, THX (ft)", f"{report.distances.ideal_ft:.1f}")
        st.caption("Optimal for an immersive field of view (based on diagonal size).")
    with apparent:
        where = f"{calc.view_dist_ft:g} ft" if report.apparent is not None else "your distance"
        st.markdown(f"**Apparent Type Metrics (at {where})**")
        app1, app2 = st.columns(2)
        if report.apparent is not None:
            app1.metric("Apparent PPI", f"{report.apparent.apparent_ppi:.0f}")
            app2.metric("Apparent Type Size (pt)", f"{report.apparent.apparent_size_pt:.1f}")
        else:
            app1.metric("Apparent PPI", "-")
            app2.metric("Apparent Type Size (pt)", "-")
        if calc.view_dist_ft is None:
            st.caption(
                "Enter a viewing distance in feet to calculate the Apparent PPI "
                "and Apparent Type Size."
            )

    st.subheader("ADA Physical Size Check (Compliance)")
    st.table(
        [
            {
                "Category": result.requirement.name,
                "Required Min Pt": f"{result.requirement.required_pt:g} pt",
                "@ Distance (ft)": f"{result.requirement.assumed_distance_ft:g} ft",
                "Physical Size Pt": f"{result.measured_pt:.1f} pt",
                "Status": "Pass" if result.passed else "Fail",
            }
            for result in report.checks
        ]
    )
