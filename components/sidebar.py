"""Global sidebar controls for the component set and band thresholds."""

import streamlit as st
from dataclasses import dataclass

from data.session_store import (
    get_component_set, switch_component_set, reset_counts,
    get_threshold_config, set_threshold_config,
)
from config.defaults import (
    COMPONENT_SETS, COMPONENT_SET_LABELS,
    GOOD_THRESHOLD, MODERATE_THRESHOLD,
)


@dataclass
class SidebarState:
    component_set: str
    thresholds: dict


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Attendance Calculator")
        st.divider()

        # Component set selector; an imported list shows up as "custom"
        current = get_component_set()
        options = list(COMPONENT_SETS.keys())
        if current not in options:
            options.append(current)

        selected = st.selectbox(
            "Components",
            options=options,
            format_func=lambda x: COMPONENT_SET_LABELS.get(x, x),
            index=options.index(current),
        )
        if selected != current and selected in COMPONENT_SETS:
            switch_component_set(selected)
            st.rerun()

        if st.button("Reset counts", use_container_width=True):
            reset_counts()
            st.rerun()

        st.divider()

        # Band thresholds
        cfg = get_threshold_config()
        with st.expander("Band thresholds"):
            good = st.number_input(
                "Good at or above (%)", min_value=0.0, max_value=100.0, step=1.0,
                value=float(cfg.get("good_threshold", GOOD_THRESHOLD)),
                key="sidebar_good_threshold",
            )
            moderate = st.number_input(
                "Moderate at or above (%)", min_value=0.0, max_value=100.0, step=1.0,
                value=float(cfg.get("moderate_threshold", MODERATE_THRESHOLD)),
                key="sidebar_moderate_threshold",
            )
            if moderate > good:
                st.warning("Moderate threshold is above Good — Moderate band will be empty.")

        thresholds = {"good_threshold": good, "moderate_threshold": moderate}
        if thresholds != cfg:
            set_threshold_config(thresholds)

    return SidebarState(
        component_set=get_component_set(),
        thresholds=thresholds,
    )
