"""Tab 3: Setup — import a custom component list or download a template."""

import logging

import streamlit as st

from data.loader import load_file, parse_components
from data.validator import validate_components
from data.sample_data import generate_components_df
from data.session_store import set_components, get_components, add_notice, pop_notices

logger = logging.getLogger(__name__)


def _load_and_validate(df) -> bool:
    """Validate and store an uploaded component list."""
    result = validate_components(df)

    if not result.is_valid:
        for e in result.errors:
            st.error(e)
        return False

    # Shown by the rerun that follows a successful load
    for w in result.warnings:
        add_notice(w, "warning")

    components = parse_components(df)
    set_components(components, "custom")
    add_notice(f"Loaded {len(components)} components", "success")
    return True


def _render_notices():
    for level, message in pop_notices():
        if level == "success":
            st.success(message)
        elif level == "warning":
            st.warning(message)
        else:
            st.info(message)


def render(sidebar_state):
    """Render the Setup tab."""
    st.header("Setup")

    st.subheader("Import Components")
    st.caption(
        "Columns: Component ID, Component Name, and optionally Attended and Total. "
        "Any list replaces the current components."
    )
    _render_notices()

    uploaded = st.file_uploader("Component list (CSV or XLSX)", type=["csv", "xlsx"])
    if uploaded is not None and st.button("Load components", type="primary"):
        try:
            df = load_file(uploaded)
        except Exception as e:
            logger.warning("Could not read %s: %s", uploaded.name, e)
            st.error(f"Could not read file: {e}")
        else:
            if _load_and_validate(df):
                st.rerun()

    st.divider()

    st.subheader("Template")
    template = generate_components_df("standard")
    st.dataframe(template, use_container_width=True, hide_index=True)
    st.download_button(
        "Download template CSV",
        data=template.to_csv(index=False).encode("utf-8"),
        file_name="components.csv",
        mime="text/csv",
    )

    st.divider()

    st.subheader("Current Components")
    current = get_components()
    st.caption(f"{len(current)} component{'s' if len(current) != 1 else ''} — set: {sidebar_state.component_set}")
