"""Course Attendance Calculator — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_calculator,
    tab_breakdown,
    tab_setup,
)


def main():
    st.set_page_config(
        page_title="Course Attendance Calculator",
        page_icon="🧮",
        layout="centered",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3 = st.tabs([
        "🧮 Calculator",
        "📊 Breakdown",
        "⚙️ Setup",
    ])

    with tab1:
        tab_calculator.render(sidebar_state)
    with tab2:
        tab_breakdown.render(sidebar_state)
    with tab3:
        tab_setup.render(sidebar_state)


if __name__ == "__main__":
    main()
