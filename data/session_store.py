"""Typed wrapper around st.session_state for the component collection."""

import logging
from typing import List

import streamlit as st

from config.defaults import DEFAULT_COMPONENT_SET, GOOD_THRESHOLD, MODERATE_THRESHOLD
from data.sample_data import build_component_set
from engine.calculator import update_count
from models.component import ComponentRecord

logger = logging.getLogger(__name__)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "component_set": DEFAULT_COMPONENT_SET,
        "components": build_component_set(DEFAULT_COMPONENT_SET),
        "threshold_config": {
            "good_threshold": GOOD_THRESHOLD,
            "moderate_threshold": MODERATE_THRESHOLD,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_components() -> List[ComponentRecord]:
    return st.session_state.get("components", [])


def get_component_set() -> str:
    return st.session_state.get("component_set", DEFAULT_COMPONENT_SET)


def get_threshold_config() -> dict:
    return st.session_state.get("threshold_config", {})


# --- Setters ---

def set_components(components: List[ComponentRecord], set_name: str = "custom"):
    st.session_state["components"] = components
    st.session_state["component_set"] = set_name
    clear_input_state()
    logger.info("Loaded %d components (set=%s)", len(components), set_name)


def set_threshold_config(config: dict):
    st.session_state["threshold_config"] = config


# --- Edits ---

def update_component_count(component_id: str, field: str, raw_value):
    """Replace one component's attended/total from raw widget input."""
    st.session_state["components"] = update_count(get_components(), component_id, field, raw_value)
    logger.debug("Updated %s.%s from %r", component_id, field, raw_value)


def switch_component_set(set_name: str):
    """Replace the collection with a fresh built-in set."""
    set_components(build_component_set(set_name), set_name)


def reset_counts():
    """Zero every count while keeping the current component list."""
    st.session_state["components"] = [
        ComponentRecord(id=c.id, name=c.name, attended=0, total=0, icon=c.icon)
        for c in get_components()
    ]
    clear_input_state()
    logger.info("Reset counts for %d components", len(get_components()))


# --- Widget state ---

INPUT_KEY_PREFIX = "count_"


def input_key(component_id: str, field: str) -> str:
    return f"{INPUT_KEY_PREFIX}{component_id}_{field}"


def clear_input_state():
    """Drop cached text of the count inputs so they redraw from the records."""
    for key in [k for k in st.session_state.keys() if str(k).startswith(INPUT_KEY_PREFIX)]:
        del st.session_state[key]


# --- Notices ---

def add_notice(message: str, level: str = "info"):
    """Queue a message to show after the next rerun."""
    st.session_state.setdefault("notices", []).append((level, message))


def pop_notices() -> List[tuple]:
    return st.session_state.pop("notices", [])
