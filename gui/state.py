"""Cached Streamlit resources shared across GUI pages.

Separated from app.py to allow safe imports without re-triggering
the navigation runner.
"""

import streamlit as st

from src.config import load_config
from src.measure import TextMeasurer, create_measurer


@st.cache_resource
def get_config() -> dict:
    """Cached config dict. Cleared on app restart."""
    return load_config()


@st.cache_resource
def get_measurer() -> TextMeasurer:
    """Cached measurer. Keeps loaded font files across Streamlit reruns."""
    return create_measurer(get_config())
