import streamlit as st
import sys
import os

# Ensure project root on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import setup_logging
from src.measure import SafeMeasurer
from gui.state import get_config, get_measurer

setup_logging()

st.set_page_config(page_title="Recipient Row", layout="wide")


def _make_page(module_path: str):
    """Create a page callable that imports and renders the given view module."""
    def page_fn():
        import importlib
        mod = importlib.import_module(module_path)
        mod.render(get_config(), SafeMeasurer(get_measurer()))
    return page_fn


pages = [
    st.Page(_make_page("gui.views.preview"), title="Preview", url_path="preview", default=True),
]

nav = st.navigation(pages)
nav.run()
