import streamlit as st

from gui.components.recipient_row import render_recipient_row
from src.config import get_badge_metrics, get_style
from src.fitter.recipient_fitter import fit_recipients
from src.fitter.row import parse_recipients
from src.measure import TextStyle

DEFAULT_RECIPIENTS = "alice@example.com\nbob@example.com\ncarol.longname@example.org"


def render(config: dict, measurer):
    st.title("Recipient Row")

    gui_config = config.get("gui", {})
    max_width = int(gui_config.get("max_width", 1200))
    default_width = min(int(gui_config.get("default_width", 360)), max_width)

    raw = st.text_area("Recipients (one per line or comma separated)", value=DEFAULT_RECIPIENTS)
    width = st.slider("Container width (px)", min_value=0, max_value=max_width, value=default_width)

    base_style = get_style(config)
    font_size = st.number_input(
        "Font size (px)", min_value=6.0, max_value=48.0, value=base_style.font_size, step=1.0
    )
    style = TextStyle(font_size=font_size, font_family=base_style.font_family)
    badge = get_badge_metrics(config)

    # Streamlit reruns this script on every widget change, so each change
    # triggers a fresh fitting pass.
    recipients = parse_recipients(raw.splitlines())
    result = fit_recipients(width, recipients, measurer, style, badge)

    st.subheader("To")
    # request the family the measurer actually loaded so the browser draws
    # with the same font the widths came from
    display_style = TextStyle(font_size=font_size, font_family=measurer.family_name(style))
    render_recipient_row(result, display_style, width, badge)
    st.caption(f"{len(recipients)} recipients, {result.hidden_count} hidden")
