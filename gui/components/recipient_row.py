import html
import re

import streamlit as st

from src.fitter.recipient_fitter import BadgeMetrics, FitResult, badge_label
from src.measure.base import TextStyle

_FAMILY_UNSAFE = re.compile(r"""['"\\<>;]""")


def css_family(family: str) -> str:
    """Family name with characters that could leave the quoted CSS string removed."""
    return _FAMILY_UNSAFE.sub("", family).strip()


def build_row_html(
    result: FitResult,
    style: TextStyle,
    width: float,
    badge: BadgeMetrics = BadgeMetrics(),
) -> str:
    """Return the HTML for one recipient row.

    The text span is single-line and clips with a visual ellipsis, which
    covers a lone first recipient wider than the row. The badge sits at the
    trailing edge and is omitted when nothing is hidden.
    """
    font = (
        f"font-family: '{css_family(style.font_family)}', sans-serif; "
        f"font-size: {style.font_size:g}px;"
    )
    text_html = (
        '<span class="recipient-row-text" style="flex: 1 1 auto; min-width: 0; '
        'white-space: nowrap; overflow: hidden; text-overflow: ellipsis;">'
        f"{html.escape(result.display_text)}</span>"
    )
    badge_html = ""
    label = badge_label(result.hidden_count)
    if label:
        badge_html = (
            '<span class="recipient-row-badge" style="flex: none; '
            f"margin-left: {badge.margin:g}px; "
            f"padding: 0 {badge.right_pad:g}px 0 {badge.left_pad:g}px; "
            'border-radius: 8px; background-color: #edf2f7; color: #2d3748;">'
            f"{label}</span>"
        )
    return (
        '<div class="recipient-row" style="display: flex; align-items: center; '
        f"width: {width:g}px; overflow: hidden; {font}\">"
        f"{text_html}{badge_html}</div>"
    )


def render_recipient_row(
    result: FitResult,
    style: TextStyle,
    width: float,
    badge: BadgeMetrics = BadgeMetrics(),
):
    """Render a fitted recipient row in Streamlit."""
    st.markdown(build_row_html(result, style, width, badge), unsafe_allow_html=True)
