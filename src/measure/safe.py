import logging

from src.measure.base import TextMeasurer, TextStyle
from src.measure.fallback import approximate_width


class SafeMeasurer(TextMeasurer):
    """Wrap a host-supplied measurer so a failing backend degrades to the
    fallback formula instead of breaking the fitting pass."""

    def __init__(self, inner: TextMeasurer):
        self.inner = inner
        self.logger = logging.getLogger(__name__)

    def measure(self, text: str, style: TextStyle) -> float:
        try:
            width = float(self.inner.measure(text, style))
        except Exception as e:
            self.logger.warning(
                "Measurer %s failed for %r, using fallback: %s",
                type(self.inner).__name__,
                text,
                e,
            )
            return approximate_width(text)
        return max(0.0, width)

    def family_name(self, style: TextStyle) -> str:
        try:
            return str(self.inner.family_name(style))
        except Exception as e:
            self.logger.warning(
                "Measurer %s could not name %s: %s",
                type(self.inner).__name__,
                style.font_family,
                e,
            )
            return style.font_family
