from src.measure.base import TextMeasurer, TextStyle

CHAR_WIDTH = 8.0
ALLOWANCE = 20.0


def approximate_width(text: str) -> float:
    """Deterministic width estimate: 8px per character plus a 20px allowance."""
    return CHAR_WIDTH * len(text) + ALLOWANCE


class FallbackMeasurer(TextMeasurer):
    """Used when no rendering backend is available. Ignores the style."""

    def measure(self, text: str, style: TextStyle) -> float:
        return approximate_width(text)
