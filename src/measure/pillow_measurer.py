import logging

from PIL import ImageFont

from src.measure.base import TextMeasurer, TextStyle
from src.measure.fallback import approximate_width


class PillowMeasurer(TextMeasurer):
    def __init__(self, font_path: str = None):
        """font_path, when set, is tried first for every family.
        Otherwise the family resolves to '<family>.ttf', then the bare name,
        both looked up in the system font directories by Pillow."""
        self.font_path = font_path
        self._fonts = {}
        self.logger = logging.getLogger(__name__)

    def _candidates(self, family: str) -> list[str]:
        candidates = []
        if self.font_path:
            candidates.append(self.font_path)
        if not family.lower().endswith((".ttf", ".otf")):
            candidates.append(f"{family}.ttf")
        candidates.append(family)
        return candidates

    def load_font(self, style: TextStyle):
        """Return the FreeTypeFont for style, or None if no candidate loads.
        Results (including misses) are kept per (family, size)."""
        key = (style.font_family, style.font_size)
        if key in self._fonts:
            return self._fonts[key]
        font = None
        for candidate in self._candidates(style.font_family):
            try:
                font = ImageFont.truetype(candidate, size=style.font_size)
                break
            except (OSError, ValueError):
                continue
        if font is None:
            self.logger.debug(
                "No font found for %s at %spx, measuring with fallback",
                style.font_family,
                style.font_size,
            )
        self._fonts[key] = font
        return font

    def family_name(self, style: TextStyle) -> str:
        """Family name stored in the loaded font file ('DejaVu Sans' for
        DejaVuSans.ttf), or the configured family when nothing loaded."""
        font = self.load_font(style)
        if font is None:
            return style.font_family
        return font.getname()[0] or style.font_family

    def measure(self, text: str, style: TextStyle) -> float:
        font = self.load_font(style)
        if font is None:
            return approximate_width(text)
        try:
            return float(font.getlength(text))
        except (OSError, ValueError) as e:
            self.logger.debug("Pillow could not measure %r: %s", text, e)
            return approximate_width(text)
