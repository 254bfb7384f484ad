from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TextStyle:
    """Visual style of the element the text will actually render in."""

    font_size: float
    font_family: str


class TextMeasurer(ABC):
    @abstractmethod
    def measure(self, text: str, style: TextStyle) -> float:
        """Return the rendered width of text in pixels (>= 0).
        Implementations must apply the same font rules as the element
        that displays the text, or widths won't match the layout."""
        ...

    def family_name(self, style: TextStyle) -> str:
        """Family name the display element should request so it draws with
        the font this measurer used. Defaults to the configured family."""
        return style.font_family
