import os

from src.measure.base import TextMeasurer, TextStyle
from src.measure.fallback import FallbackMeasurer
from src.measure.safe import SafeMeasurer


def create_measurer(config: dict) -> TextMeasurer:
    """Create a text measurer based on config['measurement']['backend'].
    Valid values: 'pillow', 'fallback'.
    Raises ValueError for unknown backend."""
    measurement = config.get("measurement", {})
    backend = measurement.get("backend", "pillow")

    if backend == "pillow":
        from src.measure.pillow_measurer import PillowMeasurer

        font_path_env = measurement.get("font_path_env")
        font_path = os.environ.get(font_path_env) if font_path_env else None
        return PillowMeasurer(font_path=font_path or None)
    elif backend == "fallback":
        return FallbackMeasurer()
    else:
        raise ValueError(f"Unknown measurement backend: '{backend}'")


__all__ = [
    "FallbackMeasurer",
    "SafeMeasurer",
    "TextMeasurer",
    "TextStyle",
    "create_measurer",
]
