from pathlib import Path
import logging

import yaml
from dotenv import load_dotenv

from src.fitter.recipient_fitter import BadgeMetrics
from src.measure.base import TextStyle

load_dotenv()

DEFAULT_FONT_FAMILY = "DejaVuSans"
DEFAULT_FONT_SIZE = 14.0


def get_project_root() -> Path:
    """Walk up from this file's directory to find the project root
    (identified by the presence of pyproject.toml).
    Returns the absolute Path to the project root."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    raise FileNotFoundError("Could not find project root (no pyproject.toml found)")


def load_config(path: str = None) -> dict:
    """Load and return the YAML config dict.
    If path is None, defaults to config/config.yaml relative to project root.
    Missing sections are filled with empty dicts."""
    root = get_project_root()
    if path is None:
        config_path = root / "config" / "config.yaml"
    else:
        config_path = Path(path)
        if not config_path.is_absolute():
            config_path = root / config_path
    with open(config_path) as f:
        config = yaml.safe_load(f) or {}
    for section in ("measurement", "badge", "gui"):
        if config.get(section) is None:
            config[section] = {}
    return config


def get_style(config: dict) -> TextStyle:
    """Build the TextStyle the recipient row renders in."""
    measurement = config.get("measurement", {})
    return TextStyle(
        font_size=float(measurement.get("font_size", DEFAULT_FONT_SIZE)),
        font_family=measurement.get("font_family", DEFAULT_FONT_FAMILY),
    )


def get_badge_metrics(config: dict) -> BadgeMetrics:
    badge = config.get("badge", {})
    defaults = BadgeMetrics()
    return BadgeMetrics(
        margin=float(badge.get("margin", defaults.margin)),
        left_pad=float(badge.get("left_pad", defaults.left_pad)),
        right_pad=float(badge.get("right_pad", defaults.right_pad)),
    )


def setup_logging(level: str = "INFO"):
    """Configure project-wide logging. Call once at startup."""
    log_level = getattr(logging, level.upper())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(log_level)
