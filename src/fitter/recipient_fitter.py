import logging
from dataclasses import dataclass
from typing import NamedTuple, Sequence

from src.measure.base import TextMeasurer, TextStyle

SEPARATOR = ", "
ELLIPSIS = "..."

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BadgeMetrics:
    """Pixels the badge takes up beyond the width of its own label."""

    margin: float = 8.0
    left_pad: float = 6.0
    right_pad: float = 6.0

    @property
    def chrome(self) -> float:
        return self.margin + self.left_pad + self.right_pad


class FitResult(NamedTuple):
    display_text: str
    hidden_count: int


def badge_label(hidden_count: int) -> str:
    """Text of the badge for hidden_count, or '' when no badge is shown."""
    return f"+{hidden_count}" if hidden_count > 0 else ""


def fit_recipients(
    container_width: float,
    recipients: Sequence[str],
    measurer: TextMeasurer,
    style: TextStyle,
    badge: BadgeMetrics = BadgeMetrics(),
) -> FitResult:
    """Decide how many recipients fit on one line of container_width pixels.

    Scans left to right. Before placing each recipient it reserves room for
    the ellipsis and for the badge that would be shown if this recipient were
    the first one not to fit, using the hidden count that failure would
    produce. Recipients are either shown in full or replaced by '...'.

    The first recipient is always shown, even when it overflows; the
    presentation layer clips it visually and the badge counts only the
    recipients after it. The comparison is strict so that equal widths do
    not fit. Returns ('', 0) for an empty list.
    """
    count = len(recipients)
    remaining_width = container_width
    output = ""
    hidden_count = 0

    for i, recipient in enumerate(recipients):
        remaining_items = count - i
        is_first = i == 0
        is_last = i == count - 1

        # hidden count if this recipient is the one that doesn't fit
        candidate_hidden = remaining_items - 1 if is_first else remaining_items
        badge_reserved = 0.0
        if candidate_hidden > 0:
            badge_reserved = measurer.measure(badge_label(candidate_hidden), style) + badge.chrome
        ellipsis_reserved = 0.0 if is_last else measurer.measure(SEPARATOR + ELLIPSIS, style)
        item_text = recipient if is_last else recipient + SEPARATOR
        item_width = measurer.measure(item_text, style)

        if remaining_width > item_width + ellipsis_reserved + badge_reserved:
            output += item_text
            remaining_width -= item_width
            continue

        output += recipient if is_first else ELLIPSIS
        hidden_count = candidate_hidden
        break

    logger.debug(
        "Fitted %d recipients into %spx: %d hidden", count, container_width, hidden_count
    )
    return FitResult(output, hidden_count)
