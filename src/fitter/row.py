import logging
from contextlib import contextmanager
from typing import Iterable

from src.events import RESIZE, EventDispatcher
from src.fitter.recipient_fitter import BadgeMetrics, FitResult, badge_label, fit_recipients
from src.measure.base import TextMeasurer, TextStyle
from src.measure.safe import SafeMeasurer


def parse_recipients(values: Iterable[str]) -> list[str]:
    """Flatten raw entries, splitting comma-separated ones and dropping blanks."""
    recipients = []
    for value in values:
        recipients.extend(part.strip() for part in value.split(",") if part.strip())
    return recipients


class RecipientRow:
    """Host for one recipient line.

    Owns the two output fields (display_text, hidden_count) and rewrites
    both on every fitting pass. A pass runs whenever the recipients change
    or, while mounted, whenever the dispatcher emits a resize event.
    """

    def __init__(
        self,
        measurer: TextMeasurer,
        style: TextStyle,
        badge: BadgeMetrics = BadgeMetrics(),
        container_width: float = 0,
        recipients: Iterable[str] = (),
    ):
        self.measurer = SafeMeasurer(measurer)
        self.style = style
        self.badge_metrics = badge
        self.container_width = container_width
        self.recipients = tuple(recipients)
        self.display_text = ""
        self.hidden_count = 0
        self._unsubscribe = None
        self.logger = logging.getLogger(__name__)
        self.recompute()

    @property
    def is_mounted(self) -> bool:
        return self._unsubscribe is not None

    @property
    def badge(self) -> str:
        return badge_label(self.hidden_count)

    @property
    def result(self) -> FitResult:
        return FitResult(self.display_text, self.hidden_count)

    def recompute(self) -> FitResult:
        result = fit_recipients(
            self.container_width,
            self.recipients,
            self.measurer,
            self.style,
            self.badge_metrics,
        )
        self.display_text, self.hidden_count = result
        return result

    def set_recipients(self, recipients: Iterable[str]) -> FitResult:
        self.recipients = tuple(recipients)
        return self.recompute()

    def resize(self, width: float) -> FitResult:
        self.container_width = width
        return self.recompute()

    def mount(self, dispatcher: EventDispatcher):
        """Start following resize events from dispatcher and run one pass."""
        if self.is_mounted:
            raise RuntimeError("RecipientRow is already mounted")
        self._unsubscribe = dispatcher.subscribe(RESIZE, self.resize)
        self.logger.debug("Mounted recipient row at %spx", self.container_width)
        self.recompute()

    def unmount(self):
        if self._unsubscribe is None:
            return
        self._unsubscribe()
        self._unsubscribe = None
        self.logger.debug("Unmounted recipient row")

    @contextmanager
    def mounted(self, dispatcher: EventDispatcher):
        """Mount for the duration of the block; unmount on every exit path."""
        self.mount(dispatcher)
        try:
            yield self
        finally:
            self.unmount()
