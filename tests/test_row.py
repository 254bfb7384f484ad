"""Tests for the RecipientRow host and the resize event dispatcher."""

from unittest.mock import MagicMock

import pytest

from src.events import RESIZE, EventDispatcher
from src.fitter.recipient_fitter import BadgeMetrics, FitResult
from src.fitter.row import RecipientRow, parse_recipients
from src.measure import FallbackMeasurer, TextMeasurer, TextStyle
from src.measure.fallback import approximate_width

STYLE = TextStyle(font_size=14, font_family="DejaVuSans")
THREE = ["a@x.com", "b@x.com", "c@x.com"]


class _Broken(TextMeasurer):
    def measure(self, text, style):
        raise RuntimeError("backend gone")


class _NoContext(TextMeasurer):
    def measure(self, text, style):
        return None


@pytest.fixture
def row():
    return RecipientRow(FallbackMeasurer(), STYLE, container_width=1000, recipients=THREE)


@pytest.fixture
def dispatcher():
    return EventDispatcher()


class TestParseRecipients:
    def test_splits_commas(self):
        assert parse_recipients(["a@x.com,b@x.com", "c@x.com"]) == [
            "a@x.com",
            "b@x.com",
            "c@x.com",
        ]

    def test_strips_and_drops_blanks(self):
        assert parse_recipients([" a@x.com , ,", ""]) == ["a@x.com"]


class TestEventDispatcher:
    def test_emit_calls_listeners_in_order(self, dispatcher):
        calls = []
        dispatcher.subscribe(RESIZE, lambda w: calls.append(("first", w)))
        dispatcher.subscribe(RESIZE, lambda w: calls.append(("second", w)))

        dispatcher.emit(RESIZE, 120)

        assert calls == [("first", 120), ("second", 120)]

    def test_unsubscribe_removes_listener(self, dispatcher):
        callback = MagicMock()
        unsubscribe = dispatcher.subscribe(RESIZE, callback)

        unsubscribe()
        dispatcher.emit(RESIZE, 120)

        callback.assert_not_called()
        assert dispatcher.listener_count(RESIZE) == 0

    def test_unsubscribe_twice_is_noop(self, dispatcher):
        unsubscribe = dispatcher.subscribe(RESIZE, MagicMock())
        unsubscribe()
        unsubscribe()
        assert dispatcher.listener_count(RESIZE) == 0

    def test_emit_without_listeners(self, dispatcher):
        dispatcher.emit("unknown", 1)
        assert dispatcher.listener_count("unknown") == 0

    def test_events_are_independent(self, dispatcher):
        callback = MagicMock()
        dispatcher.subscribe("other", callback)
        dispatcher.emit(RESIZE, 10)
        callback.assert_not_called()


class TestRecipientRowFitting:
    def test_computes_on_construction(self, row):
        assert row.display_text == "a@x.com, b@x.com, c@x.com"
        assert row.hidden_count == 0
        assert row.badge == ""

    def test_empty_row(self):
        row = RecipientRow(FallbackMeasurer(), STYLE)
        assert row.result == FitResult("", 0)

    def test_resize_recomputes(self, row):
        result = row.resize(250)
        assert result == FitResult("a@x.com, ...", 2)
        assert row.display_text == "a@x.com, ..."
        assert row.badge == "+2"

    def test_set_recipients_recomputes(self, row):
        row.set_recipients(["only@x.com"])
        assert row.result == FitResult("only@x.com", 0)

    def test_set_recipients_copies_input(self, row):
        recipients = ["a@x.com"]
        row.set_recipients(recipients)
        recipients.append("b@x.com")
        assert row.recipients == ("a@x.com",)

    def test_latest_result_wins(self, row):
        for width in (0, 250, 1000, 100):
            row.resize(width)
        assert row.result == FitResult("a@x.com", 2)

    def test_badge_metrics_used(self):
        wide_badge = BadgeMetrics(margin=100, left_pad=0, right_pad=0)
        row = RecipientRow(
            FallbackMeasurer(), STYLE, wide_badge, container_width=250, recipients=THREE
        )
        assert row.result == FitResult("a@x.com", 2)

    def test_failing_measurer_degrades_to_fallback(self):
        broken = RecipientRow(_Broken(), STYLE, container_width=250, recipients=THREE)
        fallback = RecipientRow(FallbackMeasurer(), STYLE, container_width=250, recipients=THREE)
        assert broken.result == fallback.result

    def test_measurer_without_context_degrades_to_fallback(self):
        no_context = RecipientRow(
            _NoContext(), STYLE, container_width=300, recipients=["a@x.com", "b@x.com"]
        )
        fallback = RecipientRow(
            FallbackMeasurer(), STYLE, container_width=300, recipients=["a@x.com", "b@x.com"]
        )
        assert no_context.result == fallback.result

    def test_host_measurer_is_wrapped(self, row):
        assert row.measurer.measure("abc", STYLE) == approximate_width("abc")


class TestRecipientRowLifecycle:
    def test_mount_follows_resize_events(self, row, dispatcher):
        row.mount(dispatcher)
        dispatcher.emit(RESIZE, 250)
        assert row.hidden_count == 2
        assert dispatcher.listener_count(RESIZE) == 1

    def test_unmount_releases_subscription(self, row, dispatcher):
        row.mount(dispatcher)
        row.unmount()

        dispatcher.emit(RESIZE, 0)

        assert not row.is_mounted
        assert dispatcher.listener_count(RESIZE) == 0
        assert row.hidden_count == 0

    def test_unmount_when_not_mounted(self, row):
        row.unmount()
        assert not row.is_mounted

    def test_double_mount_raises(self, row, dispatcher):
        row.mount(dispatcher)
        with pytest.raises(RuntimeError, match="already mounted"):
            row.mount(dispatcher)
        assert dispatcher.listener_count(RESIZE) == 1

    def test_remount_after_unmount(self, row, dispatcher):
        row.mount(dispatcher)
        row.unmount()
        row.mount(dispatcher)
        assert dispatcher.listener_count(RESIZE) == 1

    def test_mounted_context_releases(self, row, dispatcher):
        with row.mounted(dispatcher) as mounted:
            assert mounted is row
            assert row.is_mounted
        assert dispatcher.listener_count(RESIZE) == 0

    def test_mounted_context_releases_on_error(self, row, dispatcher):
        with pytest.raises(KeyError):
            with row.mounted(dispatcher):
                raise KeyError("teardown")
        assert not row.is_mounted
        assert dispatcher.listener_count(RESIZE) == 0

    def test_rows_share_dispatcher(self, dispatcher):
        first = RecipientRow(FallbackMeasurer(), STYLE, recipients=THREE)
        second = RecipientRow(FallbackMeasurer(), STYLE, recipients=["a@x.com"])
        with first.mounted(dispatcher), second.mounted(dispatcher):
            dispatcher.emit(RESIZE, 1000)
            assert first.hidden_count == 0
            assert second.display_text == "a@x.com"
        assert dispatcher.listener_count(RESIZE) == 0
