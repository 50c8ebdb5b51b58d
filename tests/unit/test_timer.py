"""Timer persistence, rounding and reminders."""

import datetime as dt

import pytest

from quicklog.domain.enums import RoundingMode, TimerStatus
from quicklog.domain.exceptions import TimerAlreadyRunning
from quicklog.infrastructure.kv_store import MemoryKeyValueStore
from quicklog.services.rounding import apply_rounding
from quicklog.services.timer import TIMER_KEY, TimerNotifier, TimerService, parse_notify_hours, timer_status


class _Clock:
    def __init__(self, start: dt.datetime):
        self.now = start

    def __call__(self) -> dt.datetime:
        return self.now


@pytest.fixture
def clock():
    return _Clock(dt.datetime(2026, 10, 16, 9, 0, tzinfo=dt.timezone.utc))


def test_apply_rounding_modes():
    assert apply_rounding(1000, RoundingMode.UP_15) == 1800
    assert apply_rounding(1000, "down15") == 900
    assert apply_rounding(1400, "nearest15") == 1800
    assert apply_rounding(1300, "nearest15") == 900
    assert apply_rounding(1000, "none") == 1000
    assert apply_rounding(1000, None) == 1000
    assert apply_rounding(1000, "weird") == 1000


def test_timer_start_stop_roundtrip(clock):
    store = MemoryKeyValueStore()
    timers = TimerService(store, now=clock)
    entry = timers.start("ABC-1", "10001", "Development", "pairing")
    assert store.get_item(TIMER_KEY) is not None
    assert timers.active() == entry

    clock.now += dt.timedelta(minutes=50, seconds=10)
    stopped = timers.stop(RoundingMode.UP_15)
    assert stopped is not None
    stopped_entry, seconds = stopped
    assert stopped_entry.issue_key == "ABC-1"
    assert seconds == 3600
    assert timers.active() is None
    assert timers.stop() is None


def test_timer_refuses_second_start(clock):
    timers = TimerService(MemoryKeyValueStore(), now=clock)
    timers.start("ABC-1", "1")
    with pytest.raises(TimerAlreadyRunning):
        timers.start("ABC-2", "2")


def test_elapsed_without_rounding(clock):
    timers = TimerService(MemoryKeyValueStore(), now=clock)
    entry = timers.start("ABC-1", "1")
    clock.now += dt.timedelta(seconds=125.7)
    assert timers.elapsed_seconds(entry) == 125


def test_parse_notify_hours():
    assert parse_notify_hours("1,4,8") == [1.0, 4.0, 8.0]
    assert parse_notify_hours(" 0.5, x, -1, 0 ,2") == [0.5, 2.0]
    assert parse_notify_hours("") == []
    assert parse_notify_hours(None) == []


def test_timer_status_levels():
    assert timer_status(2 * 3600 - 1) == TimerStatus.ACTIVE
    assert timer_status(2 * 3600) == TimerStatus.GETTING_LONG
    assert timer_status(4 * 3600 - 1) == TimerStatus.GETTING_LONG
    assert timer_status(4 * 3600) == TimerStatus.LONG
    assert timer_status(8 * 3600) == TimerStatus.VERY_LONG


def test_notifier_respects_thresholds_and_cooldown(clock):
    ticks = iter([0.0, 30.0, 61.0])
    notifier = TimerNotifier([1.0, 4.0], clock=lambda: next(ticks))
    entry = TimerService(MemoryKeyValueStore(), now=clock).start("ABC-1", "1")

    first = notifier.due(entry, 3600 + 60)
    assert first == ["ABC-1 has been running for 1h 1m. Don't forget to stop it!"]
    assert notifier.due(entry, 3600 + 90) == []
    assert len(notifier.due(entry, 3600 + 120)) == 1
