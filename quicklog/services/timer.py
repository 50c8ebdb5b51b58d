"""A single running timer persisted in a key-value store."""

from __future__ import annotations

import datetime as dt
import json
import math
import time
from typing import Callable, Optional

from quicklog.domain.constants import (
    GETTING_LONG_TIMER_HOURS,
    LONG_TIMER_HOURS,
    TIMER_NOTIFY_COOLDOWN_SECONDS,
    VERY_LONG_TIMER_HOURS,
)
from quicklog.domain.enums import RoundingMode, TimerStatus
from quicklog.domain.exceptions import TimerAlreadyRunning
from quicklog.domain.models import TimerEntry
from quicklog.infrastructure.kv_store import KeyValueStore
from quicklog.infrastructure.logging import get_logger
from quicklog.services.rounding import apply_rounding
from quicklog.shared.time_formatting import format_duration

TIMER_KEY = "tempo-active-timer"


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class TimerService:
    def __init__(self, store: KeyValueStore, *, now: Callable[[], dt.datetime] = _utcnow):
        self._store = store
        self._now = now

    def active(self) -> Optional[TimerEntry]:
        raw = self._store.get_item(TIMER_KEY)
        if not raw:
            return None
        return TimerEntry.model_validate(json.loads(raw))

    def start(
        self,
        issue_key: str,
        issue_id: str,
        work_type_value: str = "",
        description: Optional[str] = None,
    ) -> TimerEntry:
        running = self.active()
        if running is not None:
            raise TimerAlreadyRunning(running.issue_key)
        entry = TimerEntry(
            issue_key=issue_key,
            issue_id=issue_id,
            description=description,
            start=self._now().isoformat(),
            work_type_value=work_type_value,
        )
        self._store.set_item(TIMER_KEY, entry.model_dump_json())
        get_logger().event("timer_started", issue_key=issue_key)
        return entry

    def elapsed_seconds(self, entry: TimerEntry) -> int:
        started = dt.datetime.fromisoformat(entry.start)
        if started.tzinfo is None:
            started = started.replace(tzinfo=dt.timezone.utc)
        return max(0, math.floor((self._now() - started).total_seconds()))

    def stop(self, rounding_mode: RoundingMode | str | None = None) -> Optional[tuple[TimerEntry, int]]:
        entry = self.active()
        if entry is None:
            return None
        self._store.remove_item(TIMER_KEY)
        seconds = apply_rounding(self.elapsed_seconds(entry), rounding_mode)
        get_logger().event("timer_stopped", issue_key=entry.issue_key, seconds=seconds)
        return entry, seconds


def parse_notify_hours(raw: str | None) -> list[float]:
    """``"1, 4,8"`` -> ``[1.0, 4.0, 8.0]``; blanks, junk and non-positive values are dropped."""
    hours: list[float] = []
    for part in (raw or "").split(","):
        try:
            value = float(part.strip())
        except ValueError:
            continue
        if value > 0:
            hours.append(value)
    return hours


def timer_status(elapsed_seconds: int) -> TimerStatus:
    hours = elapsed_seconds / 3600
    if hours >= VERY_LONG_TIMER_HOURS:
        return TimerStatus.VERY_LONG
    if hours >= LONG_TIMER_HOURS:
        return TimerStatus.LONG
    if hours >= GETTING_LONG_TIMER_HOURS:
        return TimerStatus.GETTING_LONG
    return TimerStatus.ACTIVE


class TimerNotifier:
    """Decides which long-running-timer reminders are due."""

    def __init__(
        self,
        notify_hours: list[float],
        *,
        cooldown_seconds: float = TIMER_NOTIFY_COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._notify_hours = notify_hours
        self._cooldown = cooldown_seconds
        self._clock = clock
        self._last_sent: dict[str, float] = {}

    def due(self, entry: TimerEntry, elapsed_seconds: int) -> list[str]:
        if elapsed_seconds <= 0:
            return []
        messages: list[str] = []
        hours = elapsed_seconds / 3600
        now = self._clock()
        for threshold in self._notify_hours:
            if hours < threshold:
                continue
            key = f"{entry.issue_key}-{threshold}"
            last = self._last_sent.get(key)
            if last is not None and now - last <= self._cooldown:
                continue
            self._last_sent[key] = now
            messages.append(
                f"{entry.issue_key} has been running for {format_duration(elapsed_seconds)}. "
                "Don't forget to stop it!"
            )
        return messages


__all__ = ["TIMER_KEY", "TimerNotifier", "TimerService", "parse_notify_hours", "timer_status"]
