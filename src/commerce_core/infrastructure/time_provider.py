"""Clock adapters for the TimeProvider port."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from commerce_core.application.ports import TimeProvider


def _require_utc(moment: datetime) -> datetime:
    if moment.tzinfo is not UTC:
        raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={moment.tzinfo}")
    return moment


class SystemTimeProvider(TimeProvider):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Manually driven clock for tests.

    The clock only moves when told to: ``set_time`` jumps to an instant and
    ``advance`` steps forward. Stepping backwards through ``advance`` is
    rejected; use ``set_time`` for that. Not thread-safe.
    """

    def __init__(self, start: datetime) -> None:
        self._current = _require_utc(start)

    def now(self) -> datetime:
        return self._current

    def set_time(self, moment: datetime) -> None:
        self._current = _require_utc(moment)

    def advance(self, delta: timedelta) -> datetime:
        if delta < timedelta(0):
            raise ValueError(f"Cannot advance the clock by a negative delta: {delta}")
        self._current += delta
        return self._current
