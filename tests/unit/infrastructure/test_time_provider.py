"""Tests for TimeProvider implementations."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from commerce_core.application.ports import TimeProvider
from commerce_core.infrastructure import FixedTimeProvider, SystemTimeProvider


class TestSystemTimeProvider:
    def test_implements_time_provider_interface(self) -> None:
        assert isinstance(SystemTimeProvider(), TimeProvider)

    def test_now_returns_current_utc_time(self) -> None:
        before = datetime.now(UTC)

        result = SystemTimeProvider().now()

        assert result.tzinfo is UTC
        assert before <= result <= datetime.now(UTC)


class TestFixedTimeProvider:
    def test_now_returns_fixed_time(self, fixed_time: datetime) -> None:
        provider = FixedTimeProvider(fixed_time)

        assert provider.now() == fixed_time
        assert provider.now() == fixed_time

    def test_set_time(self, fixed_time: datetime) -> None:
        provider = FixedTimeProvider(fixed_time)
        later = fixed_time + timedelta(hours=1)

        provider.set_time(later)

        assert provider.now() == later

    def test_advance(self, fixed_time: datetime) -> None:
        provider = FixedTimeProvider(fixed_time)

        result = provider.advance(timedelta(days=31))

        assert result == provider.now() == fixed_time + timedelta(days=31)

    @pytest.mark.parametrize(
        "tz", [None, timezone(timedelta(hours=9))], ids=["naive", "kst"]
    )
    def test_rejects_non_utc(self, tz: timezone | None) -> None:
        with pytest.raises(ValueError, match="UTC"):
            FixedTimeProvider(datetime(2024, 1, 1, tzinfo=tz))

    def test_set_time_rejects_non_utc(self, fixed_time: datetime) -> None:
        provider = FixedTimeProvider(fixed_time)

        with pytest.raises(ValueError):
            provider.set_time(datetime(2024, 1, 1))

    def test_advance_rejects_negative_delta(self, fixed_time: datetime) -> None:
        provider = FixedTimeProvider(fixed_time)

        with pytest.raises(ValueError, match="negative"):
            provider.advance(timedelta(seconds=-1))

        assert provider.now() == fixed_time
