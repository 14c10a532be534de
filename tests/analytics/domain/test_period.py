"""Tests for reporting period resolution."""

from datetime import UTC, datetime, time, timedelta

import pytest

from storefront.analytics.period import PeriodFilter, resolve_period

# A Wednesday
NOW = datetime(2024, 6, 12, 15, 30, tzinfo=UTC)


def _day(year, month, day, end=False):
    return datetime.combine(datetime(year, month, day).date(), time.max if end else time.min, tzinfo=UTC)


class TestDefaults:
    def test_no_bounds_means_last_thirty_days(self):
        assert resolve_period(now=NOW) == (NOW - timedelta(days=30), NOW)

    def test_missing_end_is_now(self):
        start = datetime(2024, 1, 1, tzinfo=UTC)
        assert resolve_period(start=start, now=NOW) == (start, NOW)

    def test_missing_start_is_thirty_days_before_end(self):
        end = datetime(2024, 3, 31, tzinfo=UTC)
        assert resolve_period(end=end, now=NOW) == (end - timedelta(days=30), end)

    def test_naive_bounds_are_utc(self):
        start, end = resolve_period(datetime(2024, 1, 1), datetime(2024, 1, 2), now=NOW)
        assert start.tzinfo is UTC
        assert end.tzinfo is UTC


class TestPresets:
    def test_today(self):
        assert resolve_period(period="today", now=NOW) == (_day(2024, 6, 12), _day(2024, 6, 12, end=True))

    def test_this_week_starts_on_sunday(self):
        assert resolve_period(period=PeriodFilter.THIS_WEEK, now=NOW) == (
            _day(2024, 6, 9),
            _day(2024, 6, 12, end=True),
        )

    def test_this_week_on_a_sunday(self):
        sunday = datetime(2024, 6, 9, 8, 0, tzinfo=UTC)
        start, _ = resolve_period(period="this_week", now=sunday)
        assert start == _day(2024, 6, 9)

    def test_this_month_covers_whole_month(self):
        assert resolve_period(period="this_month", now=NOW) == (_day(2024, 6, 1), _day(2024, 6, 30, end=True))

    def test_this_month_in_leap_february(self):
        _, end = resolve_period(period="this_month", now=datetime(2024, 2, 10, tzinfo=UTC))
        assert end == _day(2024, 2, 29, end=True)

    def test_this_year(self):
        assert resolve_period(period="this_year", now=NOW) == (_day(2024, 1, 1), _day(2024, 12, 31, end=True))

    def test_preset_overrides_bounds(self):
        start, _ = resolve_period(datetime(2020, 1, 1, tzinfo=UTC), None, "today", now=NOW)
        assert start == _day(2024, 6, 12)

    def test_custom_swaps_inverted_bounds(self):
        early = datetime(2024, 1, 1, tzinfo=UTC)
        late = datetime(2024, 2, 1, tzinfo=UTC)
        assert resolve_period(late, early, "custom", now=NOW) == (early, late)

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            resolve_period(period="fortnight", now=NOW)
