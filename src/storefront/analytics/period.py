"""Reporting periods and date-range resolution."""

import calendar
from datetime import UTC, datetime, time, timedelta
from enum import Enum

from storefront.constants import DEFAULT_PERIOD_DAYS


class PeriodFilter(Enum):
    TODAY = "today"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"
    THIS_YEAR = "this_year"
    CUSTOM = "custom"


def _end_of_day(day) -> datetime:
    return datetime.combine(day, time.max, tzinfo=UTC)


def _start_of_day(day) -> datetime:
    return datetime.combine(day, time.min, tzinfo=UTC)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def resolve_period(
    start: datetime | None = None,
    end: datetime | None = None,
    period: PeriodFilter | str | None = None,
    now: datetime | None = None,
) -> tuple[datetime, datetime]:
    """Turn optional bounds and a preset into an inclusive ``(start, end)`` pair.

    Missing bounds default to the last ``DEFAULT_PERIOD_DAYS`` days. A preset
    other than ``custom`` replaces both bounds; ``custom`` keeps the supplied
    bounds and swaps them when given in the wrong order. Naive datetimes are
    taken to be UTC.
    """
    now = _as_utc(now) or datetime.now(UTC)
    start, end = _as_utc(start), _as_utc(end)
    period = PeriodFilter(period) if period is not None else None

    if start is None and end is None:
        start, end = now - timedelta(days=DEFAULT_PERIOD_DAYS), now
    elif end is None:
        end = now
    elif start is None:
        start = end - timedelta(days=DEFAULT_PERIOD_DAYS)

    today = now.date()
    if period is PeriodFilter.TODAY:
        start, end = _start_of_day(today), _end_of_day(today)
    elif period is PeriodFilter.THIS_WEEK:
        # weeks start on Sunday; Monday is weekday() == 0
        days_since_sunday = (today.weekday() + 1) % 7
        start, end = _start_of_day(today - timedelta(days=days_since_sunday)), _end_of_day(today)
    elif period is PeriodFilter.THIS_MONTH:
        last_day = calendar.monthrange(today.year, today.month)[1]
        start = _start_of_day(today.replace(day=1))
        end = _end_of_day(today.replace(day=last_day))
    elif period is PeriodFilter.THIS_YEAR:
        start = _start_of_day(today.replace(month=1, day=1))
        end = _end_of_day(today.replace(month=12, day=31))
    elif period is PeriodFilter.CUSTOM and start > end:
        start, end = end, start

    return start, end
