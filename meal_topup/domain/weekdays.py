"""Weekday counting between now and a target date"""

from datetime import date, datetime, timedelta

from meal_topup.utils.date_utils import is_weekend


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def weekdays_between(start: date | datetime, end: date | datetime) -> int:
    """
    Count Monday-Friday days from start's date up to and including end's date.

    Walks backward from end one day per step, evaluating each step's own date.
    Returns 0 when end is before start.
    """
    cursor = _as_date(end)
    remaining = (cursor - _as_date(start)).days

    count = 0
    while remaining >= 0:
        if not is_weekend(cursor):
            count += 1
        cursor = cursor - timedelta(days=1)
        remaining -= 1

    return count
