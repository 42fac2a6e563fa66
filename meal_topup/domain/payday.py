"""Payday resolution - next business day on or before the configured day of month"""

from datetime import date, datetime, time, timedelta

from meal_topup.domain.exceptions import PaydayResolutionError
from meal_topup.domain.holiday_calendar import HolidayCalendar
from meal_topup.utils.date_utils import add_months, clamped_date, is_weekend

# Longest plausible run of weekend + holiday days before a payday
MAX_BACKWARD_STEPS = 31


def next_payday(now: datetime, payment_day_of_month: int, calendar: HolidayCalendar) -> date:
    """
    Resolve the next payday.

    Rules:
    - Candidate is payment_day_of_month in the current month, at midnight.
      Days past the end of the month clamp to the last day (31 -> April 30).
    - If that midnight is already behind `now`, move to the same day next month.
    - Step back one day at a time while the candidate is a weekend day or a
      holiday in the candidate's own year.

    Raises:
        PaydayResolutionError: If no business day is found within MAX_BACKWARD_STEPS days
    """
    candidate = clamped_date(now.year, now.month, payment_day_of_month)
    if datetime.combine(candidate, time.min, tzinfo=now.tzinfo) < now:
        year, month = add_months(now.year, now.month, 1)
        candidate = clamped_date(year, month, payment_day_of_month)

    steps = 0
    while is_weekend(candidate) or candidate in calendar.holidays_for(candidate.year):
        if steps >= MAX_BACKWARD_STEPS:
            raise PaydayResolutionError(
                f"No business day within {MAX_BACKWARD_STEPS} days before {candidate}"
            )
        candidate = candidate - timedelta(days=1)
        steps += 1

    return candidate
