"""Date manipulation utilities"""

import calendar
from datetime import date


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month"""
    return calendar.monthrange(year, month)[1]


def clamped_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping day to the last day of the month (31 in April -> April 30)"""
    return date(year, month, min(day, days_in_month(year, month)))


def add_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Shift a (year, month) pair by a number of months"""
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def is_weekend(day: date) -> bool:
    """Saturday or Sunday"""
    return day.weekday() >= 5
