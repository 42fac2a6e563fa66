"""Unit tests for weekday counting"""

import pytest
from datetime import date, datetime, timedelta
from meal_topup.domain.weekdays import weekdays_between


def test_weekdays_between_end_before_start_is_zero():
    """Test reversed range is a valid zero result, not an error"""
    assert weekdays_between(date(2024, 3, 10), date(2024, 3, 5)) == 0


def test_weekdays_between_same_weekday():
    """Test single weekday counts once"""
    tuesday = date(2024, 3, 5)
    assert weekdays_between(tuesday, tuesday) == 1


@pytest.mark.parametrize("weekend_day", [date(2024, 3, 9), date(2024, 3, 10)])
def test_weekdays_between_same_weekend_day(weekend_day):
    """Test single Saturday or Sunday counts zero"""
    assert weekdays_between(weekend_day, weekend_day) == 0


def test_weekdays_between_any_seven_day_span_is_five():
    """Test inclusive 7-day windows always contain 5 weekdays"""
    start = date(2024, 3, 1)
    for offset in range(14):
        first = start + timedelta(days=offset)
        assert weekdays_between(first, first + timedelta(days=6)) == 5


def test_weekdays_between_full_month():
    """Test March 2024 has 21 weekdays"""
    assert weekdays_between(date(2024, 3, 1), date(2024, 3, 31)) == 21


def test_weekdays_between_ignores_time_of_day():
    """Test afternoon start still counts its own date"""
    now = datetime(2024, 3, 5, 15, 0)  # Tuesday afternoon

    assert weekdays_between(now, date(2024, 3, 8)) == 4


def test_weekdays_between_does_not_modify_arguments():
    """Test inputs are left untouched"""
    start = date(2024, 3, 5)
    end = date(2024, 3, 15)

    weekdays_between(start, end)

    assert start == date(2024, 3, 5)
    assert end == date(2024, 3, 15)
