"""Pytest fixtures for testing"""

import os

# Settings are loaded at import time; provide a complete environment first
os.environ.setdefault("PAYMENT_DAY_IN_MONTH", "20")
os.environ.setdefault("PRICE_PER_MEAL", "25")
os.environ.setdefault("ACCOUNT_URL", "http://localhost:8001/")

import pytest
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable
from fastapi.testclient import TestClient
from meal_topup.api.main import create_app
from meal_topup.domain.exceptions import PortalError
from meal_topup.domain.models import BalanceRecord
from meal_topup.services.report import ReportService


class FixedHolidayCalendar:
    """Holiday calendar with an explicit list of dates"""

    def __init__(self, days: Iterable[date] = ()):
        self.days = frozenset(days)
        self.requested_years: list[int] = []

    def holidays_for(self, year: int) -> frozenset[date]:
        self.requested_years.append(year)
        return frozenset(d for d in self.days if d.year == year)


class FakePortalClient:
    """Portal client returning a canned balance or raising a canned error"""

    def __init__(self, balance: BalanceRecord | None = None, error: Exception | None = None):
        self.balance = balance
        self.error = error
        self.calls = 0

    async def get_balance(self) -> BalanceRecord:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.balance


@pytest.fixture
def sample_balance() -> BalanceRecord:
    """130 NOK, topped up 1 March 2024 at 12:30 local time"""
    return BalanceRecord(
        amount=Decimal("130"),
        currency_unit="NOK",
        last_topped_up=datetime(2024, 3, 1, 12, 30).astimezone(),
    )


@pytest.fixture
def empty_calendar() -> FixedHolidayCalendar:
    return FixedHolidayCalendar()


@pytest.fixture
def make_service():
    """Build a ReportService around a fake portal client"""

    def _make(portal_client, calendar=None, payment_day=20, price=Decimal("25"), timeout=5.0):
        return ReportService(
            portal_client=portal_client,
            calendar=calendar or FixedHolidayCalendar(),
            payment_day_in_month=payment_day,
            price_per_meal=price,
            fetch_timeout=timeout,
        )

    return _make


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    """FastAPI test client whose portal always fails unless a test swaps the service"""
    app.state.report_service.portal_client = FakePortalClient(error=PortalError("not stubbed"))
    return TestClient(app)


@pytest.fixture
def make_calendar():
    """Factory for FixedHolidayCalendar"""
    return FixedHolidayCalendar


@pytest.fixture
def make_portal():
    """Factory for FakePortalClient"""
    return FakePortalClient
