"""Unit tests for report orchestration"""

import asyncio
import pytest
from datetime import date, datetime
from decimal import Decimal
from meal_topup.domain.exceptions import ExtractionError, PortalError


class SlowPortalClient:
    async def get_balance(self):
        await asyncio.sleep(1)


async def test_generate_report(make_service, make_portal, sample_balance):
    """Test full flow: 20 Sep 2022 (Tuesday), payday 15th -> Friday 14 Oct"""
    portal = make_portal(balance=sample_balance)
    service = make_service(portal, payment_day=15, price=Decimal("25"))

    result = await service.generate(now=datetime(2022, 9, 20, 10, 0).astimezone())

    assert result.payday == date(2022, 10, 14)
    report = result.report
    assert report.weekdays_until_payday == 19
    assert report.current_balance_in_meals == 5
    assert report.meals_needed == 14
    assert report.topup_needed == Decimal("350")
    assert report.currency_unit == "NOK"
    assert portal.calls == 1


async def test_generate_report_respects_holidays(make_service, make_portal, make_calendar, sample_balance):
    """Test holiday on payday shortens the weekday count"""
    calendar = make_calendar([date(2022, 10, 14)])
    service = make_service(make_portal(balance=sample_balance), calendar=calendar, payment_day=15)

    result = await service.generate(now=datetime(2022, 9, 20, 10, 0).astimezone())

    assert result.payday == date(2022, 10, 13)
    assert result.report.weekdays_until_payday == 18


async def test_generate_portal_error_propagates(make_service, make_portal):
    service = make_service(make_portal(error=PortalError("login page changed")))

    with pytest.raises(PortalError):
        await service.generate()


async def test_generate_extraction_error_propagates(make_service, make_portal):
    service = make_service(make_portal(error=ExtractionError("no balance")))

    with pytest.raises(ExtractionError):
        await service.generate()


async def test_generate_timeout_becomes_portal_error(make_service):
    service = make_service(SlowPortalClient(), timeout=0.01)

    with pytest.raises(PortalError, match="timeout"):
        await service.generate()
