"""Report orchestration - payday, weekdays, balance fetch and top-up in one pass"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from meal_topup.domain.exceptions import PortalError
from meal_topup.domain.holiday_calendar import HolidayCalendar
from meal_topup.domain.models import BalanceReport
from meal_topup.domain.payday import next_payday
from meal_topup.domain.topup import compute_report
from meal_topup.domain.weekdays import weekdays_between
from meal_topup.infrastructure.clients.portal import PortalClient
from meal_topup.infrastructure.observability.metrics import portal_fetch_failures_counter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportResult:
    """Report together with the payday it was computed against"""

    report: BalanceReport
    payday: date


class ReportService:
    """Builds a BalanceReport for the configured meal account"""

    def __init__(
        self,
        portal_client: PortalClient,
        calendar: HolidayCalendar,
        payment_day_in_month: int,
        price_per_meal: Decimal,
        fetch_timeout: float,
    ):
        self.portal_client = portal_client
        self.calendar = calendar
        self.payment_day_in_month = payment_day_in_month
        self.price_per_meal = price_per_meal
        self.fetch_timeout = fetch_timeout

    async def generate(self, now: datetime | None = None) -> ReportResult:
        """
        Generate a fresh report.

        Flow:
        1. Resolve the next payday
        2. Count weekdays from now until payday
        3. Fetch the balance from the account portal (one fetch, no retry)
        4. Compute the top-up

        Raises:
            PortalError: If the portal fetch fails or exceeds fetch_timeout
            ExtractionError: If the portal texts cannot be parsed
        """
        now = now or datetime.now().astimezone()

        payday = next_payday(now, self.payment_day_in_month, self.calendar)
        weekdays = weekdays_between(now, payday)
        logger.debug("Resolved payday", extra={"payday": payday.isoformat(), "weekdays": weekdays})

        try:
            balance = await asyncio.wait_for(self.portal_client.get_balance(), self.fetch_timeout)
        except asyncio.TimeoutError as e:
            portal_fetch_failures_counter.inc()
            raise PortalError(f"Account portal timeout after {self.fetch_timeout}s") from e
        except PortalError:
            portal_fetch_failures_counter.inc()
            raise

        report = compute_report(balance, self.price_per_meal, weekdays)
        return ReportResult(report=report, payday=payday)
