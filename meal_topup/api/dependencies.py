"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from meal_topup.config import Settings
from meal_topup.domain.holiday_calendar import HolidayCalendar
from meal_topup.infrastructure.clients.portal import PortalClient
from meal_topup.services.report import ReportService


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def build_report_service(settings: Settings) -> ReportService:
    """Wire the report service from settings; fails fast on an unsupported holiday calendar"""
    return ReportService(
        portal_client=PortalClient(),
        calendar=HolidayCalendar(settings.holiday_country, subdiv=settings.holiday_subdivision),
        payment_day_in_month=settings.payment_day_in_month,
        price_per_meal=settings.price_per_meal,
        fetch_timeout=settings.report_timeout_seconds,
    )


def get_report_service(request: Request) -> ReportService:
    """Provide the report service built at startup"""
    return request.app.state.report_service
