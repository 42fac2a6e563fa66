"""Pydantic schemas for API responses"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from meal_topup.domain.models import BalanceReport


class BalanceReportResponse(BaseModel):
    """Response for GET /"""

    model_config = ConfigDict(populate_by_name=True)

    current_balance: float = Field(..., alias="currentBalance")
    current_balance_in_meals: int = Field(..., alias="currentBalanceInNumberOfMeals")
    currency_unit: str = Field(..., alias="balanceCurrencyUnit")
    weekdays_until_payday: int = Field(..., alias="weekdaysUntilNextPayment", ge=0)
    price_per_meal: float = Field(..., alias="pricePerMeal", gt=0)
    meals_needed: int = Field(..., alias="mealsNeeded")
    topup_needed: float = Field(..., alias="topupNeeded")
    last_topped_up_utc: datetime = Field(..., alias="lastToppedUpUTC")

    @classmethod
    def from_report(cls, report: BalanceReport) -> "BalanceReportResponse":
        return cls(
            current_balance=float(report.current_balance),
            current_balance_in_meals=report.current_balance_in_meals,
            currency_unit=report.currency_unit,
            weekdays_until_payday=report.weekdays_until_payday,
            price_per_meal=float(report.price_per_meal),
            meals_needed=report.meals_needed,
            topup_needed=float(report.topup_needed),
            last_topped_up_utc=report.last_topped_up.astimezone(timezone.utc),
        )


class ErrorResponse(BaseModel):
    """Body returned when a report cannot be produced"""

    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
