"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class BalanceRecord:
    """Meal account balance scraped from the account portal"""

    amount: Decimal
    currency_unit: str  # e.g. "NOK"
    last_topped_up: datetime  # timezone-aware, host local time


@dataclass(frozen=True)
class BalanceReport:
    """Output of the top-up calculation"""

    current_balance: Decimal
    current_balance_in_meals: int
    currency_unit: str
    weekdays_until_payday: int
    price_per_meal: Decimal
    meals_needed: int  # negative means surplus
    topup_needed: Decimal  # negative means no top-up needed
    last_topped_up: datetime
