"""Top-up calculation - how much to add so every remaining weekday gets a meal"""

import math
from decimal import Decimal

from meal_topup.domain.exceptions import InvalidMealPriceError
from meal_topup.domain.models import BalanceRecord, BalanceReport


def compute_report(
    balance: BalanceRecord,
    price_per_meal: Decimal,
    weekdays_remaining: int,
) -> BalanceReport:
    """
    Derive the top-up report from a balance, a meal price and the weekdays left.

    - balance in meals = floor(amount / price)
    - meals needed = weekdays remaining - balance in meals (negative = surplus)
    - top-up needed = meals needed * price (negative = nothing to top up, not clamped)

    Example:
        price 25, balance 130, 3 weekdays -> 5 meals, -2 needed, top-up -50

    Raises:
        InvalidMealPriceError: If price_per_meal is zero or negative
    """
    if price_per_meal <= 0:
        raise InvalidMealPriceError(f"Price per meal must be positive, got {price_per_meal}")

    balance_in_meals = math.floor(balance.amount / price_per_meal)
    meals_needed = weekdays_remaining - balance_in_meals
    topup_needed = meals_needed * price_per_meal

    return BalanceReport(
        current_balance=balance.amount,
        current_balance_in_meals=balance_in_meals,
        currency_unit=balance.currency_unit,
        weekdays_until_payday=weekdays_remaining,
        price_per_meal=price_per_meal,
        meals_needed=meals_needed,
        topup_needed=topup_needed,
        last_topped_up=balance.last_topped_up,
    )
