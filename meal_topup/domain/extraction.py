"""Balance extraction from the text rendered by the account portal"""

import re
from datetime import datetime
from decimal import Decimal, InvalidOperation

from meal_topup.domain.exceptions import ExtractionError
from meal_topup.domain.models import BalanceRecord

BALANCE_PATTERN = re.compile(r"^Saldo: ([0-9].*) ([A-Z]{1,5})$", re.IGNORECASE)
DATE_PATTERN = re.compile(r"^([0-9]{1,2})\.([0-9]{1,2})\.([0-9]{4}) ([0-9]{1,2}):([0-9]{1,2})$")

# Thousands separators the portal may render: space, no-break space, narrow no-break space
_GROUPING_CHARS = str.maketrans("", "", " \u00a0\u202f")


def parse_amount(raw: str) -> Decimal:
    """Parse "1 234,50" or "1234.50" into a Decimal"""
    normalized = raw.translate(_GROUPING_CHARS).replace(",", ".")
    try:
        amount = Decimal(normalized)
    except InvalidOperation as e:
        raise ExtractionError(f"Could not parse balance amount: {raw!r}") from e
    if not amount.is_finite() or amount < 0:
        raise ExtractionError(f"Balance amount out of range: {raw!r}")
    return amount


def parse_balance_text(balance_text: str) -> tuple[Decimal, str]:
    """
    Parse "Saldo: <number> <CURRENCY>" (case-insensitive).

    Returns:
        (amount, upper-cased currency code)
    """
    match = BALANCE_PATTERN.match(balance_text.strip())
    if match is None:
        raise ExtractionError(f"Could not extract balance from markup: {balance_text!r}")
    return parse_amount(match.group(1)), match.group(2).upper()


def parse_topup_date(date_text: str) -> datetime:
    """Parse "DD.MM.YYYY HH:MM" as host local time, returned timezone-aware"""
    match = DATE_PATTERN.match(date_text.strip())
    if match is None:
        raise ExtractionError(f"Could not extract date from markup: {date_text!r}")

    day, month, year, hour, minute = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, hour, minute).astimezone()
    except ValueError as e:
        raise ExtractionError(f"Invalid top-up date: {date_text!r}") from e


def extract_balance(balance_text: str, date_text: str) -> BalanceRecord:
    """
    Build a BalanceRecord from the raw balance and date texts.

    Raises:
        ExtractionError: If either text does not match its expected format
    """
    amount, currency_unit = parse_balance_text(balance_text)
    return BalanceRecord(
        amount=amount,
        currency_unit=currency_unit,
        last_topped_up=parse_topup_date(date_text),
    )
