"""Public holiday calendar backed by the holidays library"""

from datetime import date
from typing import Dict, FrozenSet

import holidays

from meal_topup.domain.exceptions import ConfigurationError


class HolidayCalendar:
    """Provides the set of public holiday dates for one country, per year."""

    def __init__(self, country: str = "NO", subdiv: str | None = None):
        """
        Args:
            country: ISO 3166-1 alpha-2 country code.
            subdiv: Optional subdivision code (state, county) for regional holidays.

        Raises:
            ConfigurationError: If the holidays library has no calendar for the country
                or subdivision.
        """
        supported = holidays.list_supported_countries()
        if country not in supported:
            raise ConfigurationError(f"Unsupported holiday country: {country}")
        if subdiv is not None and subdiv not in supported[country]:
            raise ConfigurationError(f"Unsupported subdivision {subdiv} for {country}")

        self.country = country
        self.subdiv = subdiv
        self._cache: Dict[int, FrozenSet[date]] = {}

    def holidays_for(self, year: int) -> FrozenSet[date]:
        """
        Get all holiday dates observed in a year.

        Years the library has no data for yield an empty set.
        """
        if year not in self._cache:
            if self.country == "NO":
                # Norwegian law lists every Sunday as a holiday; weekends are handled separately
                country_holidays = holidays.Norway(
                    subdiv=self.subdiv, years=year, include_sundays=False
                )
            else:
                country_holidays = holidays.country_holidays(
                    self.country, subdiv=self.subdiv, years=year
                )
            self._cache[year] = frozenset(day for day in country_holidays if day.year == year)
        return self._cache[year]
