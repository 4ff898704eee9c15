"""
reformcal.month
---------------
MonthGrid: one civil month for one country, laid out as 7-column weeks.

Gap days (civil dates skipped by the country's Gregorian reform) take no slot
in the grid, so the days on either side of a gap sit next to each other and
keep their true weekdays.
"""

from __future__ import annotations

import calendar as pycal
import logging
from typing import List, Optional, Tuple

from .core.errors import GapDateError, InvalidDateError, InvalidParameterError
from .core.time import gregorian_month_length
from .core.types import CalendarDate, Holiday
from .holiday import HolidayCache, HolidayProvider, HolidaysLibraryProvider
from .transitions import create_date

logger = logging.getLogger(__name__)

WEEK_DAYS = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")
DAY_ABBREVS = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")

Week = List[Optional[int]]


def week_start_index(start_of_week: str) -> int:
    """Index of a weekday name in the canonical Sunday=0..Saturday=6 order."""
    name = str(start_of_week).strip().lower()
    if name not in WEEK_DAYS:
        raise InvalidParameterError(
            f"Invalid start_of_week: {start_of_week}. Must be one of: {', '.join(WEEK_DAYS)}"
        )
    return WEEK_DAYS.index(name)


class MonthGrid:
    def __init__(
        self,
        year: int,
        month: int,
        country: str,
        start_of_week: str = "sunday",
        *,
        provider: Optional[HolidayProvider] = None,
    ):
        if isinstance(year, bool) or not isinstance(year, int) or year <= 0:
            raise InvalidParameterError(f"Invalid year: {year}")
        if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
            raise InvalidParameterError(f"Invalid month: {month}")

        self.year = year
        self.month = month
        self.country = str(country).strip().upper()
        self._start_index = week_start_index(start_of_week)
        self.start_of_week = WEEK_DAYS[self._start_index]
        self._provider = provider
        self._holiday_cache: Optional[HolidayCache] = None

    def __repr__(self) -> str:
        return (
            f"MonthGrid(year={self.year}, month={self.month}, "
            f"country={self.country!r}, start_of_week={self.start_of_week!r})"
        )

    # ---------------------------------------------------------
    # Month shape
    # ---------------------------------------------------------

    @property
    def days_in_month(self) -> int:
        """Nominal (proleptic Gregorian) length; gap days are still counted."""
        return gregorian_month_length(self.year, self.month)

    @property
    def first_day_of_month(self) -> CalendarDate:
        try:
            return create_date(self.year, self.month, 1, self.country)
        except GapDateError:
            logger.debug("%s: day 1 falls in the transition gap, scanning forward", self)
        return self._scan(range(2, self.days_in_month + 1))

    @property
    def last_day_of_month(self) -> CalendarDate:
        last = self.days_in_month
        try:
            return create_date(self.year, self.month, last, self.country)
        except GapDateError:
            logger.debug("%s: day %d falls in the transition gap, scanning backward", self, last)
        return self._scan(range(last - 1, 0, -1))

    def _scan(self, days: range) -> CalendarDate:
        for day in days:
            try:
                return create_date(self.year, self.month, day, self.country)
            except GapDateError:
                continue
        raise GapDateError(self.year, self.month, days.start, self.country)

    @property
    def leading_empty_days(self) -> int:
        return (self.first_day_of_month.weekday - self._start_index) % 7

    @property
    def day_headers(self) -> List[str]:
        i = self._start_index
        return list(DAY_ABBREVS[i:] + DAY_ABBREVS[:i])

    @property
    def month_year_header(self) -> str:
        return f"{pycal.month_name[self.month]} {self.year}"

    # ---------------------------------------------------------
    # Days
    # ---------------------------------------------------------

    def to_date(self, day: Optional[int]) -> Optional[CalendarDate]:
        """
        Resolve a day of this month. Returns None for blanks, out-of-range days
        and gap days alike.
        """
        if day is None or not 1 <= day <= self.days_in_month:
            return None
        try:
            return create_date(self.year, self.month, day, self.country)
        except (GapDateError, InvalidDateError):
            return None

    @property
    def valid_days(self) -> List[int]:
        return [d for d in range(1, self.days_in_month + 1) if self.to_date(d) is not None]

    @property
    def calendar_grid(self) -> List[Week]:
        """
        Weeks of 7 slots. None marks a blank; gap days are left out entirely.

        [[None, None, None, None, None, None, 1],
         [2, 3, 4, 5, 6, 7, 8], ...]
        """
        grid: List[Week] = []
        row: Week = [None] * self.leading_empty_days

        for day in self.valid_days:
            row.append(day)
            if len(row) == 7:
                grid.append(row)
                row = []

        if row:
            row.extend([None] * (7 - len(row)))
            grid.append(row)
        return grid

    # ---------------------------------------------------------
    # Holidays
    # ---------------------------------------------------------

    @property
    def holiday_cache(self) -> HolidayCache:
        if self._holiday_cache is None:
            provider = self._provider if self._provider is not None else HolidaysLibraryProvider()
            self._holiday_cache = HolidayCache(self, provider)
        return self._holiday_cache

    def is_holiday(self, day: Optional[int]) -> bool:
        return self.holiday_cache.is_holiday(day)

    def holiday_names(self, day: Optional[int]) -> List[str]:
        return self.holiday_cache.names(day)

    def holidays(self) -> List[Tuple[int, Holiday]]:
        return self.holiday_cache.holidays()
