"""
reformcal.holiday
-----------------
Holiday lookup for one month.

A provider answers "which holidays fall between two Gregorian dates for this
country". HolidayCache calls it once per MonthGrid, indexes the answer by JDN
and turns every provider failure into an empty month plus a warning.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, Tuple

import holidays

from .core.errors import UnknownRegionError
from .core.time import to_jdn
from .core.types import Holiday

if TYPE_CHECKING:
    from .month import MonthGrid

logger = logging.getLogger(__name__)


class HolidayProvider(Protocol):
    def lookup(self, start: date, end: date, country: str) -> List[Holiday]: ...


class HolidaysLibraryProvider:
    """Provider backed by the `holidays` package (modern Gregorian dates only)."""

    def __init__(self, *, language: Optional[str] = None):
        self.language = language

    def lookup(self, start: date, end: date, country: str) -> List[Holiday]:
        code = str(country).strip().upper()
        try:
            table = holidays.country_holidays(
                code,
                years=range(start.year, end.year + 1),
                language=self.language,
            )
        except NotImplementedError as exc:
            raise UnknownRegionError(code) from exc

        out: List[Holiday] = []
        for d in sorted(table):
            if start <= d <= end:
                for name in table.get_list(d):
                    out.append(Holiday(date=d, name=name))
        return out


class HolidayCache:
    def __init__(self, grid: "MonthGrid", provider: HolidayProvider):
        self.grid = grid
        self.provider = provider
        self._by_jdn: Optional[Dict[int, List[Holiday]]] = None

    def _index(self) -> Dict[int, List[Holiday]]:
        if self._by_jdn is None:
            self._by_jdn = self._fetch()
        return self._by_jdn

    def _fetch(self) -> Dict[int, List[Holiday]]:
        g = self.grid
        country = g.country
        try:
            # The provider only knows modern civil dates: ask for the plain
            # Gregorian month regardless of the country's reform.
            start = date(g.year, g.month, 1)
            end = date(g.year, g.month, g.days_in_month)
            found = self.provider.lookup(start, end, country)
        except UnknownRegionError:
            logger.warning("Unknown country code '%s' for holiday detection", country)
            return {}
        except Exception as exc:
            logger.warning("Holiday detection failed for %s %04d-%02d: %s", country, g.year, g.month, exc)
            return {}

        index: Dict[int, List[Holiday]] = {}
        for h in found:
            index.setdefault(to_jdn(h.date), []).append(h)
        return index

    def is_holiday(self, day: Optional[int]) -> bool:
        d = self.grid.to_date(day)
        if d is None:
            return False
        return d.jdn in self._index()

    def names(self, day: Optional[int]) -> List[str]:
        d = self.grid.to_date(day)
        if d is None:
            return []
        return [h.name for h in self._index().get(d.jdn, [])]

    def holidays(self) -> List[Tuple[int, Holiday]]:
        """(day, Holiday) pairs for every resolvable day of the month, in order."""
        index = self._index()
        out: List[Tuple[int, Holiday]] = []
        for day in self.grid.valid_days:
            d = self.grid.to_date(day)
            for h in index.get(d.jdn, []):
                out.append((day, h))
        return out
