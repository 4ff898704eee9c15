from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Literal

from .time import from_jdn, weekday_from_jdn

CalendarSystem = Literal["julian", "gregorian"]


@dataclass(frozen=True)
class CalendarDate:
    """A civil date resolved for one country, tagged with the calendar that produced it."""
    year: int
    month: int
    day: int
    jdn: int
    system: CalendarSystem

    @property
    def weekday(self) -> int:
        # 0=Sun..6=Sat
        return weekday_from_jdn(self.jdn)

    def to_gregorian(self) -> date:
        """The same day as a (proleptic Gregorian) datetime.date."""
        return from_jdn(self.jdn)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class TransitionLookup:
    country: str
    jdn: int
    registered: bool


@dataclass(frozen=True)
class TransitionInfo:
    country: str
    transition_jdn: int
    gregorian_start_date: CalendarDate
    julian_end_date: CalendarDate
    gap_days: int
    registered: bool = True


@dataclass(frozen=True)
class Holiday:
    date: date
    name: str
