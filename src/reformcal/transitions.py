"""
reformcal.transitions
---------------------
Per-country Julian -> Gregorian transition points and the date resolver built
on them.

Each country maps to the Julian Day Number (JDN) of its first Gregorian day.
Days before that JDN follow Julian civil rules, days on or after it follow
Gregorian rules. The civil dates between the last Julian day and the first
Gregorian day never existed in that country (the "gap").

Countries whose pre-modern calendar was not Julian (East and South-East Asia)
are treated as proleptic Gregorian from antiquity. This is a computational
approximation, not a historical claim.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Protocol, Tuple

from .core.errors import GapDateError, InvalidDateError
from .core.time import (
    gregorian_month_length,
    gregorian_to_jdn,
    jdn_to_gregorian,
    jdn_to_julian,
    julian_month_length,
    julian_to_jdn,
)
from .core.types import CalendarDate, TransitionInfo, TransitionLookup

logger = logging.getLogger(__name__)

ITALY = 2299161             # 1582-10-15 (after Julian 1582-10-04)
ENGLAND = 2361222           # 1752-09-14 (after Julian 1752-09-02)
DENMARK = 2342032           # 1700-03-01 (after Julian 1700-02-18)
SWEDEN = 2361390            # 1753-03-01 (after Julian 1753-02-17)
TURKEY = 2421289            # 1917-03-01 (after Rumi 1917-02-15)
BULGARIA = 2420968          # 1916-04-14 (after Julian 1916-03-31)
RUSSIA = 2421639            # 1918-02-14 (after Julian 1918-01-31)
SERBIA = 2421987            # 1919-01-28 (after Julian 1919-01-14)
ROMANIA = 2422063           # 1919-04-14 (after Julian 1919-03-31)
GREECE = 2423480            # 1923-03-01 (after Julian 1923-02-15)
PROLEPTIC_GREGORIAN = 1721426  # 0001-01-01 Gregorian

DEFAULT_TRANSITION = ITALY

TRANSITIONS: Mapping[str, int] = MappingProxyType({
    # Catholic countries that followed the papal bull in 1582 (or close enough)
    "IT": ITALY,
    "ES": ITALY,
    "PT": ITALY,
    "FR": ITALY,
    "PL": ITALY,
    "AT": ITALY,
    "BE": ITALY,
    "LU": ITALY,
    # Regional adoption varied; the 1582 date is the common approximation.
    "DE": ITALY,
    "NL": ITALY,

    # Great Britain and its colonies
    "GB": ENGLAND,
    "IE": ENGLAND,
    "US": ENGLAND,
    "CA": ENGLAND,
    "AU": ENGLAND,
    "NZ": ENGLAND,
    "IN": ENGLAND,

    # Nordic countries
    "DK": DENMARK,
    "NO": DENMARK,
    "SE": SWEDEN,
    "FI": SWEDEN,

    # Eastern Europe and the Balkans
    "BG": BULGARIA,
    "TR": TURKEY,
    "RU": RUSSIA,
    "RS": SERBIA,
    "RO": ROMANIA,
    "GR": GREECE,

    # Non-Julian pre-modern calendars
    "JP": PROLEPTIC_GREGORIAN,
    "CN": PROLEPTIC_GREGORIAN,
    "KR": PROLEPTIC_GREGORIAN,
    "TW": PROLEPTIC_GREGORIAN,
    "TH": PROLEPTIC_GREGORIAN,
    "VN": PROLEPTIC_GREGORIAN,
})


class _CivilDate(Protocol):
    year: int
    month: int
    day: int


def _normalize(country: str) -> str:
    return str(country).strip().upper()


# ============================================================
# Registry
# ============================================================

def lookup_transition(country: str) -> TransitionLookup:
    """
    Resolve a country code (case-insensitive) to its transition point.

    Unknown countries fall back to the Italian point; `registered` is False
    for them so callers can tell a typo from a real entry.
    """
    code = _normalize(country)
    jdn = TRANSITIONS.get(code)
    if jdn is None:
        logger.debug("No transition registered for %r, using default JDN %d", country, DEFAULT_TRANSITION)
        return TransitionLookup(country=code, jdn=DEFAULT_TRANSITION, registered=False)
    return TransitionLookup(country=code, jdn=jdn, registered=True)


def jdn_for(country: str) -> int:
    return lookup_transition(country).jdn


def supported_countries() -> List[str]:
    return sorted(TRANSITIONS)


# ============================================================
# Resolver
# ============================================================

def _is_valid_triple(year: int, month: int, day: int, *, julian: bool) -> bool:
    if not 1 <= month <= 12 or day < 1:
        return False
    if julian:
        return day <= julian_month_length(year, month)
    return day <= gregorian_month_length(year, month)


def _inside_gap(ymd: Tuple[int, int, int], point: int) -> bool:
    """Civil order: last Julian day < ymd < first Gregorian day."""
    return jdn_to_julian(point - 1) < ymd < jdn_to_gregorian(point)


def create_date(year: int, month: int, day: int, country: str) -> CalendarDate:
    """
    Resolve a civil (year, month, day) for a country.

    The Gregorian reading is tried first; if it lands before the transition
    point the Julian reading is tried. When the Gregorian reading is too early
    and the Julian reading is too late, the day was skipped: GapDateError.
    """
    point = jdn_for(country)

    greg_ok = _is_valid_triple(year, month, day, julian=False)
    jul_ok = _is_valid_triple(year, month, day, julian=True)
    if not (greg_ok or jul_ok):
        raise InvalidDateError(f"Invalid date: {year:04d}-{month:02d}-{day:02d}")

    greg_jdn = gregorian_to_jdn(year, month, day)
    if greg_ok and greg_jdn >= point:
        return CalendarDate(year, month, day, greg_jdn, "gregorian")

    jul_jdn = julian_to_jdn(year, month, day)
    if jul_ok and jul_jdn < point:
        return CalendarDate(year, month, day, jul_jdn, "julian")

    if (greg_ok and jul_ok) or _inside_gap((year, month, day), point):
        raise GapDateError(year, month, day, _normalize(country))

    # Exists only in the calendar that does not govern this side of the point,
    # e.g. 1800-02-29 in Britain.
    raise InvalidDateError(
        f"Date {year:04d}-{month:02d}-{day:02d} does not exist in {_normalize(country)}"
    )


def valid_date(date: _CivilDate, country: str) -> bool:
    """True if the civil (year, month, day) of `date` existed in `country`."""
    y, m, d = date.year, date.month, date.day
    greg_ok = _is_valid_triple(y, m, d, julian=False)
    jul_ok = _is_valid_triple(y, m, d, julian=True)
    if not (greg_ok or jul_ok):
        return False

    point = jdn_for(country)
    julian_jdn = julian_to_jdn(y, m, d)
    gregorian_jdn = gregorian_to_jdn(y, m, d)
    if greg_ok and jul_ok and julian_jdn == gregorian_jdn:
        return True

    return (jul_ok and julian_jdn < point) or (greg_ok and gregorian_jdn >= point)


def transition_info(country: str) -> TransitionInfo:
    look = lookup_transition(country)
    point = look.jdn

    gy, gm, gd = jdn_to_gregorian(point)
    jy, jm, jd = jdn_to_julian(point - 1)
    gregorian_start = CalendarDate(gy, gm, gd, point, "gregorian")
    julian_end = CalendarDate(jy, jm, jd, point - 1, "julian")

    if (gy, gm, gd) <= (jy, jm, jd):
        # Julian reckoning was not behind Gregorian here: nothing was skipped.
        gap_days = 0
    else:
        gap_days = gd - jd - 1
        if gap_days < 0:
            # Crosses a month (or year) boundary: borrow the Julian month length.
            gap_days = (julian_month_length(jy, jm) - jd) + gd - 1

    return TransitionInfo(
        country=look.country,
        transition_jdn=point,
        gregorian_start_date=gregorian_start,
        julian_end_date=julian_end,
        gap_days=gap_days,
        registered=look.registered,
    )
