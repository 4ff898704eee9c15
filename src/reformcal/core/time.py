from __future__ import annotations
from datetime import date
from typing import Tuple

YMD = Tuple[int, int, int]

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap(y: int) -> bool:
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def is_julian_leap(y: int) -> bool:
    return y % 4 == 0


def gregorian_month_length(y: int, m: int) -> int:
    if m == 2 and is_gregorian_leap(y):
        return 29
    return _GREGORIAN_MONTH_DAYS[m - 1]


def julian_month_length(y: int, m: int) -> int:
    if m == 2 and is_julian_leap(y):
        return 29
    return _GREGORIAN_MONTH_DAYS[m - 1]


def gregorian_to_jdn(y: int, m: int, day: int) -> int:
    """Gregorian civil date -> Julian Day Number (proleptic Gregorian)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def julian_to_jdn(y: int, m: int, day: int) -> int:
    """Julian civil date -> Julian Day Number (proleptic Julian)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083


def jdn_to_gregorian(jdn: int) -> YMD:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def jdn_to_julian(jdn: int) -> YMD:
    """Inverse of julian_to_jdn."""
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: date) -> int:
    """Convert a datetime.date (proleptic Gregorian) to JDN."""
    return gregorian_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    return date(*jdn_to_gregorian(jdn))


def weekday_from_jdn(jdn: int) -> int:
    # Convention: 0=Sun..6=Sat. JDN 0 was a Monday.
    return (jdn + 1) % 7
