from __future__ import annotations


class ReformcalError(Exception):
    """Base error."""


class InvalidParameterError(ReformcalError, ValueError):
    """Raised when a calendar is constructed with an invalid year, month or week start."""


class InvalidDateError(ReformcalError, ValueError):
    """Raised for a (year, month, day) that exists in no applicable calendar."""


class GapDateError(ReformcalError):
    """Raised when a civil date was skipped by a country's Gregorian reform."""

    def __init__(self, year: int, month: int, day: int, country: str):
        self.year = year
        self.month = month
        self.day = day
        self.country = country
        super().__init__(
            f"Date {year:04d}-{month:02d}-{day:02d} does not exist in "
            f"{country.upper()} due to calendar transition"
        )


class UnknownRegionError(ReformcalError):
    """Raised by a holiday provider that does not know the requested country."""

    def __init__(self, country: str):
        self.country = country
        super().__init__(f"Unknown holiday region '{country}'")


class ConfigError(ReformcalError):
    """Raised for an unreadable or invalid configuration file."""
