"""reformcal public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .core.errors import (
    ConfigError,
    GapDateError,
    InvalidDateError,
    InvalidParameterError,
    ReformcalError,
    UnknownRegionError,
)
from .core.types import CalendarDate, Holiday, TransitionInfo, TransitionLookup
from .transitions import (
    create_date,
    jdn_for,
    lookup_transition,
    supported_countries,
    transition_info,
    valid_date,
)
from .holiday import HolidayCache, HolidayProvider, HolidaysLibraryProvider
from .month import MonthGrid
from .formatter import Formatter

__all__ = [
    "CalendarDate",
    "Holiday",
    "TransitionInfo",
    "TransitionLookup",
    "create_date",
    "jdn_for",
    "lookup_transition",
    "supported_countries",
    "transition_info",
    "valid_date",
    "MonthGrid",
    "HolidayCache",
    "HolidayProvider",
    "HolidaysLibraryProvider",
    "Formatter",
    "ReformcalError",
    "InvalidParameterError",
    "InvalidDateError",
    "GapDateError",
    "UnknownRegionError",
    "ConfigError",
]
