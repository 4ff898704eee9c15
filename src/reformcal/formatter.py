from __future__ import annotations

import calendar as pycal
from typing import List, Optional, Sequence, Tuple

from .core.errors import InvalidParameterError
from .holiday import HolidayProvider
from .month import MonthGrid, Week

MONTH_WIDTH = 20   # 7 cells of 2 + 6 separators
YEAR_WIDTH = 64    # 3 months + 2 gutters of 2


def quarter_months(year: int, month: int) -> List[Tuple[int, int]]:
    """(year, month) for the previous, current and next month."""
    out = []
    for m in (month - 1, month, month + 1):
        if m < 1:
            out.append((year - 1, 12))
        elif m > 12:
            out.append((year + 1, 1))
        else:
            out.append((year, m))
    return out


def cell(day: Optional[int]) -> str:
    return "  " if day is None else f"{day:2d}"


def week_line(week: Week) -> str:
    return " ".join(cell(d) for d in week)


class Formatter:
    """Plain-text month, quarter and year layouts."""

    def __init__(self, *, show_holidays: bool = False):
        self.show_holidays = show_holidays

    def format_month(self, grid: MonthGrid) -> str:
        """Header, weekday names, then one line per week (optionally followed by holidays)."""
        lines = [grid.month_year_header.center(MONTH_WIDTH), ""]
        lines.append(" ".join(grid.day_headers))
        lines.extend(week_line(wk) for wk in grid.calendar_grid)

        if self.show_holidays:
            found = grid.holidays()
            if found:
                lines.append("")
                lines.extend(f"{day:2d}  {h.name}" for day, h in found)

        return "\n".join(lines)

    def format_quarter(self, grids: Sequence[MonthGrid]) -> str:
        if len(grids) != 3:
            raise InvalidParameterError("Expected 3 calendars for quarter view")

        lines = ["  ".join(g.month_year_header.center(MONTH_WIDTH) for g in grids), ""]
        lines.append("  ".join(" ".join(g.day_headers) for g in grids))

        weeks = [g.calendar_grid for g in grids]
        for i in range(max(len(w) for w in weeks)):
            parts = [week_line(w[i]) if i < len(w) else " " * MONTH_WIDTH for w in weeks]
            lines.append("  ".join(parts))

        if self.show_holidays:
            found = [
                f"{pycal.month_abbr[g.month]} {day:2d}  {h.name}"
                for g in grids
                for day, h in g.holidays()
            ]
            if found:
                lines.append("")
                lines.extend(found)

        return "\n".join(lines)

    def format_year(
        self,
        year: int,
        country: str,
        start_of_week: str = "sunday",
        *,
        provider: Optional[HolidayProvider] = None,
    ) -> str:
        quarters = []
        for first in (1, 4, 7, 10):
            grids = [
                MonthGrid(year, m, country, start_of_week, provider=provider)
                for m in range(first, first + 3)
            ]
            quarters.append(self.format_quarter(grids))

        return "\n".join([str(year).center(YEAR_WIDTH), "", "\n\n".join(quarters)])
