from __future__ import annotations

import argparse
from datetime import date
from importlib.metadata import PackageNotFoundError, version as dist_version
import logging
import sys
from typing import Optional

from .config import FORMATS, Config, load_config, resolve_country
from .core.errors import InvalidParameterError, ReformcalError
from .formatter import Formatter, quarter_months
from .month import WEEK_DAYS, MonthGrid
from .transitions import TRANSITIONS, supported_countries, transition_info

_COMMANDS = ("show", "transition", "countries")


def _version() -> str:
    try:
        return dist_version("reformcal")
    except PackageNotFoundError:
        return "unknown"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _month_year(positionals: list[int], today: date) -> tuple[int, int]:
    """
    Interpret up to two positional numbers:
      (none)      -> current month
      M           -> month M of the current year (1..12)
      Y           -> current month of year Y (any value > 12)
      M Y         -> month M of year Y
    """
    if not positionals:
        return today.month, today.year
    if len(positionals) == 1:
        n = positionals[0]
        if 1 <= n <= 12:
            return n, today.year
        return today.month, n
    if len(positionals) == 2:
        return positionals[0], positionals[1]
    raise InvalidParameterError("Expected at most two positional arguments: [MONTH] [YEAR]")


def cmd_show(argv: list[str], *, today: Optional[date] = None) -> int:
    p = argparse.ArgumentParser(prog="reformcal show", description="Print a month, quarter or year calendar")
    p.add_argument("when", nargs="*", type=int, metavar="MONTH/YEAR", help="[MONTH] [YEAR]")
    p.add_argument("-f", "--format", choices=FORMATS, default=None)
    p.add_argument("-c", "--country", default=None, help="country code, e.g. GB (default: config, then locale)")
    p.add_argument("-w", "--start-of-week", choices=WEEK_DAYS, default=None, type=str.lower)
    p.add_argument("--holidays", action="store_const", const=True, default=None, help="list holiday names under the calendar")
    p.add_argument("--config", default=None, help="path to a config.toml")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    today = today or date.today()
    cfg: Config = load_config(args.config).merged(
        format=args.format,
        start_of_week=args.start_of_week,
        show_holidays=args.holidays,
    )
    country = resolve_country(args.country, cfg)
    month, year = _month_year(args.when, today)

    fmt = Formatter(show_holidays=cfg.show_holidays)
    if cfg.format == "year":
        out = fmt.format_year(year, country, cfg.start_of_week)
    elif cfg.format == "quarter":
        grids = [MonthGrid(y, m, country, cfg.start_of_week) for y, m in quarter_months(year, month)]
        out = fmt.format_quarter(grids)
    else:
        out = fmt.format_month(MonthGrid(year, month, country, cfg.start_of_week))

    print(out)
    return 0


def cmd_transition(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="reformcal transition", description="Show a country's Julian -> Gregorian transition")
    p.add_argument("country")
    args = p.parse_args(argv)

    info = transition_info(args.country)
    print(f"Country            : {info.country}" + ("" if info.registered else "  (not registered, using default)"))
    print(f"Transition JDN     : {info.transition_jdn}")
    print(f"Last Julian day    : {info.julian_end_date.isoformat()} (Julian)")
    print(f"First Gregorian day: {info.gregorian_start_date.isoformat()} (Gregorian)")
    print(f"Skipped days       : {info.gap_days}")
    return 0


def cmd_countries(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="reformcal countries", description="List countries with a registered transition")
    p.parse_args(argv)

    for code in supported_countries():
        info = transition_info(code)
        print(f"{code}  {TRANSITIONS[code]}  {info.gregorian_start_date.isoformat()}  gap={info.gap_days}")
    return 0


def main(argv: list[str] | None = None, *, today: Optional[date] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # `reformcal`, `reformcal 10 1582 -c IT`, `reformcal -f year` all mean `show`.
    if not argv or argv[0] not in _COMMANDS + ("-h", "--help", "--version"):
        argv = ["show"] + list(argv)

    p = argparse.ArgumentParser(prog="reformcal", description="Calendars with per-country Gregorian reform gaps.")
    p.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("show", help="Print a month, quarter or year calendar")
    sub.add_parser("transition", help="Show a country's Julian -> Gregorian transition")
    sub.add_parser("countries", help="List registered countries")

    args, rest = p.parse_known_args(argv[:1])
    rest += argv[1:]

    try:
        if args.cmd == "show":
            return cmd_show(rest, today=today)
        if args.cmd == "transition":
            return cmd_transition(rest)
        if args.cmd == "countries":
            return cmd_countries(rest)
    except ReformcalError as exc:
        print(f"reformcal: {exc}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
