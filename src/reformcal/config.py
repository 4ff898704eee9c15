"""
reformcal.config
----------------
User defaults from ``$XDG_CONFIG_HOME/reformcal/config.toml``:

    country = "GB"
    start_of_week = "monday"
    format = "quarter"
    show_holidays = true

Command-line flags override the file; the file overrides locale detection.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from .core.errors import ConfigError, InvalidParameterError
from .month import week_start_index, WEEK_DAYS

logger = logging.getLogger(__name__)

FORMATS = ("month", "quarter", "year")
FALLBACK_COUNTRY = "US"


@dataclass(frozen=True)
class Config:
    country: Optional[str] = None
    start_of_week: str = "sunday"
    format: str = "month"
    show_holidays: bool = False

    def merged(self, **overrides: Any) -> "Config":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    base = env.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "reformcal" / "config.toml"


def _validate(raw: Mapping[str, Any], source: Path) -> Config:
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"{source}: unknown setting(s): {', '.join(unknown)}")

    values = dict(raw)
    if "country" in values:
        if not isinstance(values["country"], str) or not values["country"].strip():
            raise ConfigError(f"{source}: country must be a non-empty string")
        values["country"] = values["country"].strip().upper()
    if "start_of_week" in values:
        try:
            values["start_of_week"] = WEEK_DAYS[week_start_index(values["start_of_week"])]
        except InvalidParameterError as exc:
            raise ConfigError(f"{source}: {exc}") from exc
    if "format" in values:
        fmt = str(values["format"]).lower()
        if fmt not in FORMATS:
            raise ConfigError(f"{source}: format must be one of: {', '.join(FORMATS)}")
        values["format"] = fmt
    if "show_holidays" in values and not isinstance(values["show_holidays"], bool):
        raise ConfigError(f"{source}: show_holidays must be true or false")

    return Config(**values)


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Read a config file. The default location may be absent (defaults are
    returned); a path passed explicitly must exist.
    """
    if path is None:
        p = config_path(environ)
        if not p.is_file():
            logger.debug("No config file at %s", p)
            return Config()
    else:
        p = Path(path)
        if not p.is_file():
            raise ConfigError(f"{p}: config file not found")

    try:
        with p.open("rb") as fh:
            raw = tomllib.load(fh)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{p}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"{p}: cannot read config file: {exc}") from exc

    logger.debug("Loaded config from %s", p)
    return _validate(raw, p)


def detect_country(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Country from the user's locale (LC_ALL, then LANG), e.g. ``ja_JP.UTF-8`` -> ``JP``.
    C and POSIX locales name no country.
    """
    env = os.environ if environ is None else environ
    for var in ("LC_ALL", "LANG"):
        value = (env.get(var) or "").strip()
        if not value or value.upper() in ("C", "POSIX"):
            continue
        tag = value.split(".", 1)[0].split("@", 1)[0]
        parts = tag.replace("-", "_").split("_")
        if len(parts) >= 2 and len(parts[1]) == 2 and parts[1].isalpha():
            return parts[1].upper()
    return None


def resolve_country(cli_country: Optional[str], config: Config, environ: Optional[Mapping[str, str]] = None) -> str:
    for candidate in (cli_country, config.country, detect_country(environ)):
        if candidate:
            return candidate.strip().upper()
    logger.warning(
        "Country could not be determined from --country, the config file or the locale; using %s",
        FALLBACK_COUNTRY,
    )
    return FALLBACK_COUNTRY
