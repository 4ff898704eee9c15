# tests/test_transitions.py

from datetime import date
from types import SimpleNamespace

import pytest

from reformcal import transitions as tr
from reformcal.core.errors import GapDateError, InvalidDateError
from reformcal.core.time import gregorian_to_jdn, julian_month_length


def _gap_triples(info):
    """Civil dates following the last Julian day, as many as the reported gap."""
    j = info.julian_end_date
    y, m, d = j.year, j.month, j.day
    out = []
    for _ in range(info.gap_days + 1):
        d += 1
        if d > julian_month_length(y, m):
            y, m, d = (y + 1, 1, 1) if m == 12 else (y, m + 1, 1)
        out.append((y, m, d))
    return out[:-1], out[-1]


# ------------------------------------------------------------
# Registry
# ------------------------------------------------------------

def test_reference_transition_points():
    assert tr.jdn_for("IT") == 2299161
    assert tr.jdn_for("GB") == 2361222
    assert tr.jdn_for("RU") == 2421639
    assert tr.jdn_for("GR") == 2423480
    assert tr.jdn_for("DK") == 2342032


@pytest.mark.parametrize(
    "country, first_gregorian",
    [
        ("IT", (1582, 10, 15)),
        ("GB", (1752, 9, 14)),
        ("DK", (1700, 3, 1)),
        ("SE", (1753, 3, 1)),
        ("TR", (1917, 3, 1)),
        ("BG", (1916, 4, 14)),
        ("RU", (1918, 2, 14)),
        ("RS", (1919, 1, 28)),
        ("RO", (1919, 4, 14)),
        ("GR", (1923, 3, 1)),
        ("JP", (1, 1, 1)),
    ],
)
def test_transition_point_is_first_gregorian_day(country, first_gregorian):
    assert tr.jdn_for(country) == gregorian_to_jdn(*first_gregorian)


def test_shared_transition_points():
    assert tr.jdn_for("ES") == tr.jdn_for("PT") == tr.jdn_for("IT")
    assert tr.jdn_for("US") == tr.jdn_for("CA") == tr.jdn_for("GB")
    assert tr.jdn_for("NO") == tr.jdn_for("DK")
    assert tr.jdn_for("SE") != tr.jdn_for("DK")


def test_lookup_is_case_insensitive():
    assert tr.jdn_for("gb") == tr.jdn_for("GB")
    assert tr.jdn_for(" us ") == tr.jdn_for("US")


def test_unknown_country_falls_back_to_italy_and_is_flagged():
    assert tr.jdn_for("XX") == 2299161
    look = tr.lookup_transition("xx")
    assert look.country == "XX"
    assert look.registered is False
    assert tr.lookup_transition("it").registered is True


def test_registry_is_stable_and_read_only():
    for code in tr.supported_countries():
        assert tr.jdn_for(code) == tr.jdn_for(code.lower()) == tr.TRANSITIONS[code]
    with pytest.raises(TypeError):
        tr.TRANSITIONS["IT"] = 0


# ------------------------------------------------------------
# create_date
# ------------------------------------------------------------

def test_italian_transition():
    before = tr.create_date(1582, 10, 4, "IT")
    after = tr.create_date(1582, 10, 15, "IT")
    assert before.system == "julian"
    assert after.system == "gregorian"
    assert after.jdn - before.jdn == 1

    with pytest.raises(GapDateError, match="does not exist in IT due to calendar transition"):
        tr.create_date(1582, 10, 10, "IT")


@pytest.mark.parametrize("country", ["GB", "US"])
def test_british_transition(country):
    assert tr.create_date(1752, 9, 2, country).system == "julian"
    assert tr.create_date(1752, 9, 14, country).system == "gregorian"
    for day in range(3, 14):
        with pytest.raises(GapDateError) as excinfo:
            tr.create_date(1752, 9, day, country)
        assert excinfo.value.day == day
        assert excinfo.value.country == country


def test_every_registered_gap_is_exactly_the_skipped_days():
    for code in tr.supported_countries():
        info = tr.transition_info(code)
        if info.gap_days == 0:
            continue
        gap, first = _gap_triples(info)
        for ymd in gap:
            with pytest.raises(GapDateError):
                tr.create_date(*ymd, code)
        assert first == (
            info.gregorian_start_date.year,
            info.gregorian_start_date.month,
            info.gregorian_start_date.day,
        )
        assert tr.create_date(*first, code).jdn == info.transition_jdn
        j = info.julian_end_date
        assert tr.create_date(j.year, j.month, j.day, code).jdn == info.transition_jdn - 1


def test_asian_countries_are_proleptic_gregorian():
    d = tr.create_date(1582, 10, 10, "JP")
    assert d.system == "gregorian"
    assert tr.create_date(2024, 9, 3, "jp").to_gregorian() == date(2024, 9, 3)


def test_julian_only_leap_day():
    # Britain still counted 29 February 1700
    assert tr.create_date(1700, 2, 29, "GB").system == "julian"
    # Denmark jumped from 18 February to 1 March 1700
    with pytest.raises(GapDateError):
        tr.create_date(1700, 2, 29, "DK")
    # After the British reform 1800 was not a leap year
    with pytest.raises(InvalidDateError):
        tr.create_date(1800, 2, 29, "GB")


def test_impossible_dates():
    with pytest.raises(InvalidDateError):
        tr.create_date(2024, 2, 30, "US")
    with pytest.raises(InvalidDateError):
        tr.create_date(2024, 13, 1, "US")


# ------------------------------------------------------------
# valid_date / transition_info
# ------------------------------------------------------------

def test_valid_date():
    assert tr.valid_date(date(1752, 9, 10), "GB") is False
    assert tr.valid_date(date(1752, 9, 2), "GB") is True
    assert tr.valid_date(date(1752, 9, 14), "GB") is True
    assert tr.valid_date(date(1582, 10, 10), "IT") is False
    assert tr.valid_date(date(1582, 10, 10), "GB") is True
    assert tr.valid_date(date(2024, 9, 3), "JP") is True
    assert tr.valid_date(tr.create_date(1918, 1, 31, "RU"), "RU") is True


def test_valid_date_rejects_impossible_triples():
    assert tr.valid_date(SimpleNamespace(year=2024, month=2, day=30), "US") is False
    assert tr.valid_date(SimpleNamespace(year=2024, month=13, day=1), "US") is False
    assert tr.valid_date(SimpleNamespace(year=2024, month=4, day=0), "IT") is False
    # Julian-only leap day after Britain switched
    assert tr.valid_date(SimpleNamespace(year=1800, month=2, day=29), "GB") is False
    assert tr.valid_date(SimpleNamespace(year=1700, month=2, day=29), "GB") is True


@pytest.mark.parametrize(
    "country, julian_end, gregorian_start, gap",
    [
        ("IT", "1582-10-04", "1582-10-15", 10),
        ("GB", "1752-09-02", "1752-09-14", 11),
        ("DK", "1700-02-18", "1700-03-01", 11),
        ("SE", "1753-02-17", "1753-03-01", 11),
        ("RU", "1918-01-31", "1918-02-14", 13),
        ("GR", "1923-02-15", "1923-03-01", 13),
    ],
)
def test_transition_info(country, julian_end, gregorian_start, gap):
    info = tr.transition_info(country)
    assert info.transition_jdn == tr.jdn_for(country)
    assert info.julian_end_date.isoformat() == julian_end
    assert info.julian_end_date.system == "julian"
    assert info.gregorian_start_date.isoformat() == gregorian_start
    assert info.gregorian_start_date.system == "gregorian"
    assert info.gap_days == gap
    assert info.registered


def test_transition_info_proleptic_and_unknown():
    assert tr.transition_info("JP").gap_days == 0
    info = tr.transition_info("XX")
    assert info.registered is False
    assert info.gap_days == 10
