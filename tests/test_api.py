# tests/test_api.py

import pytest
import random
from datetime import date

import calgreg
from calgreg import CalendarDate, ContractError, Weekday


def test_public_constants():
    assert calgreg.DAY_MAX == 3074323
    assert calgreg.DAY_UNIX == 141427


def test_calendar_date_roundtrip():
    d = calgreg.to_calendar_date(0)
    assert d == CalendarDate(1582, 10, 15)
    assert str(d) == "1582-10-15"
    assert calgreg.from_calendar_date(d) == 0
    assert calgreg.from_calendar_date(CalendarDate(2023, 2, 29)) is None


def test_calendar_date_format_and_order():
    assert CalendarDate(476, 9, 4).isoformat() == "0476-09-04"
    assert CalendarDate(2000, 1, 31) < CalendarDate(2000, 2, 1)
    assert CalendarDate(1999, 12, 31) < CalendarDate(2000, 1, 1)


def test_day_of_week():
    assert calgreg.day_of_week(0) is Weekday.FRIDAY
    assert calgreg.day_of_week(3) is Weekday.MONDAY
    assert Weekday.SUNDAY.abbrev == "Sun"
    assert [w.abbrev for w in Weekday] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def test_format_offset():
    assert calgreg.format_offset(0) == "1582-10-15 Fri"
    assert calgreg.format_offset(calgreg.DAY_UNIX) == "1970-01-01 Thu"
    assert calgreg.format_offset(calgreg.DAY_MAX) == "9999-12-31 Fri"


def test_validity_check():
    assert calgreg.is_valid_date(2000, 2, 29)
    assert not calgreg.is_valid_date(1900, 2, 29)
    assert not calgreg.is_valid_date(1582, 10, 4)
    assert calgreg.offset_of(1582, 10, 16) == 1


def test_days_in_month():
    assert calgreg.days_in_month(2000, 2) == 29
    assert calgreg.days_in_month(1900, 2) == 28
    assert calgreg.days_in_month(2023, 12) == 31
    assert calgreg.days_in_month(2023, 4) == 30
    with pytest.raises(ContractError):
        calgreg.days_in_month(2023, 13)
    with pytest.raises(ContractError):
        calgreg.days_in_month(0, 1)


def test_datetime_interop():
    random.seed(42)
    for _ in range(2000):
        offs = random.randint(0, calgreg.DAY_MAX)
        d = calgreg.to_date(offs)
        assert calgreg.from_date(d) == offs
    assert calgreg.from_date(date(1582, 10, 14)) is None
    assert calgreg.from_date(date(1, 1, 1)) is None


def test_contract_errors_propagate():
    with pytest.raises(ContractError):
        calgreg.to_calendar_date(-1)
    with pytest.raises(ContractError):
        calgreg.day_of_week(calgreg.DAY_MAX + 1)
    assert issubclass(ContractError, calgreg.CalgregError)
