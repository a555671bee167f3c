from __future__ import annotations

from datetime import date
from typing import Optional

from .core.errors import ContractError
from .core.types import CalendarDate, Weekday
from .engines import gregorian as _greg

DAY_MAX = _greg.DAY_MAX
DAY_UNIX = _greg.DAY_UNIX

# January-based month lengths; February is patched for leap years.
_JAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def to_calendar_date(offset: int) -> CalendarDate:
    y, m, d = _greg.offset_to_date(offset)
    return CalendarDate(y, m, d)

def from_calendar_date(d: CalendarDate) -> Optional[int]:
    return _greg.date_to_offset(d.year, d.month, d.day)

def offset_of(year: int, month: int, day: int) -> Optional[int]:
    return _greg.date_to_offset(year, month, day)

def is_valid_date(year: int, month: int, day: int) -> bool:
    """True iff (year, month, day) is a supported date in [1582-10-15, 9999-12-31]."""
    return _greg.date_to_offset(year, month, day) is not None

def day_of_week(offset: int) -> Weekday:
    return Weekday(_greg.weekday(offset))

def is_leap_year(year: int) -> bool:
    return _greg.is_leap_year(year)

def days_in_month(year: int, month: int) -> int:
    """Number of days in the January-based `month` of `year`."""
    if month < 1 or month > 12:
        raise ContractError(f"month must be in 1..12, got {month}")
    leap = _greg.is_leap_year(year)
    if month == 2 and leap:
        return 29
    return _JAN_MONTH_DAYS[month - 1]

# ============================================================
# datetime.date interop
# ============================================================

def to_date(offset: int) -> date:
    return to_calendar_date(offset).to_date()

def from_date(d: date) -> Optional[int]:
    """Day offset of a datetime.date, or None before 1582-10-15."""
    return _greg.date_to_offset(d.year, d.month, d.day)

def format_offset(offset: int) -> str:
    """'YYYY-MM-DD Www', e.g. '1582-10-15 Fri'."""
    return f"{to_calendar_date(offset)} {day_of_week(offset).abbrev}"
