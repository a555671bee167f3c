from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import IntEnum

_ABBREVS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def abbrev(self) -> str:
        """Three-letter English name, e.g. 'Mon'."""
        return _ABBREVS[self.value - 1]

@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    Gregorian (year, month, day), all one-based.

    Not validated on construction: pass it through `from_calendar_date`
    to find out whether it names a supported day.
    """
    year: int
    month: int
    day: int

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)
