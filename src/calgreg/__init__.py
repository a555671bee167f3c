"""calgreg public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    DAY_MAX,
    DAY_UNIX,
    to_calendar_date,
    from_calendar_date,
    offset_of,
    is_valid_date,
    day_of_week,
    is_leap_year,
    days_in_month,
    to_date,
    from_date,
    format_offset,
)
from .core.errors import CalgregError, ContractError
from .core.types import CalendarDate, Weekday

__all__ = [
    "DAY_MAX",
    "DAY_UNIX",
    "to_calendar_date",
    "from_calendar_date",
    "offset_of",
    "is_valid_date",
    "day_of_week",
    "is_leap_year",
    "days_in_month",
    "to_date",
    "from_date",
    "format_offset",
    "CalgregError",
    "ContractError",
    "CalendarDate",
    "Weekday",
]
