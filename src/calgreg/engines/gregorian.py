"""
calgreg.engines.gregorian
-------------------------
Integer engine mapping Gregorian day offsets to (year, month, day) labels
and back, plus the day of the week.

Day offset zero is 1582-10-15, the first day the Gregorian calendar was in
force. The day before it was 1582-10-04 on the Julian calendar, so offsets
below zero are not supported. DAY_MAX is 9999-12-31.

Internally every computation runs on a proleptic Gregorian day count whose
day zero is 1200-03-01, and on March-based years (March 1 .. end of the
following February) so that the only variable-length month comes last.
Proleptic dates never leave this module.

Two failure channels:
  * ContractError  -> caller bug (offset or table index out of domain)
  * None           -> the year/month/day triple is not a valid date
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..core.errors import ContractError


# ============================================================
# Public constants
# ============================================================

DAY_MAX = 3074323   # 9999-12-31
DAY_UNIX = 141427   # 1970-01-01 (convenience only)


# ============================================================
# Internal constants
# ============================================================

# Offset 0 (1582-10-15) counted in days from 1200-03-01.
DAY_SHIFT = 139750

# 1582-10-15 was a Friday.
FIRST_MONDAY = 3
WEEK_LENGTH = 7

MONTH_COUNT = 12
MONTH_OFFSET = 2    # March-based months lag January-based ones by two

LONG_MONTH = 31
SHORT_MONTH = 30
LEAP_FEB = 29
PLAIN_FEB = 28

QC_DAYS = 146097    # 400 years
C_DAYS = 36524      # 100 years, no trailing leap day
Q_DAYS = 1461       # 4 years
Y_DAYS = 365
Y_LEAP_DAYS = 366

QC_C_COUNT = 4
C_Q_COUNT = 25
Q_Y_COUNT = 4

QC_YEARS = 400
C_YEARS = 100
Q_YEARS = 4

BASE_YEAR = 1200
MAX_YEAR = 9999

# March-based month lengths: '+' = 31, '-' = 30, '*' = variable (February).
MONTH_PATTERN = "+-+-++-+-++*"


# ============================================================
# Helpers
# ============================================================

def check_offset(offset: int) -> None:
    if offset < 0 or offset > DAY_MAX:
        raise ContractError(f"day offset {offset} outside [0, {DAY_MAX}]")


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule for a January-based year >= 1."""
    if year < 1:
        raise ContractError(f"year must be >= 1, got {year}")
    if year % 400 == 0:
        return True
    return year % 4 == 0 and year % 100 != 0


def month_length(index: int) -> int:
    """
    Length of the March-based month `index` (0 = March, 11 = February).

    Returns 31 or 30 for fixed months and 0 for the variable month.
    """
    if index < 0 or index >= MONTH_COUNT:
        raise ContractError(f"March-based month index {index} outside 0..{MONTH_COUNT - 1}")

    c = MONTH_PATTERN[index]
    if c == "+":
        return LONG_MONTH
    if c == "-":
        return SHORT_MONTH
    if c == "*":
        return 0
    raise ContractError(f"bad month pattern character {c!r} at index {index}")


# ============================================================
# Offset -> date
# ============================================================

def offset_to_date(offset: int) -> Tuple[int, int, int]:
    """
    Day offset -> (year, month, day), month and day one-based.

    `offset` must lie in [0, DAY_MAX]; anything else raises ContractError.
    """
    check_offset(offset)

    # Day zero becomes 1200-03-01
    rem = offset + DAY_SHIFT

    qc, rem = divmod(rem, QC_DAYS)
    c, rem = divmod(rem, C_DAYS)
    q, rem = divmod(rem, Q_DAYS)
    y, d = divmod(rem, Y_DAYS)

    # c == 4 only on the leap day closing a quad century
    if c == QC_C_COUNT:
        c = QC_C_COUNT - 1
        q = C_Q_COUNT - 1
        y = Q_Y_COUNT - 1
        d = Y_LEAP_DAYS - 1

    # y == 4 only on the leap day closing a quad year
    if y == Q_Y_COUNT:
        y = Q_Y_COUNT - 1
        d = Y_LEAP_DAYS - 1

    year = qc * QC_YEARS + c * C_YEARS + q * Q_YEARS + y + BASE_YEAR

    month = 0
    while d > 0:
        ml = month_length(month)
        if ml == 0 or d < ml:
            break
        month += 1
        d -= ml

    month += MONTH_OFFSET
    if month >= MONTH_COUNT:
        month -= MONTH_COUNT
        year += 1

    return year, month + 1, d + 1


# ============================================================
# Date -> offset
# ============================================================

def date_to_offset(year: int, month: int, day: int) -> Optional[int]:
    """
    (year, month, day) -> day offset, or None if the triple is not a
    supported Gregorian date.

    Accepts arbitrary integers; this is the validator for external input.
    Dates before 1582-10-15 and after 9999-12-31 are rejected.
    """
    if year <= BASE_YEAR or year > MAX_YEAR:
        return None
    if month < 1 or month > MONTH_COUNT:
        return None
    if day < 1:
        return None

    d = day - 1

    # March-based year and month
    m = month - 1 - MONTH_OFFSET
    if m < 0:
        m += MONTH_COUNT
        year -= 1

    ml = month_length(m)
    if ml == 0:
        # The variable month belongs to the following January-based year
        ml = LEAP_FEB if is_leap_year(year + 1) else PLAIN_FEB
    if d >= ml:
        return None

    qc, rest = divmod(year - BASE_YEAR, QC_YEARS)
    c, rest = divmod(rest, C_YEARS)
    q, y = divmod(rest, Q_YEARS)

    offset = qc * QC_DAYS + c * C_DAYS + q * Q_DAYS + y * Y_DAYS

    # The variable month is last, so it never contributes here
    for i in range(m):
        offset += month_length(i)

    offset += d - DAY_SHIFT

    if offset < 0 or offset > DAY_MAX:
        return None
    return offset


# ============================================================
# Weekday
# ============================================================

def weekday(offset: int) -> int:
    """Day of the week for `offset`: 1 = Monday .. 7 = Sunday."""
    check_offset(offset)

    if offset < FIRST_MONDAY:
        offset += WEEK_LENGTH
    return (offset - FIRST_MONDAY) % WEEK_LENGTH + 1
