from __future__ import annotations
from typing import Optional

from ..engines.gregorian import DAY_MAX, DAY_UNIX, check_offset

# Julian Day Number of offset 0 (1582-10-15).
JDN_EPOCH = 2299161


def offset_to_jdn(offset: int) -> int:
    """Convert a day offset to its Julian Day Number (JDN)."""
    check_offset(offset)
    return offset + JDN_EPOCH

def jdn_to_offset(jdn: int) -> Optional[int]:
    """Inverse of offset_to_jdn; None if the JDN falls outside [0, DAY_MAX]."""
    offset = jdn - JDN_EPOCH
    if offset < 0 or offset > DAY_MAX:
        return None
    return offset

def offset_to_unix_days(offset: int) -> int:
    """Days since 1970-01-01 (negative before it)."""
    check_offset(offset)
    return offset - DAY_UNIX

def unix_days_to_offset(days: int) -> Optional[int]:
    offset = days + DAY_UNIX
    if offset < 0 or offset > DAY_MAX:
        return None
    return offset
