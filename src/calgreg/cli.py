from __future__ import annotations

import argparse
import re
import sys
from typing import Optional

from .engines import gregorian as greg


_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MAX = 2147483647


def _parse_int(s: str) -> Optional[int]:
    """
    Parse an optionally signed decimal integer.

    Only ASCII digits are accepted (no whitespace, no underscores), and the
    magnitude must fit a signed 32-bit integer.
    """
    if not _INT_RE.fullmatch(s):
        return None
    digits = s.lstrip("+-")
    if int(digits) > _INT32_MAX:
        return None
    return int(s)


def _fail(prog: str, msg: str) -> int:
    print(f"{prog}: {msg}", file=sys.stderr)
    return 1


def cmd_offset(prog: str, arg: str) -> int:
    offs = _parse_int(arg)
    if offs is None:
        return _fail(prog, "Could not parse parameter!")
    if offs < 0 or offs > greg.DAY_MAX:
        return _fail(prog, "Day offset out of range!")

    from .api import format_offset
    print(format_offset(offs))
    return 0


def cmd_date(prog: str, year_s: str, month_s: str, day_s: str) -> int:
    year = _parse_int(year_s)
    if year is None:
        return _fail(prog, "Could not parse year!")
    month = _parse_int(month_s)
    if month is None:
        return _fail(prog, "Could not parse month!")
    day = _parse_int(day_s)
    if day is None:
        return _fail(prog, "Could not parse day!")

    if year < 0 or year > greg.MAX_YEAR:
        return _fail(prog, "Year is out of range!")
    if month < 1 or month > 12:
        return _fail(prog, "Month is out of range!")
    if day < 1 or day > 31:
        return _fail(prog, "Day is out of range!")

    offs = greg.date_to_offset(year, month, day)
    if offs is None:
        return _fail(prog, "Date is not valid!")

    print(offs)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(
        prog="calgreg",
        description="Convert between Gregorian day offsets (0 = 1582-10-15) and dates.",
        epilog="calgreg OFFSET  -> 'YYYY-MM-DD Www'     calgreg YEAR MONTH DAY  -> offset",
    )
    p.add_argument("values", nargs="*", metavar="N", help="OFFSET, or YEAR MONTH DAY")
    args = p.parse_args(argv)

    if len(args.values) == 1:
        return cmd_offset(p.prog, args.values[0])

    if len(args.values) == 3:
        return cmd_date(p.prog, *args.values)

    return _fail(p.prog, "Wrong number of parameters!")


if __name__ == "__main__":
    raise SystemExit(main())
