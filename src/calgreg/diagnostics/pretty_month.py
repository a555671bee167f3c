from __future__ import annotations

import argparse
import sys

import calgreg


def dow_header() -> str:
    return "Mo       Tu       We       Th       Fr       Sa       Su"


def cell(top: str, bot: str, w: int = 8) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk).rstrip())
        print(" ".join(c[1] for c in wk).rstrip())
    print()


def month_weeks(year: int, month: int) -> list[list[tuple[str, str]]]:
    """
    Monday-first week rows for a Gregorian month; each cell is
    (day of month, day offset). Days before 1582-10-15 are left blank.
    """
    n = calgreg.days_in_month(year, month)
    days = []
    for d in range(1, n + 1):
        offs = calgreg.offset_of(year, month, d)
        if offs is not None:
            days.append((offs, f"{d:2d}", str(offs)))

    weeks: list[list[tuple[str, str]]] = []
    if not days:
        return weeks

    wk: list[tuple[str, str]] = []
    pad = calgreg.day_of_week(days[0][0]) - 1  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for _, top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a Gregorian month calendar with day offsets.")
    p.add_argument("year", type=int, help="e.g. 1582")
    p.add_argument("month", type=int, help="1..12")
    args = p.parse_args(argv)

    if not (1 <= args.month <= 12) or args.year < 1:
        print(f"Month {args.year}-{args.month:02d} is out of range", file=sys.stderr)
        return 1

    weeks = month_weeks(args.year, args.month)
    if not weeks:
        print(f"Month {args.year:04d}-{args.month:02d} is not supported", file=sys.stderr)
        return 1

    print_grid(f"Gregorian month  {args.year:04d}-{args.month:02d}", weeks)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
