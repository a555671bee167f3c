from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import Iterable

import calgreg
from calgreg.engines import gregorian as greg

EPOCH = date(1582, 10, 15)


def check_one(offs: int) -> list[str]:
    """Return a list of problems found for one day offset (empty if none)."""
    problems = []
    y, m, d = greg.offset_to_date(offs)
    back = greg.date_to_offset(y, m, d)
    if back != offs:
        problems.append(f"date_to_offset({y}, {m}, {d}) = {back}, expected {offs}")

    ref = EPOCH + timedelta(days=offs)
    if (y, m, d) != (ref.year, ref.month, ref.day):
        problems.append(f"offset_to_date({offs}) = {y:04d}-{m:02d}-{d:02d}, datetime says {ref}")

    wd = greg.weekday(offs)
    if wd != ref.isoweekday():
        problems.append(f"weekday({offs}) = {wd}, datetime says {ref.isoweekday()}")
    return problems


def roundtrip_test(offsets: Iterable[int], *, max_failures: int) -> int:
    failures = 0
    for offs in offsets:
        problems = check_one(offs)
        if not problems:
            continue
        failures += 1
        print("\nFAIL")
        print("offset:", offs)
        for msg in problems:
            print("  " + msg)
        if failures >= max_failures:
            break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip tests: offset -> date -> offset, checked against datetime.")
    p.add_argument("--N", type=int, default=20000, help="Random trials.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--full", action="store_true", help=f"Check every offset in [0, {calgreg.DAY_MAX}] instead.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.full:
        print(f"Checking all {calgreg.DAY_MAX + 1} offsets ...")
        offsets: Iterable[int] = range(calgreg.DAY_MAX + 1)
    else:
        rng = random.Random(args.seed)
        print(f"Checking {args.N} random offsets (seed={args.seed}) ...")
        offsets = [rng.randint(0, calgreg.DAY_MAX) for _ in range(args.N)]

    failures = roundtrip_test(offsets, max_failures=args.max_failures)
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
