from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import caljal
from caljal.engines.bridge import d2j, j2d
from caljal.logging import get_logger, timed_block

_log = get_logger(__name__)


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def gregorian_sweep(start: date, end: date, *, max_failures: int) -> int:
    """Every day in [start, end]: gregorian -> jalali -> gregorian."""
    failures = 0
    d0 = start
    while d0 <= end:
        j = caljal.from_gregorian(d0)
        back = j.to_gregorian()
        if back != d0:
            failures += 1
            print("\nFAIL (gregorian)")
            print("d0:", d0)
            print("jalali:", j)
            print("back:", back)
            if failures >= max_failures:
                return failures
        d0 += timedelta(days=1)
    return failures


def random_jalali(N: int, seed: int, *, max_failures: int) -> int:
    """Random valid Jalali labels: label -> JDN -> label, and day arithmetic inverse."""
    rng = random.Random(seed)
    failures = 0
    for _ in range(N):
        y = rng.randint(1, 3178)
        m = rng.randint(1, 12)
        d = rng.randint(1, caljal.month_length(y, m))

        back = d2j(j2d(y, m, d))
        if back != (y, m, d):
            failures += 1
            print("\nFAIL (jdn)")
            print("label:", (y, m, d))
            print("back:", back)

        j = caljal.of(y, m, d)
        n = rng.randint(0, 100000)
        try:
            moved = j.plus_days(n)
        except caljal.InvalidDate:
            moved = None  # n days later is past year 3178
        if moved is not None and moved.minus_days(n) != j:
            failures += 1
            print("\nFAIL (plus/minus days)")
            print("date:", j, "n:", n, "moved:", moved)

        if failures >= max_failures:
            return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip tests: gregorian <-> jalali <-> JDN.")
    p.add_argument("--start", type=str, default="1900-01-01", help="Sweep start YYYY-MM-DD (Gregorian).")
    p.add_argument("--end", type=str, default="2100-12-31", help="Sweep end YYYY-MM-DD (Gregorian).")
    p.add_argument("--N", type=int, default=20000, help="Random Jalali trials.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per check.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    checks: List[str] = []
    total_fail = 0

    print(f"Sweeping {start} .. {end} ...")
    with timed_block(_log, "gregorian_sweep", level="info"):
        total_fail += gregorian_sweep(start, end, max_failures=args.max_failures)
    checks.append("gregorian sweep")

    print(f"Testing {args.N} random Jalali dates ...")
    with timed_block(_log, "random_jalali", level="info"):
        total_fail += random_jalali(args.N, args.seed, max_failures=args.max_failures)
    checks.append("random jalali")

    if total_fail == 0:
        print(f"All round-trip tests passed ({', '.join(checks)}).")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
