from __future__ import annotations

from datetime import date
import argparse

import caljal
from caljal.names import weekday_name


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of Nowruz (1 Farvardin) for a span of Jalali years."
    )
    p.add_argument("--from-year", type=int, default=1390)
    p.add_argument("--to-year", type=int, default=1420)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Nowruz", "Weekday", "Leap", "Days"]
    colw = [5, 10, 12, 4, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    march_days: dict[int, int] = {}

    for Y in range(Y0, Y1 + 1):
        d = caljal.nowruz(Y)
        j = caljal.of(Y, 1, 1)
        row = [
            str(Y),
            fmt(d),
            weekday_name(j.persian_weekday()),
            "L" if caljal.is_leap_year(Y) else "",
            str(caljal.year_length(Y)),
        ]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        march_days[d.day] = march_days.get(d.day, 0) + 1

    print("\nNowruz by day of March:")
    for day in sorted(march_days):
        print(f"  March {day:2d}: {march_days[day]}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
