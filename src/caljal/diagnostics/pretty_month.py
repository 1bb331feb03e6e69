from __future__ import annotations

import argparse

import caljal
from caljal.names import month_name


def dow_header() -> str:
    return "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_weeks(Y: int, M: int) -> list[list[tuple[str, str]]]:
    """Saturday-first week rows; each cell is (jalali day, gregorian MM-DD)."""
    first = caljal.of(Y, M, 1)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first.persian_weekday())]
    for j in caljal.between(first, first.last_day_of_month()):
        g = j.to_gregorian()
        mark = "*" if j.is_holiday() else ""
        wk.append(cell(f"{j.day:2d}{mark}", f"{g.month:02d}-{g.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def jalali_month_calendar(Y: int, M: int) -> None:
    first = caljal.of(Y, M, 1)
    last = first.last_day_of_month()
    title = f"{month_name(M)} {Y}   ({first.to_gregorian()} .. {last.to_gregorian()})"
    print_grid(title, month_weeks(Y, M))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Jalali month calendar with Gregorian labels (* marks holidays)."
    )
    p.add_argument("year", type=int, nargs="?", help="Jalali year (default: current)")
    p.add_argument("month", type=int, nargs="?", help="Jalali month 1..12 (default: current)")
    p.add_argument("--count", type=int, default=1, help="Number of consecutive months to print.")
    args = p.parse_args(argv)

    if args.year is None or args.month is None:
        today = caljal.JalaliDate.today()
        Y, M = today.year, today.month
    else:
        Y, M = args.year, args.month

    start = caljal.of(Y, M, 1)
    for i in range(max(args.count, 1)):
        d = start.plus_months(i)
        jalali_month_calendar(d.year, d.month)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
