#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import caljal
from caljal.logging import get_logger

_log = get_logger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caljal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caljal[diagnostics]"') from e


def leap_grid(np, start_year: int, end_year: int, width: int = 33) -> "np.ndarray":
    """
    Rows of `width` consecutive years from start_year; 1 marks a leap year,
    0 a common year, -1 padding after end_year.
    """
    n = end_year - start_year + 1
    rows = (n + width - 1) // width
    Z = np.full((rows, width), -1, dtype=int)
    for i in range(n):
        Z[i // width, i % width] = 1 if caljal.is_leap_year(start_year + i) else 0
    return Z


def leap_gaps(start_year: int, end_year: int) -> List[Tuple[int, int]]:
    """(leap year, years since previous leap year) for every leap year in the span."""
    out: List[Tuple[int, int]] = []
    prev: Optional[int] = None
    for y in range(start_year, end_year + 1):
        if caljal.is_leap_year(y):
            if prev is not None:
                out.append((y, y - prev))
            prev = y
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-year barcode: rows of consecutive Jalali years, leap years filled."
    )
    p.add_argument("--start-year", type=int, default=1210)
    p.add_argument("--end-year", type=int, default=1635)
    p.add_argument("--width", type=int, default=33, help="Years per row (default: 33, one cycle).")
    p.add_argument("--out", default="leap_years_barcode.png")
    p.add_argument("--title", default="Jalali leap years")
    p.add_argument("--text", action="store_true", help="Print the gap statistics only; no plot.")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    gaps = leap_gaps(start_year, end_year)
    counts: dict[int, int] = {}
    for _, g in gaps:
        counts[g] = counts.get(g, 0) + 1
    n_leap = sum(1 for y in range(start_year, end_year + 1) if caljal.is_leap_year(y))
    print(f"Leap years {start_year}..{end_year}: {n_leap}")
    for g in sorted(counts):
        print(f"  gap {g} years: {counts[g]}")

    if args.text:
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    Z = leap_grid(np, start_year, end_year, width=args.width)
    rows = Z.shape[0]

    fig, ax = plt.subplots(figsize=(12, max(2.0, 0.3 * rows + 1.0)))
    cmap = ListedColormap(["0.97", "white", "0.15"])  # padding, common, leap
    ax.pcolormesh(
        np.arange(-0.5, args.width + 0.5, 1.0),
        np.arange(-0.5, rows + 0.5, 1.0),
        Z,
        shading="flat",
        cmap=cmap,
        vmin=-1, vmax=1,
        edgecolors="0.88",
        linewidth=0.6,
    )
    ax.invert_yaxis()
    ax.tick_params(axis="both", which="both", length=0)
    yt = list(range(rows))
    ax.set_yticks(yt)
    ax.set_yticklabels([str(start_year + r * args.width) for r in yt])
    ax.set_xlabel("Year within row")
    ax.set_ylabel("Row start (Jalali year)")
    ax.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    _log.info("leap_barcode_saved", out=args.out, rows=rows)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
