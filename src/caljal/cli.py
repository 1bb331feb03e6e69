from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect

from caljal.logging import configure_logging, get_logger

_DATE_RE = re.compile(r"^\d{1,4}-\d{1,2}-\d{1,2}$")

_log = get_logger(__name__)


def _parse_ymd(s: str) -> tuple[int, int, int]:
    if not _DATE_RE.match(s):
        raise ValueError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_to_jalali(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal to-jalali", description="Gregorian -> Jalali date")
    p.add_argument("date", help="Gregorian YYYY-MM-DD")
    args = p.parse_args(argv)

    j = caljal.from_gregorian(_parse_ymd(args.date))
    print(j.isoformat())
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal to-gregorian", description="Jalali -> Gregorian date")
    p.add_argument("date", help="Jalali YYYY-MM-DD")
    args = p.parse_args(argv)

    print(caljal.to_gregorian(*_parse_ymd(args.date)).isoformat())
    return 0


def cmd_info(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal info", description="Describe the Jalali day of a date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--jalali", action="store_true", help="Interpret the date as Jalali instead of Gregorian")
    args = p.parse_args(argv)

    ymd = _parse_ymd(args.date)
    g = caljal.to_gregorian(*ymd) if args.jalali else date(*ymd)
    info = caljal.day_info(g)

    width = max(len(k) for k in info)
    for k, v in info.items():
        print(f"{k.ljust(width)}  {v}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `caljal YYYY-MM-DD` converts a Gregorian date.
    if argv and _DATE_RE.match(argv[0]):
        argv = ["to-jalali"] + argv

    p = argparse.ArgumentParser(prog="caljal", description="Jalali calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING or ERROR (default: WARNING)")
    p.add_argument("--log-json", action="store_true", help="Emit log lines as JSON")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-jalali", help="Gregorian -> Jalali date")
    sub.add_parser("to-gregorian", help="Jalali -> Gregorian date")
    sub.add_parser("info", help="Describe the Jalali day of a date")

    # diagnostics
    sub.add_parser("month", help="Print a Jalali month calendar (diagnostics)")
    sub.add_parser("new-years", help="Print Nowruz date table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    configure_logging(args.log_level, json_output=args.log_json)
    _log.debug("cli_command", cmd=args.cmd, argv=rest)

    commands = {
        "to-jalali": cmd_to_jalali,
        "to-gregorian": cmd_to_gregorian,
        "info": cmd_info,
    }
    modules = {
        "month": "caljal.diagnostics.pretty_month",
        "new-years": "caljal.diagnostics.new_years_table",
    }
    diag_map = {
        "round-trip": "caljal.diagnostics.round_trip",
        "leap-years": "caljal.diagnostics.leap_years",
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)
        if args.cmd in modules:
            return _run_module_main(modules[args.cmd], rest)
        if args.cmd == "diag":
            return _run_module_main(diag_map[args.tool], rest)
    except ValueError as e:
        # InvalidDate / InvalidRange / InvalidStep are ValueErrors too.
        print(f"caljal: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
