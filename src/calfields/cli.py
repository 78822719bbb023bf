from __future__ import annotations

import argparse
import re
import sys
from datetime import date

import structlog


_MONTH_DAY_ARG_RE = re.compile(r"^--\d")


def _month_day_text(s: str) -> str:
    return s if s.startswith("--") else "--" + s


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date '{s}': {exc}") from None


def cmd_parse(args: argparse.Namespace) -> int:
    from calfields import MonthDay

    md = MonthDay.parse(_month_day_text(args.text))
    print(f"{md}  month={md.month.name} day={md.day}")
    return 0


def cmd_at_year(args: argparse.Namespace) -> int:
    import calfields

    d = calfields.month_day_at_year(_month_day_text(args.text), args.year, resolver=args.resolver)
    print(d.isoformat())
    return 0


def cmd_roll(args: argparse.Namespace) -> int:
    from calfields import MonthDay

    md = MonthDay.parse(_month_day_text(args.text)).roll_month(args.months).roll_day(args.days)
    print(md)
    return 0


def cmd_with(args: argparse.Namespace) -> int:
    from calfields import MonthDay

    md = MonthDay.parse(_month_day_text(args.text))
    if args.month is not None:
        md = md.with_month(args.month)
    if args.day is not None:
        md = md.with_day(args.day)
    print(md)
    return 0


def cmd_now(args: argparse.Namespace) -> int:
    from calfields import MonthDay, fixed_clock, system_clock

    clock = fixed_clock(args.date) if args.date else system_clock()
    print(MonthDay.now(clock))
    return 0


def cmd_resolvers(args: argparse.Namespace) -> int:
    import calfields

    for name in calfields.list_resolvers():
        print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    import calfields

    p = argparse.ArgumentParser(prog="calfields", description="Month-day calendrical values.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    p.add_argument("--log-json", action="store_true", help="log as JSON lines")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_parse = sub.add_parser("parse", help="Parse and normalise a --MM-DD value")
    p_parse.add_argument("text", help="--MM-DD or MM-DD")
    p_parse.set_defaults(func=cmd_parse)

    p_year = sub.add_parser("at-year", help="Combine a --MM-DD value with a year")
    p_year.add_argument("text", help="--MM-DD or MM-DD")
    p_year.add_argument("year", type=int)
    p_year.add_argument("--resolver", default="strict", choices=calfields.list_resolvers())
    p_year.set_defaults(func=cmd_at_year)

    p_roll = sub.add_parser("roll", help="Cyclically roll month and/or day")
    p_roll.add_argument("text", help="--MM-DD or MM-DD")
    p_roll.add_argument("--months", type=int, default=0)
    p_roll.add_argument("--days", type=int, default=0)
    p_roll.set_defaults(func=cmd_roll)

    p_with = sub.add_parser("with", help="Replace month (clamping) and/or day")
    p_with.add_argument("text", help="--MM-DD or MM-DD")
    p_with.add_argument("--month", type=int)
    p_with.add_argument("--day", type=int)
    p_with.set_defaults(func=cmd_with)

    p_now = sub.add_parser("now", help="Current month-day")
    p_now.add_argument("--date", type=_parse_ymd, help="YYYY-MM-DD to use instead of the system clock")
    p_now.set_defaults(func=cmd_now)

    p_res = sub.add_parser("resolvers", help="List registered date resolvers")
    p_res.set_defaults(func=cmd_resolvers)
    return p


def main(argv: list[str] | None = None) -> int:
    from calfields import CalfieldsError
    from calfields.log import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    # argparse would take "--MM-DD" for an option; pass it on without the dashes
    argv = [a[2:] if _MONTH_DAY_ARG_RE.match(a) else a for a in argv]

    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, log_json=args.log_json)
    log = structlog.get_logger("calfields.cli")
    log.debug("command", cmd=args.cmd)

    try:
        return int(args.func(args) or 0)
    except CalfieldsError as exc:
        log.debug("command failed", cmd=args.cmd, error=type(exc).__name__)
        print(f"calfields: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
