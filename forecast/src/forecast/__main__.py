"""Forecast entry point for running as a module: python -m forecast."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, time

from cosmic_calendar.config import get_settings
from cosmic_calendar.schemas.natal import BirthChart, BirthProfile
from ephemeris.events import find_events
from ephemeris.julian import resolve_timezone
from ephemeris.natal import calculate_birth_chart
from pydantic import ValidationError

from forecast.monthly import scores_for_month
from forecast.scoring import calculate_cosmic_day

logger = logging.getLogger("forecast")


def _configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD") from exc


def _parse_time(value: str) -> time:
    try:
        return time.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid time '{value}', expected HH:MM[:SS]") from exc


def build_parser() -> argparse.ArgumentParser:
    profile = argparse.ArgumentParser(add_help=False)
    group = profile.add_argument_group("birth profile")
    group.add_argument("--birth-date", type=_parse_date, help="birth date (YYYY-MM-DD)")
    group.add_argument("--birth-time", type=_parse_time, help="birth time (HH:MM[:SS]), local")
    group.add_argument("--lat", type=float, default=0.0, help="birth latitude")
    group.add_argument("--lon", type=float, default=0.0, help="birth longitude, east positive")
    group.add_argument("--tz", default="UTC", help="birth IANA timezone")
    group.add_argument("--name", default="", help="profile name")

    parser = argparse.ArgumentParser(prog="python -m forecast", description="Cosmic calendar forecasts")
    sub = parser.add_subparsers(dest="command", required=True)

    day = sub.add_parser("day", parents=[profile], help="score one date")
    day.add_argument("date", type=_parse_date)

    month = sub.add_parser("month", parents=[profile], help="score every day of a month")
    month.add_argument("year", type=int)
    month.add_argument("month", type=int)

    sub.add_parser("chart", parents=[profile], help="compute a birth chart")

    events = sub.add_parser("events", help="list retrograde stations and lunations")
    events.add_argument("start", type=_parse_date)
    events.add_argument("end", type=_parse_date)

    return parser


def _birth_chart(args: argparse.Namespace, parser: argparse.ArgumentParser) -> BirthChart | None:
    if getattr(args, "birth_date", None) is None:
        if args.command == "chart":
            parser.error("chart requires --birth-date")
        return None
    try:
        profile = BirthProfile(
            name=args.name,
            birth_date=args.birth_date,
            birth_time=args.birth_time,
            birth_latitude=args.lat,
            birth_longitude=args.lon,
            birth_timezone=args.tz,
        )
    except ValidationError as exc:
        parser.error(f"invalid birth profile: {exc.errors()[0]['msg']}")
    return calculate_birth_chart(profile)


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging()

    chart = _birth_chart(args, parser)
    tz, _, _ = resolve_timezone(get_settings().timezone)

    try:
        if args.command == "day":
            payload = calculate_cosmic_day(args.date, chart, tz).model_dump(mode="json")
        elif args.command == "month":
            days = scores_for_month(args.year, args.month, chart, tz)
            payload = {d.isoformat(): cd.model_dump(mode="json") for d, cd in days.items()}
        elif args.command == "chart":
            payload = chart.model_dump(mode="json")
        else:
            payload = [e.model_dump(mode="json") for e in find_events(args.start, args.end, tz)]
    except ValueError as exc:
        parser.error(str(exc))

    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
