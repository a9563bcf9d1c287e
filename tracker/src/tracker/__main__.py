"""Command-line entry point: python -m tracker."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime

from moonglass.config import get_settings, local_now
from phases import InvalidInput, PhaseNotFound, find_phase_events, next_full_moon, next_new_moon

from tracker.status import build_status, render_status, render_timeline
from tracker.timeline import build_timeline, short_date

logger = logging.getLogger("tracker")


def _iso_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid ISO date/time: {value!r}") from exc


def _year_month(value: str) -> tuple[int, int]:
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM, got {value!r}") from exc
    return parsed.year, parsed.month


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tracker", description="Lunar phase tracker.")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text.")
    sub = parser.add_subparsers(dest="command", required=True)

    status = sub.add_parser("status", help="Phase, illumination, and next new/full moon.")
    status.add_argument("--date", type=_iso_datetime, default=None, help="ISO date/time (default: now).")

    nxt = sub.add_parser("next", help="Next new or full moon.")
    nxt.add_argument("kind", choices=["new", "full"])
    nxt.add_argument("--date", type=_iso_datetime, default=None, help="ISO date/time (default: now).")

    events = sub.add_parser("events", help="Phase events in a date range.")
    events.add_argument("--start", type=_iso_datetime, required=True)
    events.add_argument("--end", type=_iso_datetime, required=True)

    timeline = sub.add_parser("timeline", help="Phase markers for one calendar month.")
    timeline.add_argument("--month", type=_year_month, default=None, help="YYYY-MM (default: current month).")
    return parser


def _run(args: argparse.Namespace) -> str:
    if args.command == "status":
        status = build_status(args.date or local_now())
        return status.model_dump_json(indent=2) if args.json else render_status(status)

    if args.command == "next":
        start = args.date or local_now()
        found = next_new_moon(start) if args.kind == "new" else next_full_moon(start)
        if args.json:
            return json.dumps({"kind": args.kind, "at": found.isoformat()})
        return f"Next {args.kind} moon: {short_date(found)} {found.strftime('%H:%M')}"

    if args.command == "events":
        found = find_phase_events(args.start, args.end)
        if args.json:
            return json.dumps([event.model_dump(mode="json") for event in found], indent=2)
        return "\n".join(f"{event.at.date().isoformat()} {event.kind}" for event in found)

    current = local_now()
    year, month = args.month or (current.year, current.month)
    month_view = build_timeline(year, month, current=current)
    return month_view.model_dump_json(indent=2) if args.json else render_timeline(month_view)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args = _parser().parse_args(argv)
    try:
        output = _run(args)
    except InvalidInput as exc:
        logger.error("Invalid input: %s", exc)
        return 2
    except PhaseNotFound as exc:
        logger.error("Search failed: %s", exc)
        return 1
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
