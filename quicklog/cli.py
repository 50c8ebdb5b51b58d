"""quicklog CLI entry point."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from quicklog.config.settings import Settings, resolve_settings
from quicklog.domain.clock import is_time_of_day
from quicklog.domain.exceptions import DomainError, InvalidWorklogData
from quicklog.domain.models import TempoWorklog
from quicklog.parsing.regex_extractors import extract_duration
from quicklog.services.quick_log import preview_quick_log
from quicklog.services.timeline_service import build_day_timeline
from quicklog.services.timer import TimerNotifier, TimerService, parse_notify_hours, timer_status
from quicklog.shared.exceptions import ExternalServiceError, KeyMissingError, get_error_message
from quicklog.shared.time_formatting import format_duration
from quicklog.validators import check_duration, get_issue_key_error, run_entry_validators


def _read_worklogs_file(path: str) -> list[TempoWorklog]:
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidWorklogData(path, str(exc)) from None

    if isinstance(raw, dict):
        rows = raw.get("results") or []
    elif isinstance(raw, list):
        rows = raw
    else:
        raise InvalidWorklogData(path, "expected a list or an object with 'results'")

    try:
        return [TempoWorklog.model_validate(row) for row in rows]
    except ValidationError as exc:
        raise InvalidWorklogData(path, f"{exc.error_count()} invalid field(s)") from None


def _load_worklogs(args: argparse.Namespace, settings: Settings) -> list[TempoWorklog]:
    if args.worklogs:
        return _read_worklogs_file(args.worklogs)

    from quicklog.adapters.tempo_client import TempoClient
    from quicklog.infrastructure.cache import MemoryCache

    client = TempoClient(settings, MemoryCache())
    try:
        return client.get_my_worklogs(args.date, args.date)
    finally:
        client.close()


def _cmd_parse(args: argparse.Namespace, settings: Settings) -> int:
    rounding = args.rounding or settings.rounding_mode
    preview = preview_quick_log(" ".join(args.text), rounding_mode=rounding)
    if preview.error:
        print(f"❌ {preview.error}")
        return 1
    print(f"✅ {preview.display}")
    return 0


def _cmd_timeline(args: argparse.Namespace, settings: Settings) -> int:
    if not is_time_of_day(args.start):
        print(f"❌ Invalid start time: {args.start} (expected HH:MM or HH:MM:SS)")
        return 1
    duration = extract_duration(args.duration)
    if not duration:
        print(f"❌ Could not read duration: {args.duration}")
        return 1
    issues = run_entry_validators(args.issue, duration) if args.issue else check_duration(duration)
    if issues:
        for issue in issues:
            print(f"❌ {issue.message}")
        return 1

    view = build_day_timeline(
        _load_worklogs(args, settings),
        args.start,
        duration,
        args.issue.strip().upper() if args.issue else None,
        visual=args.visual,
    )
    print(view.timeline)
    print(view.conflict_summary)
    return 1 if view.has_conflicts and args.fail_on_conflict else 0


def _cmd_timer(args: argparse.Namespace, settings: Settings) -> int:
    from quicklog.infrastructure.kv_store import JsonFileKeyValueStore

    timers = TimerService(JsonFileKeyValueStore(settings.state_file))
    if args.action == "start":
        error = get_issue_key_error(args.issue_key)
        if error:
            print(f"❌ {error}")
            return 1
        entry = timers.start(
            args.issue_key.strip().upper(), args.issue_id or "", args.work_type or "", args.description
        )
        print(f"⏱  Timer started for {entry.issue_key}")
        return 0
    if args.action == "stop":
        stopped = timers.stop(settings.rounding_mode)
        if stopped is None:
            print("No timer running")
            return 1
        entry, seconds = stopped
        print(f"⏹  {entry.issue_key}: {format_duration(seconds)}")
        return 0

    entry = timers.active()
    if entry is None:
        print("No timer running")
        return 0
    elapsed = timers.elapsed_seconds(entry)
    print(f"{entry.issue_key}: {format_duration(elapsed)} [{timer_status(elapsed).value}]")
    notifier = TimerNotifier(parse_notify_hours(settings.timer_notify_at))
    for message in notifier.due(entry, elapsed):
        print(f"⚠️  {message}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quicklog", description="Tempo quick-log helpers")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="parse a quick-log line, e.g. 'ABC-123 2h @ 9am standup'")
    p_parse.add_argument("text", nargs="+")
    p_parse.add_argument("--rounding", choices=["none", "up15", "down15", "nearest15"])
    p_parse.set_defaults(handler=_cmd_parse)

    p_timeline = sub.add_parser("timeline", help="show a day's schedule with a planned entry")
    source = p_timeline.add_mutually_exclusive_group(required=True)
    source.add_argument("--worklogs", help="JSON file with Tempo worklogs")
    source.add_argument("--date", help="fetch worklogs for YYYY-MM-DD from Tempo")
    p_timeline.add_argument("--start", required=True, help="planned start, HH:MM")
    p_timeline.add_argument("--duration", required=True, help="planned duration, e.g. 1h30m")
    p_timeline.add_argument("--issue", help="issue key of the planned entry")
    p_timeline.add_argument("--visual", action="store_true", help="half-hour grid instead of a list")
    p_timeline.add_argument("--fail-on-conflict", action="store_true")
    p_timeline.set_defaults(handler=_cmd_timeline)

    p_timer = sub.add_parser("timer", help="start, stop or inspect the running timer")
    p_timer.add_argument("action", choices=["start", "stop", "status"])
    p_timer.add_argument("issue_key", nargs="?")
    p_timer.add_argument("--issue-id")
    p_timer.add_argument("--work-type")
    p_timer.add_argument("--description")
    p_timer.set_defaults(handler=_cmd_timer)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "timer" and args.action == "start" and not args.issue_key:
        parser.error("timer start needs an issue key")
    try:
        return args.handler(args, resolve_settings())
    except (DomainError, ExternalServiceError, KeyMissingError) as exc:
        print(f"❌ {get_error_message(exc)}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
