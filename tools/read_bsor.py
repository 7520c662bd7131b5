#!/usr/bin/env python3
"""Print the metadata and (optionally) the event timeline of a BSOR replay."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
import sys
from typing import Iterable, List

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from bsor import DecodeError, Event, EventType, Replay, decode  # noqa: E402

DEFAULT_LIMIT = 20

EVENT_LETTERS = {
    "f": EventType.FRAME,
    "n": EventType.NOTE,
    "w": EventType.WALL,
    "h": EventType.HEIGHT,
    "p": EventType.PAUSE,
}

EPILOG = """\
[events] is a sequence of letters, saying which types of events to show:
  f - Frame
  n - Note
  w - Wall
  h - Height
  p - Pause
"""


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        description="Show info and events stored in a BSOR replay file.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", type=Path, help="BSOR file to read")
    parser.add_argument(
        "events",
        nargs="?",
        default="",
        help="Event type letters to list (any of f, n, w, h, p)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"Maximum number of events to print (default {DEFAULT_LIMIT})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log decoder progress to stderr",
    )
    return parser


def parse_event_letters(letters: str) -> List[EventType]:
    kinds: List[EventType] = []
    for letter in letters:
        kind = EVENT_LETTERS.get(letter)
        if kind is None:
            raise ValueError(f"Unknown event type '{letter}'.")
        if kind not in kinds:
            kinds.append(kind)
    return kinds


def fmt_value(value: object) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_info(replay: Replay) -> List[str]:
    lines = ["Info:"]
    for field in dataclasses.fields(replay.info):
        value = getattr(replay.info, field.name)
        if field.name == "modifiers":
            lines.append("\tmodifiers:")
            lines.extend(f"\t\t{mod}" for mod in value)
        else:
            lines.append(f"\t{field.name} = {fmt_value(value)}")
    return lines


def format_event(event: Event) -> List[str]:
    lines = [event.kind.name]
    for field in dataclasses.fields(event):
        value = getattr(event, field.name)
        if field.name == "cut_data":
            if value is not None:
                lines.extend(
                    f"\t{cut.name}={fmt_value(getattr(value, cut.name))}"
                    for cut in dataclasses.fields(value)
                )
            continue
        lines.append(f"\t{field.name}={fmt_value(value)}")
    return lines


def format_events(events: Iterable[Event], limit: int) -> List[str]:
    events = list(events)
    if not events:
        return []
    lines = ["Events:"]
    for event in events[:limit]:
        lines.extend(format_event(event))
    if len(events) > limit:
        lines.append(f"[{len(events) - limit} more entries]")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 0
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        kinds = parse_event_letters(args.events)
    except ValueError as err:
        print(err)
        return 1
    if args.limit < 0:
        parser.error("--limit must be non-negative")

    print(f"File {args.path}:")
    try:
        with args.path.open("rb") as stream:
            replay = decode(stream)
    except (DecodeError, OSError) as err:
        print(f"\tParse failed: {err}")
        return 1

    for line in format_info(replay):
        print(line)
    for line in format_events(replay.events_of(*kinds), args.limit):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
