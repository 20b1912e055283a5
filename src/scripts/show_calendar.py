#!/usr/bin/env python3
"""
Print a month, week or day view fetched from the calendar API.

Usage:
    uv run python src/scripts/show_calendar.py --view month --date 2024-03-05
    uv run python src/scripts/show_calendar.py --view week --add "Standup" --on 2024-03-05 --time 09:00 --duration 15
"""

import argparse
import asyncio
import logging
import sys
from datetime import date, datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import CALENDAR_API_URL
from models.events import ViewMode
from services import layout
from services.controller import ViewController
from services.store_client import EventStoreClient


def parse_date_arg(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD")


def print_month(view: dict):
    print(" ".join(f"{label:>9}" for label in view["weekdays"]))
    cells = view["cells"]
    for week_start in range(0, len(cells), 7):
        week = cells[week_start:week_start + 7]
        line = []
        for cell in week:
            day = f"{cell['date'].day:>2}" if cell["in_month"] else f"({cell['date'].day})"
            marker = "*" if cell["is_today"] else " "
            count = len(cell["events"]) + cell["more"]
            line.append(f"{marker}{day:>4} [{count}]" if count else f"{marker}{day:>4}    ")
        print(" ".join(f"{item:>9}" for item in line))

    print()
    for cell in cells:
        if not cell["events"]:
            continue
        titles = ", ".join(event["title"] for event in cell["events"])
        more = f" +{cell['more']} more" if cell["more"] else ""
        print(f"  {cell['date'].isoformat()}: {titles}{more}")


def print_time_grid(view: dict):
    for column in view["columns"]:
        marker = " (today)" if column["is_today"] else ""
        print(f"{column['label']}{marker}")
        for event in column["untimed"]:
            print(f"  {'':>6}  {event['title']}")
        for block in column["blocks"]:
            event = block["event"]
            duration = layout.format_duration(event["duration"])
            print(f"  {event['time']:>6}  {event['title']} ({duration}) @ {block['top']:.0f}px")
            if block["show_description"]:
                print(f"  {'':>6}    {event['description']}")
        print()


def print_agenda(events):
    print("Events")
    print("-" * 80)
    if not events:
        print("  No events yet.")
    for event in events:
        line = f"  {event.date.strftime('%b')} {event.date.day}, {event.date.year}"
        if event.time:
            line += f" at {event.time}"
            line += f" \u2022 {layout.format_duration(event.effective_duration)}"
        print(f"{line}  {event.title}")
        if event.description:
            print(f"      {event.description}")


async def main():
    parser = argparse.ArgumentParser(description="Print a calendar view from the calendar API")
    parser.add_argument("--view", choices=[m.value for m in ViewMode], default="month")
    parser.add_argument("--date", type=parse_date_arg, default=date.today(), help="Anchor date (YYYY-MM-DD)")
    parser.add_argument("--api-url", default=CALENDAR_API_URL)
    parser.add_argument("--add", metavar="TITLE", help="Create an event before printing")
    parser.add_argument("--on", type=parse_date_arg, help="Date of the new event (default: --date)")
    parser.add_argument("--time", help="Start time of the new event (HH:MM)")
    parser.add_argument("--duration", type=int, default=60)
    parser.add_argument("--agenda", action="store_true", help="Also list the events in view")
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    async with EventStoreClient(args.api_url) as client:
        controller = ViewController(client, mode=ViewMode(args.view), anchor=args.date)

        if args.add:
            event_date = args.on or args.date
            controller.open_form_for_date(event_date)
            controller.update_form(title=args.add, time=args.time or "", duration=args.duration)
            if await controller.submit():
                print(f"Created '{args.add}' on {event_date.isoformat()}\n")
            elif not controller.state.error:
                print("Nothing created: a title is required\n")
                await controller.refresh()
        else:
            await controller.refresh()

        if controller.state.error:
            print(f"Error: {controller.state.error}")
            sys.exit(1)

        print(controller.title())
        print("=" * 80)
        view = controller.layout()
        if controller.state.mode == ViewMode.MONTH:
            print_month(view)
        else:
            print_time_grid(view)

        if args.agenda:
            print_agenda(layout.build_agenda(controller.events))


if __name__ == "__main__":
    asyncio.run(main())
