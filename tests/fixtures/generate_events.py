#!/usr/bin/env python3
"""
Generate a month of calendar events and store them in a SQLite database.

Usage:
    uv run python tests/fixtures/generate_events.py --month 2024-03 --db tests/fixtures/events.db
"""

import argparse
import random
import sys
from datetime import date, timedelta
from pathlib import Path

from faker import Faker

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from core.config import COLOR_PALETTE, DURATION_OPTIONS
from core.database import create_schema, get_connection, insert_event_rows, list_events
from core.validation import validate_event_fields

# Initialize Faker
fake = Faker()

# Database file
DB_FILE = Path(__file__).parent / "events.db"

RECURRING_MEETINGS = [
    ("Standup", "09:00", 15),
    ("Lunch", "12:00", 60),
]

MEETING_TITLES = [
    "Design review",
    "Sprint planning",
    "Retro",
    "1:1",
    "Customer call",
    "Interview",
    "Demo prep",
    "Budget sync",
]

ALL_DAY_TITLES = ["Conference", "Offsite", "Holiday", "Birthday", "Release day"]


def month_days(first: date) -> list[date]:
    """All days of the month starting at `first`."""
    days = []
    day = first
    while day.month == first.month:
        days.append(day)
        day += timedelta(days=1)
    return days


def random_time(start_hour: int = 8, end_hour: int = 18) -> str:
    return f"{random.randint(start_hour, end_hour - 1):02d}:{random.choice([0, 15, 30, 45]):02d}"


def generate_events(first: date) -> list[dict]:
    """Generate a realistic mix of timed, short and untimed events."""
    events = []

    for day in month_days(first):
        # Weekdays get the recurring meetings
        if day.weekday() < 5:
            for title, time, duration in RECURRING_MEETINGS:
                events.append(
                    {
                        "title": title,
                        "date": day.isoformat(),
                        "time": time,
                        "duration": duration,
                        "description": None,
                        "color": COLOR_PALETTE[0],
                    }
                )

        for _ in range(random.randint(0, 3)):
            events.append(
                {
                    "title": random.choice(MEETING_TITLES),
                    "date": day.isoformat(),
                    "time": random_time(),
                    "duration": random.choice(DURATION_OPTIONS[:-1]),
                    "description": fake.sentence(nb_words=6),
                    "color": random.choice(COLOR_PALETTE),
                }
            )

        # Occasional untimed events only show up in month view
        if random.random() < 0.1:
            events.append(
                {
                    "title": random.choice(ALL_DAY_TITLES),
                    "date": day.isoformat(),
                    "time": None,
                    "duration": None,
                    "description": fake.catch_phrase(),
                    "color": random.choice(COLOR_PALETTE),
                }
            )

    return events


def print_summary(conn):
    """Print event counts per day."""
    rows = list_events(conn)
    by_date: dict[str, int] = {}
    for row in rows:
        by_date[row["date"]] = by_date.get(row["date"], 0) + 1

    print(f"\nTotal events: {len(rows)}")
    print("-" * 40)
    for day, count in sorted(by_date.items()):
        print(f"  {day}: {count}")


def main():
    parser = argparse.ArgumentParser(description="Generate calendar fixture events")
    parser.add_argument("--month", default=date.today().strftime("%Y-%m"), help="Month (YYYY-MM)")
    parser.add_argument("--db", type=Path, default=DB_FILE)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)
        Faker.seed(args.seed)

    year, month = (int(part) for part in args.month.split("-"))
    events = generate_events(date(year, month, 1))

    valid_events = []
    for event in events:
        errors = validate_event_fields(event)
        if errors:
            print(f"Skipping {event['title']} on {event['date']}: {'; '.join(errors)}")
        else:
            valid_events.append(event)

    conn = get_connection(args.db)
    try:
        create_schema(conn)
        conn.execute("DELETE FROM events")
        insert_event_rows(conn, valid_events)
        print_summary(conn)
    finally:
        conn.close()

    print(f"\nDatabase saved to: {args.db}")


if __name__ == "__main__":
    main()
