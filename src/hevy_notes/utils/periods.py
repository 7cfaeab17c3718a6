"""Date and period label helpers."""

import re
from datetime import date, datetime, timezone
from typing import Optional, Tuple


_NOTE_DATE_PREFIX = re.compile(r"^(\d{4}-\d{2}-\d{2})")
_WEEK_LABEL = re.compile(r"^(\d{4})-W(\d{1,2})$")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def note_date(start_time: str) -> date:
    """UTC calendar date of a workout start time."""
    return parse_timestamp(start_time).astimezone(timezone.utc).date()


def parse_note_date(name: str) -> Optional[date]:
    """Date prefix of a note file name, or None when it has none."""
    match = _NOTE_DATE_PREFIX.match(name)
    if not match:
        return None
    try:
        return date.fromisoformat(match.group(1))
    except ValueError:
        return None


def iso_week_label(day: date) -> str:
    """
    ISO-8601 week label, e.g. '2021-W1'.

    Week 1 is the week containing the year's first Thursday, and the year in
    the label is that Thursday's year: 2021-01-01 falls in '2020-W53'.
    """
    year, week, _ = day.isocalendar()
    return f"{year}-W{week}"


def month_label(day: date) -> str:
    """Calendar month label, e.g. '2024-03'."""
    return f"{day.year:04d}-{day.month:02d}"


def week_sort_key(label: str) -> Tuple[int, int]:
    """Chronological sort key for week labels ('2021-W10' after '2021-W9')."""
    match = _WEEK_LABEL.match(label)
    if not match:
        return (0, 0)
    return int(match.group(1)), int(match.group(2))
