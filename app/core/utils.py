"""Core utility functions for the application"""

import re
from datetime import date, datetime, timezone
from typing import Optional

# Nominal door-to-door schedule used to turn days-to-arrival into progress
TRANSIT_SCHEDULE_DAYS = 30

# Extended ISO-8601 only: these values are stored as text and sorted as text
ISO_DATE_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?(Z|[+-]\d{2}:\d{2})?)?"
)


def utcnow() -> datetime:
    """Naive UTC timestamp with microsecond precision, as stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """
    Parse an ISO-8601 date or date-time string into a calendar date.

    Args:
        value: "2024-03-01", "2024-03-01T10:00:00" or "2024-03-01T10:00:00Z"

    Returns:
        date: The calendar date, or None for an empty value

    Raises:
        ValueError: If the value is not an extended ISO date or date-time
            (basic "20240301" and week dates are rejected)
    """
    if not value or not value.strip():
        return None
    if not ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Not an extended ISO-8601 date: {value!r}")
    if len(value) == 10:
        return date.fromisoformat(value)
    return datetime.fromisoformat(value).date()


def days_to_arrival(expected_arrival: Optional[str], today: date) -> Optional[int]:
    """
    Whole days between today and the expected arrival date.
    Negative when the expected arrival is in the past.
    """
    expected = parse_iso_date(expected_arrival)
    if expected is None:
        return None
    return (expected - today).days


def transit_progress(days: Optional[int]) -> float:
    """
    Percentage of the nominal schedule already covered, clamped to [0, 100].
    """
    if days is None:
        return 0.0
    if days <= 0:
        return 100.0
    if days >= TRANSIT_SCHEDULE_DAYS:
        return 0.0
    progress = (TRANSIT_SCHEDULE_DAYS - days) / TRANSIT_SCHEDULE_DAYS * 100
    return max(0.0, min(100.0, progress))


def arrival_urgency(days: Optional[int]) -> str:
    if days is None:
        return "unknown"
    if days <= 10:
        return "urgent"
    if days <= 20:
        return "medium"
    return "normal"


def container_count(container_number: str) -> int:
    """
    Number of physical containers a record stands for.

    A record may cover a numbered range written "first-last" (e.g. "101-104"
    is four containers). Anything else counts as one.
    """
    parts = container_number.split("-")
    if len(parts) == 2:
        try:
            first, last = int(parts[0]), int(parts[1])
        except ValueError:
            return 1
        if last >= first:
            return last - first + 1
    return 1


def format_report_date(date_obj: date) -> str:
    """
    Format a date for report display.

    Returns:
        str: Formatted date (e.g., "05/02/2026")
    """
    return date_obj.strftime("%d/%m/%Y")
