"""Date and time utility functions."""
from datetime import datetime, time
from typing import Tuple

WEEKDAYS_JA = ["月", "火", "水", "木", "金", "土", "日"]


def parse_date(date_str: str) -> datetime:
    """
    Parse date string in YYYY-MM-DD format.

    Args:
        date_str: Date string (e.g., "2026-02-03")

    Returns:
        datetime object

    Raises:
        ValueError: If date format is invalid
    """
    return datetime.strptime(date_str, "%Y-%m-%d")


def parse_time(time_str: str) -> Tuple[time, time]:
    """
    Parse time range string in HH:MM-HH:MM format.

    Args:
        time_str: Time range string (e.g., "14:00-15:00")

    Returns:
        Tuple of (start_time, end_time) as datetime.time objects

    Raises:
        ValueError: If time format is invalid
    """
    try:
        start_str, end_str = time_str.split("-")
        start_time = datetime.strptime(start_str.strip(), "%H:%M").time()
        end_time = datetime.strptime(end_str.strip(), "%H:%M").time()
        return (start_time, end_time)
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid time format: {time_str}") from e


def format_seminar_schedule(date_str: str, time_str: str) -> str:
    """
    Format a date and time range for display in Japanese.

    Example: ("2026-02-03", "14:00-15:00") -> "2026年2月3日(火) 14:00～15:00"
    """
    date = parse_date(date_str)
    start_time, end_time = parse_time(time_str)
    weekday = WEEKDAYS_JA[date.weekday()]
    return (
        f"{date.year}年{date.month}月{date.day}日({weekday}) "
        f"{start_time:%H:%M}～{end_time:%H:%M}"
    )


def now_iso() -> str:
    """Current local time as an ISO 8601 string with UTC offset."""
    return datetime.now().astimezone().isoformat()
