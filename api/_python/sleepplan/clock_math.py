"""
Clock-face arithmetic.

All plan math works in integer minutes from a reference midnight. Offsets
can run past 1440 (next day) or below 0 (previous day); only the display
strings wrap back onto the 24-hour clock.
"""

from .errors import InvalidTimeFormat

MINUTES_PER_DAY = 24 * 60


def parse_time_to_minutes(time_str: str) -> int:
    """
    Parse an "HH:MM" string to minutes since midnight.

    Args:
        time_str: 24-hour time, exactly two-digit hours and minutes (e.g., "07:30")

    Returns:
        Minutes since midnight (e.g., 450 for "07:30")

    Raises:
        InvalidTimeFormat: If the string is not a valid 24-hour "HH:MM" time
    """
    if not isinstance(time_str, str) or len(time_str) != 5 or time_str[2] != ":":
        raise InvalidTimeFormat(time_str)

    hour_part, minute_part = time_str[:2], time_str[3:]
    if not (hour_part.isdigit() and minute_part.isdigit()):
        raise InvalidTimeFormat(time_str)
    # isdigit() accepts non-ASCII digits that int() also parses; keep to 0-9
    if not (hour_part.isascii() and minute_part.isascii()):
        raise InvalidTimeFormat(time_str)

    hours = int(hour_part)
    minutes = int(minute_part)
    if hours > 23 or minutes > 59:
        raise InvalidTimeFormat(time_str)

    return hours * 60 + minutes


def normalize_minutes(minutes: int) -> int:
    """Wrap any minute offset onto the clock face, [0, 1440)."""
    return ((minutes % MINUTES_PER_DAY) + MINUTES_PER_DAY) % MINUTES_PER_DAY


def minutes_to_time(minutes: int) -> str:
    """
    Format a minute offset as "HH:MM" (handles wrap-around).

    Total over all integers: negative offsets and offsets past midnight
    land on the same clock time as their same-day equivalent.
    """
    minutes = normalize_minutes(minutes)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_time_12h(minutes: int) -> str:
    """Format a minute offset as "H:MM AM/PM" (12-hour format for user-facing text)."""
    minutes = normalize_minutes(minutes)
    hour = minutes // 60
    period = "AM" if hour < 12 else "PM"
    if hour == 0:
        hour = 12
    elif hour > 12:
        hour -= 12
    return f"{hour}:{minutes % 60:02d} {period}"


def minutes_to_hours(minutes: int) -> float:
    """Convert a duration in minutes to hours, rounded to one decimal."""
    return round(minutes / 60, 1)
