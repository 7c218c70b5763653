# core/business_hours.py
"""
Open/closed predicate for the header, footer and hero badges.

Days are numbered 0=Sunday..6=Saturday. Both functions are pure; the UI
re-evaluates them once a minute from a PeriodicTask.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet

from core.config import OPEN_HOUR, CLOSE_HOUR, CLOSED_DAYS

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


@dataclass(frozen=True)
class WeeklySchedule:
    open_hour: int = 8
    close_hour: int = 22
    closed_days: FrozenSet[int] = field(default_factory=lambda: frozenset({0}))

    def __post_init__(self):
        if not (0 <= self.open_hour < self.close_hour <= 24):
            raise ValueError(f"Invalid opening hours {self.open_hour}-{self.close_hour}")
        if len(self.closed_days) >= 7:
            raise ValueError("Schedule must have at least one open day")


DEFAULT_SCHEDULE = WeeklySchedule(OPEN_HOUR, CLOSE_HOUR, frozenset(CLOSED_DAYS))


def day_of_week(now: datetime) -> int:
    """0=Sunday..6=Saturday (datetime.weekday() is 0=Monday)."""
    return (now.weekday() + 1) % 7


def format_hour(hour: int) -> str:
    suffix = "AM" if hour < 12 or hour == 24 else "PM"
    display = hour % 12 or 12
    return f"{display}:00 {suffix}"


def is_open(now: datetime, schedule: WeeklySchedule = DEFAULT_SCHEDULE) -> bool:
    if day_of_week(now) in schedule.closed_days:
        return False
    return schedule.open_hour <= now.hour < schedule.close_hour


def next_open_day(day: int, schedule: WeeklySchedule = DEFAULT_SCHEDULE) -> int:
    """First open day strictly after `day`."""
    for offset in range(1, 8):
        candidate = (day + offset) % 7
        if candidate not in schedule.closed_days:
            return candidate
    raise ValueError("Schedule has no open day")


def _next_opening_phrase(day: int, schedule: WeeklySchedule) -> str:
    nxt = next_open_day(day, schedule)
    when = "tomorrow" if nxt == (day + 1) % 7 else DAY_NAMES[nxt]
    return f"{when} at {format_hour(schedule.open_hour)}"


def status_message(now: datetime, schedule: WeeklySchedule = DEFAULT_SCHEDULE) -> str:
    day = day_of_week(now)

    if day in schedule.closed_days:
        return f"We're closed on {DAY_NAMES[day]}s. We open {_next_opening_phrase(day, schedule)}."

    if now.hour < schedule.open_hour:
        return f"Opening today at {format_hour(schedule.open_hour)}."

    if now.hour >= schedule.close_hour:
        return f"Closed for the day. We open {_next_opening_phrase(day, schedule)}."

    return f"Open now until {format_hour(schedule.close_hour)}."


def display_hours(schedule: WeeklySchedule = DEFAULT_SCHEDULE) -> dict:
    """Per-day hours, stored on the business settings row."""
    hours = {}
    for day, name in enumerate(DAY_NAMES):
        if day in schedule.closed_days:
            hours[name.lower()] = "closed"
        else:
            hours[name.lower()] = {
                "open": f"{schedule.open_hour:02d}:00",
                "close": f"{schedule.close_hour:02d}:00",
            }
    return hours


def summary_line(schedule: WeeklySchedule = DEFAULT_SCHEDULE) -> str:
    """Short hours line for the footer, e.g. 'Mon-Sat, 8:00 AM - 10:00 PM'."""
    open_days = [d for d in range(7) if d not in schedule.closed_days]
    # Render Monday-first so Mon-Sat reads naturally
    ordered = sorted(open_days, key=lambda d: (d - 1) % 7)
    first, last = DAY_NAMES[ordered[0]][:3], DAY_NAMES[ordered[-1]][:3]
    days = first if first == last else f"{first}-{last}"
    return f"{days}, {format_hour(schedule.open_hour)} - {format_hour(schedule.close_hour)}"


def describe_day(value) -> str:
    """Render one display_hours() entry: 'closed' or {'open': 'HH:00', 'close': 'HH:00'}."""
    if not value or value == "closed":
        return "Closed"
    open_hour = int(value["open"].split(":")[0])
    close_hour = int(value["close"].split(":")[0])
    return f"{format_hour(open_hour)} - {format_hour(close_hour)}"
