from datetime import datetime

import pytest

from core.business_hours import (
    WeeklySchedule, day_of_week, describe_day, display_hours, format_hour,
    is_open, next_open_day, status_message, summary_line,
)

SCHEDULE = WeeklySchedule(open_hour=8, close_hour=22, closed_days=frozenset({0}))

SUNDAY = datetime(2024, 6, 2, 12, 0)
MONDAY = datetime(2024, 6, 3)
SATURDAY = datetime(2024, 6, 8)


def at(day, hour, minute=0):
    return day.replace(hour=hour, minute=minute)


def test_day_of_week_starts_on_sunday():
    assert day_of_week(SUNDAY) == 0
    assert day_of_week(MONDAY) == 1
    assert day_of_week(SATURDAY) == 6


@pytest.mark.parametrize("hour, expected", [(0, "12:00 AM"), (8, "8:00 AM"), (12, "12:00 PM"), (22, "10:00 PM")])
def test_format_hour(hour, expected):
    assert format_hour(hour) == expected


@pytest.mark.parametrize("when, expected", [
    (at(MONDAY, 7, 59), False),
    (at(MONDAY, 8), True),
    (at(MONDAY, 21, 59), True),
    (at(MONDAY, 22), False),
    (SUNDAY, False),
])
def test_is_open(when, expected):
    assert is_open(when, SCHEDULE) is expected


def test_next_open_day_skips_closed_days():
    assert next_open_day(6, SCHEDULE) == 1
    assert next_open_day(1, SCHEDULE) == 2


def test_status_on_closed_day():
    assert status_message(SUNDAY, SCHEDULE) == "We're closed on Sundays. We open tomorrow at 8:00 AM."


def test_status_before_opening():
    assert status_message(at(MONDAY, 7), SCHEDULE) == "Opening today at 8:00 AM."


def test_status_after_closing():
    assert status_message(at(MONDAY, 23), SCHEDULE) == "Closed for the day. We open tomorrow at 8:00 AM."


def test_status_after_closing_before_closed_day_names_next_open_day():
    assert status_message(at(SATURDAY, 23), SCHEDULE) == "Closed for the day. We open Monday at 8:00 AM."


def test_status_while_open():
    assert status_message(at(MONDAY, 12), SCHEDULE) == "Open now until 10:00 PM."


def test_summary_line():
    assert summary_line(SCHEDULE) == "Mon-Sat, 8:00 AM - 10:00 PM"


def test_display_hours_and_describe_day():
    hours = display_hours(SCHEDULE)
    assert hours["sunday"] == "closed"
    assert hours["monday"] == {"open": "08:00", "close": "22:00"}
    assert describe_day(hours["sunday"]) == "Closed"
    assert describe_day(hours["monday"]) == "8:00 AM - 10:00 PM"


@pytest.mark.parametrize("kwargs", [
    {"open_hour": 22, "close_hour": 8},
    {"open_hour": 8, "close_hour": 25},
    {"closed_days": frozenset(range(7))},
])
def test_invalid_schedules_rejected(kwargs):
    with pytest.raises(ValueError):
        WeeklySchedule(**kwargs)


@pytest.mark.parametrize("hour", range(24))
def test_closed_every_hour_on_sunday(hour):
    assert is_open(at(SUNDAY, hour), SCHEDULE) is False
    assert is_open(at(SUNDAY, hour, 59), SCHEDULE) is False
