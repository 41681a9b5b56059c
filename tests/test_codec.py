from datetime import time

import pytest

from calsettings.dailysummary.codec import (
    HOURS,
    MINUTES,
    Meridiem,
    TimeOfDay,
    encode_value,
    make_hour_options,
    make_meridiem_options,
    make_minute_options,
    parse_action_value,
    parse_post_time,
)
from calsettings.panel.errors import InvalidSettingValueError


# ── encoding ────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    ("hour", "minute", "meridiem", "timezone", "expected"),
    [
        (8, 0, "AM", "UTC", "8:00AM UTC"),
        (0, 15, "AM", "UTC", "0:15AM UTC"),
        (12, 45, "PM", "Europe/London", "12:45PM Europe/London"),
        (5, 30, Meridiem.PM, "Eastern Standard Time", "5:30PM Eastern Standard Time"),
    ],
)
def test_encode_value(
    hour: int, minute: int, meridiem: str, timezone: str, expected: str
) -> None:
    assert encode_value(hour, minute, meridiem, timezone) == expected


def test_encode_then_parse_recovers_every_selection() -> None:
    for hour in HOURS:
        for minute in MINUTES:
            for meridiem in Meridiem:
                value = encode_value(hour, minute, meridiem, "Asia/Tokyo")
                action = parse_action_value(value)
                assert action.timezone == "Asia/Tokyo"
                assert action.time_of_day == TimeOfDay(hour, minute, meridiem)


@pytest.mark.parametrize(
    ("hour", "minute"),
    [(13, 0), (-1, 0), (3, 10), (3, 60)],
)
def test_time_of_day_rejects_out_of_range(hour: int, minute: int) -> None:
    with pytest.raises(ValueError):
        TimeOfDay(hour, minute, Meridiem.AM)


def test_time_of_day_accepts_plain_string_meridiem() -> None:
    picked = TimeOfDay(5, 0, "PM")
    assert picked.meridiem is Meridiem.PM
    assert picked.to_time() == time(17, 0)
    assert picked.post_time == "5:00PM"
    assert picked == TimeOfDay(5, 0, Meridiem.PM)


def test_time_of_day_rejects_unknown_meridiem() -> None:
    with pytest.raises(ValueError):
        TimeOfDay(5, 0, "XM")


@pytest.mark.parametrize(
    ("post_time", "expected"),
    [
        ("0:00AM", time(0, 0)),
        ("12:00AM", time(0, 0)),
        ("0:15PM", time(12, 15)),
        ("12:15PM", time(12, 15)),
        ("8:00AM", time(8, 0)),
        ("11:45PM", time(23, 45)),
    ],
)
def test_to_time_treats_zero_and_twelve_alike(post_time: str, expected: time) -> None:
    assert parse_post_time(post_time).to_time() == expected


# ── parsing ─────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "post_time",
    ["8:00", "08:00AM", "13:00PM", "8:10AM", "8:00am", "8:00 AM", "", "true"],
)
def test_parse_post_time_rejects_malformed(post_time: str) -> None:
    with pytest.raises(InvalidSettingValueError):
        parse_post_time(post_time)


def test_parse_action_value_keeps_spaces_in_timezone() -> None:
    action = parse_action_value("7:15AM Pacific Standard Time")
    assert action.timezone == "Pacific Standard Time"
    assert action.time_of_day == TimeOfDay(7, 15, Meridiem.AM)
    assert action.is_toggle is False


@pytest.mark.parametrize(("head", "expected"), [("true", True), ("false", False)])
def test_parse_action_value_toggle(head: str, expected: bool) -> None:
    action = parse_action_value(f"{head} UTC")
    assert action.is_toggle is True
    assert action.enable is expected
    assert action.time_of_day is None
    assert action.timezone == "UTC"


@pytest.mark.parametrize("value", ["8:00AM", "8:00AM ", "true", "yes UTC", "8:00XM UTC"])
def test_parse_action_value_rejects_malformed(value: str) -> None:
    with pytest.raises(InvalidSettingValueError):
        parse_action_value(value)


# ── hour options ────────────────────────────────────────────────────────────
def test_hour_options_am_keep_zero_label() -> None:
    options = make_hour_options(30, Meridiem.AM, "UTC")
    assert [o.text for o in options] == [str(h) for h in range(12)]
    assert options[0].value == "0:30AM UTC"
    assert options[11].value == "11:30AM UTC"


def test_hour_options_pm_label_first_slot_twelve() -> None:
    options = make_hour_options(0, "PM", "UTC")
    assert len(options) == 12
    assert options[0].text == "12"
    assert options[0].value == "12:00PM UTC"
    for hour, option in enumerate(options[1:], start=1):
        assert option.text == str(hour)
        assert option.value == f"{hour}:00PM UTC"


# ── minute options ──────────────────────────────────────────────────────────
def test_minute_options_carry_hour_and_meridiem() -> None:
    options = make_minute_options(12, Meridiem.PM, "UTC")
    assert [o.text for o in options] == ["00", "15", "30", "45"]
    assert [o.value for o in options] == [
        "12:00PM UTC",
        "12:15PM UTC",
        "12:30PM UTC",
        "12:45PM UTC",
    ]


# ── meridiem options ────────────────────────────────────────────────────────
def test_meridiem_options_twelve_becomes_zero_for_am() -> None:
    am, pm = make_meridiem_options(12, 45, "UTC")
    assert (am.text, am.value) == ("AM", "0:45AM UTC")
    assert (pm.text, pm.value) == ("PM", "12:45PM UTC")


def test_meridiem_options_zero_becomes_twelve_for_pm() -> None:
    am, pm = make_meridiem_options(0, 0, "UTC")
    assert am.value == "0:00AM UTC"
    assert pm.value == "12:00PM UTC"


@pytest.mark.parametrize("hour", range(1, 12))
def test_meridiem_options_leave_other_hours_alone(hour: int) -> None:
    am, pm = make_meridiem_options(hour, 15, "UTC")
    assert am.value == f"{hour}:15AM UTC"
    assert pm.value == f"{hour}:15PM UTC"
