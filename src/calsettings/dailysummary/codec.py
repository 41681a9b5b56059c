"""Encoding of daily summary times and the option lists of the time picker.

A picked time travels as ``"H:MMAPM TZ"``: the hour unpadded (0-12), the
minute as two digits, the meridiem glued to the minute, then one space and
the timezone. The enable toggle travels as ``"true TZ"`` or ``"false TZ"``.

The picker is three independent selects. Each select lists every value its
own axis can take while carrying the other two axes over from the current
selection, so whichever option the user picks is a complete value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import time
from enum import Enum
from typing import Final

from calsettings.constants import FALSE_SENTINEL, TRUE_SENTINEL
from calsettings.panel.errors import InvalidSettingValueError
from calsettings.panel.models import ActionOption


class Meridiem(str, Enum):
    """Half of the day in 12-hour notation."""

    AM = "AM"
    PM = "PM"


HOURS: Final = tuple(range(12))
MINUTES: Final = (0, 15, 30, 45)
MERIDIEMS: Final = (Meridiem.AM, Meridiem.PM)

_POST_TIME_RE: Final = re.compile(r"^(1[0-2]|[0-9]):(00|15|30|45)(AM|PM)$")


@dataclass(frozen=True)
class TimeOfDay:
    """Wall-clock time as picked in the 12-hour selector.

    Hour 0 and hour 12 name the same slot; which one is stored depends on
    the option the user picked last, so both are accepted.
    """

    hour: int
    minute: int
    meridiem: Meridiem

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 12:
            raise ValueError(f"hour must be in 0..12, got {self.hour}")
        if self.minute not in MINUTES:
            raise ValueError(f"minute must be one of {MINUTES}, got {self.minute}")
        # frozen; accept plain "AM"/"PM" like the option builders do
        object.__setattr__(self, "meridiem", Meridiem(self.meridiem))

    @property
    def post_time(self) -> str:
        """Stored form without timezone, e.g. ``"5:30PM"``."""
        return f"{self.hour}:{self.minute:02d}{self.meridiem.value}"

    def encode(self, timezone: str) -> str:
        """Full option value, e.g. ``"5:30PM Europe/London"``."""
        return f"{self.post_time} {timezone}"

    def to_time(self) -> time:
        """Convert to a 24-hour time; 12 and 0 both map to the top of the half."""
        hour = self.hour % 12
        if self.meridiem is Meridiem.PM:
            hour += 12
        return time(hour, self.minute)


@dataclass(frozen=True)
class ActionValue:
    """A decoded value posted back by one of the setting's controls.

    Exactly one of `time_of_day` and `enable` is set.
    """

    timezone: str
    time_of_day: TimeOfDay | None = None
    enable: bool | None = None

    @property
    def is_toggle(self) -> bool:
        """Whether the value came from the enable/disable button."""
        return self.enable is not None


def encode_value(hour: int, minute: int, meridiem: Meridiem | str, timezone: str) -> str:
    """Encode one picker selection as an option value.

    Args:
        hour: Stored hour, 0-12
        minute: One of 0, 15, 30, 45
        meridiem: AM or PM
        timezone: Timezone name appended after a single space

    Returns:
        Canonical value such as ``"0:15AM UTC"``
    """
    return TimeOfDay(hour, minute, Meridiem(meridiem)).encode(timezone)


def parse_post_time(post_time: str) -> TimeOfDay:
    """Parse the ``"H:MMAPM"`` part of a value.

    Raises:
        InvalidSettingValueError: If the text is not a valid picker time
    """
    match = _POST_TIME_RE.match(post_time)
    if match is None:
        raise InvalidSettingValueError(post_time, "not a daily summary time")
    hour, minute, meridiem = match.groups()
    return TimeOfDay(int(hour), int(minute), Meridiem(meridiem))


def parse_action_value(value: str) -> ActionValue:
    """Decode a value posted by a select option or by the toggle button.

    Everything after the first space is the timezone, which may itself
    contain spaces ("Eastern Standard Time").

    Raises:
        InvalidSettingValueError: If the value has no timezone or an
            unrecognised head
    """
    head, sep, timezone = value.partition(" ")
    if not sep or not timezone.strip():
        raise InvalidSettingValueError(value, "missing timezone")
    if head == TRUE_SENTINEL:
        return ActionValue(timezone=timezone, enable=True)
    if head == FALSE_SENTINEL:
        return ActionValue(timezone=timezone, enable=False)
    return ActionValue(timezone=timezone, time_of_day=parse_post_time(head))


def make_hour_options(minute: int, meridiem: Meridiem | str, timezone: str) -> list[ActionOption]:
    """Options for the hour select.

    Lists hours 0-11. With PM carried over, the first slot is shown and
    stored as 12 rather than 0.
    """
    meridiem = Meridiem(meridiem)
    options = []
    for hour in HOURS:
        if hour == 0 and meridiem is Meridiem.PM:
            hour = 12
        options.append(
            ActionOption(text=str(hour), value=encode_value(hour, minute, meridiem, timezone))
        )
    return options


def make_minute_options(hour: int, meridiem: Meridiem | str, timezone: str) -> list[ActionOption]:
    """Options for the minute select, in 15-minute steps."""
    return [
        ActionOption(text=f"{minute:02d}", value=encode_value(hour, minute, meridiem, timezone))
        for minute in MINUTES
    ]


def make_meridiem_options(hour: int, minute: int, timezone: str) -> list[ActionOption]:
    """Options for the AM/PM select.

    Only the boundary hour is remapped: picking AM while the hour reads 12
    stores 0, picking PM while it reads 0 stores 12. Every other hour is kept
    as is on both options.
    """
    am_hour = 0 if hour == 12 else hour
    pm_hour = 12 if hour == 0 else hour
    return [
        ActionOption(
            text=Meridiem.AM.value,
            value=encode_value(am_hour, minute, Meridiem.AM, timezone),
        ),
        ActionOption(
            text=Meridiem.PM.value,
            value=encode_value(pm_hour, minute, Meridiem.PM, timezone),
        ),
    ]
