"""Daily summary setting: time picker codec, persisted record and panel setting."""

from calsettings.dailysummary.codec import (
    ActionValue,
    Meridiem,
    TimeOfDay,
    encode_value,
    make_hour_options,
    make_meridiem_options,
    make_minute_options,
    parse_action_value,
    parse_post_time,
)
from calsettings.dailysummary.models import DailySummarySelection
from calsettings.dailysummary.setting import DailySummarySetting

__all__ = [
    "ActionValue",
    "DailySummarySelection",
    "DailySummarySetting",
    "Meridiem",
    "TimeOfDay",
    "encode_value",
    "make_hour_options",
    "make_meridiem_options",
    "make_minute_options",
    "parse_action_value",
    "parse_post_time",
]
