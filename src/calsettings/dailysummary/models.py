"""Persisted daily summary record."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from calsettings.constants import DEFAULT_POST_TIME, DEFAULT_TIMEZONE
from calsettings.dailysummary.codec import TimeOfDay, parse_action_value, parse_post_time
from calsettings.panel.errors import InvalidSettingValueError


class DailySummarySelection(BaseModel):
    """When one user receives the daily summary, and whether they receive it.

    `timezone` is whatever the user's last action carried. It is shown back
    to the user but never used to build new options; those are stamped with
    the timezone currently set on the calendar.
    """

    model_config = ConfigDict(frozen=True)

    post_time: str = DEFAULT_POST_TIME
    timezone: str = DEFAULT_TIMEZONE
    enable: bool = False

    @field_validator("post_time")
    @classmethod
    def validate_post_time(cls, v: str) -> str:
        try:
            parse_post_time(v)
        except InvalidSettingValueError as exc:
            # pydantic only wraps ValueError/AssertionError raised here
            raise ValueError(exc.message) from exc
        return v

    def time_of_day(self) -> TimeOfDay:
        """Picker time this record was saved with."""
        return parse_post_time(self.post_time)

    def summary(self) -> str:
        """Current value as shown in the panel, e.g. ``"5:30PM (UTC) (Enabled)"``."""
        state = "Enabled" if self.enable else "Disabled"
        return f"{self.post_time} ({self.timezone}) ({state})"

    def is_due(self, now: datetime) -> bool:
        """Check whether the summary should be posted in the slot containing *now*.

        Args:
            now: Current time, already converted to the user's timezone

        Returns:
            True if enabled and *now* falls within the 15-minute post slot
        """
        if not self.enable:
            return False
        post = self.time_of_day().to_time()
        return now.hour == post.hour and post.minute <= now.minute < post.minute + 15

    def apply_action(self, value: str) -> DailySummarySelection:
        """Fold a raw control value into a new record.

        The toggle flips `enable`; a picker value replaces `post_time`. Both
        replace `timezone`.

        Raises:
            InvalidSettingValueError: If *value* is not a valid control value
        """
        action = parse_action_value(value)
        update: dict[str, object] = {"timezone": action.timezone}
        if action.is_toggle:
            update["enable"] = action.enable
        elif action.time_of_day is not None:
            update["post_time"] = action.time_of_day.post_time
        return self.model_copy(update=update)

    @classmethod
    def from_action(
        cls, current: DailySummarySelection | None, value: str
    ) -> DailySummarySelection:
        """Apply *value* to *current*, starting from the defaults when unset."""
        return (current or cls()).apply_action(value)
