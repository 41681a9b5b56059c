"""Identifiers shared between settings, stores and the panel framework."""

from typing import Final

# Setting identifiers
DAILY_SUMMARY_SETTING_ID: Final = "daily_summary"

# Keys of the post-action context the framework routes callbacks with
CONTEXT_ID_KEY: Final = "setting_id"
CONTEXT_BUTTON_VALUE_KEY: Final = "button_value"

# Literal value a setting reports when it is switched off
FALSE_SENTINEL: Final = "false"
TRUE_SENTINEL: Final = "true"

# Fallbacks used when a user has never saved the daily summary
DEFAULT_POST_TIME: Final = "8:00AM"
DEFAULT_TIMEZONE: Final = "Eastern Standard Time"
