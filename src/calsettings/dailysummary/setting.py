"""Daily summary setting for the calendar settings panel."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Final

from calsettings.constants import (
    CONTEXT_BUTTON_VALUE_KEY,
    CONTEXT_ID_KEY,
    DAILY_SUMMARY_SETTING_ID,
    DEFAULT_POST_TIME,
    FALSE_SENTINEL,
    TRUE_SENTINEL,
)
from calsettings.dailysummary.codec import (
    make_hour_options,
    make_meridiem_options,
    make_minute_options,
    parse_action_value,
    parse_post_time,
)
from calsettings.dailysummary.models import DailySummarySelection
from calsettings.panel.errors import SettingTypeError, TimezoneLookupError
from calsettings.panel.models import ActionIntegration, ActionOption, PanelAction, PanelAttachment
from calsettings.panel.protocols import SettingStore, TimezoneProvider

logger: Final = logging.getLogger(__name__)

TITLE: Final = "Daily Summary"
DESCRIPTION: Final = (
    "When do you want to receive the daily summary?\n "
    "If you update this setting, it will automatically update to your the "
    "timezone currently set on your calendar."
)
NOT_SET_TEXT: Final = "Not set."
DISABLED_TEXT: Final = "Disabled"


class DailySummarySetting:
    """Time-of-day picker and on/off toggle for the daily summary post.

    The setting reads and writes through an injected SettingStore and asks
    an injected TimezoneProvider for the user's calendar timezone each time
    it renders. Options are always stamped with that live timezone, so a
    change of calendar timezone is picked up by the next value the user
    saves.
    """

    def __init__(
        self,
        store: SettingStore,
        timezone_provider: TimezoneProvider | Callable[[str], str],
        setting_id: str = DAILY_SUMMARY_SETTING_ID,
    ) -> None:
        """Initialize the setting.

        Args:
            store: Persistence for the user's selection
            timezone_provider: Provider, or plain function, returning the
                user's current calendar timezone
            setting_id: Identifier used in the store and the action context
        """
        self.store = store
        if isinstance(timezone_provider, TimezoneProvider):
            self._get_timezone = timezone_provider.get_timezone
        else:
            self._get_timezone = timezone_provider
        self.id = setting_id
        self.title = TITLE
        self.description = DESCRIPTION
        self.depends_on = ""

    # ---- framework contract ----
    def set(self, user_id: str, value: Any) -> None:
        """Save a value posted by one of the setting's controls.

        Raises:
            SettingTypeError: If *value* is not a string
            InvalidSettingValueError: If *value* is not a picker or toggle value
        """
        if not isinstance(value, str):
            raise SettingTypeError(
                "trying to set Daily Summary Setting without a string value", self.id
            )
        action = parse_action_value(value)
        logger.debug(
            "daily summary: user %s set %s (toggle=%s)", user_id, value, action.is_toggle
        )
        self.store.set_setting(user_id, self.id, value)

    def get(self, user_id: str) -> DailySummarySelection | None:
        """Load the user's selection, or None if they never saved one.

        Raises:
            SettingTypeError: If the store holds something else for this id
        """
        value = self.store.get_setting(user_id, self.id)
        if value is None:
            return None
        if not isinstance(value, DailySummarySelection):
            raise SettingTypeError("current value is not a Daily Summary Setting", self.id)
        return value

    def get_id(self) -> str:
        return self.id

    def get_title(self) -> str:
        return self.title

    def get_description(self) -> str:
        return self.description

    def get_dependency(self) -> str:
        return self.depends_on

    def is_disabled(self, foreign_value: Any) -> bool:
        """Whether a setting depending on this one should render as disabled."""
        return foreign_value == FALSE_SENTINEL

    def render(self, user_id: str, action_endpoint: str, disabled: bool) -> PanelAttachment:
        """Build the panel attachment for one user.

        Args:
            user_id: User the panel is shown to
            action_endpoint: URL every control posts back to
            disabled: Whether a prerequisite setting is switched off

        Returns:
            Attachment with the three time selects and the toggle, or a bare
            "Disabled" notice when *disabled* is set

        Raises:
            SettingTypeError: If the stored record has the wrong type
            TimezoneLookupError: If the calendar timezone cannot be loaded
        """
        title = f"Setting: {self.title}"
        if disabled:
            return PanelAttachment(title=title, text=f"{self.description}\n{DISABLED_TEXT}")

        selection = self.get(user_id)
        post_time = DEFAULT_POST_TIME
        enabled = False
        current_text = NOT_SET_TEXT
        if selection is not None:
            post_time = selection.post_time
            enabled = selection.enable
            current_text = selection.summary()
        current = parse_post_time(post_time)

        try:
            timezone = self._get_timezone(user_id)
        except Exception as exc:
            logger.warning("daily summary: timezone lookup failed for %s: %s", user_id, exc)
            raise TimezoneLookupError(
                f"could not load the timezone from Microsoft, err= {exc}",
                self.id,
                original_error=exc,
            ) from exc
        default_option = f"{post_time} {timezone}"

        actions = [
            self._select(
                "H:",
                action_endpoint,
                make_hour_options(current.minute, current.meridiem, timezone),
                default_option,
            ),
            self._select(
                "M:",
                action_endpoint,
                make_minute_options(current.hour, current.meridiem, timezone),
                default_option,
            ),
            self._select(
                "AM/PM:",
                action_endpoint,
                make_meridiem_options(current.hour, current.minute, timezone),
                default_option,
            ),
            self._toggle(action_endpoint, enabled, timezone),
        ]
        logger.debug("daily summary: rendered %s for %s in %s", post_time, user_id, timezone)

        return PanelAttachment(
            title=title,
            text=f"{self.description}\nCurrent value: {current_text}",
            actions=actions,
        )

    # ---- helpers ----
    def _select(
        self, name: str, url: str, options: list[ActionOption], default_option: str
    ) -> PanelAction:
        return PanelAction(
            name=name,
            integration=ActionIntegration(url=url, context={CONTEXT_ID_KEY: self.id}),
            type="select",
            options=options,
            default_option=default_option,
        )

    def _toggle(self, url: str, enabled: bool, timezone: str) -> PanelAction:
        # The button carries the state it switches to
        label, enable = ("Disable", FALSE_SENTINEL) if enabled else ("Enable", TRUE_SENTINEL)
        return PanelAction(
            name=label,
            integration=ActionIntegration(
                url=url,
                context={
                    CONTEXT_ID_KEY: self.id,
                    CONTEXT_BUTTON_VALUE_KEY: f"{enable} {timezone}",
                },
            ),
            type="button",
        )
