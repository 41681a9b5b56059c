"""Typed registration of the settings a store knows how to keep."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from calsettings.constants import DAILY_SUMMARY_SETTING_ID
from calsettings.dailysummary.models import DailySummarySelection
from calsettings.panel.errors import UnknownSettingError

RecordT = TypeVar("RecordT", bound=BaseModel)


@dataclass(frozen=True)
class SettingKey(Generic[RecordT]):
    """Binds a setting id to the record type stored for it.

    `update` folds a raw value posted by the UI into the user's current
    record (None on the first write) and returns the record to store.
    """

    setting_id: str
    record_type: type[RecordT]
    update: Callable[[RecordT | None, str], RecordT]


DAILY_SUMMARY_KEY: SettingKey[DailySummarySelection] = SettingKey(
    DAILY_SUMMARY_SETTING_ID,
    DailySummarySelection,
    DailySummarySelection.from_action,
)

DEFAULT_KEYS: tuple[SettingKey[Any], ...] = (DAILY_SUMMARY_KEY,)


class KeyRegistry:
    """Lookup of registered SettingKeys by setting id."""

    def __init__(self, keys: Iterable[SettingKey[Any]] | None = None) -> None:
        self._keys = {key.setting_id: key for key in (DEFAULT_KEYS if keys is None else keys)}

    def __contains__(self, setting_id: object) -> bool:
        return setting_id in self._keys

    def resolve(self, setting_id: str) -> SettingKey[Any]:
        """Return the key registered for *setting_id*.

        Raises:
            UnknownSettingError: If no key was registered under that id
        """
        try:
            return self._keys[setting_id]
        except KeyError:
            raise UnknownSettingError(
                f"no setting registered with id {setting_id!r}", setting_id
            ) from None
