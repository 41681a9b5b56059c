"""Process-local setting store."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Any, Final

from pydantic import BaseModel

from calsettings.panel.errors import SettingTypeError
from calsettings.store.keys import KeyRegistry, SettingKey

logger: Final = logging.getLogger(__name__)


class InMemorySettingStore:
    """SettingStore keeping typed records in a dict.

    Records are lost when the process exits. Suitable for tests and for
    hosts that persist settings elsewhere.
    """

    def __init__(self, keys: Iterable[SettingKey[Any]] | None = None) -> None:
        self.keys = KeyRegistry(keys)
        self._records: dict[tuple[str, str], BaseModel] = {}
        self._lock = threading.Lock()

    def set_setting(self, user_id: str, setting_id: str, value: Any) -> None:
        """Fold *value* into the user's record for *setting_id*.

        Raises:
            UnknownSettingError: If *setting_id* is not registered
            SettingTypeError: If *value* is not a string
            InvalidSettingValueError: If the registered update rejects *value*
        """
        key = self.keys.resolve(setting_id)
        if not isinstance(value, str):
            raise SettingTypeError(f"value for {setting_id} must be a string", setting_id)
        with self._lock:
            current = self._records.get((user_id, setting_id))
            self._records[(user_id, setting_id)] = key.update(current, value)
        logger.debug("memory store: saved %s for %s", setting_id, user_id)

    def get_setting(self, user_id: str, setting_id: str) -> BaseModel | None:
        """Return the user's record for *setting_id*, or None.

        Raises:
            UnknownSettingError: If *setting_id* is not registered
        """
        self.keys.resolve(setting_id)
        with self._lock:
            return self._records.get((user_id, setting_id))

    def clear(self) -> None:
        """Drop every stored record."""
        with self._lock:
            self._records.clear()
