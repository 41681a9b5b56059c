"""Setting store persisted to a YAML file."""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import BaseModel, ValidationError

from calsettings.panel.errors import SettingTypeError, StoreError
from calsettings.store.keys import KeyRegistry, SettingKey

logger: Final = logging.getLogger(__name__)


class YamlSettingStore:
    """SettingStore keeping every user's records in one YAML document.

    Layout::

        users:
          <user id>:
            <setting id>: {<record fields>}

    Each write reloads the file, applies the change and atomically replaces
    the file, so concurrent writers in one process never interleave.
    """

    def __init__(self, path: Path, keys: Iterable[SettingKey[Any]] | None = None) -> None:
        """Initialize the store.

        Args:
            path: YAML file to read and write (created on first write)
            keys: Settings this store accepts (default: the daily summary)
        """
        self.path = Path(path)
        self.keys = KeyRegistry(keys)
        self._lock = threading.Lock()

    def set_setting(self, user_id: str, setting_id: str, value: Any) -> None:
        """Fold *value* into the user's record and write the file.

        Raises:
            UnknownSettingError: If *setting_id* is not registered
            SettingTypeError: If *value* is not a string
            InvalidSettingValueError: If the registered update rejects *value*
            StoreError: If the file cannot be read or written
        """
        key = self.keys.resolve(setting_id)
        if not isinstance(value, str):
            raise SettingTypeError(f"value for {setting_id} must be a string", setting_id)
        with self._lock:
            data = self._load()
            user_records = self._user_records(data, user_id, create=True)
            current = self._build(key, user_records.get(setting_id))
            record = key.update(current, value)
            user_records[setting_id] = record.model_dump(mode="json")
            self._save(data)
        logger.debug("yaml store: saved %s for %s to %s", setting_id, user_id, self.path)

    def get_setting(self, user_id: str, setting_id: str) -> BaseModel | None:
        """Return the user's record for *setting_id*, or None.

        Raises:
            UnknownSettingError: If *setting_id* is not registered
            StoreError: If the file cannot be read or holds an invalid record
        """
        key = self.keys.resolve(setting_id)
        with self._lock:
            data = self._load()
        raw = self._user_records(data, user_id).get(setting_id)
        return self._build(key, raw)

    # ---- file handling ----
    def _user_records(
        self, data: dict[str, Any], user_id: str, *, create: bool = False
    ) -> dict[str, Any]:
        users = data.get("users")
        if users is None:
            users = {}
            if create:
                data["users"] = users
        elif not isinstance(users, dict):
            raise StoreError(f"'users' in setting store {self.path} is not a mapping")
        records = users.get(user_id)
        if records is None:
            records = {}
            if create:
                users[user_id] = records
        elif not isinstance(records, dict):
            raise StoreError(
                f"Records for {user_id} in setting store {self.path} are not a mapping"
            )
        return records

    def _build(self, key: SettingKey[Any], raw: Any) -> BaseModel | None:
        if raw is None:
            return None
        try:
            return key.record_type.model_validate(raw)
        except ValidationError as err:
            raise StoreError(
                f"Invalid {key.setting_id} record in {self.path}:\n{err}", err
            ) from err

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise StoreError(f"Unable to read setting store {self.path}: {exc}", exc) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StoreError(f"Setting store {self.path} is not a mapping")
        return data

    def _save(self, data: dict[str, Any]) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                yaml.safe_dump(data, fh, sort_keys=False)
            os.replace(tmp_name, self.path)
        except (OSError, yaml.YAMLError) as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreError(f"Unable to write setting store {self.path}: {exc}", exc) from exc
