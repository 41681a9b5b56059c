"""Setting stores keyed by (user id, setting id)."""

from calsettings.store.keys import DAILY_SUMMARY_KEY, DEFAULT_KEYS, KeyRegistry, SettingKey
from calsettings.store.memory import InMemorySettingStore
from calsettings.store.yaml_store import YamlSettingStore

__all__ = [
    "DAILY_SUMMARY_KEY",
    "DEFAULT_KEYS",
    "InMemorySettingStore",
    "KeyRegistry",
    "SettingKey",
    "YamlSettingStore",
]
