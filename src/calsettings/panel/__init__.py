"""Settings-panel contracts.

This package provides:
- Setting, SettingStore, TimezoneProvider: protocols the panel framework and
  settings agree on
- PanelAttachment and friends: the rendered form of a setting
- SettingError hierarchy: failures reported back to the framework
"""

from calsettings.panel.errors import (
    InvalidSettingValueError,
    SettingError,
    SettingTypeError,
    StoreError,
    TimezoneLookupError,
    UnknownSettingError,
)
from calsettings.panel.models import (
    ActionIntegration,
    ActionOption,
    PanelAction,
    PanelAttachment,
)
from calsettings.panel.protocols import Setting, SettingStore, TimezoneProvider

__all__ = [
    "ActionIntegration",
    "ActionOption",
    "InvalidSettingValueError",
    "PanelAction",
    "PanelAttachment",
    "Setting",
    "SettingError",
    "SettingStore",
    "SettingTypeError",
    "StoreError",
    "TimezoneLookupError",
    "TimezoneProvider",
    "UnknownSettingError",
]
