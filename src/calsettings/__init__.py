"""Settings-panel components for the calendar daily summary."""

__version__ = "0.1.0"

from calsettings.dailysummary import DailySummarySelection, DailySummarySetting
from calsettings.panel import PanelAction, PanelAttachment, SettingError

__all__ = [
    "DailySummarySelection",
    "DailySummarySetting",
    "PanelAction",
    "PanelAttachment",
    "SettingError",
]
