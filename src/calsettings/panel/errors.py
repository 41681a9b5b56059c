"""Exception classes raised by settings and setting stores.

Every failure a setting reports to the panel framework derives from
SettingError, so callers can catch one type and still tell validation
problems apart from persistence or upstream lookups.
"""

from __future__ import annotations

from typing import Optional


class SettingError(Exception):
    """Base class for errors raised while reading, writing or rendering a setting."""

    def __init__(self, message: str, setting_id: str = "") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            setting_id: Identifier of the setting involved, if known
        """
        super().__init__(message)
        self.message: str = message
        self.setting_id: str = setting_id


class SettingTypeError(SettingError, TypeError):
    """Raised when a value or stored record has the wrong Python type."""

    pass


class InvalidSettingValueError(SettingError, ValueError):
    """Raised when a string value does not follow the setting's wire format."""

    def __init__(self, value: str, message: str, setting_id: str = "") -> None:
        super().__init__(f"{message}: {value!r}", setting_id)
        self.value = value


class UnknownSettingError(SettingError, KeyError):
    """Raised when a store is asked about a setting id nobody registered."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class StoreError(SettingError):
    """Raised when a bundled store cannot read or write its backing data."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize with persistence error details.

        Args:
            message: Description of the persistence error
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class TimezoneLookupError(SettingError):
    """Raised when the calendar timezone for a user cannot be loaded."""

    def __init__(
        self,
        message: str,
        setting_id: str = "",
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, setting_id)
        self.original_error = original_error
