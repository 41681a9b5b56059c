# src/calsettings/panel/protocols.py
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from calsettings.panel.models import PanelAttachment


@runtime_checkable
class SettingStore(Protocol):
    """Protocol defining the persistence contract settings rely on.

    Values are written as raw strings coming from the UI and read back as
    whatever record the store keeps for that setting. A store returns None
    for a (user, setting) pair that was never written.
    """

    def set_setting(self, user_id: str, setting_id: str, value: Any) -> None:
        """Persist a raw value for one user's setting.

        Args:
            user_id: Owner of the setting
            setting_id: Identifier of the setting
            value: Raw value posted by the UI
        """
        ...

    def get_setting(self, user_id: str, setting_id: str) -> Any:
        """Load the current record for one user's setting.

        Args:
            user_id: Owner of the setting
            setting_id: Identifier of the setting

        Returns:
            The stored record, or None when nothing was saved yet
        """
        ...


@runtime_checkable
class TimezoneProvider(Protocol):
    """Protocol for looking up the timezone currently set on a user's calendar."""

    def get_timezone(self, user_id: str) -> str:
        """Return the user's calendar timezone name.

        Args:
            user_id: User whose calendar is queried

        Returns:
            Timezone name as reported by the calendar provider
        """
        ...


@runtime_checkable
class Setting(Protocol):
    """Protocol every setting shown in a settings panel implements."""

    def set(self, user_id: str, value: Any) -> None: ...

    def get(self, user_id: str) -> Any: ...

    def get_id(self) -> str: ...

    def get_title(self) -> str: ...

    def get_description(self) -> str: ...

    def get_dependency(self) -> str: ...

    def render(
        self, user_id: str, action_endpoint: str, disabled: bool
    ) -> PanelAttachment: ...

    def is_disabled(self, foreign_value: Any) -> bool: ...


class MockSettingStore:
    """Mock implementation of SettingStore for testing.

    Writes are recorded and kept verbatim, so reading a setting back after a
    write returns the raw value, the way a heterogeneous store would.
    """

    def __init__(self, values: dict[tuple[str, str], Any] | None = None):
        self.values: dict[tuple[str, str], Any] = dict(values or {})
        self.set_calls: list[dict[str, Any]] = []
        self.get_calls: list[dict[str, str]] = []

    def set_setting(self, user_id: str, setting_id: str, value: Any) -> None:
        """Record the write and keep the value."""
        self.set_calls.append(
            {"user_id": user_id, "setting_id": setting_id, "value": value}
        )
        self.values[(user_id, setting_id)] = value

    def get_setting(self, user_id: str, setting_id: str) -> Any:
        """Record the read and return the kept value, or None."""
        self.get_calls.append({"user_id": user_id, "setting_id": setting_id})
        return self.values.get((user_id, setting_id))

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.set_calls = []
        self.get_calls = []


class ErrorSimulatingSettingStore(MockSettingStore):
    """Mock store that raises from the configured methods."""

    def __init__(
        self,
        fail_on_methods: list[str] | None = None,
        error: Exception | None = None,
        values: dict[tuple[str, str], Any] | None = None,
    ):
        super().__init__(values)
        self.fail_on_methods = fail_on_methods or []
        self.error = error or RuntimeError("Simulated store failure")

    def set_setting(self, user_id: str, setting_id: str, value: Any) -> None:
        if "set_setting" in self.fail_on_methods:
            raise self.error
        super().set_setting(user_id, setting_id, value)

    def get_setting(self, user_id: str, setting_id: str) -> Any:
        if "get_setting" in self.fail_on_methods:
            raise self.error
        return super().get_setting(user_id, setting_id)


class MockTimezoneProvider:
    """Mock implementation of TimezoneProvider for testing."""

    def __init__(self, timezone: str = "UTC"):
        self.timezone = timezone
        self.lookup_calls: list[str] = []

    def get_timezone(self, user_id: str) -> str:
        """Record the lookup and return the configured timezone."""
        self.lookup_calls.append(user_id)
        return self.timezone

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.lookup_calls = []


class ErrorSimulatingTimezoneProvider(MockTimezoneProvider):
    """Mock provider whose lookups always fail."""

    def __init__(self, error: Exception | None = None):
        super().__init__()
        self.error = error or ConnectionError("Simulated calendar outage")

    def get_timezone(self, user_id: str) -> str:
        self.lookup_calls.append(user_id)
        raise self.error


# Helper functions for test assertions
def assert_store_written(
    store: MockSettingStore, user_id: str, setting_id: str, value: Any
) -> None:
    """Assert that a mock store received a specific write.

    Args:
        store: The mock store to check
        user_id: Expected user id
        setting_id: Expected setting id
        value: Expected raw value
    """
    expected = {"user_id": user_id, "setting_id": setting_id, "value": value}
    assert expected in store.set_calls, (
        f"Store was not written with {expected!r}; writes: {store.set_calls!r}"
    )


def assert_store_untouched(store: MockSettingStore) -> None:
    """Assert that a mock store never received a write."""
    assert not store.set_calls, f"Unexpected store writes: {store.set_calls!r}"
