import pytest

from calsettings.dailysummary import DailySummarySetting
from calsettings.panel.protocols import MockTimezoneProvider
from calsettings.store import InMemorySettingStore


@pytest.fixture
def store() -> InMemorySettingStore:
    return InMemorySettingStore()


@pytest.fixture
def timezone_provider() -> MockTimezoneProvider:
    return MockTimezoneProvider("Europe/London")


@pytest.fixture
def setting(
    store: InMemorySettingStore, timezone_provider: MockTimezoneProvider
) -> DailySummarySetting:
    return DailySummarySetting(store, timezone_provider)
