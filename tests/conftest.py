from datetime import datetime

import pytest

from src.domain.entities import ButtonSettings, PageContext


class MockSettingsStore:
    """In-memory settings store for testing."""

    def __init__(self, initial: ButtonSettings | None = None) -> None:
        self._settings = initial
        self.save_count = 0

    def load(self) -> ButtonSettings | None:
        return self._settings

    def save(self, settings: ButtonSettings) -> None:
        self._settings = settings
        self.save_count += 1


@pytest.fixture
def empty_store() -> MockSettingsStore:
    """Store with nothing saved yet (first run)."""
    return MockSettingsStore()


@pytest.fixture
def live_settings() -> ButtonSettings:
    """Enabled, weekday office-hours settings."""
    return ButtonSettings(
        enabled=True,
        phone="420123456789",
        active_days=[1, 2, 3, 4, 5],
        time_from="09:00",
        time_to="17:00",
    )


@pytest.fixture
def monday_10am() -> datetime:
    # 2026-10-19 is a Monday
    return datetime(2026, 10, 19, 10, 0)


@pytest.fixture
def saturday_10am() -> datetime:
    return datetime(2026, 10, 24, 10, 0)


@pytest.fixture
def plain_page() -> PageContext:
    """A listing page with no special classification."""
    return PageContext()
