"""
Tests for Admin Settings API.

Test assertions:
- GET returns settings (fallback defaults if nothing stored)
- POST /{tab} merges one tab without wiping the others
- Unknown tabs are rejected
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.deps import get_option_store, get_rules
from src.api.routes.admin_settings import router
from src.domain.entities import ButtonSettings
from src.rules.models import Rules
from tests.conftest import MockSettingsStore


@pytest.fixture
def stored() -> ButtonSettings:
    return ButtonSettings(
        enabled=True,
        phone="420123456789",
        label="Chat",
        active_days=[1, 2],
        time_from="08:00",
        time_to="16:00",
        exclude_special=["404"],
        exclude_page_ids=[7],
    )


@pytest.fixture
def store(stored: ButtonSettings) -> MockSettingsStore:
    return MockSettingsStore(stored)


@pytest.fixture
def client(store: MockSettingsStore) -> TestClient:
    """Test client with mocked dependencies."""
    app = FastAPI()
    app.include_router(router, prefix="/api/admin/settings")
    app.dependency_overrides[get_option_store] = lambda: store
    app.dependency_overrides[get_rules] = lambda: Rules()
    return TestClient(app)


class TestGetSettings:
    def test_returns_stored(self, client: TestClient) -> None:
        response = client.get("/api/admin/settings")

        assert response.status_code == 200
        data = response.json()
        assert data["phone"] == "420123456789"
        assert data["active_days"] == [1, 2]

    def test_returns_defaults_when_empty(
        self, client: TestClient, store: MockSettingsStore
    ) -> None:
        store._settings = None

        data = client.get("/api/admin/settings").json()

        assert data["enabled"] is False
        assert data["time_from"] == "09:00"
        assert data["active_days"] == [1, 2, 3, 4, 5]


class TestSettingsPage:
    def test_known_tab(self, client: TestClient) -> None:
        data = client.get("/api/admin/settings/page", params={"tab": "schedule"}).json()

        assert data["active_tab"] == "schedule"
        assert data["status"] == "active"
        assert data["tabs"] == ["general", "messages", "schedule", "visibility"]

    def test_unknown_tab_falls_back(self, client: TestClient) -> None:
        data = client.get("/api/admin/settings/page", params={"tab": "bogus"}).json()
        assert data["active_tab"] == "general"

    def test_no_tab(self, client: TestClient) -> None:
        data = client.get("/api/admin/settings/page").json()
        assert data["active_tab"] == "general"


class TestPostTypes:
    def test_internal_types_filtered(self, client: TestClient) -> None:
        response = client.post(
            "/api/admin/settings/post-types",
            json=[
                {"name": "post", "label": "Posts"},
                {"name": "revision", "label": "Revisions"},
                {"name": "product", "label": "Products"},
            ],
        )

        assert response.status_code == 200
        assert [item["name"] for item in response.json()] == ["post", "product"]


class TestSubmitTab:
    def test_general_tab_keeps_other_groups(
        self, client: TestClient, store: MockSettingsStore
    ) -> None:
        response = client.post(
            "/api/admin/settings/general",
            json={"enabled": "1", "phone": "+1 (555) 010-0000", "position": "left"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["phone"] == "+15550100000"
        assert data["position"] == "left"
        assert data["label"] == "Chat"
        assert data["active_days"] == [1, 2]
        assert data["exclude_special"] == ["404"]
        assert store.save_count == 1

    def test_toggle_off_when_omitted(self, client: TestClient) -> None:
        data = client.post("/api/admin/settings/messages", json={"default_message": "Hi"}).json()

        assert data["enabled"] is False
        assert data["default_message"] == "Hi"

    def test_schedule_tab_with_no_days_clears_schedule(self, client: TestClient) -> None:
        data = client.post("/api/admin/settings/schedule", json={"enabled": "1"}).json()

        assert data["active_days"] == []
        assert data["time_from"] == "00:00"
        assert data["time_to"] == "23:59"
        assert data["exclude_page_ids"] == [7]

    def test_visibility_tab(self, client: TestClient) -> None:
        data = client.post(
            "/api/admin/settings/visibility",
            json={
                "enabled": "1",
                "exclude_special": ["search", "nope"],
                "exclude_page_ids": ["3", "0"],
            },
        ).json()

        assert data["exclude_special"] == ["search"]
        assert data["exclude_page_ids"] == [3]
        assert data["exclude_post_types"] == []
        assert data["active_days"] == [1, 2]

    def test_non_finite_page_id_dropped(self, client: TestClient) -> None:
        # Raw body: JSON encoders refuse NaN, the request parser accepts it
        response = client.post(
            "/api/admin/settings/visibility",
            content=b'{"enabled": "1", "exclude_page_ids": [NaN, Infinity, 5]}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 200
        assert response.json()["exclude_page_ids"] == [5]

    def test_non_ascii_digit_weekday_dropped(self, client: TestClient) -> None:
        response = client.post(
            "/api/admin/settings/schedule", json={"active_days": ["²", "3"]}
        )

        assert response.status_code == 200
        assert response.json()["active_days"] == [3]

    def test_empty_body(self, client: TestClient) -> None:
        response = client.post("/api/admin/settings/general")

        assert response.status_code == 200
        assert response.json()["enabled"] is False

    def test_unknown_tab_rejected(self, client: TestClient, store: MockSettingsStore) -> None:
        response = client.post("/api/admin/settings/billing", json={"enabled": "1"})

        assert response.status_code == 404
        assert store.save_count == 0
