"""
Admin Settings API.

Provides the settings read endpoint and one submission endpoint per tab.

Key behaviors:
- GET returns settings (fallback defaults if nothing stored)
- POST /{tab} merges that tab's fields into the stored record
- The schedule and visibility tabs add their sentinel, so an empty checkbox
  group in those tabs clears the stored values
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from pydantic import BaseModel

from src.api.deps import get_option_store, get_rules
from src.components.admin import (
    ButtonStatus,
    PostTypeOption,
    button_status,
    resolve_tab,
    selectable_post_types,
)
from src.components.settings import (
    SCHEDULE_SENTINEL,
    VISIBILITY_SENTINEL,
    GetSettingsInput,
    SettingsStorePort,
    SubmitSettingsInput,
    run_get,
    run_submit,
)
from src.domain.entities import ButtonSettings
from src.rules.models import Rules

router = APIRouter()

_TAB_SENTINELS = {
    "schedule": SCHEDULE_SENTINEL,
    "visibility": VISIBILITY_SENTINEL,
}


# --- Request/Response Models ---


class SettingsPageResponse(BaseModel):
    """State needed to draw the settings page."""

    active_tab: str
    tabs: list[str]
    status: ButtonStatus
    settings: ButtonSettings


class PostTypeItem(BaseModel):
    """Content type as reported by the host."""

    name: str
    label: str


# --- Endpoints ---


@router.get(
    "",
    response_model=ButtonSettings,
    summary="Get chat button settings",
    description="Get current settings. Returns defaults if not configured.",
)
def get_settings(
    store: SettingsStorePort = Depends(get_option_store),
) -> ButtonSettings:
    """Get current settings, or defaults if nothing is stored."""
    return run_get(GetSettingsInput(), store=store).settings


@router.get(
    "/page",
    response_model=SettingsPageResponse,
    summary="Get settings page state",
)
def get_settings_page(
    tab: str | None = Query(default=None),
    store: SettingsStorePort = Depends(get_option_store),
    rules: Rules = Depends(get_rules),
) -> SettingsPageResponse:
    """
    Resolve the requested tab and report the status badge.

    Unknown tabs fall back to the default tab.
    """
    settings = run_get(GetSettingsInput(), store=store).settings
    return SettingsPageResponse(
        active_tab=resolve_tab(tab, rules.admin.tabs, rules.admin.default_tab),
        tabs=rules.admin.tabs,
        status=button_status(settings),
        settings=settings,
    )


@router.post(
    "/post-types",
    response_model=list[PostTypeItem],
    summary="Filter post types offered for exclusion",
)
def filter_post_types(
    available: list[PostTypeItem],
    rules: Rules = Depends(get_rules),
) -> list[PostTypeItem]:
    """Drop host-internal types from the host's post type list."""
    options = [PostTypeOption(name=item.name, label=item.label) for item in available]
    kept = selectable_post_types(options, rules.admin.internal_post_types)
    return [PostTypeItem(name=option.name, label=option.label) for option in kept]


@router.post(
    "/{tab}",
    response_model=ButtonSettings,
    summary="Submit one settings tab",
    responses={404: {"description": "Unknown tab"}},
)
def submit_tab(
    tab: str,
    payload: dict[str, Any] | None = Body(default=None),
    store: SettingsStorePort = Depends(get_option_store),
    rules: Rules = Depends(get_rules),
) -> ButtonSettings:
    """
    Submit the fields of one tab.

    Fields not in the payload keep their stored value, except the enabled
    toggle, which is off unless submitted.
    """
    if tab not in rules.admin.tabs:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown settings tab: {tab}",
        )

    form = dict(payload or {})
    sentinel = _TAB_SENTINELS.get(tab)
    if sentinel is not None:
        form[sentinel] = "1"

    return run_submit(SubmitSettingsInput(payload=form), store=store).settings
