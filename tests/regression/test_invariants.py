from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

import pytest

from src.components.settings import GroupFlags, sanitize_settings
from src.components.visibility import check_schedule, should_show
from src.domain.entities import ButtonSettings, PageContext

ALL_FLAGS = [
    GroupFlags(),
    GroupFlags(schedule_submitted=True),
    GroupFlags(visibility_submitted=True),
    GroupFlags(schedule_submitted=True, visibility_submitted=True),
]

SUBMISSIONS = [
    {},
    {"enabled": "1", "phone": "+420 123-456 (789)", "position": "nowhere"},
    {"label": "<b>Chat</b>", "default_message": "Line 1\r\nLine <i>2</i>"},
    {"active_days": ["1", "1", "8", "7"], "time_from": "7:5", "time_to": "bogus"},
    {"exclude_post_types": ["Page", "page"], "exclude_page_ids": ["3", "-1", "x3"]},
    {"exclude_special": ["404", "home", "archive"], "enabled": None},
]


@pytest.fixture
def previous() -> ButtonSettings:
    return ButtonSettings(
        enabled=True,
        phone="1",
        position="left",
        label="Old",
        default_message="Old message",
        active_days=[6],
        time_from="11:00",
        time_to="13:00",
        exclude_post_types=["post"],
        exclude_page_ids=[99],
        exclude_special=["search"],
    )


# --- Sanitizer ---
@pytest.mark.parametrize("flags", ALL_FLAGS)
@pytest.mark.parametrize("incoming", SUBMISSIONS)
def test_sanitize_is_idempotent(
    previous: ButtonSettings, incoming: dict[str, Any], flags: GroupFlags
) -> None:
    once = sanitize_settings(previous, incoming, flags)
    twice = sanitize_settings(once, incoming, flags)
    assert twice == once


@pytest.mark.parametrize("incoming", SUBMISSIONS)
def test_general_submission_leaves_other_tabs(
    previous: ButtonSettings, incoming: dict[str, Any]
) -> None:
    result = sanitize_settings(previous, incoming, GroupFlags())

    assert result.active_days == previous.active_days
    assert result.time_from == previous.time_from
    assert result.time_to == previous.time_to
    assert result.exclude_post_types == previous.exclude_post_types
    assert result.exclude_page_ids == previous.exclude_page_ids
    assert result.exclude_special == previous.exclude_special


@pytest.mark.parametrize("flags", ALL_FLAGS)
@pytest.mark.parametrize("incoming", SUBMISSIONS)
def test_sanitized_sets_have_no_duplicates(
    previous: ButtonSettings, incoming: dict[str, Any], flags: GroupFlags
) -> None:
    result = sanitize_settings(previous, incoming, flags)

    for values in (
        result.active_days,
        result.exclude_post_types,
        result.exclude_page_ids,
        result.exclude_special,
    ):
        assert len(values) == len(set(values))
    assert all(1 <= day <= 7 for day in result.active_days)
    assert all(page_id > 0 for page_id in result.exclude_page_ids)


HOSTILE_VALUES = [float("nan"), float("inf"), float("-inf"), "²", "1" * 5000, "9" * 5000]


@pytest.mark.parametrize("flags", ALL_FLAGS)
@pytest.mark.parametrize(
    "incoming",
    [
        None,
        {"active_days": object()},
        {"exclude_page_ids": {"a": 1}},
        {"phone": 4.5},
        *({"active_days": [value]} for value in HOSTILE_VALUES),
        *({"exclude_page_ids": [value]} for value in HOSTILE_VALUES),
        {"active_days": HOSTILE_VALUES, "exclude_page_ids": HOSTILE_VALUES},
    ],
)
def test_sanitize_never_raises(
    previous: ButtonSettings, incoming: dict[str, Any] | None, flags: GroupFlags
) -> None:
    result = sanitize_settings(previous, incoming, flags)
    assert isinstance(result, ButtonSettings)


@pytest.mark.parametrize("value", HOSTILE_VALUES)
def test_unconvertible_numbers_are_dropped(previous: ButtonSettings, value: object) -> None:
    flags = GroupFlags(schedule_submitted=True, visibility_submitted=True)
    result = sanitize_settings(
        previous, {"active_days": [value, "3"], "exclude_page_ids": [value, "4"]}, flags
    )

    assert result.active_days == [3]
    assert result.exclude_page_ids == [4]


# --- Engine ---
def test_empty_active_days_disable_schedule() -> None:
    settings = ButtonSettings(
        enabled=True, phone="1", active_days=[], time_from="10:00", time_to="10:01"
    )
    start = datetime(2026, 10, 19, 0, 0)
    for step in range(0, 7 * 24 * 60, 37):
        assert check_schedule(settings, start + timedelta(minutes=step)) is None


def test_special_page_precedence_over_singular() -> None:
    settings = ButtonSettings(
        enabled=True, phone="1", active_days=[], exclude_special=["front_page"]
    )
    page = PageContext(is_front_page=True, is_singular=True, post_type="page", post_id=1)

    assert should_show(settings, datetime(2026, 10, 19, 10, 0), page).show is False


@pytest.mark.parametrize("phone", ["", "1"])
@pytest.mark.parametrize("enabled", [True, False])
def test_link_present_only_when_shown(phone: str, enabled: bool) -> None:
    settings = ButtonSettings(enabled=enabled, phone=phone, active_days=[])
    verdict = should_show(settings, datetime(2026, 10, 19, 10, 0), PageContext())

    assert verdict.show is (enabled and phone != "")
    assert (verdict.link is not None) is verdict.show
